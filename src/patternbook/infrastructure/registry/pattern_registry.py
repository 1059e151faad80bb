"""Pattern Registry - process-wide lookup of registered pattern examples.

Entries are keyed by slug; lookups also accept the display name or any alias.
"""
import threading
from typing import Dict, List, Optional

from patternbook.application.decorators import PatternRegistration
from patternbook.domain.base.exceptions import DuplicatePatternError, PatternNotFoundError
from patternbook.domain.catalog import PatternCategory
from patternbook.infrastructure.logging.logger import get_logger


class PatternRegistry:
    """
    Registry of pattern examples.

    Thread-safe singleton implementation. Tests may create private instances
    directly with ``PatternRegistry()``.
    """

    _instance: Optional['PatternRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize pattern registry."""
        self._registrations: Dict[str, PatternRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'PatternRegistry':
        """Get singleton instance of pattern registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the singleton instance (used by tests)."""
        with cls._lock:
            cls._instance = None

    def register(self, registration: PatternRegistration) -> None:
        """
        Register a pattern example.

        Registering the same module twice is a no-op.

        Args:
            registration: Example to register

        Raises:
            DuplicatePatternError: If a different module already owns the slug
        """
        slug = registration.slug
        with self._registration_lock:
            existing = self._registrations.get(slug)
            if existing is not None:
                if existing.entry.module != registration.entry.module:
                    raise DuplicatePatternError(slug, existing.entry.module, registration.entry.module)
                self._logger.debug(f"Pattern already registered: {slug}")
                return

            self._registrations[slug] = registration
            self._logger.debug(f"Registered pattern: {slug} ({registration.entry.category.value})")

    def get(self, name: str) -> PatternRegistration:
        """
        Look up a registration by slug, display name or alias.

        Raises:
            PatternNotFoundError: If nothing matches
        """
        with self._registration_lock:
            registration = self._registrations.get(name.strip().lower())
            if registration is not None:
                return registration

            # aliases may be shared (Adapter and Decorator are both "Wrapper"); first in catalog order wins
            for candidate in self.list_registrations():
                if candidate.entry.matches(name):
                    return candidate

        raise PatternNotFoundError(name)

    def is_registered(self, name: str) -> bool:
        """Check if a pattern is registered under a slug, name or alias."""
        try:
            self.get(name)
            return True
        except PatternNotFoundError:
            return False

    def list_registrations(self, category: Optional[PatternCategory] = None) -> List[PatternRegistration]:
        """Registrations in catalog order (category, then name)."""
        order = {c: i for i, c in enumerate(PatternCategory.ordered())}
        with self._registration_lock:
            registrations = list(self._registrations.values())

        if category is not None:
            registrations = [r for r in registrations if r.entry.category == category]
        return sorted(registrations, key=lambda r: (order[r.entry.category], r.entry.name.lower()))

    def count(self) -> int:
        with self._registration_lock:
            return len(self._registrations)

    def clear_registrations(self) -> None:
        """Remove every registration."""
        with self._registration_lock:
            self._registrations.clear()
            self._logger.debug("Cleared pattern registrations")
