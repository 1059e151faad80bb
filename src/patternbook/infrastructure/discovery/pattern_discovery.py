"""
Pattern example discovery.

Imports every module below the configured packages so that their
``@pattern_example`` decorators run, then registers the recorded examples
with the PatternRegistry.
"""
import importlib
import pkgutil
import time
from typing import Dict, Iterable, List, Optional

from patternbook.application.decorators import get_registered_pattern_examples
from patternbook.infrastructure.exceptions import DiscoveryError
from patternbook.infrastructure.logging.logger import get_logger
from patternbook.infrastructure.registry.pattern_registry import PatternRegistry

logger = get_logger(__name__)

DEFAULT_PACKAGES = ("patternbook.patterns",)


class PatternDiscoveryService:
    """Infrastructure service for discovering and registering pattern examples."""

    def __init__(self, registry: Optional[PatternRegistry] = None):
        self.registry = registry or PatternRegistry.get_instance()
        self.failed_modules: Dict[str, str] = {}

    def discover_and_register(self, packages: Iterable[str] = DEFAULT_PACKAGES) -> int:
        """
        Discover all pattern examples and register them.

        Args:
            packages: Dotted names of the packages to scan

        Returns:
            Number of registrations in the registry afterwards

        Raises:
            DiscoveryError: If a package itself cannot be imported
        """
        start_time = time.time()
        scanned: List[str] = []
        for package in packages:
            scanned.extend(self._discover_modules(package))

        discovered = get_registered_pattern_examples()
        for slug, registration in discovered.items():
            module = registration.entry.module
            if not any(module == p or module.startswith(p + ".") for p in packages):
                continue
            self.registry.register(registration)

        elapsed = time.time() - start_time
        logger.info(
            f"Pattern discovery complete: {self.registry.count()} patterns "
            f"from {len(scanned)} modules (took {elapsed:.3f}s)"
        )
        return self.registry.count()

    def _discover_modules(self, base_package: str) -> List[str]:
        """Import all modules in a package, recording the ones that fail."""
        try:
            package = importlib.import_module(base_package)
        except ImportError as e:
            logger.error(f"Pattern discovery failed for {base_package}: {e}")
            raise DiscoveryError(f"Cannot import package {base_package}", details=str(e))

        search_path = getattr(package, "__path__", None)
        if search_path is None:
            # a plain module, nothing to walk
            return [base_package]

        imported = []
        for module_info in pkgutil.walk_packages(search_path, f"{base_package}."):
            try:
                importlib.import_module(module_info.name)
                imported.append(module_info.name)
                logger.debug(f"Imported module: {module_info.name}")
            except Exception as e:
                logger.warning(f"Failed to import module {module_info.name}: {e}")
                self.failed_modules[module_info.name] = str(e)
        return imported
