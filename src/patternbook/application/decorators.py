"""
Application-layer decorator for pattern examples.

Each pattern module decorates its ``demo`` function with
``@pattern_example``. Importing the module records the example in the
application-level registry; infrastructure discovery later copies the
recorded examples into the process-wide PatternRegistry.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple, TypeVar

from patternbook.domain.base.exceptions import DuplicatePatternError
from patternbook.domain.catalog import PatternCategory, PatternEntry

DemoFunction = Callable[[], List[str]]
TDemo = TypeVar("TDemo", bound=DemoFunction)

_example_registry: Dict[str, "PatternRegistration"] = {}
_registry_lock = threading.Lock()


@dataclass(frozen=True)
class PatternRegistration:
    """A catalog entry together with the objects that implement it."""

    entry: PatternEntry
    demo: DemoFunction
    participants: Tuple[Any, ...] = field(default=())

    @property
    def slug(self) -> str:
        return self.entry.slug


def _qualified_name(obj: Any) -> str:
    return f"{obj.__module__}.{obj.__qualname__}"


def pattern_example(name: str,
                    category: PatternCategory,
                    intent: str,
                    aliases: Sequence[str] = (),
                    participants: Iterable[Any] = (),
                    related: Sequence[str] = ()) -> Callable[[TDemo], TDemo]:
    """
    Mark a demo function as the runnable illustration of a pattern.

    Usage:
        @pattern_example(
            name="Singleton",
            category=PatternCategory.CREATIONAL,
            intent="Ensure a class has only one instance.",
            participants=(SingletonMeta, AppSettings),
        )
        def demo() -> List[str]:
            ...

    Args:
        name: Display name of the pattern
        category: GoF classification (or MODERN)
        intent: One-sentence summary
        aliases: Other names the pattern is known by
        participants: Classes/functions whose source illustrates the pattern
        related: Slugs of related patterns

    Returns:
        Decorator returning the demo function unchanged

    Raises:
        DuplicatePatternError: If another module already registered the slug
    """
    participant_objects = tuple(participants)

    def decorator(demo: TDemo) -> TDemo:
        entry = PatternEntry(
            name=name,
            category=category,
            intent=intent,
            aliases=tuple(aliases),
            participants=tuple(_qualified_name(p) for p in participant_objects),
            module=demo.__module__,
            related=tuple(related),
        )
        registration = PatternRegistration(entry=entry, demo=demo, participants=participant_objects)

        with _registry_lock:
            existing = _example_registry.get(entry.slug)
            if existing is not None and existing.entry.module != entry.module:
                raise DuplicatePatternError(entry.slug, existing.entry.module, entry.module)
            # re-importing the same module replaces its own registration
            _example_registry[entry.slug] = registration

        demo._pattern_entry = entry
        return demo

    return decorator


def get_registered_pattern_examples() -> Dict[str, PatternRegistration]:
    """Get all pattern examples recorded so far, keyed by slug."""
    with _registry_lock:
        return dict(_example_registry)
