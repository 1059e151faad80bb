"""Registry infrastructure."""
from patternbook.infrastructure.registry.pattern_registry import PatternRegistry

__all__ = ["PatternRegistry"]
