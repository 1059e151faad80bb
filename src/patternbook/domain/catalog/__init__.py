"""Catalog domain - pattern entries and demo results."""
from patternbook.domain.catalog.value_objects import PatternCategory, slugify
from patternbook.domain.catalog.pattern_entry import PatternEntry, DemoResult

__all__ = ["PatternCategory", "PatternEntry", "DemoResult", "slugify"]
