"""patternbook - an executable catalog of classic and modern design patterns."""

__version__ = "1.0.0"
