"""Base domain package."""
from patternbook.domain.base.exceptions import (
    DomainException,
    ValidationError,
    PatternNotFoundError,
    DuplicatePatternError,
    InvalidStateTransitionError,
    ConfigurationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "PatternNotFoundError",
    "DuplicatePatternError",
    "InvalidStateTransitionError",
    "ConfigurationError",
]
