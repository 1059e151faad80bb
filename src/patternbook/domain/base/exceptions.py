# src/patternbook/domain/base/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern is not in the catalog."""
    def __init__(self, name: str):
        super().__init__(f"Pattern '{name}' not found")
        self.name = name


class DuplicatePatternError(DomainException):
    """Raised when two examples claim the same pattern slug."""
    def __init__(self, slug: str, existing_module: str, new_module: str):
        super().__init__(
            f"Pattern '{slug}' already registered by {existing_module}, "
            f"cannot register again from {new_module}"
        )
        self.slug = slug
        self.existing_module = existing_module
        self.new_module = new_module


class InvalidStateTransitionError(DomainException):
    """Raised when attempting an invalid state transition."""
    def __init__(self, current_state: str, attempted_state: str):
        super().__init__(
            f"Cannot transition from {current_state} to {attempted_state}"
        )
        self.current_state = current_state
        self.attempted_state = attempted_state


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
