from typing import Optional, Any


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class DiscoveryError(InfrastructureError):
    """Raised when pattern discovery cannot scan a package."""
    pass


class RenderingError(InfrastructureError):
    """Raised when the catalog cannot be rendered."""
    pass
