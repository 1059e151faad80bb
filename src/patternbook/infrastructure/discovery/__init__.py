"""Pattern discovery infrastructure."""
from patternbook.infrastructure.discovery.pattern_discovery import PatternDiscoveryService

__all__ = ["PatternDiscoveryService"]
