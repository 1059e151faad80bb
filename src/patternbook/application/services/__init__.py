"""Application services."""
from patternbook.application.services.catalog_service import CatalogService

__all__ = ["CatalogService"]
