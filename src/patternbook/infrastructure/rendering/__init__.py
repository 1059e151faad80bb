"""Catalog rendering infrastructure."""
from patternbook.infrastructure.rendering.markdown_renderer import MarkdownCatalogRenderer

__all__ = ["MarkdownCatalogRenderer"]
