"""Application bootstrap - wires configuration, logging, discovery and services."""
from __future__ import annotations

from typing import Any, Dict, Optional

from patternbook.application.services.catalog_service import CatalogService
from patternbook.config.schemas import AppConfig, LogLevel
from patternbook.infrastructure.logging.logger import get_logger, setup_logging
from patternbook.infrastructure.registry.pattern_registry import PatternRegistry


class Application:
    """Application context; heavy initialization is deferred until first use."""

    def __init__(self, config_path: Optional[str] = None,
                 log_level: Optional[str] = None,
                 registry: Optional[PatternRegistry] = None) -> None:
        self.config_path = config_path
        self._log_level = log_level
        self._registry = registry
        self._initialized = False
        self._config_manager = None
        self._catalog_service: Optional[CatalogService] = None
        self.logger = get_logger(__name__)

    def _ensure_config_manager(self):
        if self._config_manager is None:
            from patternbook.config.manager import get_config_manager

            self._config_manager = get_config_manager(self.config_path)

    @property
    def config(self) -> AppConfig:
        self._ensure_config_manager()
        return self._config_manager.get_typed(AppConfig)

    def initialize(self) -> bool:
        """
        Initialize the application.

        Raises:
            ConfigurationError: If the configuration is invalid
            DiscoveryError: If a configured package cannot be imported
        """
        if self._initialized:
            return True

        app_config = self.config
        logging_config = app_config.logging
        if self._log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(self._log_level.upper())})
        setup_logging(logging_config)

        from patternbook.infrastructure.discovery.pattern_discovery import PatternDiscoveryService

        registry = self._registry or PatternRegistry.get_instance()
        discovery = PatternDiscoveryService(registry)
        count = discovery.discover_and_register(app_config.catalog.packages)
        if discovery.failed_modules:
            self.logger.warning(f"Skipped {len(discovery.failed_modules)} modules that failed to import")

        self._registry = registry
        self._catalog_service = CatalogService(registry)
        self._initialized = True
        self.logger.info(f"Application initialized with {count} patterns")
        return True

    @property
    def catalog_service(self) -> CatalogService:
        if not self._initialized:
            self.initialize()
        return self._catalog_service

    def create_renderer(self):
        from patternbook.infrastructure.rendering.markdown_renderer import MarkdownCatalogRenderer

        return MarkdownCatalogRenderer(get_logger("patternbook.rendering"))

    def render_readme(self) -> str:
        """Render the whole catalog as Markdown."""
        service = self.catalog_service
        details = [service.get_pattern(p.slug) for p in service.list_patterns()]
        return self.create_renderer().render(details, title=self.config.catalog.title)

    def health_check(self) -> Dict[str, Any]:
        return {
            "initialized": self._initialized,
            "patterns": self._registry.count() if self._registry else 0,
        }


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize an application."""
    app = Application(config_path, log_level=log_level)
    app.initialize()
    return app
