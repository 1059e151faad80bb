"""Configuration management for the application."""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from patternbook.config.loader import ConfigurationLoader
from patternbook.config.schemas import AppConfig, CatalogConfig, LoggingConfig, OutputConfig
from patternbook.domain.base.exceptions import ConfigurationError

T = TypeVar("T")


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Sources, lowest precedence first:
    - schema defaults
    - configuration file (explicit path or PATTERNBOOK_CONFIG)
    - PATTERNBOOK_* environment variables

    Configuration is loaded lazily on first access.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = ConfigurationLoader()
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = self._loader.load_configuration(self._config_file)
        config_data = self._loader.apply_environment_overrides(config_data)

        try:
            return AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields)

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        type_mapping = {
            AppConfig: None,
            LoggingConfig: "logging",
            CatalogConfig: "catalog",
            OutputConfig: "output",
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")

        attr_name = type_mapping[config_type]
        if attr_name is None:
            return self.app_config
        return getattr(self.app_config, attr_name)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.app_config.model_dump(mode="json")
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def reload(self) -> None:
        """Drop cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """
    Get a configuration manager.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Configuration manager instance
    """
    return ConfigurationManager(config_path)
