"""Configuration loading from files and environment variables."""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from patternbook.config.utils.env_expansion import expand_config_env_vars
from patternbook.domain.base.exceptions import ConfigurationError

CONFIG_FILE_ENV = "PATTERNBOOK_CONFIG"

# Environment variable -> dotted configuration key
ENV_OVERRIDES = {
    "PATTERNBOOK_LOG_LEVEL": "logging.level",
    "PATTERNBOOK_LOG_DESTINATION": "logging.destination",
    "PATTERNBOOK_LOG_FILE": "logging.file.path",
    "PATTERNBOOK_OUTPUT_FORMAT": "output.format",
}


class ConfigurationLoader:
    """Loads raw configuration dictionaries from JSON or YAML files."""

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            config_file: Path of the file to read

        Returns:
            Raw configuration with environment variables expanded

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
            raise ConfigurationError(f"Failed to load configuration file {config_file}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping, got {type(data).__name__}"
            )
        return expand_config_env_vars(data)

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the given file, or the file named by PATTERNBOOK_CONFIG."""
        config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        if config_file:
            return self.load_from_file(config_file)
        return {}

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply PATTERNBOOK_* environment variables on top of file configuration."""
        result = dict(config_data)
        for env_var, dotted_key in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None or value == "":
                continue
            _set_nested(result, dotted_key.split("."), value)
        return result


def _set_nested(data: Dict[str, Any], keys: list, value: Any) -> None:
    current = data
    for key in keys[:-1]:
        child = current.get(key)
        # copy so the caller's nested dictionaries are never mutated
        child = dict(child) if isinstance(child, dict) else {}
        current[key] = child
        current = child
    current[keys[-1]] = value
