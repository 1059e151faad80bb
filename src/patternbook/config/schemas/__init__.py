"""Configuration schemas."""
from .app_schema import AppConfig, CatalogConfig, OutputConfig, OutputFormat
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "CatalogConfig",
    "OutputConfig",
    "OutputFormat",
    "LogDestination",
    "LogFileConfig",
    "LoggingConfig",
    "LogLevel",
]
