"""Structured logging for patternbook built on structlog over stdlib logging."""
import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from patternbook.config.schemas.logging_schema import LogDestination, LoggingConfig

_configure_lock = threading.Lock()
_structlog_configured = False

# Processors shared by structlog loggers and foreign (plain stdlib) records
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    global _structlog_configured
    if _structlog_configured:
        return
    with _configure_lock:
        if _structlog_configured:
            return
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *_SHARED_PROCESSORS,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _structlog_configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for a module.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        structlog logger backed by the stdlib logger of the same name
    """
    _configure_structlog()
    return structlog.get_logger(name)


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    formatter = _build_formatter(config)

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in (LogDestination.CONSOLE, LogDestination.BOTH):
        # stderr, so command output on stdout stays machine readable
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Replaces any handlers on the root logger with the ones described by the
    configuration.

    Args:
        config: Logging configuration. Defaults are used when omitted.

    Returns:
        Configured structlog logger for the application.
    """
    config = config or LoggingConfig()
    _configure_structlog()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(config):
        root_logger.addHandler(handler)

    logger = get_logger("patternbook")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
    )
    return logger
