"""Tests for logging setup."""
import logging
from logging.handlers import RotatingFileHandler

import structlog

from patternbook.config.schemas import LogDestination, LoggingConfig, LogLevel
from patternbook.infrastructure.logging.logger import get_logger, setup_logging


class TestLogging:

    def test_console_destination(self):
        setup_logging(LoggingConfig(level=LogLevel.DEBUG))
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_file_destination(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        config = LoggingConfig(destination=LogDestination.FILE, file={"path": str(log_file)})
        setup_logging(config)

        root = logging.getLogger()
        assert [type(h) for h in root.handlers] == [RotatingFileHandler]

        get_logger("patternbook.test").warning("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()

    def test_both_destinations(self, tmp_path):
        config = LoggingConfig(destination="both", file={"path": str(tmp_path / "app.log")})
        setup_logging(config)
        assert len(logging.getLogger().handlers) == 2

    def test_json_lines(self, tmp_path):
        log_file = tmp_path / "app.log"
        config = LoggingConfig(destination="file", json_format=True, file={"path": str(log_file)})
        setup_logging(config)

        get_logger("patternbook.test").error("structured", pattern="observer")
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        assert '"pattern": "observer"' in line
        assert '"event": "structured"' in line

    def test_setup_replaces_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_level_names_are_normalized(self):
        assert LoggingConfig(level="debug").level == LogLevel.DEBUG
