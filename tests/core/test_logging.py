"""Tests for logging configuration."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from browserware.core.logging_config import TRACE, setup_logging, trace


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Keep handler changes from leaking into other tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (RotatingFileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestLoggingSetup:
    """Tests for logging setup."""

    def test_setup_configures_root_logger(self, temp_dir):
        """setup_logging sets DEBUG level and a rotating file handler."""
        setup_logging(log_file=temp_dir / "debug.log")

        root = logging.getLogger()
        handler_types = [type(h).__name__ for h in root.handlers]

        assert root.level == logging.DEBUG
        assert handler_types == ["RotatingFileHandler"]

    def test_creates_log_directory(self, temp_dir):
        """The log directory is created if missing."""
        log_file = temp_dir / "logs" / "debug.log"
        setup_logging(log_file=log_file)

        assert log_file.parent.is_dir()

    def test_debug_mode_adds_console_handler(self, temp_dir):
        """Debug mode adds console handler and enables TRACE."""
        setup_logging(debug_mode=True, log_file=temp_dir / "debug.log")

        root = logging.getLogger()
        handler_types = [type(h).__name__ for h in root.handlers]

        assert "StreamHandler" in handler_types
        assert root.level == TRACE

    def test_writes_to_log_file(self, temp_dir):
        """Records reach the debug log file."""
        log_file = temp_dir / "debug.log"
        setup_logging(log_file=log_file)

        logging.getLogger("browserware.test").info("Detected %d browsers", 3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "browserware.test - INFO - Detected 3 browsers" in content


class TestTrace:
    """Tests for the TRACE level."""

    def test_trace_level_name(self):
        """TRACE is registered below DEBUG."""
        assert TRACE < logging.DEBUG
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_trace_emits_when_enabled(self, caplog):
        """trace() logs at TRACE when the level is enabled."""
        logger = logging.getLogger("browserware.trace_test")
        with caplog.at_level(TRACE, logger="browserware.trace_test"):
            trace(logger, "Skipping %s", "helper")

        assert [r.levelno for r in caplog.records] == [TRACE]
        assert caplog.records[0].getMessage() == "Skipping helper"

    def test_trace_suppressed_at_debug(self, caplog):
        """trace() emits nothing when only DEBUG is enabled."""
        logger = logging.getLogger("browserware.trace_test")
        with caplog.at_level(logging.DEBUG, logger="browserware.trace_test"):
            trace(logger, "Skipping %s", "helper")

        assert caplog.records == []
