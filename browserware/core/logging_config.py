"""Logging configuration for browserware."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .constants import (
    DEBUG_LOG_FILE,
    DEBUG_LOG_MAX_BYTES,
    DEBUG_LOG_BACKUP_COUNT,
)

# Finer than DEBUG: per-candidate skip decisions during detection
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

# Format strings
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _ensure_log_directory(log_file: Path) -> None:
    """Create log directory if it doesn't exist."""
    log_file.parent.mkdir(parents=True, exist_ok=True)


def setup_logging(debug_mode: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure application logging.

    Sets up two log targets:
    1. Debug log: Rotating file handler with DEBUG level
    2. Console: stderr handler, only in debug mode, including TRACE records

    Args:
        debug_mode: If True, also output DEBUG and TRACE to console
        log_file: Override for the debug log location
    """
    log_file = log_file or DEBUG_LOG_FILE
    _ensure_log_directory(log_file)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(TRACE if debug_mode else logging.DEBUG)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Debug file handler (rotating)
    debug_handler = RotatingFileHandler(
        log_file,
        maxBytes=DEBUG_LOG_MAX_BYTES,
        backupCount=DEBUG_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    root_logger.addHandler(debug_handler)

    # Console handler (only in debug mode)
    if debug_mode:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(TRACE)
        console_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        root_logger.addHandler(console_handler)


def trace(logger: logging.Logger, msg: str, *args: object) -> None:
    """Log at TRACE level."""
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args)
