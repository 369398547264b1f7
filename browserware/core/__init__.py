"""Core module for browserware."""

from .config import ConfigManager, ConfigError, DetectionSettings
from .logging_config import setup_logging, TRACE
from .models import (
    BrowserId,
    BrowserFamily,
    ChromiumChannel,
    FirefoxChannel,
    WebKitChannel,
    VariantType,
    BrowserVariant,
    Browser,
    browsers_to_json,
)

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    "DetectionSettings",
    # Logging
    "setup_logging",
    "TRACE",
    # Models
    "BrowserId",
    "BrowserFamily",
    "ChromiumChannel",
    "FirefoxChannel",
    "WebKitChannel",
    "VariantType",
    "BrowserVariant",
    "Browser",
    "browsers_to_json",
]
