"""Cross-platform discovery of installed web browsers."""

from browserware.core.models import (
    Browser,
    BrowserFamily,
    BrowserId,
    BrowserVariant,
    ChromiumChannel,
    FirefoxChannel,
    WebKitChannel,
)
from browserware.detect.detector import (
    detect_browser,
    detect_browsers,
    detect_browsers_by_family,
    detect_default_browser,
)

__all__ = [
    "Browser",
    "BrowserFamily",
    "BrowserId",
    "BrowserVariant",
    "ChromiumChannel",
    "FirefoxChannel",
    "WebKitChannel",
    "detect_browsers",
    "detect_browser",
    "detect_default_browser",
    "detect_browsers_by_family",
]
