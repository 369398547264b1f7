"""Main browser detection orchestrator."""

from __future__ import annotations

import logging
from typing import Optional

from browserware.core.config import DetectionSettings
from browserware.core.models import Browser, BrowserFamily
from browserware.detect.base import PlatformResolver, create_resolver

logger = logging.getLogger(__name__)


class BrowserDetector:
    """
    Discovers installed browsers through the active platform resolver.

    Holds no state between calls: every query goes back to the OS. No
    method raises; failures surface as an empty list or None.
    """

    def __init__(
        self,
        resolver: Optional[PlatformResolver] = None,
        settings: Optional[DetectionSettings] = None,
    ) -> None:
        self.resolver = resolver or create_resolver(settings=settings)

    def detect_browsers(self) -> list[Browser]:
        """Detect all installed browsers, in no particular order."""
        logger.info("Detecting installed browsers (%s)", self.resolver.platform_name)
        try:
            browsers = self.resolver.enumerate()
        except Exception:
            logger.warning("Browser detection failed", exc_info=True)
            return []

        logger.info("Browser detection complete: %d found", len(browsers))
        return browsers

    def detect_browser(self, browser_id: str) -> Optional[Browser]:
        """
        Detect a browser by canonical id.

        Runs a full detection; callers doing repeated lookups should keep the
        result of detect_browsers() instead.
        """
        logger.debug("Looking for browser %s", browser_id)
        for browser in self.detect_browsers():
            if browser.id == browser_id:
                return browser
        return None

    def detect_default_browser(self) -> Optional[Browser]:
        """Detect the default HTTP(S) handler."""
        logger.info("Detecting default browser")
        try:
            default = self.resolver.resolve_default()
        except Exception:
            logger.warning("Default browser detection failed", exc_info=True)
            return None

        if default is None:
            logger.warning("No default browser detected")
        else:
            logger.info("Default browser detected: %s (%s)", default.id, default.name)
        return default

    def detect_browsers_by_family(self, family: BrowserFamily) -> list[Browser]:
        """Detect browsers of one engine family, preserving detection order."""
        logger.debug("Filtering browsers by family %s", family)
        return filter_by_family(self.detect_browsers(), family)


def filter_by_family(browsers: list[Browser], family: BrowserFamily) -> list[Browser]:
    """Return the browsers whose family equals ``family``, in order."""
    return [b for b in browsers if b.family == family]


_default_detector: Optional[BrowserDetector] = None


def get_detector() -> BrowserDetector:
    """Return the process-wide detector for the running platform."""
    global _default_detector
    if _default_detector is None:
        _default_detector = BrowserDetector()
    return _default_detector


def detect_browsers() -> list[Browser]:
    """Detect all installed browsers on this machine."""
    return get_detector().detect_browsers()


def detect_browser(browser_id: str) -> Optional[Browser]:
    """Detect a specific browser by canonical id (e.g. "chrome")."""
    return get_detector().detect_browser(browser_id)


def detect_default_browser() -> Optional[Browser]:
    """Detect the system's default browser."""
    return get_detector().detect_default_browser()


def detect_browsers_by_family(family: BrowserFamily) -> list[Browser]:
    """Detect all installed browsers of an engine family."""
    return get_detector().detect_browsers_by_family(family)
