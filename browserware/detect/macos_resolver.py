"""
macOS browser resolver.

Detection strategy:
1. Ask Launch Services for every application registered for ``https``
2. For each bundle id, resolve the installed application location
3. Drop helper apps nested inside another bundle
4. Enrich from the known browser registry, or derive metadata from the
   application's Info.plist
5. Ask Launch Services for the default ``https`` handler
"""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import Any, Optional
from xml.parsers.expat import ExpatError

from browserware.core.constants import (
    HTTPS_SCHEME,
    PLIST_DISPLAY_NAME,
    PLIST_EXECUTABLE,
    PLIST_NAME,
    PLIST_SHORT_VERSION,
    PLIST_VERSION,
)
from browserware.core.logging_config import trace
from browserware.core.models import Browser, BrowserId, BrowserVariant
from browserware.detect.base import PlatformResolver
from browserware.detect.known_browsers import find_by_bundle_id
from browserware.detect.launch_services import LaunchServicesClient

logger = logging.getLogger(__name__)

APP_SUFFIX = ".app"


def is_nested_app(app_path: Path) -> bool:
    """
    Check if an application bundle lives inside another bundle.

    ``/Applications/Foo.app/Contents/Support/Bar.app`` is nested;
    ``/Applications/Safari.app`` is not. System Settings does not list
    nested helpers as browsers, so neither do we.
    """
    path_str = str(app_path)

    last_app = path_str.rfind(APP_SUFFIX)
    if last_app == -1:
        return False

    return APP_SUFFIX + "/" in path_str[:last_app]


def read_info_plist(app_path: Path) -> dict[str, Any]:
    """Load ``Contents/Info.plist``; missing or malformed manifests give {}."""
    plist_path = app_path / "Contents" / "Info.plist"

    try:
        with open(plist_path, "rb") as f:
            info = plistlib.load(f)
    except FileNotFoundError:
        trace(logger, "No Info.plist at %s", plist_path)
        return {}
    except (OSError, ValueError, ExpatError) as e:
        logger.debug("Failed to read %s: %s", plist_path, e)
        return {}

    return info if isinstance(info, dict) else {}


def _string_value(info: dict[str, Any], *keys: str) -> Optional[str]:
    """Return the first non-empty string among keys."""
    for key in keys:
        value = info.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def bundle_version(info: dict[str, Any]) -> Optional[str]:
    return _string_value(info, PLIST_SHORT_VERSION, PLIST_VERSION)


def bundle_display_name(info: dict[str, Any]) -> Optional[str]:
    return _string_value(info, PLIST_DISPLAY_NAME, PLIST_NAME)


def derive_name_from_bundle_id(bundle_id: str) -> Optional[str]:
    """com.example.MyBrowser -> MyBrowser"""
    last = bundle_id.rsplit(".", 1)[-1]
    return last or None


def find_executable(app_path: Path, info: dict[str, Any]) -> Path:
    """
    Locate the main executable inside an application bundle.

    Uses ``CFBundleExecutable`` when that file exists, otherwise the bundle
    name. The fallback is returned even when it does not exist.
    """
    macos_dir = app_path / "Contents" / "MacOS"

    exec_name = _string_value(info, PLIST_EXECUTABLE)
    if exec_name:
        exec_path = macos_dir / exec_name
        if exec_path.exists():
            return exec_path
        trace(logger, "Executable from Info.plist doesn't exist: %s", exec_path)

    fallback_path = macos_dir / (app_path.stem or "executable")
    if not fallback_path.exists():
        logger.warning("Fallback executable path doesn't exist: %s", fallback_path)

    return fallback_path


def build_browser(bundle_id: str, app_path: Path) -> Browser:
    """Build a Browser for a Launch Services handler."""
    info = read_info_plist(app_path)
    executable = find_executable(app_path, info)
    version = bundle_version(info)

    meta = find_by_bundle_id(bundle_id)
    if meta is not None:
        browser = meta.to_browser(executable)
    else:
        name = (
            bundle_display_name(info)
            or derive_name_from_bundle_id(bundle_id)
            or bundle_id
        )
        logger.debug("Unknown browser %s - using bundle id as identifier", bundle_id)
        browser = Browser(
            id=BrowserId(bundle_id),
            name=name,
            variant=BrowserVariant.default(),
            executable=executable,
        )

    return browser.with_bundle_id(bundle_id).with_version(version)


class MacOSResolver(PlatformResolver):
    """Discovers browsers through Launch Services URL handler registrations."""

    platform_name = "macos"

    def __init__(self, services: Optional[LaunchServicesClient] = None) -> None:
        self.services = services or LaunchServicesClient()

    def _application_path(self, bundle_id: str) -> Optional[Path]:
        """Resolve a bundle id to a top-level application path."""
        app_path = self.services.application_path(bundle_id)
        if app_path is None:
            trace(logger, "Could not resolve application for %s", bundle_id)
            return None

        if is_nested_app(app_path):
            trace(logger, "Skipping nested app %s at %s", bundle_id, app_path)
            return None

        return app_path

    def enumerate(self) -> list[Browser]:
        """Discover every installed HTTPS handler."""
        bundle_ids = self.services.all_handlers(HTTPS_SCHEME)
        logger.debug("Found %d URL handlers", len(bundle_ids))

        browsers = []
        for bundle_id in bundle_ids:
            app_path = self._application_path(bundle_id)
            if app_path is None:
                continue

            browser = build_browser(bundle_id, app_path)
            logger.debug("Detected browser %s (%s)", browser.id, browser.name)
            browsers.append(browser)

        return browsers

    def resolve_default(self) -> Optional[Browser]:
        """Resolve the default HTTPS handler."""
        bundle_id = self.services.default_handler(HTTPS_SCHEME)
        if bundle_id is None:
            return None

        logger.debug("Default handler is %s", bundle_id)

        app_path = self._application_path(bundle_id)
        if app_path is None:
            return None

        return build_browser(bundle_id, app_path)
