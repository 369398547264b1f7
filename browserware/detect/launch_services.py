"""macOS Launch Services queries via PyObjC."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

try:
    import LaunchServices
    HAS_LAUNCH_SERVICES = True
except ImportError:
    HAS_LAUNCH_SERVICES = False

logger = logging.getLogger(__name__)


class LaunchServicesClient:
    """
    Thin wrapper over the Launch Services handler APIs.

    The ``LSCopy*`` functions follow the Core Foundation create rule; the
    PyObjC bridge takes ownership of every returned array, string and URL
    and releases it when the Python proxy is collected, so no explicit
    CFRelease calls appear here. Every query returns None or an empty list
    when the OS gives no answer.
    """

    def __init__(self) -> None:
        if not HAS_LAUNCH_SERVICES:
            logger.warning("pyobjc LaunchServices bindings not available - macOS detection disabled")

    @property
    def available(self) -> bool:
        return HAS_LAUNCH_SERVICES

    def all_handlers(self, scheme: str) -> list[str]:
        """Return bundle ids of every application registered for a URL scheme."""
        if not HAS_LAUNCH_SERVICES:
            return []

        try:
            handlers = LaunchServices.LSCopyAllHandlersForURLScheme(scheme)
        except Exception as e:
            logger.warning("LSCopyAllHandlersForURLScheme(%s) failed: %s", scheme, e)
            return []

        if handlers is None:
            return []
        return [str(bundle_id) for bundle_id in handlers]

    def default_handler(self, scheme: str) -> Optional[str]:
        """Return the bundle id of the default handler for a URL scheme."""
        if not HAS_LAUNCH_SERVICES:
            return None

        try:
            bundle_id = LaunchServices.LSCopyDefaultHandlerForURLScheme(scheme)
        except Exception as e:
            logger.warning("LSCopyDefaultHandlerForURLScheme(%s) failed: %s", scheme, e)
            return None

        return str(bundle_id) if bundle_id else None

    def application_path(self, bundle_id: str) -> Optional[Path]:
        """Return the location of the primary installation of a bundle id."""
        if not HAS_LAUNCH_SERVICES:
            return None

        try:
            result = LaunchServices.LSCopyApplicationURLsForBundleIdentifier(bundle_id, None)
        except Exception as e:
            logger.debug("LSCopyApplicationURLsForBundleIdentifier(%s) failed: %s", bundle_id, e)
            return None

        # The bridge returns (urls, error) for the out-parameter form
        urls = result[0] if isinstance(result, tuple) else result
        if not urls:
            return None

        path = urls[0].path()
        return Path(str(path)) if path else None
