"""Platform resolver interface and factory."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from browserware.core.config import DetectionSettings
    from browserware.core.models import Browser

logger = logging.getLogger(__name__)


class PlatformResolver(ABC):
    """
    Abstract base class for per-OS browser discovery.

    Implementations must never raise out of ``enumerate`` or
    ``resolve_default``: a missing OS signal is reported as an empty list
    or None.
    """

    platform_name: str = "unknown"

    @abstractmethod
    def enumerate(self) -> list[Browser]:
        """
        Discover installed browsers.

        Returns:
            Browser objects in no particular order.
        """

    @abstractmethod
    def resolve_default(self) -> Optional[Browser]:
        """
        Resolve the browser registered as the default HTTP(S) handler.

        Returns:
            The default Browser, or None if it cannot be determined.
        """


class NullResolver(PlatformResolver):
    """Resolver for platforms with no detection support."""

    def __init__(self, platform_name: str = "unsupported") -> None:
        self.platform_name = platform_name

    def enumerate(self) -> list[Browser]:
        logger.warning("Browser detection not implemented for platform %s", self.platform_name)
        return []

    def resolve_default(self) -> Optional[Browser]:
        logger.warning(
            "Default browser detection not implemented for platform %s", self.platform_name
        )
        return None


def create_resolver(
    platform: Optional[str] = None,
    settings: Optional[DetectionSettings] = None,
) -> PlatformResolver:
    """
    Factory function to create the resolver for a platform.

    Args:
        platform: A ``sys.platform`` value; defaults to the running platform.
        settings: Detection tunables; only the Linux resolver has any.

    Returns:
        MacOSResolver on darwin, LinuxResolver on linux,
        WindowsResolver on win32/cygwin, NullResolver otherwise.
    """
    # Import here to avoid circular imports
    from browserware.detect.linux_resolver import LinuxResolver
    from browserware.detect.macos_resolver import MacOSResolver
    from browserware.detect.windows_resolver import WindowsResolver

    platform = platform or sys.platform

    if platform == "darwin":
        return MacOSResolver()
    if platform.startswith("linux"):
        return LinuxResolver(settings=settings)
    if platform in ("win32", "cygwin"):
        return WindowsResolver()
    return NullResolver(platform)
