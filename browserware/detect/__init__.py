"""Browser detection package."""

from browserware.detect.base import NullResolver, PlatformResolver, create_resolver
from browserware.detect.desktop_entry import (
    DesktopEntry,
    is_browser_entry,
    parse_desktop_entry,
)
from browserware.detect.detector import (
    BrowserDetector,
    detect_browser,
    detect_browsers,
    detect_browsers_by_family,
    detect_default_browser,
    filter_by_family,
)
from browserware.detect.exec_command import parse_windows_command, resolve_exec_command
from browserware.detect.known_browsers import (
    KNOWN_BROWSERS,
    BrowserMeta,
    find_by_bundle_id,
    find_by_desktop_id,
    find_by_id,
    find_by_registry_key,
)
from browserware.detect.linux_resolver import LinuxResolver
from browserware.detect.macos_resolver import MacOSResolver, is_nested_app
from browserware.detect.version_probe import extract_version
from browserware.detect.windows_resolver import WindowsResolver

__all__ = [
    # Orchestration
    "BrowserDetector",
    "detect_browsers",
    "detect_browser",
    "detect_default_browser",
    "detect_browsers_by_family",
    "filter_by_family",
    # Resolvers
    "PlatformResolver",
    "NullResolver",
    "MacOSResolver",
    "LinuxResolver",
    "WindowsResolver",
    "create_resolver",
    # Registry
    "BrowserMeta",
    "KNOWN_BROWSERS",
    "find_by_id",
    "find_by_bundle_id",
    "find_by_registry_key",
    "find_by_desktop_id",
    # Utilities
    "DesktopEntry",
    "parse_desktop_entry",
    "is_browser_entry",
    "resolve_exec_command",
    "parse_windows_command",
    "extract_version",
    "is_nested_app",
]
