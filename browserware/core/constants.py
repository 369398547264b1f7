"""Application constants and paths for browserware."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "browserware"
APP_VERSION = "0.1.0"
CONFIG_VERSION = 1

# Base paths
_XDG_CONFIG_HOME = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_DIR = _XDG_CONFIG_HOME / APP_NAME
LOGS_DIR = CONFIG_DIR / "logs"

# File paths
CONFIG_FILE = CONFIG_DIR / "config.json"
DEBUG_LOG_FILE = LOGS_DIR / "debug.log"

# Logging settings
DEBUG_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEBUG_LOG_BACKUP_COUNT = 3

# Default settings
DEFAULT_SETTINGS = {
    "probe_versions": True,
    "version_timeout": None,  # seconds; None waits for the child to exit
    "extra_desktop_dirs": [],
}

# URL scheme queried for registered handlers
HTTPS_SCHEME = "https"

# macOS Info.plist keys
PLIST_SHORT_VERSION = "CFBundleShortVersionString"
PLIST_VERSION = "CFBundleVersion"
PLIST_DISPLAY_NAME = "CFBundleDisplayName"
PLIST_NAME = "CFBundleName"
PLIST_EXECUTABLE = "CFBundleExecutable"

# Linux desktop entries
DESKTOP_ENTRY_SECTION = "Desktop Entry"
DESKTOP_FILE_SUFFIX = ".desktop"
BROWSER_MIME_TYPES = frozenset({
    "x-scheme-handler/http",
    "x-scheme-handler/https",
    "text/html",
})
BROWSER_CATEGORY = "WebBrowser"

SYSTEM_APPLICATION_DIRS = (
    Path("/usr/share/applications"),
    Path("/usr/local/share/applications"),
)
SNAP_APPLICATION_DIR = Path("/var/lib/snapd/desktop/applications")
FLATPAK_USER_EXPORTS = Path.home() / ".local" / "share" / "flatpak" / "exports"
FLATPAK_SYSTEM_EXPORTS = Path("/var/lib/flatpak/exports")
SNAP_BIN_DIR = Path("/snap/bin")

XDG_SETTINGS_COMMAND = ("xdg-settings", "get", "default-web-browser")

# Windows registry locations
START_MENU_INTERNET_KEYS = (
    ("HKCU", r"Software\Clients\StartMenuInternet"),
    ("HKLM", r"SOFTWARE\Clients\StartMenuInternet"),
    ("HKLM", r"SOFTWARE\WOW6432Node\Clients\StartMenuInternet"),
)
URL_ASSOCIATIONS_KEY = r"Software\Microsoft\Windows\Shell\Associations\UrlAssociations"
OPEN_COMMAND_SUBKEY = r"shell\open\command"
