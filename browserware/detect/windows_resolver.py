"""
Windows browser resolver.

Detection strategy:
1. Enumerate ``Clients\\StartMenuInternet`` subkeys under HKCU, then HKLM
   (native and WOW6432Node views)
2. Read each key's ``shell\\open\\command`` for the executable
3. Enrich from the known browser registry, or derive metadata
4. Read ``UrlAssociations\\https\\UserChoice\\ProgId`` for the default and
   match its open command against the detected executables
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from browserware.core.constants import (
    OPEN_COMMAND_SUBKEY,
    START_MENU_INTERNET_KEYS,
    URL_ASSOCIATIONS_KEY,
)
from browserware.core.logging_config import trace
from browserware.core.models import Browser, BrowserId, BrowserVariant
from browserware.detect.base import PlatformResolver
from browserware.detect.exec_command import parse_windows_command
from browserware.detect.known_browsers import find_by_registry_key

try:
    import winreg
    HAS_WINREG = True
except ImportError:
    HAS_WINREG = False

logger = logging.getLogger(__name__)

DEFAULT_SCHEMES = ("https", "http")


class RegistryReader:
    """Read-only access to the Windows registry; every failure reads as None."""

    def _hive(self, name: str):
        return {
            "HKCU": winreg.HKEY_CURRENT_USER,
            "HKLM": winreg.HKEY_LOCAL_MACHINE,
            "HKCR": winreg.HKEY_CLASSES_ROOT,
        }[name]

    def subkeys(self, hive: str, path: str) -> list[str]:
        """Return the names of the direct subkeys of a key."""
        if not HAS_WINREG:
            return []

        names = []
        try:
            with winreg.OpenKey(self._hive(hive), path) as key:
                index = 0
                while True:
                    try:
                        names.append(winreg.EnumKey(key, index))
                    except OSError:
                        break
                    index += 1
        except OSError as e:
            trace(logger, "Cannot open %s\\%s: %s", hive, path, e)
        return names

    def value(self, hive: str, path: str, name: str = "") -> Optional[str]:
        """Return a string value of a key; ``name=""`` reads the default value."""
        if not HAS_WINREG:
            return None

        try:
            with winreg.OpenKey(self._hive(hive), path) as key:
                data, _ = winreg.QueryValueEx(key, name)
        except OSError as e:
            trace(logger, "Cannot read %s\\%s [%s]: %s", hive, path, name, e)
            return None

        return data if isinstance(data, str) and data else None


def _normalize_executable(path: Optional[Path]) -> Optional[str]:
    if path is None:
        return None
    return str(path).replace("/", "\\").lower()


class WindowsResolver(PlatformResolver):
    """Discovers browsers registered under StartMenuInternet."""

    platform_name = "windows"

    def __init__(self, reader: Optional[RegistryReader] = None) -> None:
        self.reader = reader or RegistryReader()
        if not HAS_WINREG and reader is None:
            logger.warning("winreg not available - Windows detection disabled")

    def _build_browser(self, hive: str, root: str, key_name: str) -> Browser:
        key_path = f"{root}\\{key_name}"
        command = self.reader.value(hive, f"{key_path}\\{OPEN_COMMAND_SUBKEY}")
        executable = parse_windows_command(command) if command else None

        meta = find_by_registry_key(key_name)
        if meta is not None:
            return meta.to_browser(executable)

        # Default value is the display name unless it's an indirect "@dll,-id" string
        display_name = self.reader.value(hive, key_path)
        if display_name is None or display_name.startswith("@"):
            display_name = key_name

        logger.debug("Unknown browser %s - using registry key as identifier", key_name)
        return Browser(
            id=BrowserId(key_name),
            name=display_name,
            variant=BrowserVariant.default(),
            executable=executable,
        )

    def enumerate(self) -> list[Browser]:
        """Discover browsers across the StartMenuInternet registrations."""
        browsers = []
        seen: set[str] = set()

        for hive, root in START_MENU_INTERNET_KEYS:
            for key_name in sorted(self.reader.subkeys(hive, root), key=str.lower):
                browser = self._build_browser(hive, root, key_name)
                if browser.id in seen:
                    trace(logger, "Skipping duplicate %s from %s\\%s", browser.id, hive, root)
                    continue
                seen.add(browser.id)

                logger.debug("Detected browser %s (%s)", browser.id, browser.name)
                browsers.append(browser)

        return browsers

    def _default_prog_id(self) -> Optional[str]:
        for scheme in DEFAULT_SCHEMES:
            prog_id = self.reader.value(
                "HKCU",
                f"{URL_ASSOCIATIONS_KEY}\\{scheme}\\UserChoice",
                "ProgId",
            )
            if prog_id:
                return prog_id
        return None

    def resolve_default(self) -> Optional[Browser]:
        """Match the user's http(s) ProgId against the detected browsers."""
        prog_id = self._default_prog_id()
        if prog_id is None:
            return None

        logger.debug("Default ProgId is %s", prog_id)

        command = self.reader.value("HKCR", f"{prog_id}\\{OPEN_COMMAND_SUBKEY}")
        if command is None:
            return None

        return match_executable(parse_windows_command(command), self.enumerate())


def match_executable(executable: Optional[Path], browsers: Iterable[Browser]) -> Optional[Browser]:
    """Find the browser whose executable matches, ignoring case and separators."""
    target = _normalize_executable(executable)
    if target is None:
        return None

    for browser in browsers:
        if _normalize_executable(browser.executable) == target:
            return browser
    return None
