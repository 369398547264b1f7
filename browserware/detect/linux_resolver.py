"""
Linux browser resolver.

Detection strategy:
1. Scan the XDG application directories for ``.desktop`` files
2. Keep entries that handle http(s)/html or are categorized WebBrowser
3. Resolve the executable from the ``Exec`` line
4. Enrich from the known browser registry, or derive metadata
5. Use ``xdg-settings get default-web-browser`` for the default
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from browserware.core.config import DetectionSettings
from browserware.core.constants import (
    DESKTOP_FILE_SUFFIX,
    FLATPAK_USER_EXPORTS,
    SNAP_APPLICATION_DIR,
    SYSTEM_APPLICATION_DIRS,
    XDG_SETTINGS_COMMAND,
)
from browserware.core.logging_config import trace
from browserware.core.models import Browser, BrowserId, BrowserVariant
from browserware.detect.base import PlatformResolver
from browserware.detect.desktop_entry import (
    DesktopEntry,
    is_browser_entry,
    parse_desktop_entry,
)
from browserware.detect.exec_command import resolve_exec_command
from browserware.detect.known_browsers import find_by_desktop_id
from browserware.detect.version_probe import probe_version

logger = logging.getLogger(__name__)


def _user_applications_dir() -> Path:
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(data_home) / "applications"


def desktop_search_dirs(extra_dirs: Iterable[Path] = ()) -> list[Path]:
    """
    Directories scanned for desktop files, in scan order.

    Duplicates are removed and only existing directories are returned.
    """
    candidates = [
        *SYSTEM_APPLICATION_DIRS,
        _user_applications_dir(),
        FLATPAK_USER_EXPORTS / "share" / "applications",
        SNAP_APPLICATION_DIR,
        *extra_dirs,
    ]

    seen: set[Path] = set()
    result = []
    for directory in candidates:
        if directory in seen:
            continue
        seen.add(directory)
        if directory.is_dir():
            result.append(directory)
    return result


def iter_desktop_files(directory: Path) -> Iterator[Path]:
    """Yield the ``.desktop`` files of a directory; unreadable dirs yield nothing."""
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.debug("Cannot read applications directory %s: %s", directory, e)
        return

    for path in entries:
        if path.suffix == DESKTOP_FILE_SUFFIX and path.is_file():
            yield path


def query_default_desktop_id() -> Optional[str]:
    """Ask xdg-settings for the default browser's desktop id."""
    try:
        result = subprocess.run(
            list(XDG_SETTINGS_COMMAND),
            capture_output=True,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("xdg-settings failed: %s", e)
        return None

    if result.returncode != 0:
        logger.debug("xdg-settings exited with %d", result.returncode)
        return None

    try:
        output = result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        logger.debug("xdg-settings produced non-UTF-8 output")
        return None

    if output.endswith(DESKTOP_FILE_SUFFIX):
        output = output[: -len(DESKTOP_FILE_SUFFIX)]
    return output or None


class LinuxResolver(PlatformResolver):
    """Discovers browsers from XDG desktop entries."""

    platform_name = "linux"

    def __init__(
        self,
        search_dirs: Optional[Sequence[Path]] = None,
        settings: Optional[DetectionSettings] = None,
    ) -> None:
        self.settings = settings or DetectionSettings()
        self._search_dirs = list(search_dirs) if search_dirs is not None else None

    @property
    def search_dirs(self) -> list[Path]:
        if self._search_dirs is not None:
            return self._search_dirs
        return desktop_search_dirs(self.settings.extra_desktop_dirs)

    def iter_entries(self) -> Iterator[DesktopEntry]:
        """Yield browser desktop entries from every search directory."""
        for directory in self.search_dirs:
            for path in iter_desktop_files(directory):
                entry = parse_desktop_entry(path)
                if entry is None:
                    trace(logger, "Skipping unparsable desktop file %s", path)
                    continue
                if not is_browser_entry(entry):
                    continue
                yield entry

    def _build_browser(self, entry: DesktopEntry) -> Optional[Browser]:
        """Turn a browser desktop entry into a Browser, or None if it has no program."""
        if entry.exec_line is None:
            trace(logger, "Desktop entry %s has no Exec line", entry.desktop_id)
            return None

        executable = resolve_exec_command(entry.exec_line)
        if executable is None:
            trace(logger, "Could not resolve executable for %s", entry.desktop_id)
            return None

        meta = find_by_desktop_id(entry.desktop_id)
        if meta is not None:
            return meta.to_browser(executable)

        logger.debug("Unknown browser %s - using desktop id as identifier", entry.desktop_id)
        return Browser(
            id=BrowserId(entry.desktop_id),
            name=entry.name or entry.desktop_id,
            variant=BrowserVariant.default(),
            executable=executable,
        )

    def _with_version(self, browser: Browser) -> Browser:
        if not self.settings.probe_versions or browser.executable is None:
            return browser
        return browser.with_version(
            probe_version(browser.executable, self.settings.version_timeout)
        )

    def _enumerate(self, probe: bool) -> list[Browser]:
        browsers = []
        seen: set[str] = set()

        for entry in self.iter_entries():
            browser = self._build_browser(entry)
            if browser is None:
                continue

            # Same browser is often installed under several directories
            if browser.id in seen:
                trace(logger, "Skipping duplicate %s from %s", browser.id, entry.path)
                continue
            seen.add(browser.id)

            if probe:
                browser = self._with_version(browser)

            logger.debug("Detected browser %s (%s)", browser.id, browser.name)
            browsers.append(browser)

        return browsers

    def enumerate(self) -> list[Browser]:
        """Discover browsers across all desktop entry directories."""
        return self._enumerate(probe=True)

    def resolve_default(self) -> Optional[Browser]:
        """
        Match xdg-settings' default browser against the detected browsers.

        Only the matched browser's version is probed.
        """
        desktop_id = query_default_desktop_id()
        if desktop_id is None:
            return None

        logger.debug("Default desktop entry is %s", desktop_id)
        default = match_desktop_id(desktop_id, self._enumerate(probe=False))
        if default is None:
            return None
        return self._with_version(default)


def match_desktop_id(desktop_id: str, browsers: Iterable[Browser]) -> Optional[Browser]:
    """
    Find the browser registered under a desktop id.

    Known browsers match through any of their registry aliases; unknown
    browsers only by literal desktop id.
    """
    meta = find_by_desktop_id(desktop_id)
    target = meta.id if meta is not None else desktop_id

    for browser in browsers:
        if browser.id == target:
            return browser
    return None
