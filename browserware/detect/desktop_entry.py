"""XDG desktop entry parsing."""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from browserware.core.constants import (
    BROWSER_CATEGORY,
    BROWSER_MIME_TYPES,
    DESKTOP_ENTRY_SECTION,
    DESKTOP_FILE_SUFFIX,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesktopEntry:
    """The ``[Desktop Entry]`` fields that matter for browser detection."""

    desktop_id: str  # File basename without .desktop
    path: Path
    name: Optional[str] = None
    exec_line: Optional[str] = None
    mime_types: tuple[str, ...] = field(default_factory=tuple)
    categories: tuple[str, ...] = field(default_factory=tuple)


def _split_list(value: Optional[str]) -> tuple[str, ...]:
    """Split a ``;``-delimited desktop entry list, dropping empty items."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(";") if item.strip())


def desktop_id_for(path: Path) -> str:
    """Return the desktop id (basename without extension) of a file."""
    name = path.name
    if name.endswith(DESKTOP_FILE_SUFFIX):
        return name[: -len(DESKTOP_FILE_SUFFIX)]
    return name


def _desktop_entry_block(text: str) -> Optional[str]:
    """
    Cut the ``[Desktop Entry]`` group out of a desktop file.

    Lines before its header and from the next group header on are dropped,
    as are lines with no ``=``. Leading whitespace is stripped so indented
    keys are not read as continuation lines.
    """
    header = f"[{DESKTOP_ENTRY_SECTION}]"
    lines = []
    inside = False

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("["):
            if inside:
                break
            if line == header:
                inside = True
                lines.append(line)
            continue
        if not inside or not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        lines.append(line)

    return "\n".join(lines) + "\n" if inside else None


def parse_desktop_text(text: str, path: Path) -> Optional[DesktopEntry]:
    """
    Parse the contents of a desktop file.

    Only the ``[Desktop Entry]`` group is read; keys before it, other groups
    and malformed lines are ignored. Returns None when there is no such group
    or when the entry has neither ``Name`` nor ``Exec``.
    """
    block = _desktop_entry_block(text)
    if block is None:
        logger.debug("Desktop file %s has no [%s] section", path, DESKTOP_ENTRY_SECTION)
        return None

    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        delimiters=("=",),
        comment_prefixes=("#",),
    )
    # Keys are case-sensitive in desktop files
    parser.optionxform = str  # type: ignore[assignment]

    try:
        parser.read_string(block, source=str(path))
    except configparser.Error as e:
        logger.debug("Failed to parse desktop file %s: %s", path, e)
        return None

    section = parser[DESKTOP_ENTRY_SECTION]
    name = section.get("Name") or None
    exec_line = section.get("Exec") or None

    if name is None and exec_line is None:
        logger.debug("Desktop file %s has neither Name nor Exec", path)
        return None

    return DesktopEntry(
        desktop_id=desktop_id_for(path),
        path=path,
        name=name,
        exec_line=exec_line,
        mime_types=_split_list(section.get("MimeType")),
        categories=_split_list(section.get("Categories")),
    )


def parse_desktop_entry(path: Path) -> Optional[DesktopEntry]:
    """Read and parse a desktop file; unreadable files give None."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read desktop file %s: %s", path, e)
        return None

    return parse_desktop_text(text, path)


def is_browser_entry(entry: DesktopEntry) -> bool:
    """Return True if the entry handles web URLs or declares itself a browser."""
    if any(mime in BROWSER_MIME_TYPES for mime in entry.mime_types):
        return True
    return BROWSER_CATEGORY in entry.categories
