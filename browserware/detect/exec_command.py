"""Resolve executables from launcher command lines."""

from __future__ import annotations

import logging
import re
import shlex
import shutil
from pathlib import Path
from typing import Optional

from browserware.core.constants import (
    FLATPAK_SYSTEM_EXPORTS,
    FLATPAK_USER_EXPORTS,
    SNAP_BIN_DIR,
)

logger = logging.getLogger(__name__)

# Commands that only set up the environment for the real program
ENV_WRAPPERS = frozenset({"env", "exec"})
SHELL_WRAPPERS = frozenset({"sh", "bash", "dash", "zsh"})

_ASSIGNMENT = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*=")
_WINDOWS_EXE = re.compile(r"^(.*?\.exe)(?=\s|$)", re.IGNORECASE)


def _tokenize(command: str) -> list[str]:
    """Split a command line the way a shell would, tolerating bad quoting."""
    try:
        return shlex.split(command)
    except ValueError:
        logger.debug("Unbalanced quoting in command, splitting on whitespace: %s", command)
        return command.split()


def flatpak_executable(app_id: str) -> Path:
    """
    Path of the exported launcher for a Flatpak application.

    The per-user export wins when present; otherwise the system export is
    assumed.
    """
    user_bin = FLATPAK_USER_EXPORTS / "bin" / app_id
    if user_bin.exists():
        return user_bin
    return FLATPAK_SYSTEM_EXPORTS / "bin" / app_id


def is_sandboxed_path(path: Path) -> bool:
    """Return True for Flatpak export launchers and Snap shims."""
    if "flatpak" in path.parts:
        return True
    return path.parent == SNAP_BIN_DIR


def _skip_options(tokens: list[str], index: int) -> int:
    """Advance past ``-x``/``--long`` options."""
    while index < len(tokens) and tokens[index].startswith("-"):
        index += 1
    return index


def _is_command_flag(token: str) -> bool:
    """True for ``-c`` and combined short flags such as ``-lc``."""
    return not token.startswith("--") and "c" in token[1:]


def _resolve_tokens(tokens: list[str]) -> Optional[Path]:
    i = 0
    while i < len(tokens):
        token = tokens[i]

        # Field codes: %u, %U, %f, %F, ...
        if token.startswith("%"):
            i += 1
            continue

        # Environment assignments: KEY=value
        if _ASSIGNMENT.match(token):
            i += 1
            continue

        program = Path(token).name

        if program in ENV_WRAPPERS:
            i = _skip_options(tokens, i + 1)
            continue

        if program in SHELL_WRAPPERS:
            j = i + 1
            while j < len(tokens) and tokens[j].startswith("-"):
                if _is_command_flag(tokens[j]) and j + 1 < len(tokens):
                    return resolve_exec_command(tokens[j + 1])
                j += 1
            i = j
            continue

        if program == "flatpak" and i + 1 < len(tokens) and tokens[i + 1] == "run":
            j = _skip_options(tokens, i + 2)
            if j < len(tokens):
                return flatpak_executable(tokens[j])
            return None

        if program == "snap" and i + 1 < len(tokens) and tokens[i + 1] == "run":
            j = _skip_options(tokens, i + 2)
            if j < len(tokens):
                return SNAP_BIN_DIR / tokens[j]
            return None

        if token.startswith("/"):
            return Path(token)

        resolved = shutil.which(token)
        if resolved:
            return Path(resolved)

        logger.debug("Could not find %s on PATH, keeping bare name", token)
        return Path(token)

    return None


def resolve_exec_command(exec_line: str) -> Optional[Path]:
    """
    Determine the program launched by a desktop entry ``Exec`` line.

    Field codes, ``KEY=value`` assignments and ``env``/``sh -c``/``bash``
    wrappers are skipped. ``flatpak run <app-id>`` resolves to the Flatpak
    export launcher, ``snap run <name>`` to ``/snap/bin/<name>``. Relative
    program names are looked up on PATH, falling back to the bare name.

    Returns:
        The executable path, or None if the line names no program.
    """
    return _resolve_tokens(_tokenize(exec_line))


def parse_windows_command(command: str) -> Optional[Path]:
    """
    Extract the executable from a Windows ``shell\\open\\command`` string.

    Handles a quoted program path, an unquoted path containing spaces that
    ends in ``.exe``, and finally a bare first token.
    """
    command = command.strip()
    if not command:
        return None

    if command.startswith('"'):
        end = command.find('"', 1)
        program = command[1:end] if end != -1 else command[1:]
        return Path(program) if program else None

    match = _WINDOWS_EXE.match(command)
    if match:
        return Path(match.group(1))

    return Path(command.split()[0])
