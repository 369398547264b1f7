"""Browser version discovery by running ``<browser> --version``."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Optional

from browserware.detect.exec_command import is_sandboxed_path

logger = logging.getLogger(__name__)

_TRAILING_JUNK = re.compile(r"[^0-9.]+$")


def extract_version(output: str) -> Optional[str]:
    """
    Pick the version number out of ``--version`` output.

    The first whitespace-separated token, across all lines, that starts
    with a digit and contains a dot wins; trailing characters other than
    digits and dots are trimmed.

    >>> extract_version("Chromium 120.0.6099.109 built on Debian 12.4")
    '120.0.6099.109'
    """
    for line in output.splitlines():
        for token in line.split():
            if token[0].isdigit() and "." in token:
                version = _TRAILING_JUNK.sub("", token)
                if version:
                    return version
    return None


def probe_version(executable: Path, timeout: Optional[float] = None) -> Optional[str]:
    """
    Run the browser with ``--version`` and parse the output.

    Flatpak and Snap launchers are not run. A missing binary, non-zero
    exit, undecodable output or timeout all give None. With the default
    ``timeout=None`` an unresponsive browser blocks the caller.
    """
    if is_sandboxed_path(executable):
        logger.debug("Skipping version probe for sandboxed launcher %s", executable)
        return None

    try:
        result = subprocess.run(
            [str(executable), "--version"],
            capture_output=True,
            check=False,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.warning("Version probe timed out after %ss: %s", timeout, executable)
        return None
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Version probe failed for %s: %s", executable, e)
        return None

    if result.returncode != 0:
        logger.debug("Version probe for %s exited with %d", executable, result.returncode)
        return None

    try:
        output = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Version probe for %s produced non-UTF-8 output", executable)
        return None

    return extract_version(output)
