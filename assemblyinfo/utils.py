"""Utility functions for writing generated files and parsing dates.

This module provides a retrying atomic file write for generated sources
and a lenient date parser used by the command line.
"""

import os
import stat
import tempfile
import time
from datetime import timezone
from pathlib import Path

import dateparser

from .codegen.core.fields import MAX_TICKS, datetime_to_ticks
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_WRITE_ATTEMPTS = 5
DEFAULT_WRITE_DELAY = 0.1

_DATEPARSER_SETTINGS = {
    "TIMEZONE": "UTC",
    "TO_TIMEZONE": "UTC",
    "RETURN_AS_TIMEZONE_AWARE": True,
}


def write_text_with_retry(
    path: str | Path,
    content: str,
    attempts: int = DEFAULT_WRITE_ATTEMPTS,
    delay: float = DEFAULT_WRITE_DELAY,
) -> Path:
    """Write text to a file, retrying when the file is briefly locked.

    The content is written to a temporary file next to the target and moved
    into place, so readers never observe a partial file. Writing the same
    content twice leaves the same file.

    Args:
        path: Destination file. Missing parent directories are created.
        content: Text to write (UTF-8).
        attempts: Total number of tries before giving up.
        delay: Initial wait in seconds, doubled after every failure.

    Returns:
        The destination path.

    Raises:
        OSError: The last error once all attempts have failed.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    path = Path(path)
    wait = delay

    for attempt in range(1, attempts + 1):
        try:
            _write_atomic(path, content)
            logger.debug(f"Wrote {path} on attempt {attempt}")
            return path
        except OSError as e:
            if attempt == attempts:
                logger.error(f"Giving up writing {path} after {attempts} attempts: {e}")
                raise
            logger.warning(
                f"Writing {path} failed (attempt {attempt}/{attempts}): {e}; "
                f"retrying in {wait:.2f}s"
            )
            time.sleep(wait)
            wait *= 2

    return path


def _target_mode(path: Path) -> int:
    """Mode for the written file: keep an existing target's, else honor the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_atomic(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    # mkstemp always creates the file owner-only
    fd, tmp_name = tempfile.mkstemp(
        dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def parse_date_to_ticks(text: str | None) -> int | None:
    """Parse a human or ISO date into .NET ticks.

    Dates without an explicit zone are taken as UTC.

    Args:
        text: Date such as ``2021-01-01T00:00:00Z`` or ``yesterday``.

    Returns:
        Tick count, or None if the text cannot be parsed.
    """
    if not text or not text.strip():
        return None

    parsed = dateparser.parse(text, settings=_DATEPARSER_SETTINGS)
    if parsed is None:
        logger.debug(f"Could not parse date: {text!r}")
        return None

    ticks = datetime_to_ticks(parsed.astimezone(timezone.utc))
    if ticks < 0 or ticks > MAX_TICKS:
        return None
    return ticks
