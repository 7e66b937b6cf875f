"""Small text helpers: whole-file reading, bounded copying and debug logging."""

from __future__ import annotations

import logging
import os

STRING_MAX = 1024

_log = logging.getLogger("glensh")


def debug(message: str, *args: object) -> None:
    """Emit a debug-level diagnostic with printf-style arguments."""
    _log.debug(message, *args)


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole contents of a text file; raises OSError if it cannot be read."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        debug("Failed to open file %s", path)
        raise
    debug("File %s read successfully.", path)
    return text


def copy_bounded(prefix: str, src: str, limit: int) -> str:
    """Append src to prefix, keeping the result under limit characters.

    A buffer of limit characters holds at most limit - 1 characters plus its
    terminator; anything beyond that is cut off and an overflow is logged.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    joined = prefix + src
    room = limit - 1
    if len(joined) > room:
        debug("BUFFER_OVERFLOW: Surpassed limit %d bytes", limit)
        return joined[:room]
    return joined