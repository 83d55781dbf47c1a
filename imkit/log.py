"""Levelled logging with a global level mask, in plain or coloured form."""

from __future__ import annotations

import inspect
import sys
import time
from enum import IntEnum
from typing import Any, TextIO

from imkit.textio import format_objects


class Level(IntEnum):
    """Log levels, from most to least verbose."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @property
    def mask(self) -> int:
        """The mask bit of this level."""
        return 1 << self.value


MASK_NONE = 0
MASK_ALL = (
    Level.TRACE.mask
    | Level.DEBUG.mask
    | Level.INFO.mask
    | Level.WARN.mask
    | Level.ERROR.mask
    | Level.FATAL.mask
)

_LEVEL_COLORS = {
    Level.TRACE: "\x1b[94m",
    Level.DEBUG: "\x1b[36m",
    Level.INFO: "\x1b[32m",
    Level.WARN: "\x1b[33m",
    Level.ERROR: "\x1b[31m",
    Level.FATAL: "\x1b[35m",
}

_mask = MASK_ALL


def _enabled(level: int) -> bool:
    return 0 <= level <= Level.FATAL and bool(_mask & (1 << level))


def _location(file: str | None, line: int | None, depth: int) -> tuple[str, int]:
    if file is not None and line is not None:
        return file, line
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back
    caller_file = frame.f_code.co_filename if frame is not None else "?"
    caller_line = frame.f_lineno if frame is not None else 0
    return (caller_file if file is None else file,
            caller_line if line is None else line)


def _emit(stream: TextIO | None, text: str) -> str:
    out = sys.stdout if stream is None else stream
    out.write(text)
    return text


def log_plain(level: int, fmt: str, *args: Any, stream: TextIO | None = None,
              file: str | None = None, line: int | None = None) -> str:
    """Log one line without colours; return what was written, or ``""``."""
    if not _enabled(level):
        return ""
    file, line = _location(file, line, 1)
    stamp = time.strftime("%H:%M:%S", time.localtime())
    header = f"{stamp} {Level(level).name:<5} {file}:{line}: "
    return _emit(stream, header + format_objects(fmt, *args) + "\n")


def log_color(level: int, fmt: str, *args: Any, stream: TextIO | None = None,
              file: str | None = None, line: int | None = None) -> str:
    """Log one line with ANSI colours; return what was written, or ``""``."""
    if not _enabled(level):
        return ""
    file, line = _location(file, line, 1)
    stamp = time.strftime("%H:%M:%S", time.localtime())
    lvl = Level(level)
    header = (
        f"{stamp}\x1b[0m {_LEVEL_COLORS[lvl]}{lvl.name:<5} "
        f"\x1b[90m{file}:{line}:\x1b[0m "
    )
    return _emit(stream, header + format_objects(fmt, *args) + "\n")


def set_mask(mask: int) -> None:
    """Replace the level mask."""
    global _mask
    _mask = mask & 0xFF


def set_min(level: int) -> None:
    """Enable ``level`` and every level above it, and nothing below."""
    global _mask
    _mask = (0xFF << level) & 0xFF


def get_mask() -> int:
    """Return the level mask."""
    return _mask


def add_mask(mask: int) -> None:
    """Enable the levels in ``mask``."""
    global _mask
    _mask = (_mask | mask) & 0xFF


def clear_mask(mask: int) -> None:
    """Disable the levels in ``mask``."""
    global _mask
    _mask = _mask & ~mask & 0xFF