"""printf-style output that can also print protocol objects with ``%obj``."""

from __future__ import annotations

import re
import sys
from typing import Any, Sequence, TextIO

from imkit.core import tostr

OBJECT_DIRECTIVE = "%obj"

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"(?:hh|h|ll|l|L|q|j|z|t)?"
    r"(?P<conv>[diouxXeEfFgGcsp%])"
)


def _cformat(fmt: str, args: Sequence[Any]) -> tuple[str, int]:
    """Format ``fmt`` printf-style; return the text and how many args it used."""
    parts: list[str] = []
    used = 0
    pos = 0

    def take() -> Any:
        nonlocal used
        if used >= len(args):
            raise TypeError("not enough arguments for format string")
        value = args[used]
        used += 1
        return value

    for match in _SPEC.finditer(fmt):
        parts.append(fmt[pos:match.start()])
        pos = match.end()
        conv = match["conv"]
        if conv == "%":
            parts.append("%")
            continue
        flags = match["flags"]
        width = match["width"] or ""
        if width == "*":
            star = int(take())
            if star < 0:
                flags += "-"
                star = -star
            width = str(star)
        precision = match["precision"]
        spec = "%" + flags + width
        if precision == "*":
            star = int(take())
            if star >= 0:
                spec += f".{star}"
        elif precision is not None:
            spec += "." + (precision or "0")
        value = take()
        if conv == "p":
            address = value if isinstance(value, int) else id(value)
            align = "-" if "-" in flags else ""
            parts.append(("%" + align + width + "s") % f"0x{address:x}")
        else:
            parts.append((spec + conv) % (value,))
    parts.append(fmt[pos:])
    return "".join(parts), used


def format_objects(fmt: str | None, *args: Any) -> str:
    """Format ``fmt`` like printf, with ``%obj`` standing for an object's string."""
    if fmt is None:
        return ""
    pieces: list[str] = []
    remaining: Sequence[Any] = args
    while True:
        index = fmt.find(OBJECT_DIRECTIVE)
        if index < 0:
            text, _ = _cformat(fmt, remaining)
            pieces.append(text)
            return "".join(pieces)
        text, used = _cformat(fmt[:index], remaining)
        pieces.append(text)
        remaining = remaining[used:]
        if not remaining:
            raise TypeError("not enough arguments for format string")
        pieces.append(tostr(remaining[0]))
        remaining = remaining[1:]
        fmt = fmt[index + len(OBJECT_DIRECTIVE):]


def put_object(obj: Any, stream: TextIO | None = None) -> int:
    """Write the string form of ``obj``; return the number of characters."""
    out = sys.stdout if stream is None else stream
    text = tostr(obj)
    out.write(text)
    return len(text)


def fprintf(stream: TextIO, fmt: str | None, *args: Any) -> int:
    """Write formatted text to ``stream``; return the number of characters."""
    text = format_objects(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str | None, *args: Any) -> int:
    """Write formatted text to standard output; return the number of characters."""
    return fprintf(sys.stdout, fmt, *args)