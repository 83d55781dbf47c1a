"""Per-thread error state and the error object hierarchy."""

from __future__ import annotations

import sys
import threading
from enum import IntEnum
from typing import Any, TextIO

from imkit.core import ImObject

NO_ERROR_MESSAGE = "No error"


class ErrorCode(IntEnum):
    """Generic error codes."""

    OK = 0
    ILLEGAL_ARG = 1


_state = threading.local()


def set_error(code: int, message: str) -> None:
    """Record an error code and message for the current thread."""
    _state.code = code
    _state.message = message


def error_code() -> int:
    """Return the current thread's error code, or ``ErrorCode.OK``."""
    return getattr(_state, "code", ErrorCode.OK)


def error_message() -> str:
    """Return the current thread's error message, or ``"No error"``."""
    return getattr(_state, "message", NO_ERROR_MESSAGE)


def clear_error() -> None:
    """Forget the current thread's error."""
    for name in ("code", "message"):
        if hasattr(_state, name):
            delattr(_state, name)


def print_error(prefix: str, stream: TextIO | None = None) -> None:
    """Write ``prefix: message`` if the current thread has an error message."""
    message = getattr(_state, "message", None)
    if not message:
        return
    out = sys.stderr if stream is None else stream
    out.write(f"{prefix}: {message}\n")


class ImError(ImObject, Exception):
    """An error object carrying a numeric code and a description."""

    def __init__(self, code: int, desc: str) -> None:
        if not isinstance(code, int) or not isinstance(desc, str):
            raise TypeError("ImError takes (int, str)")
        Exception.__init__(self, desc)
        self.code = code
        self.desc = desc

    def tostr(self) -> str:
        """Return the description."""
        return self.desc


class _DefinedError(ImError):
    """An error kind with its own default code and description."""

    DEFAULT_CODE = 0
    DEFAULT_DESC = ""

    def __init__(self, *args: Any) -> None:
        if not args:
            code, desc = self.DEFAULT_CODE, self.DEFAULT_DESC
        elif len(args) == 1 and isinstance(args[0], str):
            code, desc = self.DEFAULT_CODE, args[0]
        elif len(args) == 2 and isinstance(args[0], int) and isinstance(args[1], str):
            code, desc = args
        else:
            raise TypeError(
                f"{type(self).__name__} takes (), (str) or (int, str)"
            )
        super().__init__(code, desc)


class IndexOutOfBound(_DefinedError):
    """An index lies outside the valid range."""

    DEFAULT_CODE = 34
    DEFAULT_DESC = "Index out of bound"