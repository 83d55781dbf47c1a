"""Fatal errors: report, show the stack and stop."""

from __future__ import annotations

import inspect
import sys
import traceback
from typing import Any

from imkit import log
from imkit.errors import print_error
from imkit.log import Level
from imkit.textio import _cformat

EXIT_FAILURE = 1


class Panic(SystemExit):
    """Raised by :func:`panic`; ends the program with a failure status."""

    def __init__(self, message: str) -> None:
        super().__init__(EXIT_FAILURE)
        self.message = message

    def __str__(self) -> str:
        return self.message


def format_trace() -> str:
    """Return the current call stack, innermost call last."""
    return "".join(traceback.format_stack()[:-1])


def _caller() -> tuple[str, int]:
    frame = inspect.currentframe()
    for _ in range(2):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "?", 0
    return frame.f_code.co_filename, frame.f_lineno


def panic(fmt: str, *args: Any) -> None:
    """Report a fatal error on standard error and raise :class:`Panic`."""
    file, line = _caller()
    err = sys.stderr
    saved = log.get_mask()
    log.set_min(Level.TRACE)
    try:
        log.log_color(Level.FATAL, "Program panicked", stream=err,
                      file=file, line=line)
        print_error("imerrno", err)
        message, _ = _cformat(fmt, args)
        err.write(f"Panic message: {message}\n")
        log.log_color(Level.TRACE, "", stream=err, file=file, line=line)
        err.write(format_trace())
    finally:
        log.set_mask(saved)
    raise Panic(message)


def check_eq(value: Any, expected: Any) -> None:
    """Panic unless ``value`` equals ``expected``."""
    if value != expected:
        panic("Assertion error: %s != %s", repr(value), repr(expected))


def check_ne(value: Any, unexpected: Any) -> None:
    """Panic if ``value`` equals ``unexpected``."""
    if value == unexpected:
        panic("Assertion error: %s == %s", repr(value), repr(unexpected))