"""A protocol object boxing arbitrary data with caller-supplied operations."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable

from imkit.core import ClassDefinitionError, ImObject


def _no_dtor(data: Any) -> None:
    return None


def _no_assign(target: Any, source: Any) -> None:
    raise ClassDefinitionError("Box data has no assign")


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class BoxMethods:
    """The operations a :class:`Box` applies to its data."""

    dtor: Callable[[Any], None] = _no_dtor
    clone: Callable[[Any], Any] = copy.deepcopy
    assign: Callable[[Any, Any], None] = _no_assign
    compare: Callable[[Any, Any], int] = _natural_compare
    tostr: Callable[[Any], str] = field(default=str)


class Box(ImObject):
    """Holds a private copy of some data and the operations on it.

    Used as a context manager, the data's destructor runs on exit.
    """

    def __init__(self, data: Any, methods: BoxMethods) -> None:
        self.methods = methods
        self.data = methods.clone(data)

    def tostr(self) -> str:
        """Return the data's string form."""
        return self.methods.tostr(self.data)

    def compare(self, other: Box) -> int:
        """Compare the boxed data."""
        return self.methods.compare(self.data, other.data)

    def clone(self) -> Box:
        """Return a new box holding a copy of the data."""
        return Box(self.data, self.methods)

    def assign(self, other: Box) -> None:
        """Give this box's data the value of ``other``'s data."""
        self.methods.assign(self.data, other.data)

    def __enter__(self) -> Box:
        return self

    def __exit__(self, *exc: object) -> None:
        self.methods.dtor(self.data)