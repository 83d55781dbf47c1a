"""Protocol objects wrapping a single C-typed number or character."""

from __future__ import annotations

import math
from typing import Any, ClassVar

from imkit.core import ImObject
from imkit.params import ParamType, Params

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - 2**32 if number > _INT_MAX else number


def _clamp_int32(number: int) -> int:
    return max(_INT_MIN, min(_INT_MAX, number))


class Wrapped(ImObject):
    """A single value stored the way its C type would hold it.

    Subclasses fix the parameter type, the print format and whether the
    value is floating point.
    """

    PARAM_TYPE: ClassVar[ParamType]
    FORMAT: ClassVar[str]
    FLOATING: ClassVar[bool] = False

    def __init__(self, val: Any) -> None:
        kind = getattr(type(self), "PARAM_TYPE", None)
        if kind is None:
            raise TypeError(f"{type(self).__name__} does not name a value type")
        (self.val,) = Params((kind, val)).extract()

    def _difference(self, other: Wrapped) -> int:
        diff = self.val - other.val
        if self.FLOATING:
            if math.isnan(diff) or math.isinf(diff):
                return _INT_MIN
            return _clamp_int32(math.trunc(diff))
        return _to_int32(diff)

    def tostr(self) -> str:
        """Return the value printed with the type's format."""
        if self.FORMAT == "%c":
            return self.FORMAT % (self.val & 0xFF)
        return self.FORMAT % self.val

    def compare(self, other: Wrapped) -> int:
        """Return the truncated difference, or its sign when that truncates to zero."""
        if self.val == other.val:
            return 0
        cmp = self._difference(other)
        if cmp != 0:
            return cmp
        return 1 if self.val > other.val else -1

    def clone(self) -> Wrapped:
        """Return a new object holding the same value."""
        return type(self)(self.val)

    def assign(self, other: Wrapped) -> None:
        """Take the value of ``other``."""
        if not isinstance(other, type(self)):
            raise TypeError(
                f"cannot assign {type(other).__name__} to {type(self).__name__}"
            )
        self.val = other.val

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.val!r})"


class ImInt(Wrapped):
    """A 32-bit signed integer."""

    PARAM_TYPE = ParamType.INT
    FORMAT = "%d"


class ImShort(Wrapped):
    """A 16-bit signed integer."""

    PARAM_TYPE = ParamType.SHORT
    FORMAT = "%d"


class ImLong(Wrapped):
    """A 64-bit signed integer."""

    PARAM_TYPE = ParamType.LONG
    FORMAT = "%d"


class ImFloat(Wrapped):
    """A single-precision float."""

    PARAM_TYPE = ParamType.FLOAT
    FORMAT = "%f"
    FLOATING = True


class ImDouble(Wrapped):
    """A double-precision float."""

    PARAM_TYPE = ParamType.DOUBLE
    FORMAT = "%f"
    FLOATING = True


class ImChar(Wrapped):
    """A signed 8-bit character."""

    PARAM_TYPE = ParamType.CHAR
    FORMAT = "%c"


class ImUint(Wrapped):
    """A 32-bit unsigned integer."""

    PARAM_TYPE = ParamType.UNSIGNED
    FORMAT = "%d"


class ImUshort(Wrapped):
    """A 16-bit unsigned integer."""

    PARAM_TYPE = ParamType.UNSIGNED_SHORT
    FORMAT = "%d"


class ImULong(Wrapped):
    """A 64-bit unsigned integer."""

    PARAM_TYPE = ParamType.UNSIGNED_LONG
    FORMAT = "%d"


class ImUChar(Wrapped):
    """An unsigned 8-bit character."""

    PARAM_TYPE = ParamType.UNSIGNED_CHAR
    FORMAT = "%c"