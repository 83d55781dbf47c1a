"""Typed, bounded parameter lists passed to constructors."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Any, Iterator

MAX_PARAM_LEN = 16


class ParamType(IntEnum):
    """The kinds of value a parameter may carry."""

    INT = 0
    SHORT = 1
    LONG = 2
    FLOAT = 3
    DOUBLE = 4
    CHAR = 5
    UNSIGNED = 6
    UNSIGNED_SHORT = 7
    UNSIGNED_LONG = 8
    UNSIGNED_CHAR = 9
    PTR = 10


def _wrap(value: Any, bits: int, signed: bool) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("a character parameter needs exactly one character")
        value = ord(value)
    number = int(value) & ((1 << bits) - 1)
    if signed and number >= 1 << (bits - 1):
        number -= 1 << bits
    return number


def _float32(value: Any) -> float:
    return struct.unpack("f", struct.pack("f", float(value)))[0]


_INTEGER_LAYOUT = {
    ParamType.INT: (32, True),
    ParamType.SHORT: (16, True),
    ParamType.LONG: (64, True),
    ParamType.CHAR: (8, True),
    ParamType.UNSIGNED: (32, False),
    ParamType.UNSIGNED_SHORT: (16, False),
    ParamType.UNSIGNED_LONG: (64, False),
    ParamType.UNSIGNED_CHAR: (8, False),
}


def _coerce(kind: ParamType, value: Any) -> Any:
    if kind in _INTEGER_LAYOUT:
        bits, signed = _INTEGER_LAYOUT[kind]
        return _wrap(value, bits, signed)
    if kind is ParamType.FLOAT:
        return _float32(value)
    if kind is ParamType.DOUBLE:
        return float(value)
    return value


class Params:
    """An ordered list of at most sixteen typed values."""

    __slots__ = ("_items",)

    def __init__(self, *args: tuple[ParamType, Any]) -> None:
        self._items: list[tuple[ParamType, Any]] = []
        self.push(*args)

    def push(self, *args: tuple[ParamType, Any]) -> Params:
        """Append ``(type, value)`` pairs, storing each value as its type holds it.

        Raises :class:`OverflowError` once the list is full; pairs before
        that point stay pushed.
        """
        for kind, value in args:
            if len(self._items) >= MAX_PARAM_LEN:
                raise OverflowError(
                    f"a parameter list holds at most {MAX_PARAM_LEN} values"
                )
            kind = ParamType(kind)
            self._items.append((kind, _coerce(kind, value)))
        return self

    def match(self, *args: ParamType) -> bool:
        """Tell whether the parameters have exactly these types, in order."""
        if len(args) != len(self._items):
            return False
        return all(kind == expected for (kind, _), expected in zip(self._items, args))

    def extract(self) -> tuple[Any, ...]:
        """Return the stored values, in order."""
        return tuple(value for _, value in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[ParamType, Any]]:
        return iter(self._items)

    def __repr__(self) -> str:
        inner = ", ".join(f"({kind.name}, {value!r})" for kind, value in self._items)
        return f"Params({inner})"