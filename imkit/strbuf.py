"""A growable string that takes part in the object protocol."""

from __future__ import annotations

from typing import Any

from imkit.core import ImObject
from imkit.errors import IndexOutOfBound
from imkit.textio import _cformat


class ImStr(ImObject):
    """A mutable string with append, insert and delete operations."""

    def __init__(self) -> None:
        self._text = ""

    def view(self) -> str:
        """Return the current contents."""
        return self._text

    def append(self, text: str) -> None:
        """Append ``text``."""
        if not isinstance(text, str):
            raise TypeError("append takes a str")
        self._text += text

    def append_char(self, char: str) -> None:
        """Append a single character."""
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError("append_char takes a single character")
        self._text += char

    def append_int(self, value: int) -> None:
        """Append an integer in decimal."""
        self._text += "%d" % value

    def append_real(self, value: float) -> None:
        """Append a number with six decimals."""
        self._text += "%f" % value

    def append_fmt(self, fmt: str, *args: Any) -> None:
        """Append printf-style formatted text."""
        text, _ = _cformat(fmt, args)
        self._text += text

    def insert_at(self, index: int, text: str) -> None:
        """Insert ``text`` before position ``index`` (which may equal the length)."""
        if index < 0 or index > len(self._text):
            raise IndexOutOfBound("Index out of bound")
        self._text = self._text[:index] + text + self._text[index:]

    def delete(self, start: int, end: int) -> None:
        """Remove the characters from ``start`` up to, not including, ``end``."""
        length = len(self._text)
        if start < 0 or end < 0 or start > length or end > length:
            raise IndexOutOfBound("Index out of bound")
        if start > end:
            raise ValueError("start index > end index")
        self._text = self._text[:start] + self._text[end:]

    def set_char_at(self, index: int, char: str) -> None:
        """Replace the character at ``index``."""
        if index < 0 or index >= len(self._text):
            raise IndexOutOfBound("Index out of bound")
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError("set_char_at takes a single character")
        self._text = self._text[:index] + char + self._text[index + 1:]

    def tostr(self) -> str:
        """Return a copy of the contents."""
        return self._text

    def compare(self, other: ImStr) -> int:
        """Order by contents: negative, zero or positive."""
        return (self._text > other._text) - (self._text < other._text)

    def clone(self) -> ImStr:
        """Return an independent string with the same contents."""
        copy = ImStr()
        copy._text = self._text
        return copy

    def assign(self, other: ImStr) -> None:
        """Take the contents of ``other``."""
        if not isinstance(other, ImStr):
            raise TypeError("can only assign an ImStr")
        self._text = other._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"ImStr({self._text!r})"