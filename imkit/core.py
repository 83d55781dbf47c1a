"""Base object protocol: string form, comparison, cloning and assignment."""

from __future__ import annotations

from typing import Any, TypeVar

DIFFERENT_CLASSES = 2**31 - 1
"""Result of :func:`compare` for objects of different classes."""

_T = TypeVar("_T", bound="ImObject")


class ClassDefinitionError(TypeError):
    """Raised when a class lacks an operation the object protocol needs."""

    code = 1


class ImObject:
    """Base of every object that takes part in the protocol.

    Subclasses override the operations they support.  The defaults give an
    address-based string and ordering, and refuse to clone or assign.
    """

    def tostr(self) -> str:
        """Return the string form of the object."""
        return f"0x{id(self):x}"

    def compare(self, other: ImObject) -> int:
        """Compare with an object of the same class; zero means equal."""
        return id(self) - id(other)

    def clone(self: _T) -> _T:
        """Return an independent copy of the object."""
        raise ClassDefinitionError(f"{type(self).__name__}: No clone")

    def assign(self, other: ImObject) -> None:
        """Make this object take the value of ``other``."""
        raise ClassDefinitionError(f"{type(self).__name__}: No assign")

    def __str__(self) -> str:
        return self.tostr()


def _require(obj: Any) -> ImObject:
    if not isinstance(obj, ImObject):
        raise TypeError(f"{type(obj).__name__} is not an ImObject")
    return obj


def tostr(obj: ImObject) -> str:
    """Return the string form of ``obj``."""
    return _require(obj).tostr()


def compare(a: ImObject, b: ImObject) -> int:
    """Compare two objects.

    The same object compares equal to itself, objects of different classes
    give :data:`DIFFERENT_CLASSES`, and otherwise the class decides.
    """
    _require(a)
    _require(b)
    if a is b:
        return 0
    if type(a) is not type(b):
        return DIFFERENT_CLASSES
    return a.compare(b)


def clone(obj: _T) -> _T:
    """Return an independent copy of ``obj``."""
    return _require(obj).clone()


def assign(obj: ImObject, source: ImObject) -> ImObject:
    """Give ``obj`` the value of ``source`` and return ``source``."""
    _require(obj).assign(_require(source))
    return source


def is_instance(obj: Any, klass: type) -> bool:
    """Tell whether ``obj`` belongs to ``klass`` or one of its subclasses."""
    return isinstance(obj, klass)