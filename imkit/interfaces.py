"""Abstract list and iterator interfaces, and the data ownership policies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Callable, Iterator

from imkit.core import ImObject, compare
from imkit.option import Option


class DataPolicy(IntEnum):
    """How a container takes hold of the data it is given."""

    CLONE = 0
    TRANSFER = 1
    BORROW = 2

    @classmethod
    def from_value(cls, value: Any) -> DataPolicy:
        """Return the policy ``value`` names; anything unknown means ``CLONE``."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            return cls.CLONE


class ImIList(ImObject, ABC):
    """An indexable list of protocol objects."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def get(self, index: int) -> Any:
        """Return the element at ``index``; raise ``IndexOutOfBound`` if absent."""

    @abstractmethod
    def set_policy(self, policy: DataPolicy) -> None:
        """Choose how elements added from now on are held."""

    @abstractmethod
    def insert(self, index: int, data: Any) -> None:
        """Insert ``data`` at ``index``; raise ``IndexOutOfBound`` if out of range."""

    @abstractmethod
    def append(self, data: Any) -> None:
        """Add ``data`` at the end."""

    @abstractmethod
    def remove(self, index: int) -> None:
        """Remove the element at ``index``; raise ``IndexOutOfBound`` if absent."""

    def __iter__(self) -> Iterator[Any]:
        return (self.get(index) for index in range(len(self)))

    def index_of(self, data: Any) -> Option[int]:
        """Return the position of the first element comparing equal to ``data``."""
        for index, item in enumerate(self):
            if compare(item, data) == 0:
                return Option.some(index)
        return Option.none()

    def retain(self, predicate: Callable[[Any], bool]) -> None:
        """Keep only the elements for which ``predicate`` is true."""
        doomed = [index for index, item in enumerate(self) if not predicate(item)]
        for index in reversed(doomed):
            self.remove(index)


class ImIIter(ImObject, ABC):
    """A cursor that hands out elements one at a time."""

    @abstractmethod
    def next(self) -> Option[Any]:
        """Return the next element, or an empty option when exhausted."""

    def for_each(self, func: Callable[[Any, Any], None], ret: Any) -> None:
        """Call ``func(element, ret)`` for every remaining element."""
        while (item := self.next()).is_some():
            func(item.unwrap(), ret)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        item = self.next()
        if item.is_none():
            raise StopIteration
        return item.unwrap()