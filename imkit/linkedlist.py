"""A list of protocol objects with per-list data ownership policy."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from imkit.core import clone, compare, tostr
from imkit.errors import IndexOutOfBound
from imkit.interfaces import DataPolicy, ImIIter, ImIList
from imkit.option import Option


class LinkedList(ImIList):
    """An ordered list; each element is cloned, taken over or borrowed."""

    def __init__(self, policy: Any = DataPolicy.CLONE) -> None:
        self._items: list[Any] = []
        self._policy = DataPolicy.from_value(policy)

    @property
    def policy(self) -> DataPolicy:
        """The policy applied to elements added from now on."""
        return self._policy

    def _hold(self, data: Any) -> Any:
        if self._policy is DataPolicy.CLONE:
            return clone(data)
        return data

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexOutOfBound(
                f"Index {index} is out of bound for a list of length "
                f"{len(self._items)}"
            )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check(index)
        return self._items[index]

    def set_policy(self, policy: DataPolicy) -> None:
        """Choose how elements added from now on are held."""
        self._policy = DataPolicy(policy)

    def insert(self, index: int, data: Any) -> None:
        """Insert ``data`` at an existing position.

        Index zero puts it first; the last index puts it after the last
        element; any other index puts it at that position.
        """
        self._check(index)
        held = self._hold(data)
        if index == 0:
            self._items.insert(0, held)
        elif index == len(self._items) - 1:
            self._items.append(held)
        else:
            self._items.insert(index, held)

    def append(self, data: Any) -> None:
        """Add ``data`` at the end."""
        self._items.append(self._hold(data))

    def remove(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._check(index)
        del self._items[index]

    def index_of(self, data: Any) -> Option[int]:
        """Return the position of the first element comparing equal to ``data``."""
        for index, item in enumerate(self._items):
            if compare(item, data) == 0:
                return Option.some(index)
        return Option.none()

    def retain(self, predicate: Callable[[Any], bool]) -> None:
        """Keep only the elements for which ``predicate`` is true."""
        self._items = [item for item in self._items if predicate(item)]

    def tostr(self) -> str:
        """Return the elements' strings, comma separated, in brackets."""
        return "[" + ", ".join(tostr(item) for item in self._items) + "]"


class LinkedListIter(ImIIter):
    """A cursor over a :class:`LinkedList`, starting at its first element."""

    def __init__(self, linked_list: LinkedList) -> None:
        if not isinstance(linked_list, LinkedList):
            raise TypeError("LinkedListIter takes a LinkedList")
        self._list = linked_list
        self._position = 0

    def next(self) -> Option[Any]:
        """Return the current element and move on, or an empty option at the end."""
        items = self._list._items
        if self._position >= len(items):
            return Option.none()
        item = items[self._position]
        self._position += 1
        return Option.some(item)

    def for_each(self, func: Callable[[Any, Any], None], ret: Any) -> None:
        """Call ``func(element, ret)`` for each element from the cursor on.

        The cursor itself does not move.
        """
        for item in self._list._items[self._position:]:
            func(item, ret)