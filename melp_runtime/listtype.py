"""A growable list with explicit capacity, as used by MELP programs."""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator, Optional

from melp_runtime.errors import runtime_error

__all__ = ["MelpList"]

_INITIAL_CAPACITY = 4
_GROWTH_FACTOR = 2


class MelpList:
    """Dynamic array whose capacity starts at 4 and doubles when full.

    Indices are zero-based and non-negative; ``None`` is not a valid element.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = []
        self._capacity = _INITIAL_CAPACITY
        if items is not None:
            for value in items:
                self.append(value)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MelpList({self._items!r})"

    def _in_bounds(self, index: Any) -> bool:
        position = operator.index(index)
        return 0 <= position < len(self._items)

    @staticmethod
    def _require_value(value: Any) -> None:
        if value is None:
            raise ValueError("list elements must not be None")

    def __getitem__(self, index: int) -> Any:
        if not self._in_bounds(index):
            runtime_error("List index out of bounds")
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if not self._in_bounds(index):
            raise IndexError("list index out of bounds")
        self._require_value(value)
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def capacity(self) -> int:
        """Number of slots allocated."""
        return self._capacity

    def is_empty(self) -> bool:
        """True when the list holds no elements."""
        return not self._items

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity *= _GROWTH_FACTOR

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self._require_value(value)
        self._grow_if_full()
        self._items.append(value)

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._require_value(value)
        self._grow_if_full()
        self._items.insert(0, value)

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``, shifting later ones left."""
        if not self._in_bounds(index):
            raise IndexError("list index out of bounds")
        del self._items[index]

    def clear(self) -> None:
        """Remove every element; the capacity is kept."""
        self._items.clear()

    def copy(self) -> "MelpList":
        """A new list with the same elements."""
        clone = MelpList()
        clone.reserve(len(self._items))
        for value in self._items:
            clone.append(value)
        return clone

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()

    def reserve(self, new_capacity: int) -> None:
        """Make room for at least ``new_capacity`` elements."""
        if new_capacity > self._capacity:
            self._capacity = new_capacity

    def debug_string(self) -> str:
        """Render as ``List[length/capacity]: [a, b, ...]``."""
        rendered = ", ".join(
            str(value) if isinstance(value, int) else repr(value) for value in self._items
        )
        return f"List[{len(self._items)}/{self._capacity}]: [{rendered}]"