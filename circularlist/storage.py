"""Physical element storage for circular lists.

Elements are kept in rotation-independent order. Callers translate logical
indices through :class:`circularlist.pivot.PivotController` before reaching
this layer.
"""

from __future__ import annotations

from typing import Generic, Iterable, List

from circularlist.errors import ListIndexError
from circularlist.types import T


class PhysicalStore(Generic[T]):
    """Dynamic array of elements addressed by physical index."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = list(items)
        self.mod_count = 0

    def size(self) -> int:
        return len(self._items)

    def _check_index(self, index: int, operation: str) -> None:
        if not 0 <= index < len(self._items):
            raise ListIndexError(index, len(self._items), operation)

    def get(self, index: int) -> T:
        self._check_index(index, "get")
        return self._items[index]

    def set(self, index: int, value: T) -> T:
        """Replace the element at ``index`` and return the previous one."""
        self._check_index(index, "set")
        previous = self._items[index]
        self._items[index] = value
        return previous

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at ``index`` (``0 <= index <= size``)."""
        if not 0 <= index <= len(self._items):
            raise ListIndexError(index, len(self._items), "insert")
        self._items.insert(index, value)
        self.mod_count += 1

    def remove_at(self, index: int) -> T:
        self._check_index(index, "remove")
        value = self._items.pop(index)
        self.mod_count += 1
        return value

    def clear(self) -> None:
        self._items.clear()
        self.mod_count += 1

    def ordered_from(self, start: int) -> List[T]:
        """Return the elements as one list, reading cyclically from ``start``."""
        if not self._items:
            return []
        return self._items[start:] + self._items[:start]
