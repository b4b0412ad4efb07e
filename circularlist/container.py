"""The ``CircularList`` container.

A mutable sequence with a movable pivot: ``cl[0]`` is the pivot element and
rotating moves the pivot without touching the stored elements.

    cl = CircularList([1, 2, 3])
    print(cl)             # [1, 2, 3]
    cl.rotate()
    print(cl)             # [2, 3, 1]
    cl.rotate()
    print(cl)             # [3, 1, 2]
    cl.rotate_backward()
    print(cl)             # [2, 3, 1]

Positional ``==`` compares the current logical order. ``circularly_equals``
compares element circles: ``[1, 2, 3]`` and ``[3, 1, 2]`` are circularly
equal, ``[1, 2, 3]`` and ``[1, 3, 2]`` are not.

An immutable list never changes its element circle: rotation and
``reset_order`` are allowed, inserting, removing and replacing are not.

Iterators are fail-fast: a structural change during iteration raises
``ConcurrentModificationError``. An iterator keeps the pivot it started with,
so rotating mid-iteration does not affect it.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Sequence
from typing import Any, Iterable, Iterator, List, MutableSequence, Optional, Union

from circularlist.equality import circularly_equals as _circularly_equals
from circularlist.errors import (
    ConcurrentModificationError,
    EmptyListError,
    ImmutableListError,
    ListIndexError,
)
from circularlist.original_order import OriginalOrder
from circularlist.pivot import PivotController
from circularlist.settings import get_settings
from circularlist.storage import PhysicalStore
from circularlist.types import (
    DEFAULT_MUTABILITY,
    EQUALITY_STRATEGIES,
    MUTABILITIES,
    EqualityStrategy,
    Mutability,
    T,
)


LOGGER = logging.getLogger("circularlist.container")


class CircularList(MutableSequence[T]):
    """Ordered, indexable sequence whose index 0 can be rotated in O(1)."""

    def __init__(
        self,
        items: Iterable[T] = (),
        *,
        mutability: Mutability = DEFAULT_MUTABILITY,
        equality_strategy: Optional[EqualityStrategy] = None,
        fail_fast: Optional[bool] = None,
    ) -> None:
        if mutability not in MUTABILITIES:
            raise ValueError(
                f"mutability must be one of {', '.join(MUTABILITIES)}, got {mutability!r}"
            )
        if equality_strategy is not None and equality_strategy not in EQUALITY_STRATEGIES:
            raise ValueError(
                f"equality_strategy must be one of {', '.join(EQUALITY_STRATEGIES)}, "
                f"got {equality_strategy!r}"
            )
        settings = get_settings()
        self._mutability: Mutability = mutability
        self._equality_strategy: EqualityStrategy = (
            settings.equality_strategy if equality_strategy is None else equality_strategy
        )
        self._fail_fast = settings.fail_fast_iteration if fail_fast is None else fail_fast
        self._store: PhysicalStore[T] = PhysicalStore(items)
        self._pivot = PivotController()
        self._origin = OriginalOrder(mutability)

    @classmethod
    def immutable(cls, items: Iterable[T] = (), **kwargs: Any) -> "CircularList[T]":
        """Create a list whose element circle is fixed at construction."""
        return cls(items, mutability="immutable", **kwargs)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def mutability(self) -> Mutability:
        return self._mutability

    @property
    def is_mutable(self) -> bool:
        return self._mutability == "mutable"

    @property
    def offset(self) -> int:
        """Physical slot currently addressed by logical index 0."""
        return self._pivot.offset

    @property
    def pivot(self) -> T:
        """The element at logical index 0."""
        return self._pivot_element("pivot")

    # ------------------------------------------------------------------
    # Index translation
    # ------------------------------------------------------------------

    def _logical_index(self, index: Any, operation: str) -> int:
        position = operator.index(index)
        size = self._store.size()
        if position < 0:
            position += size
        if not 0 <= position < size:
            raise ListIndexError(index, size, operation)
        return position

    def _slot(self, index: Any, operation: str) -> int:
        position = self._logical_index(index, operation)
        return self._pivot.to_physical(position, self._store.size())

    def _require_mutable(self, operation: str) -> None:
        if self.is_mutable:
            return
        LOGGER.debug(
            "circular_list.mutation_rejected",
            extra={"operation": operation, "mutability": self._mutability, "size": len(self)},
        )
        raise ImmutableListError(operation)

    def _require_not_empty(self, operation: str) -> None:
        if not self._store.size():
            raise EmptyListError(f"{operation} called on an empty CircularList")

    def _pivot_element(self, operation: str) -> T:
        self._require_not_empty(operation)
        return self._store.get(self._pivot.offset)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._store.size()

    def size(self) -> int:
        return self._store.size()

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        if isinstance(index, slice):
            return self._store.ordered_from(self._pivot.offset)[index]
        return self._store.get(self._slot(index, "get"))

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("CircularList does not support slice assignment")
        self._require_mutable("item assignment")
        self._store.set(self._slot(index, "set"), value)

    def __delitem__(self, index: Union[int, slice]) -> None:
        if isinstance(index, slice):
            raise TypeError("CircularList does not support slice deletion")
        self._require_mutable("item deletion")
        slot = self._slot(index, "remove")
        self._store.remove_at(slot)
        new_size = self._store.size()
        self._pivot.after_remove(slot, new_size)
        self._origin.after_remove(slot, new_size)

    def insert(self, index: int, value: T) -> None:
        """
        Insert ``value`` before logical ``index``.

        ``index`` may equal ``len(self)`` to append; negative values count
        from the logical end.

        Raises:
            ListIndexError: If ``index`` falls outside ``[-len, len]``
            ImmutableListError: If the list is immutable
        """
        self._require_mutable("insert")
        size = self._store.size()
        position = operator.index(index)
        if position < 0:
            position += size
        if not 0 <= position <= size:
            raise ListIndexError(index, size, "insert")

        slot, before_pivot = self._pivot.insertion_slot(position, size)
        self._store.insert(slot, value)
        self._pivot.after_insert(slot, before_pivot)
        # An element inserted at logical 0 becomes the pivot, and the anchor when it sits there.
        self._origin.after_insert(slot, size, claims_slot=position == 0)

    def clear(self) -> None:
        self._require_mutable("clear")
        self._store.clear()
        self._pivot.reset()
        self._origin.after_clear()

    def __iter__(self) -> Iterator[T]:
        size = self._store.size()
        pinned = PivotController(self._pivot.offset)
        expected = self._store.mod_count
        position = 0
        while position < size:
            if self._store.mod_count != expected:
                if self._fail_fast:
                    raise ConcurrentModificationError(
                        "CircularList changed size during iteration"
                    )
                # Unchecked mode: continue from the same position in the new order.
                size = self._store.size()
                pinned = PivotController(self._pivot.offset)
                expected = self._store.mod_count
                if position >= size:
                    return
            yield self._store.get(pinned.to_physical(position, size))
            position += 1

    # ------------------------------------------------------------------
    # Positional equality and text
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (CircularList, list)):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __str__(self) -> str:
        return str(list(self))

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.is_mutable:
            return f"{name}({list(self)!r})"
        return f"{name}.immutable({list(self)!r})"

    def copy(self) -> "CircularList[T]":
        """Return a list with the same logical order and mutability, pivot at 0."""
        return type(self)(
            self,
            mutability=self._mutability,
            equality_strategy=self._equality_strategy,
            fail_fast=self._fail_fast,
        )

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def rotate(self) -> None:
        """Make the element at index 1 the pivot. No-op for fewer than two elements."""
        self._pivot.rotate(self._store.size())

    def rotate_backward(self) -> None:
        """Make the last element the pivot. No-op for fewer than two elements."""
        self._pivot.rotate_backward(self._store.size())

    def rotate_by(self, steps: int) -> None:
        """Rotate forward ``steps`` times in O(1); negative ``steps`` rotate backward."""
        self._pivot.rotate_by(operator.index(steps), self._store.size())
        LOGGER.debug(
            "circular_list.rotated",
            extra={"steps": steps, "pivot": self._pivot.offset, "size": len(self)},
        )

    def get_and_rotate(self) -> T:
        """
        Return the current pivot, then rotate forward.

        Raises:
            EmptyListError: If the list is empty
        """
        value = self._pivot_element("get_and_rotate")
        self.rotate()
        return value

    def rotate_and_get(self) -> T:
        """
        Rotate forward, then return the new pivot.

        Raises:
            EmptyListError: If the list is empty
        """
        self._require_not_empty("rotate_and_get")
        self.rotate()
        return self.pivot

    def get_and_rotate_backward(self) -> T:
        """
        Return the current pivot, then rotate backward.

        Raises:
            EmptyListError: If the list is empty
        """
        value = self._pivot_element("get_and_rotate_backward")
        self.rotate_backward()
        return value

    def rotate_backward_and_get(self) -> T:
        """
        Rotate backward, then return the new pivot.

        Raises:
            EmptyListError: If the list is empty
        """
        self._require_not_empty("rotate_backward_and_get")
        self.rotate_backward()
        return self.pivot

    # ------------------------------------------------------------------
    # Original order
    # ------------------------------------------------------------------

    def reset_order(self) -> None:
        """
        Restore the original order.

        Immutable lists always return to their creation-time order. Mutable
        lists return to the last ``mark_order`` point (construction by
        default); after inserts or removals the restored pivot is best-effort
        and may differ from the historical one. Repeated calls have no effect.
        """
        self._pivot.reset(self._origin.reset_offset())
        LOGGER.debug(
            "circular_list.order_reset",
            extra={"pivot": self._pivot.offset, "mutability": self._mutability, "size": len(self)},
        )

    def mark_order(self) -> None:
        """Record the current order as the one ``reset_order`` restores."""
        if self._origin.is_fixed:
            raise ImmutableListError("mark_order")
        self._origin.mark(self._pivot.offset)
        LOGGER.debug(
            "circular_list.order_marked",
            extra={"pivot": self._pivot.offset, "size": len(self)},
        )

    def original_order(self) -> List[T]:
        """Return the elements in the order ``reset_order`` would produce."""
        return self._store.ordered_from(self._origin.reset_offset())

    # ------------------------------------------------------------------
    # Circular equality
    # ------------------------------------------------------------------

    def circularly_equals(self, other: object) -> bool:
        """
        Check whether ``other`` holds the same element circle as this list.

        Warning: O(n) with the default ``"linear"`` strategy but O(n^2) with
        ``"naive"``. Strings and bytes are never circularly equal to a list.
        """
        if isinstance(other, (str, bytes)) or not isinstance(other, Sequence):
            return False
        return _circularly_equals(self, other, self._equality_strategy)
