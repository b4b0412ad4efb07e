"""Pivot bookkeeping: which physical slot is logical index 0.

All modular index arithmetic for circular lists lives in this module.
"""

from __future__ import annotations

from typing import Tuple


def offset_after_insert(offset: int, slot: int, claims_slot: bool = False) -> int:
    """
    Adjust an offset after an element was inserted at physical ``slot``.

    Inserting at or before the offset's slot shifts the element it points at
    one place to the right, and the offset follows that element. With
    ``claims_slot`` an insert at the offset's own slot leaves the offset on
    the new element instead.

    Args:
        offset: Physical slot the offset pointed at before the insert
        slot: Physical slot the new element now occupies
        claims_slot: Whether the new element takes over the offset

    Returns:
        Adjusted offset
    """
    if slot < offset or (slot == offset and not claims_slot):
        return offset + 1
    return offset


def offset_after_remove(offset: int, slot: int, new_size: int) -> int:
    """
    Adjust an offset after the element at physical ``slot`` was removed.

    Removing the element under the offset moves the offset onto its
    successor, wrapping to the first slot when the removed element was last.

    Args:
        offset: Physical slot the offset pointed at before the removal
        slot: Physical slot that was removed
        new_size: Number of elements left

    Returns:
        Adjusted offset, always within ``[0, new_size)`` or ``0`` when empty
    """
    if slot < offset:
        offset -= 1
    if offset >= new_size:
        return 0
    return offset


class PivotController:
    """Owns the pivot offset of a circular list."""

    def __init__(self, offset: int = 0) -> None:
        self.offset = offset

    def to_physical(self, index: int, size: int) -> int:
        """Translate a logical index in ``[0, size)`` to a physical slot."""
        slot = self.offset + index
        if slot >= size:
            slot -= size
        return slot

    def insertion_slot(self, index: int, size: int) -> Tuple[int, bool]:
        """
        Physical slot for an insert at logical ``index`` in ``[0, size]``.

        Returns:
            Tuple of (slot, before_pivot) where ``before_pivot`` tells whether
            the new element lands before the pivot's physical slot
        """
        slot = self.offset + index
        if slot > size:
            return slot - size, True
        return slot, False

    def after_insert(self, slot: int, before_pivot: bool) -> None:
        """Keep the pivot element in place; a new element at logical 0 becomes the pivot."""
        self.offset = offset_after_insert(self.offset, slot, claims_slot=not before_pivot)

    def after_remove(self, slot: int, new_size: int) -> None:
        self.offset = offset_after_remove(self.offset, slot, new_size)

    def rotate(self, size: int) -> None:
        """Advance the pivot by one element; no-op for fewer than two elements."""
        if size <= 1:
            return
        self.offset += 1
        if self.offset == size:
            self.offset = 0

    def rotate_backward(self, size: int) -> None:
        """Retreat the pivot by one element; no-op for fewer than two elements."""
        if size <= 1:
            return
        if self.offset == 0:
            self.offset = size
        self.offset -= 1

    def rotate_by(self, steps: int, size: int) -> None:
        """Advance the pivot by ``steps`` (negative retreats)."""
        if size <= 1:
            return
        self.offset = (self.offset + steps) % size

    def reset(self, offset: int = 0) -> None:
        self.offset = offset
