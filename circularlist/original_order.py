"""Original-order tracking for ``reset_order``.

An immutable list never changes its physical order, so its original order is
simply physical slot 0. A mutable list keeps an anchor: the physical slot that
held logical index 0 at the last stabilization point. Structural edits move
the anchor along with its element, the same way they move the pivot. Once the
anchored element is removed the anchor settles on its successor, so after
structural mutation ``reset_order`` is best-effort rather than historical.
"""

from __future__ import annotations

from circularlist.pivot import offset_after_insert, offset_after_remove
from circularlist.types import Mutability


class OriginalOrder:
    """Remembers where a circular list's original order starts."""

    def __init__(self, mutability: Mutability) -> None:
        self.mutability = mutability
        self.anchor = 0

    @property
    def is_fixed(self) -> bool:
        """Immutable lists capture their order once, at construction."""
        return self.mutability == "immutable"

    def mark(self, offset: int) -> None:
        """Record ``offset`` as the new stabilization point."""
        self.anchor = offset

    def after_insert(self, slot: int, old_size: int, claims_slot: bool = False) -> None:
        if old_size == 0:
            self.anchor = 0
            return
        self.anchor = offset_after_insert(self.anchor, slot, claims_slot)

    def after_remove(self, slot: int, new_size: int) -> None:
        self.anchor = offset_after_remove(self.anchor, slot, new_size)

    def after_clear(self) -> None:
        self.anchor = 0

    def reset_offset(self) -> int:
        """Pivot offset that restores the original order."""
        if self.is_fixed:
            return 0
        return self.anchor
