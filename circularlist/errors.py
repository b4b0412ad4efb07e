"""Exceptions raised by circular lists.

Each class also derives from the builtin that ordinary ``list`` code already
catches, so ``except IndexError`` keeps working for callers that treat a
``CircularList`` as a plain sequence.
"""

from __future__ import annotations


class CircularListError(Exception):
    """Base class for every circular list error."""

    pass


class EmptyListError(CircularListError, IndexError):
    """Raised when a get-and-rotate operation is called on an empty list."""

    pass


class ListIndexError(CircularListError, IndexError):
    """Raised when an index falls outside the valid range for an operation."""

    def __init__(self, index: int, size: int, operation: str = "access") -> None:
        self.index = index
        self.size = size
        self.operation = operation
        super().__init__(
            f"CircularList {operation} index {index} out of range for size {size}"
        )


class ImmutableListError(CircularListError, TypeError):
    """Raised when a structural mutation is attempted on an immutable list."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Immutable CircularList does not support {operation}; "
            "only rotation and reset_order are allowed"
        )


class ConcurrentModificationError(CircularListError, RuntimeError):
    """Raised by an iterator when its list was structurally changed mid-iteration."""

    pass
