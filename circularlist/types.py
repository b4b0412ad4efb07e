"""Type definitions shared across the circular list modules."""

from __future__ import annotations
from typing import Literal, Tuple, TypeVar


T = TypeVar("T")

# Whether the element circle of a list may change after construction
Mutability = Literal["mutable", "immutable"]

# Algorithm used to detect that two sequences are rotations of one another
EqualityStrategy = Literal["linear", "naive"]


MUTABILITIES: Tuple[Mutability, ...] = ("mutable", "immutable")
EQUALITY_STRATEGIES: Tuple[EqualityStrategy, ...] = ("linear", "naive")

DEFAULT_MUTABILITY: Mutability = "mutable"
DEFAULT_EQUALITY_STRATEGY: EqualityStrategy = "linear"
