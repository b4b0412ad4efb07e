"""
Rotation-aware lists.

``CircularList`` is a mutable sequence whose index 0 (the pivot) can be moved
forward or backward in O(1) without moving any element. It also offers
rotation-invariant equality through ``circularly_equals``.
"""

from circularlist.types import EqualityStrategy, Mutability
from circularlist.errors import (
    CircularListError,
    ConcurrentModificationError,
    EmptyListError,
    ImmutableListError,
    ListIndexError,
)
from circularlist.equality import circularly_equals, find_rotation
from circularlist.container import CircularList
from circularlist.settings import (
    CircularListSettings,
    settings_from_env,
    validate_settings_environment,
)
from circularlist.logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "CircularList",
    "Mutability",
    "EqualityStrategy",
    "circularly_equals",
    "find_rotation",
    "CircularListError",
    "ConcurrentModificationError",
    "EmptyListError",
    "ImmutableListError",
    "ListIndexError",
    "CircularListSettings",
    "settings_from_env",
    "validate_settings_environment",
    "configure_logging",
]
