"""Rotation-invariant equality between sequences.

Two sequences are circularly equal when they have the same length ``n`` and
some rotation ``k`` in ``[0, n)`` satisfies ``a[i] == b[(i + k) % n]`` for
every ``i``.

Cost:
- ``"linear"`` (default): O(n) time and O(n) extra space in the worst case.
  A multiset check rejects most non-rotations early when all elements are
  hashable; then Knuth-Morris-Pratt searches for ``a`` inside ``b`` doubled.
  Only ``==`` is ever called between elements.
- ``"naive"``: O(n^2) time in the worst case, O(n) extra space. Tries every
  rotation in turn.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Callable, Dict, List, Optional, Sequence

from circularlist.settings import get_settings
from circularlist.types import EQUALITY_STRATEGIES, EqualityStrategy


LOGGER = logging.getLogger("circularlist.equality")


def _same_multiset(a: List[Any], b: List[Any]) -> Optional[bool]:
    """Compare element counts, or return ``None`` when elements are unhashable."""
    try:
        return Counter(a) == Counter(b)
    except TypeError:
        return None


def _failure_table(pattern: List[Any]) -> List[int]:
    """KMP prefix table: longest proper border of each prefix of ``pattern``."""
    table = [0] * len(pattern)
    border = 0
    for i in range(1, len(pattern)):
        while border and pattern[i] != pattern[border]:
            border = table[border - 1]
        if pattern[i] == pattern[border]:
            border += 1
        table[i] = border
    return table


def _linear_rotation(a: List[Any], b: List[Any]) -> Optional[int]:
    n = len(a)
    if _same_multiset(a, b) is False:
        return None

    table = _failure_table(a)
    matched = 0
    # Text is ``b + b`` without the final element, read modulo n.
    for j in range(2 * n - 1):
        item = b[j if j < n else j - n]
        while matched and a[matched] != item:
            matched = table[matched - 1]
        if a[matched] == item:
            matched += 1
        if matched == n:
            return j - n + 1
    return None


def _naive_rotation(a: List[Any], b: List[Any]) -> Optional[int]:
    n = len(a)
    for k in range(n):
        if all(a[i] == b[(i + k) % n] for i in range(n)):
            return k
    return None


_STRATEGIES: Dict[str, Callable[[List[Any], List[Any]], Optional[int]]] = {
    "linear": _linear_rotation,
    "naive": _naive_rotation,
}


def find_rotation(
    a: Sequence[Any],
    b: Sequence[Any],
    strategy: Optional[EqualityStrategy] = None,
) -> Optional[int]:
    """
    Find the smallest rotation that lines ``b`` up with ``a``.

    Worst case O(n) with the ``"linear"`` strategy, O(n^2) with ``"naive"``.

    Args:
        a: First sequence
        b: Second sequence
        strategy: Search algorithm; defaults to the configured strategy

    Returns:
        Smallest ``k`` with ``a[i] == b[(i + k) % n]`` for all ``i``, or
        ``None`` when ``b`` is not a rotation of ``a``

    Raises:
        ValueError: If ``strategy`` is not a known strategy name
    """
    if strategy is None:
        strategy = get_settings().equality_strategy
    if strategy not in _STRATEGIES:
        raise ValueError(
            f"Unknown equality strategy {strategy!r}; expected one of {', '.join(EQUALITY_STRATEGIES)}"
        )

    left = list(a)
    right = list(b)
    if len(left) != len(right):
        return None
    if not left:
        return 0

    rotation = _STRATEGIES[strategy](left, right)
    LOGGER.debug(
        "circular_equality.checked",
        extra={"size": len(left), "strategy": strategy, "rotation": rotation},
    )
    return rotation


def circularly_equals(
    a: Sequence[Any],
    b: Sequence[Any],
    strategy: Optional[EqualityStrategy] = None,
) -> bool:
    """
    Check whether ``a`` and ``b`` hold the same element circle.

    Warning: worst case O(n^2) with the ``"naive"`` strategy; the default
    ``"linear"`` strategy is O(n).
    """
    return find_rotation(a, b, strategy) is not None
