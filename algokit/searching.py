"""Binary search over sorted sequences."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["binary_search", "count_at_most"]


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Index of ``target`` in the ascending sequence ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        value = items[middle]
        if value == target:
            return middle
        if target > value:
            low = middle + 1
        else:
            high = middle - 1
    return None


def count_at_most(items: Iterable[Any], target: Any) -> int:
    """How many of ``items`` are less than or equal to ``target``."""
    return bisect_right(sorted(items), target)