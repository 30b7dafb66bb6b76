"""Binary search over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

NOT_FOUND = -1


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        probe = values[mid]
        if probe == target:
            return mid
        if probe < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def first_greater(values: Sequence[int], target: int) -> int:
    """Return the first element of ``values`` greater than ``target``, or -1."""
    index = bisect_right(values, target)
    return values[index] if index < len(values) else NOT_FOUND


def last_less(values: Sequence[int], target: int) -> int:
    """Return the last element of ``values`` less than ``target``, or -1."""
    index = bisect_left(values, target) - 1
    return values[index] if index >= 0 else NOT_FOUND