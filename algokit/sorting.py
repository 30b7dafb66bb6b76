"""Quicksort with a first-element pivot."""

from __future__ import annotations

from collections.abc import Iterable


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the items of ``values`` in ascending order as a new list."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        begin, end = pending.pop()
        if begin >= end:
            continue
        pivot = items[begin]
        i, j = begin, end
        while i < j:
            while i < j and items[j] >= pivot:
                j -= 1
            items[i] = items[j]
            while i < j and items[i] <= pivot:
                i += 1
            items[j] = items[i]
        items[j] = pivot
        pending.append((j + 1, end))
        pending.append((begin, j - 1))
    return items