"""A stack that pops the most frequent value, newest first among ties."""

from __future__ import annotations

from collections import Counter, defaultdict


class FreqStack:
    """Stack whose pop returns the most frequent value, the latest among ties."""

    def __init__(self) -> None:
        self._counts: Counter[int] = Counter()
        self._groups: defaultdict[int, list[int]] = defaultdict(list)
        self._max_freq = 0

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        self._counts[val] += 1
        frequency = self._counts[val]
        self._groups[frequency].append(val)
        self._max_freq = max(self._max_freq, frequency)

    def pop(self) -> int:
        """Remove and return the most frequent value; raise IndexError if empty."""
        if not self._max_freq:
            raise IndexError("pop from empty FreqStack")
        group = self._groups[self._max_freq]
        val = group.pop()
        self._counts[val] -= 1
        if not group:
            del self._groups[self._max_freq]
            self._max_freq -= 1
        return val