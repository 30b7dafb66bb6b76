"""Numeric problems: soup probabilities and magical numbers."""

from __future__ import annotations

import math
from bisect import bisect_left

MOD = 10**9 + 7
_SOUP_UNIT = 25
_SOUP_CONVERGED = 179


def soup_servings(n: int) -> float:
    """Return P(A empties first) + half of P(both empty together) for ``n`` ml each."""
    if n < 0:
        raise ValueError("n must be non-negative")
    units = (n + _SOUP_UNIT - 1) // _SOUP_UNIT
    if units >= _SOUP_CONVERGED:
        return 1.0
    table = [[0.0] * (units + 1) for _ in range(units + 1)]
    table[0][0] = 0.5
    table[0][1:] = [1.0] * units
    for i in range(1, units + 1):
        for j in range(1, units + 1):
            table[i][j] = (
                table[max(0, i - 4)][j]
                + table[max(0, i - 3)][j - 1]
                + table[max(0, i - 2)][max(0, j - 2)]
                + table[i - 1][max(0, j - 3)]
            ) / 4
    return table[units][units]


def nth_magical_number(n: int, a: int, b: int) -> int:
    """Return the n-th positive integer divisible by ``a`` or ``b``, mod 1e9+7."""
    if n < 1 or a < 1 or b < 1:
        raise ValueError("n, a and b must be positive")
    common = math.lcm(a, b)

    def magical_up_to(limit: int) -> int:
        return limit // a + limit // b - limit // common

    upper = min(a, b) * n
    return bisect_left(range(upper + 1), n, key=magical_up_to) % MOD