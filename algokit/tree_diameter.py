"""Longest path in a tree whose nodes and edges both carry weights."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def farthest_node(
    start: int, distances: Sequence[Sequence[int]], weights: Sequence[int]
) -> tuple[int, int]:
    """Return the node other than ``start`` maximising path length plus its weight.

    ``distances`` is an adjacency matrix where 0 means no edge. The result is
    ``(node, distance + weight)``; if no node scores above 0, ``(start, 0)``.
    """
    count = len(weights)
    reached = [0] * count
    visited = [False] * count
    visited[start] = True
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour, length in enumerate(distances[current][:count]):
            if length and not visited[neighbour]:
                reached[neighbour] = reached[current] + length
                visited[neighbour] = True
                queue.append(neighbour)

    best_node, best_score = start, 0
    for node, (distance, weight) in enumerate(zip(reached, weights)):
        if node != start and distance + weight > best_score:
            best_node, best_score = node, distance + weight
    return best_node, best_score


def max_weighted_path(
    weights: Iterable[int], edges: Iterable[tuple[int, int, int]]
) -> int:
    """Return the heaviest path, counting edge lengths and end-node weights.

    ``edges`` holds ``(a, b, length)`` triples with 1-based node numbers; a
    tree of n nodes needs exactly n - 1 of them.
    """
    weights = list(weights)
    edges = list(edges)
    count = len(weights)
    if count == 0:
        raise ValueError("a tree needs at least one node")
    if len(edges) != count - 1:
        raise ValueError(f"expected {count - 1} edges, got {len(edges)}")
    matrix = [[0] * count for _ in range(count)]
    for a, b, length in edges:
        if not (1 <= a <= count and 1 <= b <= count):
            raise ValueError(f"edge ({a}, {b}) refers to a missing node")
        matrix[a - 1][b - 1] = length
        matrix[b - 1][a - 1] = length
    first, _ = farthest_node(0, matrix, weights)
    _, span = farthest_node(first, matrix, weights)
    return span + weights[first]


def _take(numbers: Iterator[int]) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> int:
    """Read a weighted tree from standard input and print its heaviest path."""
    parser = argparse.ArgumentParser(
        description="Read n, then n node weights, then n-1 edges 'a b length' "
        "from standard input and print the heaviest path."
    )
    parser.parse_args(argv)
    try:
        numbers = iter([int(token) for token in sys.stdin.read().split()])
        count = _take(numbers)
        weights = [_take(numbers) for _ in range(count)]
        edges = [
            (_take(numbers), _take(numbers), _take(numbers)) for _ in range(count - 1)
        ]
        result = max_weighted_path(weights, edges)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(result)
    return 0