"""Array, counting and subset problems."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations

MOD = 10**9 + 7


def box_delivering(
    boxes: Iterable[Sequence[int]],
    ports_count: int,
    max_boxes: int,
    max_weight: int,
) -> int:
    """Return the fewest trips needed to deliver ``boxes`` in order.

    Each box is a ``(port, weight)`` pair. One load holds at most
    ``max_boxes`` boxes weighing at most ``max_weight`` together; every move
    between different ports and every return to storage counts as a trip.
    ``ports_count`` does not affect the result.
    """
    loaded = [(port, weight) for port, weight in boxes]
    if max_boxes < 1:
        raise ValueError("max_boxes must be at least 1")
    for port, weight in loaded:
        if weight > max_weight:
            raise ValueError(f"box for port {port} weighs more than max_weight")

    count = len(loaded)
    ports = [port for port, _ in loaded]
    changes = [0, 0, *accumulate(int(a != b) for a, b in zip(ports, ports[1:]))]
    weight_prefix = [0, *accumulate(weight for _, weight in loaded)]

    trips = [0] * (count + 1)
    base = [0] * (count + 1)
    window = deque([0])
    for i in range(1, count + 1):
        while (
            i - window[0] > max_boxes
            or weight_prefix[i] - weight_prefix[window[0]] > max_weight
        ):
            window.popleft()
        trips[i] = base[window[0]] + changes[i] + 2
        if i != count:
            base[i] = trips[i] - changes[i + 1]
            while window and base[window[-1]] >= base[i]:
                window.pop()
            window.append(i)
    return trips[count]


def largest_altitude(gain: Iterable[int]) -> int:
    """Return the highest altitude reached starting at 0 and adding each gain."""
    return max(accumulate(gain, initial=0))


def _digit_sum(number: int) -> int:
    return sum(map(int, str(number)))


def count_balls(low_limit: int, high_limit: int) -> int:
    """Return the size of the fullest box when balls go to their digit sum."""
    # The first ball is always placed, even when the range is empty.
    numbers = range(low_limit, max(low_limit, high_limit) + 1)
    return max(Counter(map(_digit_sum, numbers)).values())


def closest_cost(
    base_costs: Iterable[int], topping_costs: Sequence[int], target: int
) -> int:
    """Return the dessert cost closest to ``target``, preferring the cheaper one.

    A dessert is one base plus up to two of each topping.
    """
    bases = list(base_costs)
    if not bases:
        raise ValueError("at least one base cost is required")
    toppings = list(topping_costs)
    best: int | None = None

    def consider(cost: int) -> None:
        nonlocal best
        if best is None:
            best = cost
            return
        gap, best_gap = abs(target - cost), abs(target - best)
        if gap < best_gap or (gap == best_gap and cost < best):
            best = cost

    def explore(cost: int, index: int) -> None:
        consider(cost)
        if index == len(toppings) or cost >= target:
            return
        for amount in range(3):
            explore(cost + toppings[index] * amount, index + 1)

    for base in bases:
        explore(base, 0)
    assert best is not None
    return best


def nearest_valid_point(
    x: int, y: int, points: Iterable[Sequence[int]]
) -> int:
    """Return the index of the nearest point sharing x or y, or -1 if none does.

    Distance is Manhattan distance; ties go to the smallest index.
    """
    best_index, best_distance = -1, None
    for index, (px, py) in enumerate(points):
        if px != x and py != y:
            continue
        distance = abs(x - px) + abs(y - py)
        if best_distance is None or distance < best_distance:
            best_index, best_distance = index, distance
    return best_index


def reinitialize_permutation(n: int) -> int:
    """Return how many shuffles bring the identity permutation of ``n`` back."""
    if n < 0 or n % 2:
        raise ValueError("n must be a non-negative even number")
    identity = list(range(n))
    half = n // 2
    perm = identity
    steps = 0
    while True:
        steps += 1
        perm = [perm[half + i // 2] if i % 2 else perm[i // 2] for i in range(n)]
        if perm == identity:
            return steps


def _nonempty_subset_sums(values: Sequence[int]) -> Iterable[int]:
    for size in range(1, len(values) + 1):
        for subset in combinations(values, size):
            yield sum(subset)


def split_array_same_average(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two non-empty parts of equal average."""
    count = len(nums)
    if count == 1:
        return False
    total = sum(nums)
    # Scaling by the count and subtracting the total makes the mean zero.
    shifted = [value * count - total for value in nums]
    half = count // 2
    left_part, right_part = shifted[:half], shifted[half:]

    left_sums = set()
    for subtotal in _nonempty_subset_sums(left_part):
        if subtotal == 0:
            return True
        left_sums.add(subtotal)

    right_total = sum(right_part)
    return any(
        subtotal == 0 or (subtotal != right_total and -subtotal in left_sums)
        for subtotal in _nonempty_subset_sums(right_part)
    )


def sum_subseq_widths(nums: Iterable[int]) -> int:
    """Return the sum of max minus min over all non-empty subsequences, mod 1e9+7."""
    ordered = sorted(nums)
    count = len(ordered)
    total = sum(
        (pow(2, index, MOD) - pow(2, count - 1 - index, MOD)) * value
        for index, value in enumerate(ordered)
    )
    return total % MOD