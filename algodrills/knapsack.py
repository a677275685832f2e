"""0/1 knapsack: the best total value that fits into a bag of fixed capacity."""

from __future__ import annotations

from collections.abc import Iterable


def max_value(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Return the largest total value of items whose weights sum to at most ``capacity``.

    ``items`` yields ``(weight, value)`` pairs; each item may be taken at most once.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("item weight must not be negative")
        # Walk loads downwards so every item is used at most once.
        for load in range(capacity, weight - 1, -1):
            candidate = best[load - weight] + value
            if candidate > best[load]:
                best[load] = candidate
    return best[capacity]