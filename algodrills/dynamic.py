"""Dynamic programming exercises: increasing runs, tilings and pulse sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable

MODULUS = 1_000_000_007

_BASE_COUNTS = (1, 1, 3, 10, 23, 62, 170)
_BASE_SUMS = (1, 1, 3, 11, 24, 65, 181)


def longest_increasing(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        place = bisect.bisect_left(tails, value)
        if place == len(tails):
            tails.append(value)
        else:
            tails[place] = value
    return len(tails)


def tiling_count(n: int) -> int:
    """Return the number of tilings of a 3 x ``n`` board, modulo 1,000,000,007."""
    if n < 0:
        raise ValueError("board length must not be negative")
    counts = list(_BASE_COUNTS)
    sums = list(_BASE_SUMS)
    for i in range(len(counts), n + 1):
        value = (
            counts[i - 1]
            + 2 * counts[i - 2]
            + 5 * counts[i - 3]
            + 2 * sums[i - 4]
            + 2 * sums[i - 5]
            + 4 * sums[i - 6]
        ) % MODULUS
        counts.append(value)
        sums.append((value + sums[i - 3]) % MODULUS)
    return counts[n]


def max_pulse_sum(sequence: Iterable[int]) -> int:
    """Return the largest sum of a run multiplied by an alternating 1/-1 pulse.

    For sequences longer than one, only runs ending at the second element or later
    are considered.
    """
    values = list(sequence)
    if not values:
        raise ValueError("sequence must not be empty")
    if len(values) == 1:
        return abs(values[0])
    pulse = [value if i % 2 == 0 else -value for i, value in enumerate(values)]
    best: int | None = None
    for signed in (pulse, [-term for term in pulse]):
        run = signed[0]
        for term in signed[1:]:
            run = max(run + term, term)
            best = run if best is None else max(best, run)
    assert best is not None
    return best