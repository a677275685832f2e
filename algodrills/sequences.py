"""Enumerations of length-``m`` sequences in ascending order.

Each family comes in three flavours: over the numbers ``1..n``, over given values
(sorted first), and over given values with duplicate sequences removed.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable

Sequences = list[tuple[int, ...]]


def _check_length(m: int) -> None:
    if m < 0:
        raise ValueError("sequence length must not be negative")


def _numbers(n: int) -> range:
    return range(1, n + 1)


def distinct_permutations(n: int, m: int) -> Sequences:
    """All sequences of ``m`` different numbers from ``1..n``."""
    _check_length(m)
    return list(itertools.permutations(_numbers(n), m))


def increasing_combinations(n: int, m: int) -> Sequences:
    """All strictly increasing sequences of ``m`` numbers from ``1..n``."""
    _check_length(m)
    return list(itertools.combinations(_numbers(n), m))


def repeated_products(n: int, m: int) -> Sequences:
    """All sequences of ``m`` numbers from ``1..n``, repeats allowed."""
    _check_length(m)
    return list(itertools.product(_numbers(n), repeat=m))


def nondecreasing_sequences(n: int, m: int) -> Sequences:
    """All non-decreasing sequences of ``m`` numbers from ``1..n``."""
    _check_length(m)
    return list(itertools.combinations_with_replacement(_numbers(n), m))


def value_permutations(values: Iterable[int], m: int) -> Sequences:
    """All orderings of ``m`` of the given values, each position used once."""
    _check_length(m)
    return list(itertools.permutations(sorted(values), m))


def value_combinations(values: Iterable[int], m: int) -> Sequences:
    """All increasing-position selections of ``m`` of the given values."""
    _check_length(m)
    return list(itertools.combinations(sorted(values), m))


def value_products(values: Iterable[int], m: int) -> Sequences:
    """All sequences of ``m`` of the given values, repeats allowed."""
    _check_length(m)
    return list(itertools.product(sorted(values), repeat=m))


def value_nondecreasing(values: Iterable[int], m: int) -> Sequences:
    """All non-decreasing sequences of ``m`` of the given values."""
    _check_length(m)
    return list(itertools.combinations_with_replacement(sorted(values), m))


def unique_permutations(values: Iterable[int], m: int) -> Sequences:
    """Distinct orderings of ``m`` of the given values, duplicates removed."""
    _check_length(m)
    return sorted(set(itertools.permutations(sorted(values), m)))


def unique_combinations(values: Iterable[int], m: int) -> Sequences:
    """Distinct non-decreasing selections of ``m`` of the given values."""
    _check_length(m)
    return sorted(set(itertools.combinations(sorted(values), m)))


def unique_products(values: Iterable[int], m: int) -> Sequences:
    """Distinct sequences of ``m`` of the given values, repeats allowed."""
    _check_length(m)
    return list(itertools.product(sorted(set(values)), repeat=m))


def unique_nondecreasing(values: Iterable[int], m: int) -> Sequences:
    """Distinct non-decreasing sequences of ``m`` of the given values, repeats allowed."""
    _check_length(m)
    return list(itertools.combinations_with_replacement(sorted(set(values)), m))


def format_sequences(sequences: Iterable[Iterable[int]]) -> str:
    """Render one sequence per line, each number followed by a space."""
    return "".join("".join(f"{item} " for item in seq) + "\n" for seq in sequences)