"""Simple statistics over lists of integers."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def total(values: Sequence[int]) -> int:
    """Sum of the values."""
    return sum(values)


def minimum(values: Sequence[int]) -> int:
    """Smallest value; raise ValueError for an empty sequence."""
    if not values:
        raise ValueError("minimum of an empty sequence")
    return min(values)


def maximum(values: Sequence[int]) -> int:
    """Largest value; raise ValueError for an empty sequence."""
    if not values:
        raise ValueError("maximum of an empty sequence")
    return max(values)


def average(values: Sequence[int]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def number_with_max_occurrence(values: Sequence[int]) -> int:
    """Most frequent value, the largest one on ties; 0 for an empty sequence."""
    if not values:
        return 0
    counts = Counter(values)
    return max(counts, key=lambda value: (counts[value], value))


def sort_descending(values: list[int]) -> None:
    """Sort values in place from largest to smallest."""
    values.sort(reverse=True)