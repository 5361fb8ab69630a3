"""Kadane's algorithm for the contiguous subarray with the largest sum."""

from __future__ import annotations

from typing import NamedTuple, Sequence


class Subarray(NamedTuple):
    """The best subarray: its sum and inclusive start and end indices."""

    total: int
    start: int
    end: int


def maximum_subarray(values: Sequence[int]) -> Subarray:
    """Return the earliest contiguous subarray with the largest sum.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("values must not be empty")

    max_sum = current_sum = values[0]
    next_start = start = end = 0
    for i, value in enumerate(values[1:], start=1):
        current_sum += value
        if current_sum < value:
            current_sum = value
            next_start = i
        if current_sum > max_sum:
            max_sum = current_sum
            start = next_start
            end = i
    return Subarray(max_sum, start, end)