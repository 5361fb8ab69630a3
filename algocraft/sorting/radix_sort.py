"""Least-significant-digit radix sort for non-negative integers."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def count_sort(
    values: MutableSequence[int],
    extractor: int,
    order: SortOrder = SortOrder.ASCENDING,
) -> None:
    """Stably sort ``values`` in place by the digit ``(value // extractor) % 10``."""
    order = SortOrder(order)

    def bucket(value: int) -> int:
        digit = (value // extractor) % 10
        return digit if order is SortOrder.ASCENDING else 9 - digit

    counter = [0] * 10
    for value in values:
        counter[bucket(value)] += 1
    for i in range(1, 10):
        counter[i] += counter[i - 1]

    output = [0] * len(values)
    for value in reversed(values):
        slot = bucket(value)
        counter[slot] -= 1
        output[counter[slot]] = value
    values[:] = output


def radix_sort(
    values: MutableSequence[int],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Sort non-negative integers in place, one decimal digit per pass.

    ``on_step`` receives a copy of the values after each pass. Raises
    ValueError if any value is negative.
    """
    order = SortOrder(order)
    if not values:
        return
    if min(values) < 0:
        raise ValueError("radix sort handles non-negative integers only")

    max_value = max(values)
    extractor = 1
    while max_value // extractor > 0:
        count_sort(values, extractor, order)
        if on_step is not None:
            on_step(list(values))
        extractor *= 10