"""Stable counting sort for integers."""

from __future__ import annotations

from itertools import accumulate
from typing import Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def counting_sort(
    values: MutableSequence[int],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Sort the integers in ``values`` in place, keeping equal items in order.

    ``on_step`` receives a copy of the output being filled after every value
    is placed.
    """
    order = SortOrder(order)
    if not values:
        return

    low, high = min(values), max(values)
    freq = [0] * (high - low + 1)
    for value in values:
        freq[value - low] += 1

    # positions[k] is the number of items that go at or before value low + k.
    if order is SortOrder.ASCENDING:
        positions = list(accumulate(freq))
    else:
        positions = list(accumulate(reversed(freq)))[::-1]

    output = [0] * len(values)
    for value in reversed(values):
        slot = value - low
        positions[slot] -= 1
        output[positions[slot]] = value
        if on_step is not None:
            on_step(list(output))

    values[:] = output