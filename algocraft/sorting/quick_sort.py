"""Quick sort with a randomly chosen pivot."""

from __future__ import annotations

import random
from typing import Any, Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def partition(
    values: MutableSequence[Any],
    start: int,
    end: int,
    order: SortOrder = SortOrder.ASCENDING,
    rng: Optional[random.Random] = None,
) -> int:
    """Partition ``values[start..end]`` around a random pivot; return its index.

    Items that precede the pivot in ``order`` end up to its left, the rest to
    its right.
    """
    order = SortOrder(order)
    rng = rng if rng is not None else random.Random()
    chosen = rng.randint(start, end)
    values[chosen], values[start] = values[start], values[chosen]
    pivot = values[start]

    boundary = start + 1
    for j in range(start + 1, end + 1):
        if order.precedes(values[j], pivot):
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1

    values[start], values[boundary - 1] = values[boundary - 1], values[start]
    return boundary - 1


def _quick_sort(
    values: MutableSequence[Any],
    start: int,
    end: int,
    order: SortOrder,
    on_step: Optional[StepCallback],
    rng: random.Random,
) -> None:
    if start >= end:
        return
    pivot_index = partition(values, start, end, order, rng)
    _quick_sort(values, start, pivot_index - 1, order, on_step, rng)
    _quick_sort(values, pivot_index + 1, end, order, on_step, rng)
    if on_step is not None:
        on_step(list(values))


def quick_sort(
    values: MutableSequence[Any],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """Sort ``values`` in place with randomized quick sort.

    ``on_step`` receives a copy of the values each time a range has been
    sorted. ``rng`` chooses the pivots; a fresh generator is used if omitted.
    """
    rng = rng if rng is not None else random.Random()
    _quick_sort(values, 0, len(values) - 1, SortOrder(order), on_step, rng)