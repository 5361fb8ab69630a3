"""Insertion sort."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def insertion_sort(
    values: MutableSequence[Any],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Sort ``values`` in place, growing a sorted prefix one item at a time.

    ``on_step`` receives a copy of the values after each item is inserted.
    """
    order = SortOrder(order)
    for i in range(1, len(values)):
        current = values[i]
        j = i
        while j > 0 and order.precedes(current, values[j - 1]):
            values[j] = values[j - 1]
            j -= 1
        values[j] = current
        if on_step is not None:
            on_step(list(values))