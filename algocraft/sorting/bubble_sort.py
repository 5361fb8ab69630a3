"""Bubble sort."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def bubble_sort(
    values: MutableSequence[Any],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Sort ``values`` in place by swapping adjacent out-of-order pairs.

    ``on_step`` receives a copy of the values after every swap. The sort stops
    early once a pass makes no swap.
    """
    order = SortOrder(order)
    n = len(values)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if order.precedes(values[j + 1], values[j]):
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
                if on_step is not None:
                    on_step(list(values))
        if not swapped:
            break