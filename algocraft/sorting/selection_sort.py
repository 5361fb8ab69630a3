"""Selection sort."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def selection_sort(
    values: MutableSequence[Any],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Sort ``values`` in place by repeatedly moving the extreme item forward.

    ``on_step`` receives a copy of the values after each position is filled.
    """
    order = SortOrder(order)
    n = len(values)
    for i in range(n - 1):
        extreme = i
        for j in range(i + 1, n):
            if order.precedes(values[j], values[extreme]):
                extreme = j
        values[i], values[extreme] = values[extreme], values[i]
        if on_step is not None:
            on_step(list(values))