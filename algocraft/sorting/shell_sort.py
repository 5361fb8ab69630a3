"""Shell sort with the gap sequence n/2, n/4, ..., 1."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def shell_sort(
    values: MutableSequence[Any],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Sort ``values`` in place by gapped insertion sorts of shrinking gaps.

    ``on_step`` receives a copy of the values after each item is placed.
    """
    order = SortOrder(order)
    n = len(values)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = values[i]
            j = i
            while j >= gap and order.precedes(current, values[j - gap]):
                values[j] = values[j - gap]
                j -= gap
            values[j] = current
            if on_step is not None:
                on_step(list(values))
        gap //= 2