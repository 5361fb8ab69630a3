"""Top-down merge sort."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def merge(
    values: MutableSequence[Any],
    start: int,
    end: int,
    order: SortOrder = SortOrder.ASCENDING,
) -> None:
    """Merge the sorted runs ``values[start..mid]`` and ``values[mid+1..end]``.

    ``end`` is inclusive and ``mid`` is ``(start + end) // 2``. On a tie the
    item from the second run is taken first.
    """
    order = SortOrder(order)
    mid = (start + end) // 2
    left = list(values[start : mid + 1])
    right = list(values[mid + 1 : end + 1])

    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if order.precedes(left[i], right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    values[start : end + 1] = merged


def _merge_sort(
    values: MutableSequence[Any],
    start: int,
    end: int,
    order: SortOrder,
    on_step: Optional[StepCallback],
) -> None:
    if start >= end:
        return
    mid = (start + end) // 2
    _merge_sort(values, start, mid, order, on_step)
    _merge_sort(values, mid + 1, end, order, on_step)
    merge(values, start, end, order)
    if on_step is not None:
        on_step(list(values))


def merge_sort(
    values: MutableSequence[Any],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Sort ``values`` in place by recursively sorting and merging halves.

    ``on_step`` receives a copy of the values after every merge.
    """
    _merge_sort(values, 0, len(values) - 1, SortOrder(order), on_step)