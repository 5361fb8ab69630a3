"""Heap sort on an array-backed max heap."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional

from algocraft.sorting.common import SortOrder

StepCallback = Callable[[list], None]


def heapify(heap: MutableSequence[Any], parent: int, last: int) -> None:
    """Sift ``heap[parent]`` down so that ``heap[parent..last]`` is a max heap."""
    child = parent * 2 + 1
    while child <= last:
        if child + 1 <= last and heap[child + 1] > heap[child]:
            child += 1
        if heap[parent] < heap[child]:
            heap[parent], heap[child] = heap[child], heap[parent]
        parent = child
        child = parent * 2 + 1


def make_heap(
    heap: MutableSequence[Any], on_step: Optional[StepCallback] = None
) -> None:
    """Rearrange ``heap`` in place into a max heap.

    ``on_step`` receives a copy of the values after each non-leaf node is sifted.
    """
    last = len(heap) - 1
    for node in range(len(heap) // 2 - 1, -1, -1):
        heapify(heap, node, last)
        if on_step is not None:
            on_step(list(heap))


def heap_sort(
    values: MutableSequence[Any],
    order: SortOrder = SortOrder.ASCENDING,
    on_step: Optional[StepCallback] = None,
) -> None:
    """Sort ``values`` in place with heap sort.

    ``on_step`` receives a copy of the values after each step of building the
    heap and after each removal of the largest element.
    """
    order = SortOrder(order)
    make_heap(values, on_step)
    for last in range(len(values) - 1, -1, -1):
        values[0], values[last] = values[last], values[0]
        heapify(values, 0, last - 1)
        if on_step is not None:
            on_step(list(values))
    if order is SortOrder.DESCENDING:
        values.reverse()