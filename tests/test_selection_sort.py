import random

import pytest

from algocraft.sorting.common import SortOrder
from algocraft.sorting.selection_sort import selection_sort

CASES = [
    [],
    [1],
    [2, 1],
    [5, 3, 8, 1, 9, 2, 7],
    [3, 3, 1, 1, 2, 2],
    [-4, 10, 0, -4, 7, 7, -1],
]


@pytest.mark.parametrize("values", CASES)
def test_ascending_matches_sorted(values):
    data = list(values)
    selection_sort(data)
    assert data == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_descending_matches_reverse_sorted(values):
    data = list(values)
    selection_sort(data, SortOrder.DESCENDING)
    assert data == sorted(values, reverse=True)


def test_random_lists():
    rng = random.Random(5)
    for _ in range(30):
        values = [rng.randint(-100, 100) for _ in range(rng.randint(0, 50))]
        data = list(values)
        selection_sort(data)
        assert data == sorted(values)


def test_prefix_is_final_after_each_step():
    values = [4, 9, 1, 7, 3]
    steps = []
    selection_sort(list(values), on_step=steps.append)
    expected = sorted(values)
    assert len(steps) == len(values) - 1
    for filled, step in enumerate(steps, start=1):
        assert step[:filled] == expected[:filled]
    assert steps[-1] == expected