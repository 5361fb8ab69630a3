import pytest

from algocraft.searching.binary_search import binary_search


def test_base_cases():
    assert binary_search(1, [1], 0, 1) == 0
    assert binary_search(5, [0], 0, 1) == -1


@pytest.mark.parametrize(
    "value, values, low, high, expected",
    [
        (33, [-5, 2, 7, 25, 33, 77, 88, 102], 0, 7, 4),
        (-99, [-99, -88, -53, -3, -1], 0, 4, 0),
        (25, [1, 6, 8, 13, 17, 21, 25], 0, 6, 6),
        (4, [0, 5, 9, 44, 67], 0, 4, -1),
    ],
)
def test_integer_cases(value, values, low, high, expected):
    assert binary_search(value, values, low, high) == expected


def test_default_bounds_find_every_element():
    values = [-5, 2, 7, 25, 33, 77, 88, 102]
    for index, value in enumerate(values):
        assert binary_search(value, values) == index


def test_empty_sequence():
    assert binary_search(3, []) == -1


def test_value_outside_window_is_not_found():
    values = [1, 2, 3, 4, 5]
    assert binary_search(5, values, 0, 2) == -1


def test_negative_low_rejected():
    with pytest.raises(ValueError):
        binary_search(1, [1, 2], -1, 1)