import pytest

from algocraft.number_theory.perfect import is_perfect


@pytest.mark.parametrize(
    ("num", "expected"),
    [
        (1, True),
        (2, False),
        (6, True),
        (28, True),
        (49, False),
        (495, False),
        (496, True),
        (8128, True),
    ],
)
def test_normal_cases(num, expected):
    assert is_perfect(num) is expected


def test_perfect_numbers_below_ten_thousand():
    assert [n for n in range(2, 10000) if is_perfect(n)] == [6, 28, 496, 8128]


def test_negative_rejected():
    with pytest.raises(ValueError):
        is_perfect(-6)