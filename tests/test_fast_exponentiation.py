import pytest

from algocraft.number_theory.fast_exponentiation import digits_required, fast_exp


@pytest.mark.parametrize(
    ("base", "exponent", "expected"), [(0, 1, 0), (1, 0, 1), (1, 1, 1)]
)
def test_base_cases(base, exponent, expected):
    assert fast_exp(base, exponent) == expected


@pytest.mark.parametrize(
    ("base", "exponent", "expected"),
    [
        (2, 2, 4),
        (2, 4, 16),
        (3, 4, 81),
        (6, 7, 279936),
        (7, 9, 40353607),
        (27, 8, 282429536481),
        (15, 10, 576650390625),
        (1543, 5, 8746405945515943),
    ],
)
def test_normal_cases(base, exponent, expected):
    assert fast_exp(base, exponent) == expected


@pytest.mark.parametrize(
    ("base", "exponent", "expected"),
    [
        (10, 99, 22673271),
        (2, 100, 976371285),
        (256, 128, 812734592),
        (1366, 768, 85977610),
    ],
)
def test_automatic_modulo_cases(base, exponent, expected):
    assert fast_exp(base, exponent) == expected


def test_explicit_modulus():
    assert fast_exp(2, 10, 1000) == 24


def test_explicit_modulus_agrees_with_builtin_pow():
    assert fast_exp(1366, 768, 998244353) == pow(1366, 768, 998244353)


def test_zero_exponent_with_modulus_gives_one():
    assert fast_exp(5, 0, 3) == 1


@pytest.mark.parametrize(
    ("base", "exponent", "expected"),
    [(2, 10, 4), (10, 99, 100), (0, 5, 1), (7, 0, 1)],
)
def test_digits_required(base, exponent, expected):
    assert digits_required(base, exponent) == expected


@pytest.mark.parametrize(("base", "exponent"), [(-2, 3), (2, -3)])
def test_negative_arguments_rejected(base, exponent):
    with pytest.raises(ValueError):
        fast_exp(base, exponent)


def test_non_positive_modulus_rejected():
    with pytest.raises(ValueError):
        fast_exp(2, 3, 0)