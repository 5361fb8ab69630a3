"""Euclid's greatest common divisor and the extended Euclidean algorithm."""

from __future__ import annotations


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Division that truncates toward zero, with the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    while a != 0:
        a, b = _trunc_divmod(b, a)[1], a
    return b


def extended_euclidean(a: int, b: int) -> tuple[int, int]:
    """Return coefficients ``(x, y)`` with ``x*a + y*b == gcd(a, b)``."""
    a_coeffs = (1, 0)
    b_coeffs = (0, 1)
    while b != 0:
        quotient, remainder = _trunc_divmod(a, b)
        a_coeffs, b_coeffs = b_coeffs, (
            a_coeffs[0] - quotient * b_coeffs[0],
            a_coeffs[1] - quotient * b_coeffs[1],
        )
        a, b = b, remainder
    return a_coeffs