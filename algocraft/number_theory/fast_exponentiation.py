"""Exponentiation by squaring, with an automatic modulus for huge results."""

from __future__ import annotations

import math
from typing import Optional

#: Modulus applied automatically when the exact result needs over 19 digits.
AUTO_MODULUS = 1_000_000_007
MAX_EXACT_DIGITS = 19


def digits_required(base: int, exponent: int) -> int:
    """Return the number of decimal digits in ``base ** exponent``."""
    if base < 0 or exponent < 0:
        raise ValueError("base and exponent must not be negative")
    if base == 0:
        return 1
    return math.floor(exponent * math.log10(base)) + 1


def fast_exp(base: int, exponent: int, mod: Optional[int] = None) -> int:
    """Return ``base ** exponent``, reduced modulo ``mod`` if one is given.

    Without ``mod`` the exact value is returned, unless it would need more
    than 19 decimal digits; then the result is taken modulo 10**9 + 7.
    An exponent of 0 always gives 1.
    """
    if base < 0 or exponent < 0:
        raise ValueError("base and exponent must not be negative")
    if mod is not None and mod <= 0:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1

    if mod is None:
        if digits_required(base, exponent) <= MAX_EXACT_DIGITS:
            return base**exponent
        mod = AUTO_MODULUS

    result = 1
    square = base % mod
    while exponent:
        if exponent & 1:
            result = result * square % mod
        square = square * square % mod
        exponent >>= 1
    return result