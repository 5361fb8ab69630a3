"""Check whether a number equals the sum of its proper divisors."""

from __future__ import annotations

import math


def is_perfect(num: int) -> bool:
    """Return True if ``num`` is a perfect number.

    Divisors are summed in pairs ``d`` and ``num // d`` for ``2 <= d <= sqrt(num)``,
    starting from 1; by this rule 1 counts as perfect.
    """
    if num < 0:
        raise ValueError("number must not be negative")
    total = 1
    for divisor in range(2, math.isqrt(num) + 1):
        if num % divisor == 0:
            total += divisor + num // divisor
    return total == num