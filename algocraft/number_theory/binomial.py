"""Binomial coefficients C(n, k) by dynamic programming over Pascal's triangle."""

from __future__ import annotations

_MASK_64 = (1 << 64) - 1


def binomial_coefficient(n: int, k: int) -> int:
    """Return C(n, k) modulo 2**64.

    Uses the recurrence C(n, k) = C(n-1, k) + C(n-1, k-1). Returns 0 when
    ``k > n``, since no subsets of that size exist. Raises ValueError for
    negative arguments.
    """
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if n < k:
        return 0

    # row[j] holds C(i, j) for the current row i, limited to j <= k.
    row = [1] + [0] * k
    for i in range(1, n + 1):
        for j in range(min(i, k), 0, -1):
            row[j] = (row[j] + row[j - 1]) & _MASK_64
    return row[k]