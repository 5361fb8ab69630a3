"""Fibonacci numbers modulo 2**64, by iteration and by matrix powers."""

from __future__ import annotations

from typing import Sequence

#: Largest N whose Fibonacci number fits in an unsigned 64-bit integer.
MAX_N = 93

_MASK_64 = (1 << 64) - 1

Matrix = list[list[int]]


def fibonacci(n: int) -> int:
    """Return F(n) modulo 2**64 in O(n) steps."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous_to_previous, previous = 0, 1
    if n < 2:
        return n
    for _ in range(2, n + 1):
        previous_to_previous, previous = (
            previous,
            (previous + previous_to_previous) & _MASK_64,
        )
    return previous


def matrix_product(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    """Return ``first @ second`` with entries modulo 2**64.

    ``first`` is n x m and ``second`` is m x p.
    """
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) & _MASK_64 for column in columns]
        for row in first
    ]


def matrix_power(matrix: Sequence[Sequence[int]], n: int) -> Matrix:
    """Return ``matrix`` raised to the power ``n >= 1`` by binary exponentiation."""
    if n < 1:
        raise ValueError("power must be at least 1")
    if n == 1:
        return [list(row) for row in matrix]
    if n % 2 == 0:
        half = matrix_power(matrix, n // 2)
        return matrix_product(half, half)
    return matrix_product(matrix_power(matrix, n - 1), matrix)


def fibonacci_fast(n: int) -> int:
    """Return F(n) modulo 2**64 in O(log n) matrix multiplications."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n < 2:
        return n
    if n == 2:
        return 1
    # (1 1; 1 0) ** (n-2) applied to (F(2), F(1)) = (1, 1) gives F(n).
    power = matrix_power([[1, 1], [1, 0]], n - 2)
    return (power[0][0] + power[0][1]) & _MASK_64