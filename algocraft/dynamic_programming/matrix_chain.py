"""Cheapest order in which to multiply a chain of matrices."""

from __future__ import annotations

from typing import Iterator, Sequence

BracketTable = list[list[int]]


def optimal_brackets(matrix_sizes: Sequence[int]) -> tuple[int, BracketTable]:
    """Return the minimum scalar multiplication count and the split table.

    ``matrix_sizes`` holds the row dimension of each matrix followed by the
    column dimension of the last one, so matrix ``i`` (1-based) is
    ``matrix_sizes[i-1] x matrix_sizes[i]``. ``bracket[i][j]`` is the index
    after which the product of matrices ``i..j`` is best split.
    """
    n = len(matrix_sizes)
    bracket = [[0] * n for _ in range(n)]
    if n <= 2:
        return 0, bracket

    cost = [[0] * n for _ in range(n)]
    for chain_length in range(2, n):
        for i in range(1, n - chain_length + 1):
            j = i + chain_length - 1
            best = None
            for k in range(i, j):
                candidate = (
                    cost[i][k]
                    + cost[k + 1][j]
                    + matrix_sizes[i - 1] * matrix_sizes[k] * matrix_sizes[j]
                )
                if best is None or candidate < best:
                    best = candidate
                    bracket[i][j] = k
            cost[i][j] = best
    return cost[1][n - 1], bracket


def matrix_chain_order(matrix_sizes: Sequence[int]) -> int:
    """Return the minimum number of scalar multiplications for the chain."""
    return optimal_brackets(matrix_sizes)[0]


def format_brackets(begin: int, end: int, bracket: BracketTable) -> str:
    """Render the parenthesization of matrices ``begin..end`` (1-based).

    Matrices are named A, B, C, ... in order of appearance.
    """
    names = (chr(ord("A") + offset) for offset in range(end - begin + 1))
    return "".join(_render(begin, end, bracket, names))


def _render(
    begin: int, end: int, bracket: BracketTable, names: Iterator[str]
) -> Iterator[str]:
    if begin == end:
        yield next(names)
        return
    split = bracket[begin][end]
    yield "("
    yield from _render(begin, split, bracket, names)
    yield from _render(split + 1, end, bracket, names)
    yield ")"


def optimal_parenthesization(matrix_sizes: Sequence[int]) -> str:
    """Return the cheapest parenthesization of the chain, e.g. ``"(A(BC))"``."""
    if len(matrix_sizes) < 2:
        raise ValueError("at least one matrix (two dimensions) is required")
    _, bracket = optimal_brackets(matrix_sizes)
    return format_brackets(1, len(matrix_sizes) - 1, bracket)