"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations


def partial_match_table(pattern: str) -> list[int]:
    """Return the KMP failure table for ``pattern``.

    The table has ``len(pattern) + 1`` entries; entry ``j`` is where the match
    resumes in the pattern after a mismatch at position ``j``, and ``-1`` means
    advance in the text.
    """
    table = [-1] * (len(pattern) + 1)
    i, j = 0, -1
    while i < len(pattern):
        while j >= 0 and pattern[i] != pattern[j]:
            j = table[j]
        i += 1
        j += 1
        table[i] = j
    return table


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return every index of ``text`` where ``pattern`` starts, overlaps included.

    Raises ValueError for an empty pattern.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")

    table = partial_match_table(pattern)
    indices: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j >= 0 and char != pattern[j]:
            j = table[j]
        j += 1
        if j == len(pattern):
            indices.append(i + 1 - j)
            j = table[j]
    return indices