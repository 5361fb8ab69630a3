"""Longest common subsequence of two strings by dynamic programming."""

from __future__ import annotations


def lcs_lengths(s1: str, s2: str) -> list[list[int]]:
    """Return the (len(s1)+1) x (len(s2)+1) table of LCS lengths of prefixes."""
    lengths = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    for i, a in enumerate(s1, start=1):
        row, above = lengths[i], lengths[i - 1]
        for j, b in enumerate(s2, start=1):
            if a == b:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return lengths


def longest_common_subsequence(s1: str, s2: str) -> str:
    """Return a longest common subsequence of ``s1`` and ``s2``."""
    lengths = lcs_lengths(s1, s2)
    i, j = len(s1), len(s2)
    reversed_chars: list[str] = []
    while i and j:
        if s1[i - 1] == s2[j - 1]:
            reversed_chars.append(s1[i - 1])
            i -= 1
            j -= 1
        elif lengths[i - 1][j] > lengths[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(reversed_chars))