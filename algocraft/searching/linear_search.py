"""Linear search through any sequence."""

from __future__ import annotations

from typing import Any, Iterable


def linear_search(element: Any, values: Iterable[Any]) -> int:
    """Return the index of the first item equal to ``element``, or -1."""
    for index, value in enumerate(values):
        if value == element:
            return index
    return -1