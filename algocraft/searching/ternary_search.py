"""Ternary search for the extreme value of a unimodal sequence."""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence


class Pattern(Enum):
    """Shape of a unimodal sequence."""

    ASCEND_THEN_DESCEND = 0
    DESCEND_THEN_ASCEND = 1


def ternary_search(values: Sequence[Any], pattern: Pattern) -> int:
    """Return the index of the peak (or valley) of a unimodal sequence.

    For ``ASCEND_THEN_DESCEND`` the position of the maximum is returned, for
    ``DESCEND_THEN_ASCEND`` that of the minimum. Raises ValueError if
    ``values`` is empty.
    """
    if not values:
        raise ValueError("values must not be empty")

    descend_first = pattern is Pattern.DESCEND_THEN_ASCEND
    left, right = 0, len(values) - 1
    changed = True
    # Once the interval stops shrinking its size is already constant.
    while right - left > 1 and changed:
        third = (right - left) // 3
        mid1, mid2 = left + third, right - third
        first, second = values[mid1], values[mid2]
        if (first < second) if descend_first else (first > second):
            changed = right != mid2
            right = mid2
        else:
            changed = left != mid1
            left = mid1

    window = range(left, right + 1)
    if descend_first:
        return min(window, key=values.__getitem__)
    return max(window, key=values.__getitem__)