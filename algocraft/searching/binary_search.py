"""Binary search for a value in a sorted sequence."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def binary_search(
    value: Any,
    sorted_values: Sequence[Any],
    low: int = 0,
    high: Optional[int] = None,
) -> int:
    """Return an index of ``value`` within ``sorted_values[low..high]``, or -1.

    ``high`` is inclusive and defaults to the last index; a ``high`` past the
    end of the sequence is clamped to it. The values must be in ascending order.
    """
    if low < 0:
        raise ValueError("low must not be negative")
    last = len(sorted_values) - 1
    high = last if high is None else min(high, last)

    while low <= high:
        mid = (low + high) // 2
        probe = sorted_values[mid]
        if value == probe:
            return mid
        if value < probe:
            high = mid - 1
        else:
            low = mid + 1
    return -1