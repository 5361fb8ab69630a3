"""Shared helpers for the sorting algorithms: sort order and state display."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable


class SortOrder(IntEnum):
    """Direction of a sort."""

    ASCENDING = 1
    DESCENDING = -1

    @classmethod
    def from_answer(cls, answer: str) -> "SortOrder":
        """Descending if ``answer`` starts with 'd' or 'D', otherwise ascending."""
        return cls.DESCENDING if answer[:1] in ("d", "D") else cls.ASCENDING

    @property
    def text(self) -> str:
        """The lower-case name of the order, e.g. ``"ascending"``."""
        return self.name.lower()

    def precedes(self, a: Any, b: Any) -> bool:
        """Return True if ``a`` must come strictly before ``b`` in this order."""
        return a < b if self is SortOrder.ASCENDING else a > b


def wants_state(answer: str) -> bool:
    """Return True if ``answer`` starts with 'y' or 'Y'; no is the default."""
    return answer[:1] in ("y", "Y")


def format_state(values: Iterable[Any]) -> str:
    """Render values each followed by a single space."""
    return "".join(f"{value} " for value in values)