"""A singly linked list that keeps track of its head and tail."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """Singly linked list with O(1) insertion at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_rear(value)

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert_front(self, value: Any) -> None:
        """Insert ``value`` at the head of the list."""
        node = _Node(value, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        self._size += 1

    def insert_rear(self, value: Any) -> None:
        """Insert ``value`` at the tail of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete_front(self) -> None:
        """Remove the head element; does nothing on an empty list."""
        if self._head is None:
            return
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1

    def delete_rear(self) -> None:
        """Remove the tail element; does nothing on an empty list.

        The list is walked to find the second-to-last node, so this is O(n).
        """
        if self._head is None:
            return
        if self._head is self._tail:
            self._head = self._tail = None
            self._size -= 1
            return

        node = self._head
        while node.next is not self._tail:
            node = node.next
        node.next = None
        self._tail = node
        self._size -= 1

    def value_at(self, index: int) -> Any:
        """Return the value at position ``index``.

        Raises IndexError if the index is outside the list.
        """
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        node = self._head
        for _ in range(index):
            node = node.next
        return node.value

    def __getitem__(self, index: int) -> Any:
        return self.value_at(index)

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0