"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree; equal values go into the left subtree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree (duplicates are kept)."""
        if self._root is None:
            self._root = _Node(value)
            return

        current = self._root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = _Node(value)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = _Node(value)
                    return
                current = current.right

    def remove(self, value: Any) -> None:
        """Remove one occurrence of ``value``.

        Raises KeyError if the value is not in the tree.
        """
        current = self._root
        parent: Optional[_Node] = None
        while current is not None:
            if value == current.value:
                self._remove_node(current, parent)
                return
            parent = current
            current = current.right if current.value < value else current.left
        raise KeyError(value)

    def _remove_node(self, node: _Node, parent: Optional[_Node]) -> None:
        if node.left is None and node.right is None:
            if parent is None:
                self._root = None
            elif parent.left is node:
                parent.left = None
            else:
                parent.right = None
        elif node.right is None:
            child = node.left
            node.value, node.left, node.right = child.value, child.left, child.right
        else:
            successor = node.right
            successor_parent: Optional[_Node] = None
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            if successor_parent is None:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
            node.value = successor.value

    def search(self, value: Any) -> bool:
        """Return True if ``value`` is stored in the tree."""
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def inorder(self) -> Iterator[Any]:
        """Yield values left subtree, node, right subtree (sorted order)."""
        yield from self._inorder(self._root)

    def _inorder(self, node: Optional[_Node]) -> Iterator[Any]:
        if node is None:
            return
        yield from self._inorder(node.left)
        yield node.value
        yield from self._inorder(node.right)

    def inorder_iterative(self) -> Iterator[Any]:
        """In-order traversal using an explicit stack."""
        stack: list[_Node] = []
        current = self._root
        while current is not None or stack:
            if current is not None:
                stack.append(current)
                current = current.left
            else:
                current = stack.pop()
                yield current.value
                current = current.right

    def preorder(self) -> Iterator[Any]:
        """Yield values node, left subtree, right subtree."""
        yield from self._preorder(self._root)

    def _preorder(self, node: Optional[_Node]) -> Iterator[Any]:
        if node is None:
            return
        yield node.value
        yield from self._preorder(node.left)
        yield from self._preorder(node.right)

    def preorder_iterative(self) -> Iterator[Any]:
        """Pre-order traversal using an explicit stack."""
        if self._root is None:
            return
        stack = [self._root]
        while stack:
            current = stack.pop()
            yield current.value
            if current.right is not None:
                stack.append(current.right)
            if current.left is not None:
                stack.append(current.left)

    def postorder(self) -> Iterator[Any]:
        """Yield values left subtree, right subtree, node."""
        yield from self._postorder(self._root)

    def _postorder(self, node: Optional[_Node]) -> Iterator[Any]:
        if node is None:
            return
        yield from self._postorder(node.left)
        yield from self._postorder(node.right)
        yield node.value

    def postorder_iterative(self) -> Iterator[Any]:
        """Post-order traversal using an explicit stack."""
        if self._root is None:
            return
        stack: list[_Node] = []
        current: Optional[_Node] = self._root
        while True:
            while current is not None:
                if current.right is not None:
                    stack.append(current.right)
                stack.append(current)
                current = current.left

            current = stack.pop()
            # Visit the right subtree first if it has not been processed yet.
            if current.right is not None and stack and stack[-1] is current.right:
                stack.pop()
                stack.append(current)
                current = current.right
            else:
                yield current.value
                current = None

            if not stack:
                break