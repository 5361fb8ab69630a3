"""Union-find over the integers ``0 .. n-1`` with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """A partition of ``range(num_nodes)`` into disjoint subsets."""

    __slots__ = ("_parent", "_rank")

    def __init__(self, num_nodes: int) -> None:
        if num_nodes < 0:
            raise ValueError("number of nodes must not be negative")
        self._parent = list(range(num_nodes))
        self._rank = [0] * num_nodes

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s subset, compressing the path."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def join(self, x: int, y: int) -> None:
        """Merge the subsets containing ``x`` and ``y``."""
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return

        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        else:
            self._parent[y_root] = x_root
            if self._rank[x_root] == self._rank[y_root]:
                self._rank[x_root] += 1

    def __len__(self) -> int:
        return len(self._parent)