"""Disjoint-set forest with path compression and union by size."""

from collections.abc import Hashable, Iterable

__all__ = ["DisjointSet", "equations_possible", "has_cycle_union_find"]


class DisjointSet:
    """Partition of items into disjoint sets.

    Items are added on first use.
    """

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict = {}
        self._size: dict = {}
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> None:
        """Put ``item`` in a set of its own unless it is already known."""
        if item not in self._parent:
            self._parent[item] = item
            self._size[item] = 1

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        self.add(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: Hashable, second: Hashable) -> bool:
        """Merge the sets of both items; return False if already joined."""
        a, b = self.find(first), self.find(second)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def connected(self, first: Hashable, second: Hashable) -> bool:
        """Tell whether both items are in the same set."""
        return self.find(first) == self.find(second)

    def set_size(self, item: Hashable) -> int:
        """Return the number of items in the set holding ``item``."""
        return self._size[self.find(item)]

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)


def equations_possible(equations: Iterable[str]) -> bool:
    """Tell whether equations like ``"a==b"`` and ``"a!=c"`` can all hold."""
    parsed = []
    for equation in equations:
        if len(equation) != 4 or equation[1:3] not in ("==", "!="):
            raise ValueError(f"malformed equation {equation!r}")
        parsed.append((equation[0], equation[1:3], equation[3]))
    sets = DisjointSet()
    for left, relation, right in parsed:
        if relation == "==":
            sets.union(left, right)
    return not any(
        relation == "!=" and sets.connected(left, right)
        for left, relation, right in parsed
    )


def has_cycle_union_find(edges: Iterable[tuple]) -> bool:
    """Tell whether the undirected edges close a cycle."""
    sets = DisjointSet()
    for u, v in edges:
        if not sets.union(u, v):
            return True
    return False