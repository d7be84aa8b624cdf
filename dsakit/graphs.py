"""Graph traversals, path enumeration, cycle detection and ordering.

Traversal functions take an adjacency mapping from a node to the nodes it
leads to. Functions that take ``node_count`` and ``edges`` work on the
nodes ``0 .. node_count - 1``.
"""

from collections import deque
from collections.abc import Hashable, Iterable, Mapping

__all__ = [
    "undirected_adjacency",
    "format_adjacency",
    "bfs",
    "dfs",
    "dfs_iterative",
    "all_paths",
    "has_cycle_undirected",
    "has_cycle_directed",
    "topological_sort",
]

Adjacency = Mapping[Hashable, Iterable[Hashable]]


def undirected_adjacency(edges: Iterable[tuple]) -> dict:
    """Build an adjacency mapping with every edge recorded in both directions."""
    adjacency: dict = {}
    for u, v in edges:
        adjacency.setdefault(u, []).append(v)
        adjacency.setdefault(v, []).append(u)
    return adjacency


def format_adjacency(node_count: int, edges: Iterable[tuple]) -> str:
    """Render the undirected adjacency list of nodes ``1 .. node_count``.

    Each line reads ``node->`` followed by every neighbour and a space.
    """
    adjacency = undirected_adjacency(edges)
    return "\n".join(
        f"{node}->" + "".join(f"{neighbour} " for neighbour in adjacency.get(node, ()))
        for node in range(1, node_count + 1)
    )


def bfs(adjacency: Adjacency, start: Hashable) -> list:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    visited = {start}
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Adjacency, start: Hashable) -> list:
    """Return the nodes reachable from ``start`` in depth-first preorder.

    Neighbours are explored in the order the adjacency lists them.
    """
    visited = {start}
    order = [start]
    stack = [iter(adjacency.get(start, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency.get(neighbour, ())))
                break
        else:
            stack.pop()
    return order


def dfs_iterative(adjacency: Adjacency, start: Hashable) -> list:
    """Depth-first order produced by an explicit stack.

    Neighbours are pushed in adjacency order, so the last one listed is
    visited first.
    """
    visited = set()
    order = []
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in visited:
                stack.append(neighbour)
    return order


def all_paths(adjacency: Adjacency, source: Hashable, target: Hashable) -> list[list]:
    """Return every simple path from ``source`` to ``target``."""
    paths: list[list] = []
    path = [source]
    on_path = {source}

    def walk(node: Hashable) -> None:
        if node == target:
            paths.append(list(path))
            return
        for neighbour in adjacency.get(node, ()):
            if neighbour in on_path:
                continue
            path.append(neighbour)
            on_path.add(neighbour)
            walk(neighbour)
            on_path.discard(neighbour)
            path.pop()

    walk(source)
    return paths


def _adjacency_lists(
    node_count: int, edges: Iterable[tuple], *, directed: bool
) -> list[list[int]]:
    if node_count < 0:
        raise ValueError("node count must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node < node_count:
                raise ValueError(f"node {node} is outside 0..{node_count - 1}")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def has_cycle_undirected(node_count: int, edges: Iterable[tuple]) -> bool:
    """Tell whether the undirected graph contains a cycle."""
    adjacency = _adjacency_lists(node_count, edges, directed=False)
    visited = [False] * node_count
    for root in range(node_count):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, int | None]] = [(root, None)]
        while stack:
            node, parent = stack.pop()
            for neighbour in adjacency[node]:
                if neighbour == parent:
                    continue
                if visited[neighbour]:
                    return True
                visited[neighbour] = True
                stack.append((neighbour, node))
    return False


def has_cycle_directed(node_count: int, edges: Iterable[tuple]) -> bool:
    """Tell whether the directed graph contains a cycle."""
    adjacency = _adjacency_lists(node_count, edges, directed=True)
    new, active, done = 0, 1, 2
    state = [new] * node_count
    for root in range(node_count):
        if state[root] != new:
            continue
        state[root] = active
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] == active:
                    return True
                if state[neighbour] == new:
                    state[neighbour] = active
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                state[node] = done
                stack.pop()
    return False


def topological_sort(node_count: int, edges: Iterable[tuple]) -> list[int]:
    """Order the nodes so that every edge points forward (Kahn's algorithm).

    Raises ValueError when the graph has a cycle.
    """
    adjacency = _adjacency_lists(node_count, edges, directed=True)
    in_degree = [0] * node_count
    for targets in adjacency:
        for target in targets:
            in_degree[target] += 1
    queue = deque(node for node in range(node_count) if in_degree[node] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adjacency[node]:
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)
    if len(order) != node_count:
        raise ValueError("graph has a cycle")
    return order