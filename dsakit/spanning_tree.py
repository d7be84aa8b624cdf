"""Minimum spanning trees of weighted undirected graphs.

Edges are ``(u, v, weight)`` triples. Both functions return the total
weight and the chosen edges.
"""

import heapq
from collections.abc import Hashable, Iterable

from dsakit.disjoint_set import DisjointSet

__all__ = ["kruskal", "prim"]


def kruskal(edges: Iterable[tuple]) -> tuple[int, list[tuple]]:
    """Build a minimum spanning forest by taking the lightest safe edges.

    Returns ``(cost, edges)`` with the edges in the order they were taken.
    """
    sets = DisjointSet()
    cost = 0
    chosen = []
    for u, v, weight in sorted(edges, key=lambda edge: (edge[2], edge[0], edge[1])):
        if sets.union(u, v):
            chosen.append((u, v, weight))
            cost += weight
    return cost, chosen


def prim(edges: Iterable[tuple], source: Hashable) -> tuple[int, list[tuple]]:
    """Grow a minimum spanning tree of the component holding ``source``.

    Returns ``(cost, edges)`` with each edge as ``(parent, node, weight)``
    in the order the nodes joined the tree.
    """
    adjacency: dict = {}
    for u, v, weight in edges:
        adjacency.setdefault(u, []).append((v, weight))
        adjacency.setdefault(v, []).append((u, weight))

    best: dict = {source: 0}
    in_tree = set()
    heap: list[tuple] = [(0, source, source)]
    cost = 0
    chosen = []
    while heap:
        weight, node, parent = heapq.heappop(heap)
        if node in in_tree:
            continue
        in_tree.add(node)
        if node != source:
            cost += weight
            chosen.append((parent, node, weight))
        for neighbour, edge_weight in adjacency.get(node, ()):
            if neighbour in in_tree:
                continue
            if neighbour not in best or edge_weight < best[neighbour]:
                best[neighbour] = edge_weight
                heapq.heappush(heap, (edge_weight, neighbour, node))
    return cost, chosen