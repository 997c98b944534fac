"""Diameter, center and centroid of an unweighted tree given as adjacency lists."""

from __future__ import annotations

from typing import Sequence


def _bfs(adj: Sequence[Sequence[int]], root: int) -> tuple[list[int], list[int]]:
    n = len(adj)
    parent = [-1] * n
    order = [root]
    for p in order:
        for e in adj[p]:
            if parent[p] != e:
                parent[e] = p
                order.append(e)
                if len(order) > n:
                    raise ValueError("adjacency does not describe a tree")
    if len(order) != n:
        raise ValueError("adjacency does not describe a connected tree")
    return order, parent


def _require_vertices(adj: Sequence[Sequence[int]]) -> None:
    if len(adj) == 0:
        raise ValueError("the tree needs at least one vertex")


def tree_diameter(adj: Sequence[Sequence[int]]) -> list[int]:
    """Vertices along a longest path, from one end to the other."""
    _require_vertices(adj)
    order, _ = _bfs(adj, 0)
    far_order, parent = _bfs(adj, order[-1])
    path = [far_order[-1]]
    while parent[path[-1]] != -1:
        path.append(parent[path[-1]])
    return path


def tree_center(adj: Sequence[Sequence[int]]) -> list[int]:
    """The center: one vertex, or the two ends of the central edge."""
    diameter = tree_diameter(adj)
    half = len(diameter) // 2
    if len(diameter) % 2 == 1:
        return [diameter[half]]
    return [diameter[half - 1], diameter[half]]


def tree_centroid(adj: Sequence[Sequence[int]]) -> list[int]:
    """The centroid: one vertex, or the two ends of the edge splitting the tree in half."""
    _require_vertices(adj)
    order, parent = _bfs(adj, 0)
    size = [1] * len(adj)
    for v in reversed(order[1:]):
        size[parent[v]] += size[v]
    c = 0
    while True:
        heavy = [e for e in adj[c] if size[e] * 2 > size[c]]
        if not heavy:
            break
        nx = heavy[-1]
        size[c] -= size[nx]
        size[nx] += size[c]
        c = nx
    for e in adj[c]:
        if size[e] * 2 == size[c]:
            return [c, e]
    return [c]