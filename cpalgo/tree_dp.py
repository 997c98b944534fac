"""Rerooting dynamic programming on a tree."""

from __future__ import annotations

from typing import Callable, Generic, Sequence, TypeVar

S = TypeVar("S")


class TreeDP(Generic[S]):
    """Folds a tree towards every vertex and every edge side at once.

    ``node(v)`` gives the value of a lone vertex, ``rake(a, b, v)`` merges two
    partial results hanging at ``v`` and ``compress(a, edge, v)`` extends a
    result across ``edge`` so that it hangs at ``v``.
    """

    def __init__(
        self,
        n: int,
        edges: Sequence[tuple[int, int]],
        node: Callable[[int], S],
        rake: Callable[[S, S, int], S],
        compress: Callable[[S, int, int], S],
    ):
        if n < 1:
            raise ValueError("the tree needs at least one vertex")
        if len(edges) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        self._rake = rake
        self._compress = compress
        adj: list[list[int]] = [[] for _ in range(n)]
        xor_edge = []
        for i, (u, v) in enumerate(edges):
            if not (0 <= u < n and 0 <= v < n):
                raise IndexError(f"edge {i} has an endpoint out of range")
            adj[u].append(i)
            adj[v].append(i)
            xor_edge.append(u ^ v)
        self._xor = xor_edge

        parent = [-1] * n
        order = [0]
        for v in order:
            for e in adj[v]:
                if parent[v] != e:
                    w = v ^ xor_edge[e]
                    parent[w] = e
                    order.append(w)
                    if len(order) > n:
                        raise ValueError("edges do not form a tree")
        if len(order) != n:
            raise ValueError("edges do not form a connected tree")
        self._parent = parent

        base = [node(v) for v in range(n)]
        low = list(base)
        for w in reversed(order[1:]):
            v = w ^ xor_edge[parent[w]]
            low[v] = rake(low[v], compress(low[w], parent[w], v), v)

        high = list(base)
        for v in order:
            kids = [e for e in adj[v] if e != parent[v]]
            fold = base[v]
            if v != 0:
                fold = rake(compress(high[v], parent[v], v), base[v], v)
            for e in reversed(kids):
                w = v ^ xor_edge[e]
                high[w] = fold
                fold = rake(compress(low[w], e, v), fold, v)
            first = True
            for e in kids:
                w = v ^ xor_edge[e]
                if not first:
                    high[w] = rake(fold, high[w], v)
                extended = compress(low[w], e, v)
                fold = extended if first else rake(extended, fold, v)
                first = False
        self._low = low
        self._high = high

    def edge_between(self, u: int, v: int) -> int:
        """Index of the edge joining adjacent vertices ``u`` and ``v``."""
        pu = self._parent[u]
        if pu >= 0 and self._xor[pu] == (u ^ v):
            return pu
        return self._parent[v]

    def at_vertex(self, v: int) -> S:
        """Result for the whole tree rooted at ``v``."""
        if v == 0:
            return self._low[0]
        return self._rake(self._compress(self._high[v], self._parent[v], v), self._low[v], v)

    def at_edge(self, root: int, edge: int) -> S:
        """Result for the side of ``edge`` containing ``root``, rooted at ``root``."""
        if self._parent[root] == edge:
            return self._low[root]
        return self._high[root ^ self._xor[edge]]