"""A forest that only grows, with ancestor jumps kept up to date on every link."""

from __future__ import annotations

from typing import Iterator


class IncrementalForest:
    """Rooted forest supporting vertex and edge insertion plus LCA-style queries.

    Linking two trees re-roots the smaller one under its endpoint, so depths,
    parents and the skew-binary jump pointers stay exact.  Queries between
    vertices of different trees return ``None``.
    """

    def __init__(self, n: int = 0):
        if n < 0:
            raise ValueError("number of vertices must be non-negative")
        self._jump = [-1] * n
        self._parent = [-1] * n
        self._parent_edge = [-1] * n
        self._depth = [0] * n
        self._child = [-1] * n
        self._brother = [-1] * n
        self._dsu = [-1] * n
        self._to_double = [False]
        self._grow(n)
        self._edge_count = 0

    def _grow(self, x: int) -> None:
        table = self._to_double
        while len(table) < x:
            table.extend(table[:len(table)])
            table.append(True)

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise IndexError(f"vertex {u} out of range")

    def _set_parent(self, v: int, p: int) -> None:
        self._parent[v] = p
        d = self._depth[p] + 1
        self._depth[v] = d
        self._jump[v] = self._jump[self._jump[p]] if self._to_double[d - 1] else p

    def __len__(self) -> int:
        return len(self._parent)

    def add_node(self) -> int:
        """Add an isolated vertex and return its index."""
        v = len(self)
        self._jump.append(-1)
        self._parent.append(-1)
        self._parent_edge.append(-1)
        self._depth.append(0)
        self._child.append(-1)
        self._brother.append(-1)
        self._dsu.append(-1)
        self._grow(len(self))
        return v

    def add_edge(self, u: int, v: int) -> int | None:
        """Join ``u`` and ``v``; return the new edge's index, or ``None`` if already connected."""
        self._check(u)
        self._check(v)
        ru, rv = self.root_of(u), self.root_of(v)
        if ru == rv:
            return None
        dsu = self._dsu
        if dsu[ru] > dsu[rv]:
            u, v = v, u
            ru, rv = rv, ru
        dsu[ru] += dsu[rv]
        dsu[rv] = ru

        parent, child, brother, pedge = self._parent, self._child, self._brother, self._parent_edge
        e = self._edge_count
        self._edge_count += 1
        pending = list(self.children(v))
        p, p2 = u, v
        while parent[p2] >= 0:
            w = parent[p2]
            prev = -1
            x = child[w]
            while x >= 0:
                nxt = brother[x]
                if x == p2:
                    if prev < 0:
                        child[w] = nxt
                    else:
                        brother[prev] = nxt
                    pedge[p2], e = e, pedge[p2]
                    brother[p2] = child[p]
                    child[p] = p2
                    self._set_parent(p2, p)
                else:
                    pending.append(x)
                    prev = x
                x = nxt
            p, p2 = p2, w
        pedge[p2], e = e, pedge[p2]
        brother[p2] = child[p]
        child[p] = p2
        self._set_parent(p2, p)
        for w in pending:
            self._set_parent(w, parent[w])
            pending.extend(self.children(w))
        return self._edge_count - 1

    def root_of(self, u: int) -> int:
        """Representative of the component containing ``u``."""
        self._check(u)
        dsu = self._dsu
        r = u
        while dsu[r] >= 0:
            r = dsu[r]
        while dsu[u] >= 0:
            dsu[u], u = r, dsu[u]
        return r

    def are_connected(self, u: int, v: int) -> bool:
        return self.root_of(u) == self.root_of(v)

    def component_size(self, u: int) -> int:
        return -self._dsu[self.root_of(u)]

    def parent_of(self, u: int) -> int:
        """Parent of ``u``, or -1 for a tree root."""
        self._check(u)
        return self._parent[u]

    def parent_edge_of(self, u: int) -> int:
        """Index of the edge to the parent of ``u``, or -1 for a tree root."""
        self._check(u)
        return self._parent_edge[u]

    def depth(self, u: int) -> int:
        self._check(u)
        return self._depth[u]

    def lca(self, u: int, v: int) -> int | None:
        """Lowest common ancestor under the current rooting."""
        if not self.are_connected(u, v):
            return None
        depth, jump, parent = self._depth, self._jump, self._parent
        if depth[u] < depth[v]:
            u, v = v, u
        dv = depth[v]
        while depth[u] != dv:
            u = jump[u] if depth[jump[u]] >= dv else parent[u]
        while u != v:
            if jump[u] != jump[v]:
                u, v = jump[u], jump[v]
            else:
                u, v = parent[u], parent[v]
        return u

    def middle(self, u: int, v: int, w: int) -> int | None:
        """The vertex lying on all three paths between ``u``, ``v`` and ``w``."""
        if not self.are_connected(u, v) or not self.are_connected(v, w):
            return None
        return self.lca(u, v) ^ self.lca(v, w) ^ self.lca(w, u)

    def dist(self, u: int, v: int) -> int | None:
        """Number of edges between ``u`` and ``v``."""
        g = self.lca(u, v)
        if g is None:
            return None
        return self._depth[u] - 2 * self._depth[g] + self._depth[v]

    def level_ancestor(self, u: int, d: int) -> int | None:
        """Ancestor of ``u`` at depth ``d``."""
        self._check(u)
        depth, jump, parent = self._depth, self._jump, self._parent
        if d < 0 or depth[u] < d:
            return None
        while depth[u] > d:
            j = jump[u]
            u = j if depth[j] >= d else parent[u]
        return u

    def jump(self, source: int, target: int, d: int) -> int | None:
        """The vertex ``d`` steps from ``source`` on the path towards ``target``."""
        q = self.dist(source, target)
        if q is None or d < 0 or q < d:
            return None
        ds, dt = self._depth[source], self._depth[target]
        if ds - d > dt - (q - d):
            return self.level_ancestor(source, ds - d)
        return self.level_ancestor(target, dt - (q - d))

    def children(self, v: int) -> Iterator[int]:
        """Children of ``v`` under the current rooting."""
        self._check(v)
        x = self._child[v]
        while x >= 0:
            yield x
            x = self._brother[x]