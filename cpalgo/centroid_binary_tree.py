"""Centroid decomposition rearranged into binary trees over distance-sorted arrays.

Every vertex lies in one array per level.  A query for the vertices whose
distance from a source lies in ``[dist_l, dist_r)`` becomes a few contiguous
ranges of those arrays, so any one-dimensional range structure answers it.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import accumulate
from typing import Sequence


@dataclass(frozen=True)
class UpdatePoint:
    """Position ``p`` of a vertex inside array ``i``."""

    i: int
    p: int


@dataclass(frozen=True)
class QueryRange:
    """The half-open slice ``[l, r)`` of array ``i``."""

    i: int
    l: int
    r: int


@dataclass
class _BtNode:
    array_idx: int = -1
    cd_depth: int = 0
    sib: int = -1
    parent: int = -1
    array_left: int = 0
    size: int = 0
    exclude_cent: int = 0


def _find_centroid(adj: Sequence[Sequence[int]], z: list[int], root: int) -> int:
    while True:
        nx = next((c for c in adj[root] if z[c] * 2 > z[root]), -1)
        if nx < 0:
            return root
        z[root] -= z[nx]
        z[nx] += z[root]
        root = nx


class CentroidDecompositionBinaryTree:
    """Distance-range queries on a tree given as adjacency lists."""

    def __init__(self, adj: Sequence[Sequence[int]]):
        n = len(adj)
        if n < 1:
            raise ValueError("the tree needs at least one vertex")
        self._n = n
        if n == 1:
            self._cd_dist = [[0]]
            self._nodes = [_BtNode(0, 0, -1, -1, 0, 1, 0)]
            self._arrays = [[0]]
            self._seps = [[0, 1]]
            self._updates = [[UpdatePoint(0, 0)]]
            return

        parent = [-1] * n
        order = [0]
        for p in order:
            for e in adj[p]:
                if parent[p] != e:
                    parent[e] = p
                    order.append(e)
                    if len(order) > n:
                        raise ValueError("adjacency does not describe a tree")
        if len(order) != n:
            raise ValueError("adjacency does not describe a connected tree")
        z = [1] * n
        for v in reversed(order[1:]):
            z[parent[v]] += z[v]

        cd_bfs = [(-1, _find_centroid(adj, z, 0))]
        cd_adji = [1]
        cd_dep = [-1] * n
        cd_dep[cd_bfs[0][1]] = 0
        for _, g in cd_bfs:
            z[g] = 0
            for nx in adj[g]:
                if cd_dep[nx] == -1:
                    nxg = _find_centroid(adj, z, nx)
                    cd_bfs.append((nx, nxg))
                    cd_dep[nxg] = cd_dep[g] + 1
            cd_adji.append(len(cd_bfs))

        cd_height = max(cd_dep)
        cd_dist = [[-1] * n for _ in range(cd_height + 1)]
        for dep, dist in enumerate(cd_dist):
            bfs = [s for s in range(n) if cd_dep[s] == dep]
            for s in bfs:
                dist[s] = 0
            for p in bfs:
                for e in adj[p]:
                    if cd_dep[e] > dep and dist[e] == -1:
                        dist[e] = dist[p] + 1
                        bfs.append(e)
        self._cd_dist = cd_dist

        total = 2 * n - 1
        nodes = [_BtNode() for _ in range(total)]
        children: list[tuple[int, int]] = [(0, 0)] * total
        root_id = list(range(n))
        count = n
        for i in range(n):
            nodes[i].cd_depth = cd_dep[i]
            nodes[i].array_idx = i
            nodes[i].size = 1

        for ii in range(n - 1, -1, -1):
            g = cd_bfs[ii][1]
            heap = [(1, -g)]
            for _, eg in cd_bfs[cd_adji[ii]:cd_adji[ii + 1]]:
                rid = root_id[eg]
                heap.append((nodes[rid].size, -rid))
            heapq.heapify(heap)
            while len(heap) >= 2:
                a = -heapq.heappop(heap)[1]
                b = -heapq.heappop(heap)[1]
                idx = count
                count += 1
                nodes[a].sib, nodes[b].sib = b, a
                nodes[a].parent = nodes[b].parent = idx
                merged = nodes[idx]
                merged.cd_depth = cd_dep[g]
                merged.size = nodes[a].size + nodes[b].size
                merged.exclude_cent = nodes[a].exclude_cent & nodes[b].exclude_cent
                children[idx] = (a, b)
                heapq.heappush(heap, (merged.size, -idx))
            r = -heapq.heappop(heap)[1]
            nodes[r].cd_depth -= 1
            nodes[r].exclude_cent = 1
            root_id[g] = r

        nodes[-1].array_idx = -1
        sizes: list[int] = []
        for idx in range(total - 1, n - 1, -1):
            level = nodes[idx].array_idx + 1
            if len(sizes) == level:
                sizes.append(0)
            for c in children[idx]:
                nodes[c].array_idx = level
                nodes[c].array_left = sizes[level]
                sizes[level] += nodes[c].size

        arrays = [[0] * s for s in sizes]
        seps = [[0] * (s + 1) for s in sizes]
        for idx in range(n):
            node = nodes[idx]
            left = node.array_left
            arrays[node.array_idx][left] = idx
            seps[node.array_idx][left] = left
            seps[node.array_idx][left + 1] = left + 1

        for idx in range(n, total):
            node = nodes[idx]
            if node.parent < 0:
                continue
            dist = cd_dist[node.cd_depth]
            ex = node.exclude_cent
            members = [
                p
                for c in children[idx]
                for p in arrays[nodes[c].array_idx][nodes[c].array_left:nodes[c].array_left + nodes[c].size]
            ]
            counts = [0] * (node.size + 1)
            for p in members:
                counts[dist[p] - ex] += 1
            buf = list(accumulate(counts))
            arr = arrays[node.array_idx]
            left = node.array_left
            for p in members:
                key = dist[p] - ex
                buf[key] -= 1
                arr[left + buf[key]] = p
            seps[node.array_idx][left:left + node.size + 1] = [b + left for b in buf]

        updates: list[list[UpdatePoint | None]] = [[None] * (nodes[i].array_idx + 1) for i in range(n)]
        for i, arr in enumerate(arrays):
            for j, v in enumerate(arr):
                updates[v][i] = UpdatePoint(i, j)

        self._nodes = nodes
        self._arrays = arrays
        self._seps = seps
        self._updates = updates

    def _node_range(self, node: _BtNode, l: int, r: int) -> QueryRange:
        sep = self._seps[node.array_idx]
        lo = node.array_left + max(0, min(l - node.exclude_cent, node.size))
        hi = node.array_left + max(0, min(r - node.exclude_cent, node.size))
        return QueryRange(node.array_idx, sep[lo], sep[hi])

    def array_count(self) -> int:
        return len(self._arrays)

    def array(self, index: int) -> list[int]:
        """Vertices stored in array ``index``, in storage order."""
        return list(self._arrays[index])

    def update_points(self, vertex: int) -> list[UpdatePoint]:
        """Every place where ``vertex`` is stored, one per array level."""
        if not 0 <= vertex < self._n:
            raise IndexError(f"vertex {vertex} out of range")
        return list(self._updates[vertex])

    def query_ranges(self, source: int, dist_l: int, dist_r: int) -> list[QueryRange]:
        """Disjoint slices covering the vertices ``v`` with ``dist_l <= dist(source, v) < dist_r``."""
        if not 0 <= source < self._n:
            raise IndexError(f"vertex {source} out of range")
        nodes = self._nodes
        p = source
        res: list[QueryRange] = []
        if dist_l <= 0 < dist_r:
            leaf = nodes[p]
            res.append(QueryRange(leaf.array_idx, leaf.array_left, leaf.array_left + 1))
        while nodes[p].parent != -1:
            sib = nodes[nodes[p].sib]
            d = self._cd_dist[sib.cd_depth][source]
            rng = self._node_range(sib, dist_l - d, dist_r - d)
            if rng.l < rng.r:
                res.append(rng)
            p = nodes[p].parent
        return res