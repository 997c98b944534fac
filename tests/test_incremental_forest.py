import random
from collections import deque

import pytest

from cpalgo.incremental_forest import IncrementalForest


def _bfs(adj, s):
    dist = {s: 0}
    par = {s: -1}
    q = deque([s])
    while q:
        x = q.popleft()
        for y in adj[x]:
            if y not in dist:
                dist[y] = dist[x] + 1
                par[y] = x
                q.append(y)
    return dist, par


def _build(n=30, seed=1, attempts=60):
    rng = random.Random(seed)
    forest = IncrementalForest(n)
    adj = {i: [] for i in range(n)}
    edges = {}
    for _ in range(attempts):
        u, v = rng.randrange(n), rng.randrange(n)
        connected = v in _bfs(adj, u)[0]
        res = forest.add_edge(u, v)
        if connected:
            assert res is None
        else:
            assert res == len(edges)
            edges[res] = {u, v}
            adj[u].append(v)
            adj[v].append(u)
    return forest, adj, edges


def test_path_edge_indices_and_distance():
    f = IncrementalForest(4)
    assert f.add_edge(0, 1) == 0
    assert f.add_edge(1, 2) == 1
    assert f.add_edge(2, 3) == 2
    assert f.add_edge(3, 0) is None
    assert f.dist(0, 3) == 3
    assert f.component_size(2) == 4


def test_distances_match_bfs():
    forest, adj, _ = _build()
    for u in range(len(forest)):
        dist, _ = _bfs(adj, u)
        for v in range(len(forest)):
            assert forest.dist(u, v) == dist.get(v)
            assert forest.are_connected(u, v) == (v in dist)


def test_depth_parent_and_parent_edge():
    forest, adj, edges = _build(seed=5)
    for u in range(len(forest)):
        root = forest.root_of(u)
        dist, par = _bfs(adj, root)
        assert forest.depth(u) == dist[u]
        p = forest.parent_of(u)
        if forest.depth(u) == 0:
            assert p == -1
            assert forest.parent_edge_of(u) == -1
        else:
            assert forest.depth(p) == forest.depth(u) - 1
            assert edges[forest.parent_edge_of(u)] == {u, p}
        assert set(forest.children(u)) == {w for w in range(len(forest)) if forest.parent_of(w) == u}


def test_lca_matches_brute_force():
    forest, _, _ = _build(seed=7)
    n = len(forest)
    for u in range(n):
        for v in range(n):
            g = forest.lca(u, v)
            if not forest.are_connected(u, v):
                assert g is None
                continue
            ancestors = set()
            x = u
            while x != -1:
                ancestors.add(x)
                x = forest.parent_of(x)
            y = v
            while y not in ancestors:
                y = forest.parent_of(y)
            assert g == y


def test_middle_lies_on_all_paths():
    forest, _, _ = _build(n=20, seed=3, attempts=40)
    rng = random.Random(9)
    for _ in range(200):
        u, v, w = (rng.randrange(20) for _ in range(3))
        m = forest.middle(u, v, w)
        if not (forest.are_connected(u, v) and forest.are_connected(v, w)):
            assert m is None
            continue
        for a, b in ((u, v), (v, w), (w, u)):
            assert forest.dist(a, m) + forest.dist(m, b) == forest.dist(a, b)


def test_level_ancestor_and_jump():
    forest, _, _ = _build(seed=11)
    n = len(forest)
    for u in range(n):
        for d in range(-1, forest.depth(u) + 2):
            a = forest.level_ancestor(u, d)
            if d < 0 or d > forest.depth(u):
                assert a is None
            else:
                assert forest.depth(a) == d
                assert forest.lca(a, u) == a
    for s in range(n):
        for t in range(n):
            q = forest.dist(s, t)
            if q is None:
                assert forest.jump(s, t, 0) is None
                continue
            for d in range(q + 1):
                x = forest.jump(s, t, d)
                assert forest.dist(s, x) == d
                assert forest.dist(x, t) == q - d
            assert forest.jump(s, t, q + 1) is None
            assert forest.jump(s, t, -1) is None


def test_add_node_joins_later():
    f = IncrementalForest(2)
    f.add_edge(0, 1)
    v = f.add_node()
    assert v == 2
    assert len(f) == 3
    assert not f.are_connected(0, v)
    assert f.add_edge(v, 1) == 1
    assert f.dist(0, v) == 2
    assert f.component_size(v) == 3


def test_out_of_range_vertex():
    f = IncrementalForest(3)
    with pytest.raises(IndexError):
        f.add_edge(0, 3)
    with pytest.raises(ValueError):
        IncrementalForest(-1)