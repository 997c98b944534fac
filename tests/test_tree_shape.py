import random

import pytest

from cpalgo.csr import CsrArray
from cpalgo.tree_shape import tree_center, tree_centroid, tree_diameter


def adjacency(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def distances(adj, s):
    dist = [-1] * len(adj)
    dist[s] = 0
    queue = [s]
    for p in queue:
        for e in adj[p]:
            if dist[e] < 0:
                dist[e] = dist[p] + 1
                queue.append(e)
    return dist


def random_tree(n, seed):
    rng = random.Random(seed)
    return adjacency(n, [(rng.randrange(i), i) for i in range(1, n)])


def largest_part_without(adj, c):
    n = len(adj)
    best = 0
    for start in adj[c]:
        seen = {c, start}
        stack = [start]
        while stack:
            p = stack.pop()
            for e in adj[p]:
                if e not in seen:
                    seen.add(e)
                    stack.append(e)
        best = max(best, len(seen) - 1)
    return best if n > 1 else 0


def test_single_vertex():
    adj = [[]]
    assert tree_diameter(adj) == [0]
    assert tree_center(adj) == [0]
    assert tree_centroid(adj) == [0]


def test_empty_rejected():
    with pytest.raises(ValueError):
        tree_diameter([])
    with pytest.raises(ValueError):
        tree_centroid([])


def test_disconnected_rejected():
    with pytest.raises(ValueError):
        tree_diameter(adjacency(3, [(0, 1)]))


def test_path_of_five():
    adj = adjacency(5, [(i, i + 1) for i in range(4)])
    path = tree_diameter(adj)
    assert sorted(path) == [0, 1, 2, 3, 4]
    assert {path[0], path[-1]} == {0, 4}
    assert tree_center(adj) == [2]
    assert tree_centroid(adj) == [2]


def test_path_of_four_has_two_centers():
    adj = adjacency(4, [(i, i + 1) for i in range(3)])
    assert sorted(tree_center(adj)) == [1, 2]
    assert sorted(tree_centroid(adj)) == [1, 2]


@pytest.mark.parametrize("seed", range(8))
def test_random_diameter(seed):
    n = 3 + seed * 3
    adj = random_tree(n, seed)
    ecc = [max(distances(adj, v)) for v in range(n)]
    path = tree_diameter(adj)
    assert len(path) == max(ecc) + 1
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert b in adj[a]


@pytest.mark.parametrize("seed", range(8))
def test_random_center(seed):
    n = 2 + seed * 3
    adj = random_tree(n, 50 + seed)
    ecc = [max(distances(adj, v)) for v in range(n)]
    best = min(ecc)
    center = tree_center(adj)
    assert sorted(center) == [v for v in range(n) if ecc[v] == best]


@pytest.mark.parametrize("seed", range(8))
def test_random_centroid(seed):
    n = 2 + seed * 3
    adj = random_tree(n, 90 + seed)
    expected = [v for v in range(n) if 2 * largest_part_without(adj, v) <= n]
    centroid = tree_centroid(adj)
    assert sorted(centroid) == expected
    if len(centroid) == 2:
        assert centroid[1] in adj[centroid[0]]