"""Counting spanning arborescences and Euler circuits modulo a prime."""

from __future__ import annotations

from typing import Sequence

DEFAULT_MOD = 998244353


def _determinant(matrix: list[list[int]], mod: int) -> int:
    a = [[x % mod for x in row] for row in matrix]
    n = len(a)
    det = 1
    for col in range(n):
        pivot = next((r for r in range(col, n) if a[r][col]), None)
        if pivot is None:
            return 0
        if pivot != col:
            a[col], a[pivot] = a[pivot], a[col]
            det = -det
        det = det * a[col][col] % mod
        inv = pow(a[col][col], -1, mod)
        for r in range(col + 1, n):
            f = a[r][col] * inv % mod
            if f:
                a[r] = [(x - f * y) % mod for x, y in zip(a[r], a[col])]
    return det % mod


def _check_square(n: int, g: Sequence[Sequence[int]]) -> None:
    if len(g) != n or any(len(row) != n for row in g):
        raise ValueError(f"expected an {n} x {n} matrix")


def count_directed_spanning_trees(
    n: int, root: int, g: Sequence[Sequence[int]], mod: int = DEFAULT_MOD
) -> int:
    """Weighted count of spanning trees in which every vertex ``i`` other than
    ``root`` chooses a parent ``j`` with weight ``g[i][j]``, modulo a prime ``mod``.
    """
    _check_square(n, g)
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")
    lap = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            lap[i][j] -= g[i][j]
            lap[i][i] += g[i][j]
    minor = [[lap[i][j] for j in range(n) if j != root] for i in range(n) if i != root]
    return _determinant(minor, mod)


def count_euler_cycles(n: int, g: Sequence[Sequence[int]], mod: int = DEFAULT_MOD) -> int:
    """Number of Euler circuits of the multigraph with ``g[i][j]`` edges ``i -> j``.

    Edges are distinguishable and circuits are counted up to rotation.
    """
    _check_square(n, g)
    nodes = []
    mult = 1
    for i in range(n):
        if sum(g[i][j] - g[j][i] for j in range(n)) != 0:
            return 0
        out_degree = sum(g[i])
        if out_degree:
            nodes.append(i)
            for k in range(2, out_degree):
                mult = mult * k % mod
    k = len(nodes)
    if k == 0:
        return 1
    sub = [[g[u][v] for v in nodes] for u in nodes]
    return count_directed_spanning_trees(k, 0, sub, mod) * mult % mod