"""Chromatic polynomials through set-cover counting."""

from __future__ import annotations

from typing import Sequence

from .sps import DEFAULT_MOD, sps_power_projection


def set_cover_polynomial(n: int, table: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Coefficients of ``P(k)``, the number of ordered ``k``-tuples of sets with
    ``table[S] != 0`` weight ``table[S]`` that partition ``n`` elements (empty
    parts allowed when ``table[0] == 1``), in ascending order of degree.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(table) < (1 << n):
        raise ValueError(f"table needs at least {1 << n} entries")
    nn = 1 << (n - 1)
    lower = [x % mod for x in table[:nn]]
    lower[0] = (lower[0] - 1) % mod
    weight = [0] * nn
    for i in range(nn):
        weight[nn - 1 - i] = table[nn + i] % mod
    proj = [0, *sps_power_projection(n - 1, lower, weight, n, exponential=True, mod=mod)]
    prod = [0] * (n + 2)
    prod[0] = 1
    res = [0] * (n + 1)
    for i in range(n + 1):
        for j in range(i + 1):
            res[j] = (res[j] + prod[j] * proj[i]) % mod
        for j in range(i, -1, -1):
            prod[j + 1] = (prod[j + 1] + prod[j]) % mod
            prod[j] = prod[j] * -i % mod
    return res


def chromatic_polynomial(adjacency: Sequence[Sequence[int]], mod: int = DEFAULT_MOD) -> list[int]:
    """Coefficients of the chromatic polynomial, ascending, modulo ``mod``.

    ``adjacency[u][v]`` non-zero means ``u`` and ``v`` must get different colours.
    """
    n = len(adjacency)
    if any(len(row) != n for row in adjacency):
        raise ValueError("adjacency must be a square matrix")
    if n == 0:
        return [1]
    nn = 1 << n
    independent = [1] * nn
    for u in range(n):
        for v in range(n):
            if adjacency[u][v]:
                independent[(1 << u) | (1 << v)] = 0
    for d in range(n):
        bit = 1 << d
        for i in range(nn):
            if i & bit:
                independent[i] *= independent[i - bit]
    return set_cover_polynomial(n, independent, mod)