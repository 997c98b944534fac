"""Power projection of set power series under subset convolution."""

from __future__ import annotations

from typing import Sequence

from .bits import popcount

DEFAULT_MOD = 998244353


def _ranked_zeta(k: int, a: Sequence[int], mod: int) -> list[list[int]]:
    """Ranked zeta transform of ``a`` (length ``2**k``): one polynomial per subset."""
    width = k + 1
    r = [[0] * width for _ in range(1 << k)]
    for i, v in enumerate(a):
        r[i][popcount(i)] = v % mod
    for d in range(k):
        bit = 1 << d
        for mask in range(1 << k):
            if mask & bit:
                src = r[mask ^ bit]
                r[mask] = [(x + y) % mod for x, y in zip(r[mask], src)]
    return r


def _truncated_product(k: int, za: list[list[int]], zb: list[list[int]], mod: int) -> None:
    """In place: multiply ranked polynomials, keeping degrees from the subset size up to ``k``."""
    width = k + 1
    for i in range(1 << k):
        c = popcount(i)
        pa, pb = za[i], zb[i]
        q = [0] * width
        for ja in range(c + 1):
            x = pa[ja]
            if not x:
                continue
            for jb in range(c - ja, min(k - ja, c) + 1):
                q[ja + jb] += x * pb[jb]
        za[i] = [v % mod for v in q]


def _ranked_mobius(k: int, r: list[list[int]], mod: int) -> list[int]:
    """Inverse of :func:`_ranked_zeta`, reading each subset at its own rank."""
    for d in range(k):
        bit = 1 << d
        for mask in range(1 << k):
            if mask & bit:
                src = r[mask ^ bit]
                r[mask] = [(x - y) % mod for x, y in zip(r[mask], src)]
    return [r[i][popcount(i)] for i in range(1 << k)]


def sps_power_projection(
    n: int,
    a: Sequence[int],
    w: Sequence[int],
    m: int,
    exponential: bool = False,
    mod: int = DEFAULT_MOD,
) -> list[int]:
    """``[sum(w[S] * (a**k)[S] for S) for k in range(m)]`` modulo ``mod``.

    Powers are taken under subset convolution over ``n`` elements.  With
    ``exponential`` and ``a[0] == 0`` the ``k``-th value is divided by ``k!``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if m < 0:
        raise ValueError("m must be non-negative")
    size = 1 << n
    if len(a) < size or len(w) < size:
        raise ValueError(f"a and w need at least {size} entries")
    a = [x % mod for x in a[:size]]
    res = [x % mod for x in w[:size]]

    zet = [_ranked_zeta(i, a[1 << i:2 << i], mod) for i in range(n)]
    p = [0] * (n + 1)
    for d in range(n - 1, -1, -1):
        p[n - 1 - d] = res[0]
        buf = [0] * (1 << d)
        for e in range(d, -1, -1):
            lo, hi = 1 << e, 2 << e
            res[lo:hi] = res[lo:hi][::-1]
            z = _ranked_zeta(e, res[lo:hi], mod)
            _truncated_product(e, z, zet[e], mod)
            part = _ranked_mobius(e, z, mod)
            part.reverse()
            for i, v in enumerate(part):
                buf[i] = (buf[i] + v) % mod
        res = buf
    p[n] = res[0]

    if not exponential:
        f = 1
        for i in range(1, n + 1):
            f = f * i % mod
            p[i] = p[i] * f % mod

    a0 = a[0]
    if a0:
        comb = [1] * (n + 1)
        ans = [0] * m
        c = 1
        for d in range(m):
            for i in range(min(n, m - 1 - d) + 1):
                ans[i + d] = (ans[i + d] + comb[i] * c * p[i]) % mod
            for i in range(n):
                comb[i + 1] = (comb[i + 1] + comb[i]) % mod
            c = c * a0 % mod
        return ans
    return (p + [0] * m)[:m]