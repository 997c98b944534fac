"""Min-plus convolution when one operand is concave or convex."""

from __future__ import annotations

from typing import Sequence

from .lichao import LiChaoTreeFlexible


def _check(a: Sequence, b: Sequence) -> None:
    if not a or not b:
        raise ValueError("both sequences must be non-empty")


def min_plus_convolution_concave_a(a: Sequence[int], b: Sequence[int], inf: int) -> list[tuple[int, int]]:
    """``c[k] = min(a[i] + b[k-i])`` for concave ``a``, as ``(value, i)`` pairs."""
    _check(a, b)
    n, m = len(a), len(b)
    c: list[tuple[int, int]] = [(inf, -1)] * (n + m - 1)
    for s in range(0, m, n + 1):
        width = m - s if m - s <= n else n + 1

        def eval_left(f: int, x: int, s: int = s) -> int:
            if x < f:
                return -inf - f
            return a[x - f] + b[s + f]

        left = LiChaoTreeFlexible(n, 0, eval_left)
        for i in range(n):
            if i + s < m:
                left.add_line(i)
            k = left.min_func(i)
            value = a[i - k] + b[s + k]
            if value < c[s + i][0]:
                c[s + i] = (value, i - k)

        def eval_right(f: int, x: int, s: int = s) -> int:
            x += 1
            if f < x:
                return -inf + f
            return a[n - 1 - (f - x)] + b[s + f]

        right = LiChaoTreeFlexible(width - 1, width - 1, eval_right)
        for i in range(width - 1, 0, -1):
            right.add_line(i)
            k = right.min_func(i - 1)
            p = s + (n - 1) + i
            value = a[p - s - k] + b[s + k]
            if value < c[p][0]:
                c[p] = (value, p - s - k)
    return c


def min_plus_convolution_convex_a(a: Sequence[int], b: Sequence[int], inf: int) -> list[tuple[int, int]]:
    """``c[k] = min(a[i] + b[k-i])`` for convex ``a``, as ``(value, i)`` pairs."""
    _check(a, b)
    n, m = len(a), len(b)
    z = n + m - 1
    c: list[tuple[int, int]] = [(inf, -1)] * z
    idx = [0] * (z + 1)
    c[0] = (a[0] + b[0], 0)
    idx[z] = m - 1
    d = 1
    while d < z:
        d *= 2
    q = d // 2
    while q > 0:
        for h in range(q, z, 2 * q):
            lo, hi = h - q, min(h + q, z)
            idx[h] = idx[lo]
            for t in range(idx[lo], idx[hi] + 1):
                if t <= h and h - t < n and b[t] + a[h - t] < c[h][0]:
                    c[h] = (b[t] + a[h - t], h - t)
                    idx[h] = t
        q //= 2
    return c