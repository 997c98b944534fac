"""Li Chao tree over arbitrary functions with a user-supplied evaluator."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

Func = TypeVar("Func")


class LiChaoTreeFlexible(Generic[Func]):
    """Minimum of functions at integer points ``0 <= x < n``.

    Functions need only pairwise cross at most once; ``evaluate(f, x)`` gives
    the value of ``f`` at ``x``.
    """

    def __init__(self, n: int, inf: Func, evaluate: Callable[[Func, int], object]):
        self._xn = n
        size = 1
        while size < n:
            size *= 2
        self._size = size
        self._inf = inf
        self._evaluate = evaluate
        self._funcs: list[Func] = [inf] * (2 * size)
        self._visited = [False] * (2 * size)

    def _less_at(self, f: Func, g: Func, p: int) -> bool:
        if p >= self._xn:
            p = self._xn - 1
        return self._evaluate(f, p) < self._evaluate(g, p)

    def _insert(self, i: int, f: Func, a: int, b: int, l: int, r: int) -> None:
        funcs = self._funcs
        while i < len(funcs):
            self._visited[i] = True
            if r <= a or b <= l:
                return
            m = (a + b) // 2
            if not (l <= a and b <= r):
                self._insert(2 * i, f, a, m, l, r)
                self._insert(2 * i + 1, f, m, b, l, r)
                return
            if self._less_at(f, funcs[i], m):
                funcs[i], f = f, funcs[i]
            if a + 1 == b:
                return
            less_left = self._less_at(f, funcs[i], a)
            less_right = self._less_at(f, funcs[i], b - 1)
            if not less_left and not less_right:
                return
            if less_left:
                i, b = 2 * i, m
            else:
                i, a = 2 * i + 1, m

    def add_segment(self, l: int, r: int, f: Func) -> None:
        """Add ``f`` on the points ``l <= x < r``."""
        if l >= r:
            return
        self._insert(1, f, 0, self._size, l, r)

    def add_line(self, f: Func) -> None:
        """Add ``f`` on every point."""
        self.add_segment(0, self._size, f)

    def min_func(self, p: int) -> Func:
        """The stored function with the least value at ``p``."""
        res = self._inf
        i, l, r = 1, 0, self._size
        while i < len(self._funcs) and self._visited[i]:
            if self._less_at(self._funcs[i], res, p):
                res = self._funcs[i]
            m = (l + r) // 2
            if p < m:
                i, r = 2 * i, m
            else:
                i, l = 2 * i + 1, m
        return res