"""Segment trees over a monoid, with and without lazy propagation."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

S = TypeVar("S")
F = TypeVar("F")


def _initial_values(e, data) -> list:
    if isinstance(data, int):
        if data < 0:
            raise ValueError("size must be non-negative")
        return [e] * data
    return list(data)


class Segtree(Generic[S]):
    """Point update, range fold over the monoid ``(op, e)``."""

    def __init__(self, op: Callable[[S, S], S], e: S, data: int | Iterable[S]):
        values = _initial_values(e, data)
        self._op = op
        self._e = e
        self._n = len(values)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._d = [e] * (2 * size)
        self._d[size:size + self._n] = values
        for i in range(size - 1, 0, -1):
            self._update(i)

    def _update(self, i: int) -> None:
        self._d[i] = self._op(self._d[2 * i], self._d[2 * i + 1])

    def _check_point(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def set(self, p: int, x: S) -> None:
        self._check_point(p)
        p += self._size
        self._d[p] = x
        p >>= 1
        while p:
            self._update(p)
            p >>= 1

    def get(self, p: int) -> S:
        self._check_point(p)
        return self._d[p + self._size]

    def prod(self, l: int, r: int) -> S:
        """Fold of the half-open range ``[l, r)``."""
        if l >= r:
            return self._e
        if l < 0 or r > self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        op, d = self._op, self._d
        left, right = self._e, self._e
        l += self._size
        r += self._size
        while l < r:
            if l & 1:
                left = op(left, d[l])
                l += 1
            if r & 1:
                r -= 1
                right = op(d[r], right)
            l >>= 1
            r >>= 1
        return op(left, right)

    def all_prod(self) -> S:
        return self._d[1]

    def min_left(self, r: int, pred: Callable[[S], bool]) -> int:
        """Smallest ``l`` such that ``pred(prod(l, r))`` holds, scanning leftwards."""
        if not 0 <= r <= self._n:
            raise IndexError(f"position {r} out of range")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        acc = self._e
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not pred(op(d[r], acc)):
                while r < size:
                    r = 2 * r + 1
                    if pred(op(d[r], acc)):
                        acc = op(d[r], acc)
                        r -= 1
                return r + 1 - size
            acc = op(d[r], acc)
            if (r & -r) == r:
                return 0

    def max_right(self, l: int, pred: Callable[[S], bool]) -> int:
        """Largest ``r`` such that ``pred(prod(l, r))`` holds, scanning rightwards."""
        if not 0 <= l <= self._n:
            raise IndexError(f"position {l} out of range")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        acc = self._e
        while True:
            while l % 2 == 0:
                l >>= 1
            if not pred(op(acc, d[l])):
                while l < size:
                    l *= 2
                    if pred(op(acc, d[l])):
                        acc = op(acc, d[l])
                        l += 1
                return min(l - size, self._n)
            acc = op(acc, d[l])
            l += 1
            if (l & -l) == l:
                return self._n


class LazySegtree(Generic[S, F]):
    """Range update, range fold; ``composition(f, g)`` applies ``g`` first."""

    def __init__(
        self,
        op: Callable[[S, S], S],
        composition: Callable[[F, F], F],
        mapping: Callable[[F, S], S],
        e: S,
        identity: F,
        data: int | Iterable[S],
    ):
        values = _initial_values(e, data)
        self._op = op
        self._composition = composition
        self._mapping = mapping
        self._e = e
        self._identity = identity
        self._n = len(values)
        size, log = 1, 0
        while size < self._n:
            size *= 2
            log += 1
        self._size = size
        self._log = log
        self._d = [e] * (2 * size)
        self._lz = [identity] * size
        self._pending = [False] * size
        self._d[size:size + self._n] = values
        for i in range(size - 1, 0, -1):
            self._update(i)

    def _update(self, i: int) -> None:
        self._d[i] = self._op(self._d[2 * i], self._d[2 * i + 1])

    def _all_apply(self, k: int, f: F) -> None:
        self._d[k] = self._mapping(f, self._d[k])
        if k < self._size:
            self._lz[k] = self._composition(f, self._lz[k])
            self._pending[k] = True

    def _push(self, k: int) -> None:
        if not self._pending[k]:
            return
        f = self._lz[k]
        self._all_apply(2 * k, f)
        self._all_apply(2 * k + 1, f)
        self._lz[k] = self._identity
        self._pending[k] = False

    def _check_point(self, p: int) -> None:
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")

    def set(self, p: int, x: S) -> None:
        self._check_point(p)
        p += self._size
        for i in range(self._log, 0, -1):
            self._push(p >> i)
        self._d[p] = x
        for i in range(1, self._log + 1):
            self._update(p >> i)

    def get(self, p: int) -> S:
        self._check_point(p)
        p += self._size
        for i in range(self._log, 0, -1):
            self._push(p >> i)
        return self._d[p]

    def apply(self, p: int, f: F) -> None:
        self.set(p, self._mapping(f, self.get(p)))

    def apply_range(self, l: int, r: int, f: F) -> None:
        """Apply ``f`` to every element of ``[l, r)``."""
        if l >= r:
            return
        if l < 0 or r > self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        l += self._size
        r += self._size
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)
        l0, r0 = l, r
        while l < r:
            if l & 1:
                self._all_apply(l, f)
                l += 1
            if r & 1:
                r -= 1
                self._all_apply(r, f)
            l >>= 1
            r >>= 1
        for i in range(1, self._log + 1):
            if ((l0 >> i) << i) != l0:
                self._update(l0 >> i)
            if ((r0 >> i) << i) != r0:
                self._update((r0 - 1) >> i)

    def prod(self, l: int, r: int) -> S:
        """Fold of the half-open range ``[l, r)``."""
        if l >= r:
            return self._e
        if l < 0 or r > self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        l += self._size
        r += self._size
        for i in range(self._log, 0, -1):
            if ((l >> i) << i) != l:
                self._push(l >> i)
            if ((r >> i) << i) != r:
                self._push((r - 1) >> i)
        op, d = self._op, self._d
        left, right = self._e, self._e
        while l < r:
            if l & 1:
                left = op(left, d[l])
                l += 1
            if r & 1:
                r -= 1
                right = op(d[r], right)
            l >>= 1
            r >>= 1
        return op(left, right)

    def all_prod(self) -> S:
        return self._d[1]

    def min_left(self, r: int, pred: Callable[[S], bool]) -> int:
        """Smallest ``l`` such that ``pred(prod(l, r))`` holds, scanning leftwards."""
        if not 0 <= r <= self._n:
            raise IndexError(f"position {r} out of range")
        if r == 0:
            return 0
        op, d, size = self._op, self._d, self._size
        r += size
        for i in range(self._log, 0, -1):
            self._push((r - 1) >> i)
        acc = self._e
        while True:
            r -= 1
            while r > 1 and r % 2:
                r >>= 1
            if not pred(op(d[r], acc)):
                while r < size:
                    self._push(r)
                    r = 2 * r + 1
                    if pred(op(d[r], acc)):
                        acc = op(d[r], acc)
                        r -= 1
                return r + 1 - size
            acc = op(d[r], acc)
            if (r & -r) == r:
                return 0

    def max_right(self, l: int, pred: Callable[[S], bool]) -> int:
        """Largest ``r`` such that ``pred(prod(l, r))`` holds, scanning rightwards."""
        if not 0 <= l <= self._n:
            raise IndexError(f"position {l} out of range")
        if l == self._n:
            return self._n
        op, d, size = self._op, self._d, self._size
        l += size
        for i in range(self._log, 0, -1):
            self._push(l >> i)
        acc = self._e
        while True:
            while l % 2 == 0:
                l >>= 1
            if not pred(op(acc, d[l])):
                while l < size:
                    self._push(l)
                    l *= 2
                    if pred(op(acc, d[l])):
                        acc = op(acc, d[l])
                        l += 1
                return min(l - size, self._n)
            acc = op(acc, d[l])
            l += 1
            if (l & -l) == l:
                return self._n