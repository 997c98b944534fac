"""Wavelet matrix over small non-negative integers."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable


class WaveletMatrix:
    """Static sequence supporting rank, select-style and order-statistic queries."""

    def __init__(self, max_value: int, values: Iterable[int]):
        values = list(values)
        if max_value < 0:
            raise ValueError("max_value must be non-negative")
        for v in values:
            if not 0 <= v <= max_value:
                raise ValueError(f"value {v} outside [0, {max_value}]")
        self._n = len(values)
        self._log = max_value.bit_length()
        self._ones: list[list[int]] = [[] for _ in range(self._log)]
        current = values
        for d in range(self._log - 1, -1, -1):
            self._ones[d] = [0, *accumulate((v >> d) & 1 for v in current)]
            zeros = [v for v in current if not (v >> d) & 1]
            ones = [v for v in current if (v >> d) & 1]
            current = zeros + ones

    def __len__(self) -> int:
        return self._n

    def _rank(self, d: int, p: int) -> int:
        return self._ones[d][p]

    def _left(self, d: int, p: int) -> int:
        return p - self._ones[d][p]

    def _right(self, d: int, p: int) -> int:
        return self._n - self._ones[d][self._n] + self._ones[d][p]

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")

    def get(self, p: int) -> int:
        """The value at position ``p``."""
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")
        res = 0
        for d in range(self._log - 1, -1, -1):
            res *= 2
            if self._ones[d][p + 1] - self._ones[d][p]:
                res |= 1
                p = self._right(d, p)
            else:
                p = self._left(d, p)
        return res

    def count(self, l: int, r: int, value: int) -> int:
        """Occurrences of ``value`` in ``[l, r)``."""
        self._check_range(l, r)
        if not 0 <= value < (1 << self._log):
            return 0
        for d in range(self._log - 1, -1, -1):
            if value >> d & 1:
                l, r = self._right(d, l), self._right(d, r)
            else:
                l, r = self._left(d, l), self._left(d, r)
        return r - l

    def count_less(self, l: int, r: int, upper: int) -> int:
        """Number of values below ``upper`` in ``[l, r)``."""
        self._check_range(l, r)
        if upper <= 0:
            return 0
        if upper >= (1 << self._log):
            return r - l
        ans = 0
        for d in range(self._log - 1, -1, -1):
            if upper >> d & 1:
                ans += self._left(d, r) - self._left(d, l)
                l, r = self._right(d, l), self._right(d, r)
            else:
                l, r = self._left(d, l), self._left(d, r)
        return ans

    def count_between(self, l: int, r: int, lower: int, upper: int) -> int:
        """Number of values ``v`` with ``lower <= v < upper`` in ``[l, r)``."""
        return self.count_less(l, r, upper) - self.count_less(l, r, lower)

    def kth_smallest(self, l: int, r: int, k: int) -> int:
        """The ``k``-th smallest value (0-based) in ``[l, r)``."""
        self._check_range(l, r)
        if not 0 <= k < r - l:
            raise IndexError(f"k={k} out of range for {r - l} elements")
        res = 0
        for d in range(self._log - 1, -1, -1):
            res *= 2
            zeros = (r - l) - self._rank(d, r) + self._rank(d, l)
            if k < zeros:
                l, r = self._left(d, l), self._left(d, r)
            else:
                res += 1
                k -= zeros
                l, r = self._right(d, l), self._right(d, r)
        return res

    def _max_no_greater(self, l: int, r: int, k: int, d: int) -> int:
        if l >= r:
            return -1
        if d < 0:
            return 0
        bit = 1 << d
        if not k & bit:
            return self._max_no_greater(self._left(d, l), self._left(d, r), k, d - 1)
        q = self._max_no_greater(self._right(d, l), self._right(d, r), k - bit, d - 1)
        if q != -1:
            return q + bit
        return self._max_no_greater(self._left(d, l), self._left(d, r), bit - 1, d - 1)

    def max_no_greater_than(self, l: int, r: int, k: int) -> int:
        """Largest value not above ``k`` in ``[l, r)``, or -1 if there is none."""
        self._check_range(l, r)
        if k < 0:
            return -1
        k = min(k, (1 << self._log) - 1)
        return self._max_no_greater(l, r, k, self._log - 1)