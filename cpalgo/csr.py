"""Compressed sparse row storage of ``n`` lists."""

from __future__ import annotations

from itertools import accumulate, pairwise
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class CsrArray(Generic[T]):
    """``n`` lists laid out back to back in one flat list."""

    __slots__ = ("_elements", "_positions")

    def __init__(self, elements: Iterable[T], positions: Iterable[int]):
        elements = list(elements)
        positions = list(positions)
        if not positions or positions[0] != 0 or positions[-1] != len(elements):
            raise ValueError("positions must start at 0 and end at len(elements)")
        if any(a > b for a, b in pairwise(positions)):
            raise ValueError("positions must be non-decreasing")
        self._elements = elements
        self._positions = positions

    @classmethod
    def construct(cls, n: int, items: Iterable[tuple[int, T]]) -> "CsrArray[T]":
        """Group ``(row, value)`` pairs by row, keeping their order within a row."""
        buckets: list[list[T]] = [[] for _ in range(n)]
        for row, value in items:
            if not 0 <= row < n:
                raise IndexError(f"row {row} out of range for {n} rows")
            buckets[row].append(value)
        elements = [value for bucket in buckets for value in bucket]
        positions = [0, *accumulate(len(bucket) for bucket in buckets)]
        return cls(elements, positions)

    def __getitem__(self, u: int) -> list[T]:
        if not 0 <= u < len(self):
            raise IndexError(f"row {u} out of range")
        return self._elements[self._positions[u]:self._positions[u + 1]]

    def __len__(self) -> int:
        return len(self._positions) - 1

    def full_size(self) -> int:
        """Total number of stored elements."""
        return len(self._elements)