"""Lexicographic ranking of all versions of an array under point updates."""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")


def _dense_ranks(values: Sequence[Any]) -> list[int]:
    """Dense ranks of ``values`` using only ``<``."""
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    current = 0
    prev = None
    for idx in order:
        if prev is not None and values[prev] < values[idx]:
            current += 1
        ranks[idx] = current
        prev = idx
    return ranks


class PointUpdateLexSort(Generic[T]):
    """Versions of an array, the first being the initial one and each later one
    differing from its predecessor at a single position.

    After :meth:`process`, :meth:`rank` gives each version's dense rank in
    lexicographic order; equal versions share a rank.  Values need only ``<``.
    """

    def __init__(self, values: Sequence[T] = ()):
        self._initial = list(values)
        self._mutations: list[tuple[int, T]] = []
        self._ranks: list[int] | None = None

    def mutate(self, pos: int, value: T) -> int:
        """Record a new version with ``value`` at ``pos``; return its version number."""
        if not 0 <= pos < len(self._initial):
            raise IndexError(f"position {pos} out of range")
        self._mutations.append((pos, value))
        self._ranks = None
        return len(self._mutations)

    def count(self) -> int:
        """Number of versions."""
        return len(self._mutations) + 1

    def last(self) -> int:
        """Version number of the latest version."""
        return self.count() - 1

    def _solve(self, events, l: int, r: int) -> tuple[list[int], list[int]]:
        if r - l == 1:
            group = events[l]
            return [t for t, _ in group], _dense_ranks([v for _, v in group])
        m = (l + r) // 2
        left_times, left_ranks = self._solve(events, l, m)
        right_times, right_ranks = self._solve(events, m, r)
        times = [0]
        pairs = [(left_ranks[0], right_ranks[0])]
        i = j = 1
        while i < len(left_times) or j < len(right_times):
            if j == len(right_times) or (i < len(left_times) and left_times[i] < right_times[j]):
                pairs.append((left_ranks[i], pairs[-1][1]))
                times.append(left_times[i])
                i += 1
            else:
                pairs.append((pairs[-1][0], right_ranks[j]))
                times.append(right_times[j])
                j += 1
        return times, _dense_ranks(pairs)

    def process(self) -> None:
        """Compute the ranks of all versions recorded so far."""
        k = len(self._initial)
        if k == 0:
            raise ValueError("cannot rank versions of an empty array")
        events: list[list[tuple[int, T]]] = [[(0, v)] for v in self._initial]
        for t, (pos, value) in enumerate(self._mutations, start=1):
            events[pos].append((t, value))
        _, ranks = self._solve(events, 0, k)
        self._ranks = ranks

    def _processed(self) -> list[int]:
        if self._ranks is None:
            raise RuntimeError("process() must be called after the last mutation")
        return self._ranks

    def rank(self, version: int) -> int:
        """Dense lexicographic rank of ``version``."""
        ranks = self._processed()
        if not 0 <= version < len(ranks):
            raise IndexError(f"version {version} out of range")
        return ranks[version]

    def max_sorted_pos(self) -> int:
        """The largest rank of any version."""
        return max(self._processed())