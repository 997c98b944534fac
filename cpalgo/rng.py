"""The xoshiro256++ pseudo-random generator with range and permutation helpers."""

from __future__ import annotations

from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")

MASK64 = (1 << 64) - 1
SIGN64 = 1 << 63
DEFAULT_SEED = 7001
MAX_PERMUTATION_LENGTH = 1 << 27


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


class Xoshiro256pp:
    """xoshiro256++ seeded through splitmix64."""

    def __init__(self, seed: int = DEFAULT_SEED):
        self._s = [0, 0, 0, 0]
        self.seed(seed)

    def seed(self, x: int = DEFAULT_SEED) -> None:
        """Reset the state from a non-zero 64-bit seed."""
        x &= MASK64
        if x == 0:
            raise ValueError("seed must be non-zero")
        state = [x]
        for _ in range(3):
            x = (x + 0x9E3779B97F4A7C15) & MASK64
            z = x
            z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
            z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
            state.append(z ^ (z >> 31))
        self._s = state

    def next_u64(self) -> int:
        """Next raw 64-bit output."""
        s0, s1, s2, s3 = self._s
        result = (_rotl((s0 + s3) & MASK64, 23) + s0) & MASK64
        t = (s1 << 17) & MASK64
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = _rotl(s3, 45)
        self._s = [s0, s1, s2, s3]
        return result

    def random_unsigned(self, l: int, r: int) -> int:
        """An integer ``x`` with ``l <= x <= r`` for 64-bit unsigned bounds."""
        if not 0 <= l <= r <= MASK64:
            raise ValueError(f"invalid unsigned range [{l}, {r}]")
        span = r - l
        res = self.next_u64()
        if res <= span:
            return res + l
        d = span + 1
        max_valid = MASK64 // d * d
        # Draws past the rejection threshold are consumed to keep the stream aligned.
        while self.next_u64() > max_valid:
            pass
        return res % d + l

    def random_signed(self, l: int, r: int) -> int:
        """An integer ``x`` with ``l <= x <= r`` for 64-bit signed bounds."""
        if not -SIGN64 <= l <= r < SIGN64:
            raise ValueError(f"invalid signed range [{l}, {r}]")
        ul = (l & MASK64) ^ SIGN64
        ur = (r & MASK64) ^ SIGN64
        res = self.random_unsigned(ul, ur) ^ SIGN64
        return res - (1 << 64) if res >= SIGN64 else res

    def random_npr(self, n_left: int, n_right: int, r: int) -> list[int]:
        """The first ``r`` entries of a random permutation of ``n_left..n_right``."""
        n = n_right - n_left
        if n < 0:
            raise ValueError("empty range")
        if r < 0 or r > MAX_PERMUTATION_LENGTH:
            raise ValueError(f"invalid count {r}")
        if r == 0:
            return []
        if n < r - 1:
            raise ValueError("count exceeds the size of the range")
        displaced: dict[int, int] = {}
        picked = []
        for i in range(r):
            p = self.random_signed(i, n)
            picked.append(p - displaced.get(p, 0))
            displaced[p] = p - (i - displaced.get(i, 0))
        return [v + n_left for v in picked]

    @staticmethod
    def permute(values: MutableSequence[T], perm: Sequence[int]) -> None:
        """Rearrange ``values`` in place so that ``values[i]`` becomes ``values[perm[i]]``."""
        if len(values) != len(perm):
            raise ValueError("permutation length differs from the sequence length")
        if sorted(perm) != list(range(len(perm))):
            raise ValueError("not a permutation")
        values[:] = [values[p] for p in perm]

    def shuffle(self, values: Sequence[T]) -> list[T]:
        """A shuffled copy of ``values``."""
        n = len(values)
        if n == 0:
            return []
        return [values[p] for p in self.random_npr(0, n - 1, n)]

    def shuffle_inplace(self, values: MutableSequence[T]) -> None:
        """Shuffle ``values`` in place."""
        n = len(values)
        if n == 0:
            return
        self.permute(values, self.random_npr(0, n - 1, n))