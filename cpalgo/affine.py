"""Affine maps ``x -> a*x + b`` modulo a prime, composed left to right."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MOD = 998244353


@dataclass(frozen=True)
class AffineMod:
    """The map ``x -> a*x + b (mod mod)``; ``f + g`` means apply ``f`` then ``g``."""

    a: int
    b: int
    mod: int = DEFAULT_MOD

    def __post_init__(self) -> None:
        if self.mod <= 0:
            raise ValueError("modulus must be positive")
        object.__setattr__(self, "a", self.a % self.mod)
        object.__setattr__(self, "b", self.b % self.mod)

    @classmethod
    def identity(cls, mod: int = DEFAULT_MOD) -> "AffineMod":
        return cls(1, 0, mod)

    def __add__(self, other: "AffineMod") -> "AffineMod":
        if not isinstance(other, AffineMod):
            return NotImplemented
        if other.mod != self.mod:
            raise ValueError("cannot compose maps with different moduli")
        return AffineMod(self.a * other.a, self.b * other.a + other.b, self.mod)

    def eval(self, x: int) -> int:
        return (x * self.a + self.b) % self.mod