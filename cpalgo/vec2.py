"""Two-dimensional integer vectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A point or displacement ``(x, y)`` with exact integer arithmetic."""

    x: int = 0
    y: int = 0

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: int) -> "Vec2":
        if isinstance(k, Vec2):
            return NotImplemented
        return Vec2(self.x * k, self.y * k)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def dot(self, other: "Vec2") -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> int:
        """Signed area of the parallelogram; positive when ``other`` is counter-clockwise."""
        return self.x * other.y - self.y * other.x

    def norm(self) -> int:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def __lt__(self, other: "Vec2") -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    @staticmethod
    def compare_yx(a: "Vec2", b: "Vec2") -> bool:
        """Whether ``a`` comes before ``b`` ordering by ``y`` then ``x``."""
        return (a.y, a.x) < (b.y, b.x)

    @staticmethod
    def compare_xy(a: "Vec2", b: "Vec2") -> bool:
        """Whether ``a`` comes before ``b`` ordering by ``x`` then ``y``."""
        return (a.x, a.y) < (b.x, b.y)