"""Integer two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """An immutable integer point or offset in pixel space."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Vector2D:
        if not isinstance(scalar, int):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"(x y) = ({self.x} {self.y})"