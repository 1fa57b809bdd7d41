"""Immutable two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

_Number = Union[int, float]


@dataclass(frozen=True)
class Vector2:
    """A 2D vector with value semantics."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    UP: ClassVar[Vector2]
    DOWN: ClassVar[Vector2]
    LEFT: ClassVar[Vector2]
    RIGHT: ClassVar[Vector2]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def rotated(self, radians: float) -> Vector2:
        """Return this vector rotated counter-clockwise by ``radians``."""
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Angle from the positive x axis, in the range [0, 2*pi)."""
        if self.x == 0.0 and self.y == 0.0:
            return 0.0
        result = math.atan2(abs(self.y), self.x)
        if self.y < 0:
            result = math.tau - result
        return result

    def perpendicular(self, right_side: bool = True) -> Vector2:
        """Return a perpendicular vector on the right side, or the left one."""
        result = Vector2(self.y, -self.x)
        return result if right_side else -result

    def normalized(self) -> Vector2:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector2.ZERO
        return Vector2(self.x / length, self.y / length)

    def distance(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def sqr_dist(self, other: Vector2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def angle_between(self, other: Vector2) -> float:
        """Unsigned angle between two vectors; raises ZeroDivisionError for a zero vector."""
        cosine = self.dot(other) / (self.length() * other.length())
        return math.acos(max(-1.0, min(1.0, cosine)))

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, _Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: _Number) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vector2, _Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"({self.x:f}, {self.y:f})"


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.UP = Vector2(0.0, 1.0)
Vector2.DOWN = Vector2(0.0, -1.0)
Vector2.LEFT = Vector2(-1.0, 0.0)
Vector2.RIGHT = Vector2(1.0, 0.0)