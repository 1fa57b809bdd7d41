"""Circles and axis-aligned rectangles used for hit tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .vector import Vector2


@dataclass
class Circle:
    """A circle given by its center and radius."""

    center: Vector2
    radius: float

    def contains(self, other: Union[Vector2, Circle]) -> bool:
        """Whether a point or a whole circle lies inside this circle."""
        if isinstance(other, Circle):
            return self.center.distance(other.center) + other.radius <= self.radius
        if isinstance(other, Vector2):
            return self.center.sqr_dist(other) <= self.radius * self.radius
        raise TypeError(f"cannot test containment of {type(other).__name__}")

    def intersects(self, other: Circle) -> bool:
        if not isinstance(other, Circle):
            raise TypeError(f"cannot test intersection with {type(other).__name__}")
        radius_sum = self.radius + other.radius
        return self.center.sqr_dist(other.center) <= radius_sum * radius_sum


@dataclass
class RectangleBox:
    """An axis-aligned rectangle stored by its edges."""

    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def from_center(cls, center: Vector2, size: Vector2) -> RectangleBox:
        box = cls(0.0, 0.0, 0.0, 0.0)
        box.set_center_and_size(center, size)
        return box

    @property
    def center(self) -> Vector2:
        return Vector2((self.right + self.left) / 2.0, (self.top + self.bottom) / 2.0)

    @center.setter
    def center(self, center: Vector2) -> None:
        self.set_center_and_size(center, self.size)

    @property
    def size(self) -> Vector2:
        return Vector2(self.right - self.left, self.top - self.bottom)

    @size.setter
    def size(self, size: Vector2) -> None:
        self.set_center_and_size(self.center, size)

    @property
    def width(self) -> float:
        return self.right - self.left

    @width.setter
    def width(self, width: float) -> None:
        self.set_center_and_size(self.center, Vector2(width, self.size.y))

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @height.setter
    def height(self, height: float) -> None:
        self.set_center_and_size(self.center, Vector2(self.size.x, height))

    def set_center_and_size(self, center: Vector2, size: Vector2) -> None:
        self.left = center.x - size.x / 2.0
        self.right = center.x + size.x / 2.0
        self.top = center.y + size.y / 2.0
        self.bottom = center.y - size.y / 2.0

    def expand(self, shift_per_side: float) -> None:
        """Move every edge outward by ``shift_per_side``."""
        self.left -= shift_per_side
        self.right += shift_per_side
        self.top += shift_per_side
        self.bottom -= shift_per_side

    def contains(self, other: Union[Vector2, RectangleBox]) -> bool:
        """Whether a point or a whole rectangle lies inside, edges included."""
        if isinstance(other, RectangleBox):
            return (
                other.left >= self.left
                and other.right <= self.right
                and other.top <= self.top
                and other.bottom >= self.bottom
            )
        if isinstance(other, Vector2):
            return self.left <= other.x <= self.right and self.bottom <= other.y <= self.top
        raise TypeError(f"cannot test containment of {type(other).__name__}")

    def intersects(self, other: Union[RectangleBox, Circle]) -> bool:
        if isinstance(other, RectangleBox):
            return not (
                self.right < other.left
                or self.left > other.right
                or self.top < other.bottom
                or self.bottom > other.top
            )
        if isinstance(other, Circle):
            return self._intersects_circle(other)
        raise TypeError(f"cannot test intersection with {type(other).__name__}")

    def _intersects_circle(self, circle: Circle) -> bool:
        cx, cy = circle.center.x, circle.center.y
        if self.left <= cx <= self.right:
            return math.fabs(cy - self.center.y) < circle.radius + (self.top - self.bottom) / 2.0
        if self.bottom <= cy <= self.top:
            return math.fabs(cx - self.center.x) < circle.radius + (self.right - self.left) / 2.0
        corner = Vector2(
            self.left if cx < self.left else self.right,
            self.bottom if cy < self.bottom else self.top,
        )
        return circle.center.sqr_dist(corner) <= circle.radius * circle.radius