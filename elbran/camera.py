"""Orthographic 2D camera with cached view and projection matrices."""

from __future__ import annotations

import math
from typing import Optional

from .shapes import RectangleBox
from .transform import Matrix
from .vector import Vector2

CAMERA_Z = -100.0
CAMERA_DEPTH = 200.0
CAMERA_MAX_Z = CAMERA_Z + CAMERA_DEPTH  # objects at this depth are behind the background
DEFAULT_ASPECT_RATIO = 16.0 / 9.0


def look_to_matrix(position: Vector2, z: float, rotation: float) -> Matrix:
    """Left-handed view matrix looking down +z from ``position`` with the up axis rotated."""
    cos, sin = math.cos(rotation), math.sin(rotation)
    px, py = position
    return (
        (cos, -sin, 0.0, 0.0),
        (sin, cos, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (-(cos * px + sin * py), sin * px - cos * py, -z, 1.0),
    )


def orthographic_matrix(width: float, height: float, near: float, far: float) -> Matrix:
    """Left-handed orthographic projection onto the [-1, 1] x [-1, 1] x [0, 1] volume."""
    if width == 0 or height == 0:
        raise ValueError("projection width and height must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    depth = 1.0 / (far - near)
    return (
        (2.0 / width, 0.0, 0.0, 0.0),
        (0.0, 2.0 / height, 0.0, 0.0),
        (0.0, 0.0, depth, 0.0),
        (0.0, 0.0, -near * depth, 1.0),
    )


class Camera:
    """Looks at a region of the world ``world_width`` units wide."""

    def __init__(self, world_width: float, aspect_ratio: float = DEFAULT_ASPECT_RATIO) -> None:
        self._world_width = float(world_width)
        self._aspect_ratio = float(aspect_ratio)
        self._position = Vector2.ZERO
        self._rotation = 0.0
        self._view: Optional[Matrix] = None
        self._projection: Optional[Matrix] = None

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, radians: float) -> None:
        self._rotation = float(radians)
        self._view = None

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, position: Vector2) -> None:
        self._position = position
        self._view = None

    @property
    def world_width(self) -> float:
        return self._world_width

    @world_width.setter
    def world_width(self, world_width: float) -> None:
        self._world_width = float(world_width)
        self._projection = None

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, aspect_ratio: float) -> None:
        self._aspect_ratio = float(aspect_ratio)
        self._projection = None

    def world_dimensions(self) -> Vector2:
        return Vector2(self._world_width, self._world_width / self._aspect_ratio)

    def visible_area(self) -> RectangleBox:
        return RectangleBox.from_center(self._position, self.world_dimensions())

    def view(self) -> Matrix:
        if self._view is None:
            self._view = look_to_matrix(self._position, CAMERA_Z, self._rotation)
        return self._view

    def projection(self) -> Matrix:
        if self._projection is None:
            dims = self.world_dimensions()
            self._projection = orthographic_matrix(dims.x, dims.y, 0.0, CAMERA_DEPTH)
        return self._projection