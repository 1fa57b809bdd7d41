"""Hierarchical 2D transforms with cached world matrices."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Tuple

from .shapes import RectangleBox
from .vector import Vector2

Matrix = Tuple[Tuple[float, float, float, float], ...]


class Direction(Enum):
    CENTER = "center"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def identity_matrix() -> Matrix:
    return tuple(tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4))


def matrix_multiply(a: Matrix, b: Matrix) -> Matrix:
    """Product ``a @ b`` of two 4x4 matrices (row-vector convention)."""
    columns = list(zip(*b))
    return tuple(tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a)


def transform_point(matrix: Matrix, x: float, y: float, z: float = 0.0) -> Tuple[float, float, float]:
    """Transform the row vector (x, y, z, 1) by ``matrix``; w is dropped."""
    vector = (x, y, z, 1.0)
    return tuple(sum(v * row[col] for v, row in zip(vector, matrix)) for col in range(3))


def _scaling(sx: float, sy: float) -> Matrix:
    # the z axis is flattened: model space has no depth
    return ((sx, 0.0, 0.0, 0.0), (0.0, sy, 0.0, 0.0), (0.0, 0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 1.0))


def _rotation_z(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return ((cos, sin, 0.0, 0.0), (-sin, cos, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))


def _translation(x: float, y: float, z: float) -> Matrix:
    return ((1.0, 0.0, 0.0, 0.0), (0.0, 1.0, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (x, y, z, 1.0))


class Transform:
    """Position, depth, scale and rotation, optionally relative to a parent."""

    def __init__(
        self,
        position: Optional[Vector2] = None,
        z: float = 0.0,
        scale: Optional[Vector2] = None,
        rotation: float = 0.0,
    ) -> None:
        self._position = position if position is not None else Vector2(0.0, 0.0)
        self._z = float(z)
        self._scale = scale if scale is not None else Vector2(1.0, 1.0)
        self._rotation = float(rotation)
        self._parent: Optional[Transform] = None
        self._children: list[Transform] = []
        self._matrix = identity_matrix()
        self._dirty = True

    def _mark_for_update(self) -> None:
        self._dirty = True
        for child in self._children:
            child._mark_for_update()

    @property
    def parent(self) -> Optional[Transform]:
        return self._parent

    @parent.setter
    def parent(self, new_parent: Optional[Transform]) -> None:
        ancestor = new_parent
        while ancestor is not None:
            if ancestor is self:
                raise ValueError("a transform cannot be its own ancestor")
            ancestor = ancestor._parent
        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = new_parent
        if new_parent is not None:
            new_parent._children.append(self)
        self._mark_for_update()

    @property
    def children(self) -> Tuple[Transform, ...]:
        return tuple(self._children)

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, position: Vector2) -> None:
        self._mark_for_update()
        self._position = position

    @property
    def x(self) -> float:
        return self._position.x

    @x.setter
    def x(self, x: float) -> None:
        self._mark_for_update()
        self._position = Vector2(x, self._position.y)

    @property
    def y(self) -> float:
        return self._position.y

    @y.setter
    def y(self, y: float) -> None:
        self._mark_for_update()
        self._position = Vector2(self._position.x, y)

    @property
    def z(self) -> float:
        return self._z

    @z.setter
    def z(self, z: float) -> None:
        self._mark_for_update()
        self._z = float(z)

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, rotation: float) -> None:
        self._mark_for_update()
        self._rotation = float(rotation)

    @property
    def scale(self) -> Vector2:
        return self._scale

    @scale.setter
    def scale(self, scale: Vector2) -> None:
        self._mark_for_update()
        self._scale = scale

    def translate(self, displacement: Vector2) -> None:
        """Move along the transform's own rotated axes."""
        self._mark_for_update()
        self._position = self._position + displacement.rotated(self._rotation)

    def set_edge(self, edge: Direction, coordinate: float) -> None:
        """Shift so that the given edge lies at ``coordinate``; assumes no rotation."""
        self._mark_for_update()
        area = self.area()
        x, y = self._position
        match edge:
            case Direction.UP:
                y += coordinate - area.top
            case Direction.DOWN:
                y += coordinate - area.bottom
            case Direction.LEFT:
                x += coordinate - area.left
            case Direction.RIGHT:
                x += coordinate - area.right
        self._position = Vector2(x, y)

    def rotate(self, radians: float) -> None:
        self._mark_for_update()
        self._rotation += radians

    def stretch(self, horizontal: float, vertical: float) -> None:
        self._mark_for_update()
        self._scale = self._scale + Vector2(horizontal, vertical)

    def scale_by(self, multiplier: float) -> None:
        self._mark_for_update()
        self._scale = self._scale * multiplier

    def set_width(self, width: float) -> None:
        self._mark_for_update()
        aspect = self._scale.x / self._scale.y
        self._scale = Vector2(width, width / aspect)

    def set_height(self, height: float) -> None:
        self._mark_for_update()
        aspect = self._scale.x / self._scale.y
        self._scale = Vector2(height * aspect, height)

    def grow_width(self, scale_additive: float) -> None:
        self._mark_for_update()
        aspect = self._scale.x / self._scale.y
        width = self._scale.x + scale_additive
        self._scale = Vector2(width, width / aspect)

    def grow_height(self, scale_additive: float) -> None:
        self._mark_for_update()
        aspect = self._scale.x / self._scale.y
        height = self._scale.y + scale_additive
        self._scale = Vector2(height * aspect, height)

    def _world_point(self, x: float, y: float) -> Vector2:
        px, py, _ = transform_point(self.world_matrix(), x, y, 0.0)
        return Vector2(px, py)

    def global_position(self) -> Vector2:
        if self._parent is None:
            return self._position
        return self._world_point(0.0, 0.0)

    def global_scale(self) -> Vector2:
        if self._parent is None:
            return self._scale
        center = self._world_point(0.0, 0.0)
        right = self._world_point(0.5, 0.0)
        up = self._world_point(0.0, 0.5)
        return Vector2(2.0 * center.distance(right), 2.0 * center.distance(up))

    def global_rotation(self) -> float:
        if self._parent is None:
            return self._rotation
        center = self._world_point(0.0, 0.0)
        right = self._world_point(0.5, 0.0)
        return (right - center).angle()

    def global_z(self) -> float:
        total = self._z
        ancestor = self._parent
        while ancestor is not None:
            total += ancestor._z
            ancestor = ancestor._parent
        return total

    def world_matrix(self) -> Matrix:
        if self._dirty:
            matrix = matrix_multiply(
                matrix_multiply(_scaling(self._scale.x, self._scale.y), _rotation_z(self._rotation)),
                _translation(self._position.x, self._position.y, self._z),
            )
            if self._parent is not None:
                matrix = matrix_multiply(matrix, self._parent.world_matrix())
            self._matrix = matrix
            self._dirty = False
        return self._matrix

    def area(self) -> RectangleBox:
        """World-space bounding box; correct only when nothing is rotated."""
        local = RectangleBox.from_center(self._position, self._scale)
        if self._parent is None:
            return local
        parent_matrix = self._parent.world_matrix()
        left, bottom, _ = transform_point(parent_matrix, local.left, local.bottom, 0.0)
        right, top, _ = transform_point(parent_matrix, local.right, local.top, 0.0)
        return RectangleBox(left, right, top, bottom)

    def copy(self) -> Transform:
        """A detached copy: same values, no parent and no children."""
        return Transform(
            position=self._position,
            z=self._z,
            scale=self._scale,
            rotation=self._rotation,
        )