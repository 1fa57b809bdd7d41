import math

import pytest

from elbran.camera import (
    CAMERA_DEPTH,
    CAMERA_MAX_Z,
    CAMERA_Z,
    Camera,
    look_to_matrix,
    orthographic_matrix,
)
from elbran.transform import matrix_multiply, transform_point
from elbran.vector import Vector2


def test_defaults():
    camera = Camera(10)
    assert camera.position == Vector2.ZERO
    assert camera.rotation == 0.0
    assert camera.world_width == 10.0


def test_world_dimensions_follow_aspect_ratio():
    dims = Camera(12, aspect_ratio=3).world_dimensions()
    assert dims.x == pytest.approx(12)
    assert dims.x / dims.y == pytest.approx(3)


def test_visible_area_centered_on_camera():
    camera = Camera(8, aspect_ratio=2)
    camera.position = Vector2(3, -1)
    area = camera.visible_area()
    assert area.center == camera.position
    assert area.size == camera.world_dimensions()


def test_view_maps_camera_position_to_origin():
    camera = Camera(10)
    camera.position = Vector2(4, 7)
    assert transform_point(camera.view(), 4, 7, CAMERA_Z) == pytest.approx((0.0, 0.0, 0.0))


@pytest.mark.parametrize("rotation", [0.0, 0.3, math.pi / 2, 2.0])
def test_view_rotation_keeps_camera_up_vertical(rotation):
    position = Vector2(2, -3)
    matrix = look_to_matrix(position, CAMERA_Z, rotation)
    up = Vector2(0, 1).rotated(rotation)
    point = transform_point(matrix, position.x + up.x, position.y + up.y, CAMERA_Z)
    assert point == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_view_recomputed_after_move():
    camera = Camera(10)
    before = camera.view()
    camera.position = Vector2(1, 1)
    assert camera.view() != before
    assert transform_point(camera.view(), 1, 1, CAMERA_Z) == pytest.approx((0.0, 0.0, 0.0))


def test_projection_maps_visible_corners_to_unit_volume():
    camera = Camera(10, aspect_ratio=2)
    dims = camera.world_dimensions()
    proj = camera.projection()
    assert transform_point(proj, dims.x / 2, dims.y / 2, CAMERA_DEPTH) == pytest.approx((1.0, 1.0, 1.0))
    assert transform_point(proj, -dims.x / 2, -dims.y / 2, 0.0) == pytest.approx((-1.0, -1.0, 0.0))


def test_projection_recomputed_after_width_change():
    camera = Camera(10, aspect_ratio=2)
    camera.projection()
    camera.world_width = 20
    dims = camera.world_dimensions()
    point = transform_point(camera.projection(), dims.x / 2, 0.0, 0.0)
    assert point[0] == pytest.approx(1.0)


def test_max_z_is_far_plane():
    camera = Camera(10)
    combined = matrix_multiply(camera.view(), camera.projection())
    assert transform_point(combined, 0, 0, CAMERA_MAX_Z)[2] == pytest.approx(1.0)
    assert transform_point(combined, 0, 0, CAMERA_Z)[2] == pytest.approx(0.0)


@pytest.mark.parametrize("args", [(0, 1, 0, 1), (1, 0, 0, 1), (1, 1, 5, 5)])
def test_orthographic_rejects_degenerate_volume(args):
    with pytest.raises(ValueError):
        orthographic_matrix(*args)