import math

import pytest

from elbran.camera import Camera
from elbran.input import GamepadState, InputAction, InputManager, Key
from elbran.vector import Vector2


def test_key_edges_follow_frames():
    manager = InputManager()
    manager.update({Key.SPACE})
    assert manager.is_key_pressed(Key.SPACE)
    assert manager.key_just_pressed(Key.SPACE)
    assert not manager.key_just_released(Key.SPACE)

    manager.update({Key.SPACE})
    assert manager.is_key_pressed(Key.SPACE)
    assert not manager.key_just_pressed(Key.SPACE)

    manager.update(set())
    assert not manager.is_key_pressed(Key.SPACE)
    assert manager.key_just_released(Key.SPACE)


def test_action_pressed_by_any_bound_key():
    manager = InputManager()
    manager.update({Key.W})
    assert manager.is_pressed(InputAction.UP)
    assert not manager.is_pressed(InputAction.DOWN)
    assert manager.just_pressed(InputAction.UP)


def test_just_pressed_false_when_other_key_already_held():
    manager = InputManager()
    manager.update({Key.UP})
    manager.update({Key.UP, Key.W})
    assert manager.key_just_pressed(Key.W)
    assert not manager.just_pressed(InputAction.UP)


def test_just_released_waits_for_all_keys():
    manager = InputManager()
    manager.update({Key.UP, Key.W})
    manager.update({Key.W})
    assert not manager.just_released(InputAction.UP)
    manager.update(set())
    assert manager.just_released(InputAction.UP)


def test_custom_bindings():
    manager = InputManager({InputAction.SELECT: [Key.SPACE]})
    manager.update({Key.RETURN})
    assert not manager.is_pressed(InputAction.SELECT)
    manager.update({Key.SPACE})
    assert manager.just_pressed(InputAction.SELECT)


def test_key_out_of_range_rejected():
    manager = InputManager()
    with pytest.raises(ValueError):
        manager.is_key_pressed(300)
    with pytest.raises(ValueError):
        manager.update({-1})


def test_mouse_at_view_center_is_camera_position():
    camera = Camera(16.0)
    camera.position = Vector2(5.0, 3.0)
    manager = InputManager()
    manager.update(set(), cursor=(480, 270), view_dimensions=(960, 540))
    assert manager.mouse_position(camera) == camera.position


def test_mouse_respects_view_offset():
    camera = Camera(16.0)
    camera.position = Vector2(-2.0, 1.0)
    manager = InputManager()
    manager.update(set(), cursor=(500, 270), view_offset=(120, 0), view_dimensions=(760, 540))
    assert manager.mouse_position(camera) == camera.position


def test_mouse_top_left_corner_maps_to_visible_corner():
    camera = Camera(16.0)
    manager = InputManager()
    manager.update(set(), cursor=(0, 0), view_dimensions=(960, 540))
    area = camera.visible_area()
    pos = manager.mouse_position(camera)
    assert pos.x == pytest.approx(area.left)
    assert pos.y == pytest.approx(area.top)


def test_mouse_rotation_keeps_distance():
    camera = Camera(16.0)
    manager = InputManager()
    manager.update(set(), cursor=(0, 0), view_dimensions=(960, 540))
    plain = manager.mouse_position(camera)
    camera.rotation = math.pi / 3
    rotated = manager.mouse_position(camera)
    assert rotated.length() == pytest.approx(plain.length())
    assert rotated.x == pytest.approx(plain.rotated(math.pi / 3).x)


def test_mouse_keeps_position_without_cursor():
    camera = Camera(16.0)
    manager = InputManager()
    manager.update(set(), cursor=(0, 0))
    before = manager.mouse_position(camera)
    manager.update(set())
    assert manager.mouse_position(camera) == before


def test_stick_full_deflection_both_directions():
    manager = InputManager()
    manager.update(set(), gamepads=[GamepadState(left_x=32767, right_y=-32768)])
    assert manager.stick(True, 0) == Vector2(1.0, 0.0)
    assert manager.stick(False, 0) == Vector2(0.0, -1.0)


def test_stick_dead_zone():
    manager = InputManager()
    manager.update(set(), gamepads=[GamepadState(left_x=3000), GamepadState(left_x=16384)])
    assert manager.stick(True, 0) == Vector2.ZERO
    assert manager.stick(True, 1).length() > 0.2


def test_disconnected_gamepad_is_zero():
    manager = InputManager()
    manager.update(set(), gamepads=[GamepadState(left_x=32767)])
    manager.update(set(), gamepads=[None])
    assert manager.stick(True, 0) == Vector2.ZERO


def test_stick_slot_out_of_range():
    manager = InputManager()
    with pytest.raises(IndexError):
        manager.stick(True, 4)
    with pytest.raises(ValueError):
        manager.update(set(), gamepads=[None] * 5)


def test_wheel_lasts_until_end_of_frame():
    manager = InputManager()
    manager.scroll(240)
    assert manager.mouse_wheel_spin == 2.0
    manager.end_frame()
    assert manager.mouse_wheel_spin == 0