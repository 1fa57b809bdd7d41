import pytest

from elbran.shapes import Circle, RectangleBox
from elbran.vector import Vector2


def test_circle_contains_boundary_point():
    circle = Circle(Vector2(1, 2), 3)
    assert circle.contains(circle.center + Vector2.RIGHT * 3)
    assert not circle.contains(circle.center + Vector2.UP * 3.01)


def test_circle_contains_circle():
    outer = Circle(Vector2.ZERO, 5)
    assert outer.contains(Circle(Vector2(1, 1), 2))
    assert not outer.contains(Circle(Vector2(4, 0), 2))
    assert not Circle(Vector2(1, 1), 2).contains(outer)


def test_circle_intersections():
    a = Circle(Vector2.ZERO, 1)
    touching = Circle(Vector2(2, 0), 1)
    far = Circle(Vector2(5, 5), 1)
    assert a.intersects(touching)
    assert touching.intersects(a)
    assert not a.intersects(far)


def test_circle_rejects_unknown_type():
    with pytest.raises(TypeError):
        Circle(Vector2.ZERO, 1).contains("point")


def test_from_center_round_trip():
    center, size = Vector2(3, -1), Vector2(4, 6)
    box = RectangleBox.from_center(center, size)
    assert box.center == center
    assert box.size == size
    assert box.width == size.x
    assert box.height == size.y


def test_width_and_height_setters_keep_center():
    box = RectangleBox.from_center(Vector2(1, 1), Vector2(2, 2))
    box.width = 10
    box.height = 0.5
    assert box.center == Vector2(1, 1)
    assert box.size == Vector2(10, 0.5)


def test_center_and_size_setters():
    box = RectangleBox.from_center(Vector2.ZERO, Vector2(2, 4))
    box.center = Vector2(5, 5)
    assert box.size == Vector2(2, 4)
    box.size = Vector2(8, 8)
    assert box.center == Vector2(5, 5)
    assert box.size == Vector2(8, 8)


def test_expand_grows_every_side():
    box = RectangleBox.from_center(Vector2(2, 3), Vector2(4, 2))
    before = box.size
    box.expand(1.5)
    assert box.center == Vector2(2, 3)
    assert box.size == before + Vector2(3, 3)


def test_contains_point_and_rectangle():
    box = RectangleBox(-1, 1, 1, -1)
    assert box.contains(Vector2(1, -1))
    assert not box.contains(Vector2(1.01, 0))
    assert box.contains(RectangleBox(-0.5, 0.5, 0.5, -0.5))
    assert box.contains(RectangleBox(-1, 1, 1, -1))
    assert not box.contains(RectangleBox(-2, 0, 0, -2))


def test_rectangle_intersections():
    box = RectangleBox(-1, 1, 1, -1)
    assert box.intersects(RectangleBox(1, 3, 1, -1))
    assert box.intersects(RectangleBox(0, 3, 3, 0))
    assert not box.intersects(RectangleBox(1.5, 3, 1, -1))
    assert not box.intersects(RectangleBox(-1, 1, -2, -3))


@pytest.mark.parametrize(
    "center, radius, expected",
    [
        (Vector2(0, 1.5), 1, True),
        (Vector2(0, 3), 1, False),
        (Vector2(-1.5, 0), 1, True),
        (Vector2(3, 0), 1, False),
        (Vector2(1.5, 1.5), 1, True),
        (Vector2(2, 2), 1, False),
        (Vector2(0, 0), 0.1, True),
    ],
)
def test_rectangle_circle_intersections(center, radius, expected):
    box = RectangleBox.from_center(Vector2.ZERO, Vector2(2, 2))
    assert box.intersects(Circle(center, radius)) is expected


def test_rectangle_rejects_unknown_type():
    with pytest.raises(TypeError):
        RectangleBox(0, 1, 1, 0).intersects((0, 0))