import pygame
import pytest

from galaxy_invaders.entities import (
    GameObject,
    RectCollider,
    Size2D,
    Vec2,
    apply_velocity,
)


def test_vec2_addition_is_componentwise():
    assert Vec2(1.5, -2.0) + Vec2(0.5, 3.0) == Vec2(2.0, 1.0)


def test_vec2_zero():
    assert Vec2.zero() == Vec2(0.0, 0.0)
    assert Vec2.zero().to_tuple() == (0.0, 0.0)


def test_apply_velocity():
    assert apply_velocity(Vec2(10, 10), Vec2(-7.5, 0)) == Vec2(2.5, 10)


def _box(x, y, w, h):
    return RectCollider(Vec2(x, y), Size2D(w, h))


@pytest.mark.parametrize(
    "other",
    [
        _box(10, 0, 10, 10),  # right edge
        _box(-10, 0, 10, 10),  # left edge
        _box(0, 10, 10, 10),  # bottom edge
        _box(0, -10, 10, 10),  # top edge
    ],
)
def test_touching_edges_do_not_intersect(other):
    box = _box(0, 0, 10, 10)
    assert not box.intersects(other)
    assert not other.intersects(box)


def test_one_unit_overlap_intersects():
    assert _box(0, 0, 10, 10).intersects(_box(9, 0, 10, 10))
    assert _box(0, 0, 10, 10).intersects(_box(0, 9, 10, 10))


def test_separated_boxes_do_not_intersect():
    assert not _box(0, 0, 10, 10).intersects(_box(50, 50, 10, 10))


def test_contained_box_intersects():
    assert _box(0, 0, 100, 100).intersects(_box(40, 40, 5, 5))


def test_game_object_size_is_scaled():
    obj = GameObject(
        visual=pygame.Surface((13, 8)), scale=3.0, position=Vec2(1, 2)
    )
    assert obj.size == Size2D(39.0, 24.0)
    assert obj.collider == RectCollider(Vec2(1, 2), Size2D(39.0, 24.0))
    assert obj.velocity == Vec2.zero()


@pytest.mark.parametrize("scale", [0.0, -1.0])
def test_game_object_rejects_non_positive_scale(scale):
    with pytest.raises(ValueError):
        GameObject(visual=pygame.Surface((1, 1)), scale=scale, position=Vec2())


def test_game_object_is_immutable():
    obj = GameObject(visual=pygame.Surface((1, 1)), scale=3.0, position=Vec2())
    with pytest.raises(AttributeError):
        obj.position = Vec2(1, 1)
