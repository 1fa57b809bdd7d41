import pytest
from PIL import Image

from elbran.animation import AnimationGroup, SpriteAnimator
from elbran.game_object import GameObject, RenderMode
from elbran.renderers import AtlasRenderer, SpriteRenderer
from elbran.sprite import Sprite, SpriteAtlas


def make_atlas():
    return SpriteAtlas(Image.new("RGBA", (8, 8)), 2, 2)


def make_sprites(count):
    return [Sprite(Image.new("RGBA", (2, 2))) for _ in range(count)]


def atlas_object(atlas):
    return GameObject(0, RenderMode.OPAQUE, AtlasRenderer(atlas))


def sprite_object(sprite):
    return GameObject(0, RenderMode.OPAQUE, SpriteRenderer(sprite))


def run(animator, owner, steps):
    indices = []
    for _ in range(steps):
        owner.update(1.0)
        indices.append(animator.current_index)
    return indices


def test_attach_shows_first_frame():
    atlas = make_atlas()
    obj = atlas_object(atlas)
    obj.add_behavior(SpriteAnimator(atlas, 4, 10))
    assert obj.renderer.sprite is atlas
    assert (obj.renderer.row, obj.renderer.col) == (0, 0)


def test_update_steps_through_atlas_frames():
    atlas = make_atlas()
    obj = atlas_object(atlas)
    animator = SpriteAnimator(atlas, 4, 10)
    obj.add_behavior(animator)
    obj.update(1.0)
    assert (obj.renderer.row, obj.renderer.col) == (0, 1)
    obj.update(1.0)
    assert (obj.renderer.row, obj.renderer.col) == (1, 0)


def test_unlooped_animation_completes_on_last_frame():
    atlas = make_atlas()
    obj = atlas_object(atlas)
    animator = SpriteAnimator(atlas, 4, 10)
    obj.add_behavior(animator)
    run(animator, obj, 5)
    assert animator.is_complete()
    assert animator.current_index == animator.frame_count - 1


def test_looped_animation_wraps():
    atlas = make_atlas()
    obj = atlas_object(atlas)
    animator = SpriteAnimator(atlas, 4, 10)
    animator.looped = True
    obj.add_behavior(animator)
    indices = run(animator, obj, 8)
    assert indices[3] == 0
    assert indices[:4] == indices[4:]
    assert not animator.is_complete()


def test_oscillating_animation_bounces_then_stops():
    sprites = make_sprites(3)
    obj = sprite_object(sprites[0])
    animator = SpriteAnimator.from_sprites(sprites, 10)
    animator.oscillates = True
    obj.add_behavior(animator)
    assert run(animator, obj, 5) == [1, 2, 1, 0, 0]
    assert animator.is_complete()


def test_looped_oscillation_keeps_going():
    sprites = make_sprites(3)
    obj = sprite_object(sprites[0])
    animator = SpriteAnimator.from_sprites(sprites, 10)
    animator.oscillates = True
    animator.looped = True
    obj.add_behavior(animator)
    indices = run(animator, obj, 8)
    assert indices[:4] == indices[4:]
    assert all(0 <= index < 3 for index in indices)
    assert not animator.is_complete()


def test_restart_reversed_starts_at_last_frame():
    sprites = make_sprites(3)
    obj = sprite_object(sprites[0])
    animator = SpriteAnimator.from_sprites(sprites, 10)
    obj.add_behavior(animator)
    animator.restart(True)
    assert animator.reversed
    assert animator.current_index == len(sprites) - 1
    assert obj.renderer.sprite is sprites[-1]


def test_sprite_list_animation_sets_renderer_sprite():
    sprites = make_sprites(3)
    obj = sprite_object(sprites[2])
    animator = SpriteAnimator.from_sprites(sprites, 10)
    obj.add_behavior(animator)
    assert obj.renderer.sprite is sprites[0]
    obj.update(1.0)
    assert obj.renderer.sprite is sprites[1]


def test_too_few_frames():
    with pytest.raises(ValueError):
        SpriteAnimator(make_atlas(), 1, 10)
    with pytest.raises(ValueError):
        SpriteAnimator.from_sprites(make_sprites(1), 10)


def test_fps_round_trip_and_validation():
    animator = SpriteAnimator.from_sprites(make_sprites(2), 10)
    animator.fps = 20
    assert animator.fps == pytest.approx(20)
    with pytest.raises(ValueError):
        animator.fps = 0


def test_atlas_animation_needs_atlas_renderer():
    atlas = make_atlas()
    obj = sprite_object(atlas)
    with pytest.raises(TypeError):
        obj.add_behavior(SpriteAnimator(atlas, 4, 10))


def test_clone_is_detached_and_independent():
    sprites = make_sprites(3)
    obj = sprite_object(sprites[0])
    animator = SpriteAnimator.from_sprites(sprites, 10)
    obj.add_behavior(animator)
    obj.update(1.0)
    duplicate = animator.clone()
    assert duplicate.owner is None
    assert duplicate.current_index == animator.current_index
    duplicate.update(1.0)
    assert duplicate.current_index == animator.current_index + 1


def test_group_requires_animations():
    with pytest.raises(ValueError):
        AnimationGroup([])


def test_group_index_out_of_range():
    group = AnimationGroup([SpriteAnimator.from_sprites(make_sprites(2), 10)])
    with pytest.raises(IndexError):
        group.animation(1)
    with pytest.raises(IndexError):
        group.animation(-1)


def test_group_attach_sets_owner_on_all():
    first = SpriteAnimator.from_sprites(make_sprites(2), 10)
    second = SpriteAnimator.from_sprites(make_sprites(2), 10)
    group = AnimationGroup([first, second])
    obj = sprite_object(make_sprites(1)[0])
    obj.add_behavior(group)
    assert first.owner is obj
    assert second.owner is obj
    assert group.current is first


def test_group_start_animation_switches_and_updates_current_only():
    walk = make_sprites(3)
    jump = make_sprites(3)
    first = SpriteAnimator.from_sprites(walk, 10)
    second = SpriteAnimator.from_sprites(jump, 10)
    group = AnimationGroup([first, second])
    obj = sprite_object(walk[0])
    obj.add_behavior(group)
    group.start_animation(1)
    assert group.current is second
    assert obj.renderer.sprite is jump[0]
    obj.update(1.0)
    assert obj.renderer.sprite is jump[1]
    assert first.current_index == 0


def test_group_clone_copies_animations():
    first = SpriteAnimator.from_sprites(make_sprites(2), 10)
    group = AnimationGroup([first])
    obj = sprite_object(make_sprites(1)[0])
    obj.add_behavior(group)
    duplicate = group.clone()
    assert duplicate.owner is None
    assert duplicate.animation(0) is not first
    assert duplicate.animation(0).owner is None


def test_disabled_group_is_not_updated():
    sprites = make_sprites(3)
    animator = SpriteAnimator.from_sprites(sprites, 10)
    group = AnimationGroup([animator])
    obj = sprite_object(sprites[0])
    obj.add_behavior(group)
    group.enabled = False
    obj.update(1.0)
    assert animator.current_index == 0