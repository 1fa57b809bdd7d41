"""Frame-by-frame sprite animation behaviors."""

from __future__ import annotations

import copy
from typing import Iterable, List, Optional, Sequence

from .game_object import Behavior, GameObject
from .renderers import AtlasRenderer, SpriteRenderer
from .sprite import Sprite, SpriteAtlas


class SpriteAnimator(Behavior):
    """Steps through atlas frames or a list of sprites at a fixed frame rate."""

    def __init__(self, sprite_sheet: SpriteAtlas, frames: int, fps: float) -> None:
        self._setup(sprite_sheet, [], frames, fps)

    @classmethod
    def from_sprites(cls, sprites: Iterable[Sprite], fps: float) -> SpriteAnimator:
        sprite_list = list(sprites)
        animator = cls.__new__(cls)
        animator._setup(None, sprite_list, len(sprite_list), fps)
        return animator

    def _setup(
        self,
        sheet: Optional[SpriteAtlas],
        sprites: List[Sprite],
        frames: int,
        fps: float,
    ) -> None:
        Behavior.__init__(self)
        if frames <= 1:
            raise ValueError("an animation needs at least two frames")
        self.looped = False
        self.oscillates = False
        self.reversed = False
        self._sheet = sheet
        self._sprites = sprites
        self._frame_count = frames
        self._timer = 0.0
        self._index = 0
        self._completed = False
        self.fps = fps

    @property
    def fps(self) -> float:
        return 1.0 / self._secs_per_frame

    @fps.setter
    def fps(self, fps: float) -> None:
        if fps <= 0:
            raise ValueError("frame rate must be positive")
        self._secs_per_frame = 1.0 / fps

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def current_index(self) -> int:
        return self._index

    def restart(self, reversed: bool = False) -> None:
        self._completed = False
        self.reversed = reversed
        self._index = self._frame_count - 1 if reversed else 0
        self._update_sprite()

    def is_complete(self) -> bool:
        return self._completed

    def attach(self, owner: Optional[GameObject]) -> None:
        self.owner = owner
        self._update_sprite()

    def update(self, delta_time: float) -> None:
        self._timer -= delta_time
        if self._timer <= 0.0:
            self._timer += self._secs_per_frame
            self._step_frame()
            self._update_sprite()

    def clone(self) -> SpriteAnimator:
        duplicate = copy.copy(self)
        duplicate.owner = None
        duplicate._sprites = list(self._sprites)
        return duplicate

    def _step_frame(self) -> None:
        last = self._frame_count - 1
        if self.reversed:
            self._index -= 1
            if self._index >= 0:
                return
            if self.looped and self.oscillates:
                self.reversed = False
                self._index = 1
            elif self.looped:
                self._index = last
            else:
                self._completed = True
                self._index = 0
        else:
            self._index += 1
            if self._index <= last:
                return
            if self.oscillates:
                self.reversed = True
                self._index = last - 1
            elif self.looped:
                self._index = 0
            else:
                self._completed = True
                self._index = last

    def _update_sprite(self) -> None:
        if self.owner is None:
            return
        renderer = self.owner.renderer
        if self._sheet is not None:
            if not isinstance(renderer, AtlasRenderer):
                raise TypeError("an atlas animation needs an AtlasRenderer")
            renderer.sprite = self._sheet
            renderer.row, renderer.col = divmod(self._index, self._sheet.cols)
        else:
            if not isinstance(renderer, SpriteRenderer):
                raise TypeError("a sprite animation needs a SpriteRenderer")
            renderer.sprite = self._sprites[self._index]


class AnimationGroup(Behavior):
    """Several animations for one object, of which one plays at a time."""

    def __init__(self, animations: Sequence[SpriteAnimator]) -> None:
        super().__init__()
        self._animations = list(animations)
        if not self._animations:
            raise ValueError("an animation group needs at least one animation")
        self._current = self._animations[0]

    @property
    def current(self) -> SpriteAnimator:
        return self._current

    def attach(self, owner: Optional[GameObject]) -> None:
        self.owner = owner
        for animation in self._animations:
            animation.attach(owner)

    def update(self, delta_time: float) -> None:
        self._current.update(delta_time)

    def clone(self) -> AnimationGroup:
        duplicate = AnimationGroup([animation.clone() for animation in self._animations])
        duplicate.enabled = self.enabled
        return duplicate

    def start_animation(self, index: int, reversed: bool = False) -> None:
        self._current = self.animation(index)
        self._current.restart(reversed)

    def animation(self, index: int) -> SpriteAnimator:
        if not 0 <= index < len(self._animations):
            raise IndexError("animation index out of range")
        return self._animations[index]