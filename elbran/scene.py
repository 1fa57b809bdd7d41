"""Scenes hold game objects in draw order and drive their updates."""

from __future__ import annotations

import bisect
from typing import Iterator, List, Optional, Union

from .camera import DEFAULT_ASPECT_RATIO, Camera
from .color import Color
from .game_object import GameObject, RenderMode
from .renderers import Canvas, DrawCommand
from .sprite import Sprite
from .transform import identity_matrix


class Scene:
    """A camera plus opaque, translucent and text objects kept sorted by depth."""

    def __init__(
        self,
        camera_width: float,
        background: Union[Color, Sprite] = Color.CLEAR,
        aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    ) -> None:
        self.camera = Camera(camera_width, aspect_ratio)
        if isinstance(background, Sprite):
            self.background_color = Color.WHITE
            self.background_image: Optional[Sprite] = background
        else:
            self.background_color = background
            self.background_image = None
        self._opaques: List[GameObject] = []
        self._translucents: List[GameObject] = []
        self._texts: List[GameObject] = []

    def _group_for(self, mode: RenderMode) -> List[GameObject]:
        if mode is RenderMode.TRANSLUCENT:
            return self._translucents
        if mode is RenderMode.TEXT:
            return self._texts
        return self._opaques

    def objects(self) -> Iterator[GameObject]:
        """Every member: opaques, then translucents, then texts, each by ascending depth."""
        yield from self._opaques
        yield from self._translucents
        yield from self._texts

    def update(self, delta_time: float) -> None:
        for obj in list(self.objects()):
            if obj.is_active():
                obj.update(delta_time)

        for group in (self._opaques, self._translucents, self._texts):
            doomed = [obj for obj in group if obj.to_be_deleted]
            for obj in reversed(doomed):
                self._remove(obj)
                obj.scene = None
            group[:] = [obj for obj in group if not obj.to_be_deleted]

    def draw(self, canvas: Canvas) -> None:
        """Opaques front to back, the background, text, then translucents back to front."""
        for obj in self._opaques:
            if obj.is_active():
                obj.draw(canvas, self.camera)

        self._draw_background(canvas)

        for obj in self._texts:
            if obj.is_active():
                obj.draw(canvas, self.camera)

        for obj in reversed(self._translucents):
            if obj.is_active():
                obj.draw(canvas, self.camera)

    def _draw_background(self, canvas: Canvas) -> None:
        if self.background_color.alpha <= 0:
            return
        canvas.draw(
            DrawCommand(
                "background",
                identity_matrix(),
                {"color": self.background_color},
                self.background_image,
            )
        )

    def add(self, obj: GameObject) -> None:
        """Add an object and its children; objects already in a scene are ignored."""
        if obj.scene is not None:
            return
        obj.scene = self
        for child in obj.children:
            self.add(child)
        if obj.render_mode is RenderMode.TEXT:
            self._texts.append(obj)
            return
        self._sort_into(obj, self._group_for(obj.render_mode))

    def update_draw_order(self, member: GameObject) -> None:
        """Re-sort a member after its depth changed."""
        group = self._group_for(member.render_mode)
        try:
            group.remove(member)
        except ValueError:
            raise ValueError("object is not a member of this scene") from None
        self._sort_into(member, group)

    def _remove(self, removed: GameObject) -> None:
        """Hook called for each deleted object as it leaves the scene."""

    @staticmethod
    def _sort_into(member: GameObject, group: List[GameObject]) -> None:
        depth = member.transform.global_z()
        index = bisect.bisect_left(group, depth, key=lambda obj: obj.transform.global_z())
        group.insert(index, member)