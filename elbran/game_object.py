"""Scene-graph objects and the behaviors attached to them."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .camera import Camera
from .color import Color
from .renderers import Canvas, ColorRenderer, Font, Renderer, SpriteRenderer, TextRenderer
from .sprite import Sprite
from .transform import Transform
from .vector import Vector2

if TYPE_CHECKING:
    from .scene import Scene


class RenderMode(Enum):
    OPAQUE = "opaque"
    TRANSLUCENT = "translucent"
    TEXT = "text"


class ObjectTag(Enum):
    DEFAULT = "default"
    MENU_BUTTON = "menu_button"


class Behavior(ABC):
    """Per-frame logic attached to a game object."""

    def __init__(self) -> None:
        self.enabled = True
        self.owner: Optional[GameObject] = None

    def attach(self, owner: Optional[GameObject]) -> None:
        self.owner = owner

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the behavior by ``delta_time`` seconds."""

    @abstractmethod
    def clone(self) -> Behavior:
        """An unattached copy of this behavior."""


class GameObject:
    """An object with a transform, an optional renderer, behaviors and children."""

    def __init__(self, z: float, render_mode: RenderMode, renderer: Optional[Renderer]) -> None:
        self.active = True
        self.tag = ObjectTag.DEFAULT
        self.render_mode = render_mode
        self.renderer = renderer
        self.scene: Optional[Scene] = None
        self._to_be_deleted = False
        self._transform = Transform(z=z)
        self._parent: Optional[GameObject] = None
        self._children: List[GameObject] = []
        self._behaviors: List[Behavior] = []

    @classmethod
    def with_color(cls, z: float, color: Color, circle: bool = False) -> GameObject:
        """A flat-colored square or circle; translucent when alpha is below one."""
        mode = RenderMode.TRANSLUCENT if color.alpha < 1 else RenderMode.OPAQUE
        return cls(z, mode, ColorRenderer(color, circle))

    @classmethod
    def with_sprite(cls, z: float, sprite: Sprite, translucent: bool) -> GameObject:
        """A sprite scaled to its own aspect ratio with a height of one unit."""
        mode = RenderMode.TRANSLUCENT if translucent else RenderMode.OPAQUE
        obj = cls(z, mode, SpriteRenderer(sprite))
        obj._transform.scale = Vector2(sprite.aspect_ratio, 1.0)
        return obj

    @classmethod
    def with_text(cls, z: float, text: str, font: Font, color: Color) -> GameObject:
        return cls(z, RenderMode.TEXT, TextRenderer(text, font, color))

    @property
    def transform(self) -> Transform:
        return self._transform

    @property
    def parent(self) -> Optional[GameObject]:
        return self._parent

    @property
    def children(self) -> Tuple[GameObject, ...]:
        return tuple(self._children)

    @property
    def behaviors(self) -> Tuple[Behavior, ...]:
        return tuple(self._behaviors)

    @property
    def to_be_deleted(self) -> bool:
        return self._to_be_deleted

    def update(self, delta_time: float) -> None:
        for behavior in self._behaviors:
            if behavior.enabled:
                behavior.update(delta_time)

    def draw(self, canvas: Canvas, camera: Camera) -> None:
        if self.renderer is not None:
            self.renderer.draw(canvas, camera, self._transform)

    def delete(self, keep_children: bool = False) -> None:
        """Mark for removal; children are either released or deleted too."""
        self._to_be_deleted = True
        if self._parent is not None and not self._parent._to_be_deleted:
            self._remove_parent()
        for child in list(self._children):
            if keep_children:
                child.set_parent(None)
            else:
                child.delete()

    def clone(self) -> GameObject:
        """A deep copy of this object and its children, joined to the same scene."""
        duplicate = self._copy()
        if self.scene is not None:
            self.scene.add(duplicate)
        for child in self._children:
            child.clone().set_parent(duplicate)
        return duplicate

    def _copy(self) -> GameObject:
        duplicate = copy.copy(self)
        duplicate._transform = self._transform.copy()
        duplicate.renderer = self.renderer.clone() if self.renderer is not None else None
        duplicate.scene = None
        duplicate._parent = None
        duplicate._children = []
        duplicate._behaviors = []
        for behavior in self._behaviors:
            duplicate.add_behavior(behavior.clone())
        return duplicate

    def _descendants_and_self(self) -> Iterator[GameObject]:
        yield self
        for child in self._children:
            yield from child._descendants_and_self()

    def set_z(self, z: float) -> None:
        """Change the depth and keep the scene's draw order sorted."""
        self._transform.z = z
        for member in list(self._descendants_and_self()):
            if member.scene is not None:
                member.scene.update_draw_order(member)

    def set_parent(self, new_parent: Optional[GameObject]) -> None:
        if new_parent is self:
            raise ValueError("a game object cannot be its own parent")
        ancestor = new_parent
        while ancestor is not None:
            if ancestor is self:
                raise ValueError("a game object cannot be parented to its own descendant")
            ancestor = ancestor._parent

        if self._parent is not None:
            self._remove_parent()
        if new_parent is None:
            return

        self._parent = new_parent
        self._transform.parent = new_parent._transform
        new_parent._children.append(self)

        if self.scene is None and new_parent.scene is not None:
            new_parent.scene.add(self)

    def _remove_parent(self) -> None:
        if self._parent is None:
            return
        self._parent._children.remove(self)
        self._parent = None
        self._transform.parent = None

    def add_behavior(self, behavior: Behavior) -> None:
        behavior.attach(self)
        self._behaviors.append(behavior)

    def is_active(self) -> bool:
        """Active only when this object and every ancestor are active and not deleted."""
        current: Optional[GameObject] = self
        while current is not None:
            if not current.active or current._to_be_deleted:
                return False
            current = current._parent
        return True