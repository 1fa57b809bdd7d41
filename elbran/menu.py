"""Clickable buttons and scenes that navigate between them."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Union

from .camera import DEFAULT_ASPECT_RATIO
from .color import Color
from .game_object import GameObject, ObjectTag, RenderMode
from .input import InputAction, InputManager, Key
from .renderers import ColorRenderer, Font, SpriteRenderer
from .scene import Scene
from .sprite import Sprite
from .vector import Vector2

MENU_WIDTH = 100.0
BUTTON_WIDTH = 20.0
BUTTON_HEIGHT = 6.0
LABEL_SCALE = 0.7

ClickEffect = Callable[["Button"], None]

_DIRECTIONS = {
    InputAction.UP: Vector2.UP,
    InputAction.DOWN: Vector2.DOWN,
    InputAction.LEFT: Vector2.LEFT,
    InputAction.RIGHT: Vector2.RIGHT,
}


class Button(GameObject):
    """A box that changes color or sprite when hovered or disabled, and calls back on click."""

    def __init__(
        self,
        on_click: ClickEffect,
        base_color: Color,
        hovered_color: Color,
        disabled_color: Color,
        label: str,
        font: Optional[Font] = None,
    ) -> None:
        mode = RenderMode.TRANSLUCENT if base_color.alpha < 1 else RenderMode.OPAQUE
        super().__init__(0.0, mode, ColorRenderer(base_color))
        self._setup(on_click, label, font, use_sprite=False, change_sprites=False, always_label=True)
        self.base_color = base_color
        self.hovered_color = hovered_color
        self.disabled_color = disabled_color

    @classmethod
    def _from_sprite(
        cls,
        on_click: ClickEffect,
        translucent: bool,
        sprite: Sprite,
        label: str,
        font: Optional[Font],
        change_sprites: bool,
    ) -> Button:
        button = cls.__new__(cls)
        mode = RenderMode.TRANSLUCENT if translucent else RenderMode.OPAQUE
        GameObject.__init__(button, 0.0, mode, SpriteRenderer(sprite))
        button._setup(
            on_click, label, font, use_sprite=True, change_sprites=change_sprites, always_label=False
        )
        button.base_sprite = sprite
        return button

    @classmethod
    def with_sprite(
        cls,
        on_click: ClickEffect,
        translucent: bool,
        sprite: Sprite,
        hovered_color: Color,
        disabled_color: Color,
        label: str = "",
        font: Optional[Font] = None,
    ) -> Button:
        """A sprite button whose tint changes when hovered or disabled."""
        button = cls._from_sprite(on_click, translucent, sprite, label, font, change_sprites=False)
        button.hovered_color = hovered_color
        button.disabled_color = disabled_color
        return button

    @classmethod
    def with_sprites(
        cls,
        on_click: ClickEffect,
        translucent: bool,
        base_sprite: Sprite,
        hovered_sprite: Sprite,
        disabled_sprite: Sprite,
        label: str = "",
        font: Optional[Font] = None,
    ) -> Button:
        """A sprite button that swaps sprites when hovered or disabled."""
        button = cls._from_sprite(on_click, translucent, base_sprite, label, font, change_sprites=True)
        button.hovered_sprite = hovered_sprite
        button.disabled_sprite = disabled_sprite
        return button

    def _setup(
        self,
        on_click: ClickEffect,
        label: str,
        font: Optional[Font],
        *,
        use_sprite: bool,
        change_sprites: bool,
        always_label: bool,
    ) -> None:
        self.tag = ObjectTag.MENU_BUTTON
        self.on_click = on_click
        self._disabled = False
        self._use_sprite = use_sprite
        self._change_sprites = change_sprites
        self.base_color = Color.WHITE
        self.hovered_color = Color.WHITE
        self.disabled_color = Color.WHITE
        self.base_sprite: Optional[Sprite] = None
        self.hovered_sprite: Optional[Sprite] = None
        self.disabled_sprite: Optional[Sprite] = None
        self.transform.scale = Vector2(BUTTON_WIDTH, BUTTON_HEIGHT)
        self._label: Optional[GameObject] = None
        if always_label or label:
            text = GameObject.with_text(1.0, label, font if font is not None else Font(), Color.BLACK)
            text.set_parent(self)
            text.transform.scale_by(LABEL_SCALE)
            self._label = text

    def _show(self, active: bool, alt_color: Color, alt_sprite: Optional[Sprite]) -> None:
        renderer = self.renderer
        if self._use_sprite:
            if self._change_sprites:
                renderer.sprite = alt_sprite if active else self.base_sprite
            else:
                renderer.tint = alt_color if active else self.base_color
        else:
            renderer.color = alt_color if active else self.base_color

    def set_hovered(self, hovered: bool) -> None:
        """Show or clear the hovered look; ignored while disabled."""
        if self._disabled:
            return
        self._show(hovered, self.hovered_color, self.hovered_sprite)

    @property
    def disabled(self) -> bool:
        return self._disabled

    @disabled.setter
    def disabled(self, disabled: bool) -> None:
        self._disabled = disabled
        self._show(disabled, self.disabled_color, self.disabled_sprite)

    def click(self) -> None:
        self.on_click(self)

    @property
    def label(self) -> Optional[GameObject]:
        """The text object showing the button's label, if it has one."""
        return self._label

    def clone(self) -> Button:
        duplicate = self._copy()
        if self.scene is not None:
            self.scene.add(duplicate)
        duplicate._label = None
        if self._label is not None:
            duplicate._label = self._label.clone()
            duplicate._label.set_parent(duplicate)
        for child in self._children:
            if child is self._label:
                continue
            child.clone().set_parent(duplicate)
        return duplicate


class Menu(Scene):
    """A scene whose buttons can be navigated with direction keys or the mouse."""

    def __init__(
        self,
        input_manager: InputManager,
        background: Union[Color, Sprite] = Color.CLEAR,
        aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    ) -> None:
        super().__init__(MENU_WIDTH, background, aspect_ratio)
        self.input = input_manager
        self.mouse_enabled = True
        self.keys_enabled = True
        self._hovered: Optional[Button] = None
        self._buttons: List[Button] = []
        self._last_mouse_pos = Vector2.ZERO

    @property
    def hovered(self) -> Optional[Button]:
        return self._hovered

    @property
    def buttons(self) -> Tuple[Button, ...]:
        return tuple(self._buttons)

    def _selectable(self, button: Button) -> bool:
        return not button.disabled and button.is_active()

    def _change_hover(self, new_hover: Optional[Button]) -> None:
        if self._hovered is not None:
            self._hovered.set_hovered(False)
        if new_hover is not None:
            new_hover.set_hovered(True)
        self._hovered = new_hover

    def update(self, delta_time: float) -> None:
        super().update(delta_time)

        if self.keys_enabled:
            action = next((a for a in _DIRECTIONS if self.input.just_pressed(a)), None)
            if action is not None:
                if self._hovered is None:
                    first = next((b for b in self._buttons if self._selectable(b)), None)
                    if first is not None:
                        self._change_hover(first)
                else:
                    closest = self._find_closest(self._hovered, action)
                    if closest is not None and closest is not self._hovered:
                        self._change_hover(closest)

            if self._hovered is not None and self.input.just_pressed(InputAction.SELECT):
                self._hovered.click()
                return

        if self.mouse_enabled:
            if self._hovered is not None and self.input.key_just_pressed(Key.MOUSE_LEFT):
                self._hovered.click()
                return

            mouse = self.input.mouse_position(self.camera)
            if mouse == self._last_mouse_pos:
                return
            self._last_mouse_pos = mouse

            new_hover = next(
                (
                    b
                    for b in self._buttons
                    if self._selectable(b) and b.transform.area().contains(mouse)
                ),
                None,
            )
            if new_hover is not self._hovered:
                self._change_hover(new_hover)

    def add(self, obj: GameObject) -> None:
        joining = obj.scene is None
        super().add(obj)
        if joining and obj.tag is ObjectTag.MENU_BUTTON:
            self._buttons.append(obj)

    def _remove(self, removed: GameObject) -> None:
        if removed.tag is ObjectTag.MENU_BUTTON and removed in self._buttons:
            self._buttons.remove(removed)
            if self._hovered is removed:
                self._hovered = None

    def _find_closest(self, button: Button, action: InputAction) -> Optional[Button]:
        """The nearest selectable button in a direction, wrapping around the screen."""
        direction = _DIRECTIONS[action]
        screen_scale = self.camera.world_dimensions()
        start = button.transform.global_position()
        closest: Optional[Button] = None
        min_dist = 0.0
        for option in self._buttons:
            pos = option.transform.global_position()
            dot = (pos - start).dot(direction)
            if not self._selectable(option) or abs(dot) <= 0.1:
                continue
            if dot < 0:
                pos = pos + direction * screen_scale
            distance = pos.sqr_dist(start)
            if closest is None or distance < min_dist:
                closest = option
                min_dist = distance
        return closest