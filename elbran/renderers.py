"""Renderers turn an object's transform into draw commands on a canvas."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from .camera import Camera
from .color import Color
from .sprite import Sprite, SpriteAtlas
from .transform import Direction, Matrix, Transform, matrix_multiply, transform_point
from .vector import Vector2


@dataclass(frozen=True)
class DrawCommand:
    """One recorded draw: what to draw, where, and with which shader parameters."""

    kind: str
    world_view_projection: Matrix
    parameters: Mapping[str, Any] = field(default_factory=dict)
    sprite: Optional[Sprite] = None


@dataclass
class Canvas:
    """A draw target that records commands in submission order."""

    view_dimensions: Tuple[int, int] = (960, 540)
    commands: List[DrawCommand] = field(default_factory=list)

    def draw(self, command: DrawCommand) -> None:
        self.commands.append(command)

    def clear(self) -> None:
        self.commands.clear()

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)


class TextBounds(NamedTuple):
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class Font:
    """A fixed-pitch font measured in pixels."""

    glyph_width: float = 8.0
    line_height: float = 16.0

    def __post_init__(self) -> None:
        if self.glyph_width <= 0 or self.line_height <= 0:
            raise ValueError("glyph width and line height must be positive")

    def measure(self, text: str) -> TextBounds:
        """Pixel bounds of ``text`` drawn at the origin, y pointing down."""
        if not text:
            return TextBounds(0.0, 0.0, 0.0, 0.0)
        lines = text.split("\n")
        width = max(len(line) for line in lines) * self.glyph_width
        return TextBounds(0.0, 0.0, width, len(lines) * self.line_height)


def world_view_projection(camera: Camera, transform: Transform) -> Matrix:
    """Combined matrix taking model space to normalized screen space."""
    return matrix_multiply(matrix_multiply(transform.world_matrix(), camera.view()), camera.projection())


class Renderer(ABC):
    """Draws an object given its transform."""

    mesh: Optional[str] = "unit_square"

    @abstractmethod
    def draw(self, canvas: Canvas, camera: Camera, transform: Transform) -> None:
        """Submit this object's draw commands to ``canvas``."""

    def clone(self) -> Renderer:
        """A copy sharing sprites and fonts with the original."""
        return copy.copy(self)


class ColorRenderer(Renderer):
    """Fills the unit square, or the circle inside it, with one color."""

    def __init__(self, color: Color, circle: bool = False) -> None:
        self.color = color
        self.circle = circle

    def draw(self, canvas: Canvas, camera: Camera, transform: Transform) -> None:
        canvas.draw(
            DrawCommand(
                "circle" if self.circle else "color",
                world_view_projection(camera, transform),
                {"color": self.color},
            )
        )


class SpriteRenderer(Renderer):
    """Draws a textured square tinted by a color."""

    kind = "sprite"

    def __init__(self, sprite: Sprite) -> None:
        self.sprite = sprite
        self.tint = Color.WHITE
        self.flip_x = False
        self.flip_y = False

    def _submit(self, canvas: Canvas, camera: Camera, transform: Transform, **extra: Any) -> None:
        parameters: Dict[str, Any] = {"tint": self.tint, "flip_x": self.flip_x, "flip_y": self.flip_y}
        parameters.update(extra)
        canvas.draw(DrawCommand(self.kind, world_view_projection(camera, transform), parameters, self.sprite))

    def draw(self, canvas: Canvas, camera: Camera, transform: Transform) -> None:
        self._submit(canvas, camera, transform)


class AtlasRenderer(SpriteRenderer):
    """Draws one frame of a sprite atlas, chosen by ``row`` and ``col``."""

    kind = "atlas"

    def __init__(self, sprite: SpriteAtlas) -> None:
        super().__init__(sprite)
        self.row = 0
        self.col = 0

    def draw(self, canvas: Canvas, camera: Camera, transform: Transform) -> None:
        atlas = self.sprite
        if not isinstance(atlas, SpriteAtlas):
            raise TypeError("an atlas renderer needs a SpriteAtlas")
        self._submit(
            canvas,
            camera,
            transform,
            sprite_width=1.0 / atlas.cols,
            sprite_height=1.0 / atlas.rows,
            row=self.row,
            col=self.col,
        )


class HueSwapRenderer(SpriteRenderer):
    """Draws a sprite with one hue replaced by another."""

    kind = "hue_swap"

    def __init__(self, sprite: Sprite) -> None:
        super().__init__(sprite)
        self.old_hue = Color.CLEAR
        self.new_hue = Color.CLEAR
        self.sensitivity = 0.0  # 0 - 1 range

    def draw(self, canvas: Canvas, camera: Camera, transform: Transform) -> None:
        self._submit(
            canvas,
            camera,
            transform,
            replaced_color=self.old_hue,
            replacement_color=self.new_hue,
            sensitivity=self.sensitivity,
        )


class RepeatRenderer(SpriteRenderer):
    """Tiles a sprite; one tile covers ``base_scale`` world units."""

    kind = "repeat"

    def __init__(self, sprite: Sprite, base_scale: Vector2) -> None:
        super().__init__(sprite)
        self.base_scale = base_scale

    def draw(self, canvas: Canvas, camera: Camera, transform: Transform) -> None:
        self._submit(canvas, camera, transform, stretch_factor=transform.scale / self.base_scale)


class StretchRenderer(SpriteRenderer):
    """Keeps a sprite's borders fixed while stretching the UV region between them."""

    kind = "stretch"

    def __init__(self, sprite: Sprite, base_scale: Vector2, start_uv: Vector2, end_uv: Vector2) -> None:
        super().__init__(sprite)
        self.base_scale = base_scale
        self.start_uv = start_uv
        self.end_uv = end_uv

    def draw(self, canvas: Canvas, camera: Camera, transform: Transform) -> None:
        self._submit(
            canvas,
            camera,
            transform,
            stretch_factor=transform.scale / self.base_scale,
            start_uv=self.start_uv,
            end_uv=self.end_uv,
        )


@dataclass(frozen=True)
class TextLayout:
    """Where and how large a string is drawn, in pixels."""

    position: Vector2
    rotation: float
    origin: Vector2
    scale: float
    depth: float


class TextRenderer(Renderer):
    """Fits a string inside the object's box and aligns it to a side."""

    mesh = None

    def __init__(self, text: str, font: Font, color: Color) -> None:
        self.text = text
        self.font = font
        self.color = color
        self.horizontal_alignment = Direction.CENTER
        self.vertical_alignment = Direction.CENTER

    def layout(self, camera: Camera, transform: Transform, view_dimensions: Tuple[int, int]) -> TextLayout:
        matrix = world_view_projection(camera, transform)
        cx, cy, depth = transform_point(matrix, 0.0, 0.0, transform.global_z())
        rx, ry, _ = transform_point(matrix, 0.5, 0.0, 0.0)
        tx, ty, _ = transform_point(matrix, 0.0, 0.5, 0.0)

        half_x = int(view_dimensions[0]) // 2
        half_y = int(view_dimensions[1]) // 2

        def to_pixels(x: float, y: float) -> Vector2:
            return Vector2(half_x + half_x * x, half_y + half_y * -y)

        center = to_pixels(cx, cy)
        to_right = to_pixels(rx, ry) - center
        to_top = to_pixels(tx, ty) - center
        angle = to_right.angle()

        bounds = self.font.measure(self.text)
        text_width = bounds.right - bounds.left
        text_height = bounds.bottom - bounds.top
        if text_width <= 0 or text_height <= 0:
            size = 0.0
        else:
            size = min(2 * to_right.length() / text_width, 2 * to_top.length() / text_height)

        half_width = text_width * size / 2.0
        if self.horizontal_alignment is Direction.LEFT:
            center = center + (-to_right + to_right.normalized() * half_width)
        elif self.horizontal_alignment is Direction.RIGHT:
            center = center + (to_right - to_right.normalized() * half_width)

        half_height = text_height * size / 2.0
        if self.vertical_alignment is Direction.UP:
            center = center + (to_top - to_top.normalized() * half_height)
        elif self.vertical_alignment is Direction.DOWN:
            center = center + (-to_top + to_top.normalized() * half_height)

        origin = Vector2(text_width / 2.0 + bounds.left, text_height / 2.0 + bounds.top)
        return TextLayout(center, angle, origin, size, depth)

    def draw(self, canvas: Canvas, camera: Camera, transform: Transform) -> None:
        placed = self.layout(camera, transform, canvas.view_dimensions)
        canvas.draw(
            DrawCommand(
                "text",
                world_view_projection(camera, transform),
                {
                    "text": self.text,
                    "font": self.font,
                    "color": self.color,
                    "position": placed.position,
                    "rotation": placed.rotation,
                    "origin": placed.origin,
                    "scale": placed.scale,
                    "depth": placed.depth,
                },
            )
        )