"""Images used as textures, and grids of frames packed into one image."""

from __future__ import annotations

import os
from typing import Union

from PIL import Image


class Sprite:
    """An image together with its pixel dimensions."""

    def __init__(self, image: Image.Image) -> None:
        width, height = image.size
        if width <= 0 or height <= 0:
            raise ValueError("a sprite needs a non-empty image")
        self.image = image

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> Sprite:
        with Image.open(path) as image:
            image.load()
            return cls(image.copy())

    @property
    def pixel_width(self) -> int:
        return self.image.size[0]

    @property
    def pixel_height(self) -> int:
        return self.image.size[1]

    @property
    def aspect_ratio(self) -> float:
        return self.pixel_width / self.pixel_height


class SpriteAtlas(Sprite):
    """An image divided into ``rows`` x ``cols`` equally sized frames."""

    def __init__(self, image: Image.Image, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("an atlas needs at least one row and one column")
        super().__init__(image)
        self.rows = rows
        self.cols = cols

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike], rows: int, cols: int) -> SpriteAtlas:
        with Image.open(path) as image:
            image.load()
            return cls(image.copy(), rows, cols)

    @property
    def aspect_ratio(self) -> float:
        """Aspect ratio of a single frame."""
        return (self.pixel_width / self.cols) / (self.pixel_height / self.rows)