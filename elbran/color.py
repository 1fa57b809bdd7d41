"""RGBA colors with float channels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Color:
    """An RGBA color; channels are floats, normally in the range 0 to 1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    CLEAR: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    YELLOW: ClassVar[Color]
    WHITE: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __iter__(self) -> Iterator[float]:
        """Yield the channels in red, green, blue, alpha order."""
        yield self.red
        yield self.green
        yield self.blue
        yield self.alpha


Color.CLEAR = Color(0, 0, 0, 0)
Color.BLACK = Color(0, 0, 0, 1)
Color.RED = Color(1, 0, 0, 1)
Color.GREEN = Color(0, 1, 0, 1)
Color.BLUE = Color(0, 0, 1, 1)
Color.CYAN = Color(0, 1, 1, 1)
Color.MAGENTA = Color(1, 0, 1, 1)
Color.YELLOW = Color(1, 1, 0, 1)
Color.WHITE = Color(1, 1, 1, 1)