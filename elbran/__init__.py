"""Core of a small 2D game engine: geometry, transforms, cameras, renderers, scenes, animation, input and menus."""

__version__ = "0.1.0"