[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elbran"
version = "0.1.0"
description = "Core of a small 2D game engine: vectors, shapes, transform hierarchies, cameras, renderers that record draw commands, scenes, sprite animation, input state and menus."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "game",
    "engine",
    "2d",
    "scene-graph",
    "sprites",
    "animation",
    "menu",
    "input",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["elbran"]

[tool.hatch.build.targets.sdist]
include = [
    "elbran",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
