# elbran

The core of a small 2D game engine. It provides the objects a game is built
from — vectors, shapes, transforms, a camera, renderers, scenes, animation,
input state and menus — and leaves the window, the event loop and the
pixels to you.

## Modules

- `elbran.vector` – `Vector2`, an immutable 2D vector: `+`, `-`, unary `-`,
  component-wise or scalar `*` and `/`, `length()`, `angle()` (in
  `[0, 2π)`), `rotated()`, `perpendicular()`, `normalized()`, `distance()`,
  `sqr_dist()`, `dot()`, `angle_between()`, and the constants `ZERO`, `UP`,
  `DOWN`, `LEFT`, `RIGHT`.
- `elbran.shapes` – `Circle` and `RectangleBox`. Circles test containment
  of points and circles and intersection with circles; rectangles
  (`RectangleBox.from_center`, or by their left/right/top/bottom edges) have
  `center`, `size`, `width` and `height` properties, `expand()`, containment
  of points and rectangles, and intersection with rectangles and circles.
- `elbran.color` – `Color`, an immutable RGBA color with float channels and
  the named colors `CLEAR`, `BLACK`, `RED`, `GREEN`, `BLUE`, `CYAN`,
  `MAGENTA`, `YELLOW`, `WHITE`.
- `elbran.transform` – `Transform` (position, z, scale, rotation, with a
  parent and children and a cached world matrix), the `Direction`
  enumeration, and the 4x4 matrix helpers `identity_matrix`,
  `matrix_multiply` and `transform_point`. A transform can be translated
  along its own axes, rotated, stretched, scaled with its aspect ratio kept
  (`scale_by`, `set_width`, `set_height`, `grow_width`, `grow_height`),
  aligned by an edge (`set_edge`), and asked for its global position, scale,
  rotation, z and its world-space `area()`.
- `elbran.camera` – `Camera`, an orthographic camera showing a region
  `world_width` units wide at a given aspect ratio (16:9 by default), with
  `world_dimensions()`, `visible_area()`, `view()` and `projection()`; plus
  `look_to_matrix` and `orthographic_matrix`.
- `elbran.sprite` – `Sprite` and `SpriteAtlas` (a grid of `rows` x `cols`
  frames), built from a Pillow image or loaded with `from_file`.
- `elbran.renderers` – `ColorRenderer`, `SpriteRenderer`, `AtlasRenderer`,
  `HueSwapRenderer`, `RepeatRenderer`, `StretchRenderer` and
  `TextRenderer`. Drawing appends a `DrawCommand` (a kind, a
  world-view-projection matrix, shader parameters and an optional sprite)
  to a `Canvas`. `Font` is a fixed-pitch font used to measure text, and
  `TextRenderer.layout` computes where and how large a string is drawn to
  fit and align inside its object's box.
- `elbran.game_object` – `GameObject` with a transform, a renderer, child
  objects, `Behavior`s, activation and deferred deletion; built directly or
  with `with_color`, `with_sprite` and `with_text`. `clone()` deep-copies an
  object and its children.
- `elbran.scene` – `Scene`, holding opaque, translucent and text objects,
  each kept sorted by global z. `update()` runs the behaviors of active
  objects and then drops deleted ones; `draw()` emits opaques nearest
  first, then the background, then text, then translucents farthest first.
- `elbran.animation` – `SpriteAnimator` steps through atlas frames or a
  list of sprites at a frame rate, optionally looped, oscillating or
  reversed; `AnimationGroup` holds several animations for one object and
  plays one at a time.
- `elbran.input` – `InputManager` takes a snapshot each frame of the keys
  held down (`Key` codes), the cursor in window pixels and up to four
  gamepads (`GamepadState`), and answers `is_key_pressed`,
  `key_just_pressed`, `key_just_released`, the same for bound
  `InputAction`s, `stick()` with a dead zone, `mouse_position(camera)` in
  world units and the mouse-wheel spin (`scroll`, `end_frame`).
- `elbran.menu` – `Button` (color, tinted sprite or swapped sprites for the
  normal, hovered and disabled looks, with an optional text label) and
  `Menu`, a scene whose buttons are hovered with the mouse or navigated with
  the direction actions, wrapping around the screen, and clicked with the
  left mouse button or the select action.

## Installing

```
pip install elbran
```

The only runtime dependency is Pillow, used to load sprite images.

## A taste

```python
from elbran.vector import Vector2
from elbran.shapes import Circle, RectangleBox

a = Vector2(3, 4)
print(a.length())             # 5.0
print(a + Vector2(1, 1))      # (4.000000, 5.000000)

box = RectangleBox.from_center(Vector2(0, 0), Vector2(4, 2))
print(box.contains(Vector2(1, 0.5)))               # True
print(box.intersects(Circle(Vector2(3, 0), 1.5)))  # True
```

## A frame

```python
from elbran.color import Color
from elbran.game_object import GameObject
from elbran.input import InputManager, Key
from elbran.renderers import Canvas
from elbran.scene import Scene
from elbran.vector import Vector2

scene = Scene(10, Color(0.1, 0.1, 0.1))
player = GameObject.with_color(0, Color.GREEN, circle=True)
scene.add(player)

inputs = InputManager()
canvas = Canvas(view_dimensions=(960, 540))

# once per frame
inputs.update({Key.RIGHT}, cursor=(480, 270), view_dimensions=(960, 540))
if inputs.is_key_pressed(Key.RIGHT):
    player.transform.translate(Vector2(0.1, 0))
scene.update(1 / 60)

canvas.clear()
scene.draw(canvas)
for command in canvas:
    print(command.kind)       # circle, then background
```

A menu works the same way: create a `Menu` with the `InputManager`, add
`Button`s to it, and call `update` and `draw` each frame.

## What it does not do

The package opens no window, runs no event loop and puts no pixels on a
screen: renderers only record `DrawCommand`s on a `Canvas`, and replaying
them is up to a graphics backend of your choosing. It does not read the
keyboard, mouse or gamepads itself — you pass their state to
`InputManager.update`. There are no post-processing effects, no sound and
no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```