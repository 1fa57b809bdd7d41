"""Keyboard, mouse and gamepad state sampled once per frame."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterable, Mapping, NamedTuple, Optional, Sequence, Tuple

from .camera import Camera
from .vector import Vector2

KEY_COUNT = 256
STICK_MAX = 32767.0
GAMEPAD_DEAD_ZONE = 0.2
GAMEPAD_SLOTS = 4
WHEEL_DELTA = 120.0


class Key(IntEnum):
    """Virtual key codes."""

    MOUSE_LEFT = 0x01
    MOUSE_RIGHT = 0x02
    MOUSE_MID = 0x04
    BACK = 0x08
    RETURN = 0x0D
    ESCAPE = 0x1B
    SPACE = 0x20
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    A = 0x41
    D = 0x44
    S = 0x53
    W = 0x57
    GAMEPAD_A = 0xC3
    GAMEPAD_B = 0xC4
    GAMEPAD_LEFT_THUMBSTICK_UP = 0xD3
    GAMEPAD_LEFT_THUMBSTICK_DOWN = 0xD4
    GAMEPAD_LEFT_THUMBSTICK_RIGHT = 0xD5
    GAMEPAD_LEFT_THUMBSTICK_LEFT = 0xD6


class InputAction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SELECT = "select"
    BACK = "back"


DEFAULT_BINDINGS: Mapping[InputAction, Tuple[int, ...]] = {
    InputAction.UP: (Key.UP, Key.W, Key.GAMEPAD_LEFT_THUMBSTICK_UP),
    InputAction.DOWN: (Key.DOWN, Key.S, Key.GAMEPAD_LEFT_THUMBSTICK_DOWN),
    InputAction.LEFT: (Key.LEFT, Key.A, Key.GAMEPAD_LEFT_THUMBSTICK_LEFT),
    InputAction.RIGHT: (Key.RIGHT, Key.D, Key.GAMEPAD_LEFT_THUMBSTICK_RIGHT),
    InputAction.SELECT: (Key.RETURN, Key.GAMEPAD_A),
    InputAction.BACK: (Key.BACK, Key.ESCAPE, Key.GAMEPAD_B),
}


class GamepadState(NamedTuple):
    """Raw thumbstick readings of a connected gamepad, each in -32768..32767."""

    left_x: int = 0
    left_y: int = 0
    right_x: int = 0
    right_y: int = 0


def _check_key(key: int) -> int:
    code = int(key)
    if not 0 <= code < KEY_COUNT:
        raise ValueError(f"key code {code} is out of range")
    return code


def _normalize_stick(raw_x: int, raw_y: int) -> Vector2:
    # the raw range is asymmetric, so negatives are pulled in by one
    if raw_x < 0:
        raw_x += 1
    if raw_y < 0:
        raw_y += 1
    stick = Vector2(raw_x / STICK_MAX, raw_y / STICK_MAX)
    if stick.length() <= GAMEPAD_DEAD_ZONE:
        return Vector2.ZERO
    return stick


class InputManager:
    """Holds this frame's and last frame's input and answers queries about it."""

    def __init__(self, bindings: Optional[Mapping[InputAction, Iterable[int]]] = None) -> None:
        source = DEFAULT_BINDINGS if bindings is None else bindings
        self._bindings = {action: tuple(_check_key(k) for k in keys) for action, keys in source.items()}
        self._current: frozenset[int] = frozenset()
        self._previous: frozenset[int] = frozenset()
        self._mouse_screen = Vector2.ZERO
        self._wheel = 0.0
        self._left_sticks = [Vector2.ZERO] * GAMEPAD_SLOTS
        self._right_sticks = [Vector2.ZERO] * GAMEPAD_SLOTS

    def update(
        self,
        keyboard_state: Iterable[int],
        cursor: Optional[Tuple[float, float]] = None,
        view_offset: Tuple[int, int] = (0, 0),
        view_dimensions: Tuple[int, int] = (960, 540),
        gamepads: Sequence[Optional[GamepadState]] = (),
    ) -> None:
        """Start a new frame from the keys held down, the cursor and the gamepads.

        ``cursor`` is in window pixels; when None the mouse keeps its last position.
        A gamepad entry of None means that slot is disconnected.
        """
        self._previous = self._current
        self._current = frozenset(_check_key(key) for key in keyboard_state)

        if cursor is not None:
            width, height = view_dimensions
            if width <= 0 or height <= 0:
                raise ValueError("view dimensions must be positive")
            x = cursor[0] - view_offset[0]
            y = cursor[1] - view_offset[1]
            self._mouse_screen = Vector2(x / width * 2.0 - 1.0, -(y / height * 2.0 - 1.0))

        if len(gamepads) > GAMEPAD_SLOTS:
            raise ValueError(f"at most {GAMEPAD_SLOTS} gamepads are supported")
        padded = list(gamepads) + [None] * (GAMEPAD_SLOTS - len(gamepads))
        for slot, pad in enumerate(padded):
            if pad is None:
                self._left_sticks[slot] = Vector2.ZERO
                self._right_sticks[slot] = Vector2.ZERO
            else:
                self._left_sticks[slot] = _normalize_stick(pad.left_x, pad.left_y)
                self._right_sticks[slot] = _normalize_stick(pad.right_x, pad.right_y)

    def scroll(self, wheel_delta: float) -> None:
        """Record a raw mouse-wheel movement for the coming frame."""
        self._wheel = wheel_delta / WHEEL_DELTA

    def end_frame(self) -> None:
        """Forget the wheel movement once a frame has seen it."""
        self._wheel = 0.0

    @property
    def mouse_wheel_spin(self) -> float:
        return self._wheel

    @property
    def mouse_screen_position(self) -> Vector2:
        """Cursor position in normalized view coordinates, y pointing up."""
        return self._mouse_screen

    def is_key_pressed(self, key: int) -> bool:
        return _check_key(key) in self._current

    def key_just_pressed(self, key: int) -> bool:
        code = _check_key(key)
        return code in self._current and code not in self._previous

    def key_just_released(self, key: int) -> bool:
        code = _check_key(key)
        return code not in self._current and code in self._previous

    def _keys(self, action: InputAction) -> Tuple[int, ...]:
        return self._bindings.get(action, ())

    def is_pressed(self, action: InputAction) -> bool:
        return any(self.is_key_pressed(key) for key in self._keys(action))

    def just_pressed(self, action: InputAction) -> bool:
        """True on the frame the action starts; false if another bound key was already held."""
        pressed = False
        for key in self._keys(action):
            if self.key_just_pressed(key):
                pressed = True
            elif self.is_key_pressed(key):
                return False
        return pressed

    def just_released(self, action: InputAction) -> bool:
        """True on the frame the last held key of the action is let go."""
        released = False
        for key in self._keys(action):
            if self.is_key_pressed(key):
                return False
            if self.key_just_released(key):
                released = True
        return released

    def stick(self, left: bool = True, slot: int = 0) -> Vector2:
        if not 0 <= slot < GAMEPAD_SLOTS:
            raise IndexError("gamepad slot out of range")
        return self._left_sticks[slot] if left else self._right_sticks[slot]

    def mouse_position(self, camera: Camera) -> Vector2:
        """The cursor's position in the world seen by ``camera``."""
        half = camera.world_dimensions() * 0.5
        shift = (self._mouse_screen * half).rotated(camera.rotation)
        return camera.position + shift