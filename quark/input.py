"""Input identifiers and a polled input device with mouse and scroll tracking."""

from __future__ import annotations

from enum import IntEnum

from quark.text import panic

Vec2 = tuple[float, float]


class InputType(IntEnum):
    """The kind of input stored in the upper 16 bits of an input id."""

    KEY = 0
    MOUSE_BUTTON = 1
    GAMEPAD_BUTTON = 2
    MOUSE_AXIS = 3
    GAMEPAD_AXIS = 4


def make_raw_input_id(input_type: int, value: int) -> int:
    """Pack a type and a value into a signed 32-bit input id."""
    bits = ((int(input_type) & 0xFFFF) << 16) | (int(value) & 0xFFFF)
    return bits - (1 << 32) if bits & 0x80000000 else bits


def split_input_id(input_id: int) -> tuple[int, int]:
    """Unpack an input id into (type, value)."""
    bits = int(input_id) & 0xFFFFFFFF
    return bits >> 16, bits & 0xFFFF


def _key(code: int) -> int:
    return make_raw_input_id(InputType.KEY, code)


def _mouse_button(code: int) -> int:
    return make_raw_input_id(InputType.MOUSE_BUTTON, code)


def _gamepad_button(code: int) -> int:
    return make_raw_input_id(InputType.GAMEPAD_BUTTON, code)


def _mouse_axis(code: int) -> int:
    return make_raw_input_id(InputType.MOUSE_AXIS, code)


def _gamepad_axis(code: int) -> int:
    return make_raw_input_id(InputType.GAMEPAD_AXIS, code)


class InputState(IntEnum):
    RELEASE = 0
    PRESS = 1


class KeyCode(IntEnum):
    APOSTROPHE = _key(39)
    COMMA = _key(44)
    MINUS = _key(45)
    PERIOD = _key(46)
    SLASH = _key(47)
    SEMICOLON = _key(59)
    EQUAL = _key(61)
    LEFT_BRACKET = _key(91)
    BACKSLASH = _key(92)
    RIGHT_BRACKET = _key(93)
    GRAVE_ACCENT = _key(96)
    ESCAPE = _key(256)

    SPACE = _key(32)

    NUM0 = _key(48)
    NUM1 = _key(49)
    NUM2 = _key(50)
    NUM3 = _key(51)
    NUM4 = _key(52)
    NUM5 = _key(53)
    NUM6 = _key(54)
    NUM7 = _key(55)
    NUM8 = _key(56)
    NUM9 = _key(57)

    A = _key(65)
    B = _key(66)
    C = _key(67)
    D = _key(68)
    E = _key(69)
    F = _key(70)
    G = _key(71)
    H = _key(72)
    I = _key(73)  # noqa: E741
    J = _key(74)
    K = _key(75)
    L = _key(76)
    M = _key(77)
    N = _key(78)
    O = _key(79)  # noqa: E741
    P = _key(80)
    Q = _key(81)
    R = _key(82)
    S = _key(83)
    T = _key(84)
    U = _key(85)
    V = _key(86)
    W = _key(87)
    X = _key(88)
    Y = _key(89)
    Z = _key(90)

    UP_ARROW = _key(265)
    DOWN_ARROW = _key(264)
    LEFT_ARROW = _key(263)
    RIGHT_ARROW = _key(262)

    LEFT_CONTROL = _key(341)
    LEFT_SHIFT = _key(340)


class MouseButtonCode(IntEnum):
    BUTTON1 = _mouse_button(0)
    BUTTON2 = _mouse_button(1)
    BUTTON3 = _mouse_button(2)
    BUTTON4 = _mouse_button(3)
    BUTTON5 = _mouse_button(4)
    BUTTON6 = _mouse_button(5)
    BUTTON7 = _mouse_button(6)
    BUTTON8 = _mouse_button(7)

    LEFT_BUTTON = _mouse_button(0)
    RIGHT_BUTTON = _mouse_button(1)
    MIDDLE_BUTTON = _mouse_button(2)


class GamepadButtonCode(IntEnum):
    A = _gamepad_button(0)
    B = _gamepad_button(1)
    X = _gamepad_button(2)
    Y = _gamepad_button(3)

    LEFT_BUMPER = _gamepad_button(4)
    RIGHT_BUMPER = _gamepad_button(5)

    LEFT_THUMB = _gamepad_button(9)
    RIGHT_THUMB = _gamepad_button(10)

    DPAD_UP = _gamepad_button(11)
    DPAD_DOWN = _gamepad_button(13)
    DPAD_LEFT = _gamepad_button(14)
    DPAD_RIGHT = _gamepad_button(12)


class MouseAxisCode(IntEnum):
    MOVE_UP = _mouse_axis(0)
    MOVE_DOWN = _mouse_axis(1)
    MOVE_LEFT = _mouse_axis(2)
    MOVE_RIGHT = _mouse_axis(3)

    SCROLL_UP = _mouse_axis(4)
    SCROLL_DOWN = _mouse_axis(5)
    SCROLL_LEFT = _mouse_axis(6)
    SCROLL_RIGHT = _mouse_axis(7)


class GamepadAxisCode(IntEnum):
    LEFT_STICK_UP = _gamepad_axis(0)
    LEFT_STICK_DOWN = _gamepad_axis(1)
    LEFT_STICK_LEFT = _gamepad_axis(2)
    LEFT_STICK_RIGHT = _gamepad_axis(3)

    RIGHT_STICK_UP = _gamepad_axis(4)
    RIGHT_STICK_DOWN = _gamepad_axis(5)
    RIGHT_STICK_LEFT = _gamepad_axis(6)
    RIGHT_STICK_RIGHT = _gamepad_axis(7)

    LEFT_TRIGGER = _gamepad_axis(8)
    RIGHT_TRIGGER = _gamepad_axis(9)


class MouseMode(IntEnum):
    VISIBLE = 0x00034001
    HIDDEN = 0x00034002
    CAPTURED = 0x00034003


class InputDevice:
    """Tracks pressed inputs plus accumulated mouse and scroll motion.

    Callbacks accumulate motion between frames; update() turns the
    accumulated motion into this frame's deltas and positions.
    """

    LARGE_MOTION = 100.0

    def __init__(self, mouse_mode: MouseMode = MouseMode.VISIBLE) -> None:
        self.mouse_mode = mouse_mode
        self.mouse_position: Vec2 = (0.0, 0.0)
        self.scroll_position: Vec2 = (0.0, 0.0)
        self.scroll_delta: Vec2 = (0.0, 0.0)
        self._mouse_delta: Vec2 = (0.0, 0.0)
        self._mouse_accumulator: Vec2 = (0.0, 0.0)
        self._scroll_accumulator: Vec2 = (0.0, 0.0)
        self._last_cursor: Vec2 = (0.0, 0.0)
        self._pressed: set[int] = set()

    def scroll_callback(self, x: float, y: float) -> None:
        ax, ay = self._scroll_accumulator
        self._scroll_accumulator = (ax + float(x), ay - float(y))

    def mouse_callback(self, x: float, y: float) -> None:
        last_x, last_y = self._last_cursor
        dx = last_x - float(x)
        dy = last_y - float(y)
        # Large jumps are most likely a focus change, not real motion.
        if abs(dx) > self.LARGE_MOTION:
            dx = 0.0
        if abs(dy) > self.LARGE_MOTION:
            dy = 0.0
        ax, ay = self._mouse_accumulator
        self._mouse_accumulator = (ax + dx, ay + dy)
        self._last_cursor = (float(x), float(y))

    def update(self) -> None:
        """Apply accumulated motion and start a new frame of accumulation."""
        mx, my = self._mouse_accumulator
        sx, sy = self._scroll_accumulator
        px, py = self.mouse_position
        qx, qy = self.scroll_position
        self.mouse_position = (px - mx, py - my)
        self.scroll_position = (qx + sx, qy + sy)
        self._mouse_delta = (mx, my)
        self.scroll_delta = (sx, sy)
        self._mouse_accumulator = (0.0, 0.0)
        self._scroll_accumulator = (0.0, 0.0)

    def press(self, input_id: int) -> None:
        self._pressed.add(int(input_id))

    def release(self, input_id: int) -> None:
        self._pressed.discard(int(input_id))

    def _state(self, input_id: int) -> InputState:
        return InputState.PRESS if int(input_id) in self._pressed else InputState.RELEASE

    def key_state(self, key: KeyCode) -> InputState:
        return self._state(key)

    def mouse_button_state(self, button: MouseButtonCode) -> InputState:
        return self._state(button)

    def gamepad_button_state(self, gamepad_id: int, button: GamepadButtonCode) -> InputState:
        """Gamepads have no backend: asking for a button state is a fatal error."""
        panic("get_gamepad_button_state() called!")

    def gamepad_axis(self, gamepad_id: int, axis: GamepadAxisCode) -> float:
        """Gamepads have no backend: asking for an axis value is a fatal error."""
        panic("get_gamepad_axis() called!")

    def mouse_delta(self) -> Vec2:
        """This frame's mouse motion, or zero unless the mouse is captured."""
        return self._mouse_delta if self.mouse_mode == MouseMode.CAPTURED else (0.0, 0.0)

    def mouse_axis(self, axis: MouseAxisCode) -> float:
        mouse_x, mouse_y = self.mouse_delta()
        scroll_x, scroll_y = self.scroll_delta
        values = {
            MouseAxisCode.MOVE_UP: max(mouse_y, 0.0),
            MouseAxisCode.MOVE_DOWN: -min(mouse_y, 0.0),
            MouseAxisCode.MOVE_RIGHT: max(mouse_x, 0.0),
            MouseAxisCode.MOVE_LEFT: -min(mouse_x, 0.0),
            MouseAxisCode.SCROLL_UP: max(scroll_y, 0.0),
            MouseAxisCode.SCROLL_DOWN: -min(scroll_y, 0.0),
            MouseAxisCode.SCROLL_RIGHT: max(scroll_x, 0.0),
            MouseAxisCode.SCROLL_LEFT: -min(scroll_x, 0.0),
        }
        return values.get(int(axis), 0.0)

    def input_state(self, input_id: int, source_id: int = 0) -> InputState:
        kind, _ = split_input_id(input_id)
        if kind == InputType.KEY:
            return self.key_state(input_id)
        if kind == InputType.MOUSE_BUTTON:
            return self.mouse_button_state(input_id)
        if kind == InputType.GAMEPAD_BUTTON:
            return self.gamepad_button_state(source_id, input_id)
        if kind == InputType.MOUSE_AXIS:
            return InputState.PRESS if self.mouse_axis(input_id) != 0.0 else InputState.RELEASE
        if kind == InputType.GAMEPAD_AXIS:
            pressed = self.gamepad_axis(source_id, input_id) != 0.0
            return InputState.PRESS if pressed else InputState.RELEASE
        return InputState.RELEASE

    def input_value(self, input_id: int, source_id: int = 0) -> float:
        kind, _ = split_input_id(input_id)
        if kind in (InputType.KEY, InputType.MOUSE_BUTTON, InputType.GAMEPAD_BUTTON):
            return 1.0 if self.input_state(input_id, source_id) == InputState.PRESS else 0.0
        if kind == InputType.MOUSE_AXIS:
            return self.mouse_axis(input_id)
        if kind == InputType.GAMEPAD_AXIS:
            return self.gamepad_axis(source_id, input_id)
        return 0.0

    def is_input_down(self, input_id: int, source_id: int = 0) -> bool:
        return self.input_state(input_id, source_id) == InputState.PRESS

    def is_input_up(self, input_id: int, source_id: int = 0) -> bool:
        return self.input_state(input_id, source_id) == InputState.RELEASE