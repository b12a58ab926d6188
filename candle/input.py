"""Key codes, mouse buttons and polled input state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class Keycode(IntEnum):
    """Keyboard key codes."""

    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47

    DEC0 = 48
    DEC1 = 49
    DEC2 = 50
    DEC3 = 51
    DEC4 = 52
    DEC5 = 53
    DEC6 = 54
    DEC7 = 55
    DEC8 = 56
    DEC9 = 57

    SEMICOLON = 59
    EQUAL = 61

    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90

    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96

    WORLD1 = 161
    WORLD2 = 162

    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314

    KP0 = 320
    KP1 = 321
    KP2 = 322
    KP3 = 323
    KP4 = 324
    KP5 = 325
    KP6 = 326
    KP7 = 327
    KP8 = 328
    KP9 = 329
    KP_DECIMAL = 330
    KP_DIVIDE = 331
    KP_MULTIPLY = 332
    KP_SUBTRACT = 333
    KP_ADD = 334
    KP_ENTER = 335
    KP_EQUAL = 336

    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348


class MouseButton(IntEnum):
    """Mouse button numbers."""

    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class MouseMode(Enum):
    """Cursor behaviour."""

    NORMAL = 0
    HIDDEN = 1
    DISABLED = 2


@dataclass
class InputState:
    """Current keyboard and mouse state, fed by a window backend."""

    keys: set[Keycode] = field(default_factory=set)
    buttons: set[MouseButton] = field(default_factory=set)
    position: tuple[float, float] = (0.0, 0.0)
    mouse_mode: MouseMode = MouseMode.NORMAL

    def press_key(self, key: int) -> None:
        self.keys.add(Keycode(key))

    def release_key(self, key: int) -> None:
        self.keys.discard(Keycode(key))

    def press_button(self, button: int) -> None:
        self.buttons.add(MouseButton(button))

    def release_button(self, button: int) -> None:
        self.buttons.discard(MouseButton(button))

    def move_mouse(self, x: float, y: float) -> None:
        self.position = (float(x), float(y))


_state = InputState()


def set_backend(backend: InputState) -> InputState:
    """Make ``backend`` the state that queries read; return the previous one."""
    global _state
    previous, _state = _state, backend
    return previous


def is_key_pressed(key: int) -> bool:
    return Keycode(key) in _state.keys


def is_mouse_button_pressed(button: int) -> bool:
    return MouseButton(button) in _state.buttons


def mouse_position() -> tuple[float, float]:
    return _state.position


def mouse_x() -> float:
    return mouse_position()[0]


def mouse_y() -> float:
    return mouse_position()[1]


def set_mouse_mode(mode: MouseMode) -> None:
    """Set the cursor mode; raises ValueError for an unknown mode."""
    _state.mouse_mode = MouseMode(mode)