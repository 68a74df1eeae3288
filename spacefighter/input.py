"""Keyboard, mouse and game pad identifiers and game pad state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any

from spacefighter.vector2 import Vector2


class ButtonState(Enum):
    """The possible states of a game pad button."""

    PRESSED = auto()
    RELEASED = auto()


class Button(Enum):
    """The buttons of an Xbox-style controller."""

    A = auto()
    B = auto()
    X = auto()
    Y = auto()
    START = auto()
    BACK = auto()
    LEFT_STICK = auto()
    LEFT_SHOULDER = auto()
    RIGHT_STICK = auto()
    RIGHT_SHOULDER = auto()
    DPAD_UP = auto()
    DPAD_DOWN = auto()
    DPAD_LEFT = auto()
    DPAD_RIGHT = auto()


class Key(IntEnum):
    """Keyboard key codes."""

    A = 1
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()

    NUM_0 = auto()
    NUM_1 = auto()
    NUM_2 = auto()
    NUM_3 = auto()
    NUM_4 = auto()
    NUM_5 = auto()
    NUM_6 = auto()
    NUM_7 = auto()
    NUM_8 = auto()
    NUM_9 = auto()

    PAD_0 = auto()
    PAD_1 = auto()
    PAD_2 = auto()
    PAD_3 = auto()
    PAD_4 = auto()
    PAD_5 = auto()
    PAD_6 = auto()
    PAD_7 = auto()
    PAD_8 = auto()
    PAD_9 = auto()

    F1 = 47
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()

    ESCAPE = 59
    TILDE = auto()
    MINUS = auto()
    EQUALS = auto()
    BACKSPACE = auto()
    TAB = auto()
    OPENBRACE = auto()
    CLOSEBRACE = auto()
    ENTER = auto()
    SEMICOLON = auto()
    QUOTE = auto()
    BACKSLASH = auto()
    BACKSLASH2 = auto()
    COMMA = auto()
    FULLSTOP = auto()
    SLASH = auto()
    SPACE = auto()

    INSERT = 76
    DELETE = auto()
    HOME = auto()
    END = auto()
    PGUP = auto()
    PGDN = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()

    PAD_SLASH = 86
    PAD_ASTERISK = auto()
    PAD_MINUS = auto()
    PAD_PLUS = auto()
    PAD_DELETE = auto()
    PAD_ENTER = auto()

    PRINTSCREEN = 92
    PAUSE = auto()

    LSHIFT = 215
    RSHIFT = auto()
    LCTRL = auto()
    RCTRL = auto()
    ALT = auto()
    ALTGR = auto()
    LWIN = auto()
    RWIN = auto()
    MENU = auto()
    SCROLLLOCK = auto()
    NUMLOCK = auto()
    CAPSLOCK = auto()

    MAX = auto()


class MouseButton(IntEnum):
    """The buttons of a mouse."""

    LEFT = 1
    RIGHT = auto()
    CENTER = auto()
    BACK = auto()
    FORWARD = auto()


@dataclass
class GamePadDPad:
    """Which directions of the directional pad are pressed."""

    up: ButtonState = ButtonState.RELEASED
    down: ButtonState = ButtonState.RELEASED
    left: ButtonState = ButtonState.RELEASED
    right: ButtonState = ButtonState.RELEASED


@dataclass
class GamePadTriggers:
    """Positions of the left and right triggers."""

    left: float = 0.0
    right: float = 0.0


@dataclass
class GamePadThumbSticks:
    """Positions of the left and right thumbsticks."""

    left: Vector2 = Vector2.ZERO
    right: Vector2 = Vector2.ZERO


@dataclass
class GamePadButtons:
    """Whether each face, menu, stick and shoulder button is pressed."""

    a: ButtonState = ButtonState.RELEASED
    b: ButtonState = ButtonState.RELEASED
    x: ButtonState = ButtonState.RELEASED
    y: ButtonState = ButtonState.RELEASED
    start: ButtonState = ButtonState.RELEASED
    back: ButtonState = ButtonState.RELEASED
    left_stick: ButtonState = ButtonState.RELEASED
    left_shoulder: ButtonState = ButtonState.RELEASED
    right_stick: ButtonState = ButtonState.RELEASED
    right_shoulder: ButtonState = ButtonState.RELEASED


_BUTTON_FIELDS: dict[Button, tuple[str, str]] = {
    Button.A: ("buttons", "a"),
    Button.B: ("buttons", "b"),
    Button.X: ("buttons", "x"),
    Button.Y: ("buttons", "y"),
    Button.START: ("buttons", "start"),
    Button.BACK: ("buttons", "back"),
    Button.LEFT_STICK: ("buttons", "left_stick"),
    Button.LEFT_SHOULDER: ("buttons", "left_shoulder"),
    Button.RIGHT_STICK: ("buttons", "right_stick"),
    Button.RIGHT_SHOULDER: ("buttons", "right_shoulder"),
    Button.DPAD_UP: ("dpad", "up"),
    Button.DPAD_DOWN: ("dpad", "down"),
    Button.DPAD_LEFT: ("dpad", "left"),
    Button.DPAD_RIGHT: ("dpad", "right"),
}


@dataclass
class GamePadState:
    """The state of a controller: connection, buttons, sticks, triggers and d-pad."""

    is_connected: bool = False
    buttons: GamePadButtons = field(default_factory=GamePadButtons)
    thumbsticks: GamePadThumbSticks = field(default_factory=GamePadThumbSticks)
    triggers: GamePadTriggers = field(default_factory=GamePadTriggers)
    dpad: GamePadDPad = field(default_factory=GamePadDPad)
    joystick_id: Any = None

    def is_button_down(self, button: Button) -> bool:
        """Return True if the button is pressed."""
        fields = _BUTTON_FIELDS.get(button)
        if fields is None:
            return False
        group, name = fields
        return getattr(getattr(self, group), name) is ButtonState.PRESSED

    def is_button_up(self, button: Button) -> bool:
        """Return True if the button is not pressed."""
        return not self.is_button_down(button)

    def reset(self) -> None:
        """Release every button and centre the sticks and triggers."""
        self.buttons = GamePadButtons()
        self.dpad = GamePadDPad()
        self.thumbsticks = GamePadThumbSticks()
        self.triggers = GamePadTriggers()