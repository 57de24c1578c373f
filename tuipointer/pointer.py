"""Pointer messages consumed by local interaction handling.

Terminals report the mouse through SGR sequences (``ESC [ < b ; x ; y M|m``).
This module normalizes those reports into ``PointerMsg`` values and also
accepts the ``MOUSE_LEFT_DOWN:col:row`` token strings some input readers
produce.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class PointerAction(enum.Enum):
    MOTION = "motion"
    PRESS = "press"
    RELEASE = "release"


class MouseButton(enum.Enum):
    NONE = "none"
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    WHEEL_LEFT = "wheel_left"
    WHEEL_RIGHT = "wheel_right"

    @property
    def is_wheel(self) -> bool:
        return self in _WHEEL_BUTTONS


_WHEEL_BUTTONS = frozenset(
    {MouseButton.WHEEL_UP, MouseButton.WHEEL_DOWN, MouseButton.WHEEL_LEFT, MouseButton.WHEEL_RIGHT}
)
_PLAIN_BUTTONS = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT, MouseButton.NONE)
_WHEEL_BY_CODE = (MouseButton.WHEEL_UP, MouseButton.WHEEL_DOWN, MouseButton.WHEEL_LEFT, MouseButton.WHEEL_RIGHT)

SGR_SHIFT_BIT = 0b0000_0100
SGR_ALT_BIT = 0b0000_1000
SGR_CTRL_BIT = 0b0001_0000
SGR_MOTION_BIT = 0b0010_0000
SGR_WHEEL_BIT = 0b0100_0000


@dataclass(frozen=True)
class Modifiers:
    shift: bool = False
    alt: bool = False
    ctrl: bool = False


@dataclass(frozen=True)
class PointerMsg:
    """One raw pointer report in 1-based terminal cell coordinates."""

    action: PointerAction
    x: int
    y: int
    button: MouseButton = MouseButton.LEFT
    modifiers: Modifiers = Modifiers()


def decode_sgr_mouse(payload: str, final: str) -> PointerMsg | None:
    """Decode the body of an SGR mouse report.

    ``payload`` is the ``b;x;y`` text between ``ESC [ <`` and the final byte,
    ``final`` is ``"M"`` (press/motion) or ``"m"`` (release). Returns ``None``
    for anything that is not a well-formed report.
    """
    if final not in {"M", "m"}:
        return None
    try:
        btn_s, col_s, row_s = payload.split(";")
        btn = int(btn_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return None
    if btn < 0:
        return None

    modifiers = Modifiers(
        shift=bool(btn & SGR_SHIFT_BIT),
        alt=bool(btn & SGR_ALT_BIT),
        ctrl=bool(btn & SGR_CTRL_BIT),
    )
    code = btn & 0b11
    if btn & SGR_WHEEL_BIT:
        # Wheel notches arrive as presses; there is no matching release.
        return PointerMsg(PointerAction.PRESS, col, row, _WHEEL_BY_CODE[code], modifiers)

    button = _PLAIN_BUTTONS[code]
    if btn & SGR_MOTION_BIT:
        action = PointerAction.MOTION
    elif final == "m":
        action = PointerAction.RELEASE
    else:
        action = PointerAction.PRESS
    return PointerMsg(action, col, row, button, modifiers)


_KEY_ACTIONS = {
    "DOWN": PointerAction.PRESS,
    "UP": PointerAction.RELEASE,
    "MOVE": PointerAction.MOTION,
}


def parse_mouse_key(mouse_key: str) -> PointerMsg | None:
    """Parse ``MOUSE_<BUTTON>_<DOWN|UP|MOVE>:col:row`` tokens.

    Wheel tokens (``MOUSE_WHEEL_UP:col:row``) become wheel presses.
    """
    parts = mouse_key.split(":")
    if len(parts) != 3 or not parts[0].startswith("MOUSE_"):
        return None
    try:
        col, row = int(parts[1]), int(parts[2])
    except ValueError:
        return None

    name = parts[0][len("MOUSE_"):]
    if name.startswith("WHEEL_"):
        try:
            button = MouseButton[name]
        except KeyError:
            return None
        return PointerMsg(PointerAction.PRESS, col, row, button)

    button_name, _, action_name = name.rpartition("_")
    action = _KEY_ACTIONS.get(action_name)
    if action is None:
        return None
    try:
        button = MouseButton[button_name] if button_name else MouseButton.NONE
    except KeyError:
        return None
    if button.is_wheel:
        return None
    return PointerMsg(action, col, row, button)
