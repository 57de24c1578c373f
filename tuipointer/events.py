"""Semantic interaction events broadcast between elements.

Local handling emits these (when a behavior has ``emit_messages`` set); the
host loop redelivers them to every element's external handling on a later
cycle. Each event carries the originating element ``id``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .pointer import PointerMsg
from .state import Point


class ClickKind(enum.Enum):
    CLICK = "click"
    DOUBLE_CLICK = "double_click"
    RIGHT_CLICK = "right_click"


class HoverKind(enum.Enum):
    ENTER = "enter"
    HOVER = "hover"
    LEAVE = "leave"


class DragKind(enum.Enum):
    START = "start"
    MOVE = "move"
    END = "end"


class DropKind(enum.Enum):
    ENTER = "enter"
    HOVER = "hover"
    LEAVE = "leave"
    RELEASE = "release"
    ACCEPT = "accept"
    DENY = "deny"


@dataclass(frozen=True)
class ClickEvent:
    id: str
    kind: ClickKind
    pointer_msg: PointerMsg


@dataclass(frozen=True)
class HoverEvent:
    id: str
    kind: HoverKind
    pointer_msg: PointerMsg


@dataclass(frozen=True)
class DragEvent:
    """Drag progress of the source element.

    ``drag_type`` is the application tag drop targets match against their
    accepted types.
    """

    id: str
    kind: DragKind
    drag_type: str
    drag_origin: Point
    drag_offset: Point
    pointer_msg: PointerMsg


@dataclass(frozen=True)
class DropEvent:
    """Drop-target reaction to a drag; ``drag_event`` is the drag it judged."""

    id: str
    kind: DropKind
    drop_type: str
    acceptable: bool
    drag_event: DragEvent


SemanticEvent = ClickEvent | HoverEvent | DragEvent | DropEvent
