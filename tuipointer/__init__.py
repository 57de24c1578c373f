"""Pointer interaction for terminal UI elements.

Elements own an ``InteractionState``; ``handle_local`` reacts to raw pointer
messages and ``handle_external`` to events broadcast by other elements.
Capabilities (click, hover, drag, drop) are pluggable modules in
``tuipointer.behaviors``.
"""

from __future__ import annotations

from .behaviors import (
    ClickEventAware,
    ClickHandler,
    Clickable,
    DragEventAware,
    DragHandler,
    Draggable,
    DropEventAware,
    DropHandler,
    DropFeedbackListener,
    DropZoneListener,
    Droppable,
    HoverEventAware,
    HoverHandler,
    Hoverable,
)
from .bounds import DEFAULT_REGISTRY, Zone, ZoneRegistry, default_is_inside, is_inside
from .commands import Commands, Emit, batch, run_commands
from .dispatch import Dispatcher, handle_external, handle_local
from .element import bind_event_awareness, default_behaviors, new_interaction
from .events import (
    ClickEvent,
    ClickKind,
    DragEvent,
    DragKind,
    DropEvent,
    DropKind,
    HoverEvent,
    HoverKind,
    SemanticEvent,
)
from .pointer import Modifiers, MouseButton, PointerAction, PointerMsg, decode_sgr_mouse, parse_mouse_key
from .pump import deliver, run_until_idle
from .state import InteractionState, Interactive, Point

__all__ = [
    "InteractionState",
    "Interactive",
    "Point",
    "PointerMsg",
    "PointerAction",
    "MouseButton",
    "Modifiers",
    "decode_sgr_mouse",
    "parse_mouse_key",
    "ClickEvent",
    "ClickKind",
    "HoverEvent",
    "HoverKind",
    "DragEvent",
    "DragKind",
    "DropEvent",
    "DropKind",
    "SemanticEvent",
    "Emit",
    "Commands",
    "batch",
    "run_commands",
    "Zone",
    "ZoneRegistry",
    "DEFAULT_REGISTRY",
    "default_is_inside",
    "is_inside",
    "Clickable",
    "ClickEventAware",
    "ClickHandler",
    "Hoverable",
    "HoverEventAware",
    "HoverHandler",
    "Draggable",
    "DragEventAware",
    "DragHandler",
    "Droppable",
    "DropEventAware",
    "DropHandler",
    "DropZoneListener",
    "DropFeedbackListener",
    "Dispatcher",
    "handle_local",
    "handle_external",
    "new_interaction",
    "bind_event_awareness",
    "default_behaviors",
    "deliver",
    "run_until_idle",
]
