"""Helpers for building an element's interaction state."""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from .behaviors import ClickHandler, DragHandler, DropFeedbackListener, DropHandler, DropZoneListener, HoverHandler
from .bounds import DEFAULT_REGISTRY, ZoneRegistry
from .config import load_double_click_seconds, load_emit_messages
from .state import InteractionState

if TYPE_CHECKING:
    from .behaviors import Clickable, Draggable, Droppable, Hoverable


def new_interaction(
    id: str | None = None,
    *,
    click: Clickable | None = None,
    hover: Hoverable | None = None,
    drag: Draggable | None = None,
    drop: Droppable | None = None,
    double_click_seconds: float | None = None,
    registry: ZoneRegistry | None = None,
) -> InteractionState:
    """Create interaction state for a new element.

    Without an explicit ``id`` a fresh zone prefix is taken from ``registry``
    (the shared registry by default). A drop target listens to other
    elements' drags through a ``DropZoneListener``; a drag source that is not
    itself a drop target gets a ``DropFeedbackListener`` so drop targets'
    verdicts about its own drags flow back into its flags.
    """
    zones = DEFAULT_REGISTRY if registry is None else registry
    if double_click_seconds is None:
        double_click_seconds = load_double_click_seconds()
    return InteractionState(
        id=zones.new_prefix() if id is None else id,
        double_click_threshold=double_click_seconds,
        click=click,
        hover=hover,
        drag=drag,
        drop=drop,
        drag_event=DropZoneListener() if drop is not None else None,
        drop_event=DropFeedbackListener() if drag is not None and drop is None else None,
    )


def bind_event_awareness(state: InteractionState) -> InteractionState:
    """Use each configured behavior as its own event listener.

    Only empty event slots are filled, so a ``DropZoneListener`` already
    bound by ``new_interaction`` stays in place. Behaviors listen to every
    element's events, including the owner's.
    """
    pairs = (
        ("click", "click_event"),
        ("hover", "hover_event"),
        ("drag", "drag_event"),
        ("drop", "drop_event"),
    )
    for capability_slot, event_slot in pairs:
        behavior = getattr(state, capability_slot)
        if behavior is not None and getattr(state, event_slot) is None:
            setattr(state, event_slot, behavior)
    return state


def default_behaviors(
    *,
    drag_type: str = "",
    accepted_drop_types: Collection[str] = (),
    emit_messages: bool | None = None,
) -> dict[str, object]:
    """Return default handlers for every capability, keyed by slot name.

    ``emit_messages`` falls back to the persisted preference. The result
    unpacks straight into ``new_interaction(**...)``.
    """
    emit = load_emit_messages() if emit_messages is None else emit_messages
    return {
        "click": ClickHandler(emit_messages=emit),
        "hover": HoverHandler(emit_messages=emit),
        "drag": DragHandler(drag_type=drag_type, emit_messages=emit),
        "drop": DropHandler(accepted_drop_types=frozenset(accepted_drop_types), emit_messages=emit),
    }
