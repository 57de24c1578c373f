"""Route pointer messages and semantic events to capability handlers.

``handle_local`` interprets one raw ``PointerMsg`` for one element: hover
transitions and drag moves on motion, click (chained into drag start) on
press, drag end on release. ``handle_external`` forwards a broadcast event to
the element's matching event-aware module. Unset capabilities, listeners,
and overrides are silent no-ops, as are messages of unknown shape.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .bounds import is_inside
from .commands import batch
from .events import (
    ClickEvent,
    ClickKind,
    DragEvent,
    DragKind,
    DropEvent,
    DropKind,
    HoverEvent,
    HoverKind,
)
from .pointer import MouseButton, PointerAction, PointerMsg

if TYPE_CHECKING:
    from .commands import Commands
    from .state import InteractionState, Interactive

logger = logging.getLogger(__name__)

_CLICK_EVENT_ROUTES = {
    ClickKind.CLICK: "handle_click_event",
    ClickKind.DOUBLE_CLICK: "handle_double_click_event",
    ClickKind.RIGHT_CLICK: "handle_right_click_event",
}
_HOVER_EVENT_ROUTES = {
    HoverKind.ENTER: "handle_mouse_enter_event",
    HoverKind.HOVER: "handle_mouse_hover_event",
    HoverKind.LEAVE: "handle_mouse_leave_event",
}
_DRAG_EVENT_ROUTES = {
    DragKind.START: "handle_drag_start_event",
    DragKind.MOVE: "handle_drag_move_event",
    DragKind.END: "handle_drag_end_event",
}
_DROP_EVENT_ROUTES = {
    DropKind.ENTER: "handle_drop_enter_event",
    DropKind.HOVER: "handle_drop_hover_event",
    DropKind.LEAVE: "handle_drop_leave_event",
    DropKind.RELEASE: "handle_drop_release_event",
    DropKind.ACCEPT: "handle_drop_accept_event",
    DropKind.DENY: "handle_drop_deny_event",
}


class Dispatcher:
    """Default routing for local pointer messages and external events."""

    def __init__(self, monotonic: Callable[[], float] = time.monotonic) -> None:
        """Create a dispatcher.

        Args:
            monotonic: Clock used to time consecutive presses for
                double-click detection.
        """
        self._monotonic = monotonic

    def handle_local(self, element: Interactive, msg: Any) -> tuple[Interactive, Commands]:
        """Handle one pointer message directed at ``element``.

        The element's ``local_handler`` override, when set, replaces this
        routing entirely.
        """
        interaction = element.get_interaction()
        if interaction.local_handler is not None:
            element, cmds = interaction.local_handler(element, msg)
            return element, batch(cmds)
        return self.default_local(element, msg)

    def default_local(self, element: Interactive, msg: Any) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        if not isinstance(msg, PointerMsg) or not interaction.has_capability():
            return element, []

        logger.debug(
            "pointer_local id=%s action=%s button=%s x=%d y=%d",
            interaction.id,
            msg.action.value,
            msg.button.value,
            msg.x,
            msg.y,
        )
        if msg.action is PointerAction.MOTION:
            return self._on_motion(element, msg)
        if msg.action is PointerAction.PRESS:
            return self._on_press(element, msg)
        if msg.action is PointerAction.RELEASE:
            return self._on_release(element, msg)
        return element, []

    def _on_motion(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        hover_cmds: list[Commands] = []
        hover = element.get_interaction().hover
        if hover is not None:
            if is_inside(element, msg):
                if not element.get_interaction().is_hovered:
                    element, cmds = hover.handle_mouse_enter(element, msg)
                    hover_cmds.append(cmds)
                element, cmds = hover.handle_mouse_hover(element, msg)
                hover_cmds.append(cmds)
            elif element.get_interaction().is_hovered:
                element, cmds = hover.handle_mouse_leave(element, msg)
                hover_cmds.append(cmds)

        # Dragging continues outside the element's own bounds.
        drag_cmds: Commands = []
        interaction = element.get_interaction()
        if interaction.drag is not None and interaction.is_dragging:
            element, drag_cmds = interaction.drag.handle_drag_move(element, msg)

        return element, batch(*hover_cmds, drag_cmds)

    def _on_press(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        click = interaction.click
        if click is None or msg.button.is_wheel or not is_inside(element, msg):
            return element, []

        if msg.button is MouseButton.RIGHT:
            element, cmds = click.handle_right_click(element, msg)
            return element, batch(cmds)

        if self._register_click(interaction):
            element, click_cmds = click.handle_double_click(element, msg)
        else:
            element, click_cmds = click.handle_click(element, msg)

        drag_cmds: Commands = []
        interaction = element.get_interaction()
        if interaction.drag is not None and not interaction.is_dragging:
            interaction.is_dragging = True
            element, drag_cmds = interaction.drag.handle_drag_start(element, msg)
        return element, batch(click_cmds, drag_cmds)

    def _on_release(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        if interaction.drag is None or not interaction.is_dragging:
            return element, []
        interaction.is_dragging = False
        element, cmds = interaction.drag.handle_drag_end(element, msg)
        return element, batch(cmds)

    def _register_click(self, interaction: InteractionState) -> bool:
        """Record a left press and report whether it completes a double-click.

        Detection is off while ``double_click_threshold`` is not positive.
        """
        now = self._monotonic()
        threshold = interaction.double_click_threshold
        within = (
            threshold > 0
            and interaction.click_count > 0
            and (now - interaction.last_click_time) <= threshold
        )
        interaction.click_count = interaction.click_count + 1 if within else 1
        interaction.last_click_time = now
        return within and interaction.click_count % 2 == 0

    def handle_external(self, element: Interactive, msg: Any) -> tuple[Interactive, Commands]:
        """Handle one broadcast event, possibly emitted by another element.

        The element's ``external_handler`` override, when set, replaces this
        routing entirely.
        """
        interaction = element.get_interaction()
        if interaction.external_handler is not None:
            element, cmds = interaction.external_handler(element, msg)
            return element, batch(cmds)
        return self.default_external(element, msg)

    def default_external(self, element: Interactive, msg: Any) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        if not interaction.has_event_awareness():
            return element, []

        if isinstance(msg, ClickEvent):
            listener, routes = interaction.click_event, _CLICK_EVENT_ROUTES
        elif isinstance(msg, HoverEvent):
            listener, routes = interaction.hover_event, _HOVER_EVENT_ROUTES
        elif isinstance(msg, DragEvent):
            listener, routes = interaction.drag_event, _DRAG_EVENT_ROUTES
        elif isinstance(msg, DropEvent):
            listener, routes = interaction.drop_event, _DROP_EVENT_ROUTES
        else:
            return element, []

        method_name = routes.get(msg.kind)
        if listener is None or method_name is None:
            return element, []
        logger.debug(
            "event_external id=%s source=%s event=%s kind=%s",
            interaction.id,
            msg.id,
            type(msg).__name__,
            msg.kind.value,
        )
        element, cmds = getattr(listener, method_name)(element, msg)
        return element, batch(cmds)


DEFAULT_DISPATCHER = Dispatcher()


def handle_local(element: Interactive, msg: Any) -> tuple[Interactive, Commands]:
    return DEFAULT_DISPATCHER.handle_local(element, msg)


def handle_external(element: Interactive, msg: Any) -> tuple[Interactive, Commands]:
    return DEFAULT_DISPATCHER.handle_external(element, msg)
