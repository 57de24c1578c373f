"""Drag capability: origin/offset tracking between press and release."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ..commands import emit_if
from ..events import DragEvent, DragKind
from ..state import Point

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..commands import Commands
    from ..pointer import PointerMsg
    from ..state import Interactive

    PointerCallback = Callable[[Interactive, PointerMsg], tuple[Interactive, Commands]]
    DragEventCallback = Callable[[Interactive, DragEvent], tuple[Interactive, Commands]]


class Draggable(Protocol):
    def handle_drag_start(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...

    def handle_drag_move(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...

    def handle_drag_end(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...


class DragEventAware(Protocol):
    def handle_drag_start_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]: ...

    def handle_drag_move_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]: ...

    def handle_drag_end_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]: ...


@dataclass
class DragHandler:
    """Default drag policy.

    Start records the press position as ``drag_origin`` and zeroes the
    offset; move recomputes ``drag_offset`` as pointer minus origin; end
    clears ``is_dragging``. Emitted ``DragEvent`` values carry ``drag_type``
    so drop targets can decide whether they accept the payload.
    """

    on_drag_start: PointerCallback | None = None
    on_drag_move: PointerCallback | None = None
    on_drag_end: PointerCallback | None = None

    on_drag_start_event: DragEventCallback | None = None
    on_drag_move_event: DragEventCallback | None = None
    on_drag_end_event: DragEventCallback | None = None

    drag_type: str = ""
    emit_messages: bool = False

    def handle_drag_start(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_drag_start is not None:
            return self.on_drag_start(element, msg)
        return self.default_drag_start(element, msg)

    def default_drag_start(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_dragging = True
        interaction.drag_origin = Point(msg.x, msg.y)
        interaction.drag_offset = Point(0, 0)
        return element, self._emit(element, msg, DragKind.START)

    def handle_drag_move(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_drag_move is not None:
            return self.on_drag_move(element, msg)
        return self.default_drag_move(element, msg)

    def default_drag_move(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_dragging = True
        interaction.drag_offset = Point(msg.x, msg.y) - interaction.drag_origin
        return element, self._emit(element, msg, DragKind.MOVE)

    def handle_drag_end(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_drag_end is not None:
            return self.on_drag_end(element, msg)
        return self.default_drag_end(element, msg)

    def default_drag_end(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_dragging = False
        return element, self._emit(element, msg, DragKind.END)

    def _emit(self, element: Interactive, msg: PointerMsg, kind: DragKind) -> Commands:
        interaction = element.get_interaction()
        event = DragEvent(
            id=interaction.id,
            kind=kind,
            drag_type=self.drag_type,
            drag_origin=interaction.drag_origin,
            drag_offset=interaction.drag_offset,
            pointer_msg=msg,
        )
        return emit_if(self.emit_messages, event)

    def handle_drag_start_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drag_start_event is not None:
            return self.on_drag_start_event(element, event)
        return element, []

    def handle_drag_move_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drag_move_event is not None:
            return self.on_drag_move_event(element, event)
        return element, []

    def handle_drag_end_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drag_end_event is not None:
            return self.on_drag_end_event(element, event)
        return element, []
