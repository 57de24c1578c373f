"""Hover capability: enter, repeat-hover, and leave transitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ..commands import emit_if
from ..events import HoverEvent, HoverKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..commands import Commands
    from ..pointer import PointerMsg
    from ..state import Interactive

    PointerCallback = Callable[[Interactive, PointerMsg], tuple[Interactive, Commands]]
    HoverEventCallback = Callable[[Interactive, HoverEvent], tuple[Interactive, Commands]]


class Hoverable(Protocol):
    def handle_mouse_enter(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...

    def handle_mouse_hover(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...

    def handle_mouse_leave(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...


class HoverEventAware(Protocol):
    def handle_mouse_enter_event(self, element: Interactive, event: HoverEvent) -> tuple[Interactive, Commands]: ...

    def handle_mouse_hover_event(self, element: Interactive, event: HoverEvent) -> tuple[Interactive, Commands]: ...

    def handle_mouse_leave_event(self, element: Interactive, event: HoverEvent) -> tuple[Interactive, Commands]: ...


@dataclass
class HoverHandler:
    """Keeps ``is_hovered`` in step with the pointer.

    Enter and hover set the flag, leave clears it. Another element's hover
    events are ignored unless an ``on_*_event`` callback is set.
    """

    on_mouse_enter: PointerCallback | None = None
    on_mouse_hover: PointerCallback | None = None
    on_mouse_leave: PointerCallback | None = None

    on_mouse_enter_event: HoverEventCallback | None = None
    on_mouse_hover_event: HoverEventCallback | None = None
    on_mouse_leave_event: HoverEventCallback | None = None

    emit_messages: bool = False

    def handle_mouse_enter(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_mouse_enter is not None:
            return self.on_mouse_enter(element, msg)
        return self.default_mouse_enter(element, msg)

    def default_mouse_enter(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        return self._set_hovered(element, msg, HoverKind.ENTER, True)

    def handle_mouse_hover(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_mouse_hover is not None:
            return self.on_mouse_hover(element, msg)
        return self.default_mouse_hover(element, msg)

    def default_mouse_hover(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        return self._set_hovered(element, msg, HoverKind.HOVER, True)

    def handle_mouse_leave(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_mouse_leave is not None:
            return self.on_mouse_leave(element, msg)
        return self.default_mouse_leave(element, msg)

    def default_mouse_leave(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        return self._set_hovered(element, msg, HoverKind.LEAVE, False)

    def _set_hovered(
        self,
        element: Interactive,
        msg: PointerMsg,
        kind: HoverKind,
        hovered: bool,
    ) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_hovered = hovered
        return element, emit_if(self.emit_messages, HoverEvent(interaction.id, kind, msg))

    def handle_mouse_enter_event(self, element: Interactive, event: HoverEvent) -> tuple[Interactive, Commands]:
        if self.on_mouse_enter_event is not None:
            return self.on_mouse_enter_event(element, event)
        return element, []

    def handle_mouse_hover_event(self, element: Interactive, event: HoverEvent) -> tuple[Interactive, Commands]:
        if self.on_mouse_hover_event is not None:
            return self.on_mouse_hover_event(element, event)
        return element, []

    def handle_mouse_leave_event(self, element: Interactive, event: HoverEvent) -> tuple[Interactive, Commands]:
        if self.on_mouse_leave_event is not None:
            return self.on_mouse_leave_event(element, event)
        return element, []
