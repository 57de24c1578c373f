"""Click capability: selection on press and click-event broadcast.

``ClickHandler`` answers every click kind with an optional application
callback; when none is set the default policy runs. Right-click has no
default policy, so without ``on_right_click`` it does nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ..commands import emit_if
from ..events import ClickEvent, ClickKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..commands import Commands
    from ..pointer import PointerMsg
    from ..state import Interactive

    PointerCallback = Callable[[Interactive, PointerMsg], tuple[Interactive, Commands]]
    ClickEventCallback = Callable[[Interactive, ClickEvent], tuple[Interactive, Commands]]


class Clickable(Protocol):
    def handle_click(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...

    def handle_double_click(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...

    def handle_right_click(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]: ...


class ClickEventAware(Protocol):
    def handle_click_event(self, element: Interactive, event: ClickEvent) -> tuple[Interactive, Commands]: ...

    def handle_double_click_event(self, element: Interactive, event: ClickEvent) -> tuple[Interactive, Commands]: ...

    def handle_right_click_event(self, element: Interactive, event: ClickEvent) -> tuple[Interactive, Commands]: ...


@dataclass
class ClickHandler:
    """Default click policy with per-kind overrides.

    Default policies mark the element selected and, when ``emit_messages`` is
    set, broadcast a ``ClickEvent``. A callback replaces its default entirely,
    emission included. External click events have no default reaction.
    """

    on_click: PointerCallback | None = None
    on_double_click: PointerCallback | None = None
    on_right_click: PointerCallback | None = None

    on_click_event: ClickEventCallback | None = None
    on_double_click_event: ClickEventCallback | None = None
    on_right_click_event: ClickEventCallback | None = None

    emit_messages: bool = False

    def handle_click(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_click is not None:
            return self.on_click(element, msg)
        return self.default_click(element, msg)

    def default_click(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        return self._select(element, msg, ClickKind.CLICK)

    def handle_double_click(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_double_click is not None:
            return self.on_double_click(element, msg)
        return self.default_double_click(element, msg)

    def default_double_click(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        return self._select(element, msg, ClickKind.DOUBLE_CLICK)

    def handle_right_click(self, element: Interactive, msg: PointerMsg) -> tuple[Interactive, Commands]:
        if self.on_right_click is not None:
            return self.on_right_click(element, msg)
        return element, []

    def _select(self, element: Interactive, msg: PointerMsg, kind: ClickKind) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_selected = True
        return element, emit_if(self.emit_messages, ClickEvent(interaction.id, kind, msg))

    def handle_click_event(self, element: Interactive, event: ClickEvent) -> tuple[Interactive, Commands]:
        if self.on_click_event is not None:
            return self.on_click_event(element, event)
        return element, []

    def handle_double_click_event(self, element: Interactive, event: ClickEvent) -> tuple[Interactive, Commands]:
        if self.on_double_click_event is not None:
            return self.on_double_click_event(element, event)
        return element, []

    def handle_right_click_event(self, element: Interactive, event: ClickEvent) -> tuple[Interactive, Commands]:
        if self.on_right_click_event is not None:
            return self.on_right_click_event(element, event)
        return element, []
