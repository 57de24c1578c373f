"""Drop capability: drop-target validation and drag-source feedback.

Local handling runs on the drop target and is fed ``DragEvent`` values from
some other element's drag; it maintains ``is_below_drop`` and
``is_valid_drop``. External handling runs on the drag source when the
target's ``DropEvent`` comes back around; it maintains ``is_above_drop`` and
mirrors the target's verdict into ``is_valid_drop``.

A release always resolves synchronously into exactly one accept or deny.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ..commands import batch, emit_if
from ..events import DragEvent, DropEvent, DropKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..commands import Commands
    from ..state import Interactive

    DragEventCallback = Callable[[Interactive, DragEvent], tuple[Interactive, Commands]]
    DropEventCallback = Callable[[Interactive, DropEvent], tuple[Interactive, Commands]]
    AcceptancePredicate = Callable[[Interactive, DragEvent], bool]


class Droppable(Protocol):
    def handle_is_acceptable(self, element: Interactive, drag_event: DragEvent) -> bool: ...

    def handle_drop_enter(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_hover(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_leave(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_release(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_accept(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_deny(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]: ...


class DropEventAware(Protocol):
    def handle_drop_enter_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_hover_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_leave_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_release_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_accept_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]: ...

    def handle_drop_deny_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]: ...


@dataclass
class DropHandler:
    on_drop_enter: DragEventCallback | None = None
    on_drop_hover: DragEventCallback | None = None
    on_drop_leave: DragEventCallback | None = None
    on_drop_release: DragEventCallback | None = None
    on_drop_accept: DragEventCallback | None = None
    on_drop_deny: DragEventCallback | None = None
    is_acceptable: AcceptancePredicate | None = None

    on_drop_enter_event: DropEventCallback | None = None
    on_drop_hover_event: DropEventCallback | None = None
    on_drop_leave_event: DropEventCallback | None = None
    on_drop_release_event: DropEventCallback | None = None
    on_drop_accept_event: DropEventCallback | None = None
    on_drop_deny_event: DropEventCallback | None = None

    accepted_drop_types: Collection[str] = ()
    emit_messages: bool = False

    def handle_is_acceptable(self, element: Interactive, drag_event: DragEvent) -> bool:
        if self.is_acceptable is not None:
            return bool(self.is_acceptable(element, drag_event))
        return self.default_is_acceptable(element, drag_event)

    def default_is_acceptable(self, element: Interactive, drag_event: DragEvent) -> bool:
        return drag_event.drag_type in self.accepted_drop_types

    def _event(self, element: Interactive, kind: DropKind, acceptable: bool, drag_event: DragEvent) -> Commands:
        event = DropEvent(
            id=element.get_interaction().id,
            kind=kind,
            drop_type=drag_event.drag_type,
            acceptable=acceptable,
            drag_event=drag_event,
        )
        return emit_if(self.emit_messages, event)

    # Local handling, on the drop target.

    def handle_drop_enter(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_enter is not None:
            return self.on_drop_enter(element, drag_event)
        return self.default_drop_enter(element, drag_event)

    def default_drop_enter(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        return self._mark_below(element, drag_event, DropKind.ENTER)

    def handle_drop_hover(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_hover is not None:
            return self.on_drop_hover(element, drag_event)
        return self.default_drop_hover(element, drag_event)

    def default_drop_hover(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        return self._mark_below(element, drag_event, DropKind.HOVER)

    def _mark_below(self, element: Interactive, drag_event: DragEvent, kind: DropKind) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_below_drop = True
        interaction.is_valid_drop = self.handle_is_acceptable(element, drag_event)
        return element, self._event(element, kind, interaction.is_valid_drop, drag_event)

    def handle_drop_leave(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_leave is not None:
            return self.on_drop_leave(element, drag_event)
        return self.default_drop_leave(element, drag_event)

    def default_drop_leave(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_below_drop = False
        # The leave event reports the verdict the pointer is leaving behind.
        cmds = self._event(element, DropKind.LEAVE, interaction.is_valid_drop, drag_event)
        interaction.is_valid_drop = False
        return element, cmds

    def handle_drop_release(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_release is not None:
            return self.on_drop_release(element, drag_event)
        return self.default_drop_release(element, drag_event)

    def default_drop_release(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        valid = self.handle_is_acceptable(element, drag_event)
        interaction.is_valid_drop = valid
        release_cmds = self._event(element, DropKind.RELEASE, valid, drag_event)
        if valid:
            element, resolution_cmds = self.handle_drop_accept(element, drag_event)
        else:
            element, resolution_cmds = self.handle_drop_deny(element, drag_event)
        return element, batch(release_cmds, resolution_cmds)

    def handle_drop_accept(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_accept is not None:
            return self.on_drop_accept(element, drag_event)
        return self.default_drop_accept(element, drag_event)

    def default_drop_accept(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        return self._resolve(element, drag_event, DropKind.ACCEPT, True)

    def handle_drop_deny(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_deny is not None:
            return self.on_drop_deny(element, drag_event)
        return self.default_drop_deny(element, drag_event)

    def default_drop_deny(self, element: Interactive, drag_event: DragEvent) -> tuple[Interactive, Commands]:
        return self._resolve(element, drag_event, DropKind.DENY, False)

    def _resolve(
        self,
        element: Interactive,
        drag_event: DragEvent,
        kind: DropKind,
        acceptable: bool,
    ) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        cmds = self._event(element, kind, acceptable, drag_event)
        interaction.is_below_drop = False
        interaction.is_valid_drop = False
        return element, cmds

    # External handling, on the drag source.

    def handle_drop_enter_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_enter_event is not None:
            return self.on_drop_enter_event(element, event)
        return self.default_drop_enter_event(element, event)

    def default_drop_enter_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        return self._mark_above(element, event)

    def handle_drop_hover_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_hover_event is not None:
            return self.on_drop_hover_event(element, event)
        return self.default_drop_hover_event(element, event)

    def default_drop_hover_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        return self._mark_above(element, event)

    def _mark_above(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_above_drop = True
        interaction.is_valid_drop = event.acceptable
        return element, []

    def handle_drop_leave_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_leave_event is not None:
            return self.on_drop_leave_event(element, event)
        return self._clear_above(element)

    def handle_drop_release_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_release_event is not None:
            return self.on_drop_release_event(element, event)
        return self._clear_above(element)

    def handle_drop_accept_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_accept_event is not None:
            return self.on_drop_accept_event(element, event)
        return self._clear_above(element)

    def handle_drop_deny_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if self.on_drop_deny_event is not None:
            return self.on_drop_deny_event(element, event)
        return self._clear_above(element)

    def _clear_above(self, element: Interactive) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        interaction.is_above_drop = False
        interaction.is_valid_drop = False
        return element, []
