"""Cross-element wiring between drag sources and drop targets.

Bind a ``DropZoneListener`` as a drop target's ``drag_event`` slot. Each
incoming ``DragEvent`` is bounds-tested against the target using the drag's
pointer position, and the target's ``drop`` capability sees the matching
enter/hover/leave/release transition. A release needs a prior enter.

Bind a ``DropFeedbackListener`` as a drag source's ``drop_event`` slot to
mirror target verdicts about that source's own drags.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..bounds import is_inside
from ..commands import batch
from .drop import DropHandler

if TYPE_CHECKING:
    from ..commands import Commands
    from ..events import DragEvent, DropEvent
    from ..state import Interactive
    from .drop import DropEventAware

logger = logging.getLogger(__name__)


@dataclass
class DropZoneListener:
    def handle_drag_start_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]:
        return self._track(element, event)

    def handle_drag_move_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]:
        return self._track(element, event)

    def handle_drag_end_event(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        drop = interaction.drop
        if drop is None or event.id == interaction.id:
            return element, []
        if not interaction.is_below_drop:
            return element, []
        if is_inside(element, event.pointer_msg):
            logger.debug(
                "drop_zone_release id=%s source=%s drag_type=%s",
                interaction.id,
                event.id,
                event.drag_type,
            )
            return drop.handle_drop_release(element, event)
        logger.debug("drop_zone_leave id=%s source=%s", interaction.id, event.id)
        return drop.handle_drop_leave(element, event)

    def _track(self, element: Interactive, event: DragEvent) -> tuple[Interactive, Commands]:
        interaction = element.get_interaction()
        drop = interaction.drop
        if drop is None or event.id == interaction.id:
            return element, []

        if not is_inside(element, event.pointer_msg):
            if interaction.is_below_drop:
                logger.debug("drop_zone_leave id=%s source=%s", interaction.id, event.id)
                return drop.handle_drop_leave(element, event)
            return element, []

        enter_cmds: Commands = []
        if not interaction.is_below_drop:
            logger.debug("drop_zone_enter id=%s source=%s", interaction.id, event.id)
            element, enter_cmds = drop.handle_drop_enter(element, event)
        element, hover_cmds = drop.handle_drop_hover(element, event)
        return element, batch(enter_cmds, hover_cmds)


@dataclass
class DropFeedbackListener:
    """Drop-target verdicts for a drag source's own drags.

    Bind as a drag source's ``drop_event`` slot. Only ``DropEvent`` values
    judging a drag this element started reach ``handler``, so an idle source
    never picks up another element's ``is_above_drop``.
    """

    handler: DropEventAware = field(default_factory=DropHandler)

    def _owns(self, element: Interactive, event: DropEvent) -> bool:
        return event.drag_event.id == element.get_interaction().id

    def handle_drop_enter_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if not self._owns(element, event):
            return element, []
        return self.handler.handle_drop_enter_event(element, event)

    def handle_drop_hover_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if not self._owns(element, event):
            return element, []
        return self.handler.handle_drop_hover_event(element, event)

    def handle_drop_leave_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if not self._owns(element, event):
            return element, []
        return self.handler.handle_drop_leave_event(element, event)

    def handle_drop_release_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if not self._owns(element, event):
            return element, []
        return self.handler.handle_drop_release_event(element, event)

    def handle_drop_accept_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if not self._owns(element, event):
            return element, []
        return self.handler.handle_drop_accept_event(element, event)

    def handle_drop_deny_event(self, element: Interactive, event: DropEvent) -> tuple[Interactive, Commands]:
        if not self._owns(element, event):
            return element, []
        return self.handler.handle_drop_deny_event(element, event)
