"""Per-element interaction state.

One ``InteractionState`` belongs to each interactive element. Handlers only
ever see it through the element's ``get_interaction()``; it holds flags,
drag geometry, and the configured capability modules, but no behavior.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from .behaviors.click import Clickable, ClickEventAware
    from .behaviors.drag import Draggable, DragEventAware
    from .behaviors.drop import Droppable, DropEventAware
    from .behaviors.hover import Hoverable, HoverEventAware
    from .commands import Commands
    from .pointer import PointerMsg

    InsideTest = Callable[[Interactive, PointerMsg], bool]
    MessageHandler = Callable[[Interactive, Any], tuple[Interactive, Commands]]


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


class Interactive(Protocol):
    """Anything that can hand out its interaction state by reference."""

    def get_interaction(self) -> InteractionState: ...


@dataclass(eq=False)
class InteractionState:
    id: str

    last_click_time: float = 0.0
    double_click_threshold: float = 0.0
    click_count: int = 0

    is_selected: bool = False
    is_hovered: bool = False
    is_dragging: bool = False
    drag_origin: Point = Point()
    drag_offset: Point = Point()

    is_valid_drop: bool = False
    is_above_drop: bool = False
    is_below_drop: bool = False

    click: Clickable | None = None
    hover: Hoverable | None = None
    drag: Draggable | None = None
    drop: Droppable | None = None

    click_event: ClickEventAware | None = None
    hover_event: HoverEventAware | None = None
    drag_event: DragEventAware | None = None
    drop_event: DropEventAware | None = None

    is_inside: InsideTest | None = None
    local_handler: MessageHandler | None = None
    external_handler: MessageHandler | None = None

    def get_interaction(self) -> InteractionState:
        return self

    def has_capability(self) -> bool:
        return any(slot is not None for slot in (self.click, self.hover, self.drag, self.drop))

    def has_event_awareness(self) -> bool:
        return any(
            slot is not None
            for slot in (self.click_event, self.hover_event, self.drag_event, self.drop_event)
        )
