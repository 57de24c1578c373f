"""Capability modules an element may plug into its interaction slots."""

from .click import Clickable, ClickEventAware, ClickHandler
from .drag import Draggable, DragEventAware, DragHandler
from .drop import Droppable, DropEventAware, DropHandler
from .drop_zone import DropFeedbackListener, DropZoneListener
from .hover import Hoverable, HoverEventAware, HoverHandler

__all__ = [
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
]
