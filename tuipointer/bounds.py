"""Bounds testing for interactive elements.

The default test asks a ``ZoneRegistry`` whether the pointer falls inside the
rectangle last registered under the element's id. Renderers own the registry
lifecycle: they register a zone for every element they draw and clear stale
ones between frames.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pointer import PointerMsg
    from .state import Interactive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Zone:
    """Inclusive cell rectangle in 1-based terminal coordinates."""

    min_col: int
    min_row: int
    max_col: int
    max_row: int

    @classmethod
    def from_size(cls, col: int, row: int, width: int, height: int) -> Zone:
        return cls(col, row, col + max(1, width) - 1, row + max(1, height) - 1)

    def contains(self, col: int, row: int) -> bool:
        return self.min_col <= col <= self.max_col and self.min_row <= row <= self.max_row


class ZoneRegistry:
    """Maps element ids to the screen region they were last drawn into."""

    def __init__(self) -> None:
        self._zones: dict[str, Zone] = {}
        self._prefix_counter = itertools.count(1)

    def new_prefix(self) -> str:
        """Return a fresh id that no other caller of this registry will get."""
        return f"zone{next(self._prefix_counter)}_"

    def register(self, zone_id: str, zone: Zone) -> None:
        self._zones[zone_id] = zone

    def unregister(self, zone_id: str) -> None:
        self._zones.pop(zone_id, None)

    def get(self, zone_id: str) -> Zone | None:
        return self._zones.get(zone_id)

    def clear(self) -> None:
        self._zones.clear()

    def in_bounds(self, zone_id: str, msg: PointerMsg) -> bool:
        zone = self._zones.get(zone_id)
        if zone is None:
            return False
        return zone.contains(msg.x, msg.y)


DEFAULT_REGISTRY = ZoneRegistry()


def default_is_inside(element: Interactive, msg: PointerMsg, registry: ZoneRegistry | None = None) -> bool:
    """Resolve the element's zone by id in ``registry`` (the shared one by default)."""
    zones = DEFAULT_REGISTRY if registry is None else registry
    return zones.in_bounds(element.get_interaction().id, msg)


def is_inside(element: Interactive, msg: PointerMsg) -> bool:
    """Bounds test honoring the element's ``is_inside`` override."""
    interaction = element.get_interaction()
    if interaction.is_inside is not None:
        inside = bool(interaction.is_inside(element, msg))
    else:
        inside = default_is_inside(element, msg)
    logger.debug("bounds_test id=%s x=%d y=%d inside=%s", interaction.id, msg.x, msg.y, inside)
    return inside
