"""Deferred side effects returned from interaction handlers.

Handlers never schedule anything themselves. They return ``Emit`` values
describing an event to broadcast; the host loop calls each one (or reads
``.event``) and redelivers the result as an external message.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .events import SemanticEvent

E = TypeVar("E", bound="SemanticEvent")


@dataclass(frozen=True)
class Emit(Generic[E]):
    event: E

    def __call__(self) -> E:
        return self.event


Commands = list[Emit]


def emit_if(enabled: bool, event: SemanticEvent) -> Commands:
    """Return a one-command batch when broadcasting is enabled, else nothing."""
    return [Emit(event)] if enabled else []


def batch(*groups: Iterable[Emit] | None) -> Commands:
    """Concatenate command groups, preserving emission order.

    ``None`` groups are skipped so callbacks may return no commands at all.
    """
    merged: Commands = []
    for group in groups:
        if group:
            merged.extend(group)
    return merged


def run_commands(commands: Iterable[Emit]) -> list[SemanticEvent]:
    """Execute producers in order and collect the events they yield."""
    return [command() for command in commands]
