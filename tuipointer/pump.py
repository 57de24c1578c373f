"""Reference message pump for host loops.

A host loop hands every pointer message to every element's local handling,
runs the returned commands, and feeds the produced events back to every
element's external handling on the next cycle. ``run_until_idle`` performs
those cycles back to back, which is what tests and simple hosts want.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from .commands import run_commands
from .dispatch import DEFAULT_DISPATCHER, Dispatcher
from .pointer import PointerMsg

if TYPE_CHECKING:
    from .commands import Commands
    from .events import SemanticEvent
    from .state import Interactive

DEFAULT_MAX_ROUNDS = 32

logger = logging.getLogger(__name__)


def deliver(
    elements: Sequence[Interactive],
    msg: Any,
    dispatcher: Dispatcher | None = None,
) -> tuple[list[Interactive], Commands]:
    """Deliver one message to every element, in order.

    Pointer messages go to local handling, anything else to external
    handling. Returns the (possibly replaced) elements and the batched
    commands of all of them.
    """
    router = dispatcher if dispatcher is not None else DEFAULT_DISPATCHER
    route = router.handle_local if isinstance(msg, PointerMsg) else router.handle_external
    updated: list[Interactive] = []
    commands: Commands = []
    for element in elements:
        element, cmds = route(element, msg)
        updated.append(element)
        commands.extend(cmds)
    return updated, commands


def run_until_idle(
    elements: Sequence[Interactive],
    msg: Any,
    dispatcher: Dispatcher | None = None,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
) -> tuple[list[Interactive], list[SemanticEvent]]:
    """Deliver ``msg`` and keep redelivering emitted events until none remain.

    Returns the final elements and every event delivered, in delivery order.
    Stops after ``max_rounds`` redelivery cycles so listeners that answer
    every event with another event cannot spin forever.
    """
    delivered: list[SemanticEvent] = []
    current, commands = deliver(elements, msg, dispatcher)
    rounds = 0
    while commands:
        if rounds >= max_rounds:
            logger.warning("pump_round_limit rounds=%d pending=%d", rounds, len(commands))
            break
        pending: Commands = []
        for event in run_commands(commands):
            delivered.append(event)
            current, more = deliver(current, event, dispatcher)
            pending.extend(more)
        commands = pending
        rounds += 1
    return current, delivered

