"""Tests for ``DropZoneListener`` turning drags into drop transitions."""

from __future__ import annotations

import unittest

from tuipointer.behaviors import DropFeedbackListener, DropHandler, DropZoneListener
from tuipointer.dispatch import handle_external
from tuipointer.events import DragEvent, DragKind, DropEvent, DropKind
from tuipointer.pointer import PointerAction, PointerMsg
from tuipointer.state import InteractionState, Point


def _target_box(element, msg) -> bool:
    return 10 <= msg.x <= 20 and 1 <= msg.y <= 3


def _drag(kind: DragKind, x: int, y: int, source: str = "source", drag_type: str = "file") -> DragEvent:
    action = PointerAction.RELEASE if kind is DragKind.END else PointerAction.MOTION
    return DragEvent(source, kind, drag_type, Point(2, 1), Point(x - 2, y - 1), PointerMsg(action, x, y))


def _kinds(cmds) -> list[DropKind]:
    return [cmd().kind for cmd in cmds]


class DropZoneListenerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.target = InteractionState(
            id="target",
            drop=DropHandler(accepted_drop_types={"file"}, emit_messages=True),
            drag_event=DropZoneListener(),
            is_inside=_target_box,
        )

    def test_first_move_inside_enters_then_hovers(self) -> None:
        _, cmds = handle_external(self.target, _drag(DragKind.MOVE, 12, 2))
        self.assertEqual(_kinds(cmds), [DropKind.ENTER, DropKind.HOVER])
        self.assertTrue(self.target.is_below_drop)
        self.assertTrue(self.target.is_valid_drop)

    def test_later_moves_inside_only_hover(self) -> None:
        handle_external(self.target, _drag(DragKind.MOVE, 12, 2))
        _, cmds = handle_external(self.target, _drag(DragKind.MOVE, 13, 2))
        self.assertEqual(_kinds(cmds), [DropKind.HOVER])

    def test_move_out_leaves_once(self) -> None:
        handle_external(self.target, _drag(DragKind.MOVE, 12, 2))
        _, cmds = handle_external(self.target, _drag(DragKind.MOVE, 40, 2))
        self.assertEqual(_kinds(cmds), [DropKind.LEAVE])
        self.assertFalse(self.target.is_below_drop)

        _, cmds = handle_external(self.target, _drag(DragKind.MOVE, 41, 2))
        self.assertEqual(cmds, [])

    def test_end_inside_releases_and_resolves(self) -> None:
        handle_external(self.target, _drag(DragKind.MOVE, 12, 2))
        _, cmds = handle_external(self.target, _drag(DragKind.END, 12, 2))
        self.assertEqual(_kinds(cmds), [DropKind.RELEASE, DropKind.ACCEPT])
        self.assertFalse(self.target.is_below_drop)
        self.assertFalse(self.target.is_valid_drop)

    def test_end_inside_with_wrong_type_denies(self) -> None:
        handle_external(self.target, _drag(DragKind.MOVE, 12, 2, drag_type="folder"))
        _, cmds = handle_external(self.target, _drag(DragKind.END, 12, 2, drag_type="folder"))
        self.assertEqual(_kinds(cmds), [DropKind.RELEASE, DropKind.DENY])

    def test_end_outside_after_hovering_leaves(self) -> None:
        handle_external(self.target, _drag(DragKind.MOVE, 12, 2))
        _, cmds = handle_external(self.target, _drag(DragKind.END, 40, 2))
        self.assertEqual(_kinds(cmds), [DropKind.LEAVE])
        self.assertFalse(self.target.is_below_drop)

    def test_end_outside_without_hovering_is_silent(self) -> None:
        _, cmds = handle_external(self.target, _drag(DragKind.END, 40, 2))
        self.assertEqual(cmds, [])

    def test_end_inside_without_prior_enter_is_silent(self) -> None:
        _, cmds = handle_external(self.target, _drag(DragKind.END, 12, 1))
        self.assertEqual(cmds, [])
        self.assertFalse(self.target.is_below_drop)
        self.assertFalse(self.target.is_valid_drop)

    def test_own_drag_is_ignored(self) -> None:
        _, cmds = handle_external(self.target, _drag(DragKind.MOVE, 12, 2, source="target"))
        self.assertEqual(cmds, [])
        self.assertFalse(self.target.is_below_drop)

    def test_listener_without_drop_capability_is_silent(self) -> None:
        state = InteractionState(id="observer", drag_event=DropZoneListener(), is_inside=_target_box)
        element, cmds = handle_external(state, _drag(DragKind.MOVE, 12, 2))
        self.assertIs(element, state)
        self.assertEqual(cmds, [])


class DropFeedbackListenerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.source = InteractionState(id="source", drop_event=DropFeedbackListener())

    def _verdict(self, kind: DropKind, dragged_by: str, acceptable: bool = True) -> DropEvent:
        return DropEvent("target", kind, "file", acceptable, _drag(DragKind.MOVE, 12, 2, source=dragged_by))

    def test_verdicts_about_own_drag_update_flags(self) -> None:
        handle_external(self.source, self._verdict(DropKind.ENTER, "source"))
        self.assertTrue(self.source.is_above_drop)
        self.assertTrue(self.source.is_valid_drop)

        handle_external(self.source, self._verdict(DropKind.ACCEPT, "source"))
        self.assertFalse(self.source.is_above_drop)
        self.assertFalse(self.source.is_valid_drop)

    def test_verdicts_about_other_drags_are_ignored(self) -> None:
        for kind in DropKind:
            with self.subTest(kind=kind):
                element, cmds = handle_external(self.source, self._verdict(kind, "other"))
                self.assertIs(element, self.source)
                self.assertEqual(cmds, [])
                self.assertFalse(self.source.is_above_drop)
                self.assertFalse(self.source.is_valid_drop)

    def test_other_drag_does_not_clear_own_feedback(self) -> None:
        handle_external(self.source, self._verdict(DropKind.HOVER, "source"))
        handle_external(self.source, self._verdict(DropKind.LEAVE, "other"))
        self.assertTrue(self.source.is_above_drop)

    def test_wrapped_handler_callbacks_still_apply(self) -> None:
        seen: list[DropEvent] = []

        def on_deny(element, event):
            seen.append(event)
            return element, []

        source = InteractionState(
            id="source",
            drop_event=DropFeedbackListener(DropHandler(on_drop_deny_event=on_deny)),
        )
        mine = self._verdict(DropKind.DENY, "source", acceptable=False)
        handle_external(source, mine)
        handle_external(source, self._verdict(DropKind.DENY, "other", acceptable=False))
        self.assertEqual(seen, [mine])
