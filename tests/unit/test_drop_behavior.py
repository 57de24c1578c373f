"""Tests for ``DropHandler`` local and external defaults.

Local handling runs on the drop target (``is_below_drop``); external
handling runs on the drag source (``is_above_drop``). Release must resolve
into exactly one accept or deny with a terminal reset either way.
"""

from __future__ import annotations

import unittest

from tuipointer.behaviors import DropHandler
from tuipointer.events import DragEvent, DragKind, DropEvent, DropKind
from tuipointer.pointer import PointerAction, PointerMsg
from tuipointer.state import InteractionState, Point


def _drag(drag_type: str, kind: DragKind = DragKind.MOVE, source: str = "source") -> DragEvent:
    return DragEvent(
        id=source,
        kind=kind,
        drag_type=drag_type,
        drag_origin=Point(1, 1),
        drag_offset=Point(3, 0),
        pointer_msg=PointerMsg(PointerAction.MOTION, 4, 1),
    )


def _summary(cmds) -> list[tuple[DropKind, bool]]:
    return [(cmd().kind, cmd().acceptable) for cmd in cmds]


class AcceptanceTests(unittest.TestCase):
    def test_membership_in_accepted_types(self) -> None:
        handler = DropHandler(accepted_drop_types=["folder", "file"])
        target = InteractionState(id="target", drop=handler)
        self.assertTrue(handler.handle_is_acceptable(target, _drag("file")))
        self.assertTrue(handler.handle_is_acceptable(target, _drag("folder")))
        self.assertFalse(handler.handle_is_acceptable(target, _drag("image")))

    def test_empty_accepted_types_rejects_everything(self) -> None:
        handler = DropHandler()
        target = InteractionState(id="target", drop=handler)
        self.assertFalse(handler.handle_is_acceptable(target, _drag("file")))
        self.assertFalse(handler.handle_is_acceptable(target, _drag("")))

    def test_custom_predicate_replaces_membership(self) -> None:
        handler = DropHandler(
            accepted_drop_types=["file"],
            is_acceptable=lambda element, drag: drag.drag_type.startswith("img"),
        )
        target = InteractionState(id="target", drop=handler)
        self.assertTrue(handler.handle_is_acceptable(target, _drag("img/png")))
        self.assertFalse(handler.handle_is_acceptable(target, _drag("file")))


class LocalDropTests(unittest.TestCase):
    def setUp(self) -> None:
        self.handler = DropHandler(accepted_drop_types={"file"}, emit_messages=True)
        self.target = InteractionState(id="target", drop=self.handler)

    def test_enter_then_release_acceptable_drag_accepts(self) -> None:
        drag = _drag("file")
        _, enter_cmds = self.handler.handle_drop_enter(self.target, drag)
        self.assertTrue(self.target.is_below_drop)
        self.assertTrue(self.target.is_valid_drop)

        _, release_cmds = self.handler.handle_drop_release(self.target, drag)
        self.assertEqual(
            _summary(enter_cmds) + _summary(release_cmds),
            [(DropKind.ENTER, True), (DropKind.RELEASE, True), (DropKind.ACCEPT, True)],
        )
        self.assertFalse(self.target.is_below_drop)
        self.assertFalse(self.target.is_valid_drop)

    def test_enter_then_release_unacceptable_drag_denies(self) -> None:
        drag = _drag("folder")
        _, enter_cmds = self.handler.handle_drop_enter(self.target, drag)
        self.assertTrue(self.target.is_below_drop)
        self.assertFalse(self.target.is_valid_drop)

        _, release_cmds = self.handler.handle_drop_release(self.target, drag)
        self.assertEqual(
            _summary(enter_cmds) + _summary(release_cmds),
            [(DropKind.ENTER, False), (DropKind.RELEASE, False), (DropKind.DENY, False)],
        )
        self.assertFalse(self.target.is_below_drop)
        self.assertFalse(self.target.is_valid_drop)

    def test_drop_events_carry_target_id_drag_type_and_drag(self) -> None:
        drag = _drag("file")
        _, cmds = self.handler.handle_drop_hover(self.target, drag)
        self.assertEqual(
            [cmd() for cmd in cmds],
            [DropEvent("target", DropKind.HOVER, "file", True, drag)],
        )

    def test_leave_reports_validity_before_reset(self) -> None:
        drag = _drag("file")
        self.handler.handle_drop_enter(self.target, drag)
        _, cmds = self.handler.handle_drop_leave(self.target, drag)
        self.assertEqual(_summary(cmds), [(DropKind.LEAVE, True)])
        self.assertFalse(self.target.is_below_drop)
        self.assertFalse(self.target.is_valid_drop)

    def test_release_dispatches_exactly_one_resolution(self) -> None:
        calls: list[str] = []

        def on_accept(element, drag):
            calls.append("accept")
            return element, []

        def on_deny(element, drag):
            calls.append("deny")
            return element, []

        handler = DropHandler(accepted_drop_types={"file"}, on_drop_accept=on_accept, on_drop_deny=on_deny)
        target = InteractionState(id="target", drop=handler)
        handler.handle_drop_release(target, _drag("file"))
        handler.handle_drop_release(target, _drag("folder"))
        self.assertEqual(calls, ["accept", "deny"])

    def test_custom_release_skips_chained_resolution(self) -> None:
        calls: list[str] = []

        def on_accept(element, drag):
            calls.append("accept")
            return element, []

        handler = DropHandler(
            accepted_drop_types={"file"},
            on_drop_release=lambda element, drag: (element, []),
            on_drop_accept=on_accept,
        )
        target = InteractionState(id="target", drop=handler)
        handler.handle_drop_release(target, _drag("file"))
        self.assertEqual(calls, [])

    def test_silent_without_broadcast(self) -> None:
        handler = DropHandler(accepted_drop_types={"file"})
        target = InteractionState(id="target", drop=handler)
        _, cmds = handler.handle_drop_release(target, _drag("file"))
        self.assertEqual(cmds, [])


class ExternalDropTests(unittest.TestCase):
    def setUp(self) -> None:
        self.handler = DropHandler()
        self.source = InteractionState(id="source", drop_event=self.handler)

    def _event(self, kind: DropKind, acceptable: bool) -> DropEvent:
        return DropEvent("target", kind, "file", acceptable, _drag("file"))

    def test_enter_and_hover_mark_above_and_mirror_verdict(self) -> None:
        self.handler.handle_drop_enter_event(self.source, self._event(DropKind.ENTER, True))
        self.assertTrue(self.source.is_above_drop)
        self.assertTrue(self.source.is_valid_drop)

        self.handler.handle_drop_hover_event(self.source, self._event(DropKind.HOVER, False))
        self.assertTrue(self.source.is_above_drop)
        self.assertFalse(self.source.is_valid_drop)

    def test_terminal_events_clear_above_and_valid(self) -> None:
        terminal = [
            (DropKind.LEAVE, self.handler.handle_drop_leave_event),
            (DropKind.RELEASE, self.handler.handle_drop_release_event),
            (DropKind.ACCEPT, self.handler.handle_drop_accept_event),
            (DropKind.DENY, self.handler.handle_drop_deny_event),
        ]
        for kind, handle in terminal:
            with self.subTest(kind=kind):
                self.source.is_above_drop = True
                self.source.is_valid_drop = True
                _, cmds = handle(self.source, self._event(kind, True))
                self.assertEqual(cmds, [])
                self.assertFalse(self.source.is_above_drop)
                self.assertFalse(self.source.is_valid_drop)

    def test_external_callbacks_replace_defaults(self) -> None:
        seen: list[DropEvent] = []

        def on_hover(element, event):
            seen.append(event)
            return element, []

        handler = DropHandler(on_drop_hover_event=on_hover)
        event = self._event(DropKind.HOVER, True)
        handler.handle_drop_hover_event(self.source, event)
        self.assertEqual(seen, [event])
        self.assertFalse(self.source.is_above_drop)
