"""Tests for zone registration and the default bounds test."""

from __future__ import annotations

import unittest

from tuipointer.bounds import DEFAULT_REGISTRY, Zone, ZoneRegistry, default_is_inside, is_inside
from tuipointer.pointer import PointerAction, PointerMsg
from tuipointer.state import InteractionState


def _at(x: int, y: int) -> PointerMsg:
    return PointerMsg(PointerAction.MOTION, x, y)


class ZoneTests(unittest.TestCase):
    def test_contains_is_inclusive(self) -> None:
        zone = Zone.from_size(3, 2, width=4, height=2)
        self.assertEqual(zone, Zone(3, 2, 6, 3))
        self.assertTrue(zone.contains(3, 2))
        self.assertTrue(zone.contains(6, 3))
        self.assertFalse(zone.contains(7, 3))
        self.assertFalse(zone.contains(3, 1))

    def test_from_size_never_collapses_below_one_cell(self) -> None:
        self.assertEqual(Zone.from_size(5, 5, width=0, height=-3), Zone(5, 5, 5, 5))


class ZoneRegistryTests(unittest.TestCase):
    def test_unknown_ids_are_never_inside(self) -> None:
        registry = ZoneRegistry()
        self.assertFalse(registry.in_bounds("missing", _at(1, 1)))

    def test_register_unregister_and_clear(self) -> None:
        registry = ZoneRegistry()
        registry.register("a", Zone(1, 1, 2, 2))
        registry.register("b", Zone(5, 5, 6, 6))
        self.assertTrue(registry.in_bounds("a", _at(2, 2)))
        registry.unregister("a")
        registry.unregister("a")
        self.assertIsNone(registry.get("a"))
        registry.clear()
        self.assertIsNone(registry.get("b"))

    def test_new_prefix_is_unique(self) -> None:
        registry = ZoneRegistry()
        prefixes = {registry.new_prefix() for _ in range(5)}
        self.assertEqual(len(prefixes), 5)


class BoundsTestTests(unittest.TestCase):
    def tearDown(self) -> None:
        DEFAULT_REGISTRY.unregister("bounds-test")

    def test_default_uses_shared_registry_keyed_by_id(self) -> None:
        state = InteractionState(id="bounds-test")
        DEFAULT_REGISTRY.register("bounds-test", Zone(1, 1, 4, 1))
        self.assertTrue(is_inside(state, _at(4, 1)))
        self.assertFalse(is_inside(state, _at(5, 1)))

    def test_default_accepts_explicit_registry(self) -> None:
        registry = ZoneRegistry()
        registry.register("bounds-test", Zone(9, 9, 9, 9))
        state = InteractionState(id="bounds-test")
        self.assertTrue(default_is_inside(state, _at(9, 9), registry))
        self.assertFalse(default_is_inside(state, _at(9, 9)))

    def test_override_replaces_registry_lookup(self) -> None:
        calls: list[PointerMsg] = []

        def always_inside(element, msg) -> bool:
            calls.append(msg)
            return True

        state = InteractionState(id="bounds-test", is_inside=always_inside)
        self.assertTrue(is_inside(state, _at(100, 100)))
        self.assertEqual(calls, [_at(100, 100)])
