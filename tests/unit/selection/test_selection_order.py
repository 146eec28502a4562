"""Tests for ordered selection bookkeeping and its name -> index table."""

from __future__ import annotations

import unittest

from lnka.selection import SelectionOrder


def _assert_consistent(test: unittest.TestCase, order: SelectionOrder) -> None:
    names = order.names()
    test.assertEqual(len(names), len(set(names)))
    test.assertEqual(len(order), len(names))
    for idx, name in enumerate(names):
        test.assertIn(name, order)
        test.assertEqual(order._positions.get(name), idx)


class SelectionOrderTests(unittest.TestCase):
    def test_initial_names_keep_given_order_and_skip_duplicates(self) -> None:
        order = SelectionOrder(["b", "a", "b", "c"])

        self.assertEqual(order.names(), ["b", "a", "c"])
        _assert_consistent(self, order)

    def test_add_appends_and_reports_duplicates(self) -> None:
        order = SelectionOrder()

        self.assertTrue(order.add("x"))
        self.assertTrue(order.add("y"))
        self.assertFalse(order.add("x"))

        self.assertEqual(order.names(), ["x", "y"])
        self.assertEqual(order._positions.get("y"), 1)

    def test_discard_shifts_trailing_positions(self) -> None:
        order = SelectionOrder(["a", "b", "c", "d"])

        self.assertTrue(order.discard("b"))

        self.assertEqual(order.names(), ["a", "c", "d"])
        self.assertIsNone(order._positions.get("b"))
        self.assertEqual(order._positions.get("c"), 1)
        self.assertEqual(order._positions.get("d"), 2)
        _assert_consistent(self, order)

    def test_discard_missing_name_is_noop(self) -> None:
        order = SelectionOrder(["a"])

        self.assertFalse(order.discard("zzz"))
        self.assertEqual(order.names(), ["a"])

    def test_toggle_twice_restores_membership(self) -> None:
        order = SelectionOrder(["a", "b"])

        self.assertFalse(order.toggle("a"))
        self.assertTrue(order.toggle("a"))

        self.assertEqual(sorted(order.names()), ["a", "b"])
        # Re-selected names move to the end of the order.
        self.assertEqual(order.names(), ["b", "a"])
        _assert_consistent(self, order)

    def test_toggle_unselected_twice_restores_exact_state(self) -> None:
        order = SelectionOrder(["a", "b"])

        order.toggle("c")
        order.toggle("c")

        self.assertEqual(order.names(), ["a", "b"])
        _assert_consistent(self, order)

    def test_names_returns_a_copy(self) -> None:
        order = SelectionOrder(["a"])

        order.names().append("b")

        self.assertEqual(order.names(), ["a"])

    def test_consistency_survives_mixed_operations(self) -> None:
        order = SelectionOrder()
        for step, name in enumerate(["a", "b", "c", "a", "d", "b", "e", "c", "a"]):
            with self.subTest(step=step):
                order.toggle(name)
                _assert_consistent(self, order)
        self.assertEqual(order.names(), ["d", "e", "a"])


if __name__ == "__main__":
    unittest.main()
