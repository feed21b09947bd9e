"""Tests for manual expansion, search overrides and reconciliation."""

from __future__ import annotations

import unittest

from menu_fixtures import sample_tree
from sidenav.expansion import ExpansionStore, SearchOverlay, resolve_expanded, reveal_active_path
from sidenav.menu_model import filter_menu_tree


class ExpansionStoreTests(unittest.TestCase):
    def test_toggle_is_an_involution(self) -> None:
        store = ExpansionStore({"A"})
        self.assertTrue(store.toggle("C"))
        self.assertFalse(store.toggle("C"))
        self.assertEqual(store.manual_expanded, frozenset({"A"}))

    def test_toggle_does_not_cascade(self) -> None:
        store = ExpansionStore({"C"})
        store.toggle("A")
        store.toggle("A")
        self.assertTrue(store.is_expanded("C"))

    def test_expand_only_inserts(self) -> None:
        store = ExpansionStore({"A"})
        self.assertEqual(store.expand(["A", "C"]), ["C"])
        self.assertEqual(store.expand(["A", "C"]), [])
        self.assertEqual(store.manual_expanded, frozenset({"A", "C"}))

    def test_manual_expanded_is_a_snapshot(self) -> None:
        store = ExpansionStore()
        snapshot = store.manual_expanded
        store.toggle("A")
        self.assertEqual(snapshot, frozenset())


class SearchOverlayTests(unittest.TestCase):
    def test_apply_collects_auto_expanded_codes(self) -> None:
        overlay = SearchOverlay()
        overlay.apply(filter_menu_tree(sample_tree(), "d"), "d")
        self.assertTrue(overlay.query_active)
        self.assertEqual(overlay.search_auto_expanded, frozenset({"A", "C"}))

    def test_toggle_under_search_flips_override_only_for_auto_expanded(self) -> None:
        overlay = SearchOverlay()
        overlay.apply(filter_menu_tree(sample_tree(), "d"), "d")

        self.assertTrue(overlay.toggle_under_search("C"))
        self.assertEqual(overlay.search_collapse_overrides, frozenset({"C"}))
        self.assertTrue(overlay.toggle_under_search("C"))
        self.assertEqual(overlay.search_collapse_overrides, frozenset())
        self.assertFalse(overlay.toggle_under_search("D"))
        self.assertEqual(overlay.search_collapse_overrides, frozenset())

    def test_toggle_under_search_is_declined_without_query(self) -> None:
        overlay = SearchOverlay()
        overlay.apply(filter_menu_tree(sample_tree(), ""), "")
        self.assertFalse(overlay.toggle_under_search("A"))

    def test_clearing_query_empties_overrides(self) -> None:
        overlay = SearchOverlay()
        overlay.apply(filter_menu_tree(sample_tree(), "d"), "d")
        overlay.toggle_under_search("A")
        overlay.toggle_under_search("C")

        overlay.apply(filter_menu_tree(sample_tree(), ""), "")

        self.assertEqual(overlay.search_collapse_overrides, frozenset())
        self.assertEqual(overlay.search_auto_expanded, frozenset())
        self.assertFalse(overlay.query_active)

    def test_changing_query_drops_stale_overrides(self) -> None:
        overlay = SearchOverlay()
        overlay.apply(filter_menu_tree(sample_tree(), "d"), "d")
        overlay.toggle_under_search("C")

        overlay.apply(filter_menu_tree(sample_tree(), "del"), "del")
        self.assertEqual(overlay.search_collapse_overrides, frozenset())

    def test_reapplying_same_query_keeps_overrides(self) -> None:
        overlay = SearchOverlay()
        filtered = filter_menu_tree(sample_tree(), "d")
        overlay.apply(filtered, "d")
        overlay.toggle_under_search("C")

        overlay.apply(filtered, " D ")
        self.assertEqual(overlay.search_collapse_overrides, frozenset({"C"}))


class ResolveExpandedTests(unittest.TestCase):
    def test_inactive_query_returns_manual_only(self) -> None:
        self.assertEqual(
            resolve_expanded({"B"}, {"A", "C"}, {"C"}, query_active=False),
            frozenset({"B"}),
        )

    def test_active_query_unions_manual_with_unoverridden_auto(self) -> None:
        self.assertEqual(
            resolve_expanded({"B"}, {"A", "C"}, {"C"}, query_active=True),
            frozenset({"A", "B"}),
        )

    def test_manual_expansion_wins_over_override(self) -> None:
        self.assertEqual(
            resolve_expanded({"C"}, {"A", "C"}, {"C"}, query_active=True),
            frozenset({"A", "C"}),
        )

    def test_is_pure(self) -> None:
        manual = {"B"}
        auto = {"A", "C"}
        overrides = {"C"}
        first = resolve_expanded(manual, auto, overrides, True)
        second = resolve_expanded(manual, auto, overrides, True)
        self.assertEqual(first, second)
        self.assertEqual((manual, auto, overrides), ({"B"}, {"A", "C"}, {"C"}))


class RevealActivePathTests(unittest.TestCase):
    def test_reveal_opens_ancestors(self) -> None:
        store = ExpansionStore()
        self.assertEqual(reveal_active_path(store, sample_tree(), "/delta"), ["A", "C"])
        self.assertEqual(store.manual_expanded, frozenset({"A", "C"}))

    def test_reveal_is_idempotent_and_never_removes(self) -> None:
        store = ExpansionStore({"B"})
        reveal_active_path(store, sample_tree(), "/delta")
        before = store.manual_expanded
        self.assertEqual(reveal_active_path(store, sample_tree(), "/delta"), [])
        self.assertEqual(store.manual_expanded, before)
        self.assertIn("B", before)


if __name__ == "__main__":
    unittest.main()
