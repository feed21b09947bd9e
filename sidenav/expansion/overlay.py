"""Search-driven auto-expansion and the user's collapse overrides."""

from __future__ import annotations

from collections.abc import Sequence

from ..menu_model.filtering import collect_search_expanded_codes, normalize_query
from ..menu_model.types import FilteredMenuNode


class SearchOverlay:
    """Auto-expanded codes for the committed query plus collapse overrides.

    Overrides let a user hide a branch that search forced open without
    touching manual expansion state.
    """

    def __init__(self) -> None:
        self.query = ""
        self.search_auto_expanded: frozenset[str] = frozenset()
        self._collapse_overrides: set[str] = set()

    @property
    def search_collapse_overrides(self) -> frozenset[str]:
        return frozenset(self._collapse_overrides)

    @property
    def query_active(self) -> bool:
        return bool(self.query)

    def apply(self, filtered_tree: Sequence[FilteredMenuNode], query: str | None) -> None:
        """Recompute auto-expansion for ``filtered_tree``.

        Overrides are dropped whenever the committed query changes value.
        """
        folded = normalize_query(query)
        if folded != self.query:
            self._collapse_overrides.clear()
        self.query = folded
        if not folded:
            self.search_auto_expanded = frozenset()
            return
        self.search_auto_expanded = collect_search_expanded_codes(filtered_tree)

    def toggle_under_search(self, code: str) -> bool:
        """Flip the override for an auto-expanded ``code``.

        Returns ``False`` (and changes nothing) when search is inactive or
        ``code`` is not auto-expanded, so the caller can fall back to the
        manual toggle.
        """
        if not self.query_active or code not in self.search_auto_expanded:
            return False
        if code in self._collapse_overrides:
            self._collapse_overrides.discard(code)
        else:
            self._collapse_overrides.add(code)
        return True

    def clear_overrides(self) -> None:
        self._collapse_overrides.clear()
