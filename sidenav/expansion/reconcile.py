"""Merge manual and search expansion; reveal the active route."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..menu_model.navigation import active_ancestor_codes
from ..menu_model.types import MenuNode
from .store import ExpansionStore


def resolve_expanded(
    manual_expanded: Iterable[str],
    search_auto_expanded: Iterable[str],
    search_collapse_overrides: Iterable[str],
    query_active: bool,
) -> frozenset[str]:
    """Return the effective expanded set used for rendering.

    Without an active query search state is ignored. With one, a code is
    expanded when it is manually expanded or auto-expanded and not overridden.
    """
    manual = frozenset(manual_expanded)
    if not query_active:
        return manual
    return manual | (frozenset(search_auto_expanded) - frozenset(search_collapse_overrides))


def reveal_active_path(store: ExpansionStore, tree: Sequence[MenuNode] | None, active_path: str | None) -> list[str]:
    """Open every ancestor of nodes routed at ``active_path``.

    Insert-only: repeated calls with the same path add nothing. Returns the
    codes that were newly expanded.
    """
    return store.expand(active_ancestor_codes(tree, active_path))
