"""Expansion state: manual history, search overlay and reconciliation."""

from __future__ import annotations

from .overlay import SearchOverlay
from .reconcile import resolve_expanded, reveal_active_path
from .store import ExpansionStore

__all__ = [
    "ExpansionStore",
    "SearchOverlay",
    "resolve_expanded",
    "reveal_active_path",
]
