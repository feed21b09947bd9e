"""Pass-through snapshot of the menu data source."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .menu_model.types import MenuNode


@dataclass(frozen=True)
class MenuSourceState:
    """Tree plus load flags as reported by whatever fetched the menu.

    Flags are display states only; no tree work happens while loading or
    after an error.
    """

    tree: Sequence[MenuNode] | None = None
    is_loading: bool = False
    is_fetching: bool = False
    is_error: bool = False

    @property
    def is_busy(self) -> bool:
        return self.is_loading or self.is_fetching
