"""Manual expand/collapse history, independent of search."""

from __future__ import annotations

from collections.abc import Iterable


class ExpansionStore:
    """Codes the user opened directly.

    Toggling never cascades to children. State survives searches and is only
    discarded by ``reset`` when a new tree is loaded.
    """

    def __init__(self, expanded: Iterable[str] = ()) -> None:
        self._expanded: set[str] = set(expanded)

    @property
    def manual_expanded(self) -> frozenset[str]:
        return frozenset(self._expanded)

    def is_expanded(self, code: str) -> bool:
        return code in self._expanded

    def toggle(self, code: str) -> bool:
        """Flip membership of ``code`` and return the new membership."""
        if code in self._expanded:
            self._expanded.discard(code)
            return False
        self._expanded.add(code)
        return True

    def expand(self, codes: Iterable[str]) -> list[str]:
        """Insert ``codes`` without removing anything; return codes newly added."""
        added: list[str] = []
        for code in codes:
            if code not in self._expanded:
                self._expanded.add(code)
                added.append(code)
        return added

    def reset(self) -> None:
        self._expanded.clear()
