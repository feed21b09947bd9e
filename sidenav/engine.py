"""Sidebar menu engine.

Owns the committed query, the filtered view, manual expansion history and
search overrides for one rendered sidebar. All transitions run synchronously;
the only deferred step is the query debounce, advanced by ``poll``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .debounce import DEFAULT_DEBOUNCE_SECONDS, QueryDebouncer
from .expansion import ExpansionStore, SearchOverlay, resolve_expanded, reveal_active_path
from .menu_model.build import duplicate_menu_codes
from .menu_model.filtering import filter_menu_tree, normalize_query
from .menu_model.navigation import has_usable_path, menu_code_index, node_has_children
from .menu_model.types import FilteredMenuNode, MenuNode
from .source import MenuSourceState

logger = logging.getLogger(__name__)

STATUS_LOADING = "loading"
STATUS_ERROR = "error"
STATUS_EMPTY = "empty"
STATUS_NO_MATCHES = "no_matches"
STATUS_READY = "ready"


@dataclass(frozen=True)
class MenuActivation:
    """Outcome of clicking a menu row."""

    kind: str
    code: str
    path: str | None = None
    expanded: bool | None = None


class MenuEngine:
    def __init__(
        self,
        *,
        navigate: Callable[[str], None] | None = None,
        request_sidebar_open: Callable[[], None] | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.navigate = navigate
        self.request_sidebar_open = request_sidebar_open
        self.store = ExpansionStore()
        self.overlay = SearchOverlay()
        self.debouncer = QueryDebouncer(debounce_seconds, monotonic=monotonic)
        self.source = MenuSourceState()
        self.raw_query = ""
        self.active_path: str | None = None
        self._filtered: tuple[FilteredMenuNode, ...] = ()
        self._code_index: dict[str, MenuNode] = {}

    @classmethod
    def from_config(cls, **kwargs) -> MenuEngine:
        """Build an engine using the persisted search debounce window."""
        from .config import load_search_debounce_seconds

        kwargs.setdefault("debounce_seconds", load_search_debounce_seconds())
        return cls(**kwargs)

    @property
    def tree(self) -> Sequence[MenuNode]:
        return self.source.tree or ()

    @property
    def committed_query(self) -> str:
        return self.overlay.query

    @property
    def query_active(self) -> bool:
        return self.overlay.query_active

    @property
    def status(self) -> str:
        if self.source.is_busy:
            return STATUS_LOADING
        if self.source.is_error:
            return STATUS_ERROR
        if not self.tree:
            return STATUS_EMPTY
        if not self._filtered:
            return STATUS_NO_MATCHES
        return STATUS_READY

    @property
    def visible_tree(self) -> tuple[FilteredMenuNode, ...]:
        if self.status != STATUS_READY:
            return ()
        return self._filtered

    @property
    def expanded(self) -> frozenset[str]:
        return resolve_expanded(
            self.store.manual_expanded,
            self.overlay.search_auto_expanded,
            self.overlay.search_collapse_overrides,
            self.query_active,
        )

    def is_expanded(self, code: str) -> bool:
        return code in self.expanded

    def load(self, source: MenuSourceState | Sequence[MenuNode] | None) -> None:
        """Accept a new data-source snapshot.

        A different tree instance discards manual and override state and
        re-reveals the active route; flag-only updates keep everything.
        """
        if not isinstance(source, MenuSourceState):
            source = MenuSourceState(tree=source)
        previous_tree = self.source.tree
        self.source = source
        if source.tree is not previous_tree:
            self.store.reset()
            self.overlay.clear_overrides()
            self._code_index = menu_code_index(source.tree or ())
            duplicates = duplicate_menu_codes(source.tree or ())
            if duplicates:
                logger.warning("menu tree has duplicate codes; expansion state is shared: %s", ", ".join(duplicates))
            logger.debug("menu tree reloaded with %d codes", len(self._code_index))
            self._refilter()
            self._reveal_active_path()
        else:
            self._refilter()

    def set_query(self, text: str, now: float | None = None) -> None:
        """Record a raw edit; it takes effect after the debounce window."""
        self.raw_query = text
        self.debouncer.push(text, now)

    def poll(self, now: float | None = None) -> bool:
        """Advance the debounce; return ``True`` when the committed query changed."""
        committed = self.debouncer.poll(now)
        if committed is None:
            return False
        return self._commit(committed)

    def commit_query(self, text: str) -> bool:
        """Set and commit the query immediately, cancelling any pending edit."""
        self.raw_query = text
        self.debouncer.cancel()
        self.debouncer.committed = text
        return self._commit(text)

    def _commit(self, text: str) -> bool:
        folded = normalize_query(text)
        if folded == self.overlay.query:
            return False
        logger.debug("search query committed: %r", folded)
        self._refilter(folded)
        return True

    def _refilter(self, query: str | None = None) -> None:
        folded = self.overlay.query if query is None else query
        if self.source.is_busy or self.source.is_error:
            self._filtered = ()
        else:
            self._filtered = filter_menu_tree(self.source.tree, folded)
        self.overlay.apply(self._filtered, folded)

    def toggle(self, code: str) -> bool:
        """Toggle ``code``; auto-expanded codes flip their search override.

        Unknown codes are ignored. Returns whether any state changed.
        """
        if code not in self._code_index:
            logger.debug("ignoring toggle for unknown menu code %r", code)
            return False
        # A code that is also manually expanded stays open: the override only
        # removes search expansion, never manual state.
        if self.overlay.toggle_under_search(code):
            return True
        self.store.toggle(code)
        return True

    def set_active_path(self, path: str | None) -> list[str]:
        """Track the routed path and open its ancestors; return codes opened."""
        if path == self.active_path:
            return []
        self.active_path = path
        return self._reveal_active_path()

    def _reveal_active_path(self) -> list[str]:
        added = reveal_active_path(self.store, self.tree, self.active_path)
        if added:
            logger.debug("revealed %s for active path %r", added, self.active_path)
        return added

    def activate(self, code: str, sidebar_open: bool = True) -> MenuActivation:
        """Handle a click on the row for ``code``.

        A collapsed sidebar navigates when it can and otherwise asks to be
        opened; it never changes expansion state.
        """
        node = self._code_index.get(code)
        if node is None:
            return MenuActivation("none", code)

        if not sidebar_open:
            if has_usable_path(node):
                return self._navigate(node)
            if self.request_sidebar_open is not None:
                self.request_sidebar_open()
            return MenuActivation("open_sidebar", code)

        if node_has_children(node):
            self.toggle(code)
            return MenuActivation("toggle", code, expanded=self.is_expanded(code))
        if has_usable_path(node):
            return self._navigate(node)
        return MenuActivation("none", code)

    def _navigate(self, node: MenuNode) -> MenuActivation:
        if self.navigate is not None and node.path is not None:
            self.navigate(node.path)
        return MenuActivation("navigate", node.code, path=node.path)
