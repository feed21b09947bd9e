"""Row flattening and formatting for the sidebar menu."""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence
from dataclasses import dataclass

from ..ui_theme import DEFAULT_THEME, UITheme
from .filtering import normalize_query
from .navigation import is_inert, node_has_children
from .types import FilteredMenuNode

LOADING_PLACEHOLDER_ROWS = 11
STATUS_MESSAGES = {
    "error": "Failed to load menu",
    "empty": "No menu available",
    "no_matches": "No matches found",
}


@dataclass(frozen=True)
class MenuRow:
    """One rendered sidebar row."""

    item: FilteredMenuNode
    depth: int
    expanded: bool
    active: bool


def flatten_visible_rows(
    visible_tree: Sequence[FilteredMenuNode],
    expanded: Collection[str],
    active_path: str | None = None,
    sidebar_open: bool = True,
) -> list[MenuRow]:
    """Walk the visible tree depth-first, descending only into expanded groups.

    A collapsed sidebar shows top-level rows only.
    """
    rows: list[MenuRow] = []

    def walk(items: Sequence[FilteredMenuNode], depth: int) -> None:
        for item in items:
            is_expanded = item.code in expanded
            rows.append(
                MenuRow(
                    item=item,
                    depth=depth,
                    expanded=is_expanded,
                    active=active_path is not None and item.path == active_path,
                )
            )
            if sidebar_open and node_has_children(item) and is_expanded:
                walk(item.children, depth + 1)

    walk(visible_tree, 0)
    return rows


def highlight_substring(text: str, query: str, theme: UITheme | None = None) -> str:
    """Highlight first case-insensitive substring match in ``text``."""
    if not normalize_query(query):
        return text
    active_theme = theme or DEFAULT_THEME
    found = re.search(re.escape(query.strip()), text, re.IGNORECASE)
    if found is None:
        return text
    idx, end = found.span()
    return text[:idx] + active_theme.menu_match + text[idx:end] + active_theme.menu_match_end + text[end:]


def format_menu_row(
    row: MenuRow,
    query: str = "",
    theme: UITheme | None = None,
    sidebar_open: bool = True,
) -> str:
    """Render one menu row as ANSI-styled display text.

    A collapsed sidebar drops the expand marker since groups cannot open there.
    """
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * row.depth
    name = highlight_substring(row.item.name, query, active_theme)
    if node_has_children(row.item):
        if not sidebar_open:
            marker = "  "
        else:
            marker = "▾ " if row.expanded else "▸ "
        color = active_theme.menu_group
    else:
        marker = "  "
        color = active_theme.menu_inert if is_inert(row.item) else active_theme.menu_leaf
    if row.active:
        color = color + active_theme.reverse
    return f"{indent}{active_theme.menu_marker}{marker}{reset}{color}{name}{reset}"


def format_status_lines(status: str, theme: UITheme | None = None) -> list[str]:
    """Render placeholder/status rows for every non-ready engine status."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if status == "loading":
        return [f"{active_theme.placeholder}  ░░░░░░░░░░{reset}" for _ in range(LOADING_PLACEHOLDER_ROWS)]
    message = STATUS_MESSAGES.get(status)
    if message is None:
        return []
    return [f"{active_theme.status_text}{message}{reset}"]


def format_search_prompt(raw_query: str, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    if not raw_query:
        return f"{active_theme.search_prompt}>{reset} {active_theme.search_hint}Search{reset}"
    return f"{active_theme.search_prompt}>{reset} {raw_query}"
