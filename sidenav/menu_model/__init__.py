"""Menu-tree model, search filtering, route lookup and row formatting.

Defines ``MenuNode`` and the ``FilteredMenuNode`` view produced per filter
pass. Rendering helpers turn a visible tree plus an expanded set into rows.
"""

from __future__ import annotations

from .build import (
    MenuPayloadError,
    duplicate_menu_codes,
    iter_menu_nodes,
    load_menu_file,
    menu_nodes_from_payload,
)
from .filtering import (
    annotate_menu_tree,
    collect_search_expanded_codes,
    filter_menu_tree,
    matches,
    normalize_query,
)
from .navigation import (
    active_ancestor_codes,
    find_menu_node,
    has_usable_path,
    is_clickable,
    is_inert,
    menu_code_index,
    node_has_children,
)
from .rendering import (
    MenuRow,
    flatten_visible_rows,
    format_menu_row,
    format_search_prompt,
    format_status_lines,
)
from .types import FilteredMenuNode, MenuNode

__all__ = [
    "MenuNode",
    "FilteredMenuNode",
    "MenuPayloadError",
    "menu_nodes_from_payload",
    "load_menu_file",
    "iter_menu_nodes",
    "duplicate_menu_codes",
    "normalize_query",
    "matches",
    "annotate_menu_tree",
    "filter_menu_tree",
    "collect_search_expanded_codes",
    "has_usable_path",
    "node_has_children",
    "is_clickable",
    "is_inert",
    "menu_code_index",
    "find_menu_node",
    "active_ancestor_codes",
    "MenuRow",
    "flatten_visible_rows",
    "format_menu_row",
    "format_status_lines",
    "format_search_prompt",
]
