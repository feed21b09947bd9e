"""Node classification and active-route lookup helpers."""

from __future__ import annotations

from collections.abc import Sequence

from .build import iter_menu_nodes
from .types import PLACEHOLDER_PATHS, FilteredMenuNode, MenuNode


def has_usable_path(node: MenuNode | FilteredMenuNode) -> bool:
    """Return whether ``node`` points at a real route."""
    return node.path is not None and node.path not in PLACEHOLDER_PATHS


def node_has_children(node: MenuNode | FilteredMenuNode) -> bool:
    """Prefer the filter-pass flag so pruned groups still read as groups."""
    if isinstance(node, FilteredMenuNode):
        return node.has_children
    return bool(node.children)


def is_clickable(node: MenuNode | FilteredMenuNode) -> bool:
    """Leaves with a usable path navigate directly."""
    return has_usable_path(node) and not node_has_children(node)


def is_inert(node: MenuNode | FilteredMenuNode) -> bool:
    """Leaves without a usable path can neither navigate nor expand."""
    return not has_usable_path(node) and not node_has_children(node)


def menu_code_index(tree: Sequence[MenuNode]) -> dict[str, MenuNode]:
    """Map each code to its first node in pre-order."""
    index: dict[str, MenuNode] = {}
    for node, _depth in iter_menu_nodes(tree):
        index.setdefault(node.code, node)
    return index


def find_menu_node(tree: Sequence[MenuNode], code: str) -> MenuNode | None:
    for node, _depth in iter_menu_nodes(tree):
        if node.code == code:
            return node
    return None


def active_ancestor_codes(tree: Sequence[MenuNode] | None, active_path: str | None) -> list[str]:
    """Return ancestor codes of every node whose path equals ``active_path``.

    Codes are listed outermost first, each once. The matching node itself is
    not included unless it is also an ancestor of another match.
    """
    if not tree or active_path is None or active_path in PLACEHOLDER_PATHS:
        return []

    found: list[str] = []
    seen: set[str] = set()

    def walk(nodes: Sequence[MenuNode], chain: tuple[str, ...]) -> None:
        for node in nodes:
            if node.path == active_path:
                for code in chain:
                    if code not in seen:
                        seen.add(code)
                        found.append(code)
            if node.children:
                walk(node.children, chain + (node.code,))

    walk(tree, ())
    return found
