"""Filtered menu projections for search mode."""

from __future__ import annotations

from collections.abc import Sequence

from .types import FilteredMenuNode, MenuNode


def normalize_query(text: str | None) -> str:
    """Return the trimmed, case-folded form used for matching."""
    return (text or "").strip().casefold()


def matches(label: str, query: str) -> bool:
    """Case-insensitive substring containment; an empty query matches anything."""
    return normalize_query(query) in label.casefold()


def annotate_menu_tree(tree: Sequence[MenuNode]) -> tuple[FilteredMenuNode, ...]:
    """Wrap every node with ``has_children`` and no forced expansion."""
    return tuple(
        FilteredMenuNode(
            node=node,
            children=annotate_menu_tree(node.children),
            has_children=bool(node.children),
            should_auto_expand=False,
        )
        for node in tree
    )


def filter_menu_tree(tree: Sequence[MenuNode] | None, query: str | None) -> tuple[FilteredMenuNode, ...]:
    """Keep matching nodes and their ancestors.

    Children are filtered before their parent. A node kept only as an ancestor
    shows its kept children; a node that matches keeps its full original
    subtree, with kept children in their filtered form so deeper matches stay
    auto-expanded.
    """
    if not tree:
        return ()
    folded = normalize_query(query)
    if not folded:
        return annotate_menu_tree(tree)

    def walk(nodes: Sequence[MenuNode]) -> tuple[FilteredMenuNode, ...]:
        kept: list[FilteredMenuNode] = []
        for node in nodes:
            children = walk(node.children)
            is_match = folded in node.name.casefold()
            if not is_match and not children:
                continue
            shown = children
            if is_match:
                kept_by_node = {id(item.node): item for item in children}
                shown = tuple(
                    kept_by_node.get(id(child)) or annotate_menu_tree((child,))[0]
                    for child in node.children
                )
            kept.append(
                FilteredMenuNode(
                    node=node,
                    children=shown,
                    has_children=bool(node.children),
                    should_auto_expand=bool(children),
                )
            )
        return tuple(kept)

    return walk(tree)


def collect_search_expanded_codes(filtered: Sequence[FilteredMenuNode]) -> frozenset[str]:
    """Collect auto-expanded codes along every root-to-match chain."""
    codes: set[str] = set()

    def walk(nodes: Sequence[FilteredMenuNode]) -> None:
        for item in nodes:
            if item.children and item.should_auto_expand:
                codes.add(item.code)
                walk(item.children)

    walk(filtered)
    return frozenset(codes)
