"""Menu node datatypes shared by filtering, expansion and rendering."""

from __future__ import annotations

from dataclasses import dataclass

# Paths that mark a node as not navigable.
PLACEHOLDER_PATHS = frozenset({"", "#"})


@dataclass(frozen=True)
class MenuNode:
    """One navigable menu entry; ``code`` is the identity key for expansion state."""

    code: str
    name: str
    path: str | None = None
    icon: str | None = None
    children: tuple[MenuNode, ...] = ()


@dataclass(frozen=True)
class FilteredMenuNode:
    """Filter-pass view over a ``MenuNode`` with derived display flags.

    ``has_children`` reflects the source node even when filtering pruned or
    replaced its children. ``should_auto_expand`` is set when at least one
    child survived filtering.
    """

    node: MenuNode
    children: tuple[FilteredMenuNode, ...] = ()
    has_children: bool = False
    should_auto_expand: bool = False

    @property
    def code(self) -> str:
        return self.node.code

    @property
    def name(self) -> str:
        return self.node.name

    @property
    def path(self) -> str | None:
        return self.node.path

    @property
    def icon(self) -> str | None:
        return self.node.icon
