"""Public package surface for sidenav.

Exports the menu engine and ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .engine import MenuActivation, MenuEngine
from .menu_model import FilteredMenuNode, MenuNode
from .source import MenuSourceState


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "FilteredMenuNode",
    "MenuActivation",
    "MenuEngine",
    "MenuNode",
    "MenuSourceState",
    "main",
]
