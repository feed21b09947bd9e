"""Command-line front door for sidenav.

Loads a JSON menu, replays route/query/toggle events through the engine and
prints the resulting sidebar rows (or a JSON snapshot).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import load_theme_name
from .engine import STATUS_READY, MenuEngine
from .menu_model import (
    FilteredMenuNode,
    MenuPayloadError,
    flatten_visible_rows,
    format_menu_row,
    format_search_prompt,
    format_status_lines,
    load_menu_file,
)
from .ui_theme import UITheme, available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def visible_tree_payload(items: Sequence[FilteredMenuNode]) -> list[dict[str, object]]:
    """Serialize filtered nodes with their derived flags."""
    return [
        {
            "code": item.code,
            "name": item.name,
            "path": item.path,
            "icon": item.icon,
            "has_children": item.has_children,
            "should_auto_expand": item.should_auto_expand,
            "children": visible_tree_payload(item.children),
        }
        for item in items
    ]


def render_sidebar(engine: MenuEngine, theme: UITheme, sidebar_open: bool = True) -> str:
    """Render the search prompt, menu rows or status lines as text."""
    out: list[str] = []
    if sidebar_open:
        out.append(format_search_prompt(engine.raw_query, theme))
    if engine.status != STATUS_READY:
        if sidebar_open or engine.status == "loading":
            out.extend(format_status_lines(engine.status, theme))
    else:
        rows = flatten_visible_rows(
            engine.visible_tree,
            engine.expanded,
            active_path=engine.active_path,
            sidebar_open=sidebar_open,
        )
        out.extend(
            format_menu_row(row, engine.committed_query, theme, sidebar_open=sidebar_open)
            for row in rows
        )
    return "".join(line + "\n" for line in out)


def snapshot_json(engine: MenuEngine) -> str:
    return json.dumps(
        {
            "status": engine.status,
            "query": engine.committed_query,
            "expanded": sorted(engine.expanded),
            "visible": visible_tree_payload(engine.visible_tree),
        },
        indent=2,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments, replay events and print the sidebar."""
    parser = argparse.ArgumentParser(description="Render a searchable sidebar menu from a JSON tree.")
    parser.add_argument("menu", help="Path to a JSON menu file.")
    parser.add_argument("--query", default="", help="Search text to commit.")
    parser.add_argument("--active", default=None, metavar="PATH", help="Active route path to reveal.")
    parser.add_argument(
        "--toggle",
        action="append",
        default=[],
        metavar="CODE",
        help="Toggle a node after the query is applied (repeatable).",
    )
    parser.add_argument("--collapsed", action="store_true", help="Render the collapsed sidebar.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--json", action="store_true", help="Print a JSON snapshot instead of rows.")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, help="Logging level for stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)

    menu_path = Path(args.menu)
    if not menu_path.is_file():
        raise SystemExit(f"Menu file not found: {menu_path}")
    try:
        tree = load_menu_file(menu_path)
    except MenuPayloadError as exc:
        raise SystemExit(f"Invalid menu: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Cannot read menu: {exc}") from exc

    engine = MenuEngine.from_config()
    engine.load(tree)
    engine.set_active_path(args.active)
    engine.commit_query(args.query)
    for code in args.toggle:
        if not engine.toggle(code):
            logger.warning("unknown menu code: %s", code)

    if args.json:
        sys.stdout.write(snapshot_json(engine) + "\n")
        return

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    sys.stdout.write(render_sidebar(engine, theme, sidebar_open=not args.collapsed))


if __name__ == "__main__":
    main()
