"""Menu tree construction from decoded JSON payloads."""

from __future__ import annotations

import json
import logging
from collections import Counter
from collections.abc import Iterator, Sequence
from pathlib import Path

from .types import MenuNode

logger = logging.getLogger(__name__)

PAYLOAD_LIST_KEYS = ("menu", "data")


class MenuPayloadError(ValueError):
    """Raised when a menu payload does not describe a valid node tree."""


def _optional_str(raw: dict, key: str, where: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MenuPayloadError(f"{where}: {key!r} must be a string or null")
    return value


def _node_from_payload(raw: object, where: str) -> MenuNode:
    if not isinstance(raw, dict):
        raise MenuPayloadError(f"{where}: expected an object, got {type(raw).__name__}")

    code = raw.get("code")
    if code is None:
        raise MenuPayloadError(f"{where}: missing 'code'")
    if isinstance(code, bool) or not isinstance(code, (str, int)):
        raise MenuPayloadError(f"{where}: 'code' must be a string")

    name = raw.get("name", "")
    if not isinstance(name, str):
        raise MenuPayloadError(f"{where}: 'name' must be a string")

    raw_children = raw.get("children")
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise MenuPayloadError(f"{where}: 'children' must be a list")

    return MenuNode(
        code=str(code),
        name=name,
        path=_optional_str(raw, "path", where),
        icon=_optional_str(raw, "icon", where),
        children=tuple(
            _node_from_payload(child, f"{where}.children[{idx}]")
            for idx, child in enumerate(raw_children)
        ),
    )


def menu_nodes_from_payload(payload: object) -> tuple[MenuNode, ...]:
    """Build an immutable menu tree from decoded JSON.

    Accepts ``None`` (no menu), a list of node objects, or an object holding
    that list under ``menu`` or ``data``.
    """
    if payload is None:
        return ()
    if isinstance(payload, dict):
        for key in PAYLOAD_LIST_KEYS:
            if key in payload:
                return menu_nodes_from_payload(payload[key])
        raise MenuPayloadError(f"menu: expected a list or an object with one of {PAYLOAD_LIST_KEYS}")
    if not isinstance(payload, list):
        raise MenuPayloadError(f"menu: expected a list, got {type(payload).__name__}")
    return tuple(_node_from_payload(raw, f"menu[{idx}]") for idx, raw in enumerate(payload))


def load_menu_file(path: Path) -> tuple[MenuNode, ...]:
    """Read and decode a JSON menu file.

    ``OSError`` propagates; undecodable JSON is reported as ``MenuPayloadError``.
    """
    text = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MenuPayloadError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    tree = menu_nodes_from_payload(payload)
    logger.debug("loaded %d top-level menu nodes from %s", len(tree), path)
    return tree


def iter_menu_nodes(tree: Sequence[MenuNode], depth: int = 0) -> Iterator[tuple[MenuNode, int]]:
    """Yield ``(node, depth)`` in pre-order, keeping sibling order."""
    for node in tree:
        yield node, depth
        yield from iter_menu_nodes(node.children, depth + 1)


def duplicate_menu_codes(tree: Sequence[MenuNode]) -> list[str]:
    """Return codes that occur more than once, in first-seen order."""
    counts = Counter(node.code for node, _depth in iter_menu_nodes(tree))
    return [code for code, count in counts.items() if count > 1]
