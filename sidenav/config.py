"""Persistent JSON config helpers.

Stores the search debounce window and the UI theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .debounce import DEFAULT_DEBOUNCE_SECONDS

APP_NAME = "sidenav"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
MAX_DEBOUNCE_MS = 5_000


def load_config() -> dict[str, object]:
    """Read the sidenav settings object (``search_debounce_ms``, ``theme``).

    An absent, unreadable or non-object file reads as ``{}`` so every key
    falls back to its default.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write the settings object back to ``CONFIG_PATH``.

    Write and encoding errors are ignored; the stored file is left as it was.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        pass


def load_search_debounce_seconds() -> float:
    """Return the query quiet window in seconds.

    Booleans, non-numbers and values outside ``(0, MAX_DEBOUNCE_MS]`` fall
    back to the default.
    """
    value = load_config().get("search_debounce_ms")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_DEBOUNCE_SECONDS
    if value <= 0 or value > MAX_DEBOUNCE_MS:
        return DEFAULT_DEBOUNCE_SECONDS
    return float(value) / 1000.0


def save_search_debounce_ms(milliseconds: int) -> None:
    """Persist the query quiet window, clamped to ``[1, MAX_DEBOUNCE_MS]``."""
    config = load_config()
    config["search_debounce_ms"] = max(1, min(MAX_DEBOUNCE_MS, int(milliseconds)))
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)
