"""Menu theme definitions and selection helpers.

Themes are ANSI palettes for sidebar rows and status lines.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by menu renderers."""

    name: str
    reset: str
    reverse: str
    menu_marker: str
    menu_group: str
    menu_leaf: str
    menu_inert: str
    menu_match: str
    menu_match_end: str
    search_prompt: str
    search_hint: str
    status_text: str
    placeholder: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    menu_marker="\033[38;5;44m",
    menu_group="\033[1;34m",
    menu_leaf="\033[38;5;252m",
    menu_inert="\033[2;38;5;250m",
    menu_match="\033[7;1m",
    menu_match_end="\033[27;22m",
    search_prompt="\033[1;38;5;81m",
    search_hint="\033[2;38;5;250m",
    status_text="\033[2;38;5;250m",
    placeholder="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    menu_marker="\033[38;5;39m",
    menu_group="\033[1;38;5;45m",
    menu_leaf="\033[38;5;153m",
    menu_inert="\033[2;38;5;110m",
    menu_match="\033[7;1m",
    menu_match_end="\033[27;22m",
    search_prompt="\033[1;38;5;45m",
    search_hint="\033[2;38;5;110m",
    status_text="\033[2;38;5;110m",
    placeholder="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    menu_marker="",
    menu_group="",
    menu_leaf="",
    menu_inert="",
    menu_match="",
    menu_match_end="",
    search_prompt="",
    search_hint="",
    status_text="",
    placeholder="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
