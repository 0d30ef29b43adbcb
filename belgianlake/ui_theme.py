"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the record table, help footer, and status line.
``--no-color`` always resolves to the plain palette.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    border: str
    reverse: str
    reset: str
    header: str
    glyph_enabled: str
    glyph_disabled: str
    row_selected: str
    path: str
    help_key: str
    help_dim: str
    status_error: str


DEFAULT_THEME = UITheme(
    name="default",
    border="\033[38;5;240m",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[1;38;5;252m",
    glyph_enabled="\033[38;5;42m",
    glyph_disabled="\033[38;5;246m",
    row_selected="\033[38;5;229;48;5;57m",
    path="\033[38;5;252m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
    status_error="\033[1;38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    border="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    glyph_enabled="\033[38;5;84m",
    glyph_disabled="\033[38;5;110m",
    row_selected="\033[38;5;231;48;5;24m",
    path="\033[38;5;153m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
    status_error="\033[1;38;5;209m",
)

PLAIN_THEME = UITheme(
    name="plain",
    border="",
    reverse="",
    reset="",
    header="",
    glyph_enabled="",
    glyph_disabled="",
    row_selected="",
    path="",
    help_key="",
    help_dim="",
    status_error="",
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
