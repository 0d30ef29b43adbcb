"""Key-binding footer shown under the record table."""

from __future__ import annotations

from ..ui_theme import UITheme

HELP_BINDINGS: tuple[tuple[tuple[str, str], ...], ...] = (
    (
        ("Space", "select/deselect row"),
        ("Shift+Space / v Space", "select range"),
        ("Enter", "toggle selected rows"),
    ),
    (
        ("t", "toggle all"),
        ("a", "select all"),
        ("d", "deselect all"),
        ("e", "enable/disable all"),
        ("x", "toggle current row"),
        ("u", "undo"),
        ("q", "quit"),
    ),
)

FAREWELL_TEXT = "Bye!"


def help_lines(theme: UITheme) -> list[str]:
    """Return styled help footer lines, one per binding group."""
    lines: list[str] = []
    separator = f"{theme.help_dim} | {theme.reset}"
    for group in HELP_BINDINGS:
        parts = [f"{theme.help_key}{key}{theme.reset}: {label}" for key, label in group]
        lines.append(separator.join(parts))
    return lines
