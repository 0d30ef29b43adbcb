"""Rendering for the record table view.

Turns the display rows projected from session state into a bordered ANSI
frame with a help footer and status line. Nothing here mutates state.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from ..ansi import display_width, fit_ansi_line
from ..controller import page_rows
from ..session.rows import DisplayRow, project_rows
from ..session.state import SessionState
from ..ui_theme import UITheme
from .help import FAREWELL_TEXT, help_lines

PRINT_COLUMN_TITLE = "Print"
FILE_COLUMN_TITLE = "File"
PRINT_COLUMN_WIDTH = 5


def scroll_start(cursor: int, list_start: int, visible_rows: int, count: int) -> int:
    """Return a list offset that keeps ``cursor`` inside the visible window."""
    visible_rows = max(1, visible_rows)
    if cursor < list_start:
        list_start = cursor
    elif cursor >= list_start + visible_rows:
        list_start = cursor - visible_rows + 1
    return max(0, min(list_start, max(0, count - visible_rows)))


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _table_cells(print_cell: str, file_cell: str, file_width: int, theme: UITheme) -> str:
    bar = f"{theme.border}│{theme.reset}"
    return f"{bar}{print_cell}{bar}{fit_ansi_line(file_cell, file_width)}{theme.reset}{bar}"


def format_row(row: DisplayRow, file_width: int, theme: UITheme) -> str:
    """Format one table row, highlighting the cursor and selected rows."""
    glyph_style = theme.glyph_enabled if row.enabled else theme.glyph_disabled
    glyph = f" {row.glyph:<{PRINT_COLUMN_WIDTH - 1}} "
    path = f" {row.path}"
    if row.is_cursor or row.selected:
        style = theme.reverse if row.is_cursor else theme.row_selected
        print_cell = f"{style}{glyph}{theme.reset}"
        file_cell = f"{style}{fit_ansi_line(path, file_width)}{theme.reset}"
    else:
        print_cell = f"{glyph_style}{glyph}{theme.reset}"
        file_cell = f"{theme.path}{path}{theme.reset}"
    return _table_cells(print_cell, file_cell, file_width, theme)


def status_text(state: SessionState) -> tuple[str, str]:
    """Return left/right status segments for the bottom line."""
    enabled = sum(1 for record in state.records if record.enabled)
    left = f" {enabled}/{state.count} marked for print"
    if state.selection:
        left += f"  {len(state.selection)} selected"
    if state.range_modifier_held:
        left += "  [range]"
    right = state.status_message or f"undo: {len(state.undo)} "
    return left, right


def build_frame(state: SessionState, theme: UITheme) -> list[str]:
    """Compose every screen line for the current state, top to bottom."""
    width = max(PRINT_COLUMN_WIDTH + 4, state.width)
    file_width = max(1, width - PRINT_COLUMN_WIDTH - 4 - 1)
    rows_visible = page_rows(state)
    rows = project_rows(state.records, state.selection, state.cursor)
    window = rows[state.list_start : state.list_start + rows_visible]

    border = theme.border
    reset = theme.reset
    print_rule = "─" * (PRINT_COLUMN_WIDTH + 1)
    file_rule = "─" * file_width
    out: list[str] = [f"{border}┌{print_rule}┬{file_rule}┐{reset}"]
    header_print = f"{theme.header} {PRINT_COLUMN_TITLE:<{PRINT_COLUMN_WIDTH}}{reset}"
    header_file = f"{theme.header} {FILE_COLUMN_TITLE}{reset}"
    out.append(_table_cells(header_print, header_file, file_width, theme))
    out.append(f"{border}├{print_rule}┼{file_rule}┤{reset}")
    for row in window:
        out.append(format_row(row, file_width, theme))
    blank = _table_cells(" " * (PRINT_COLUMN_WIDTH + 1), "", file_width, theme)
    out.extend(blank for _ in range(rows_visible - len(window)))
    out.append(f"{border}└{print_rule}┴{file_rule}┘{reset}")
    out.extend(fit_ansi_line(line, width - 1) for line in help_lines(theme))

    left, right = status_text(state)
    status = build_status_line(left, width, right)
    style = theme.status_error if state.status_message.startswith("Save failed") else theme.reverse
    out.append(f"{style}{status}{reset}")
    return out


def render_frame(state: SessionState, theme: UITheme, fd: int | None = None) -> None:
    """Write a full frame to the terminal, replacing the previous one."""
    lines = build_frame(state, theme)
    payload = "\033[H" + "\033[K\r\n".join(lines) + "\033[K\033[J"
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, payload.encode("utf-8", errors="replace"))


def render_plain_rows(rows: Sequence[DisplayRow]) -> str:
    """Return tab-separated ``glyph<TAB>path`` lines for non-interactive output."""
    if not rows:
        return ""
    glyph_width = max(display_width(row.glyph) for row in rows)
    return "".join(f"{row.glyph:<{glyph_width}}\t{row.path}\n" for row in rows)


__all__ = [
    "FAREWELL_TEXT",
    "build_frame",
    "build_status_line",
    "format_row",
    "render_frame",
    "render_plain_rows",
    "scroll_start",
    "status_text",
]
