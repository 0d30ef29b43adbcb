"""Projection of session state into display-agnostic rows."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from ..store.types import Record

ENABLED_GLYPH = "[x]"
DISABLED_GLYPH = "[ ]"
SELECTED_MARKER = ">"


@dataclass(frozen=True)
class DisplayRow:
    index: int
    glyph: str
    path: str
    enabled: bool
    selected: bool
    is_cursor: bool


def status_glyph(enabled: bool, selected: bool) -> str:
    glyph = ENABLED_GLYPH if enabled else DISABLED_GLYPH
    return SELECTED_MARKER + glyph if selected else glyph


def project_rows(
    records: Sequence[Record],
    selection: Collection[int],
    cursor: int,
) -> list[DisplayRow]:
    """Build one ``DisplayRow`` per record, in record order."""
    return [
        DisplayRow(
            index=index,
            glyph=status_glyph(record.enabled, index in selection),
            path=record.path,
            enabled=record.enabled,
            selected=index in selection,
            is_cursor=index == cursor,
        )
        for index, record in enumerate(records)
    ]
