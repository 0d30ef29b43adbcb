"""Named actions that change record flags or the selection.

Mutating actions snapshot the records into the undo stack first, rebuild the
record tuple, and return the records that must be saved. Selection-only
actions return no save request.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..store.types import Records
from .selection import clear_selection as _cleared
from .selection import select_all as _all_indices
from .state import SessionState


@dataclass(frozen=True)
class OperationResult:
    """What an action did: whether state changed and what to persist."""

    changed: bool = False
    save: Records | None = None
    message: str = ""


NOOP = OperationResult()


def _advance_cursor(state: SessionState) -> None:
    if state.count:
        state.cursor = (state.cursor + 1) % state.count


def _commit(state: SessionState, records: Records) -> OperationResult:
    state.records = records
    state.dirty = True
    return OperationResult(changed=True, save=records)


def toggle_current(state: SessionState) -> OperationResult:
    """Flip the cursor row and move the cursor to the next row."""
    if not state.count:
        return NOOP
    cursor = state.cursor
    state.undo.snapshot(state.records)
    records = list(state.records)
    records[cursor] = records[cursor].toggled()
    state.anchor = cursor
    result = _commit(state, tuple(records))
    _advance_cursor(state)
    return result


def toggle_selected(state: SessionState) -> OperationResult:
    """Flip every selected row, then clear the selection."""
    targets = {index for index in state.selection if 0 <= index < state.count}
    if not targets:
        return NOOP
    state.undo.snapshot(state.records)
    records = tuple(
        record.toggled() if index in targets else record for index, record in enumerate(state.records)
    )
    state.selection = _cleared()
    return _commit(state, records)


def toggle_all(state: SessionState) -> OperationResult:
    """Flip every row independently."""
    if not state.count:
        return NOOP
    state.undo.snapshot(state.records)
    return _commit(state, tuple(record.toggled() for record in state.records))


def enable_or_disable_all(state: SessionState) -> OperationResult:
    """Disable everything when all rows are enabled, otherwise enable everything."""
    if not state.count:
        return NOOP
    all_enabled = all(record.enabled for record in state.records)
    state.undo.snapshot(state.records)
    return _commit(state, tuple(record.with_enabled(not all_enabled) for record in state.records))


def select_all(state: SessionState) -> OperationResult:
    if not state.count:
        return NOOP
    state.selection = _all_indices(state.count)
    state.dirty = True
    return OperationResult(changed=True)


def clear_selection(state: SessionState) -> OperationResult:
    if not state.selection:
        return NOOP
    state.selection = _cleared()
    state.dirty = True
    return OperationResult(changed=True)


def undo(state: SessionState) -> OperationResult:
    """Restore the newest snapshot and drop the selection."""
    snapshot = state.undo.pop()
    if snapshot is None:
        return OperationResult(message="Nothing to undo")
    state.records = snapshot
    state.selection = _cleared()
    state.clamp()
    state.dirty = True
    remaining = len(state.undo)
    message = f"Undone ({remaining} more)" if remaining else "Undone"
    return OperationResult(changed=True, save=snapshot, message=message)
