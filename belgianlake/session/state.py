from __future__ import annotations

from dataclasses import dataclass, field

from ..store.types import Records
from .selection import NO_ANCHOR, prune_selection
from .undo import UndoStack


@dataclass
class SessionState:
    records: Records
    cursor: int = 0
    selection: set[int] = field(default_factory=set)
    anchor: int = NO_ANCHOR
    undo: UndoStack = field(default_factory=UndoStack)
    range_modifier_held: bool = False
    quitting: bool = False
    width: int = 80
    height: int = 24
    list_start: int = 0
    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True

    @property
    def count(self) -> int:
        return len(self.records)

    def clamp(self) -> None:
        """Restore cursor, anchor, and selection invariants for the current records."""
        count = self.count
        if count == 0:
            self.cursor = 0
        else:
            self.cursor = max(0, min(self.cursor, count - 1))
        if self.anchor >= count:
            self.anchor = NO_ANCHOR
        if any(not 0 <= index < count for index in self.selection):
            self.selection = prune_selection(self.selection, count)
