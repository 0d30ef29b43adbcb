"""In-memory editing session: state, selection, undo, actions, and rows."""

from .operations import OperationResult
from .rows import DisplayRow, project_rows, status_glyph
from .selection import NO_ANCHOR
from .state import SessionState
from .undo import UndoStack

__all__ = [
    "DisplayRow",
    "NO_ANCHOR",
    "OperationResult",
    "SessionState",
    "UndoStack",
    "project_rows",
    "status_glyph",
]
