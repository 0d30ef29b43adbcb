"""Session-scoped undo history of full record snapshots."""

from __future__ import annotations

import logging

from ..store.types import Record, Records

logger = logging.getLogger(__name__)


class UndoStack:
    """LIFO stack of record snapshots.

    Unbounded unless ``max_depth`` is given, in which case the oldest
    snapshot is dropped once the depth is exceeded.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        if max_depth is not None and max_depth <= 0:
            raise ValueError("max_depth must be positive")
        self.max_depth = max_depth
        self._snapshots: list[Records] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)

    def snapshot(self, records: tuple[Record, ...] | list[Record]) -> None:
        """Push a copy of ``records``; call before the mutation it guards."""
        self._snapshots.append(tuple(records))
        if self.max_depth is not None and len(self._snapshots) > self.max_depth:
            self._snapshots.pop(0)
            logger.debug("undo history full, dropped oldest snapshot")

    def pop(self) -> Records | None:
        """Remove and return the newest snapshot, or ``None`` when empty."""
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def clear(self) -> None:
        self._snapshots.clear()
