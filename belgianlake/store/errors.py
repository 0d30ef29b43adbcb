"""Exception types raised by the record store."""

from __future__ import annotations

from pathlib import Path


class RecordStoreError(Exception):
    """Base class for record store failures."""


class StoreIOError(RecordStoreError):
    """The store file could not be opened, read, or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class RecordFormatError(RecordStoreError):
    """A store line is not a well-formed ``{"print": bool, "file": str}`` record."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        self.path = path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{path}:{line_number}: {reason}")
