"""Record value type shared by the store and the session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """One persisted row: a print flag and the file path it applies to."""

    enabled: bool
    path: str

    def toggled(self) -> Record:
        return Record(enabled=not self.enabled, path=self.path)

    def with_enabled(self, enabled: bool) -> Record:
        if enabled == self.enabled:
            return self
        return Record(enabled=enabled, path=self.path)


Records = tuple[Record, ...]
