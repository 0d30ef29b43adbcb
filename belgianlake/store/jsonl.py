"""JSON-lines record store.

Each line holds one ``{"print": <bool>, "file": <str>}`` object.
Saves rewrite the whole file through a temp file and ``os.replace`` so a
failed write never leaves a truncated store behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from .errors import RecordFormatError, StoreIOError
from .types import Record, Records

logger = logging.getLogger(__name__)

DEFAULT_STORE_FILENAME = "data.jsonl"


def decode_record(line: str, *, path: Path, line_number: int) -> Record:
    """Decode one store line into a ``Record``.

    Unknown keys are ignored; ``print`` must be a JSON boolean and ``file`` a
    JSON string.
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as exc:
        raise RecordFormatError(path, line_number, f"invalid JSON ({exc.msg})") from exc
    if not isinstance(data, dict):
        raise RecordFormatError(path, line_number, "expected a JSON object")
    enabled = data.get("print")
    file_path = data.get("file")
    if not isinstance(enabled, bool):
        raise RecordFormatError(path, line_number, "field 'print' must be a boolean")
    if not isinstance(file_path, str):
        raise RecordFormatError(path, line_number, "field 'file' must be a string")
    return Record(enabled=enabled, path=file_path)


def encode_record(record: Record) -> str:
    """Encode ``record`` as one compact JSON line (without newline)."""
    return json.dumps(
        {"print": record.enabled, "file": record.path},
        ensure_ascii=False,
        separators=(",", ":"),
    )


class RecordStore:
    """Load and atomically rewrite the records kept in one JSON-lines file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Records:
        """Read every record in file order.

        Raises ``StoreIOError`` when the file cannot be read and
        ``RecordFormatError`` on the first malformed line. Blank lines are
        skipped.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreIOError(self.path, str(exc)) from exc

        records: list[Record] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            records.append(decode_record(line, path=self.path, line_number=line_number))
        logger.debug("loaded %d records from %s", len(records), self.path)
        return tuple(records)

    def save(self, records: Iterable[Record]) -> None:
        """Overwrite the store with ``records``, preserving their order."""
        payload = "".join(encode_record(record) + "\n" for record in records)
        directory = self.path.parent if str(self.path.parent) else Path(".")
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=directory,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            self._copy_mode(tmp_name)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, ValueError) as exc:
            # ValueError covers paths that cannot be encoded, e.g. lone surrogates.
            raise StoreIOError(self.path, str(exc)) from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("could not remove temp file %s", tmp_name)
        logger.debug("saved %d bytes to %s", len(payload), self.path)

    def _copy_mode(self, tmp_name: str) -> None:
        """Keep the original file's permission bits on the replacement."""
        try:
            mode = self.path.stat().st_mode
        except OSError:
            return
        os.chmod(tmp_name, mode & 0o7777)
