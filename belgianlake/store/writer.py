"""Background writer that persists record snapshots off the input loop."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from queue import Empty, Queue

from .errors import RecordStoreError
from .types import Record, Records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveRequest:
    """One save job: the full record sequence to write."""

    request_id: int
    records: Records


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save job that actually reached the store."""

    request: SaveRequest
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SaveScheduler:
    """Single-threaded, issue-ordered, latest-request-wins save scheduler.

    Requests reach ``save`` in the order they were scheduled. A request that is
    still pending when a newer one arrives is superseded, since every save
    overwrites the whole store.
    """

    def __init__(self, save: Callable[[Sequence[Record]], None]) -> None:
        self._save = save
        self._lock = threading.Lock()
        self._pending: SaveRequest | None = None
        self._running = False
        self._idle = threading.Event()
        self._idle.set()
        self._next_request_id = 1
        self._results: Queue[SaveResult] = Queue()
        self._failures: list[SaveResult] = []

    def _worker(self) -> None:
        finished = False
        try:
            while True:
                with self._lock:
                    request = self._pending
                    self._pending = None
                    if request is None:
                        self._running = False
                        self._idle.set()
                        finished = True
                        return
                self._run_request(request)
        finally:
            if not finished:
                with self._lock:
                    self._running = False
                    self._idle.set()

    def _run_request(self, request: SaveRequest) -> None:
        try:
            self._save(request.records)
        except RecordStoreError as exc:
            logger.warning("save #%d failed: %s", request.request_id, exc)
            self._record_failure(SaveResult(request=request, error=str(exc)))
        except Exception as exc:
            logger.exception("save #%d raised unexpectedly", request.request_id)
            self._record_failure(SaveResult(request=request, error=f"{type(exc).__name__}: {exc}"))
        else:
            logger.debug("save #%d wrote %d records", request.request_id, len(request.records))
            self._results.put(SaveResult(request=request))

    def _record_failure(self, result: SaveResult) -> None:
        with self._lock:
            self._failures.append(result)
        self._results.put(result)

    def schedule(self, records: Sequence[Record]) -> int:
        """Queue ``records`` for writing and return the request id."""
        with self._lock:
            request_id = self._next_request_id
            self._next_request_id += 1
            if self._pending is not None:
                logger.debug("save #%d superseded by #%d", self._pending.request_id, request_id)
            self._pending = SaveRequest(request_id=request_id, records=tuple(records))
            if self._running:
                return request_id
            self._running = True
            self._idle.clear()

        worker = threading.Thread(
            target=self._worker,
            name="belgianlake-save",
            daemon=True,
        )
        worker.start()
        return request_id

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no save is pending or running; ``False`` on timeout."""
        return self._idle.wait(timeout)

    def drain_results(self) -> list[SaveResult]:
        """Drain all completed save results."""
        out: list[SaveResult] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out

    def failures(self) -> list[SaveResult]:
        """Return every failed save so far, including ones already drained."""
        with self._lock:
            return list(self._failures)


__all__ = [
    "SaveRequest",
    "SaveResult",
    "SaveScheduler",
]
