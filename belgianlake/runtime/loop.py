"""Main interactive event loop for the terminal UI.

Each iteration expires stale status messages, reports finished saves, syncs
the viewport size, renders when dirty, and dispatches one key. Session logic
lives in ``belgianlake.controller``; I/O is injected through callbacks.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..controller import ResizeEvent, handle_event, page_rows
from ..input.keys import key_event_for_token
from ..render import scroll_start
from ..session.state import SessionState
from ..store.types import Records
from ..store.writer import SaveResult
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    input_poll_ms: int = 200
    status_message_seconds: float = 3.0


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    read_key: Callable[[int], str]
    terminal_size: Callable[[], os.terminal_size]
    render: Callable[[SessionState], None]
    schedule_save: Callable[[Records], int]
    drain_save_results: Callable[[], list[SaveResult]]


def set_status_message(state: SessionState, message: str, seconds: float) -> None:
    """Set transient status message visible for ``seconds``."""
    state.status_message = message
    state.status_message_until = time.monotonic() + seconds
    state.dirty = True


def _report_save_results(state: SessionState, results: list[SaveResult], seconds: float) -> None:
    failures = [result for result in results if not result.ok]
    if failures:
        set_status_message(state, f"Save failed: {failures[-1].error}", seconds)


def run_main_loop(
    state: SessionState,
    terminal: TerminalController,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> SessionState:
    """Run the interactive loop until a quit event and return the final state."""
    ops = callbacks
    with terminal.raw_mode():
        while True:
            now = time.monotonic()
            if state.status_message and now >= state.status_message_until:
                state.status_message = ""
                state.status_message_until = 0.0
                state.dirty = True
            _report_save_results(state, ops.drain_save_results(), timing.status_message_seconds)

            term = ops.terminal_size()
            state = handle_event(state, ResizeEvent(term.columns, term.lines)).state
            list_start = scroll_start(state.cursor, state.list_start, page_rows(state), state.count)
            if list_start != state.list_start:
                state.list_start = list_start
                state.dirty = True

            if state.dirty:
                ops.render(state)
                state.dirty = False

            event = key_event_for_token(ops.read_key(timing.input_poll_ms))
            if event is None:
                continue

            transition = handle_event(state, event)
            state = transition.state
            if transition.message:
                set_status_message(state, transition.message, timing.status_message_seconds)
            if transition.save is not None:
                request_id = ops.schedule_save(transition.save)
                logger.debug("scheduled save #%d after %r", request_id, event.name)
            if transition.quit:
                return state
