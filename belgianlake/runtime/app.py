"""Session bootstrap: load records, wire subsystems, and run the event loop."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from functools import partial
from pathlib import Path

from ..config import load_theme_name, load_undo_max_depth
from ..input import read_key
from ..render import FAREWELL_TEXT, render_frame, render_plain_rows
from ..session.rows import project_rows
from ..session.state import SessionState
from ..session.undo import UndoStack
from ..store import RecordStore, SaveScheduler
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

SAVE_FLUSH_TIMEOUT_SECONDS = 5.0


def run_session(
    store_path: Path,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    list_only: bool = False,
) -> int:
    """Load ``store_path`` and edit it interactively; return an exit status.

    Store load errors propagate to the caller before the terminal is touched.
    Without a TTY on stdin (or with ``list_only``) the rows are printed and
    the function returns immediately.
    """
    store = RecordStore(store_path)
    records = store.load()
    logger.info("loaded %d records from %s", len(records), store_path)

    if list_only or not os.isatty(sys.stdin.fileno()):
        sys.stdout.write(render_plain_rows(project_rows(records, set(), -1)))
        return 0

    theme = resolve_theme(theme_name or load_theme_name(), no_color=no_color)
    state = SessionState(records=records, undo=UndoStack(max_depth=load_undo_max_depth()))
    scheduler = SaveScheduler(store.save)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    callbacks = RuntimeLoopCallbacks(
        read_key=partial(read_key, stdin_fd),
        terminal_size=partial(shutil.get_terminal_size, (80, 24)),
        render=partial(render_frame, theme=theme, fd=stdout_fd),
        schedule_save=scheduler.schedule,
        drain_save_results=scheduler.drain_results,
    )
    try:
        state = run_main_loop(state, terminal, RuntimeLoopTiming(), callbacks)
    finally:
        if not scheduler.wait_idle(SAVE_FLUSH_TIMEOUT_SECONDS):
            logger.warning("pending save did not finish within %.1fs", SAVE_FLUSH_TIMEOUT_SECONDS)

    failures = scheduler.failures()
    for result in failures:
        print(f"Save failed: {result.error}", file=sys.stderr)
    status = 1 if failures else 0
    sys.stdout.write(FAREWELL_TEXT + "\n")
    logger.info("session ended with %d records", state.count)
    return status
