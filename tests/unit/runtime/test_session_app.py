"""Session bootstrap tests that stay outside the interactive terminal."""

from __future__ import annotations

import io
import tempfile
import time
import types
import unittest
from pathlib import Path
from unittest import mock

from belgianlake.runtime.app import run_session
from belgianlake.store import RecordFormatError, RecordStore, StoreIOError


class RunSessionTests(unittest.TestCase):
    def test_list_mode_prints_rows_without_touching_terminal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.jsonl"
            path.write_text('{"print":true,"file":"a.pdf"}\n{"print":false,"file":"b.pdf"}\n', encoding="utf-8")

            with mock.patch("belgianlake.runtime.app.sys.stdout", new_callable=io.StringIO) as stdout, mock.patch(
                "belgianlake.runtime.app.TerminalController"
            ) as terminal_cls:
                status = run_session(path, list_only=True)

        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue(), "[x]\ta.pdf\n[ ]\tb.pdf\n")
        terminal_cls.assert_not_called()

    def test_load_errors_propagate_before_terminal_setup(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.jsonl"
            broken = Path(tmp) / "broken.jsonl"
            broken.write_text('{"print":"yes","file":"a"}\n', encoding="utf-8")

            with mock.patch("belgianlake.runtime.app.TerminalController") as terminal_cls:
                with self.assertRaises(StoreIOError):
                    run_session(missing)
                with self.assertRaises(RecordFormatError):
                    run_session(broken)

        terminal_cls.assert_not_called()

    def test_save_failure_during_session_sets_exit_status(self) -> None:
        def fake_loop(state, terminal, timing, callbacks):
            # Mirror the loop: schedule one save, then drain its result before quitting.
            callbacks.schedule_save(state.records)
            deadline = time.monotonic() + 1.0
            drained = []
            while not drained and time.monotonic() < deadline:
                drained = callbacks.drain_save_results()
                time.sleep(0.01)
            self.assertEqual([result.ok for result in drained], [False])
            state.quitting = True
            return state

        fake_sys = types.SimpleNamespace(
            stdin=mock.Mock(fileno=mock.Mock(return_value=0)),
            stdout=mock.Mock(fileno=mock.Mock(return_value=1)),
            stderr=io.StringIO(),
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.jsonl"
            path.write_text('{"print":false,"file":"a.pdf"}\n', encoding="utf-8")

            with mock.patch("belgianlake.runtime.app.sys", fake_sys), mock.patch(
                "belgianlake.runtime.app.os.isatty", return_value=True
            ), mock.patch("belgianlake.runtime.app.TerminalController"), mock.patch(
                "belgianlake.runtime.app.load_theme_name", return_value=None
            ), mock.patch("belgianlake.runtime.app.load_undo_max_depth", return_value=None), mock.patch(
                "belgianlake.runtime.app.run_main_loop", side_effect=fake_loop
            ), mock.patch.object(
                RecordStore, "save", side_effect=StoreIOError(path, "read-only file system")
            ):
                status = run_session(path)

        self.assertEqual(status, 1)
        self.assertIn("Save failed:", fake_sys.stderr.getvalue())
        self.assertIn("read-only file system", fake_sys.stderr.getvalue())
        fake_sys.stdout.write.assert_called_with("Bye!\n")


if __name__ == "__main__":
    unittest.main()
