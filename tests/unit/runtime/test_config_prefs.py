from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from belgianlake import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("belgianlake.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def _write(self, payload: object) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(json.dumps(payload), encoding="utf-8")

    def test_missing_or_malformed_config_loads_as_empty(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        with self.assertLogs("belgianlake.config", level="WARNING"):
            self.assertEqual(config.load_config(), {})
        self._write(["not", "an", "object"])
        self.assertEqual(config.load_config(), {})

    def test_theme_name_round_trips_and_preserves_other_keys(self) -> None:
        self._write({"undo_max_depth": 3})
        config.save_theme_name(" ocean ")

        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_undo_max_depth(), 3)
        config.save_theme_name("   ")
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_undo_depth_ignores_invalid_values(self) -> None:
        for value in (0, -4, True, "5", 2.5, None):
            with self.subTest(value=value):
                self._write({"undo_max_depth": value})
                self.assertIsNone(config.load_undo_max_depth())

    def test_store_path_expands_user_home(self) -> None:
        self._write({"store_path": "~/prints.jsonl"})
        self.assertEqual(config.load_store_path(), Path("~/prints.jsonl").expanduser())
        self._write({"store_path": "  "})
        self.assertIsNone(config.load_store_path())


if __name__ == "__main__":
    unittest.main()
