from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazypick.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_theme_and_rows_share_one_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("lazypick.runtime.config.CONFIG_PATH", config_path):
                config.save_theme_name("  ocean ")
                config.save_viewport_rows(12)

                saved = config.load_config()
                self.assertEqual(saved, {"theme": "ocean", "viewport_rows": 12})
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_viewport_rows(), 12)

    def test_missing_or_malformed_config_falls_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazypick.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())

                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_invalid_viewport_rows_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazypick.runtime.config.CONFIG_PATH", config_path):
                config.save_viewport_rows(0)
                config.save_viewport_rows(500)
                self.assertFalse(config_path.exists())

                config_path.write_text('{"viewport_rows": true, "theme": ""}', encoding="utf-8")
                self.assertIsNone(config.load_viewport_rows())
                self.assertIsNone(config.load_theme_name())


if __name__ == "__main__":
    unittest.main()
