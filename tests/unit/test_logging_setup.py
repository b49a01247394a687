from __future__ import annotations

import logging
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from lazypick import logging_setup


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        logging_setup.reset()
        self.addCleanup(logging_setup.reset)

    def test_defaults_to_warning_on_stderr(self) -> None:
        runtime = logging_setup.configure({})

        logger = logging.getLogger("lazypick")
        self.assertEqual(runtime.level, logging.WARNING)
        self.assertIsNone(runtime.file_path)
        self.assertFalse(logger.propagate)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.StreamHandler)

    def test_file_handler_and_level_from_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "lazypick.log"
            runtime = logging_setup.configure(
                {"LAZYPICK_LOG_LEVEL": "debug", "LAZYPICK_LOG_FILE": str(log_path)}
            )

            self.assertEqual(runtime.level_name, "DEBUG")
            handler = logging.getLogger("lazypick").handlers[0]
            self.assertIsInstance(handler, RotatingFileHandler)

            logging.getLogger("lazypick.runtime.session").debug("hello %s", "file")
            handler.flush()
            self.assertIn("hello file", log_path.read_text(encoding="utf-8"))
            logging_setup.reset()

    def test_unknown_level_falls_back_to_warning(self) -> None:
        runtime = logging_setup.configure({"LAZYPICK_LOG_LEVEL": "chatty"})
        self.assertEqual(runtime.level, logging.WARNING)

    def test_configure_is_idempotent(self) -> None:
        first = logging_setup.configure({"LAZYPICK_LOG_LEVEL": "INFO"})
        second = logging_setup.configure({"LAZYPICK_LOG_LEVEL": "DEBUG"})

        self.assertIs(first, second)
        self.assertIs(logging_setup.get_runtime(), first)
        self.assertEqual(len(logging.getLogger("lazypick").handlers), 1)


if __name__ == "__main__":
    unittest.main()
