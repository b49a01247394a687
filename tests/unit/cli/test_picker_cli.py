"""CLI input, output and exit-code behavior tests.

Verifies how ``lazypick.cli.run`` reads candidates, wires the picker to the
controlling terminal, and maps results and errors onto exit codes.
"""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazypick import cli, logging_setup
from lazypick.errors import ExitCode, SelectionCancelled
from lazypick.runtime.state import SelectionResult


class CliRunTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        self.config_path = self.root / "config.json"
        self.input_path = self.root / "branches.txt"
        self.input_path.write_text("main\n\ndevelop\nfeature-api\n", encoding="utf-8")

        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        patchers = [
            mock.patch("lazypick.runtime.config.CONFIG_PATH", self.config_path),
            mock.patch("lazypick.cli._open_tty", return_value=42),
            mock.patch("lazypick.cli.os.close"),
            mock.patch("lazypick.cli.sys.stdout", self.stdout),
            mock.patch("lazypick.cli.sys.stderr", self.stderr),
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)
        self.addCleanup(logging_setup.reset)

    def _run(self, argv, result=None, side_effect=None):
        with mock.patch("lazypick.cli.pick", return_value=result, side_effect=side_effect) as pick_mock:
            code = cli.run(argv)
        return code, pick_mock

    def test_prints_chosen_line_and_succeeds(self) -> None:
        result = SelectionResult(item=1, action=None, success=True)

        code, pick_mock = self._run([str(self.input_path), "--header", "Branches"], result)

        self.assertEqual(code, ExitCode.SUCCESS)
        self.assertEqual(self.stdout.getvalue(), "develop\n")
        config, session_io = pick_mock.call_args.args
        self.assertEqual(list(config.items), [0, 1, 2])
        self.assertEqual(config.display_text(2), "feature-api")
        self.assertEqual(config.header, "Branches")
        self.assertEqual((session_io.stdin_fd, session_io.stdout_fd), (42, 42))

    def test_print_index_prints_input_position(self) -> None:
        result = SelectionResult(item=2, action=None, success=True)

        code, _pick_mock = self._run([str(self.input_path), "--print-index"], result)

        self.assertEqual(code, ExitCode.SUCCESS)
        self.assertEqual(self.stdout.getvalue(), "2\n")

    def test_cancel_exits_with_cancel_code(self) -> None:
        code, _pick_mock = self._run([str(self.input_path)], side_effect=SelectionCancelled())

        self.assertEqual(code, ExitCode.CANCELLED)
        self.assertEqual(self.stdout.getvalue(), "")
        self.assertEqual(self.stderr.getvalue(), "Selection cancelled.\n")

    def test_unsuccessful_result_exits_with_error(self) -> None:
        result = SelectionResult(item=None, action=None, success=False)

        code, _pick_mock = self._run([str(self.input_path)], result)

        self.assertEqual(code, ExitCode.ERROR)
        self.assertEqual(self.stdout.getvalue(), "")

    def test_missing_path_reports_error(self) -> None:
        code, pick_mock = self._run([str(self.root / "missing.txt")])

        self.assertEqual(code, ExitCode.ERROR)
        pick_mock.assert_not_called()
        self.assertIn("Path not found", self.stderr.getvalue())

    def test_piped_stdin_is_read_when_no_path(self) -> None:
        result = SelectionResult(item=0, action=None, success=True)

        with mock.patch("lazypick.cli.sys.stdin", io.StringIO("one\ntwo\n")):
            code, pick_mock = self._run([], result)

        self.assertEqual(code, ExitCode.SUCCESS)
        self.assertEqual(self.stdout.getvalue(), "one\n")
        self.assertEqual(len(pick_mock.call_args.args[0].items), 2)

    def test_rows_and_theme_fall_back_to_saved_defaults(self) -> None:
        self.config_path.write_text(json.dumps({"theme": "ocean", "viewport_rows": 3}), encoding="utf-8")
        result = SelectionResult(item=0, action=None, success=True)

        _code, pick_mock = self._run([str(self.input_path)], result)

        config = pick_mock.call_args.args[0]
        self.assertEqual(config.viewport_rows, 3)
        self.assertEqual(config.theme.name, "ocean")

    def test_save_defaults_persists_theme_and_rows(self) -> None:
        result = SelectionResult(item=0, action=None, success=True)

        self._run([str(self.input_path), "--theme", "ocean", "--rows", "4", "--save-defaults"], result)

        saved = json.loads(self.config_path.read_text(encoding="utf-8"))
        self.assertEqual(saved, {"theme": "ocean", "viewport_rows": 4})

    def test_no_color_uses_plain_theme(self) -> None:
        result = SelectionResult(item=0, action=None, success=True)

        _code, pick_mock = self._run([str(self.input_path), "--no-color"], result)

        self.assertEqual(pick_mock.call_args.args[0].theme.selected, "")


class CliParserTests(unittest.TestCase):
    def test_rows_must_be_positive(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.build_parser().parse_args(["--rows", "0"])
        self.assertEqual(ctx.exception.code, 2)

    def test_main_exits_with_run_status(self) -> None:
        with mock.patch("lazypick.cli.run", return_value=130):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])
        self.assertEqual(ctx.exception.code, 130)


if __name__ == "__main__":
    unittest.main()
