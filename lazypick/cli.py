"""Command-line front door for lazypick.

Reads candidate lines from a file or piped stdin, runs the interactive picker
on the controlling terminal, and prints the chosen line to stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from . import logging_setup
from .errors import ExitCode, LazyPickError
from .runtime.config import (
    load_theme_name,
    load_viewport_rows,
    save_theme_name,
    save_viewport_rows,
)
from .runtime.controller import SessionIO, pick
from .runtime.state import DEFAULT_VIEWPORT_ROWS, SelectionConfig
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

TTY_PATH = "/dev/tty"

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazypick",
        description="Fuzzy-pick one line from a file or from piped stdin.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File with one candidate per line. Defaults to stdin.")
    parser.add_argument("--header", default=None, help="Header text shown above the list.")
    parser.add_argument("--rows", type=_positive_int, default=None, help="Number of visible list rows.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--print-index",
        action="store_true",
        help="Print the 0-based input index of the chosen line instead of the line.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist --theme and --rows as defaults for later runs.",
    )
    return parser


def read_items(path: Path | None, stdin: TextIO) -> list[str]:
    """Return non-empty candidate lines from ``path`` or ``stdin``."""
    if path is not None:
        if not path.is_file():
            raise LazyPickError(f"Path not found: {path}")
        text = path.read_text(encoding="utf-8", errors="replace")
    else:
        if stdin.isatty():
            raise LazyPickError("No input: pass a FILE or pipe lines on stdin.")
        text = stdin.read()
    return [line for line in text.splitlines() if line.strip()]


def _open_tty() -> int | None:
    try:
        return os.open(TTY_PATH, os.O_RDWR)
    except OSError:
        return None


def handle_error(error: LazyPickError, stderr: TextIO) -> int:
    """Print ``error`` unless silent and return its exit code."""
    if not error.silent and error.message:
        stderr.write(f"{error.message}\n")
    return int(error.exit_code)


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, run the picker, and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging_setup.configure()

    rows = args.rows or load_viewport_rows() or DEFAULT_VIEWPORT_ROWS
    theme_name = normalize_theme_name(args.theme or load_theme_name())
    if args.save_defaults:
        if args.theme is not None:
            save_theme_name(theme_name)
        if args.rows is not None:
            save_viewport_rows(args.rows)

    tty_fd: int | None = None
    try:
        lines = read_items(Path(args.path) if args.path else None, sys.stdin)
        config = SelectionConfig(
            items=list(range(len(lines))),
            render_item=lines.__getitem__,
            header=args.header,
            viewport_rows=rows,
            theme=resolve_theme(theme_name, no_color=args.no_color),
        )
        tty_fd = _open_tty()
        if tty_fd is not None:
            io = SessionIO(stdin_fd=tty_fd, stdout_fd=tty_fd)
        else:
            io = SessionIO(stdin_fd=sys.stdin.fileno(), stdout_fd=sys.stderr.fileno())
        result = pick(config, io)
    except LazyPickError as exc:
        return handle_error(exc, sys.stderr)
    except OSError as exc:
        logger.debug("picker failed", exc_info=True)
        return handle_error(LazyPickError.from_error(exc, "lazypick"), sys.stderr)
    finally:
        if tty_fd is not None:
            os.close(tty_fd)

    if not result.success or result.item is None:
        return int(ExitCode.ERROR)
    chosen = result.item if args.print_index else lines[result.item]
    sys.stdout.write(f"{chosen}\n")
    return int(ExitCode.SUCCESS)


def main(argv: list[str] | None = None) -> None:
    """Console-script entrypoint; exits with the picker's status code."""
    raise SystemExit(run(argv))


if __name__ == "__main__":
    main()
