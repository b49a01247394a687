"""Terminal control helpers for the picker session.

Owns raw-mode lifecycle and alternate-screen switching, and decides whether an
interactive terminal is attached at all.
"""

from __future__ import annotations

import contextlib
import os
from collections.abc import Mapping
import termios
import tty

_NON_INTERACTIVE_ENV_FLAGS = ("CI", "GITHUB_ACTIONS")


def is_interactive_terminal(stdin_fd: int, environ: Mapping[str, str] | None = None) -> bool:
    """Return whether ``stdin_fd`` is a tty that can enter raw mode.

    CI markers and ``TERM=dumb`` force the non-interactive path even on a tty.
    """
    env = os.environ if environ is None else environ
    if any(env.get(flag) for flag in _NON_INTERACTIVE_ENV_FLAGS):
        return False
    if env.get("TERM") == "dumb":
        return False
    try:
        if not os.isatty(stdin_fd):
            return False
        termios.tcgetattr(stdin_fd)
    except (OSError, termios.error):
        return False
    return True


class TerminalController:
    """Manage raw-mode transitions for the picker."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self._active = True

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state and the main screen buffer."""
        # Show cursor and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        self._active = False
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
