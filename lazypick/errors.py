"""Error types that carry process exit intent.

Library code raises these instead of exiting; only ``cli.main`` turns them
into exit codes. ``SelectionCancelled`` is the user-abort signal raised by the
picker and is meant to be caught by type.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    CANCELLED = 130


class LazyPickError(Exception):
    """Application error with an exit code and an optional silent flag."""

    def __init__(self, message: str = "", exit_code: ExitCode = ExitCode.ERROR, silent: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        self.silent = silent

    @classmethod
    def silent_exit(cls, exit_code: ExitCode = ExitCode.SUCCESS) -> SilentExit:
        return SilentExit(exit_code)

    @classmethod
    def cancelled(cls, message: str = "Selection cancelled.") -> SelectionCancelled:
        return SelectionCancelled(message)

    @classmethod
    def from_error(cls, error: BaseException, context: str | None = None) -> LazyPickError:
        """Wrap ``error`` with an optional context prefix.

        Instances that already are ``LazyPickError`` are returned unchanged so
        their exit code and silent flag survive.
        """
        if isinstance(error, LazyPickError):
            return error
        message = str(error) or type(error).__name__
        if context:
            message = f"{context}: {message}"
        return cls(message)


class SelectionCancelled(LazyPickError):
    """Raised when the user aborts the picker (Ctrl+C)."""

    def __init__(self, message: str = "Selection cancelled.") -> None:
        super().__init__(message, ExitCode.CANCELLED)


class SilentExit(LazyPickError):
    """Stop the program without printing anything."""

    def __init__(self, exit_code: ExitCode = ExitCode.SUCCESS) -> None:
        super().__init__("", exit_code, silent=True)
