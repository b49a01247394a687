"""Runtime composition for one picker invocation.

Decides between the interactive and the static path, acquires the terminal
and key listener for the input loop, and runs the committed action only after
both have been released.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from ..input.listener import KeypressListener
from ..render.frame import build_frame, build_non_interactive_preview, draw_frame
from .session import SelectionSession, first_item_result
from .state import SelectionConfig, SelectionResult, SessionState
from .terminal import TerminalController, is_interactive_terminal

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _default_stdin_fd() -> int:
    return sys.stdin.fileno()


def _default_stdout_fd() -> int:
    return sys.stdout.fileno()


def _terminal_width() -> int:
    return max(1, shutil.get_terminal_size((80, 24)).columns)


@dataclass(frozen=True)
class SessionIO:
    """File descriptors and collaborators used by ``run_selection``."""

    stdin_fd: int = field(default_factory=_default_stdin_fd)
    stdout_fd: int = field(default_factory=_default_stdout_fd)
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    terminal_factory: Callable[[int, int], Any] = TerminalController
    listener_factory: Callable[[int], Any] = KeypressListener
    terminal_width: Callable[[], int] = _terminal_width


def _write_preview(io: SessionIO, config: SelectionConfig) -> None:
    lines = build_non_interactive_preview(config)
    os.write(io.stdout_fd, ("\n".join(lines) + "\n").encode("utf-8", errors="replace"))


async def _run_input_loop(session: SelectionSession[T], listener: Any) -> SelectionResult[T] | None:
    """Feed keys to ``session`` until it settles (result) or commits (``None``)."""
    session.render()
    while True:
        token = await listener.next_key()
        commit_requested, result = session.handle_key(token)
        if result is not None:
            return result
        if commit_requested:
            return None


async def run_selection(config: SelectionConfig[T], io: SessionIO | None = None) -> SelectionResult[T]:
    """Run one picker session and return its single settled result.

    Raises ``SelectionCancelled`` on Ctrl+C. Exceptions raised by an action
    handler propagate unchanged. The terminal is restored before either
    surfaces, and before the committed action's handler runs.
    """
    items = tuple(config.items)
    if not items:
        logger.debug("no items to pick from")
        return SelectionResult(item=None, action=None, success=False)

    io = io or SessionIO()
    if not is_interactive_terminal(io.stdin_fd, io.environ):
        logger.debug("no interactive terminal; previewing %d items", len(items))
        _write_preview(io, config)
        return first_item_result(items)

    def render(state: SessionState) -> None:
        draw_frame(io.stdout_fd, build_frame(state, config, io.terminal_width()))

    session = SelectionSession(config, render=render)
    terminal = io.terminal_factory(io.stdin_fd, io.stdout_fd)
    logger.debug("starting interactive selection over %d items", len(items))
    with terminal.raw_mode(), io.listener_factory(io.stdin_fd) as listener:
        settled = await _run_input_loop(session, listener)
    if settled is not None:
        return settled
    return await session.commit()


def pick(config: SelectionConfig[T], io: SessionIO | None = None) -> SelectionResult[T]:
    """Blocking wrapper around ``run_selection`` for synchronous callers."""
    return asyncio.run(run_selection(config, io))
