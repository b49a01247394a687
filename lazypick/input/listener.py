"""Event-loop keypress listener for the picker session.

Registers the tty fd with the running asyncio loop, decodes tokens as bytes
arrive, and hands them to the session one at a time through a queue.
"""

from __future__ import annotations

import asyncio
import logging

from .reader import has_pending_input, read_key

logger = logging.getLogger(__name__)


class KeypressListener:
    """Scoped ``loop.add_reader`` registration yielding decoded key tokens."""

    def __init__(self, fd: int, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self.fd = fd
        self._loop = loop
        self._queue: asyncio.Queue[str] = asyncio.Queue()
        self._registered = False

    def __enter__(self) -> KeypressListener:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._loop.add_reader(self.fd, self._on_readable)
        self._registered = True
        logger.debug("keypress listener registered on fd %d", self.fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if not self._registered:
            return
        assert self._loop is not None
        self._loop.remove_reader(self.fd)
        self._registered = False
        logger.debug("keypress listener removed from fd %d", self.fd)

    @property
    def registered(self) -> bool:
        return self._registered

    def _on_readable(self) -> None:
        token = read_key(self.fd)
        if not token:
            # EOF on the tty behaves like an interrupt.
            self._queue.put_nowait("CTRL_C")
            self.close()
            return
        self._queue.put_nowait(token)
        while has_pending_input():
            self._queue.put_nowait(read_key(self.fd))

    async def next_key(self) -> str:
        """Wait for the next decoded key token."""
        return await self._queue.get()
