"""Fire-and-forget task tracking for local mirror writes."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any

import structlog

logger = structlog.get_logger()


class BackgroundWrites:
    """Hold strong references to detached tasks and log their failures.

    Callers never await a scheduled write. ``drain()`` waits for everything
    scheduled so far, including writes scheduled while draining.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[Any]] = set()

    def schedule(self, coro: Coroutine[Any, Any, Any], *, name: str) -> asyncio.Task[Any]:
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.info("background_write_cancelled", task=task.get_name())
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("background_write_failed", task=task.get_name(), error=str(exc))

    async def drain(self) -> None:
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
