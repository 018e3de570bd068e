from __future__ import annotations

import asyncio
import inspect
import logging
import weakref
from typing import Callable

import config

logger = logging.getLogger(__name__)


class PlaybackClock:
    """Simulated transport clock ticking once per interval while running.

    The clock runs as a single asyncio task on the running event loop.
    Starting it again replaces the previous task, and once ``stop()`` returns
    no further tick is delivered.
    """

    def __init__(self, interval: float | None = None) -> None:
        self.interval = interval if interval is not None else config.TICK_INTERVAL
        self._task: asyncio.Task | None = None
        self._token: object | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, on_tick: Callable[[], None]) -> None:
        """Start ticking, replacing any running interval.

        Must be called from within a running event loop. Bound methods are
        referenced weakly so the clock never keeps its owner alive.
        """
        self.stop()

        if inspect.ismethod(on_tick):
            callback_ref = weakref.WeakMethod(on_tick)
        else:
            callback_ref = lambda: on_tick

        loop = asyncio.get_running_loop()
        token = object()
        self._token = token
        self._task = loop.create_task(self._run(callback_ref, token))
        logger.debug(f"Playback clock started ({self.interval}s interval)")

    def stop(self) -> None:
        """Stop ticking. Safe to call when not running."""
        self._token = None
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()
            logger.debug("Playback clock stopped")

    async def _run(self, callback_ref: Callable[[], Callable[[], None] | None], token: object) -> None:
        while self._token is token:
            await asyncio.sleep(self.interval)

            if self._token is not token:
                break

            callback = callback_ref()
            if callback is None:
                logger.debug("Playback clock owner released, ending ticks")
                break

            callback()
            del callback
