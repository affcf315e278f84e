"""Asyncio debouncer: only the last trigger within the quiet period fires."""

from __future__ import annotations

import asyncio
from contextlib import suppress
from typing import Any, Awaitable, Callable, Optional


class Debouncer:
    """Runs ``callback`` once no new trigger has arrived for ``delay`` seconds.

    A new trigger cancels the pending run, including a callback that is
    already awaiting, so at most one run is outstanding.
    """

    def __init__(self, delay: float, callback: Callable[..., Awaitable[Any]]) -> None:
        self.delay = delay
        self.callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def trigger(self, *args: Any) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._fire(args))

    async def _fire(self, args: tuple) -> None:
        await asyncio.sleep(self.delay)
        await self.callback(*args)

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait for the pending run, if any, to finish or be cancelled."""
        task = self._task
        if task is None:
            return
        with suppress(asyncio.CancelledError):
            await task
