"""Asyncio interval timer that drives the active workout clock."""
from __future__ import annotations
import asyncio
from typing import Callable, Optional

class IntervalTimer:
    """Repeating tick source on the running event loop.

    ``start`` replaces any ticking task, so restarting never runs two loops
    at once. Must be started from inside a running loop.
    """
    def __init__(self, callback: Callable[[], None], interval: float = 1.0):
        self.callback = callback
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.callback()
