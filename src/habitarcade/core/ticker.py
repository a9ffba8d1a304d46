"""
Fixed-cadence tick driver.

Runs a callback every ``interval_ms`` on the asyncio loop until stopped.
Whoever starts the driver must stop it when the thing it drives comes to
rest or is torn down; a stopped driver never calls back again.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class TickDriver:
    """Periodic asyncio timer, the Python counterpart of setInterval."""

    def __init__(self, callback: Callable[[float], None], interval_ms: float = 20.0):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive: {interval_ms}")
        self._callback = callback
        self.interval_ms = interval_ms
        self._task: Optional[asyncio.Task] = None
        self._ticks = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def ticks(self) -> int:
        """Callbacks delivered since the last start()."""
        return self._ticks

    def start(self) -> bool:
        """Start ticking. Must be called from a running event loop."""
        if self.is_running:
            return False
        self._ticks = 0
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"TickDriver started ({self.interval_ms} ms)")
        return True

    def stop(self) -> None:
        """Cancel the timer. Safe to call when idle or from inside the callback."""
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
        self._task = None
        logger.debug(f"TickDriver stopped after {self._ticks} ticks")

    async def wait(self) -> None:
        """Wait until the driver is stopped.

        Cancelling the waiter cancels only the wait, never the timer, and the
        cancellation propagates to the caller. Only ``stop()`` ends the timer.
        """
        task = self._task
        if task is None:
            return
        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _run(self) -> None:
        interval = self.interval_ms / 1000
        while True:
            await asyncio.sleep(interval)
            self._ticks += 1
            self._callback(self.interval_ms)
