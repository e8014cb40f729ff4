"""
Repeating timer on the asyncio event loop.
"""
from typing import Callable
import asyncio
import logging

logger = logging.getLogger(__name__)


class TickTimer:
    """Calls ``callback`` every ``interval`` seconds until cancelled.

    ``start`` must be called from inside a running event loop. ``cancel`` is
    idempotent; once it returns, the callback will not fire again.
    """

    def __init__(self, interval: float, callback: Callable[[], None]):
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.interval = interval
        self.callback = callback
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self):
        if self.active:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    def cancel(self):
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def _run(self):
        try:
            while True:
                await asyncio.sleep(self.interval)
                self.callback()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Tick callback failed, stopping timer: {e}", exc_info=True)
            self._task = None
