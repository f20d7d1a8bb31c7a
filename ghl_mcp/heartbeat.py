"""
Keep-alive heartbeat for text/event-stream connections.

One Heartbeat per open stream. The timer task is started when the stream
is first iterated and cancelled exactly once when the stream ends,
whether the client disconnected or the generator was closed.
"""

import asyncio
import logging
from typing import AsyncIterator, Optional

from .config import DEFAULT_HEARTBEAT_INTERVAL

logger = logging.getLogger(__name__)

PING_EVENT = "event: ping\ndata: {}\n\n"


class Heartbeat:
    def __init__(self, interval: float = DEFAULT_HEARTBEAT_INTERVAL):
        self.interval = interval
        self.cancellations = 0
        self._queue: "asyncio.Queue[str]" = asyncio.Queue()
        self._task: Optional[asyncio.Task] = None
        self._stopped = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._stopped and not self._task.done()

    async def _tick(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self._queue.put_nowait(PING_EVENT)

    def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._tick())

    def stop(self) -> bool:
        """Cancel the timer. Returns False if it was already stopped."""
        if not self.running:
            return False
        self._stopped = True
        self._task.cancel()
        self.cancellations += 1
        logger.debug("Heartbeat stopped")
        return True

    async def events(self) -> AsyncIterator[str]:
        """Yield ping events until the consumer goes away."""
        self.start()
        try:
            while True:
                yield await self._queue.get()
        finally:
            self.stop()
