"""Scheduler implementations.

- AsyncioScheduler: runs callbacks on an asyncio event loop
- ManualScheduler: virtual clock advanced by hand, for tests and headless
  rendering where time should not pass on its own
"""

import asyncio
import heapq
import itertools
from collections.abc import Callable


class AsyncioScheduler:
    """Scheduler backed by ``loop.call_later``.

    Example:
        async def main():
            scheduler = AsyncioScheduler()
            scheduler.call_later(100, lambda: print("100ms later"))
            await asyncio.sleep(0.2)
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Initialize the scheduler.

        Args:
            loop: Event loop to use. Defaults to the running loop at the time
                of each call.
        """
        self._loop = loop

    def call_later(
        self, delay_ms: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0.0, delay_ms) / 1000, callback)


class ManualTimer:
    """Handle of a callback scheduled on a ManualScheduler."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler with a virtual clock.

    Nothing runs until ``advance`` is called. Callbacks run in order of their
    due time (ties in scheduling order), and callbacks scheduled while
    advancing run too if they fall inside the advanced window.

    Example:
        scheduler = ManualScheduler()
        scheduler.call_later(100, callback)
        scheduler.advance(99)   # nothing happens
        scheduler.advance(1)    # callback runs
    """

    def __init__(self) -> None:
        self.now: float = 0.0
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._sequence = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + max(0.0, delay_ms), callback)
        heapq.heappush(self._queue, (timer.due, next(self._sequence), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that are not cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def advance(self, delay_ms: float) -> int:
        """Move the clock forward and run every callback that became due.

        Args:
            delay_ms: Milliseconds to advance.

        Returns:
            Number of callbacks that ran.
        """
        target = self.now + delay_ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = due
            timer.callback()
            ran += 1
        self.now = target
        return ran

    def clear(self) -> None:
        """Drop every scheduled callback."""
        self._queue.clear()
