"""Scheduler protocol for deferred continuations.

The slider never blocks. Everything that waits (debounce cooldowns, resize
polling, the steps of an unanimated repaint) is a callback scheduled on the
host's event loop through this protocol.
"""

from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    """Handle of a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback. Cancelling twice or after it ran is a no-op."""
        ...


class Scheduler(Protocol):
    """Protocol for scheduling callbacks after a delay."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay_ms`` milliseconds.

        Args:
            delay_ms: Delay in milliseconds.
            callback: Function called without arguments.

        Returns:
            A handle that cancels the callback.
        """
        ...
