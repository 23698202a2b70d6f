"""Leading-edge debouncing of resize and click signals.

A channel acts on the first signal immediately and then ignores further
signals until it has been quiet for the cooldown period. Dropped signals are
not queued; each one restarts the cooldown.
"""

from collections.abc import Callable
from typing import Literal

from flexislider.core.logging import get_logger
from flexislider.ports.scheduler import Scheduler, TimerHandle
from flexislider.ports.surface import Surface

logger = get_logger(__name__)

ResizeMode = Literal["poll", "event"]


class DebounceChannel:
    """One debounced signal source.

    Attributes:
        name: Channel name used in log events ("resize", "click").
    """

    def __init__(
        self,
        name: str,
        scheduler: Scheduler,
        cooldown_ms: Callable[[], float],
    ) -> None:
        """Initialize the channel.

        Args:
            name: Channel name for logging.
            scheduler: Scheduler used for the cooldown timer.
            cooldown_ms: Returns the current cooldown length. Read on every
                signal so option changes apply to the next cooldown.
        """
        self.name = name
        self._scheduler = scheduler
        self._cooldown_ms = cooldown_ms
        self._timer: TimerHandle | None = None

    @property
    def active(self) -> bool:
        """Whether a cooldown is running."""
        return self._timer is not None

    def trigger(self, action: Callable[[], None]) -> bool:
        """Handle one raw signal.

        Args:
            action: Run immediately if no cooldown is active.

        Returns:
            True if the action ran, False if the signal was dropped.
        """
        dropped = self._timer is not None
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if not dropped:
            action()
        self._timer = self._scheduler.call_later(self._cooldown_ms(), self._expire)
        if dropped:
            logger.debug("signal_dropped", channel=self.name)
        return not dropped

    def cancel(self) -> None:
        """Clear a pending cooldown."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _expire(self) -> None:
        self._timer = None


class ResizeWatcher:
    """Feeds container resizes into a debounce channel.

    Two mutually exclusive sources are supported: polling the container width
    at a fixed interval, or listening to window resize events. Switching the
    source detaches the previous one and cancels the channel's cooldown.
    """

    def __init__(
        self,
        surface: Surface,
        scheduler: Scheduler,
        channel: DebounceChannel,
        tick: Callable[[], None],
        has_changed: Callable[[], bool],
        interval_ms: Callable[[], float],
    ) -> None:
        """Initialize the watcher without attaching any source.

        Args:
            surface: Surface providing window resize events.
            scheduler: Scheduler for the poll interval.
            channel: Debounce channel the resize signals go through.
            tick: Resize handler run by the channel.
            has_changed: Returns True when the measured container width
                differs from the last known width.
            interval_ms: Returns the poll interval.
        """
        self._surface = surface
        self._scheduler = scheduler
        self._channel = channel
        self._tick = tick
        self._has_changed = has_changed
        self._interval_ms = interval_ms
        self._poll_timer: TimerHandle | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self.mode: ResizeMode | None = None

    def watch(self, poll: bool) -> None:
        """Attach the poll source (``poll=True``) or the event source."""
        self.detach()
        if poll:
            self.mode = "poll"
            self._schedule_poll()
        else:
            self.mode = "event"
            self._unsubscribe = self._surface.subscribe_resize(self.signal)
            self._tick()
        logger.debug("resize_watch_attached", mode=self.mode)

    def detach(self) -> None:
        """Remove the current source and cancel all pending timers."""
        if self._poll_timer is not None:
            self._poll_timer.cancel()
            self._poll_timer = None
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._channel.cancel()
        self.mode = None

    def signal(self) -> bool:
        """Forward one resize signal to the debounce channel."""
        return self._channel.trigger(self._tick)

    def _schedule_poll(self) -> None:
        self._poll_timer = self._scheduler.call_later(self._interval_ms(), self._poll)

    def _poll(self) -> None:
        self._schedule_poll()
        if self._has_changed():
            self.signal()
