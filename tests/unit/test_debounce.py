"""Tests for debounce channels and the resize watcher."""

import pytest
from structlog.testing import capture_logs

from flexislider.adapters.memory_surface import MemorySurface
from flexislider.adapters.schedulers import ManualScheduler
from flexislider.core.debounce import DebounceChannel, ResizeWatcher


@pytest.fixture
def channel(scheduler: ManualScheduler) -> DebounceChannel:
    """Provide a click channel with a 250ms cooldown."""
    return DebounceChannel("click", scheduler, lambda: 250)


class TestDebounceChannel:
    """Tests for leading-edge debouncing."""

    def test_first_signal_acts_immediately(self, channel) -> None:
        """The first signal runs at once and starts the cooldown."""
        calls = []
        assert channel.trigger(lambda: calls.append(1)) is True
        assert calls == [1]
        assert channel.active

    def test_signal_within_cooldown_is_dropped(self, channel, scheduler) -> None:
        """Two signals 50ms apart act once."""
        calls = []
        channel.trigger(lambda: calls.append(1))
        scheduler.advance(50)
        with capture_logs() as logs:
            assert channel.trigger(lambda: calls.append(2)) is False
        assert calls == [1]
        assert logs[0]["event"] == "signal_dropped"
        assert logs[0]["channel"] == "click"

    def test_acts_again_after_cooldown(self, channel, scheduler) -> None:
        """Signals after the cooldown run again."""
        calls = []
        channel.trigger(lambda: calls.append(1))
        scheduler.advance(250)
        assert not channel.active
        channel.trigger(lambda: calls.append(2))
        assert calls == [1, 2]

    def test_dropped_signal_restarts_cooldown(self, channel, scheduler) -> None:
        """A burst keeps the channel quiet until 250ms after its last signal."""
        calls = []
        channel.trigger(lambda: calls.append(1))
        scheduler.advance(200)
        channel.trigger(lambda: calls.append(2))
        scheduler.advance(200)
        assert channel.active
        channel.trigger(lambda: calls.append(3))
        assert calls == [1]
        scheduler.advance(250)
        channel.trigger(lambda: calls.append(4))
        assert calls == [1, 4]

    def test_cooldown_is_read_per_signal(self, scheduler) -> None:
        """A changed cooldown applies from the next signal on."""
        cooldown = {"ms": 100}
        channel = DebounceChannel("resize", scheduler, lambda: cooldown["ms"])
        channel.trigger(lambda: None)
        cooldown["ms"] = 500
        scheduler.advance(100)
        channel.trigger(lambda: None)
        scheduler.advance(400)
        assert channel.active
        scheduler.advance(100)
        assert not channel.active

    def test_cancel_clears_cooldown(self, channel, scheduler) -> None:
        """Cancelling ends the cooldown and its timer."""
        channel.trigger(lambda: None)
        channel.cancel()
        assert not channel.active
        assert scheduler.pending == 0


class WidthTracker:
    """Tracks a measured width against the last known width."""

    def __init__(self) -> None:
        self.width = 800
        self.known = 800
        self.ticks = 0

    def tick(self) -> None:
        self.ticks += 1
        self.known = self.width

    def has_changed(self) -> bool:
        return self.width != self.known


@pytest.fixture
def tracker() -> WidthTracker:
    """Provide a width tracker starting at 800px."""
    return WidthTracker()


@pytest.fixture
def watcher(surface: MemorySurface, scheduler: ManualScheduler, tracker: WidthTracker):
    """Provide a resize watcher with 100ms cooldown and poll interval."""
    channel = DebounceChannel("resize", scheduler, lambda: 100)
    return ResizeWatcher(
        surface, scheduler, channel, tracker.tick, tracker.has_changed, lambda: 100
    )


class TestResizeWatcher:
    """Tests for switching between poll and event sources."""

    def test_poll_signals_only_on_change(self, watcher, scheduler, tracker) -> None:
        """Polling ticks only when the width changed."""
        watcher.watch(poll=True)
        scheduler.advance(300)
        assert tracker.ticks == 0
        tracker.width = 600
        scheduler.advance(100)
        assert tracker.ticks == 1
        assert watcher.mode == "poll"

    def test_event_mode_ticks_on_attach(self, watcher, surface, tracker) -> None:
        """Attaching to window resizes ticks once right away."""
        watcher.watch(poll=False)
        assert watcher.mode == "event"
        assert tracker.ticks == 1
        assert surface.resize_listener_count == 1

    def test_event_mode_debounces_resizes(
        self, watcher, surface, scheduler, tracker
    ) -> None:
        """Window resizes during the cooldown are dropped."""
        watcher.watch(poll=False)
        surface.resize_window()
        surface.resize_window()
        assert tracker.ticks == 2
        scheduler.advance(100)
        surface.resize_window()
        assert tracker.ticks == 3

    def test_switching_to_events_stops_polling(
        self, watcher, surface, scheduler, tracker
    ) -> None:
        """The poll timer stops when window events take over."""
        watcher.watch(poll=True)
        watcher.watch(poll=False)
        tracker.width = 500
        ticks = tracker.ticks
        scheduler.advance(1000)
        assert tracker.ticks == ticks
        assert surface.resize_listener_count == 1

    def test_switching_to_polling_unsubscribes(
        self, watcher, surface, scheduler
    ) -> None:
        """Polling removes the window listener and the cooldown."""
        watcher.watch(poll=False)
        surface.resize_window()
        watcher.watch(poll=True)
        assert surface.resize_listener_count == 0
        # Only the poll timer is left, the resize cooldown is cancelled
        assert scheduler.pending == 1

    def test_detach_cancels_everything(self, watcher, surface, scheduler) -> None:
        """Detaching leaves no timer or listener behind."""
        watcher.watch(poll=True)
        watcher.detach()
        assert watcher.mode is None
        assert scheduler.pending == 0
        assert surface.resize_listener_count == 0
