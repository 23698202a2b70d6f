"""Slide position state with wraparound navigation."""

from collections.abc import Callable
from dataclasses import dataclass

from flexislider.core.logging import get_logger

logger = get_logger(__name__)

PositionListener = Callable[[int, bool], None]


@dataclass
class PositionState:
    """Current position of a slider.

    Attributes:
        index: Index of the first visible slide.
        slide_count: Number of slides in the collection.
        group: Number of slides visible at once.
        scroll: Number of slides per navigation step (declared, not applied;
            navigation always moves by one slide).
    """

    index: int = 0
    slide_count: int = 0
    group: int = 1
    scroll: int = 1

    @property
    def last_index(self) -> int:
        """Highest index at which a full group is still visible."""
        return max(0, self.slide_count - self.group)


class PositionController:
    """Moves the slide position and notifies listeners.

    Listeners receive ``(index, animate)`` after every transition. ``animate``
    is False only when the caller asks for an unanimated move.
    """

    def __init__(self, state: PositionState | None = None) -> None:
        self.state = state or PositionState()
        self._listeners: list[PositionListener] = []

    @property
    def index(self) -> int:
        return self.state.index

    def subscribe(self, listener: PositionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: PositionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def next(self, animate: bool = True) -> int:
        """Move one slide forward, wrapping to the first slide after the last."""
        if self.state.index < self.state.slide_count - self.state.group:
            self.state.index += 1
        else:
            self.state.index = 0
        self._notify(animate)
        return self.state.index

    def prev(self, animate: bool = True) -> int:
        """Move one slide back, wrapping to the last position from the first."""
        if self.state.index > 0:
            self.state.index -= 1
        else:
            self.state.index = self.state.last_index
        self._notify(animate)
        return self.state.index

    def goto(self, index: int, animate: bool = True) -> int:
        """Jump to a position. Positions outside the valid range are ignored."""
        if not 0 <= index <= self.state.last_index:
            logger.warning(
                "position_out_of_range",
                index=index,
                last_index=self.state.last_index,
            )
            return self.state.index
        self.state.index = index
        self._notify(animate)
        return self.state.index

    def reset(self, slide_count: int | None = None) -> None:
        """Go back to the first slide, e.g. after the slide collection changed.

        Listeners are not notified; the caller repaints once the new
        collection is laid out.
        """
        if slide_count is not None:
            self.state.slide_count = slide_count
        self.state.index = 0

    def set_group(self, group: int, scroll: int | None = None) -> None:
        """Change the number of visible slides, clamping the current index."""
        self.state.group = group
        if scroll is not None:
            self.state.scroll = scroll
        self.state.index = min(self.state.index, self.state.last_index)

    def _notify(self, animate: bool) -> None:
        for listener in list(self._listeners):
            listener(self.state.index, animate)
