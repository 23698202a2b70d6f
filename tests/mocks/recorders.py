"""Recording fakes for hooks and listeners.

Features:
- Configurable hook return values for testing the HANDLED protocol
- Call tracking for assertions (calls, call_count)
"""

from typing import Any

from flexislider.core.settings import Change


class RecordingHook:
    """Settings hook that records every change it sees.

    Attributes:
        calls: (old, new) of every change, in call order.
        result: Value returned from every call.
        replacement: If set, written to ``change.new`` before returning.

    Example:
        >>> hook = RecordingHook(result=HANDLED)
        >>> store = SettingsStore(ORDER, {Option.LAYOUT: hook})
        >>> store.set("layout", [])
        >>> assert hook.calls == [(UNSET, [])]
    """

    _NO_REPLACEMENT = object()

    def __init__(self, result: Any = None, replacement: Any = _NO_REPLACEMENT) -> None:
        self.result = result
        self.replacement = replacement
        self.calls: list[tuple[Any, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def __call__(self, change: Change) -> Any:
        self.calls.append((change.old, change.new))
        if self.replacement is not self._NO_REPLACEMENT:
            change.new = self.replacement
        return self.result


class PositionRecorder:
    """Position listener recording (index, animate) events."""

    def __init__(self) -> None:
        self.events: list[tuple[int, bool]] = []

    def __call__(self, index: int, animate: bool) -> None:
        self.events.append((index, animate))
