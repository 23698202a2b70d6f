"""Settings store with ordered initialization and per-option change hooks.

Every configuration change of a slider goes through ``SettingsStore.set``.
Options with a registered hook get a chance to validate, transform or fully
take over the value before it is stored, which is how derived state (slide
geometry, resize watching, navigation) is kept consistent with the options.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Option(StrEnum):
    """The closed set of slider options."""

    NAVIGATION_TEMPLATE = "navigation_template"
    SLIDES = "slides"
    SLIDE = "slide"
    DEBUG = "debug"
    CLICK_DEBOUNCE_TIMEOUT = "click_debounce_timeout"
    LAYOUT = "layout"
    SCROLL_TRANSITION = "scroll_transition"
    RESIZE_DEBOUNCE_TIMEOUT = "resize_debounce_timeout"
    WATCH_ELEMENT_INTERVAL = "watch_element_interval"
    WATCH_ELEMENT_RESIZE = "watch_element_resize"
    SLIDE_LAYOUT = "slide_layout"


class _Marker:
    """Named singleton used for the UNSET and HANDLED markers."""

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False


# Stored value of an option that has no value (not the same as a falsy value)
UNSET: Any = _Marker("UNSET")

# Hook return value meaning "handled, do not store the value"
HANDLED: Any = _Marker("HANDLED")


@dataclass
class Change:
    """Old and new value passed to an option hook.

    Hooks may replace ``new``; the replaced value is what gets stored.
    """

    old: Any
    new: Any


Hook = Callable[[Change], Any]


class SettingsStore:
    """Option storage with hook dispatch.

    The store knows the full option key order up front. Initialization and
    bulk updates always apply options in that order, so hooks that depend on
    other options (slide geometry needs the layout, the resize watcher needs
    the slide collection) see consistent intermediate state.
    """

    def __init__(
        self,
        key_order: Iterable[Option],
        hooks: Mapping[Option, Hook] | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            key_order: Every option the store accepts in a bulk update, in
                the order they are applied.
            hooks: Change hooks per option.
        """
        self._key_order: list[Option] = list(dict.fromkeys(key_order))
        self._hooks: dict[Option, Hook] = dict(hooks or {})
        self._values: dict[Option, Any] = {key: UNSET for key in Option}

    @property
    def key_order(self) -> list[Option]:
        return list(self._key_order)

    def initialize(
        self,
        defaults_a: Mapping[str, Any],
        defaults_b: Mapping[str, Any],
        overrides: Mapping[str, Any] | None = None,
    ) -> None:
        """Merge the default tiers and caller overrides and apply them in order.

        Args:
            defaults_a: Lowest priority defaults.
            defaults_b: Defaults that win over ``defaults_a``.
            overrides: Caller values that win over both default tiers.
        """
        merged = {**defaults_a, **defaults_b, **(overrides or {})}
        self.set(merged)

    def set(self, name: Option | str | Mapping[str, Any], value: Any = UNSET) -> None:
        """Set one option, or several at once when given a mapping.

        With a mapping, every option of the key order that is present in the
        mapping is set in key order. Keys the store does not know are
        ignored.

        Args:
            name: Option name, or a mapping of option names to values.
            value: New value of the option.
        """
        if isinstance(name, Mapping):
            for key in self._key_order:
                if key.value in name:
                    self.set(key, name[key.value])
            return

        option = Option(name)
        hook = self._hooks.get(option)
        if hook is None:
            self._values[option] = value
            return

        change = Change(old=self._values[option], new=value)
        if hook(change) is HANDLED:
            return
        self._values[option] = change.new

    def get(self, name: Option | str, fallback: Any = None) -> Any:
        """Get the value of an option.

        Args:
            name: Option name.
            fallback: Returned when the option has no value. Falsy values
                such as 0 or "" are real values and are returned as-is.

        Returns:
            The stored value or the fallback.
        """
        value = self._values[Option(name)]
        return fallback if value is UNSET else value

    def snapshot(self) -> dict[str, Any]:
        """Return the set options as a plain dict keyed by option name."""
        return {
            key.value: value for key, value in self._values.items() if value is not UNSET
        }
