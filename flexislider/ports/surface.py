"""Rendering surface protocols.

These interfaces describe everything the slider needs from the page it lives
in: element lookup, the navigation controls, a stylesheet for the generated
rules, and window resize notifications. The slider only talks to these
protocols, so it can drive a browser bridge, a GUI toolkit or the in-memory
surface used in tests.
"""

from collections.abc import Callable
from typing import Any, Protocol


class Element(Protocol):
    """A node of the rendered document.

    Attributes:
        id: Element id, used to scope the generated style rules.
        data: Per-element storage; the slider keeps itself under "flexi".
    """

    id: str
    data: dict[str, Any]

    @property
    def width(self) -> float:
        """Measured width in pixels; 0 when the element is not displayed."""
        ...

    def query(self, selector: str) -> list["Element"]:
        """Return the descendants matching a selector, in document order.

        Raises:
            ValueError: If the selector cannot be parsed.
        """
        ...

    def append(self, child: "Element") -> None:
        """Append a child element (moves it if it is already attached)."""
        ...

    def remove(self, child: "Element") -> None:
        """Remove a child element if it is attached."""
        ...


ActivationHandler = Callable[[str], None]


class Navigation(Protocol):
    """Previous/next controls created from a markup template."""

    @property
    def element(self) -> Element:
        """Root element of the controls."""
        ...

    def bind(self, handler: ActivationHandler) -> None:
        """Call ``handler`` with the class name of an activated control."""
        ...

    def unbind(self) -> None:
        """Detach all activation handlers."""
        ...


class StyleRule(Protocol):
    """A CSS rule whose declarations can be changed in place."""

    selector: str

    def set(self, prop: str, value: str) -> None:
        """Set a declaration."""
        ...

    def get(self, prop: str) -> str | None:
        """Return a declaration, or None if it is not set."""
        ...


class StyleSheet(Protocol):
    """A stylesheet the slider owns."""

    def insert_rule(self, selector: str) -> StyleRule:
        """Append an empty rule for ``selector`` and return it."""
        ...

    def css_text(self) -> str:
        """Render the whole sheet as CSS."""
        ...


class Surface(Protocol):
    """Factory for the page level resources of a slider."""

    def create_navigation(self, markup: str) -> Navigation:
        """Build navigation controls from a markup template."""
        ...

    def create_stylesheet(self) -> StyleSheet:
        """Create and attach a new, empty stylesheet."""
        ...

    def subscribe_resize(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Listen to window resize and orientation changes.

        Returns:
            A function that removes the listener.
        """
        ...
