"""In-memory implementation of the surface protocols.

This module provides a minimal document built on BeautifulSoup that
implements everything the slider needs from a page:
- Element: bs4 tags with a settable measured width and per-element data
- Navigation: controls parsed from a markup template, activated by hand
- Surface: stylesheets and window resize listeners

It is designed for tests and headless use: no rendering, no layout. Widths
are whatever the caller assigns. Selectors are matched by soupsieve, so
anything ``Tag.select`` understands works in ``query``.

Example:
    surface = MemorySurface()
    container = create_element("div", id="gallery", width=800)
    slides = container.append_new("div", classes=["flexi-slides"])
    for _ in range(5):
        slides.append_new("div", classes=["flexi-slide"])
"""

from collections.abc import Callable, Iterable
from typing import Any

import soupsieve
from bs4 import BeautifulSoup, Tag

from flexislider.adapters.stylesheet import MemoryStyleSheet

PARSER = "html.parser"


class MemoryElement(Tag):
    """A bs4 tag that can be measured and carries slider data.

    Instances are created by BeautifulSoup (see ``create_element`` and
    ``parse_markup``). Tags compare by markup, so tree checks should use
    ``parent is ...`` rather than ``in``.

    Attributes:
        width: Measured width in pixels; 0 while the element is hidden.
        data: Per-element storage; the slider keeps itself under "flexi".
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.width: float = 0
        self.data: dict[str, Any] = {}

    @property
    def id(self) -> str:
        return self.get("id") or ""

    @id.setter
    def id(self, value: str) -> None:
        self["id"] = value

    @property
    def classes(self) -> list[str]:
        value = self.get("class") or []
        return value.split() if isinstance(value, str) else list(value)

    @property
    def class_name(self) -> str:
        return " ".join(self.classes)

    def remove(self, child: "MemoryElement") -> None:
        """Detach ``child`` if it is a direct child of this element."""
        if child.parent is self:
            child.extract()

    def append_new(self, name: str = "div", **kwargs: Any) -> "MemoryElement":
        """Create a child element and append it."""
        child = create_element(name, **kwargs)
        self.append(child)
        return child

    def matches(self, selector: str) -> bool:
        try:
            return soupsieve.match(selector, self)
        except soupsieve.SelectorSyntaxError as ex:
            raise ValueError(f"Invalid selector {selector!r}: {ex}") from ex

    def query(self, selector: str) -> list["MemoryElement"]:
        """Return the descendants matching a CSS selector, in document order.

        Raises:
            ValueError: If the selector cannot be parsed.
        """
        try:
            return list(self.select(selector))
        except soupsieve.SelectorSyntaxError as ex:
            raise ValueError(f"Invalid selector {selector!r}: {ex}") from ex


def _soup(markup: str = "") -> BeautifulSoup:
    return BeautifulSoup(markup, PARSER, element_classes={Tag: MemoryElement})


def create_element(
    name: str = "div",
    *,
    id: str = "",
    classes: Iterable[str] = (),
    width: float = 0,
) -> MemoryElement:
    """Create a detached element.

    Args:
        name: Tag name.
        id: Element id, omitted when empty.
        classes: Class names.
        width: Measured width in pixels.
    """
    attrs: dict[str, str] = {}
    if id:
        attrs["id"] = id
    class_list = list(classes)
    if class_list:
        attrs["class"] = " ".join(class_list)
    element = _soup().new_tag(name, attrs=attrs)
    element.width = width
    return element


def parse_markup(markup: str) -> MemoryElement:
    """Parse markup and return its first element, detached from the document.

    Raises:
        ValueError: If the markup contains no element.
        TypeError: If the markup is not a string.
    """
    if not isinstance(markup, str):
        raise TypeError(f"Markup must be a string, got {type(markup).__name__}")
    element = _soup(markup).find()
    if element is None:
        raise ValueError(f"Markup contains no element: {markup!r}")
    return element.extract()


class MemoryNavigation:
    """Navigation controls whose activation is simulated by calling activate()."""

    def __init__(self, element: MemoryElement) -> None:
        self._element = element
        self._handlers: list[Callable[[str], None]] = []

    @property
    def element(self) -> MemoryElement:
        return self._element

    @property
    def bound(self) -> bool:
        return bool(self._handlers)

    def bind(self, handler: Callable[[str], None]) -> None:
        self._handlers.append(handler)

    def unbind(self) -> None:
        self._handlers.clear()

    def activate(self, selector: str) -> bool:
        """Simulate a click on the first control matching ``selector``.

        Returns:
            True if a control matched.
        """
        if self._element.matches(selector):
            control = self._element
        else:
            control = self._element.select_one(selector)
        if control is None:
            return False
        for handler in list(self._handlers):
            handler(control.class_name)
        return True


class MemorySurface:
    """Surface holding stylesheets and window resize listeners."""

    def __init__(self) -> None:
        self.stylesheets: list[MemoryStyleSheet] = []
        self._resize_listeners: list[Callable[[], None]] = []

    @property
    def resize_listener_count(self) -> int:
        return len(self._resize_listeners)

    def create_navigation(self, markup: str) -> MemoryNavigation:
        return MemoryNavigation(parse_markup(markup))

    def create_stylesheet(self) -> MemoryStyleSheet:
        sheet = MemoryStyleSheet()
        self.stylesheets.append(sheet)
        return sheet

    def subscribe_resize(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._resize_listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._resize_listeners:
                self._resize_listeners.remove(callback)

        return unsubscribe

    def resize_window(self) -> None:
        """Notify every resize listener, as a window resize would."""
        for callback in list(self._resize_listeners):
            callback()
