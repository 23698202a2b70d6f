"""Slide engine: the composition root of one slider.

The engine owns the settings store, the position controller, the resolved
layout rules and the debounce channels of one container. Every option change
goes through the store, whose hooks keep the derived state in sync:

    resize signal -> debounce -> breakpoint resolution
        -> set("slide_layout", rule) -> slide geometry -> container offset

Configuration problems never raise out of the engine. They are logged and the
previous (or default) value stays in effect.
"""

import secrets
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import Field, StrictBool, TypeAdapter, ValidationError

from flexislider.core.breakpoints import LayoutRule, active_for, resolve
from flexislider.core.debounce import DebounceChannel, ResizeWatcher
from flexislider.core.defaults import (
    INIT_DEFAULTS,
    REPAINT_DELAY_MS,
    RUNTIME_DEFAULTS,
    default_layout,
    key_order,
)
from flexislider.core.errors import ConfigurationError, ErrorCategory, LayoutError
from flexislider.core.geometry import (
    NO_MARGIN,
    Length,
    SlideWidth,
    container_offset_formula,
    slide_margin_formula,
    slide_width_formula,
)
from flexislider.core.logging import get_logger
from flexislider.core.position import PositionController
from flexislider.core.settings import (
    HANDLED,
    UNSET,
    Change,
    Hook,
    Option,
    SettingsStore,
)
from flexislider.ports.scheduler import Scheduler, TimerHandle
from flexislider.ports.surface import Element, Navigation, StyleRule, Surface

logger = get_logger(__name__)

# Engine methods reachable through the string dispatch of the plugin
INTERFACE_METHODS = frozenset(
    {
        "set",
        "get",
        "next",
        "prev",
        "goto",
        "update_slides",
        "update_resize",
        "update_position",
        "destroy",
    }
)

NAVIGATION_ACTIONS = ("prev", "next")

OPTION_NAMES = frozenset(option.value for option in Option)

_MILLISECONDS = TypeAdapter(Annotated[int, Field(ge=0)])
_FLAG = TypeAdapter(StrictBool)


class SlideEngine:
    """A responsive slider bound to one container element.

    Attributes:
        container: The slider container, set by initialize().
        container_width: Container width the current layout was resolved for.
        slides: The scrolling element holding the slides.
        slide_elements: The slides.
        navigation: The previous/next controls.
        position: Slide position controller.
        layout_rules: Resolved layout rules, sorted by width.
        layout_index: Index of the applied layout rule, -1 before the first.
        slide_margin: Margin between two slides of the applied layout.
        slide_width: Width formula of one slide of the applied layout.
    """

    def __init__(self, surface: Surface, scheduler: Scheduler) -> None:
        """Create an engine. Nothing is rendered before initialize().

        Args:
            surface: Page surface for stylesheets, navigation and resize events.
            scheduler: Scheduler for debounce cooldowns and repaint steps.
        """
        self._surface = surface
        self._scheduler = scheduler
        self._log = logger

        self.container: Element | None = None
        self.container_width: float = 0
        self.slides: Element | None = None
        self.slide_elements: list[Element] = []
        self.navigation: Navigation | None = None

        self.position = PositionController()
        self.position.subscribe(self._on_position_changed)

        self.layout_rules: list[LayoutRule] = []
        self.layout_index: int = -1
        self.layout_rule: LayoutRule | None = None
        self.slide_margin: Length = NO_MARGIN
        self.slide_width: SlideWidth | None = None

        self.slider_style: StyleRule | None = None
        self.slides_style: StyleRule | None = None
        self.slide_style: StyleRule | None = None
        self._repaint_timers: list[TimerHandle] = []

        self._click = DebounceChannel(
            "click", scheduler, lambda: self.get(Option.CLICK_DEBOUNCE_TIMEOUT, 0)
        )
        self._resize = DebounceChannel(
            "resize", scheduler, lambda: self.get(Option.RESIZE_DEBOUNCE_TIMEOUT, 0)
        )
        self._resize_watcher = ResizeWatcher(
            surface,
            scheduler,
            self._resize,
            tick=self._on_resize_tick,
            has_changed=self._width_changed,
            interval_ms=lambda: self.get(Option.WATCH_ELEMENT_INTERVAL, 0),
        )

        self._store = SettingsStore(
            key_order(),
            hooks={
                Option.NAVIGATION_TEMPLATE: self._on_set_navigation_template,
                Option.SLIDES: self._on_set_slides,
                Option.SLIDE: self._on_set_slide,
                Option.DEBUG: self._validated(_FLAG),
                Option.CLICK_DEBOUNCE_TIMEOUT: self._validated(_MILLISECONDS),
                Option.LAYOUT: self._on_set_layout,
                Option.SCROLL_TRANSITION: self._on_set_scroll_transition,
                Option.RESIZE_DEBOUNCE_TIMEOUT: self._validated(_MILLISECONDS),
                Option.WATCH_ELEMENT_INTERVAL: self._validated(_MILLISECONDS),
                Option.WATCH_ELEMENT_RESIZE: self._on_set_watch_element_resize,
                Option.SLIDE_LAYOUT: self._on_set_slide_layout,
            },
        )

    @property
    def settings(self) -> SettingsStore:
        """The settings store, without the protection of the public set()."""
        return self._store

    @property
    def slide_count(self) -> int:
        return self.position.state.slide_count

    @property
    def slide_pos(self) -> int:
        return self.position.index

    @property
    def slide_group(self) -> int:
        return self.position.state.group

    @property
    def resize_mode(self) -> str | None:
        return self._resize_watcher.mode

    # -------------------------------------------------------------------------
    # Public interface
    # -------------------------------------------------------------------------

    def initialize(
        self, container: Element, settings: Mapping[str, Any] | None = None
    ) -> "SlideEngine":
        """Bind the engine to a container and apply the initial settings.

        Args:
            container: The slider container.
            settings: Option overrides. Init-only options (selectors,
                navigation template) can only be given here.

        Returns:
            The engine itself.
        """
        self.container = container
        if not container.id:
            container.id = _random_id()
        self._log = logger.bind(slider=container.id)

        overrides = dict(settings or {})
        self._init_styles(container, {**INIT_DEFAULTS, **RUNTIME_DEFAULTS, **overrides})
        self._store.initialize(INIT_DEFAULTS, RUNTIME_DEFAULTS, overrides)
        self._trace("slider_initialized", settings=self._store.snapshot())
        return self

    def set(self, name: str | Mapping[str, Any], value: Any = UNSET) -> None:
        """Change one runtime option, or several when given a mapping.

        Init-only and internal options are rejected with a logged diagnostic.
        In a mapping, names that are not options at all are ignored.

        Args:
            name: Option name, or a mapping of option names to values.
            value: New value.
        """
        if isinstance(name, Mapping):
            allowed: dict[str, Any] = {}
            for key, item in name.items():
                if key not in OPTION_NAMES:
                    continue
                if self._check_settable(key):
                    allowed[key] = item
            self._trace("setting_options", options=allowed)
            self._store.set(allowed)
            return

        if not self._check_settable(name):
            return
        self._trace("setting_option", option=name, value=value)
        self._store.set(name, value)

    def get(self, name: str, fallback: Any = None) -> Any:
        """Return an option value, or ``fallback`` if the option has no value."""
        if name not in OPTION_NAMES:
            self._reject(
                ConfigurationError(
                    f"Unknown option: {name!r}", ErrorCategory.UNKNOWN_OPTION
                ),
                level="warning",
            )
            return fallback
        return self._store.get(name, fallback)

    def next(self, animate: bool = True) -> int:
        """Show the next slide, wrapping to the first one after the last."""
        return self.position.next(animate)

    def prev(self, animate: bool = True) -> int:
        """Show the previous slide, wrapping to the last one from the first."""
        return self.position.prev(animate)

    def goto(self, index: int, animate: bool = True) -> int:
        """Show the slide at ``index`` if it is a valid position."""
        return self.position.goto(index, animate)

    def update_slides(self) -> bool:
        """Recompute the slide geometry of the applied layout.

        Returns:
            False if the layout cannot be computed yet (no measured width).
        """
        if not self.container_width or self.slide_group < 1:
            return False
        self.slide_width = slide_width_formula(self.slide_group, self.slide_margin)
        margin = slide_margin_formula(self.slide_margin)
        if self.slide_style is not None:
            # calc() instead of pixels, so the DOM only changes with the layout
            self.slide_style.set("flex", f"0 0 calc({self.slide_width.css()})")
            self.slide_style.set("margin", f"0 {margin.css()}")
        self.update_position(False)
        if self.slider_style is not None:
            self.slider_style.set("opacity", "1")
        self._trace(
            "slides_updated",
            group=self.slide_group,
            width=self.slide_width.css(),
            margin=margin.css(),
        )
        return True

    def update_resize(self) -> bool:
        """Measure the container and apply the matching layout rule.

        Nothing happens while the container has no width (e.g. it is hidden),
        or when the matching rule is the one already applied.

        Returns:
            True if a new layout rule was applied.
        """
        if self.container is None:
            return False
        self.container_width = self.container.width
        match = active_for(self.container_width, self.layout_rules)
        if match is None:
            return False
        index, rule = match
        if index == self.layout_index and rule == self.layout_rule:
            return False
        self.layout_index = index
        self.layout_rule = rule
        self._trace("layout_matched", index=index, width=self.container_width)
        self._store.set(Option.SLIDE_LAYOUT, rule)
        return True

    def update_position(self, animate: bool = True) -> bool:
        """Move the slides container to the current position.

        Unanimated moves disable the transition, apply the transform on the
        next repaint and restore the transition on the repaint after that.

        Returns:
            False if nothing was rendered (hidden container, no layout yet).
        """
        if self.container is None or not self.container.width:
            return False
        if self.slide_width is None or self.slides_style is None:
            return False
        slides_style = self.slides_style
        transform = container_offset_formula(
            self.slide_pos, self.slide_width, self.slide_margin
        ).transform()
        interrupted = self._cancel_repaint()

        if animate:
            if interrupted:
                slides_style.set("transition", self.get(Option.SCROLL_TRANSITION, ""))
            slides_style.set("transform", transform)
            return True

        slides_style.set("transition", "none")

        def restore_transition() -> None:
            self._repaint_timers = []
            slides_style.set("transition", self.get(Option.SCROLL_TRANSITION, ""))

        def apply_transform() -> None:
            slides_style.set("transform", transform)
            self._repaint_timers = [
                self._scheduler.call_later(REPAINT_DELAY_MS, restore_transition)
            ]

        self._repaint_timers = [self._scheduler.call_later(REPAINT_DELAY_MS, apply_transform)]
        return True

    def destroy(self) -> None:
        """Detach every listener and timer and release the container."""
        self._resize_watcher.detach()
        self.position.unsubscribe(self._on_position_changed)
        self._click.cancel()
        self._cancel_repaint()
        if self.navigation is not None:
            self.navigation.unbind()
            if self.container is not None:
                self.container.remove(self.navigation.element)
        if self.container is not None:
            self.container.data.pop("flexi", None)
        self._trace("slider_destroyed")

    # -------------------------------------------------------------------------
    # Option hooks
    # -------------------------------------------------------------------------

    def _on_set_navigation_template(self, change: Change) -> Any:
        if self.navigation is not None and change.old == change.new:
            return None
        try:
            navigation = self._surface.create_navigation(change.new)
        except (TypeError, ValueError) as ex:
            self._reject(ConfigurationError.from_exception(ex))
            return HANDLED

        attached = False
        if self.navigation is not None:
            self.navigation.unbind()
            if self.container is not None and self.slide_count > 1:
                self.container.remove(self.navigation.element)
                attached = True
        self.navigation = navigation
        self.navigation.bind(self._on_navigation_activated)
        if attached and self.container is not None:
            self.container.append(self.navigation.element)
        return None

    def _on_set_slides(self, change: Change) -> Any:
        if change.old:
            # The slides container is fixed once found
            return HANDLED
        if not change.new or self.container is None:
            return None
        found = self._query(self.container, change.new)
        if not found:
            self._reject(
                ConfigurationError(
                    f"Slides container {change.new!r} not found",
                    ErrorCategory.SELECTOR_NOT_FOUND,
                )
            )
            change.new = UNSET
            return None
        self.slides = found[0]
        return None

    def _on_set_slide(self, change: Change) -> Any:
        if self.slides is None:
            self._reject(
                ConfigurationError(
                    f"Cannot look up slides {change.new!r} without a slides container",
                    ErrorCategory.SELECTOR_NOT_FOUND,
                ),
                level="warning",
            )
            self.slide_elements = []
        else:
            self.slide_elements = self._query(self.slides, change.new) if change.new else []
        self.position.reset(len(self.slide_elements))
        self._show_navigation(self.slide_count > 1)
        return None

    def _on_set_layout(self, change: Change) -> Any:
        value = change.new
        if not isinstance(value, list | tuple) or not value:
            self._reject(
                ConfigurationError(
                    f"Layout must be a non-empty list, falling back to defaults: {value!r}",
                    ErrorCategory.INVALID_LAYOUT,
                )
            )
            value = default_layout()
        try:
            rules = resolve(value)
        except LayoutError as ex:
            self._reject(ex)
            return HANDLED
        change.new = [dict(rule) if isinstance(rule, Mapping) else rule for rule in value]
        self.layout_rules = rules
        self.update_resize()
        return None

    def _on_set_slide_layout(self, change: Change) -> Any:
        rule: LayoutRule = change.new
        self.slide_margin = rule.margin
        self.position.set_group(rule.group, rule.scroll)
        self.update_slides()
        return None

    def _on_set_scroll_transition(self, change: Change) -> Any:
        # A pending unanimated repaint restores the new value when it is done
        if self.slides_style is not None and not self._repaint_timers:
            self.slides_style.set("transition", change.new)
        return None

    def _on_set_watch_element_resize(self, change: Change) -> Any:
        try:
            change.new = _FLAG.validate_python(change.new)
        except ValidationError as ex:
            self._reject(ConfigurationError.from_exception(ex))
            return HANDLED
        if change.old != change.new:
            self._resize_watcher.watch(poll=change.new)
        return None

    def _validated(self, adapter: TypeAdapter[Any]) -> Hook:
        def hook(change: Change) -> Any:
            try:
                change.new = adapter.validate_python(change.new)
            except ValidationError as ex:
                self._reject(ConfigurationError.from_exception(ex))
                return HANDLED
            return None

        return hook

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def _on_resize_tick(self) -> None:
        if self._width_changed():
            self.update_resize()

    def _width_changed(self) -> bool:
        return self.container is not None and self.container.width != self.container_width

    def _on_navigation_activated(self, class_name: str) -> None:
        for action in NAVIGATION_ACTIONS:
            if action in class_name:
                method = getattr(self, action)
                self._click.trigger(lambda: method(True))
                return

    def _on_position_changed(self, index: int, animate: bool) -> None:
        self._trace("position_changed", index=index, animate=animate)
        self.update_position(animate)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _query(self, root: Element, selector: str) -> list[Element]:
        try:
            return root.query(selector)
        except ValueError as ex:
            self._reject(ConfigurationError.from_exception(ex))
            return []

    def _init_styles(self, container: Element, settings: Mapping[str, Any]) -> None:
        sheet = self._surface.create_stylesheet()
        scope = f"#{container.id}"
        self.slider_style = sheet.insert_rule(scope)
        self.slides_style = sheet.insert_rule(f"{scope} {settings[Option.SLIDES]}")
        self.slide_style = sheet.insert_rule(f"{scope} {settings[Option.SLIDE]}")
        self.slides_style.set("transition", "transform 0.5s ease-in-out")

    def _show_navigation(self, visible: bool) -> None:
        if self.navigation is None or self.container is None:
            return
        if visible:
            self.container.append(self.navigation.element)
        else:
            self.container.remove(self.navigation.element)

    def _cancel_repaint(self) -> bool:
        pending = bool(self._repaint_timers)
        for timer in self._repaint_timers:
            timer.cancel()
        self._repaint_timers = []
        return pending

    def _check_settable(self, name: str) -> bool:
        if name not in OPTION_NAMES:
            self._reject(
                ConfigurationError(
                    f"Unknown option: {name!r}", ErrorCategory.UNKNOWN_OPTION
                ),
                level="warning",
            )
            return False
        if name not in RUNTIME_DEFAULTS:
            self._reject(
                ConfigurationError(
                    f'The option "{name}" cannot be set.', ErrorCategory.PROTECTED_OPTION
                ),
                level="warning",
            )
            return False
        return True

    def _reject(self, error: ConfigurationError, level: str = "error") -> None:
        getattr(self._log, level)(
            "configuration_rejected",
            category=error.category.name,
            error=str(error),
        )

    def _trace(self, event: str, **kwargs: Any) -> None:
        if self._store.get(Option.DEBUG, False):
            self._log.debug(event, **kwargs)


def _random_id() -> str:
    return "fs-" + secrets.token_hex(5)
