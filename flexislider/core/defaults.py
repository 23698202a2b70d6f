"""Default option values.

INIT_DEFAULTS are applied once when a slider is created and cannot be changed
afterwards. RUNTIME_DEFAULTS can be changed at any time through the public
``set`` interface. The key order of both dicts is the order in which options
are applied.
"""

from os import getenv
from typing import Any

from flexislider.core.settings import Option

NAVIGATION_TEMPLATE = (
    '<nav><b class="flexi-prev"></b><b class="flexi-next"></b></nav>'
)

# The base rule; every layout needs one rule without a width (or width 0)
BASE_LAYOUT_RULE: dict[str, Any] = {
    "group": 1,  # How many slides to show at once
    "scroll": 1,  # How many slides to scroll when navigating
    "margin": 0,  # Margin between slides (10, "1em", "5.5%"); numbers are px
}

# Delay between the steps of an unanimated repaint (ms)
REPAINT_DELAY_MS = 142


def _env_flag(name: str, default: bool = False) -> bool:
    value = getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


INIT_DEFAULTS: dict[Option, Any] = {
    Option.NAVIGATION_TEMPLATE: NAVIGATION_TEMPLATE,
    Option.SLIDES: ".flexi-slides",
    Option.SLIDE: ".flexi-slide",
}

RUNTIME_DEFAULTS: dict[Option, Any] = {
    Option.DEBUG: _env_flag("FLEXISLIDER_DEBUG"),
    Option.CLICK_DEBOUNCE_TIMEOUT: 250,
    Option.LAYOUT: [dict(BASE_LAYOUT_RULE)],
    Option.SCROLL_TRANSITION: "0.5s ease-in-out",
    Option.RESIZE_DEBOUNCE_TIMEOUT: 100,
    Option.WATCH_ELEMENT_INTERVAL: 100,
    Option.WATCH_ELEMENT_RESIZE: False,
}


def default_layout() -> list[dict[str, Any]]:
    """Return a fresh copy of the default layout rule list."""
    return [dict(rule) for rule in RUNTIME_DEFAULTS[Option.LAYOUT]]


def key_order() -> list[Option]:
    """Return the order in which options are applied."""
    return [*INIT_DEFAULTS, *RUNTIME_DEFAULTS]
