"""Core slider logic.

This module contains the platform-agnostic layout engine: settings and their
hooks, breakpoint resolution, slide geometry, position state and debouncing.
"""

from flexislider.core.breakpoints import (
    LayoutRule,
    LayoutRuleSpec,
    active_for,
    resolve,
)
from flexislider.core.debounce import DebounceChannel, ResizeWatcher
from flexislider.core.engine import SlideEngine
from flexislider.core.errors import (
    ConfigurationError,
    ErrorCategory,
    LayoutError,
)
from flexislider.core.geometry import (
    ContainerOffset,
    Length,
    SlideWidth,
    container_offset_formula,
    parse_css_length,
    slide_margin_formula,
    slide_width_formula,
)
from flexislider.core.logging import configure_logging, get_logger
from flexislider.core.position import PositionController, PositionState
from flexislider.core.settings import HANDLED, UNSET, Change, Option, SettingsStore

__all__ = [
    # Breakpoints
    "LayoutRule",
    "LayoutRuleSpec",
    "active_for",
    "resolve",
    # Debouncing
    "DebounceChannel",
    "ResizeWatcher",
    # Engine
    "SlideEngine",
    # Error handling
    "ConfigurationError",
    "ErrorCategory",
    "LayoutError",
    # Geometry
    "ContainerOffset",
    "Length",
    "SlideWidth",
    "container_offset_formula",
    "parse_css_length",
    "slide_margin_formula",
    "slide_width_formula",
    # Logging
    "configure_logging",
    "get_logger",
    # Position
    "PositionController",
    "PositionState",
    # Settings
    "HANDLED",
    "UNSET",
    "Change",
    "Option",
    "SettingsStore",
]
