"""Responsive slide carousel engine."""

from flexislider.core import Option, SlideEngine
from flexislider.plugin import flexi_slider, get_engine

__version__ = "0.1.0"

__all__ = ["Option", "SlideEngine", "flexi_slider", "get_engine"]
