"""Adapter implementations of the surface and scheduler protocols."""

from flexislider.adapters.factory import create_scheduler
from flexislider.adapters.memory_surface import (
    MemoryElement,
    MemoryNavigation,
    MemorySurface,
    create_element,
    parse_markup,
)
from flexislider.adapters.schedulers import AsyncioScheduler, ManualScheduler
from flexislider.adapters.stylesheet import MemoryStyleRule, MemoryStyleSheet

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "MemoryElement",
    "MemoryNavigation",
    "MemoryStyleRule",
    "MemoryStyleSheet",
    "MemorySurface",
    "create_element",
    "create_scheduler",
    "parse_markup",
]
