"""Protocols for the collaborators of a slider (page surface, scheduling)."""

from flexislider.ports.scheduler import Scheduler, TimerHandle
from flexislider.ports.surface import (
    ActivationHandler,
    Element,
    Navigation,
    StyleRule,
    StyleSheet,
    Surface,
)

__all__ = [
    # Scheduling
    "Scheduler",
    "TimerHandle",
    # Surface
    "ActivationHandler",
    "Element",
    "Navigation",
    "StyleRule",
    "StyleSheet",
    "Surface",
]
