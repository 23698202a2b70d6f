"""Scheduler factory.

Supported backends:
- "asyncio": callbacks run on an asyncio event loop
- "manual": virtual clock advanced by hand (tests, headless rendering)

Example:
    scheduler = create_scheduler("asyncio")
    scheduler = create_scheduler("manual")
"""

from __future__ import annotations

import asyncio
from typing import Union

from flexislider.adapters.schedulers import AsyncioScheduler, ManualScheduler

SchedulerType = Union["AsyncioScheduler", "ManualScheduler"]


def create_scheduler(
    backend: str, loop: asyncio.AbstractEventLoop | None = None
) -> SchedulerType:
    """Create a scheduler for the specified backend.

    Args:
        backend: "asyncio" or "manual".
        loop: Event loop for the "asyncio" backend. Defaults to the running
            loop at call time.

    Returns:
        A scheduler instance.

    Raises:
        ValueError: If the backend is not supported.
    """
    if backend == "asyncio":
        return AsyncioScheduler(loop)

    if backend == "manual":
        return ManualScheduler()

    raise ValueError(
        f"Unsupported backend: {backend!r}. Supported backends: 'asyncio', 'manual'"
    )
