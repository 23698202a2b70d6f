"""Plugin style entry point.

One function creates sliders and talks to existing ones:

    flexi_slider(container, {"layout": [...]})     # create
    flexi_slider(container, "next")                 # call a method
    flexi_slider(container, "layout", [...])        # set an option
    flexi_slider(container, "scroll_transition")    # read an option

The engine of a container is kept in ``container.data["flexi"]``. Unknown
method or option names are logged, never raised.
"""

import asyncio
from collections.abc import Mapping, Sequence
from typing import Any

from flexislider.adapters.factory import create_scheduler
from flexislider.adapters.memory_surface import MemorySurface
from flexislider.core.engine import INTERFACE_METHODS, SlideEngine
from flexislider.core.errors import ConfigurationError, ErrorCategory
from flexislider.core.logging import get_logger
from flexislider.ports.scheduler import Scheduler
from flexislider.ports.surface import Element, Surface

DATA_KEY = "flexi"

logger = get_logger(__name__)


def get_engine(container: Element) -> SlideEngine | None:
    """Return the engine bound to a container, if any."""
    return container.data.get(DATA_KEY)


def flexi_slider(
    target: Element | Sequence[Element],
    *args: Any,
    surface: Surface | None = None,
    scheduler: Scheduler | None = None,
) -> Any:
    """Create a slider on a container or talk to an existing one.

    Args:
        target: A container, or a sequence of containers.
        *args: An options mapping when creating; a method or option name
            followed by its arguments for an existing slider.
        surface: Page surface of new sliders. Defaults to a MemorySurface.
        scheduler: Scheduler of new sliders. Defaults to an asyncio scheduler
            on the running loop. Without one and outside a running loop the
            slider is not created and the problem is logged.

    Returns:
        The new engine when a slider is created, the method result for a
        method call, the option value for a read, otherwise the target.
    """
    if isinstance(target, Sequence):
        for container in target:
            flexi_slider(container, *args, surface=surface, scheduler=scheduler)
        return target

    engine = get_engine(target)
    if engine is not None:
        if args and isinstance(args[0], str):
            return _dispatch(engine, target, args[0], args[1:])
        return target

    options = args[0] if args and isinstance(args[0], Mapping) else {}
    if scheduler is None:
        try:
            scheduler = create_scheduler("asyncio", asyncio.get_running_loop())
        except RuntimeError as ex:
            error = ConfigurationError(
                f"No scheduler given and no running event loop: {ex}",
                ErrorCategory.MISSING_SCHEDULER,
                original_error=ex,
            )
            logger.error(
                "configuration_rejected",
                category=error.category.name,
                error=str(error),
            )
            return target

    engine = SlideEngine(surface or MemorySurface(), scheduler)
    target.data[DATA_KEY] = engine
    return engine.initialize(target, options)


def _dispatch(
    engine: SlideEngine, target: Element, name: str, args: tuple[Any, ...]
) -> Any:
    if name in INTERFACE_METHODS:
        return getattr(engine, name)(*args)
    if args:
        engine.set(name, args[0])
        return target
    return engine.get(name)
