"""Shared pytest fixtures for flexislider tests."""

from collections.abc import Callable

import pytest
import structlog

from flexislider.adapters.memory_surface import (
    MemoryElement,
    MemorySurface,
    create_element,
)
from flexislider.adapters.schedulers import ManualScheduler
from flexislider.core.engine import SlideEngine
from tests.mocks import REPAINT_MS

# Configure pytest-asyncio for the scheduler tests that need a real loop
pytest_plugins = ["pytest_asyncio"]

ContainerFactory = Callable[..., MemoryElement]


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Provide a scheduler with a virtual clock.

    Nothing scheduled runs until the test calls ``scheduler.advance(ms)``.
    """
    return ManualScheduler()


@pytest.fixture
def surface() -> MemorySurface:
    """Provide an in-memory page surface."""
    return MemorySurface()


@pytest.fixture
def make_container() -> ContainerFactory:
    """Provide a factory for slider containers.

    Returns:
        A function ``make(slide_count=5, width=800, container_id="slider")``
        building a container with a ``.flexi-slides`` element holding
        ``slide_count`` ``.flexi-slide`` elements.

    Example:
        def test_something(make_container):
            container = make_container(slide_count=3, width=400)
    """

    def make(
        slide_count: int = 5, width: float = 800, container_id: str = "slider"
    ) -> MemoryElement:
        container = create_element("div", id=container_id, width=width)
        slides = container.append_new("div", classes=["flexi-slides"])
        for _ in range(slide_count):
            slides.append_new("div", classes=["flexi-slide"])
        return container

    return make


@pytest.fixture
def make_engine(
    surface: MemorySurface, scheduler: ManualScheduler, make_container: ContainerFactory
) -> Callable[..., SlideEngine]:
    """Provide a factory for initialized engines.

    Returns:
        A function ``make(settings=None, **container_kwargs)`` returning an
        engine initialized on a fresh container, with the first unanimated
        repaint already finished.
    """

    def make(settings: dict | None = None, **container_kwargs: object) -> SlideEngine:
        engine = SlideEngine(surface, scheduler)
        engine.initialize(make_container(**container_kwargs), settings)
        scheduler.advance(REPAINT_MS)
        return engine

    return make


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the default structlog configuration after each test.

    configure_logging() turns on logger caching, which would keep
    capture_logs() from seeing events of loggers used afterwards.
    """
    yield
    structlog.reset_defaults()
