"""Headless demo: build a slider on an in-memory page and step through it."""

import asyncio
import os

from flexislider import flexi_slider
from flexislider.adapters import (
    AsyncioScheduler,
    MemoryElement,
    MemorySurface,
    create_element,
)
from flexislider.core.logging import configure_logging, get_logger

# Configure structured logging (reads ENVIRONMENT and LOG_LEVEL from env)
configure_logging()

logger = get_logger(__name__)

SLIDE_COUNT = int(os.getenv("DEMO_SLIDE_COUNT", "6"))

LAYOUT = [
    {"width": 600, "group": 2, "margin": "10px"},
    {"group": 1},
    {"width": 1000, "group": 3, "margin": 20},
]


def build_page(width: float) -> MemoryElement:
    """Create a slider container with SLIDE_COUNT slides."""
    container = create_element("div", id="gallery", width=width)
    slides = container.append_new("div", classes=["flexi-slides"])
    for _ in range(SLIDE_COUNT):
        slides.append_new("div", classes=["flexi-slide"])
    return container


async def main() -> None:
    surface = MemorySurface()
    container = build_page(width=800)
    slider = flexi_slider(
        container,
        {"layout": LAYOUT},
        surface=surface,
        scheduler=AsyncioScheduler(),
    )
    # Let the unanimated first paint finish
    await asyncio.sleep(0.3)

    for _ in range(SLIDE_COUNT):
        flexi_slider(container, "next")
        logger.info(
            "slide_shown",
            position=slider.slide_pos,
            transform=slider.slides_style.get("transform"),
        )

    container.width = 1200
    surface.resize_window()
    await asyncio.sleep(0.3)
    logger.info("layout_after_resize", group=slider.slide_group)
    print(surface.stylesheets[0].css_text())

    slider.destroy()


if __name__ == "__main__":
    asyncio.run(main())
