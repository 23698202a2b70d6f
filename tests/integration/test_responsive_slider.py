"""Integration tests for a responsive slider.

These tests drive a slider through the plugin entry point the way a page
would: create it, resize the container across breakpoints, click the
navigation and change options at runtime, then check the generated CSS.
"""

from __future__ import annotations

import asyncio

import pytest

from flexislider import flexi_slider, get_engine
from flexislider.adapters import (
    AsyncioScheduler,
    MemoryElement,
    MemorySurface,
    create_element,
)

# --- Test Fixtures ---

GALLERY_LAYOUT = [
    {"width": 600, "group": 2, "margin": "10px"},
    {"group": 1},
    {"width": 1000, "group": 3, "margin": 20},
]


def build_gallery(slide_count: int = 6, width: float = 800) -> MemoryElement:
    """Create a gallery container with slide_count slides."""
    container = create_element("section", id="gallery", width=width)
    slides = container.append_new("div", classes=["flexi-slides"])
    for _ in range(slide_count):
        slides.append_new("figure", classes=["flexi-slide"])
    return container


# --- Breakpoints ---


class TestBreakpointFlow:
    """A slider follows its container across breakpoints."""

    def test_layout_follows_container(self, surface, scheduler) -> None:
        """Widening and narrowing the container switches layout rules."""
        container = build_gallery(width=800)
        engine = flexi_slider(
            container, {"layout": GALLERY_LAYOUT}, surface=surface, scheduler=scheduler
        )
        scheduler.advance(300)
        assert engine.slide_group == 2
        assert engine.slide_style.get("flex") == "0 0 calc(((100% / 2) - 5px))"

        container.width = 1280
        surface.resize_window()
        assert engine.slide_group == 3

        scheduler.advance(100)
        container.width = 320
        surface.resize_window()
        assert engine.slide_group == 1
        assert engine.slide_style.get("flex") == "0 0 calc(100%)"
        assert engine.slide_style.get("margin") == "0 0px"

    def test_position_survives_narrowing(self, surface, scheduler) -> None:
        """Widening to three slides clamps the position to the last full group."""
        container = build_gallery(width=320)
        engine = flexi_slider(
            container, {"layout": GALLERY_LAYOUT}, surface=surface, scheduler=scheduler
        )
        flexi_slider(container, "goto", 5)
        container.width = 1100
        surface.resize_window()
        assert engine.slide_pos == 3

    def test_polling_picks_up_element_resizes(self, surface, scheduler) -> None:
        """Polling sees container widths change without a window resize."""
        container = build_gallery(width=800)
        engine = flexi_slider(
            container,
            {"layout": GALLERY_LAYOUT, "watch_element_resize": True},
            surface=surface,
            scheduler=scheduler,
        )
        container.width = 1500
        scheduler.advance(100)
        assert engine.slide_group == 3

        flexi_slider(container, "watch_element_interval", 500)
        container.width = 500
        scheduler.advance(400)
        assert engine.slide_group == 3
        scheduler.advance(600)
        assert engine.slide_group == 1


# --- Navigation ---


class TestNavigationFlow:
    """Clicking through a gallery."""

    def test_click_through_and_wrap(self, surface, scheduler) -> None:
        """Next clicks wrap to the start after the last full group."""
        container = build_gallery(slide_count=4, width=800)
        engine = flexi_slider(
            container, {"layout": GALLERY_LAYOUT}, surface=surface, scheduler=scheduler
        )
        positions = []
        for _ in range(4):
            engine.navigation.activate(".flexi-next")
            positions.append(engine.slide_pos)
            scheduler.advance(250)
        assert positions == [1, 2, 0, 1]

    def test_faster_clicks_with_shorter_timeout(self, surface, scheduler) -> None:
        """A shorter debounce timeout lets quicker clicks through."""
        container = build_gallery(width=800)
        engine = flexi_slider(container, surface=surface, scheduler=scheduler)
        flexi_slider(container, "click_debounce_timeout", 50)
        engine.navigation.activate(".flexi-next")
        scheduler.advance(60)
        engine.navigation.activate(".flexi-next")
        assert engine.slide_pos == 2

    def test_generated_css(self, surface, scheduler) -> None:
        """The stylesheet holds the container, slides and slide rules."""
        container = build_gallery(width=1200)
        flexi_slider(
            container, {"layout": GALLERY_LAYOUT}, surface=surface, scheduler=scheduler
        )
        scheduler.advance(300)
        flexi_slider(container, "next")
        assert surface.stylesheets[0].css_text() == "\n".join(
            [
                "#gallery { opacity: 1; }",
                "#gallery .flexi-slides { transition: 0.5s ease-in-out; "
                "transform: translate3d(calc((((100% / 3) - 13.333333333333334px) * -1)"
                " - (20px) - (20px / 2)),0,0); }",
                "#gallery .flexi-slide { flex: 0 0 calc(((100% / 3) - 13.333333333333334px)); "
                "margin: 0 10px; }",
            ]
        )

    def test_destroy_detaches_everything(self, surface, scheduler) -> None:
        """Destroy removes the engine, the controls and pending timers."""
        container = build_gallery()
        flexi_slider(container, surface=surface, scheduler=scheduler)
        flexi_slider(container, "destroy")
        assert get_engine(container) is None
        assert container.query("nav") == []
        assert scheduler.pending == 0


# --- Event loop ---


class TestAsyncioFlow:
    """The slider on a real event loop."""

    @pytest.mark.asyncio
    async def test_unanimated_repaint_completes(self) -> None:
        """The first paint restores the transition on a real loop."""
        surface = MemorySurface()
        container = build_gallery(width=800)
        engine = flexi_slider(
            container,
            {"layout": GALLERY_LAYOUT},
            surface=surface,
            scheduler=AsyncioScheduler(),
        )
        assert engine.slides_style.get("transition") == "none"
        await asyncio.sleep(0.4)
        assert engine.slides_style.get("transition") == "0.5s ease-in-out"
        assert engine.slides_style.get("transform") == "translate3d(calc(-10px / 2),0,0)"
        engine.destroy()

    @pytest.mark.asyncio
    async def test_default_scheduler_uses_running_loop(self) -> None:
        """Without a scheduler the slider runs its timers on the current loop."""
        container = build_gallery(width=800)
        engine = flexi_slider(container, {"layout": GALLERY_LAYOUT}, surface=MemorySurface())
        assert get_engine(container) is engine
        await asyncio.sleep(0.4)
        assert engine.slides_style.get("transition") == "0.5s ease-in-out"
        engine.destroy()
