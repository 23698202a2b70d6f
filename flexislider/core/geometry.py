"""Slide geometry formulas.

The slide width and the container offset depend on the width of the rendering
surface at paint time, so they are kept symbolic: a percentage of the
container plus a number of margin units. ``css()`` renders a formula as the
body of a CSS ``calc()`` expression, ``resolve()`` evaluates it for a known
container width.
"""

import math
import re
from dataclasses import dataclass


def format_number(value: float) -> str:
    """Format a number the way it appears in CSS (10, 0.5, 13.333333333333334)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class Length:
    """A CSS length such as 20px or 1.5em."""

    value: float
    unit: str

    def __bool__(self) -> bool:
        return bool(self.value)

    def css(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


NO_MARGIN = Length(0, "px")


def parse_css_length(value: object) -> Length:
    """Parse a margin value into a number and a unit.

    Numbers are taken as pixels. Strings are split into their leading number
    and the remaining unit, falling back to px when there is no unit.
    Anything that cannot be parsed is a zero length without unit.

    Args:
        value: A number or a CSS length string.

    Returns:
        The parsed Length.
    """
    if isinstance(value, bool):
        return Length(0, "")
    if isinstance(value, int | float):
        if not math.isfinite(value):
            return Length(0, "")
        return Length(float(value), "px")
    if not isinstance(value, str):
        return Length(0, "")

    match = re.match(r"\s*([-+]?(?:\d+\.?\d*|\.\d+))", value)
    if match is None:
        return Length(0, "")
    unit = value[match.end() :].strip()
    return Length(float(match.group(1)), unit or "px")


@dataclass(frozen=True)
class SlideWidth:
    """Width of one slide: ``100% / group`` minus the shared margin.

    Attributes:
        group: Number of slides visible at once.
        margin: Margin between two slides.
    """

    group: int
    margin: Length = NO_MARGIN

    @property
    def base_percent(self) -> float:
        """Share of the container width taken by one slide, in percent."""
        return 100 / self.group if self.group > 1 else 100.0

    @property
    def margin_term(self) -> Length | None:
        """Margin units subtracted from the base share, if any.

        Each slide gives up ``(margin / group) * (group - 1)`` so that
        ``group`` slides and ``group - 1`` gaps fill the container exactly.
        """
        if not self.margin:
            return None
        return Length(
            (self.margin.value / self.group) * (self.group - 1), self.margin.unit
        )

    def css(self) -> str:
        calc = f"(100% / {self.group})" if self.group > 1 else "100%"
        term = self.margin_term
        if term is not None:
            calc = f"({calc} - {term.css()})"
        return calc

    def resolve(self, container_width: float, unit_size: float = 1.0) -> float:
        """Evaluate the width in pixels.

        Args:
            container_width: Width of the slider container in pixels.
            unit_size: Size of one margin unit in pixels.
        """
        width = container_width * self.base_percent / 100
        term = self.margin_term
        if term is not None:
            width -= term.value * unit_size
        return width


@dataclass(frozen=True)
class ContainerOffset:
    """Horizontal translation of the scrolling container.

    The container moves left by ``slide_pos`` slide widths plus margins. The
    first visible slide carries half a margin on its left, which is always
    shifted out of view, including at position 0.
    """

    slide_pos: int
    slide_width: SlideWidth
    margin: Length = NO_MARGIN

    def css(self) -> str:
        margin = self.margin.css() if self.margin else ""
        if self.slide_pos:
            calc = f"({self.slide_width.css()} * -{self.slide_pos})"
            if margin:
                shift = Length(self.margin.value * self.slide_pos, self.margin.unit)
                calc += f" - ({shift.css()}) - ({margin} / 2)"
            return calc
        if margin:
            return f"-{margin} / 2"
        return "0"

    def resolve(self, container_width: float, unit_size: float = 1.0) -> float:
        """Evaluate the offset in pixels (negative values shift left)."""
        half_margin = self.margin.value * unit_size / 2 if self.margin else 0.0
        if not self.slide_pos:
            return -half_margin
        offset = self.slide_width.resolve(container_width, unit_size) * -self.slide_pos
        if self.margin:
            offset -= self.margin.value * self.slide_pos * unit_size
            offset -= half_margin
        return offset

    def transform(self) -> str:
        """Render the CSS transform that applies this offset."""
        return f"translate3d(calc({self.css()}),0,0)"


def slide_width_formula(group: int, margin: Length = NO_MARGIN) -> SlideWidth:
    """Build the width formula of one slide."""
    return SlideWidth(group=group, margin=margin)


def slide_margin_formula(margin: Length = NO_MARGIN) -> Length:
    """Margin on each side of a slide: half the margin between two slides."""
    return Length(margin.value / 2, margin.unit)


def container_offset_formula(
    slide_pos: int, slide_width: SlideWidth, margin: Length = NO_MARGIN
) -> ContainerOffset:
    """Build the translation formula of the container for a slide position."""
    return ContainerOffset(slide_pos=slide_pos, slide_width=slide_width, margin=margin)
