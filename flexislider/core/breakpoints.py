"""Breakpoint resolution for responsive slide layouts.

A layout is a list of rules, each starting at a container width. Resolving the
list sorts it, derives the width range of every rule (from its own width up
to, but excluding, the next rule's width) and fills in missing fields from
the base rule:

    [{"group": 1}, {"width": 600, "group": 3, "margin": 20}]

resolves to two rules covering [0, 600) and [600, infinity).
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flexislider.core.defaults import BASE_LAYOUT_RULE
from flexislider.core.errors import ErrorCategory, LayoutError
from flexislider.core.geometry import Length, parse_css_length


class LayoutRuleSpec(BaseModel):
    """Schema for one caller supplied layout rule."""

    width: float | None = Field(None, ge=0, description="Minimum container width")
    group: int | None = Field(None, ge=1, description="Slides visible at once")
    scroll: int | None = Field(None, ge=1, description="Slides per navigation step")
    margin: float | str | None = Field(None, description="Margin between slides")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"width": 600, "group": 3, "margin": "20px"}},
    )

    @property
    def from_width(self) -> float:
        return self.width or 0


@dataclass(frozen=True)
class LayoutRule:
    """A resolved layout rule covering a range of container widths.

    Attributes:
        from_width: First container width this rule applies to.
        to_width: Last whole pixel width of the range, for display
            (math.inf for the widest rule).
        next_width: Width at which the next rule starts (math.inf for the
            widest rule). Matching is half-open against it, so fractional
            widths between two rules are covered.
        group: Number of slides visible at once.
        scroll: Number of slides advanced per navigation step.
        margin: Margin between two slides.
    """

    from_width: float
    to_width: float
    next_width: float
    group: int
    scroll: int
    margin: Length

    @property
    def margin_value(self) -> float:
        return self.margin.value

    @property
    def margin_unit(self) -> str:
        return self.margin.unit

    def contains(self, width: float) -> bool:
        return self.from_width <= width < self.next_width


def _validate(specs: Any) -> list[LayoutRuleSpec]:
    if isinstance(specs, str | bytes) or not isinstance(specs, Sequence) or not specs:
        raise LayoutError(
            f"Layout must be a non-empty list of rules, got {specs!r}",
            ErrorCategory.INVALID_LAYOUT,
        )
    try:
        return [
            spec if isinstance(spec, LayoutRuleSpec) else LayoutRuleSpec.model_validate(spec)
            for spec in specs
        ]
    except ValidationError as ex:
        raise LayoutError(
            f"Invalid layout rule: {ex}", ErrorCategory.INVALID_LAYOUT, original_error=ex
        ) from ex


def resolve(specs: Any) -> list[LayoutRule]:
    """Resolve an unordered list of rule specs into contiguous layout rules.

    Args:
        specs: Rule specs as dicts or LayoutRuleSpec instances.

    Returns:
        Rules sorted by width whose ranges cover [0, inf) without gaps.

    Raises:
        LayoutError: If the list is empty or invalid, if two rules start at
            the same width, or if no rule starts at width 0.
    """
    ordered = sorted(_validate(specs), key=lambda spec: spec.from_width)
    if ordered[0].from_width:
        raise LayoutError(
            "One layout rule without a width (or width 0) is mandatory",
            ErrorCategory.MISSING_BASE_RULE,
        )
    widths = [spec.from_width for spec in ordered]
    if len(set(widths)) != len(widths):
        raise LayoutError(
            f"Layout rules must start at distinct widths, got {widths}",
            ErrorCategory.INVALID_LAYOUT,
        )

    base_margin = parse_css_length(BASE_LAYOUT_RULE["margin"])
    rules: list[LayoutRule] = []
    for index, spec in enumerate(ordered):
        if index < len(ordered) - 1:
            next_width = ordered[index + 1].from_width
        else:
            next_width = math.inf
        rules.append(
            LayoutRule(
                from_width=spec.from_width,
                to_width=next_width - 1,
                next_width=next_width,
                group=spec.group if spec.group is not None else BASE_LAYOUT_RULE["group"],
                scroll=spec.scroll if spec.scroll is not None else BASE_LAYOUT_RULE["scroll"],
                margin=parse_css_length(spec.margin) if spec.margin is not None else base_margin,
            )
        )
    return rules


def active_for(
    width: float | None, rules: Sequence[LayoutRule]
) -> tuple[int, LayoutRule] | None:
    """Find the rule whose width range contains ``width``.

    Args:
        width: Measured container width. 0 or None means the container is
            not measured (e.g. hidden), in which case nothing is resolved.
        rules: Resolved rules.

    Returns:
        Index and rule of the active layout, or None.
    """
    if not width:
        return None
    for index, rule in enumerate(rules):
        if rule.contains(width):
            return index, rule
    return None
