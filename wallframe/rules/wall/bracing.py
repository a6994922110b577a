"""Diagonal strap bracing across solid wall panels."""

from __future__ import annotations
import math

from wallframe.rules.base import FramingRule
from wallframe.models import (
    BRACE_SECTION_LABEL, ComponentKind, FrameComponent, WallContext,
)


class BracingRule(FramingRule):
    """One diagonal strap per solid panel wide enough to take it.

    A solid panel is a stretch of the trimmed wall not covered by any
    opening. The strap is fixed to the outside face of the studs, rising
    from just above the bottom plate to the underside of the top plates.
    """

    priority = 70
    dependencies = ["wall.plates"]

    def get_id(self) -> str:
        return "wall.bracing"

    def get_name(self) -> str:
        return "Diagonal Bracing"

    def applies(self, context: WallContext) -> bool:
        return context.wall.bracing_enabled

    def generate(self, context: WallContext) -> list[FrameComponent]:
        rules = context.rules
        members: list[FrameComponent] = []
        y = context.stud_bottom + rules.brace_lift
        rise = context.stud_top - y
        if rise <= 0:
            return members

        for start, end in self.solid_panels(context):
            width = end - start
            if width <= rules.min_brace_panel:
                continue
            run = min(max(width - 2 * rules.brace_padding, 0.0), width)
            if run <= rules.min_brace_run:
                continue

            members.append(context.member(
                ComponentKind.BRACE,
                start + rules.brace_padding, y,
                math.hypot(run, rise), rules.brace_width,
                z=context.depth + rules.brace_standoff,
                depth=rules.brace_thickness,
                rotation_degrees=math.degrees(math.atan2(rise, run)),
                label=BRACE_SECTION_LABEL,
            ))
        return members

    def solid_panels(self, context: WallContext) -> list[tuple[float, float]]:
        """Stretches of the trimmed span clear of openings."""
        start, end = context.span_start, context.span_end
        panels: list[tuple[float, float]] = []
        cursor = start
        for opening in context.openings:
            if opening.start_x > cursor:
                panels.append((cursor, min(opening.start_x, end)))
            cursor = max(cursor, opening.end_x)
        if end > cursor:
            panels.append((cursor, end))
        return [(a, b) for a, b in panels if b > a]
