"""Corner treatment for walls whose plates run through a junction.

The butting wall's end lands on this wall's face across a strip one
section deep. A corner stud is set beside the end stud to close that strip,
and short blocks fill the gap between them near the top and the bottom.
"""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import ComponentKind, CornerType, FrameComponent, WallContext


class CornerRule(FramingRule):
    """Corner studs and blocking at `through` wall ends."""

    priority = 40
    dependencies = ["wall.studs"]

    def get_id(self) -> str:
        return "wall.corners"

    def get_name(self) -> str:
        return "Corner Studs"

    def applies(self, context: WallContext) -> bool:
        return CornerType.THROUGH in (context.corner_start, context.corner_end)

    def generate(self, context: WallContext) -> list[FrameComponent]:
        t, d = context.thickness, context.depth
        members: list[FrameComponent] = []

        if context.corner_start == CornerType.THROUGH:
            # End stud at span_start, corner stud one section depth along
            members.extend(self._corner(
                context, stud_x=context.span_start + d,
                gap_start=context.span_start + t, end="start",
            ))
        if context.corner_end == CornerType.THROUGH:
            members.extend(self._corner(
                context, stud_x=context.span_end - d - t,
                gap_start=context.span_end - d, end="end",
            ))
        return members

    def _corner(
        self, context: WallContext, stud_x: float, gap_start: float, end: str,
    ) -> list[FrameComponent]:
        tags = {"corner": end}
        members = [context.stud(
            ComponentKind.CORNER_STUD, stud_x,
            context.stud_bottom, context.stud_top, tags=tags,
        )]

        gap = context.depth - context.thickness
        block_height = min(
            context.rules.corner_block_height,
            (context.stud_top - context.stud_bottom) / 2,
        )
        if gap < context.rules.min_noggin_gap or block_height <= 0:
            return members

        for y in (context.stud_bottom, context.stud_top - block_height):
            members.append(context.member(
                ComponentKind.CORNER_BLOCK, gap_start, y, gap, block_height, tags=tags,
            ))
        return members
