"""Mid-height noggins between neighbouring vertical members."""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import ComponentKind, FrameComponent, WallContext


class NogginRule(FramingRule):
    """One noggin per stud bay, staggered up and down for face fixing.

    Bays narrower than the minimum gap are skipped, as are bays whose
    midpoint falls in an opening that spans the mid-height row.
    """

    priority = 60
    dependencies = ["wall.studs", "wall.openings", "wall.corners"]

    def get_id(self) -> str:
        return "wall.noggins"

    def get_name(self) -> str:
        return "Noggins"

    def applies(self, context: WallContext) -> bool:
        return True

    def generate(self, context: WallContext) -> list[FrameComponent]:
        members: list[FrameComponent] = []
        t = context.thickness
        mid_height = context.wall.height / 2
        positions = context.vertical_positions()

        for i in range(len(positions) - 1):
            left = positions[i] + t
            gap = positions[i + 1] - left
            if gap <= context.rules.min_noggin_gap:
                continue

            mid_x = left + gap / 2
            opening = context.opening_at(mid_x)
            if opening is not None and opening.contains_y(mid_height):
                continue

            stagger = context.rules.noggin_stagger if i % 2 == 0 else -context.rules.noggin_stagger
            members.append(context.member(
                ComponentKind.NOGGIN, left, mid_height + stagger - t / 2, gap, t,
            ))
        return members
