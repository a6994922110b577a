"""Wall plates — one bottom plate and a double top plate.

Top plates always run the full trimmed length. The bottom plate is cut out
across door openings only; windows sit on a sill trimmer above it.
"""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import ComponentKind, FrameComponent, WallContext


class PlateRule(FramingRule):
    """Bottom plate segments plus lower and upper top plates."""

    priority = 10

    def get_id(self) -> str:
        return "wall.plates"

    def get_name(self) -> str:
        return "Wall Plates"

    def applies(self, context: WallContext) -> bool:
        return True

    def generate(self, context: WallContext) -> list[FrameComponent]:
        t = context.thickness
        h = context.wall.height
        start, end = context.span_start, context.span_end

        members = [
            context.member(ComponentKind.BOTTOM_PLATE, a, 0.0, b - a, t)
            for a, b in self.bottom_plate_segments(context)
        ]
        members.append(context.member(
            ComponentKind.TOP_PLATE_LOWER, start, h - 2 * t, end - start, t,
        ))
        members.append(context.member(
            ComponentKind.TOP_PLATE_UPPER, start, h - t, end - start, t,
        ))
        return members

    def bottom_plate_segments(self, context: WallContext) -> list[tuple[float, float]]:
        """Spans of the bottom plate between the trimmed ends and door openings."""
        start, end = context.span_start, context.span_end
        segments: list[tuple[float, float]] = []
        cursor = start
        for door in context.doors:
            door_start = min(max(door.start_x, start), end)
            door_end = min(max(door.end_x, start), end)
            if door_start > cursor:
                segments.append((cursor, door_start))
            cursor = max(cursor, door_end)
        if end > cursor:
            segments.append((cursor, end))
        return segments
