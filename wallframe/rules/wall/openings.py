"""Opening framing — jamb studs, lintels and sill trimmers."""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import ComponentKind, FrameComponent, Opening, WallContext


class OpeningRule(FramingRule):
    """Frames each door or window opening.

    Jamb studs stand either side of the opening and rise to the top of the
    lintel. The lintel spans the opening plus both jambs, its ends housed
    into the jamb faces. Spans over the lintel threshold get a double-depth
    lintel. Windows also get a sill trimmer resting on the jack studs.
    """

    priority = 30
    dependencies = ["wall.plates"]

    def get_id(self) -> str:
        return "wall.openings"

    def get_name(self) -> str:
        return "Opening Framing"

    def applies(self, context: WallContext) -> bool:
        return len(context.openings) > 0

    def generate(self, context: WallContext) -> list[FrameComponent]:
        members: list[FrameComponent] = []
        for opening in context.openings:
            members.extend(self._frame_opening(opening, context))
        return members

    def _frame_opening(self, opening: Opening, context: WallContext) -> list[FrameComponent]:
        t = context.thickness
        head = opening.head_height
        lintel_depth = context.lintel_depth(opening)
        tags = {"opening": opening.id} if opening.id else {}

        jamb_top = min(head + lintel_depth, context.stud_top)
        members = [
            context.stud(ComponentKind.JAMB_STUD, opening.start_x - t,
                         context.stud_bottom, jamb_top, tags=tags),
            context.stud(ComponentKind.JAMB_STUD, opening.end_x,
                         context.stud_bottom, jamb_top, tags=tags),
        ]

        # On edge, centred in the wall thickness; ends sit in housings in the jambs
        members.append(context.member(
            ComponentKind.LINTEL,
            opening.start_x - t, head,
            opening.width + 2 * t, lintel_depth,
            z=(context.depth - t) / 2,
            depth=t,
            label=context.section(lintel_depth),
            tags=tags,
        ))

        if opening.sill_height > 0:
            members.append(context.member(
                ComponentKind.SILL_TRIMMER,
                opening.start_x, opening.sill_height,
                opening.width, t,
                tags=tags,
            ))

        return members
