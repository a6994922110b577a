"""Stud grid — common studs, with jack and cripple studs inside openings."""

from __future__ import annotations

from wallframe.rules.base import FramingRule
from wallframe.models import ComponentKind, FrameComponent, WallContext


class StudRule(FramingRule):
    """Regular studs at the wall's spacing, flush at both trimmed ends.

    A grid stud whose centre lands inside an opening is replaced by a jack
    stud from the bottom plate up to the sill and a cripple stud over the
    lintel, whichever of those is tall enough to be worth cutting.
    """

    priority = 20
    dependencies = ["wall.plates"]

    def get_id(self) -> str:
        return "wall.studs"

    def get_name(self) -> str:
        return "Stud Grid"

    def applies(self, context: WallContext) -> bool:
        return True

    def generate(self, context: WallContext) -> list[FrameComponent]:
        members: list[FrameComponent] = []
        t = context.thickness
        min_segment = context.rules.min_stud_segment

        for x in context.stud_grid():
            opening = context.opening_at(x + t / 2)
            if opening is None:
                members.append(context.stud(
                    ComponentKind.COMMON_STUD, x, context.stud_bottom, context.stud_top,
                ))
                continue

            if opening.sill_height > 0:
                top = opening.sill_height
                if top - context.stud_bottom > min_segment:
                    members.append(context.stud(
                        ComponentKind.JACK_STUD, x, context.stud_bottom, top,
                    ))

            bottom = opening.head_height + context.lintel_depth(opening)
            if context.stud_top - bottom > min_segment:
                members.append(context.stud(
                    ComponentKind.CRIPPLE_STUD, x, bottom, context.stud_top,
                ))

        return members
