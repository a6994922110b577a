"""Junction solving — reconciles walls that share a corner in plan.

At every shared endpoint one wall runs its plates through and receives a
corner stud, the other butts against it and is shortened by the through
wall's section depth. Walls are paired in input order: the earlier wall
of a pair runs through, the later one is trimmed.

A wall end takes part in at most one junction. When several walls meet at
one point, the first pairing in input order wins and later candidates for
an already-joined end are ignored (and logged).
"""

from __future__ import annotations
import logging

from wallframe.config import get_settings
from wallframe.models import (
    AnnotatedWall, CornerType, JunctionAnnotation, Point2D,
    TimberProfile, WallSpec, get_profile,
)

logger = logging.getLogger(__name__)

START = "start"
END = "end"


class JunctionSolver:
    """Stateless pairwise endpoint matcher."""

    def __init__(
        self,
        tolerance: float | None = None,
        profiles: dict[str, TimberProfile] | None = None,
    ) -> None:
        self.tolerance = get_settings().snap_tolerance if tolerance is None else tolerance
        self.profiles = profiles

    def solve(
        self,
        walls: list[WallSpec],
        profiles: dict[str, TimberProfile] | None = None,
    ) -> list[AnnotatedWall]:
        """Annotate every wall with trims and corner treatments."""
        table = self.profiles if profiles is None else profiles
        trims = [{START: 0.0, END: 0.0} for _ in walls]
        corners = [{START: CornerType.NONE, END: CornerType.NONE} for _ in walls]
        joined: set[tuple[int, str]] = set()

        for i, through in enumerate(walls):
            for j in range(i + 1, len(walls)):
                butting = walls[j]
                for through_end, through_pt in self._endpoints(through):
                    for butt_end, butt_pt in self._endpoints(butting):
                        if through_pt.distance_to(butt_pt) >= self.tolerance:
                            continue
                        if (i, through_end) in joined or (j, butt_end) in joined:
                            logger.warning(
                                "Ignoring junction %s.%s / %s.%s: end already joined",
                                through.id, through_end, butting.id, butt_end,
                            )
                            continue

                        joined.add((i, through_end))
                        joined.add((j, butt_end))
                        corners[i][through_end] = CornerType.THROUGH
                        trims[j][butt_end] = get_profile(
                            through.stud_profile, table,
                        ).depth
                        logger.debug(
                            "Junction: %s.%s runs through, %s.%s trimmed",
                            through.id, through_end, butting.id, butt_end,
                        )

        return [
            AnnotatedWall(
                wall=wall,
                junction=JunctionAnnotation(
                    trim_start=trims[k][START],
                    trim_end=trims[k][END],
                    corner_start=corners[k][START],
                    corner_end=corners[k][END],
                ),
            )
            for k, wall in enumerate(walls)
        ]

    def _endpoints(self, wall: WallSpec) -> list[tuple[str, Point2D]]:
        if wall.length <= 0:
            return []
        return [(START, wall.start), (END, wall.end)]
