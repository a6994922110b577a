"""Main frame generator — orchestrates junction solving and rule execution."""

from __future__ import annotations
import logging

from wallframe.models import (
    AnnotatedWall, FrameComponent, GenerationConfig, LayoutRules,
    TimberProfile, WallContext, WallSpec, WallTransform, get_profile,
)
from wallframe.core.registry import RuleRegistry
from wallframe.core.junctions import JunctionSolver

logger = logging.getLogger(__name__)


class FrameGenerator:
    """
    Stateless frame generator.

    Takes walls, solves their junctions, frames each wall independently
    with the applicable rules and concatenates the results.
    """

    def __init__(
        self,
        registry: RuleRegistry,
        rules: LayoutRules | None = None,
        solver: JunctionSolver | None = None,
    ) -> None:
        self.registry = registry
        self.rules = rules or LayoutRules()
        self.solver = solver or JunctionSolver()

    def generate(
        self,
        walls: list[WallSpec],
        profiles: dict[str, TimberProfile] | None = None,
        config: GenerationConfig | None = None,
    ) -> tuple[list[AnnotatedWall], list[FrameComponent]]:
        """Frame a whole structure.

        Returns the junction-annotated walls alongside the placed components
        so callers can report trims without solving twice.
        """
        if config is None:
            config = GenerationConfig()

        annotated = self.solver.solve(walls, profiles)

        components: list[FrameComponent] = []
        for item in annotated:
            profile = get_profile(item.wall.stud_profile, profiles)
            components.extend(self.place(item.wall, self.frame_wall(item, profile, config)))

        logger.info("Framed %d walls into %d components", len(walls), len(components))
        return annotated, components

    def frame_wall(
        self,
        annotated: AnnotatedWall,
        profile: TimberProfile,
        config: GenerationConfig | None = None,
    ) -> list[FrameComponent]:
        """Members for one wall in its local frame."""
        context = WallContext(
            annotated=annotated,
            profile=profile,
            rules=self.rules,
            config=config or GenerationConfig(),
        )
        if context.is_degenerate:
            logger.debug(
                "Wall %s is too small to frame (span %.1f, height %.1f)",
                annotated.wall.id, context.span_length, annotated.wall.height,
            )
            return []

        for rule in self.registry.get_applicable_rules(context):
            context.add_members(rule.generate(context))

        return context.members

    @staticmethod
    def place(wall: WallSpec, members: list[FrameComponent]) -> list[FrameComponent]:
        """Tag members with their wall id and world transform."""
        transform = WallTransform(
            x=wall.position.x,
            y=wall.position.y,
            rotation_degrees=wall.position.rotation_degrees,
            flipped=wall.flipped,
        )
        return [
            m.model_copy(update={"wall_id": wall.id, "transform": transform})
            for m in members
        ]
