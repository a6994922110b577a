"""Wall context — accumulates members while a single wall is framed."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import AnnotatedWall, CornerType, Opening, WallSpec
from .framing import ComponentKind, FrameComponent, VERTICAL_KINDS
from .geometry import Point3D
from .parameters import GenerationConfig, LayoutRules
from .profiles import TimberProfile, section_label


class WallContext(BaseModel):
    """
    Holds all state during the framing of one wall.

    The junction solver supplies trims and corner treatments, rules add
    generated members in priority order, and later rules may read the
    members earlier rules produced (noggins fit between studs).
    """
    # Input
    annotated: AnnotatedWall
    profile: TimberProfile
    rules: LayoutRules = Field(default_factory=LayoutRules)
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Output (populated by rules)
    members: list[FrameComponent] = []

    def add_members(self, members: list[FrameComponent]) -> None:
        self.members.extend(members)

    # -- wall dimensions ----------------------------------------------------

    @property
    def wall(self) -> WallSpec:
        return self.annotated.wall

    @property
    def thickness(self) -> float:
        return self.profile.thickness

    @property
    def depth(self) -> float:
        return self.profile.depth

    @property
    def span_start(self) -> float:
        return self.annotated.junction.trim_start

    @property
    def span_end(self) -> float:
        return self.wall.length - self.annotated.junction.trim_end

    @property
    def span_length(self) -> float:
        return self.span_end - self.span_start

    @property
    def stud_bottom(self) -> float:
        """Top face of the bottom plate."""
        return self.thickness

    @property
    def stud_top(self) -> float:
        """Underside of the lower top plate."""
        return self.wall.height - 2 * self.thickness

    @property
    def is_degenerate(self) -> bool:
        return (
            self.span_length < self.thickness
            or self.wall.height <= 3 * self.thickness
        )

    @property
    def corner_start(self) -> CornerType:
        return self.annotated.junction.corner_start

    @property
    def corner_end(self) -> CornerType:
        return self.annotated.junction.corner_end

    # -- openings -----------------------------------------------------------

    @property
    def openings(self) -> list[Opening]:
        """Openings with a usable size, in order along the wall."""
        usable = [o for o in self.wall.openings if o.width > 0 and o.height > 0]
        return sorted(usable, key=lambda o: o.start_x)

    @property
    def doors(self) -> list[Opening]:
        return [o for o in self.openings if o.is_door]

    def opening_at(self, x: float) -> Opening | None:
        """First opening whose span strictly contains x."""
        for opening in self.openings:
            if opening.contains_x(x):
                return opening
        return None

    def lintel_depth(self, opening: Opening) -> float:
        if opening.width > self.rules.lintel_span_threshold:
            return 2 * self.depth
        return self.depth

    # -- stud grid ----------------------------------------------------------

    def stud_grid(self) -> list[float]:
        """Left-face positions of the regular stud grid.

        Steps from the trimmed start by the stud spacing and always finishes
        with a stud flush to the trimmed end.
        """
        first = self.span_start
        last = self.span_end - self.thickness
        if last < first:
            return []

        positions: list[float] = []
        pos = first
        while pos < last - 1e-6:
            positions.append(pos)
            pos += self.wall.stud_spacing
        positions.append(last)
        return positions

    def vertical_positions(self) -> list[float]:
        """Distinct x positions of the vertical members framed so far."""
        xs = sorted(m.origin.x for m in self.members if m.kind in VERTICAL_KINDS)
        distinct: list[float] = []
        for x in xs:
            if distinct and x - distinct[-1] < self.rules.position_merge_tolerance:
                continue
            distinct.append(x)
        return distinct

    # -- member construction ------------------------------------------------

    def section(self, depth: float | None = None) -> str:
        return section_label(
            self.depth if depth is None else depth, self.thickness, self.wall.grade,
        )

    def member(
        self,
        kind: ComponentKind,
        x: float, y: float,
        length: float, width: float,
        z: float = 0.0,
        depth: float | None = None,
        rotation_degrees: float = 0.0,
        label: str | None = None,
        tags: dict[str, str] | None = None,
    ) -> FrameComponent:
        """Build a member cut from this wall's section unless told otherwise."""
        return FrameComponent(
            kind=kind,
            origin=Point3D(x=x, y=y, z=z),
            length=length,
            width=width,
            depth=self.depth if depth is None else depth,
            rotation_degrees=rotation_degrees,
            section_label=label or self.section(),
            tags=tags or {},
        )

    def stud(
        self, kind: ComponentKind, x: float, bottom: float, top: float,
        tags: dict[str, str] | None = None,
    ) -> FrameComponent:
        return self.member(kind, x, bottom, self.thickness, top - bottom, tags=tags)
