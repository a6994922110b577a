"""Timber framing output models."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, computed_field

from .building import JunctionAnnotation
from .geometry import Point3D, direction_from_angle


class ComponentKind(str, Enum):
    BOTTOM_PLATE = "bottom_plate"
    TOP_PLATE_LOWER = "top_plate_lower"
    TOP_PLATE_UPPER = "top_plate_upper"
    COMMON_STUD = "common_stud"
    JAMB_STUD = "jamb_stud"
    JACK_STUD = "jack_stud"
    CRIPPLE_STUD = "cripple_stud"
    LINTEL = "lintel"
    SILL_TRIMMER = "sill_trimmer"
    NOGGIN = "noggin"
    BRACE = "brace"
    CORNER_STUD = "corner_stud"
    CORNER_BLOCK = "corner_block"


class CutAxis(str, Enum):
    """Which box extent a member is docked to from stock."""
    RUN = "run"            # horizontal extent along the wall
    VERTICAL = "vertical"  # vertical extent
    DIAGONAL = "diagonal"  # rotated length of a brace


CUT_AXIS: dict[ComponentKind, CutAxis] = {
    ComponentKind.BOTTOM_PLATE: CutAxis.RUN,
    ComponentKind.TOP_PLATE_LOWER: CutAxis.RUN,
    ComponentKind.TOP_PLATE_UPPER: CutAxis.RUN,
    ComponentKind.COMMON_STUD: CutAxis.VERTICAL,
    ComponentKind.JAMB_STUD: CutAxis.VERTICAL,
    ComponentKind.JACK_STUD: CutAxis.VERTICAL,
    ComponentKind.CRIPPLE_STUD: CutAxis.VERTICAL,
    ComponentKind.LINTEL: CutAxis.RUN,
    ComponentKind.SILL_TRIMMER: CutAxis.RUN,
    ComponentKind.NOGGIN: CutAxis.RUN,
    ComponentKind.BRACE: CutAxis.DIAGONAL,
    ComponentKind.CORNER_STUD: CutAxis.VERTICAL,
    ComponentKind.CORNER_BLOCK: CutAxis.VERTICAL,
}

PLATE_KINDS = frozenset({
    ComponentKind.BOTTOM_PLATE,
    ComponentKind.TOP_PLATE_LOWER,
    ComponentKind.TOP_PLATE_UPPER,
})

# Members standing on the bottom plate; noggins are fitted between these.
VERTICAL_KINDS = frozenset({
    ComponentKind.COMMON_STUD,
    ComponentKind.JAMB_STUD,
    ComponentKind.JACK_STUD,
    ComponentKind.CRIPPLE_STUD,
    ComponentKind.CORNER_STUD,
})


def cut_length(kind: ComponentKind, length: float, width: float) -> float:
    """Length of stock consumed by one member of `kind` with the given box."""
    axis = CUT_AXIS[kind]
    if axis == CutAxis.VERTICAL:
        return width
    return length


class WallTransform(BaseModel):
    """Places wall-local coordinates in plan space.

    Local x runs along the wall from its start, local y is elevation and
    local z runs through the wall. World points are (plan x, plan y, elevation).
    """
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    rotation_degrees: float = 0.0
    flipped: bool = False

    def to_world(self, local: tuple[float, float, float]) -> tuple[float, float, float]:
        lx, ly, lz = local
        direction = direction_from_angle(self.rotation_degrees)
        normal = direction.perpendicular()
        if self.flipped:
            normal = normal * -1.0
        return (
            self.x + direction.x * lx + normal.x * lz,
            self.y + direction.y * lx + normal.y * lz,
            ly,
        )


class FrameComponent(BaseModel):
    """A single rectangular piece of timber (or strap) in wall-local space.

    `length`, `width` and `depth` are the box extents along the wall run,
    vertically and through the wall. Only braces carry an in-plane rotation,
    applied about `origin`.
    """
    model_config = ConfigDict(frozen=True)

    kind: ComponentKind
    origin: Point3D
    length: float
    width: float
    depth: float
    rotation_degrees: float = 0.0
    section_label: str
    wall_id: str = ""
    transform: WallTransform | None = None
    tags: dict[str, str] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def derived_cut_length(self) -> float:
        return cut_length(self.kind, self.length, self.width)

    @property
    def end_x(self) -> float:
        return self.origin.x + self.length

    def local_corners(self) -> list[tuple[float, float, float]]:
        """The 8 box corners in wall-local coordinates."""
        rad = math.radians(self.rotation_degrees)
        cos_a, sin_a = math.cos(rad), math.sin(rad)
        ox, oy, oz = self.origin.as_tuple()

        corners: list[tuple[float, float, float]] = []
        for dz in (0.0, self.depth):
            for dx, dy in ((0.0, 0.0), (self.length, 0.0),
                           (self.length, self.width), (0.0, self.width)):
                corners.append((
                    ox + dx * cos_a - dy * sin_a,
                    oy + dx * sin_a + dy * cos_a,
                    oz + dz,
                ))
        return corners

    def world_corners(self) -> list[tuple[float, float, float]]:
        """The 8 box corners in plan space (local corners if unplaced)."""
        corners = self.local_corners()
        if self.transform is None:
            return corners
        return [self.transform.to_world(c) for c in corners]


class FrameStats(BaseModel):
    """Summary statistics for a generated structure."""
    total_members: int = 0
    studs: int = 0
    plates: int = 0
    noggins: int = 0
    other: int = 0
    by_kind: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_components(cls, components: list[FrameComponent]) -> FrameStats:
        by_kind: dict[str, int] = {}
        for c in components:
            by_kind[c.kind.value] = by_kind.get(c.kind.value, 0) + 1
        studs = sum(1 for c in components if c.kind in VERTICAL_KINDS)
        plates = sum(1 for c in components if c.kind in PLATE_KINDS)
        noggins = by_kind.get(ComponentKind.NOGGIN.value, 0)
        return cls(
            total_members=len(components),
            studs=studs,
            plates=plates,
            noggins=noggins,
            other=len(components) - studs - plates - noggins,
            by_kind=by_kind,
        )


class StructureGeometry(BaseModel):
    """The complete generated frame for a set of walls."""
    components: list[FrameComponent]
    junctions: dict[str, JunctionAnnotation] = Field(default_factory=dict)
    stats: FrameStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = FrameStats.from_components(self.components)
