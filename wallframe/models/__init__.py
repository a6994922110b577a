from .geometry import Point2D, Point3D, Vector2D, direction_from_angle
from .profiles import (
    TimberProfile, TimberGrade, TIMBER_PROFILES, DEFAULT_PROFILE,
    BRACE_SECTION_LABEL, get_profile, section_label,
)
from .building import (
    Opening, OpeningType, WallPosition, WallSpec,
    CornerType, JunctionAnnotation, AnnotatedWall, parse_number,
)
from .framing import (
    ComponentKind, CutAxis, CUT_AXIS, FrameComponent, WallTransform,
    FrameStats, StructureGeometry, cut_length,
)
from .bom import CutListEntry, StockBin, StockOrderLine, BomSection, BillOfMaterials
from .parameters import LayoutRules, StockOptions, GenerationConfig
from .context import WallContext

__all__ = [
    "Point2D", "Point3D", "Vector2D", "direction_from_angle",
    "TimberProfile", "TimberGrade", "TIMBER_PROFILES", "DEFAULT_PROFILE",
    "BRACE_SECTION_LABEL", "get_profile", "section_label",
    "Opening", "OpeningType", "WallPosition", "WallSpec",
    "CornerType", "JunctionAnnotation", "AnnotatedWall", "parse_number",
    "ComponentKind", "CutAxis", "CUT_AXIS", "FrameComponent", "WallTransform",
    "FrameStats", "StructureGeometry", "cut_length",
    "CutListEntry", "StockBin", "StockOrderLine", "BomSection", "BillOfMaterials",
    "LayoutRules", "StockOptions", "GenerationConfig",
    "WallContext",
]
