"""High-level framing service — facade for the API layer and library callers.

Every call runs the full pipeline (junctions, per-wall layout, BOM) from
scratch. Nothing is cached between calls.
"""

from __future__ import annotations

from wallframe.config import get_settings
from wallframe.models import (
    BillOfMaterials, FrameComponent, GenerationConfig, LayoutRules,
    StockOptions, StructureGeometry, TimberProfile, TIMBER_PROFILES, WallSpec,
)
from wallframe.core.bom import build_bill_of_materials
from wallframe.core.generator import FrameGenerator
from wallframe.core.junctions import JunctionSolver
from wallframe.core.registry import RuleRegistry, create_default_registry


class FrameService:
    """Validates input, delegates to the generator, post-processes output."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        rules: LayoutRules | None = None,
        snap_tolerance: float | None = None,
        stock: StockOptions | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.generator = FrameGenerator(
            self.registry, rules=rules, solver=JunctionSolver(snap_tolerance),
        )
        self.stock = stock or StockOptions.from_settings(get_settings())

    def generate(
        self,
        walls: list[WallSpec],
        profiles: dict[str, TimberProfile] | None = None,
        config: GenerationConfig | None = None,
    ) -> StructureGeometry:
        annotated, components = self.generator.generate(walls, profiles, config)
        return StructureGeometry(
            components=components,
            junctions={a.wall.id: a.junction for a in annotated},
        )

    def compute_structure_geometry(
        self,
        walls: list[WallSpec],
        profiles: dict[str, TimberProfile] | None = None,
        config: GenerationConfig | None = None,
    ) -> list[FrameComponent]:
        _, components = self.generator.generate(walls, profiles, config)
        return components

    def compute_bill_of_materials(
        self,
        components: list[FrameComponent],
        stock: StockOptions | None = None,
    ) -> BillOfMaterials:
        return build_bill_of_materials(components, stock or self.stock)

    def list_rules(self) -> list[dict[str, str]]:
        return [r.describe() for r in self.registry.list_rules()]

    @staticmethod
    def list_profiles() -> list[TimberProfile]:
        return list(TIMBER_PROFILES.values())


def compute_structure_geometry(
    walls: list[WallSpec],
    profiles: dict[str, TimberProfile] | None = None,
) -> list[FrameComponent]:
    """Frame every wall, tagged with its wall id and world transform."""
    return FrameService().compute_structure_geometry(walls, profiles)


def compute_bill_of_materials(
    components: list[FrameComponent],
    stock: StockOptions | None = None,
) -> BillOfMaterials:
    """Cutting lists and stock orders for a set of components."""
    return build_bill_of_materials(components, stock)
