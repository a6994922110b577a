"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from wallframe.models import (
    BillOfMaterials, FrameComponent, GenerationConfig, StockOptions,
    StructureGeometry, TimberProfile, WallSpec,
)


class GeometryRequest(BaseModel):
    """Walls as sent from the plan editor."""
    walls: list[WallSpec]
    config: GenerationConfig = GenerationConfig()


class BomRequest(BaseModel):
    """Components to cost, usually the output of /geometry."""
    components: list[FrameComponent]
    stock: StockOptions | None = None


class GenerateRequest(BaseModel):
    """Request body for the /generate endpoint."""
    walls: list[WallSpec]
    config: GenerationConfig = GenerationConfig()
    stock: StockOptions | None = None


class GenerateResponse(BaseModel):
    """Response from the /generate endpoint."""
    geometry: StructureGeometry
    bom: BillOfMaterials
    wall_count: int


class RuleInfo(BaseModel):
    id: str
    name: str


class ProfileList(BaseModel):
    profiles: list[TimberProfile]
