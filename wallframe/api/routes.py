"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from wallframe.models import BillOfMaterials, StructureGeometry
from wallframe.services.frame_service import FrameService
from wallframe.api.schemas import (
    BomRequest, GenerateRequest, GenerateResponse, GeometryRequest,
    ProfileList, RuleInfo,
)

router = APIRouter()

# Shared service instance; it holds no per-request state
_service = FrameService()


@router.post("/geometry", response_model=StructureGeometry)
async def compute_geometry(request: GeometryRequest) -> StructureGeometry:
    """Frame every wall and return the placed components."""
    return _service.generate(request.walls, config=request.config)


@router.post("/bom", response_model=BillOfMaterials)
async def compute_bom(request: BomRequest) -> BillOfMaterials:
    """Cutting lists and stock order for a set of components."""
    return _service.compute_bill_of_materials(request.components, request.stock)


@router.post("/generate", response_model=GenerateResponse)
async def generate(request: GenerateRequest) -> GenerateResponse:
    """Frame the walls and cost the result in one round trip."""
    geometry = _service.generate(request.walls, config=request.config)
    bom = _service.compute_bill_of_materials(geometry.components, request.stock)
    return GenerateResponse(
        geometry=geometry,
        bom=bom,
        wall_count=len(request.walls),
    )


@router.get("/profiles", response_model=ProfileList)
async def list_profiles() -> ProfileList:
    return ProfileList(profiles=_service.list_profiles())


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available framing rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
