"""Bill of materials models — cutting lists and stock orders."""

from __future__ import annotations
from pydantic import BaseModel, Field, computed_field

from .framing import ComponentKind


class CutListEntry(BaseModel):
    """`count` members of one kind, all docked to the same length."""
    kind: ComponentKind
    cut_length: float
    count: int


class StockBin(BaseModel):
    """One purchased length of stock and the pieces cut from it."""
    stock_length: float
    kerf: float = 0.0
    pieces: list[float] = Field(default_factory=list)
    custom: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def used_length(self) -> float:
        return sum(self.pieces) + self.kerf * len(self.pieces)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def remaining(self) -> float:
        return self.stock_length - self.used_length

    def fits(self, piece: float) -> bool:
        return self.remaining >= piece + self.kerf


class StockOrderLine(BaseModel):
    stock_length: float
    count: int
    custom: bool = False


class BomSection(BaseModel):
    """Everything cut from one purchasable section."""
    section_label: str
    is_timber: bool = True
    cut_list: list[CutListEntry] = Field(default_factory=list)
    total_linear_length: float = 0.0
    stock_order: list[StockOrderLine] = Field(default_factory=list)
    bins: list[StockBin] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def piece_count(self) -> int:
        return sum(e.count for e in self.cut_list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_stock_length(self) -> float:
        return sum(line.stock_length * line.count for line in self.stock_order)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def waste_length(self) -> float:
        if not self.stock_order:
            return 0.0
        return self.total_stock_length - self.total_linear_length


class BillOfMaterials(BaseModel):
    """Purchase order for a whole structure, one entry per section."""
    sections: list[BomSection] = Field(default_factory=list)

    def section(self, label: str) -> BomSection | None:
        for s in self.sections:
            if s.section_label == label:
                return s
        return None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_stock_length(self) -> float:
        return sum(s.total_stock_length for s in self.sections)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_linear_length(self) -> float:
        return sum(s.total_linear_length for s in self.sections if s.is_timber)
