"""Framing constants, stock options and rule selection."""

from __future__ import annotations
from pydantic import BaseModel, Field, field_validator

from wallframe.config import Settings, get_settings


class LayoutRules(BaseModel):
    """Fixed framing-practice dimensions used by the layout rules (mm)."""
    lintel_span_threshold: float = 1200.0  # Wider spans get the deep lintel
    min_stud_segment: float = 20.0         # Shorter jack/cripple studs are slivers
    position_merge_tolerance: float = 1.0  # Vertical members closer than this coincide
    min_noggin_gap: float = 10.0
    noggin_stagger: float = 25.0
    min_brace_panel: float = 1200.0
    brace_padding: float = 150.0           # Clear run kept at each end of a panel
    min_brace_run: float = 500.0
    brace_width: float = 30.0              # Strap width
    brace_thickness: float = 2.0
    brace_lift: float = 10.0               # Height of the brace foot above the bottom plate
    brace_standoff: float = 1.0            # Gap between stud face and strap
    corner_block_height: float = 300.0


class StockOptions(BaseModel):
    """Catalog and cutting allowances for stock optimisation."""
    stock_lengths: list[float] = Field(default_factory=lambda: get_settings().stock_lengths)
    kerf: float = Field(default_factory=lambda: get_settings().kerf)
    custom_length_increment: float = Field(
        default_factory=lambda: get_settings().custom_length_increment,
    )

    @field_validator("stock_lengths")
    @classmethod
    def _ascending(cls, v: list[float]) -> list[float]:
        return sorted(length for length in v if length > 0)

    @field_validator("kerf")
    @classmethod
    def _no_negative_kerf(cls, v: float) -> float:
        return max(0.0, v)

    @field_validator("custom_length_increment")
    @classmethod
    def _positive_increment(cls, v: float) -> float:
        return v if v > 0 else 600.0

    @classmethod
    def from_settings(cls, settings: Settings) -> StockOptions:
        return cls(
            stock_lengths=settings.stock_lengths,
            kerf=settings.kerf,
            custom_length_increment=settings.custom_length_increment,
        )


class GenerationConfig(BaseModel):
    """Controls which rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
