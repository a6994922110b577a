"""Building element models — walls, openings and junction annotations.

Numeric fields go through a parse-with-default boundary: text is parsed,
and anything missing or unparsable falls back to the field default. Past
validation the engine only ever sees plain floats.
"""

from __future__ import annotations
import math
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .geometry import Point2D, direction_from_angle
from .profiles import DEFAULT_PROFILE, TimberGrade

MIN_STUD_SPACING = 100.0

_TRUE_WORDS = {"1", "true", "yes", "y", "on"}
_FALSE_WORDS = {"0", "false", "no", "n", "off", ""}


def parse_number(value: Any, default: float) -> float:
    """Parse a number from loosely-typed input, returning `default` on failure."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip().lower().removesuffix("mm").strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def parse_flag(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    return default


def _field_default(cls: type[BaseModel], info: ValidationInfo) -> Any:
    return cls.model_fields[info.field_name].default


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class CornerType(str, Enum):
    NONE = "none"
    THROUGH = "through"


class Opening(BaseModel):
    """A rough opening positioned along a wall.

    `start_x` is measured from the wall start to the near jamb face.
    A zero sill height makes the opening a door.
    """
    model_config = ConfigDict(frozen=True)

    id: str = ""
    start_x: float = 0.0
    width: float = 900.0
    height: float = 2100.0
    sill_height: float = 0.0

    @field_validator("start_x", "width", "height", "sill_height", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any, info: ValidationInfo) -> float:
        return parse_number(v, _field_default(cls, info))

    @field_validator("sill_height")
    @classmethod
    def _no_negative_sill(cls, v: float) -> float:
        return max(0.0, v)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @property
    def type(self) -> OpeningType:
        return OpeningType.DOOR if self.sill_height == 0 else OpeningType.WINDOW

    @property
    def is_door(self) -> bool:
        return self.type == OpeningType.DOOR

    @property
    def end_x(self) -> float:
        return self.start_x + self.width

    @property
    def head_height(self) -> float:
        return self.sill_height + self.height

    def contains_x(self, x: float) -> bool:
        """True if x lies strictly inside the opening span."""
        return self.start_x < x < self.end_x

    def contains_y(self, y: float) -> bool:
        return self.sill_height <= y <= self.head_height


class WallPosition(BaseModel):
    """Plan placement of a wall's start point."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    rotation_degrees: float = 0.0

    @field_validator("x", "y", "rotation_degrees", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any, info: ValidationInfo) -> float:
        return parse_number(v, _field_default(cls, info))


class WallSpec(BaseModel):
    """A straight stud wall as edited by the plan editor."""
    model_config = ConfigDict(frozen=True)

    id: str
    length: float = 3600.0
    height: float = 2400.0
    stud_profile: str = DEFAULT_PROFILE
    stud_spacing: float = 450.0
    openings: list[Opening] = Field(default_factory=list)
    bracing_enabled: bool = False
    position: WallPosition = Field(default_factory=WallPosition)
    flipped: bool = False
    grade: TimberGrade = TimberGrade.MGP10

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("stud_profile", mode="before")
    @classmethod
    def _coerce_profile(cls, v: Any) -> str:
        if v is None or not str(v).strip():
            return DEFAULT_PROFILE
        return str(v).strip()

    @field_validator("length", "height", "stud_spacing", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any, info: ValidationInfo) -> float:
        return parse_number(v, _field_default(cls, info))

    @field_validator("stud_spacing")
    @classmethod
    def _floor_spacing(cls, v: float) -> float:
        # The stud grid only terminates for a positive step.
        return max(MIN_STUD_SPACING, v)

    @field_validator("bracing_enabled", "flipped", mode="before")
    @classmethod
    def _coerce_flag(cls, v: Any, info: ValidationInfo) -> bool:
        return parse_flag(v, _field_default(cls, info))

    @field_validator("grade", mode="before")
    @classmethod
    def _coerce_grade(cls, v: Any) -> TimberGrade:
        try:
            return TimberGrade(str(v).strip().upper())
        except ValueError:
            return TimberGrade.MGP10

    @field_validator("openings", mode="before")
    @classmethod
    def _coerce_openings(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("position", mode="before")
    @classmethod
    def _coerce_position(cls, v: Any) -> Any:
        return WallPosition() if v is None else v

    @property
    def start(self) -> Point2D:
        return Point2D(x=self.position.x, y=self.position.y)

    @property
    def end(self) -> Point2D:
        direction = direction_from_angle(self.position.rotation_degrees)
        return Point2D(
            x=self.position.x + direction.x * self.length,
            y=self.position.y + direction.y * self.length,
        )


class JunctionAnnotation(BaseModel):
    """Per-wall result of junction solving."""
    model_config = ConfigDict(frozen=True)

    trim_start: float = 0.0
    trim_end: float = 0.0
    corner_start: CornerType = CornerType.NONE
    corner_end: CornerType = CornerType.NONE


class AnnotatedWall(BaseModel):
    """A wall paired with the annotations derived from its neighbours."""
    model_config = ConfigDict(frozen=True)

    wall: WallSpec
    junction: JunctionAnnotation = Field(default_factory=JunctionAnnotation)
