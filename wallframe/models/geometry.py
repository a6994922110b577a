"""Geometric primitives used throughout the framing engine.

All lengths are millimetres. Plan coordinates are (x, y) on the floor;
world points add z as elevation.
"""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on the floor plane."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


class Point3D(BaseModel):
    """Point in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


class Vector2D(BaseModel):
    """2D direction on the floor plane."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation."""
        return Vector2D(x=-self.y, y=self.x)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(x=self.x * scalar, y=self.y * scalar)


def direction_from_angle(degrees: float) -> Vector2D:
    """Unit vector for a plan rotation in degrees (counterclockwise from +x)."""
    rad = math.radians(degrees)
    return Vector2D(x=math.cos(rad), y=math.sin(rad))
