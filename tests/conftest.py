"""Shared fixtures for framing tests.

Walls default to the 3600 x 2400 wall in 90x45 at 450 centres used
throughout the examples; the `frame` fixture lays out a single wall in its
local frame without junction solving.
"""

from __future__ import annotations

import pytest

from wallframe.core.generator import FrameGenerator
from wallframe.core.registry import create_default_registry
from wallframe.models import (
    AnnotatedWall, ComponentKind, FrameComponent, JunctionAnnotation,
    Opening, WallSpec, get_profile,
)


def make_wall(wall_id: str = "A", **kwargs) -> WallSpec:
    data = {"id": wall_id, "length": 3600, "height": 2400,
            "stud_profile": "90x45", "stud_spacing": 450}
    data.update(kwargs)
    return WallSpec(**data)


@pytest.fixture
def generator() -> FrameGenerator:
    return FrameGenerator(create_default_registry())


@pytest.fixture
def frame(generator):
    """Lay out one wall, optionally with junction annotations."""

    def _frame(wall: WallSpec, junction: JunctionAnnotation | None = None) -> list[FrameComponent]:
        annotated = AnnotatedWall(wall=wall, junction=junction or JunctionAnnotation())
        return generator.frame_wall(annotated, get_profile(wall.stud_profile))

    return _frame


@pytest.fixture
def wall_factory():
    return make_wall


@pytest.fixture
def plain_wall() -> WallSpec:
    return make_wall()


@pytest.fixture
def door_wall() -> WallSpec:
    return make_wall(openings=[
        Opening(start_x=1000, width=900, height=2100, sill_height=0),
    ])


@pytest.fixture
def window_wall() -> WallSpec:
    return make_wall(openings=[
        Opening(id="W1", start_x=1000, width=1500, height=1200, sill_height=900),
    ])


def of_kind(components: list[FrameComponent], kind: ComponentKind) -> list[FrameComponent]:
    return [c for c in components if c.kind == kind]


@pytest.fixture
def kinds():
    return of_kind
