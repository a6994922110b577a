"""Tests for input coercion, the profile table and component geometry."""

import logging

import pytest

from wallframe.models import (
    CUT_AXIS, ComponentKind, FrameComponent, Opening, OpeningType, Point3D,
    TIMBER_PROFILES, TimberGrade, TimberProfile, WallSpec, WallTransform,
    get_profile, parse_number,
)


# =============================================================================
# Parse-with-default boundary
# =============================================================================


@pytest.mark.parametrize("value, expected", [
    (12, 12.0),
    ("450", 450.0),
    (" 2400mm ", 2400.0),
    ("abc", 7.0),
    (None, 7.0),
    ("", 7.0),
    (float("nan"), 7.0),
    (float("inf"), 7.0),
    (True, 7.0),
])
def test_parse_number(value, expected):
    assert parse_number(value, 7.0) == expected


class TestWallSpecCoercion:

    def test_bad_numbers_fall_back_to_defaults(self):
        wall = WallSpec(id=12, length="abc", height="2700", stud_spacing=None)
        assert wall.id == "12"
        assert wall.length == 3600
        assert wall.height == 2700
        assert wall.stud_spacing == 450

    def test_spacing_floored(self):
        assert WallSpec(id="a", stud_spacing="0").stud_spacing == 100
        assert WallSpec(id="a", stud_spacing=-450).stud_spacing == 100

    def test_flags_and_grade(self):
        wall = WallSpec(id="a", bracing_enabled="yes", flipped="maybe", grade="mgp12")
        assert wall.bracing_enabled is True
        assert wall.flipped is False
        assert wall.grade == TimberGrade.MGP12
        assert WallSpec(id="a", grade="F7").grade == TimberGrade.MGP10

    def test_missing_collections(self):
        wall = WallSpec(id="a", openings=None, position=None, stud_profile=None)
        assert wall.openings == []
        assert wall.position.rotation_degrees == 0
        assert wall.stud_profile == "90x45"

    def test_position_coerced(self):
        wall = WallSpec(id="a", position={"x": "100", "y": "oops", "rotation_degrees": "90"})
        assert wall.position.x == 100
        assert wall.position.y == 0
        assert wall.end.x == pytest.approx(100)
        assert wall.end.y == pytest.approx(3600)


class TestOpening:

    def test_coercion(self):
        o = Opening(start_x=None, width="1200mm", height="x", sill_height=-50)
        assert o.start_x == 0
        assert o.width == 1200
        assert o.height == 2100
        assert o.sill_height == 0

    def test_door_and_window(self):
        assert Opening(sill_height=0).type == OpeningType.DOOR
        assert Opening(sill_height=900).type == OpeningType.WINDOW

    def test_span_is_open_interval(self):
        o = Opening(start_x=1000, width=900)
        assert not o.contains_x(1000)
        assert o.contains_x(1000.5)
        assert not o.contains_x(1900)


# =============================================================================
# Profiles
# =============================================================================


def test_profile_table():
    assert set(TIMBER_PROFILES) == {"70x35", "90x35", "90x45", "140x45"}
    p = get_profile("90x45")
    assert (p.depth, p.thickness) == (90, 45)


def test_unknown_profile_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="wallframe.models.profiles"):
        p = get_profile("200x50")
    assert p.name == "90x45"
    assert "200x50" in caplog.text


def test_custom_profile_table():
    table = {"120x45": TimberProfile(name="120x45", depth=120, thickness=45)}
    assert get_profile("120x45", table).depth == 120
    # Table without the default still falls back to the built-in one
    assert get_profile("90x90", table).name == "90x45"


# =============================================================================
# Components
# =============================================================================


def test_every_kind_has_a_cut_axis():
    assert set(CUT_AXIS) == set(ComponentKind)


def test_derived_cut_length_serialised():
    c = FrameComponent(
        kind=ComponentKind.COMMON_STUD, origin=Point3D(x=0, y=45, z=0),
        length=45, width=2265, depth=90, section_label="90x45 MGP10",
    )
    dumped = c.model_dump()
    assert dumped["derived_cut_length"] == 2265
    # Round-trips: the computed field is ignored on the way back in
    assert FrameComponent.model_validate(dumped) == c


def test_local_corners_of_unrotated_box():
    c = FrameComponent(
        kind=ComponentKind.NOGGIN, origin=Point3D(x=45, y=1200, z=0),
        length=405, width=45, depth=90, section_label="90x45 MGP10",
    )
    corners = c.local_corners()
    assert len(corners) == 8
    assert corners[0] == (45, 1200, 0)
    assert corners[2] == (450, 1245, 0)
    assert corners[6] == (450, 1245, 90)
    assert c.world_corners() == corners


def test_transform_rotates_into_plan():
    t = WallTransform(x=1000, y=500, rotation_degrees=180)
    x, y, z = t.to_world((100, 2400, 0))
    assert x == pytest.approx(900)
    assert y == pytest.approx(500)
    assert z == 2400
