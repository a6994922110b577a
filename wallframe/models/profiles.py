"""Timber section table.

Sections are named "<depth>x<thickness>" in millimetres. Depth is the
through-wall dimension of a stud; thickness is what a stud consumes along
the wall run and what a plate stacks vertically.
"""

from __future__ import annotations
import logging
from enum import Enum
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class TimberGrade(str, Enum):
    MGP10 = "MGP10"
    MGP12 = "MGP12"
    MGP15 = "MGP15"


class TimberProfile(BaseModel):
    """Cross-section of a structural timber member."""
    model_config = ConfigDict(frozen=True)

    name: str
    depth: float       # Through-wall / in-plane dimension (e.g. 90)
    thickness: float   # Dimension along the wall run (e.g. 45)


DEFAULT_PROFILE = "90x45"

TIMBER_PROFILES: dict[str, TimberProfile] = {
    p.name: p for p in (
        TimberProfile(name="70x35", depth=70, thickness=35),
        TimberProfile(name="90x35", depth=90, thickness=35),
        TimberProfile(name="90x45", depth=90, thickness=45),
        TimberProfile(name="140x45", depth=140, thickness=45),
    )
}

BRACE_SECTION_LABEL = "Metal strap brace"


def get_profile(
    name: str, profiles: dict[str, TimberProfile] | None = None,
) -> TimberProfile:
    """Look up a profile by name, falling back to the default section."""
    table = TIMBER_PROFILES if profiles is None else profiles
    profile = table.get(name)
    if profile is not None:
        return profile

    fallback = table.get(DEFAULT_PROFILE) or TIMBER_PROFILES[DEFAULT_PROFILE]
    logger.warning("Unknown timber profile %r, using %s", name, fallback.name)
    return fallback


def format_mm(value: float) -> str:
    """Render a dimension without a trailing '.0' for whole millimetres."""
    return f"{value:g}"


def section_label(depth: float, thickness: float, grade: TimberGrade) -> str:
    """Label identifying a purchasable section, e.g. '90x45 MGP10'."""
    return f"{format_mm(depth)}x{format_mm(thickness)} {grade.value}"
