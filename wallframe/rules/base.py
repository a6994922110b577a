"""Interface shared by the wall framing rules.

A rule looks at one wall (through its WallContext) and returns the
members it is responsible for, in wall-local coordinates. Rules may read
what earlier rules produced from `context.members`.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from wallframe.models.context import WallContext
from wallframe.models.framing import FrameComponent


class FramingRule(ABC):
    """One family of framing members (plates, studs, noggins, ...)."""

    # Run order among rules with no dependency between them; lower first.
    priority: int = 100

    # Rule ids whose members this rule reads from the context.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Stable dotted id, e.g. 'wall.noggins'."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def applies(self, context: WallContext) -> bool:
        """Whether the wall needs anything from this rule."""
        ...

    @abstractmethod
    def generate(self, context: WallContext) -> list[FrameComponent]:
        ...

    def describe(self) -> dict[str, str]:
        return {"id": self.get_id(), "name": self.get_name()}
