"""Turtle state: the drawing surface, poses, and the mutable turtle record."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_COLOR = "#000000"


@dataclass(frozen=True, slots=True)
class Surface:
    """Drawing surface size in pixels; y grows downward."""

    width: float = 365.0
    height: float = 365.0


@dataclass(frozen=True, slots=True)
class Pose:
    """Turtle position and heading (radians, 0 = east) at a point in time."""

    x: float
    y: float
    heading: float


@dataclass(slots=True)
class Turtle:
    """Mutable turtle state owned by a single evaluator run."""

    x: float
    y: float
    heading: float
    color: str = DEFAULT_COLOR

    @classmethod
    def centered(cls, surface: Surface) -> Turtle:
        """A fresh turtle in the middle of *surface*, pointing up."""
        return cls(surface.width / 2.0, surface.height / 2.0, math.pi / 2.0)

    @property
    def pose(self) -> Pose:
        return Pose(self.x, self.y, self.heading)
