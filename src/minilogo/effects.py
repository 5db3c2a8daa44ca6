"""Drawing effects produced by the evaluator for an external renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from minilogo.turtle import Pose


@dataclass(frozen=True, slots=True)
class ClearSurface:
    """Erase the whole drawing surface."""


@dataclass(frozen=True, slots=True)
class DrawLine:
    """Stroke a straight segment between two poses."""

    start: Pose
    end: Pose
    color: str


@dataclass(frozen=True, slots=True)
class RenderCursor:
    """Draw the turtle glyph at its final pose."""

    pose: Pose


Effect = Union[ClearSurface, DrawLine, RenderCursor]


def _pose_dict(pose: Pose) -> dict[str, float]:
    return {"x": pose.x, "y": pose.y, "heading": pose.heading}


def effect_to_dict(effect: Effect) -> dict[str, Any]:
    """Convert an effect to a JSON-serializable dict tagged by ``type``."""
    if isinstance(effect, ClearSurface):
        return {"type": "clear"}
    if isinstance(effect, DrawLine):
        return {
            "type": "line",
            "from": _pose_dict(effect.start),
            "to": _pose_dict(effect.end),
            "color": effect.color,
        }
    if isinstance(effect, RenderCursor):
        return {"type": "cursor", "pose": _pose_dict(effect.pose)}
    raise TypeError(f"not an effect: {type(effect).__name__}")
