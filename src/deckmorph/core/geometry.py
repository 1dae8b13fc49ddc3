"""Axis-aligned rectangle helpers used by the transition stages."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Rect:
    """A rectangle in virtual stage coordinates (origin top-left)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def intersection(self, other: "Rect") -> "Rect":
        """Overlapping part of both rectangles (zero-sized when disjoint)."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(
            x=left,
            y=top,
            width=max(right - left, 0.0),
            height=max(bottom - top, 0.0),
        )


class StageEdge(str, Enum):
    """Stage side a shape is revealed from. Order matters for ties."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


def closest_stage_edge(rect: Rect, stage_width: float, stage_height: float) -> StageEdge:
    """Return the stage edge nearest to the rectangle.

    Distances are clamped at 0 for shapes overflowing the stage. On a tie the
    first edge in LEFT, RIGHT, TOP, BOTTOM order wins.
    """
    distances = {
        StageEdge.LEFT: max(rect.left, 0.0),
        StageEdge.RIGHT: max(stage_width - rect.right, 0.0),
        StageEdge.TOP: max(rect.top, 0.0),
        StageEdge.BOTTOM: max(stage_height - rect.bottom, 0.0),
    }
    closest = StageEdge.LEFT
    for edge, distance in distances.items():
        if distance < distances[closest]:
            closest = edge
    return closest
