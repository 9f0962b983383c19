"""Geometry primitives

Rect is the only type exchanged between the solver and its callers.
Direction picks the axis a Layout subdivides.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Split direction.

    - HORIZONTAL: split along width, height unchanged
    - VERTICAL: split along height, width unchanged
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle (cells)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, margin: int) -> "Rect":
        """Shrink by ``margin`` on every side; sizes floor at 0."""
        margin = max(0, margin)
        return Rect(
            x=self.x + margin,
            y=self.y + margin,
            width=max(0, self.width - 2 * margin),
            height=max(0, self.height - 2 * margin),
        )

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def primary_length(self, direction: Direction) -> int:
        """Length along the axis ``direction`` subdivides."""
        return self.width if direction is Direction.HORIZONTAL else self.height

    def cross_length(self, direction: Direction) -> int:
        return self.height if direction is Direction.HORIZONTAL else self.width
