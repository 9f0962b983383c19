"""Layout - immutable split configuration

A Layout is built once per UI region and reused on every resize::

    body = new_layout(Direction.HORIZONTAL, Length(20), Fill(1)).with_margin(1)
    sidebar, main = body.split(Rect(0, 0, cols, rows))

``with_margin`` / ``with_spacing`` return new values; a Layout can be shared
between threads and stored in module constants.
"""

from dataclasses import dataclass, field, replace

from .constraints import Constraint
from .geometry import Direction, Rect
from .solver import solve


@dataclass(frozen=True)
class Layout:
    """Direction + ordered constraints + outer margin + inter-region spacing."""

    direction: Direction
    constraints: tuple[Constraint, ...] = field(default_factory=tuple)
    margin: int = 0
    spacing: int = 0

    def __post_init__(self) -> None:
        # frozen: 通过 object.__setattr__ 规范化字段
        object.__setattr__(self, "constraints", tuple(self.constraints))
        object.__setattr__(self, "margin", max(0, int(self.margin)))
        object.__setattr__(self, "spacing", max(0, int(self.spacing)))

    def with_margin(self, n: int) -> "Layout":
        """Copy with margin set to max(0, n)."""
        return replace(self, margin=max(0, n))

    def with_spacing(self, n: int) -> "Layout":
        """Copy with spacing set to max(0, n)."""
        return replace(self, spacing=max(0, n))

    def split(self, area: Rect) -> list[Rect]:
        """Divide ``area`` into one Rect per constraint, in order.

        Raises:
            LayoutConfigError: a Ratio constraint has denominator 0
        """
        return solve(area, self.direction, self.constraints, self.margin, self.spacing)


def new_layout(direction: Direction, *constraints: Constraint) -> Layout:
    """Build a Layout with zero margin and zero spacing."""
    return Layout(direction=direction, constraints=tuple(constraints))


def horizontal(*constraints: Constraint) -> Layout:
    return new_layout(Direction.HORIZONTAL, *constraints)


def vertical(*constraints: Constraint) -> Layout:
    return new_layout(Direction.VERTICAL, *constraints)
