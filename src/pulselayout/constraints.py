"""Sizing constraints

Each constraint describes how much of the primary axis one output region
takes. They carry no behaviour; resolution lives in ``solver`` because Fill
depends on its siblings.

- Length: exact number of cells
- Percentage: share of the allocatable length (0-100)
- Ratio: numerator/denominator of the allocatable length
- Fill: weighted share of what the others leave over
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Length:
    """Exactly ``value`` cells, clamped to the allocatable length."""

    value: int


@dataclass(frozen=True)
class Percentage:
    """``value`` percent of the allocatable length."""

    value: float


@dataclass(frozen=True)
class Ratio:
    """``numerator / denominator`` of the allocatable length."""

    numerator: int
    denominator: int


@dataclass(frozen=True)
class Fill:
    """Share of the remaining length proportional to ``weight``."""

    weight: float = 1


Constraint = Union[Length, Percentage, Ratio, Fill]
