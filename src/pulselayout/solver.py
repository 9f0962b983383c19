"""Split solver

Divides one Rect into one sub-Rect per constraint, in three passes:

1. resolve_fixed: Length / Percentage / Ratio against the allocatable length
2. distribute_fill: Fill weights share what is left, remainder front-loaded
3. assemble: walk the primary axis, applying margin and spacing

Rounding is round-half-up on exact rationals, so results never depend on
float representation. Over-constrained input is not shrunk: fixed sizes keep
their resolved values and Fill gets 0.
"""

import math
from collections.abc import Sequence
from fractions import Fraction

from .constraints import Constraint, Fill, Length, Percentage, Ratio
from .errors import LayoutConfigError
from .geometry import Direction, Rect
from .telemetry import get_logger

logger = get_logger(__name__)

_HALF = Fraction(1, 2)


def round_half_up(value: Fraction) -> int:
    """Round to nearest integer, halves away from -inf (2.5 -> 3)."""
    return math.floor(value + _HALF)


def exact(value: float | int) -> Fraction:
    """Rational of a number's decimal form (0.7 -> 7/10)."""
    return Fraction(str(value))


def allocatable_length(usable_primary: int, count: int, spacing: int) -> int:
    """Primary length left once inter-region spacing is taken out."""
    spacing_total = spacing * max(0, count - 1)
    return max(0, usable_primary - spacing_total)


def resolve_fixed(constraints: Sequence[Constraint], allocatable: int) -> list[int | None]:
    """Resolve every non-Fill constraint on its own.

    Returns one entry per constraint: the resolved size, or None for Fill.

    Raises:
        LayoutConfigError: a Ratio has denominator 0
    """
    sizes: list[int | None] = []
    for index, constraint in enumerate(constraints):
        if isinstance(constraint, Fill):
            sizes.append(None)
        elif isinstance(constraint, Length):
            sizes.append(min(max(int(constraint.value), 0), allocatable))
        elif isinstance(constraint, Percentage):
            value = round_half_up(allocatable * exact(constraint.value) / 100)
            sizes.append(max(0, value))
        elif isinstance(constraint, Ratio):
            if constraint.denominator == 0:
                raise LayoutConfigError(
                    f"constraint {index}: Ratio({constraint.numerator}, 0) has zero denominator"
                )
            value = round_half_up(
                allocatable * exact(constraint.numerator) / exact(constraint.denominator)
            )
            sizes.append(max(0, value))
        else:
            raise TypeError(f"constraint {index}: unsupported constraint {constraint!r}")
    return sizes


def distribute_fill(constraints: Sequence[Constraint], remaining: int) -> dict[int, int]:
    """Share ``remaining`` cells between the Fill constraints.

    Each Fill gets floor(remaining * weight / weight_sum); the leftover units
    go one each to positive-weight Fills in declaration order. Sizes sum to
    ``remaining`` whenever any Fill has positive weight.

    Returns:
        constraint index -> size, for Fill constraints only
    """
    weights: dict[int, Fraction] = {}
    for index, constraint in enumerate(constraints):
        if isinstance(constraint, Fill):
            weights[index] = max(exact(constraint.weight), Fraction(0))

    weight_sum = sum(weights.values(), Fraction(0))
    if weight_sum == 0 or remaining <= 0:
        return {index: 0 for index in weights}

    shares = {
        index: math.floor(remaining * weight / weight_sum) for index, weight in weights.items()
    }
    leftover = remaining - sum(shares.values())
    for index, weight in weights.items():
        if leftover <= 0:
            break
        if weight > 0:
            shares[index] += 1
            leftover -= 1
    return shares


def assemble(
    area: Rect,
    direction: Direction,
    sizes: Sequence[int],
    margin: int,
    spacing: int,
) -> list[Rect]:
    """Place sized regions along the primary axis, starting at the margin."""
    inner = area.inner(margin)
    usable_primary = inner.primary_length(direction)
    usable_cross = inner.cross_length(direction)
    # 无可用空间时所有区域都落在原点，不再按 spacing 前移
    step = spacing if usable_primary > 0 else 0

    if direction is Direction.HORIZONTAL:
        offset, cross = inner.x, inner.y
    else:
        offset, cross = inner.y, inner.x

    rects = []
    for size in sizes:
        if direction is Direction.HORIZONTAL:
            rects.append(Rect(x=offset, y=cross, width=size, height=usable_cross))
        else:
            rects.append(Rect(x=cross, y=offset, width=usable_cross, height=size))
        offset += size + step
    return rects


def solve(
    area: Rect,
    direction: Direction,
    constraints: Sequence[Constraint],
    margin: int = 0,
    spacing: int = 0,
) -> list[Rect]:
    """Split ``area`` into one Rect per constraint.

    Args:
        area: region to divide
        direction: axis to subdivide
        constraints: sizing rules, in output order
        margin: outer inset on all four sides
        spacing: gap between consecutive regions

    Returns:
        Rects in constraint order

    Raises:
        LayoutConfigError: a Ratio has denominator 0
    """
    if not constraints:
        return []

    margin = max(0, margin)
    spacing = max(0, spacing)
    usable_primary = area.inner(margin).primary_length(direction)
    allocatable = allocatable_length(usable_primary, len(constraints), spacing)

    fixed = resolve_fixed(constraints, allocatable)
    fixed_sum = sum(size for size in fixed if size is not None)
    if fixed_sum > allocatable:
        logger.debug(
            f"[Layout] over-constrained {direction.value} split: "
            f"fixed {fixed_sum} > allocatable {allocatable}"
        )
    remaining = max(0, allocatable - fixed_sum)
    fills = distribute_fill(constraints, remaining)

    sizes = [size if size is not None else fills[index] for index, size in enumerate(fixed)]
    return assemble(area, direction, sizes, margin, spacing)
