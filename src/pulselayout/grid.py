"""Grid resolution

Turns dashboard layout configuration into concrete panel Rects using the
split solver:

- resolve_layout: rows -> children -> nested sub-rows, weighted by ratio
- compute_grid: adaptive N-column grid for a flat list of widgets
"""

from collections.abc import Sequence
from dataclasses import dataclass

from . import config
from .constraints import Constraint, Fill, Length
from .geometry import Direction, Rect
from .layout import Layout, new_layout
from .presets import ChildConfig, LayoutConfig
from .telemetry import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Placement:
    """A widget and the Rect it is drawn into."""

    widget: str
    rect: Rect
    path: tuple[int, ...]  # row index, child index, nested child index...


def _flip(direction: Direction) -> Direction:
    if direction is Direction.HORIZONTAL:
        return Direction.VERTICAL
    return Direction.HORIZONTAL


def _place_children(
    children: Sequence[ChildConfig],
    area: Rect,
    direction: Direction,
    spacing: int,
    path: tuple[int, ...],
) -> list[Placement]:
    if not children:
        return []

    layout = new_layout(direction, *(Fill(child.ratio) for child in children)).with_spacing(spacing)
    placements = []
    for index, (child, rect) in enumerate(zip(children, layout.split(area))):
        child_path = path + (index,)
        if child.is_container:
            placements.extend(
                _place_children(child.children, rect, _flip(direction), spacing, child_path)
            )
        else:
            placements.append(Placement(widget=child.type, rect=rect, path=child_path))
    return placements


def resolve_layout(layout_config: LayoutConfig, area: Rect) -> list[Placement]:
    """Resolve a dashboard layout into leaf widget placements.

    Rows stack vertically inside the margin; children of a row sit side by
    side; a container child stacks its own children vertically, and so on,
    alternating. Spacing applies at every level.

    Args:
        layout_config: dashboard layout (custom rows or a preset)
        area: region to fill, usually the whole terminal

    Returns:
        Leaf placements in depth-first declaration order
    """
    rows = layout_config.effective_rows()
    if not rows:
        return []

    outer = new_layout(Direction.VERTICAL, *(Fill(row.ratio) for row in rows))
    outer = outer.with_margin(layout_config.margin).with_spacing(layout_config.spacing)

    placements = []
    for index, (row, rect) in enumerate(zip(rows, outer.split(area))):
        placements.extend(
            _place_children(
                row.children, rect, Direction.HORIZONTAL, layout_config.spacing, (index,)
            )
        )

    logger.debug(
        f"[Grid] resolved {len(placements)} panels in {area.width}x{area.height} "
        f"(preset={layout_config.preset}, custom_rows={bool(layout_config.rows)})"
    )
    return placements


def _column_count(width: int, count: int) -> int:
    """Adaptive column count based on terminal width."""
    if width < config.GRID_SINGLE_COLUMN_BELOW:
        return 1
    if width >= config.GRID_THREE_COLUMN_FROM and count >= config.GRID_THREE_COLUMN_MIN_WIDGETS:
        return 3
    return 2


def _tracks(direction: Direction, count: int, size: int) -> Layout:
    """``count`` tracks of ``size`` cells; the last takes whatever is left."""
    constraints: list[Constraint] = [Length(size) for _ in range(count - 1)]
    constraints.append(Fill(1))
    return new_layout(direction, *constraints)


def _row_tracks(rows: int, row_height: int, region: Rect) -> list[Rect]:
    """Row bands of ``row_height``; the last takes whatever is left.

    When the minimum row height overflows the region, rows keep their height
    and run past the bottom; the last row then gets 0.
    """
    if row_height * (rows - 1) <= region.height:
        return _tracks(Direction.VERTICAL, rows, row_height).split(region)

    bands = []
    for row in range(rows):
        y = region.y + row * row_height
        height = row_height if row < rows - 1 else max(0, region.bottom - y)
        bands.append(Rect(x=region.x, y=y, width=region.width, height=height))
    return bands


def compute_grid(
    count: int,
    width: int,
    height: int,
    *,
    status_rows: int = config.GRID_STATUS_ROWS,
    min_sizes: Sequence[tuple[int, int]] | None = None,
) -> list[Rect]:
    """Lay ``count`` widgets out top-to-bottom, left-to-right.

    Reserves ``status_rows`` at the bottom. The last column and the last row
    absorb rounding leftovers. ``min_sizes[i]`` (width, height) enlarges
    cell ``i`` when it comes out smaller.

    Returns:
        One Rect per widget, or [] for no widgets or a non-positive size
    """
    if count <= 0 or width <= 0 or height <= 0:
        return []

    avail_height = max(1, height - status_rows)

    if count == 1:
        cells = [Rect(0, 0, width, avail_height)]
    else:
        cols = _column_count(width, count)
        rows = (count + cols - 1) // cols
        col_width = width // cols
        row_height = max(config.GRID_MIN_ROW_HEIGHT, avail_height // rows)

        region = Rect(0, 0, width, avail_height)
        columns = _tracks(Direction.HORIZONTAL, cols, col_width).split(region)
        row_tracks = _row_tracks(rows, row_height, region)

        cells = []
        for i in range(count):
            column = columns[i % cols]
            row = row_tracks[i // cols]
            cells.append(Rect(x=column.x, y=row.y, width=column.width, height=row.height))

    if min_sizes:
        cells = [
            Rect(
                cell.x,
                cell.y,
                max(cell.width, min_sizes[i][0]) if i < len(min_sizes) else cell.width,
                max(cell.height, min_sizes[i][1]) if i < len(min_sizes) else cell.height,
            )
            for i, cell in enumerate(cells)
        ]
    return cells
