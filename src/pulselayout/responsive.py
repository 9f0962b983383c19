"""Responsive size classes

Terminal size targets, largest first:

- ULTRA_WIDE (200x80): image | main | info | sparklines
- WIDE (160x60): image | main | info
- STANDARD (120x40): image | main
- COMPACT (80x24): single bordered column, also used for anything smaller

Column widths come from the split solver: fixed columns are Length, the last
column is Fill, and column separators are spacing.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum

from . import config
from .constraints import Fill, Length
from .geometry import Direction, Rect
from .layout import new_layout
from .telemetry import get_logger

logger = get_logger(__name__)


class LayoutMode(Enum):
    """Terminal size class."""

    COMPACT = "compact"
    STANDARD = "standard"
    WIDE = "wide"
    ULTRA_WIDE = "ultra-wide"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ColumnConfig:
    """Column widths for a size class; 0 means the column is not shown."""

    image_cols: int = 0
    main_cols: int = 0
    info_cols: int = 0
    metrics_cols: int = 0  # metrics share the info column
    sparkline_cols: int = 0


@dataclass(frozen=True)
class LayoutFeatures:
    """What a size class has room for."""

    show_image: bool = False
    show_sparklines: bool = False
    show_full_metrics: bool = False
    show_node_metrics: bool = False
    vertical_stack: bool = False
    show_borders: bool = False


@dataclass(frozen=True)
class ResponsiveConfig:
    """Size class, terminal size, and what follows from them."""

    mode: LayoutMode
    term_width: int
    term_height: int
    columns: ColumnConfig
    features: LayoutFeatures
    color_enabled: bool = True


# 从大到小排列
_LAYOUT_TARGETS: list[tuple[tuple[int, int], LayoutMode]] = [
    (config.ULTRA_WIDE_MIN_SIZE, LayoutMode.ULTRA_WIDE),
    (config.WIDE_MIN_SIZE, LayoutMode.WIDE),
    (config.STANDARD_MIN_SIZE, LayoutMode.STANDARD),
    (config.COMPACT_MIN_SIZE, LayoutMode.COMPACT),
]

_FEATURES: dict[LayoutMode, LayoutFeatures] = {
    LayoutMode.ULTRA_WIDE: LayoutFeatures(
        show_image=True,
        show_sparklines=True,
        show_full_metrics=True,
        show_node_metrics=True,
        show_borders=True,
    ),
    LayoutMode.WIDE: LayoutFeatures(
        show_image=True,
        show_full_metrics=True,
        show_node_metrics=True,
        show_borders=True,
    ),
    LayoutMode.STANDARD: LayoutFeatures(show_image=True, show_borders=True),
    LayoutMode.COMPACT: LayoutFeatures(vertical_stack=True),
}


def detect_layout_mode(width: int, height: int) -> LayoutMode:
    """Largest mode whose minimum width and height both fit."""
    for (min_width, min_height), mode in _LAYOUT_TARGETS:
        if width >= min_width and height >= min_height:
            return mode
    return LayoutMode.COMPACT


def _column_widths(term_width: int, *fixed: int, margin: int = 0) -> list[int]:
    """Widths of ``fixed`` columns plus a trailing Fill column."""
    layout = new_layout(Direction.HORIZONTAL, *(Length(w) for w in fixed), Fill(1))
    layout = layout.with_margin(margin).with_spacing(config.COLUMN_SEPARATOR_WIDTH)
    return [rect.width for rect in layout.split(Rect(0, 0, term_width, 1))]


def columns_for_mode(mode: LayoutMode, term_width: int) -> ColumnConfig:
    """Column widths for ``mode`` on a ``term_width``-column terminal.

    The last column takes the remaining width, but never less than its
    configured minimum (it may then run past the terminal edge).
    """
    if mode is LayoutMode.ULTRA_WIDE:
        image, main, info, sparkline = _column_widths(
            term_width,
            config.IMAGE_COLUMN_WIDTH,
            config.ULTRA_WIDE_MAIN_COLUMN_WIDTH,
            config.ULTRA_WIDE_INFO_COLUMN_WIDTH,
        )
        return ColumnConfig(
            image_cols=image,
            main_cols=main,
            info_cols=info,
            metrics_cols=info,
            sparkline_cols=max(sparkline, config.MIN_SPARKLINE_COLUMN_WIDTH),
        )

    if mode is LayoutMode.WIDE:
        image, main, info = _column_widths(
            term_width, config.IMAGE_COLUMN_WIDTH, config.WIDE_MAIN_COLUMN_WIDTH
        )
        info = max(info, config.MIN_INFO_COLUMN_WIDTH)
        return ColumnConfig(image_cols=image, main_cols=main, info_cols=info, metrics_cols=info)

    if mode is LayoutMode.STANDARD:
        image, main = _column_widths(term_width, config.STANDARD_IMAGE_COLUMN_WIDTH)
        return ColumnConfig(image_cols=image, main_cols=max(main, config.MIN_MAIN_COLUMN_WIDTH))

    # compact: 单列，两侧留出边框
    (main,) = _column_widths(term_width, margin=config.COMPACT_BORDER_WIDTH)
    return ColumnConfig(main_cols=main)


def features_for_mode(mode: LayoutMode) -> LayoutFeatures:
    return _FEATURES[mode]


def responsive_config(width: int, height: int) -> ResponsiveConfig:
    """Size class, columns and features for a known terminal size."""
    mode = detect_layout_mode(width, height)
    columns = columns_for_mode(mode, width)
    logger.debug(f"[Responsive] {width}x{height} -> {mode}, columns={columns}")
    return ResponsiveConfig(
        mode=mode,
        term_width=width,
        term_height=height,
        columns=columns,
        features=features_for_mode(mode),
    )


def new_responsive_config(width: int = 0, height: int = 0) -> ResponsiveConfig:
    """Like responsive_config, detecting the terminal size when either side is 0."""
    if width <= 0 or height <= 0:
        width, height = detect_terminal_size()
    return responsive_config(width, height)


def _env_dimension(name: str) -> int:
    value = os.environ.get(name, "")
    try:
        parsed = int(value)
    except ValueError:
        return 0
    return parsed if parsed > 0 else 0


def detect_terminal_size(fd: int | None = None) -> tuple[int, int]:
    """Current terminal (width, height).

    Tries the TTY behind ``fd`` (stdout by default), then COLUMNS / LINES,
    then the configured default.
    """
    try:
        if fd is None:
            fd = sys.stdout.fileno()
        size = os.get_terminal_size(fd)
        if size.columns > 0 and size.lines > 0:
            return size.columns, size.lines
    except (OSError, ValueError, AttributeError) as e:
        logger.debug(f"[Responsive] no tty size: {e}")

    width = _env_dimension("COLUMNS") or config.DEFAULT_TERM_WIDTH
    height = _env_dimension("LINES") or config.DEFAULT_TERM_HEIGHT
    return width, height
