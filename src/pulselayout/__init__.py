"""pulse-layout

终端 dashboard 的矩形空间分配：
- geometry: Rect, Direction
- constraints: Length, Percentage, Ratio, Fill
- layout: 不可变 Layout 与 split
- presets / grid: dashboard 布局配置与面板解析
- responsive: 终端尺寸档位、各档位的列宽与功能开关
"""

from .constraints import Constraint, Fill, Length, Percentage, Ratio
from .errors import LayoutConfigError
from .geometry import Direction, Rect
from .grid import Placement, compute_grid, resolve_layout
from .layout import Layout, horizontal, new_layout, vertical
from .presets import (
    ChildConfig,
    LayoutConfig,
    RowConfig,
    layout_preset,
    load_layout_config,
    load_layout_file,
    preset_names,
)
from .responsive import (
    ColumnConfig,
    LayoutFeatures,
    LayoutMode,
    ResponsiveConfig,
    columns_for_mode,
    detect_layout_mode,
    detect_terminal_size,
    features_for_mode,
    new_responsive_config,
    responsive_config,
)

__all__ = [
    # Geometry
    "Rect",
    "Direction",
    # Constraints
    "Constraint",
    "Length",
    "Percentage",
    "Ratio",
    "Fill",
    # Layout
    "Layout",
    "new_layout",
    "horizontal",
    "vertical",
    "LayoutConfigError",
    # Presets
    "ChildConfig",
    "RowConfig",
    "LayoutConfig",
    "layout_preset",
    "load_layout_config",
    "load_layout_file",
    "preset_names",
    # Grid
    "Placement",
    "resolve_layout",
    "compute_grid",
    # Responsive
    "LayoutMode",
    "detect_layout_mode",
    "detect_terminal_size",
    "ColumnConfig",
    "LayoutFeatures",
    "ResponsiveConfig",
    "columns_for_mode",
    "features_for_mode",
    "responsive_config",
    "new_responsive_config",
]
