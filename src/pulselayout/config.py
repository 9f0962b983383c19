"""pulse-layout 配置

配置分为以下几类：
- 日志配置：日志级别
- 布局配置：默认 preset、比例默认值
- 终端配置：无法探测时的默认尺寸
- 响应式配置：尺寸档位阈值
- Grid 配置：自适应网格参数
"""

import os

# === 日志配置 ===
LOG_LEVEL = os.environ.get("PULSE_LAYOUT_LOG_LEVEL", "INFO")  # 日志级别

# === 布局配置 ===
LAYOUT_PRESET_OVERRIDE = os.environ.get("PULSE_LAYOUT", "")  # 非空时覆盖配置文件中的 preset
LAYOUT_PRESET = LAYOUT_PRESET_OVERRIDE or "dashboard"  # 默认 preset
DEFAULT_ROW_RATIO = 1  # ratio 缺省或非正数时使用

# === 终端配置 ===
DEFAULT_TERM_WIDTH = 80  # 探测失败时的默认列数
DEFAULT_TERM_HEIGHT = 24  # 探测失败时的默认行数

# === 响应式配置（最小宽, 最小高）===
ULTRA_WIDE_MIN_SIZE = (200, 80)
WIDE_MIN_SIZE = (160, 60)
STANDARD_MIN_SIZE = (120, 40)
COMPACT_MIN_SIZE = (80, 24)

# === 响应式列宽 ===
COLUMN_SEPARATOR_WIDTH = 3  # " | "
IMAGE_COLUMN_WIDTH = 24  # wide / ultra-wide 图片列
STANDARD_IMAGE_COLUMN_WIDTH = 22  # standard 图片列
ULTRA_WIDE_MAIN_COLUMN_WIDTH = 50
ULTRA_WIDE_INFO_COLUMN_WIDTH = 50
WIDE_MAIN_COLUMN_WIDTH = 60
MIN_SPARKLINE_COLUMN_WIDTH = 20  # ultra-wide 剩余宽度下限
MIN_INFO_COLUMN_WIDTH = 40  # wide 剩余宽度下限
MIN_MAIN_COLUMN_WIDTH = 40  # standard 剩余宽度下限
COMPACT_BORDER_WIDTH = 2  # compact 模式每侧留给边框的列数

# === Grid 配置 ===
GRID_STATUS_ROWS = 1  # 底部状态栏保留行数
GRID_MIN_ROW_HEIGHT = 3  # 单行最小高度
GRID_SINGLE_COLUMN_BELOW = 80  # 宽度小于此值时单列
GRID_THREE_COLUMN_FROM = 160  # 宽度达到此值时可用三列
GRID_THREE_COLUMN_MIN_WIDGETS = 4  # 三列所需最少 widget 数

# === 预览配置 ===
PREVIEW_PALETTE = [
    "bright_magenta",
    "bright_cyan",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_red",
]  # 面板边框颜色（循环使用）
