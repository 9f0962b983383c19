"""Layout preview renderer using Rich library.

Draws resolved placements as rounded boxes labelled with their widget name,
so a layout can be checked without any real panel content.
"""

import io
from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from pulselayout import config
from pulselayout.geometry import Rect
from pulselayout.grid import Placement
from pulselayout.telemetry import get_logger

logger = get_logger(__name__)

# 圆角边框字符
BOX_TOP_LEFT = "╭"
BOX_TOP_RIGHT = "╮"
BOX_BOTTOM_LEFT = "╰"
BOX_BOTTOM_RIGHT = "╯"
BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"


class _Canvas:
    """Fixed-size cell grid; writes outside the grid are dropped."""

    def __init__(self, width: int, height: int):
        self.bounds = Rect(0, 0, max(0, width), max(0, height))
        self.width = self.bounds.width
        self.height = self.bounds.height
        self.chars = [[" "] * self.width for _ in range(self.height)]
        self.styles: list[list[str | None]] = [[None] * self.width for _ in range(self.height)]

    def put(self, x: int, y: int, char: str, style: str | None) -> None:
        if self.bounds.contains(x, y):
            self.chars[y][x] = char
            self.styles[y][x] = style

    def draw_box(self, rect: Rect, label: str, style: str | None) -> None:
        if rect.width < 2 or rect.height < 2:
            return

        left, top = rect.x, rect.y
        right, bottom = rect.right - 1, rect.bottom - 1

        for x in range(left + 1, right):
            self.put(x, top, BOX_HORIZONTAL, style)
            self.put(x, bottom, BOX_HORIZONTAL, style)
        for y in range(top + 1, bottom):
            self.put(left, y, BOX_VERTICAL, style)
            self.put(right, y, BOX_VERTICAL, style)
        self.put(left, top, BOX_TOP_LEFT, style)
        self.put(right, top, BOX_TOP_RIGHT, style)
        self.put(left, bottom, BOX_BOTTOM_LEFT, style)
        self.put(right, bottom, BOX_BOTTOM_RIGHT, style)

        # 标签写在上边框内，超出部分截断
        room = rect.width - 2
        for offset, char in enumerate(label[:room]):
            self.put(left + 1 + offset, top, char, style)

    def to_text(self) -> Text:
        text = Text()
        for y in range(self.height):
            run_start = 0
            for x in range(1, self.width + 1):
                if x == self.width or self.styles[y][x] != self.styles[y][run_start]:
                    text.append("".join(self.chars[y][run_start:x]), style=self.styles[y][run_start])
                    run_start = x
            if y < self.height - 1:
                text.append("\n")
        return text


class LayoutRenderer:
    """布局预览渲染器，将 placements 绘制为文本或 SVG。"""

    def __init__(self, palette: Sequence[str] | None = None):
        """
        初始化渲染器。

        Args:
            palette: 面板边框颜色，循环使用
        """
        self.palette = list(config.PREVIEW_PALETTE if palette is None else palette)

    def _style_for(self, index: int) -> str | None:
        if not self.palette:
            return None
        return self.palette[index % len(self.palette)]

    def _draw(self, placements: Sequence[Placement], width: int, height: int, styled: bool) -> _Canvas:
        canvas = _Canvas(width, height)
        for index, placement in enumerate(placements):
            style = self._style_for(index) if styled else None
            canvas.draw_box(placement.rect, placement.widget, style)
        return canvas

    def render_text(self, placements: Sequence[Placement], width: int, height: int) -> Text:
        """Render placements into a styled Rich Text of ``height`` lines."""
        return self._draw(placements, width, height, styled=True).to_text()

    def render_plain(self, placements: Sequence[Placement], width: int, height: int) -> str:
        """Render placements without styles, lines joined by newlines."""
        canvas = self._draw(placements, width, height, styled=False)
        return "\n".join("".join(row) for row in canvas.chars)

    def render_svg(self, placements: Sequence[Placement], width: int, height: int) -> str:
        """Render placements to SVG.

        Args:
            placements: resolved panels
            width: 终端宽度（字符数）
            height: 终端高度（行数），用于确保 SVG 比例正确
        """
        console = Console(
            record=True,
            width=max(1, width),
            height=max(1, height),
            force_terminal=True,
            color_system="truecolor",
            file=io.StringIO(),
        )
        console.print(self.render_text(placements, width, height), end="", crop=True)
        logger.debug(f"[Renderer] exported svg for {len(placements)} panels ({width}x{height})")
        return console.export_svg(title="pulse-layout")

