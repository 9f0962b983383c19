"""pulse-layout - 在终端中预览 dashboard 布局"""

import argparse
import sys
from collections.abc import Sequence

from rich.console import Console

from pulselayout import config
from pulselayout.errors import LayoutConfigError
from pulselayout.geometry import Rect
from pulselayout.grid import resolve_layout
from pulselayout.presets import LayoutConfig, layout_preset, load_layout_file, preset_names
from pulselayout.render import LayoutRenderer
from pulselayout.responsive import ColumnConfig, detect_terminal_size, responsive_config
from pulselayout.telemetry import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pulse-layout",
        description="Preview a dashboard panel layout in the terminal.",
    )
    parser.add_argument(
        "--preset",
        default=None,
        help=f"built-in preset ({', '.join(preset_names())}); default {config.LAYOUT_PRESET}",
    )
    parser.add_argument("--config", default=None, help="TOML file with a [layout] table")
    parser.add_argument("--width", type=int, default=None, help="columns (default: detected)")
    parser.add_argument("--height", type=int, default=None, help="rows (default: detected)")
    parser.add_argument("--svg", default=None, metavar="PATH", help="write an SVG instead of printing")
    parser.add_argument("--log-level", default=None, help=f"default {config.LOG_LEVEL}")
    return parser


def load_config(preset: str | None, path: str | None) -> LayoutConfig:
    """Layout from ``path`` if given, else the named (or default) preset.

    An explicit ``preset`` wins over the file's preset name.
    """
    if path:
        layout = load_layout_file(path)
        if preset:
            layout = layout.model_copy(update={"preset": preset})
        return layout
    return layout_preset(preset or config.LAYOUT_PRESET)


def describe_columns(columns: ColumnConfig) -> str:
    """Shown columns as "image 22 | main 95"."""
    named = [
        ("image", columns.image_cols),
        ("main", columns.main_cols),
        ("info", columns.info_cols),
        ("sparklines", columns.sparkline_cols),
    ]
    return " | ".join(f"{name} {cols}" for name, cols in named if cols > 0)


def main(argv: Sequence[str] | None = None) -> int:
    """入口函数"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    detected_width, detected_height = detect_terminal_size()
    width = args.width if args.width is not None else detected_width
    height = args.height if args.height is not None else detected_height

    try:
        layout = load_config(args.preset, args.config)
        placements = resolve_layout(layout, Rect(0, 0, width, height))
    except LayoutConfigError as e:
        print(f"pulse-layout: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    renderer = LayoutRenderer()
    responsive = responsive_config(width, height)
    logger.info(
        f"[Preview] {layout.preset} {width}x{height} ({responsive.mode}), {len(placements)} panels"
    )

    if args.svg:
        with open(args.svg, "w", encoding="utf-8") as f:
            f.write(renderer.render_svg(placements, width, height))
        print(f"wrote {args.svg}")
        return 0

    console = Console()
    console.print(
        f"{layout.preset} · {width}x{height} · {responsive.mode} · "
        f"{describe_columns(responsive.columns)}"
    )
    console.print(renderer.render_text(placements, width, height), crop=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
