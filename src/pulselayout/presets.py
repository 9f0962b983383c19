"""Dashboard layout configuration

A dashboard layout is a list of rows; each row holds widget children, and a
child with children of its own becomes a column of sub-rows. Ratios are
relative weights (Fill) within the parent.

TOML form (``[layout]`` table)::

    [layout]
    preset = "minimal"

    [[layout.row]]
    ratio = 2

      [[layout.row.child]]
      type = "claude"
      ratio = 3

Custom rows, when present, override the preset.
"""

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import config
from .errors import LayoutConfigError
from .telemetry import get_logger

logger = get_logger(__name__)


class ChildConfig(BaseModel):
    """A widget slot, or a container of sub-rows when ``children`` is set."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: str = ""  # waifu, claude, billing, tailscale, k8s, sysmetrics
    ratio: int = config.DEFAULT_ROW_RATIO
    children: list["ChildConfig"] = Field(default_factory=list, alias="child")

    @field_validator("ratio")
    @classmethod
    def default_ratio(cls, value: int) -> int:
        return value if value > 0 else config.DEFAULT_ROW_RATIO

    @property
    def is_container(self) -> bool:
        return bool(self.children)


class RowConfig(BaseModel):
    """One dashboard row."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    ratio: int = config.DEFAULT_ROW_RATIO
    children: list[ChildConfig] = Field(default_factory=list, alias="child")

    @field_validator("ratio")
    @classmethod
    def default_ratio(cls, value: int) -> int:
        return value if value > 0 else config.DEFAULT_ROW_RATIO


class LayoutConfig(BaseModel):
    """Dashboard layout: preset name, optional custom rows, margin and spacing."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    preset: str = config.LAYOUT_PRESET
    rows: list[RowConfig] = Field(default_factory=list, alias="row")
    margin: int = 0
    spacing: int = 0

    @field_validator("margin", "spacing")
    @classmethod
    def clamp_non_negative(cls, value: int) -> int:
        return max(0, value)

    def effective_rows(self) -> list[RowConfig]:
        """Custom rows when configured, else the preset's rows."""
        if self.rows:
            return list(self.rows)
        return list(layout_preset(self.preset).rows)


def _row(ratio: int, *children: tuple[str, int]) -> RowConfig:
    return RowConfig(
        ratio=ratio,
        children=[ChildConfig(type=name, ratio=weight) for name, weight in children],
    )


_PRESETS: dict[str, list[RowConfig]] = {
    "dashboard": [
        _row(3, ("waifu", 2), ("claude", 3), ("billing", 3)),
        _row(4, ("tailscale", 1), ("k8s", 1)),
        _row(2, ("sysmetrics", 1)),
    ],
    "minimal": [
        _row(1, ("waifu", 1), ("claude", 1)),
    ],
    "ops": [
        _row(1, ("tailscale", 1), ("k8s", 1)),
        _row(1, ("sysmetrics", 1)),
        _row(1, ("claude", 1), ("billing", 1)),
    ],
    "billing": [
        _row(1, ("claude", 1)),
        _row(1, ("billing", 1)),
        _row(1, ("sysmetrics", 1)),
    ],
}

DEFAULT_PRESET = "dashboard"


def preset_names() -> list[str]:
    """Built-in preset names, dashboard first."""
    return list(_PRESETS)


def layout_preset(name: str) -> LayoutConfig:
    """Return a built-in preset; unknown names fall back to dashboard."""
    if name not in _PRESETS:
        logger.warning(f"[Presets] unknown preset {name!r}, using {DEFAULT_PRESET!r}")
        name = DEFAULT_PRESET
    return LayoutConfig(preset=name, rows=list(_PRESETS[name]))


def load_layout_config(data: Mapping[str, Any] | None) -> LayoutConfig:
    """Validate a ``[layout]`` table.

    ``PULSE_LAYOUT`` in the environment overrides the preset name.

    Raises:
        LayoutConfigError: the table fails validation
    """
    try:
        layout = LayoutConfig.model_validate(dict(data or {}))
    except ValidationError as e:
        raise LayoutConfigError(f"invalid layout config: {e}") from e

    if config.LAYOUT_PRESET_OVERRIDE:
        layout = layout.model_copy(update={"preset": config.LAYOUT_PRESET_OVERRIDE})
    logger.debug(f"[Presets] loaded layout preset={layout.preset} custom_rows={len(layout.rows)}")
    return layout


def load_layout_file(path: str | Path) -> LayoutConfig:
    """Read a TOML file and validate its ``[layout]`` table.

    A file without a ``[layout]`` table yields the defaults.

    Raises:
        LayoutConfigError: the file cannot be read or parsed, or fails validation
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise LayoutConfigError(f"cannot load layout file {path}: {e}") from e

    table = document.get("layout", {})
    if not isinstance(table, Mapping):
        raise LayoutConfigError(f"{path}: [layout] must be a table")
    return load_layout_config(table)
