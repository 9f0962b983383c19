"""Layout preview renderer module."""

from .renderer import LayoutRenderer

__all__ = [
    "LayoutRenderer",
]
