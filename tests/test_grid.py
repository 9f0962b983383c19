"""Tests for grid.py - dashboard panel resolution"""

import pytest

from pulselayout.geometry import Rect
from pulselayout.grid import Placement, compute_grid, resolve_layout
from pulselayout.presets import ChildConfig, LayoutConfig, RowConfig, layout_preset


class TestResolveLayout:
    """Tests for resolve_layout."""

    def test_minimal_preset(self):
        placements = resolve_layout(layout_preset("minimal"), Rect(0, 0, 100, 40))
        assert placements == [
            Placement(widget="waifu", rect=Rect(0, 0, 50, 40), path=(0, 0)),
            Placement(widget="claude", rect=Rect(50, 0, 50, 40), path=(0, 1)),
        ]

    def test_dashboard_preset(self):
        """Rows split 3:4:2, first row children 2:3:3."""
        placements = resolve_layout(layout_preset("dashboard"), Rect(0, 0, 160, 45))
        assert [(p.widget, p.rect) for p in placements] == [
            ("waifu", Rect(0, 0, 40, 15)),
            ("claude", Rect(40, 0, 60, 15)),
            ("billing", Rect(100, 0, 60, 15)),
            ("tailscale", Rect(0, 15, 80, 20)),
            ("k8s", Rect(80, 15, 80, 20)),
            ("sysmetrics", Rect(0, 35, 160, 10)),
        ]

    def test_margin_and_spacing(self):
        layout = LayoutConfig(
            rows=[RowConfig(children=[ChildConfig(type="a"), ChildConfig(type="b")])],
            margin=1,
            spacing=2,
        )
        placements = resolve_layout(layout, Rect(0, 0, 20, 10))
        assert [p.rect for p in placements] == [Rect(1, 1, 8, 8), Rect(11, 1, 8, 8)]

    def test_nested_children_stack_vertically(self):
        layout = LayoutConfig(
            rows=[
                RowConfig(
                    children=[
                        ChildConfig(type="claude"),
                        ChildConfig(children=[ChildConfig(type="k8s"), ChildConfig(type="tailscale")]),
                    ]
                )
            ]
        )
        placements = resolve_layout(layout, Rect(0, 0, 40, 20))
        assert placements == [
            Placement(widget="claude", rect=Rect(0, 0, 20, 20), path=(0, 0)),
            Placement(widget="k8s", rect=Rect(20, 0, 20, 10), path=(0, 1, 0)),
            Placement(widget="tailscale", rect=Rect(20, 10, 20, 10), path=(0, 1, 1)),
        ]

    def test_empty_row_emits_nothing(self):
        layout = LayoutConfig(rows=[RowConfig(), RowConfig(children=[ChildConfig(type="a")])])
        placements = resolve_layout(layout, Rect(0, 0, 10, 10))
        assert placements == [Placement(widget="a", rect=Rect(0, 5, 10, 5), path=(1, 0))]

    @pytest.mark.parametrize("preset", ["dashboard", "minimal", "ops", "billing"])
    @pytest.mark.parametrize("size", [(80, 24), (123, 37), (200, 80)])
    def test_presets_tile_the_screen(self, preset, size):
        """Without margin or spacing the panels cover the area exactly."""
        width, height = size
        placements = resolve_layout(layout_preset(preset), Rect(0, 0, width, height))
        assert sum(p.rect.width * p.rect.height for p in placements) == width * height


class TestComputeGrid:
    """Tests for compute_grid."""

    @pytest.mark.parametrize("count, width, height", [(0, 100, 30), (2, 0, 30), (2, 100, -1)])
    def test_nothing_to_place(self, count, width, height):
        assert compute_grid(count, width, height) == []

    def test_single_widget_gets_everything(self):
        """One widget takes the whole area above the status bar."""
        assert compute_grid(1, 100, 30) == [Rect(0, 0, 100, 29)]

    def test_no_status_rows(self):
        assert compute_grid(1, 100, 30, status_rows=0) == [Rect(0, 0, 100, 30)]

    def test_two_columns(self):
        assert compute_grid(3, 100, 25) == [
            Rect(0, 0, 50, 12),
            Rect(50, 0, 50, 12),
            Rect(0, 12, 50, 12),
        ]

    def test_three_columns_on_wide_terminal(self):
        """Last column absorbs the width remainder."""
        assert compute_grid(4, 160, 41) == [
            Rect(0, 0, 53, 20),
            Rect(53, 0, 53, 20),
            Rect(106, 0, 54, 20),
            Rect(0, 20, 53, 20),
        ]

    def test_wide_terminal_with_few_widgets_keeps_two_columns(self):
        cells = compute_grid(2, 161, 20)
        assert [c.width for c in cells] == [80, 81]

    def test_single_column_on_narrow_terminal(self):
        """Last row absorbs the height remainder."""
        cells = compute_grid(3, 60, 30)
        assert [c.y for c in cells] == [0, 9, 18]
        assert [c.height for c in cells] == [9, 9, 11]
        assert all(c.width == 60 and c.x == 0 for c in cells)

    def test_minimum_row_height(self):
        """Rows keep 3 lines even when they overflow."""
        cells = compute_grid(20, 100, 11)
        assert cells[0] == Rect(0, 0, 50, 3)
        assert cells[19] == Rect(50, 27, 50, 0)

    def test_minimum_row_height_on_tiny_screen(self):
        """Rows taller than the whole usable height still get 3 lines."""
        assert compute_grid(4, 100, 3) == [
            Rect(0, 0, 50, 3),
            Rect(50, 0, 50, 3),
            Rect(0, 3, 50, 0),
            Rect(50, 3, 50, 0),
        ]

    def test_min_sizes_enlarge_cells(self):
        cells = compute_grid(2, 100, 20, min_sizes=[(60, 5), (0, 30)])
        assert cells == [Rect(0, 0, 60, 19), Rect(50, 0, 50, 30)]
