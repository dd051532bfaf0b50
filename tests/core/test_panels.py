"""
Unit Tests for Panel Model

Tests for Panel geometry, copy-on-write updates and the image slot variant.
"""

import dataclasses

import pytest

from comic_studio.core.models import EMPTY_SLOT, FilledSlot, MIN_PANEL_SIZE_PCT, Panel


class TestPanelConstruction:
    """Tests for Panel validation."""

    def test_default_panel_is_placeholder(self):
        panel = Panel("p1", 25, 25, 50, 30)

        assert panel.is_placeholder
        assert panel.asset is None
        assert panel.image is EMPTY_SLOT
        assert panel.z_index == 0

    @pytest.mark.parametrize("width,height", [(4.9, 30), (30, 4.9), (0, 0)])
    def test_size_below_minimum_raises(self, width, height):
        with pytest.raises(ValueError):
            Panel("p1", 0, 0, width, height)

    def test_minimum_size_allowed(self):
        panel = Panel("p1", 0, 0, MIN_PANEL_SIZE_PCT, MIN_PANEL_SIZE_PCT)

        assert panel.width == MIN_PANEL_SIZE_PCT

    def test_panel_is_immutable(self):
        panel = Panel("p1", 0, 0, 10, 10)

        with pytest.raises(dataclasses.FrozenInstanceError):
            panel.x = 5


class TestPanelUpdates:
    """Tests for copy-on-write helpers."""

    def test_moved_by_leaves_original(self):
        panel = Panel("p1", 25, 25, 50, 30)

        moved = panel.moved_by(10, -5)

        assert (moved.x, moved.y) == (35, 20)
        assert (panel.x, panel.y) == (25, 25)

    def test_moved_by_allows_off_page(self):
        moved = Panel("p1", 5, 5, 20, 20).moved_by(-30, 120)

        assert moved.x == -25
        assert moved.y == 125

    def test_resized_to_floors_at_minimum(self):
        resized = Panel("p1", 0, 0, 50, 30).resized_to(1, -20)

        assert resized.width == MIN_PANEL_SIZE_PCT
        assert resized.height == MIN_PANEL_SIZE_PCT

    def test_with_image_fills_slot(self, red_asset):
        filled = Panel("p1", 0, 0, 50, 30).with_image(FilledSlot(red_asset))

        assert not filled.is_placeholder
        assert filled.asset == red_asset

    def test_with_z(self):
        assert Panel("p1", 0, 0, 10, 10).with_z(-3).z_index == -3


class TestPanelGeometry:
    """Tests for overlap and pixel conversion."""

    def test_edge_touching_panels_do_not_overlap(self):
        left = Panel("a", 0, 0, 50, 50)
        right = Panel("b", 50, 0, 50, 50)

        assert not left.overlaps(right)
        assert not right.overlaps(left)

    def test_intersecting_panels_overlap(self):
        assert Panel("a", 0, 0, 50, 50).overlaps(Panel("b", 40, 40, 20, 20))

    def test_pixel_box(self):
        panel = Panel("p1", 10, 20, 50, 25)

        assert panel.pixel_box(200, 400) == pytest.approx((20, 80, 100, 100))

    def test_right_and_bottom(self):
        panel = Panel("p1", 10, 20, 50, 25)

        assert panel.right == 60
        assert panel.bottom == 45
