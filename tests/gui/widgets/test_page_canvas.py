"""Unit tests for the PageCanvas mouse and paint handling."""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QColor, QKeyEvent, QMouseEvent

from comic_studio.composer import ControllerState, PageLayoutStudio
from comic_studio.core.models import Asset
from comic_studio.gui.styles.theme import Colors
from comic_studio.gui.widgets.page_canvas import PageCanvas


def _mouse(kind, pos, button=Qt.MouseButton.LeftButton):
    buttons = Qt.MouseButton.NoButton if kind == QEvent.Type.MouseButtonRelease else Qt.MouseButton.LeftButton
    point = QPointF(pos)
    return QMouseEvent(kind, point, point, button, buttons, Qt.KeyboardModifier.NoModifier)


def press(canvas, pos, button=Qt.MouseButton.LeftButton):
    canvas.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, pos, button))


def move(canvas, pos):
    canvas.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, pos, Qt.MouseButton.NoButton))


def release(canvas, pos):
    canvas.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, pos))


@pytest.fixture
def canvas(qtbot):
    studio = PageLayoutStudio()
    widget = PageCanvas(studio)
    qtbot.addWidget(widget)
    widget.resize(424, 600)
    return widget


class TestGeometry:
    """Tests for page and panel rectangles."""

    def test_page_rect_keeps_aspect_ratio(self, canvas):
        page = canvas.page_rect()

        assert page.width() / page.height() == pytest.approx(1988 / 3075)
        assert canvas.rect().contains(page.toRect())

    def test_hit_test_prefers_topmost_panel(self, canvas, red_asset, blue_asset):
        studio = canvas.studio
        bottom = studio.page.add_panel(red_asset)
        top = studio.page.add_panel(blue_asset)

        panel_id, kind = canvas.hit_test(canvas.panel_rect(bottom).center())

        assert panel_id == top.id
        assert kind.value == "drag"

    def test_hit_test_handle_of_selected_panel(self, canvas, red_asset):
        panel = canvas.studio.page.add_panel(red_asset)

        panel_id, kind = canvas.hit_test(canvas.panel_rect(panel).bottomRight())

        assert panel_id == panel.id
        assert kind.value == "resize"

    def test_hit_test_outside_page(self, canvas):
        assert canvas.hit_test(QPointF(1, 1)) == (None, None)


class TestMouseGestures:
    """Tests for press/move/release forwarding."""

    def test_drag_moves_panel_by_page_percentage(self, canvas, red_asset):
        # Arrange
        panel = canvas.studio.page.add_panel(red_asset)
        page = canvas.page_rect()
        start = canvas.panel_rect(panel).center()

        # Act
        press(canvas, start)
        move(canvas, start + QPointF(page.width() * 0.10, 0))
        release(canvas, start + QPointF(page.width() * 0.10, 0))

        # Assert
        moved = canvas.studio.page.get(panel.id)
        assert moved.x == pytest.approx(panel.x + 10)
        assert moved.y == pytest.approx(panel.y)
        assert canvas.studio.interaction.state is ControllerState.IDLE

    def test_resize_from_handle(self, canvas, red_asset):
        panel = canvas.studio.page.add_panel(red_asset)
        page = canvas.page_rect()
        corner = canvas.panel_rect(panel).bottomRight()

        press(canvas, corner)
        assert canvas.studio.interaction.state is ControllerState.RESIZING
        move(canvas, corner + QPointF(page.width() * 0.05, page.height() * 0.10))
        release(canvas, corner)

        resized = canvas.studio.page.get(panel.id)
        assert resized.width == pytest.approx(55)
        assert resized.height == pytest.approx(40)

    def test_press_on_empty_page_clears_selection(self, canvas, red_asset, qtbot):
        canvas.studio.page.add_panel(red_asset)
        page = canvas.page_rect()

        with qtbot.waitSignal(canvas.selectionChanged, timeout=1000) as blocker:
            press(canvas, page.topLeft() + QPointF(2, 2))

        assert blocker.args == [None]
        assert canvas.studio.page.selected_id is None

    def test_right_button_is_ignored(self, canvas, red_asset):
        panel = canvas.studio.page.add_panel(red_asset)
        canvas.studio.page.clear_selection()

        press(canvas, canvas.panel_rect(panel).center(), Qt.MouseButton.RightButton)

        assert canvas.studio.page.selected_id is None
        assert not canvas.studio.interaction.is_active

    def test_delete_key_removes_selected_panel(self, canvas, red_asset):
        canvas.studio.page.add_panel(red_asset)

        canvas.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Delete, Qt.KeyboardModifier.NoModifier))

        assert len(canvas.studio.page) == 0


class TestPainting:
    """Tests for rendering the page."""

    def test_placeholder_and_image_colours(self, canvas, red_asset):
        studio = canvas.studio
        empty, filled = studio.page.apply_layout("2-panel-vertical")
        studio.page.assign_asset(filled.id, red_asset)

        image = canvas.grab().toImage()

        empty_point = canvas.panel_rect(empty).topLeft() + QPointF(6, 6)
        filled_point = canvas.panel_rect(filled).topLeft() + QPointF(6, 6)
        assert QColor(image.pixel(empty_point.toPoint())) == QColor(Colors.PLACEHOLDER_BG)
        assert QColor(image.pixel(filled_point.toPoint())).red() > 200
        assert QColor(image.pixel(filled_point.toPoint())).blue() < 60

    def test_same_id_with_new_pixels_repaints(self, canvas, png_base64):
        """An asset re-imported under the same id shows its new image."""
        studio = canvas.studio
        panel = studio.handle_asset_click(Asset(id="scene-1", prompt="Sky", base64=png_base64("red")))
        canvas.grab()

        studio.page.clear()
        panel = studio.handle_asset_click(Asset(id="scene-1", prompt="Sky", base64=png_base64("blue")))
        image = canvas.grab().toImage()

        centre = canvas.panel_rect(panel).center().toPoint()
        assert QColor(image.pixel(centre)).blue() > 200
        assert QColor(image.pixel(centre)).red() < 60

    def test_pixmap_cache_only_holds_page_assets(self, canvas, red_asset, blue_asset):
        studio = canvas.studio
        studio.handle_asset_click(red_asset)
        studio.handle_asset_click(blue_asset)
        canvas.grab()
        assert len(canvas._pixmaps) == 2

        studio.page.clear()
        canvas.grab()

        assert canvas._pixmaps == {}

    def test_non_base64_payload_paints_unavailable(self, canvas):
        studio = canvas.studio
        panel = studio.handle_asset_click(Asset(id="scene-x", prompt="Broken", base64="café"))

        image = canvas.grab().toImage()

        point = (canvas.panel_rect(panel).topLeft() + QPointF(6, 6)).toPoint()
        assert QColor(image.pixel(point)) == QColor(Colors.PLACEHOLDER_BG)
