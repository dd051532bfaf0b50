"""
Tests for composer.interaction.controller

Test Coverage:
- Drag: incremental anchor, percentage conversion
- Resize: cumulative travel from origin size, minimum size floor
- Lifecycle: enter/exit hooks, cancel, superseding, deleted targets
"""
import pytest

from comic_studio.composer.interaction import (
    ControllerState,
    GestureKind,
    InteractionController,
)
from comic_studio.composer.layout import PageModel
from comic_studio.core.models import MIN_PANEL_SIZE_PCT

CONTAINER = (1000, 2000)


@pytest.fixture
def page_with_panel(red_asset):
    page = PageModel()
    panel = page.add_panel(red_asset)  # 25, 25, 50 x 30
    return page, panel


class TestDrag:
    """Tests for drag gestures."""

    def test_drag_sequence_accumulates_exactly(self, page_with_panel):
        """Moves of (+6%,-3%) then (+4%,-2%) shift the panel by (+10%,-5%)."""
        # Arrange
        page, panel = page_with_panel
        controller = InteractionController(page)
        controller.pointer_down(panel.id, GestureKind.DRAG, (100, 100), CONTAINER)

        # Act
        controller.pointer_move((160, 40), CONTAINER)
        controller.pointer_move((200, 0), CONTAINER)

        # Assert
        moved = page.get(panel.id)
        assert moved.x == pytest.approx(35)
        assert moved.y == pytest.approx(20)
        assert (moved.width, moved.height) == (50, 30)

    def test_drag_uses_container_size_at_each_move(self, page_with_panel):
        page, panel = page_with_panel
        controller = InteractionController(page)
        controller.pointer_down(panel.id, GestureKind.DRAG, (0, 0), (1000, 1000))

        controller.pointer_move((100, 0), (1000, 1000))  # +10%
        controller.pointer_move((200, 0), (500, 1000))   # +20% of a narrower surface

        assert page.get(panel.id).x == pytest.approx(25 + 10 + 20)

    def test_pointer_down_selects_and_raises(self, red_asset):
        page = PageModel()
        first = page.add_panel(red_asset)
        second = page.add_panel(red_asset)
        page.select(second.id)
        controller = InteractionController(page)

        controller.pointer_down(first.id, GestureKind.DRAG, (0, 0), CONTAINER)

        assert page.selected_id == first.id
        assert page.get(first.id).z_index > page.get(second.id).z_index
        assert controller.state is ControllerState.DRAGGING

    def test_move_while_idle_is_ignored(self, page_with_panel):
        page, panel = page_with_panel
        controller = InteractionController(page)

        controller.pointer_move((500, 500), CONTAINER)

        assert page.get(panel.id) == panel
        assert controller.state is ControllerState.IDLE


class TestResize:
    """Tests for resize gestures."""

    def test_resize_uses_cumulative_travel(self, page_with_panel):
        # Arrange: origin size is 500 x 600 px
        page, panel = page_with_panel
        controller = InteractionController(page)
        controller.pointer_down(panel.id, GestureKind.RESIZE, (750, 1100), CONTAINER)
        assert controller.state is ControllerState.RESIZING

        # Act
        controller.pointer_move((800, 1150), CONTAINER)
        first = page.get(panel.id)
        controller.pointer_move((850, 1100), CONTAINER)
        second = page.get(panel.id)

        # Assert
        assert (first.width, first.height) == (pytest.approx(55), pytest.approx(32.5))
        assert (second.width, second.height) == (pytest.approx(60), pytest.approx(30))
        assert (second.x, second.y) == (panel.x, panel.y)

    def test_resize_never_below_minimum(self, page_with_panel):
        page, panel = page_with_panel
        controller = InteractionController(page)
        controller.pointer_down(panel.id, GestureKind.RESIZE, (750, 1100), CONTAINER)

        controller.pointer_move((-5000, -5000), CONTAINER)

        resized = page.get(panel.id)
        assert resized.width == MIN_PANEL_SIZE_PCT
        assert resized.height == MIN_PANEL_SIZE_PCT


class TestLifecycle:
    """Tests for gesture start/end and hooks."""

    def test_hooks_fire_once_per_gesture(self, page_with_panel):
        page, panel = page_with_panel
        entered, exited = [], []
        controller = InteractionController(page, on_enter=entered.append, on_exit=exited.append)

        controller.pointer_down(panel.id, GestureKind.DRAG, (0, 0), CONTAINER)
        controller.pointer_move((10, 10), CONTAINER)
        controller.pointer_up()
        controller.pointer_up()

        assert len(entered) == 1
        assert len(exited) == 1
        assert exited[0].panel_id == panel.id
        assert controller.state is ControllerState.IDLE

    def test_pointer_up_keeps_geometry(self, page_with_panel):
        page, panel = page_with_panel
        controller = InteractionController(page)
        controller.pointer_down(panel.id, GestureKind.DRAG, (0, 0), CONTAINER)
        controller.pointer_move((100, 0), CONTAINER)

        controller.pointer_up()
        controller.pointer_move((900, 900), CONTAINER)

        assert page.get(panel.id).x == pytest.approx(35)

    def test_new_pointer_down_supersedes_active_gesture(self, red_asset):
        page = PageModel()
        a = page.add_panel(red_asset)
        b = page.add_panel(red_asset)
        exited = []
        controller = InteractionController(page, on_exit=exited.append)
        controller.pointer_down(a.id, GestureKind.DRAG, (0, 0), CONTAINER)

        controller.pointer_down(b.id, GestureKind.RESIZE, (0, 0), CONTAINER)

        assert [s.panel_id for s in exited] == [a.id]
        assert controller.active.panel_id == b.id

    def test_pointer_down_unknown_panel_stays_idle(self):
        controller = InteractionController(PageModel())

        assert controller.pointer_down("ghost", GestureKind.DRAG, (0, 0), CONTAINER) is False
        assert not controller.is_active

    def test_zero_container_raises(self, page_with_panel):
        page, panel = page_with_panel
        controller = InteractionController(page)

        with pytest.raises(ValueError):
            controller.pointer_down(panel.id, GestureKind.DRAG, (0, 0), (0, 100))

    def test_forget_panel_cancels_gesture_on_it(self, page_with_panel):
        page, panel = page_with_panel
        exited = []
        controller = InteractionController(page, on_exit=exited.append)
        controller.pointer_down(panel.id, GestureKind.DRAG, (0, 0), CONTAINER)

        controller.forget_panel("other")
        assert controller.is_active
        controller.forget_panel(panel.id)

        assert not controller.is_active
        assert len(exited) == 1

    def test_move_after_target_deleted_cancels(self, page_with_panel):
        page, panel = page_with_panel
        controller = InteractionController(page)
        controller.pointer_down(panel.id, GestureKind.DRAG, (0, 0), CONTAINER)
        page.delete_panel(panel.id)

        controller.pointer_move((50, 50), CONTAINER)

        assert controller.state is ControllerState.IDLE
        assert len(page) == 0

    def test_teardown_releases_active_gesture(self, page_with_panel):
        page, panel = page_with_panel
        exited = []
        controller = InteractionController(page, on_exit=exited.append)
        controller.pointer_down(panel.id, GestureKind.RESIZE, (0, 0), CONTAINER)

        controller.teardown()

        assert not controller.is_active
        assert len(exited) == 1

    def test_click_selects_without_moving(self, page_with_panel):
        page, panel = page_with_panel
        page.clear_selection()
        controller = InteractionController(page)

        controller.click(panel.id)

        assert page.selected_id == panel.id
        assert page.get(panel.id) == panel
