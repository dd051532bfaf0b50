"""Unit tests for PageLayoutWindow wiring."""

import json
import logging
from unittest.mock import patch

import pytest

from comic_studio.composer import PageConfig, PageLayoutStudio
from comic_studio.core.models import AssetKind
from comic_studio.gui.main_window import PageLayoutWindow
from comic_studio.gui.models.settings import SettingsStore


@pytest.fixture
def window(qtbot, tmp_path):
    """Create a PageLayoutWindow backed by a temporary settings file."""
    settings = SettingsStore(tmp_path / "test_settings.json")
    studio = PageLayoutStudio(config=PageConfig(width=100, height=200))
    win = PageLayoutWindow(settings, studio)
    qtbot.addWidget(win)
    return win


class TestPageControls:
    """Tests for preset and selection buttons."""

    def test_preset_button_applies_layout(self, window):
        window.preset_buttons["3-panel-vertical"].click()

        assert len(window.studio.page) == 3

    def test_selection_buttons_follow_selection(self, window, red_asset):
        assert not window.delete_btn.isEnabled()

        window.galleries[AssetKind.SCENE].assetClicked.emit(red_asset)

        assert window.delete_btn.isEnabled()
        assert window.front_btn.isEnabled()
        window.delete_btn.click()
        assert len(window.studio.page) == 0
        assert not window.back_btn.isEnabled()

    def test_gallery_click_fills_selected_placeholder(self, window, red_asset):
        window.preset_buttons["2-panel-vertical"].click()
        first = window.studio.page.panels[0]
        window.studio.page.select(first.id)

        window.galleries[AssetKind.SCENE].assetClicked.emit(red_asset)

        assert len(window.studio.page) == 2
        assert window.studio.page.get(first.id).asset == red_asset


class TestLibraryActions:
    """Tests for user-visible library errors."""

    def test_export_empty_panel_library_warns(self, window):
        with patch("comic_studio.gui.main_window.QMessageBox") as mock_box:
            window.export_panels_btn.click()

        mock_box.warning.assert_called_once()
        assert mock_box.warning.call_args[0][2] == "Panel library is empty."

    def test_import_bad_file_shows_error(self, window, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps([{"id": "x"}]), encoding="utf-8")

        with patch("comic_studio.gui.main_window.QFileDialog") as mock_dialog, \
                patch("comic_studio.gui.main_window.QMessageBox") as mock_box:
            mock_dialog.getOpenFileName.return_value = (str(bad), "")
            window.import_panels_btn.click()

        mock_box.critical.assert_called_once()
        message = mock_box.critical.call_args[0][2]
        assert message == (
            "Could not import panel library. "
            "The file may be corrupt or in the wrong format."
        )

    def test_import_refreshes_gallery(self, window, tmp_path, png_base64):
        good = tmp_path / "scenes.json"
        good.write_text(json.dumps([{"id": "s1", "prompt": "Dock", "base64": png_base64()}]), encoding="utf-8")

        with patch("comic_studio.gui.main_window.QFileDialog") as mock_dialog:
            mock_dialog.getOpenFileName.return_value = (str(good), "")
            window._import_library(AssetKind.SCENE)

        assert window.galleries[AssetKind.SCENE].list.count() == 1

    def test_import_non_base64_payload_is_rejected(self, window, tmp_path, red_asset):
        window.studio.library(AssetKind.SCENE).add(red_asset)
        window._refresh_galleries()
        bad = tmp_path / "scenes.json"
        bad.write_text(json.dumps([{"id": "s1", "prompt": "Caf\u00e9", "base64": "caf\u00e9"}]), encoding="utf-8")

        with patch("comic_studio.gui.main_window.QFileDialog") as mock_dialog, \
                patch("comic_studio.gui.main_window.QMessageBox") as mock_box:
            mock_box.question.return_value = mock_box.StandardButton.Yes
            mock_dialog.getOpenFileName.return_value = (str(bad), "")
            window._import_library(AssetKind.SCENE)

        mock_box.critical.assert_called_once()
        assert window.studio.library(AssetKind.SCENE).assets == (red_asset,)
        assert window.galleries[AssetKind.SCENE].assets == (red_asset,)

    def test_panel_gallery_lists_first_twelve(self, window, tmp_path, png_base64):
        panels = [{"id": f"p{i}", "prompt": f"Panel {i}", "base64": png_base64()} for i in range(13)]
        path = tmp_path / "panels.json"
        path.write_text(json.dumps(panels), encoding="utf-8")

        with patch("comic_studio.gui.main_window.QFileDialog") as mock_dialog:
            mock_dialog.getOpenFileName.return_value = (str(path), "")
            window._import_library(AssetKind.PANEL)

        assert len(window.studio.library(AssetKind.PANEL)) == 13
        assert window.galleries[AssetKind.PANEL].list.count() == 12

    def test_import_over_existing_library_asks_first(self, window, tmp_path, sample_image):
        window.studio.upload_panel_image(sample_image)

        with patch("comic_studio.gui.main_window.QFileDialog") as mock_dialog, \
                patch("comic_studio.gui.main_window.QMessageBox") as mock_box:
            window.import_panels_btn.click()

        mock_box.question.assert_called_once()
        mock_dialog.getOpenFileName.assert_not_called()


class TestExport:
    """Tests for the export action."""

    def test_export_jpeg_writes_file_and_remembers_folder(self, window, tmp_path, red_asset):
        window.studio.handle_asset_click(red_asset)
        out_dir = tmp_path / "out"

        with patch("comic_studio.gui.main_window.QFileDialog") as mock_dialog:
            mock_dialog.getExistingDirectory.return_value = str(out_dir)
            window.export_btn.click()

        assert len(list(out_dir.glob("comic-page-*.jpeg"))) == 1
        assert window.settings.get_export_dir() == str(out_dir)


class TestLogQueue:
    """Tests for status bar log forwarding."""

    def test_log_messages_reach_status_bar(self, window):
        logging.getLogger("comic_studio.tests").info("Imported 3 scene assets")

        window._drain_log_queue()

        assert window.status_bar.currentMessage() == "Imported 3 scene assets"

    def test_close_detaches_handler(self, window):
        handler = window._log_handler

        window.close()

        assert handler not in logging.getLogger("comic_studio").handlers
