"""Unit tests for AssetGallery and SettingsDialog."""

from comic_studio.core.models import Asset
from comic_studio.gui.models.settings import ApiSettings
from comic_studio.gui.widgets.asset_gallery import AssetGallery
from comic_studio.gui.widgets.settings_dialog import SettingsDialog


class TestAssetGallery:
    """Tests for the thumbnail gallery."""

    def test_empty_gallery_shows_hint(self, qtbot):
        gallery = AssetGallery("Scenes", "Nothing here")
        qtbot.addWidget(gallery)

        assert gallery.list.count() == 0
        assert not gallery.empty_label.isHidden()

    def test_set_assets_respects_max_items(self, qtbot, red_asset, blue_asset, character_asset):
        gallery = AssetGallery("Scenes")
        qtbot.addWidget(gallery)

        gallery.set_assets([red_asset, blue_asset, character_asset], max_items=2)

        assert gallery.list.count() == 2
        assert gallery.list.item(0).text() == "A red sky"
        assert gallery.empty_label.isHidden()

    def test_click_emits_asset(self, qtbot, red_asset, character_asset):
        gallery = AssetGallery("Characters")
        qtbot.addWidget(gallery)
        gallery.set_assets([red_asset, character_asset])

        with qtbot.waitSignal(gallery.assetClicked, timeout=1000) as blocker:
            gallery.list.itemClicked.emit(gallery.list.item(1))

        assert blocker.args == [character_asset]

    def test_undecodable_thumbnail_still_listed(self, qtbot):
        gallery = AssetGallery("Panels")
        qtbot.addWidget(gallery)

        gallery.set_assets([Asset(id="p1", prompt="Broken", base64="AAAA")])

        assert gallery.list.count() == 1
        assert gallery.list.item(0).icon().isNull()

    def test_non_ascii_payload_does_not_raise(self, qtbot):
        gallery = AssetGallery("Scenes")
        qtbot.addWidget(gallery)

        gallery.set_assets([Asset(id="s1", prompt="Café", base64="café")])

        assert gallery.list.item(0).icon().isNull()

    def test_click_with_duplicate_ids_emits_clicked_asset(self, qtbot, png_base64):
        first = Asset(id="s1", prompt="Harbour", base64=png_base64("red"))
        second = Asset(id="s1", prompt="Lighthouse", base64=png_base64("blue"))
        gallery = AssetGallery("Scenes")
        qtbot.addWidget(gallery)
        gallery.set_assets([first, second])

        with qtbot.waitSignal(gallery.assetClicked, timeout=1000) as blocker:
            gallery.list.itemClicked.emit(gallery.list.item(1))

        assert blocker.args == [second]


class TestSettingsDialog:
    """Tests for the API key dialog."""

    def test_initial_state_reflects_settings(self, qtbot):
        dialog = SettingsDialog(ApiSettings(use_custom_key=False, api_key="abc"))
        qtbot.addWidget(dialog)

        assert not dialog.custom_key_check.isChecked()
        assert not dialog.api_key_edit.isEnabled()
        assert dialog.api_key_edit.text() == "abc"

    def test_settings_returns_edited_values(self, qtbot):
        dialog = SettingsDialog(ApiSettings())
        qtbot.addWidget(dialog)

        dialog.custom_key_check.setChecked(True)
        dialog.api_key_edit.setText("  new-key ")

        assert dialog.api_key_edit.isEnabled()
        assert dialog.settings() == ApiSettings(use_custom_key=True, api_key="new-key")
