"""Custom widgets for the page layout window."""

from .asset_gallery import AssetGallery
from .page_canvas import PageCanvas
from .settings_dialog import SettingsDialog

__all__ = ["AssetGallery", "PageCanvas", "SettingsDialog"]
