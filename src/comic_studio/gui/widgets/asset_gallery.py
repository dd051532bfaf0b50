"""
Asset gallery widget.

Thumbnail grid for one asset library (panels, characters or scenes).
Clicking a thumbnail emits the asset so the window can place it on
the page.
"""
from __future__ import annotations

from typing import Iterable, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QGroupBox, QLabel, QListView, QListWidget, QListWidgetItem, QVBoxLayout

from comic_studio.core.models import Asset
from comic_studio.gui.utils.pixmaps import pixmap_from_base64

THUMBNAIL_SIZE = 72


class AssetGallery(QGroupBox):
    """Titled grid of asset thumbnails."""

    assetClicked = Signal(object)  # Asset

    def __init__(self, title: str, empty_text: str = "No assets yet", parent=None):
        super().__init__(title, parent)
        self._assets: list[Asset] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 12, 6, 6)
        layout.setSpacing(4)

        self.empty_label = QLabel(empty_text)
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setWordWrap(True)
        layout.addWidget(self.empty_label)

        self.list = QListWidget()
        self.list.setViewMode(QListView.ViewMode.IconMode)
        self.list.setIconSize(QSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE))
        self.list.setResizeMode(QListView.ResizeMode.Adjust)
        self.list.setMovement(QListView.Movement.Static)
        self.list.setSpacing(4)
        self.list.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.list)

        self._sync_empty_state()

    @property
    def assets(self) -> tuple[Asset, ...]:
        return tuple(self._assets)

    def set_assets(self, assets: Iterable[Asset], max_items: Optional[int] = None) -> None:
        """Replace the shown thumbnails. max_items caps how many are listed."""
        self._assets = list(assets)
        if max_items is not None:
            self._assets = self._assets[:max_items]

        self.list.clear()
        for index, asset in enumerate(self._assets):
            item = QListWidgetItem(_thumbnail_icon(asset), asset.display_name)
            item.setToolTip(asset.prompt)
            item.setData(Qt.ItemDataRole.UserRole, index)
            self.list.addItem(item)
        self._sync_empty_state()

    def _sync_empty_state(self) -> None:
        empty = not self._assets
        self.empty_label.setVisible(empty)
        self.list.setVisible(not empty)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        index = item.data(Qt.ItemDataRole.UserRole)
        if isinstance(index, int) and 0 <= index < len(self._assets):
            self.assetClicked.emit(self._assets[index])


def _thumbnail_icon(asset: Asset) -> QIcon:
    pixmap = pixmap_from_base64(asset.base64)
    if pixmap.isNull():
        return QIcon()
    return QIcon(pixmap.scaled(
        THUMBNAIL_SIZE,
        THUMBNAIL_SIZE,
        Qt.AspectRatioMode.KeepAspectRatio,
        Qt.TransformationMode.SmoothTransformation,
    ))
