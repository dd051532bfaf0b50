"""
Main Window for the Comic Studio page layout GUI.
"""
import logging
import queue
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QFileDialog, QGridLayout, QGroupBox, QHBoxLayout, QInputDialog, QMainWindow,
    QMessageBox, QPushButton, QScrollArea, QStatusBar, QVBoxLayout, QWidget
)

from comic_studio import __version__
from comic_studio.composer import ExportError, PageLayoutStudio, get_preset, preset_names
from comic_studio.core.models import Asset, AssetKind
from comic_studio.core.utils.imaging import ImageDecodeError
from comic_studio.gui.models.settings import SettingsStore
from comic_studio.gui.styles.theme import Colors
from comic_studio.gui.utils.logging_utils import (
    attach_queue_handler, detach_queue_handler, drain_queue
)
from comic_studio.gui.utils.paths import get_default_export_dir
from comic_studio.gui.widgets.asset_gallery import AssetGallery
from comic_studio.gui.widgets.page_canvas import PageCanvas
from comic_studio.gui.widgets.settings_dialog import SettingsDialog
from comic_studio.library import EmptyLibraryError, LibraryFormatError, LibraryFullError

logger = logging.getLogger(__name__)

LOGGER_NAME = "comic_studio"
JSON_FILTER = "JSON files (*.json)"
IMAGE_FILTER = "Images (*.png *.jpg *.jpeg)"

# Panel library is unbounded; its gallery lists the first dozen
PANEL_GALLERY_LIMIT = 12


class PageLayoutWindow(QMainWindow):
    def __init__(self, settings: SettingsStore, studio: Optional[PageLayoutStudio] = None):
        super().__init__()
        self.settings = settings
        self.studio = studio or PageLayoutStudio()

        self.setWindowTitle("Comic Studio - Page Layout")
        self.resize(1280, 900)
        self.setMinimumSize(900, 640)

        # --- Menu Bar ---
        file_menu = self.menuBar().addMenu("File")
        export_action = QAction("Export Page as JPEG...", self)
        export_action.setShortcut(QKeySequence("Ctrl+E"))
        export_action.triggered.connect(self._export_jpeg)
        file_menu.addAction(export_action)
        pdf_action = QAction("Export Page as PDF...", self)
        pdf_action.triggered.connect(self._export_pdf)
        file_menu.addAction(pdf_action)
        file_menu.addSeparator()
        settings_action = QAction("Settings...", self)
        settings_action.triggered.connect(self._show_settings)
        file_menu.addAction(settings_action)
        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = self.menuBar().addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # --- Central Widget ---
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(8)

        sidebar = QScrollArea()
        sidebar.setWidgetResizable(True)
        sidebar.setFixedWidth(320)
        sidebar.setWidget(self._build_sidebar())
        main_layout.addWidget(sidebar)

        self.canvas = PageCanvas(self.studio)
        self.canvas.selectionChanged.connect(self._on_selection_changed)
        main_layout.addWidget(self.canvas, 1)

        # --- Status Bar ---
        self.status_bar = QStatusBar()
        self.status_bar.setStyleSheet(f"background-color: {Colors.SURFACE}; color: {Colors.TEXT_SECONDARY};")
        self.status_bar.showMessage("Ready")
        self.setStatusBar(self.status_bar)

        # --- Log Queue ---
        self.log_queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue, LOGGER_NAME)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        geometry = self.settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(bytes.fromhex(geometry))

        self._refresh_galleries()
        self._on_selection_changed(self.studio.page.selected_id)

    # ─────────────────────────────────────────────────────────────────────────
    # Layout
    # ─────────────────────────────────────────────────────────────────────────

    def _build_sidebar(self) -> QWidget:
        sidebar = QWidget()
        layout = QVBoxLayout(sidebar)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        # Layout presets
        presets_box = QGroupBox("Layouts")
        presets_layout = QHBoxLayout(presets_box)
        self.preset_buttons = {}
        for name in preset_names():
            btn = QPushButton(get_preset(name).label)
            btn.clicked.connect(lambda _=False, n=name: self._apply_layout(n))
            presets_layout.addWidget(btn)
            self.preset_buttons[name] = btn
        layout.addWidget(presets_box)

        # Selected panel tools
        panel_box = QGroupBox("Selected Panel")
        panel_layout = QHBoxLayout(panel_box)
        self.delete_btn = QPushButton("Delete")
        self.delete_btn.clicked.connect(self._delete_selected)
        self.front_btn = QPushButton("To Front")
        self.front_btn.clicked.connect(self._bring_to_front)
        self.back_btn = QPushButton("To Back")
        self.back_btn.clicked.connect(self._send_to_back)
        for btn in (self.delete_btn, self.front_btn, self.back_btn):
            panel_layout.addWidget(btn)
        layout.addWidget(panel_box)

        # Export
        self.export_btn = QPushButton("Export Page")
        self.export_btn.setObjectName("primaryButton")
        self.export_btn.clicked.connect(self._export_jpeg)
        layout.addWidget(self.export_btn)
        self.export_pdf_btn = QPushButton("Export PDF")
        self.export_pdf_btn.clicked.connect(self._export_pdf)
        layout.addWidget(self.export_pdf_btn)

        # Panel library
        library_box = QGroupBox("Panel Library")
        library_layout = QGridLayout(library_box)
        self.upload_btn = QPushButton("Upload")
        self.upload_btn.clicked.connect(self._upload_panel)
        self.import_panels_btn = QPushButton("Import")
        self.import_panels_btn.clicked.connect(lambda: self._import_library(AssetKind.PANEL))
        self.export_panels_btn = QPushButton("Export")
        self.export_panels_btn.clicked.connect(lambda: self._export_library(AssetKind.PANEL))
        library_layout.addWidget(self.upload_btn, 0, 0)
        library_layout.addWidget(self.import_panels_btn, 0, 1)
        library_layout.addWidget(self.export_panels_btn, 0, 2)
        layout.addWidget(library_box)

        # Galleries
        self.galleries = {
            AssetKind.PANEL: AssetGallery("Panels", "Upload or import finished panels"),
            AssetKind.CHARACTER: AssetGallery("Characters", "Import a character library"),
            AssetKind.SCENE: AssetGallery("Scenes", "Import a scene library"),
        }
        for kind, gallery in self.galleries.items():
            gallery.assetClicked.connect(self._on_asset_clicked)
            layout.addWidget(gallery)
            if kind is not AssetKind.PANEL:
                btn = QPushButton(f"Import {kind.value.capitalize()}s")
                btn.clicked.connect(lambda _=False, k=kind: self._import_library(k))
                layout.addWidget(btn)

        layout.addStretch(1)

        self.settings_btn = QPushButton("Settings")
        self.settings_btn.clicked.connect(self._show_settings)
        layout.addWidget(self.settings_btn)
        return sidebar

    def _refresh_galleries(self):
        for kind, gallery in self.galleries.items():
            library = self.studio.library(kind)
            limit = PANEL_GALLERY_LIMIT if kind is AssetKind.PANEL else library.capacity
            gallery.set_assets(library.assets, max_items=limit)

    # ─────────────────────────────────────────────────────────────────────────
    # Page actions
    # ─────────────────────────────────────────────────────────────────────────

    def _apply_layout(self, name: str):
        self.studio.apply_layout(name)
        self._page_changed()

    def _on_asset_clicked(self, asset: Asset):
        self.studio.handle_asset_click(asset)
        self._page_changed()

    def _delete_selected(self):
        if self.studio.delete_selected():
            self._page_changed()

    def _bring_to_front(self):
        if self.studio.bring_selected_to_front() is not None:
            self._page_changed()

    def _send_to_back(self):
        if self.studio.send_selected_to_back() is not None:
            self._page_changed()

    def _page_changed(self):
        self._on_selection_changed(self.studio.page.selected_id)
        self.canvas.update()

    def _on_selection_changed(self, panel_id):
        has_selection = panel_id is not None
        for btn in (self.delete_btn, self.front_btn, self.back_btn):
            btn.setEnabled(has_selection)

    # ─────────────────────────────────────────────────────────────────────────
    # Export
    # ─────────────────────────────────────────────────────────────────────────

    def _export_dir(self) -> Path:
        stored = self.settings.get_export_dir()
        return Path(stored) if stored else get_default_export_dir()

    def _export_jpeg(self):
        folder = QFileDialog.getExistingDirectory(self, "Export Page", str(self._export_dir()))
        if not folder:
            return
        try:
            path = self.studio.export_page(Path(folder))
        except ExportError as e:
            QMessageBox.critical(self, "Error", f"Failed to export page:\n{e}")
            return
        self.settings.set_export_dir(folder)
        self.status_bar.showMessage(f"Saved {path.name}", 5000)

    def _export_pdf(self):
        default = self._export_dir() / "comic-page.pdf"
        filename, _ = QFileDialog.getSaveFileName(self, "Export PDF", str(default), "PDF files (*.pdf)")
        if not filename:
            return
        try:
            path = self.studio.export_page_pdf(Path(filename))
        except ExportError as e:
            QMessageBox.critical(self, "Error", f"Failed to export PDF:\n{e}")
            return
        self.settings.set_export_dir(str(path.parent))
        self.status_bar.showMessage(f"Saved {path.name}", 5000)

    # ─────────────────────────────────────────────────────────────────────────
    # Libraries
    # ─────────────────────────────────────────────────────────────────────────

    def _upload_panel(self):
        filename, _ = QFileDialog.getOpenFileName(self, "Upload Panel", str(self._export_dir()), IMAGE_FILTER)
        if not filename:
            return
        path = Path(filename)
        name, ok = QInputDialog.getText(self, "Panel Name", "Name for this panel:", text=path.stem)
        if not ok:
            return
        try:
            self.studio.upload_panel_image(path, name)
        except (ValueError, ImageDecodeError, LibraryFullError) as e:
            QMessageBox.warning(self, "Error", str(e))
            return
        except OSError as e:
            QMessageBox.critical(self, "Error", f"Could not read {path.name}:\n{e}")
            return
        self._refresh_galleries()

    def _import_library(self, kind: AssetKind):
        library = self.studio.library(kind)
        if not library.is_empty:
            answer = QMessageBox.question(
                self,
                "Replace Library",
                f"Importing will replace your current {kind.value} library. Continue?",
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
                QMessageBox.StandardButton.No,
            )
            if answer != QMessageBox.StandardButton.Yes:
                return

        filename, _ = QFileDialog.getOpenFileName(
            self, f"Import {kind.value.capitalize()} Library", str(self._export_dir()), JSON_FILTER
        )
        if not filename:
            return
        try:
            self.studio.import_library(kind, Path(filename))
        except (LibraryFormatError, OSError) as e:
            logger.warning(f"Import failed: {e}")
            QMessageBox.critical(
                self,
                "Error",
                f"Could not import {kind.value} library. "
                "The file may be corrupt or in the wrong format.",
            )
            return
        self._refresh_galleries()

    def _export_library(self, kind: AssetKind):
        library = self.studio.library(kind)
        if library.is_empty:
            QMessageBox.warning(self, "Error", f"{kind.value.capitalize()} library is empty.")
            return
        folder = QFileDialog.getExistingDirectory(self, "Export Library", str(self._export_dir()))
        if not folder:
            return
        try:
            path = self.studio.export_library(kind, Path(folder))
        except (EmptyLibraryError, OSError) as e:
            QMessageBox.critical(self, "Error", f"Failed to export library:\n{e}")
            return
        self.status_bar.showMessage(f"Saved {path.name}", 5000)

    # ─────────────────────────────────────────────────────────────────────────
    # Misc
    # ─────────────────────────────────────────────────────────────────────────

    def _show_settings(self):
        dialog = SettingsDialog(self.settings.get_api_settings(), self)
        if dialog.exec():
            self.settings.set_api_settings(dialog.settings())

    def _show_about(self):
        QMessageBox.about(
            self,
            "About Comic Studio",
            "<h3>Comic Studio</h3>"
            f"<p>Version: {__version__}</p>"
            "<p>Compose comic pages from generated panels, characters and scenes.</p>"
        )

    def _drain_log_queue(self):
        for text, level in drain_queue(self.log_queue):
            timeout = 0 if level in ("WARNING", "ERROR", "CRITICAL") else 5000
            self.status_bar.showMessage(text, timeout)

    def closeEvent(self, event):
        """Save UI state on close."""
        self.studio.interaction.teardown()
        self.log_timer.stop()
        detach_queue_handler(self._log_handler, LOGGER_NAME)
        self.settings.set_window_geometry(self.saveGeometry().toHex().data().decode())
        super().closeEvent(event)
