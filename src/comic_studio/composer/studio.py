"""
Module: composer.studio

Purpose:
    Page Layout Studio: ties the page model, the interaction controller
    and the asset libraries together behind the actions the UI offers
    (click an asset, apply a preset, delete, reorder, manage the panel
    library, export the page).

Key Classes:
    - PageLayoutStudio: One editable page plus its libraries

Dependencies:
    - composer.layout: PageModel, presets
    - composer.interaction: InteractionController
    - composer.output: JPEG/PDF export
    - library: AssetLibrary, import/export

Used By:
    - gui.main_window: PageLayoutWindow
    - gui.widgets.page_canvas: PageCanvas
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from comic_studio.composer.config import PageConfig
from comic_studio.composer.interaction import InteractionController
from comic_studio.composer.layout import PageModel, ZDirection
from comic_studio.composer.output import export_page_jpeg, rasterize_page, render_page_to_pdf
from comic_studio.core.models import Asset, AssetKind, Panel
from comic_studio.core.utils.imaging import read_image_file_base64
from comic_studio.library import (
    AssetLibrary,
    default_library,
    export_library,
    import_library,
)

logger = logging.getLogger(__name__)


class PageLayoutStudio:
    """
    Editing session for one comic page.

    Attributes:
        page: The panel model
        interaction: Gesture controller bound to page
        libraries: Asset libraries by kind (panel, character, scene)
        config: Export settings

    Example:
        >>> studio = PageLayoutStudio()
        >>> studio.apply_layout("2-panel-vertical")
        >>> studio.page.select(studio.page.panels[0].id)
        >>> studio.handle_asset_click(scene)   # fills the first placeholder
        >>> studio.export_page(Path("exports"))
    """

    def __init__(
        self,
        *,
        config: Optional[PageConfig] = None,
        libraries: Optional[Mapping[AssetKind, AssetLibrary]] = None,
    ) -> None:
        self.config = config or PageConfig()
        self.page = PageModel()
        self.interaction = InteractionController(self.page)
        self.libraries: dict[AssetKind, AssetLibrary] = {
            kind: default_library(kind) for kind in AssetKind
        }
        if libraries:
            self.libraries.update(libraries)

    def library(self, kind: AssetKind) -> AssetLibrary:
        return self.libraries[AssetKind(kind)]

    # ─────────────────────────────────────────────────────────────────────────
    # Page actions
    # ─────────────────────────────────────────────────────────────────────────

    def handle_asset_click(self, asset: Asset) -> Panel:
        """
        Place an asset on the page.

        If the selected panel is a placeholder the asset fills it and its
        geometry is kept; otherwise a new default-sized panel is added.

        Returns:
            The filled or newly created panel
        """
        selected = self.page.selected_panel
        if selected is not None and selected.is_placeholder:
            logger.debug(f"Filling placeholder {selected.id} with {asset.id}")
            return self.page.assign_asset(selected.id, asset)
        return self.page.add_panel(asset)

    def apply_layout(self, preset_name: str) -> None:
        self.interaction.cancel()
        self.page.apply_layout(preset_name)

    def delete_panel(self, panel_id: str) -> bool:
        """Delete a panel, cancelling any gesture that targets it."""
        self.interaction.forget_panel(panel_id)
        return self.page.delete_panel(panel_id)

    def delete_selected(self) -> bool:
        selected_id = self.page.selected_id
        if selected_id is None:
            return False
        return self.delete_panel(selected_id)

    def bring_selected_to_front(self) -> Optional[Panel]:
        return self._reorder_selected(ZDirection.FRONT)

    def send_selected_to_back(self) -> Optional[Panel]:
        return self._reorder_selected(ZDirection.BACK)

    def _reorder_selected(self, direction: ZDirection) -> Optional[Panel]:
        selected_id = self.page.selected_id
        if selected_id is None:
            return None
        return self.page.set_z_order(selected_id, direction)

    # ─────────────────────────────────────────────────────────────────────────
    # Panel library
    # ─────────────────────────────────────────────────────────────────────────

    def add_panel_asset(self, base64: str, name: str) -> Asset:
        """Add a finished panel image to the panel library."""
        asset = Asset.new(AssetKind.PANEL, base64, prompt=name, name=name)
        return self.library(AssetKind.PANEL).add(asset)

    def upload_panel_image(self, path: Path, name: Optional[str] = None) -> Asset:
        """
        Add a JPEG/PNG file from disk to the panel library.

        Args:
            path: Image file
            name: Display name (defaults to the file stem)

        Raises:
            ValueError: If the name is blank or the file type unsupported
            ImageDecodeError: If the file is not a readable image
        """
        name = (path.stem if name is None else name).strip()
        if not name:
            raise ValueError("Panel name cannot be empty.")
        payload = read_image_file_base64(path)
        asset = self.add_panel_asset(payload, name)
        logger.info(f"Uploaded panel {name!r} from {path.name}")
        return asset

    def import_library(self, kind: AssetKind, path: Path) -> int:
        return import_library(self.library(kind), path)

    def export_library(self, kind: AssetKind, path: Path) -> Path:
        return export_library(self.library(kind), path)

    # ─────────────────────────────────────────────────────────────────────────
    # Export
    # ─────────────────────────────────────────────────────────────────────────

    def export_page(self, output_dir: Path, *, timestamp_ms: Optional[int] = None) -> Path:
        """Write the page as comic-page-<timestamp>.jpeg in output_dir."""
        return export_page_jpeg(
            self.page.panels,
            output_dir,
            config=self.config,
            timestamp_ms=timestamp_ms,
        )

    def export_page_pdf(self, output_path: Path) -> Path:
        """Write the page as a print-sized single-page PDF."""
        image = rasterize_page(self.page.panels, self.config)
        return render_page_to_pdf(image, output_path, dpi=self.config.dpi)
