"""
Module: composer

Purpose:
    Page composition engine: panel model and presets, pointer gesture
    controller, and page rasterization/export.

Key Classes:
    - PageLayoutStudio: Editing session for one page
    - PageModel: Panels and selection
    - InteractionController: Drag/resize state machine
    - PageConfig: Export raster settings

Dependencies:
    - PIL: Rasterization
    - reportlab: PDF export

Used By:
    - gui: PySide6 page layout window
"""

from .config import PageConfig
from .interaction import ControllerState, GestureKind, InteractionController
from .layout import PageModel, ZDirection, get_preset, preset_names
from .output import ExportError, export_page_jpeg, rasterize_page, render_page_to_pdf
from .studio import PageLayoutStudio

__all__ = [
    # Config
    "PageConfig",
    # Model
    "PageModel",
    "ZDirection",
    "get_preset",
    "preset_names",
    # Interaction
    "ControllerState",
    "GestureKind",
    "InteractionController",
    # Output
    "ExportError",
    "export_page_jpeg",
    "rasterize_page",
    "render_page_to_pdf",
    # Facade
    "PageLayoutStudio",
]
