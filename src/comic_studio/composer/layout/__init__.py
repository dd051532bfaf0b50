"""
Module: composer.layout

Purpose:
    Panel model and preset layouts for the page being composed.

Key Classes:
    - PageModel: Panels and selection for one page
    - LayoutPreset: Named arrangement of placeholder slots
    - ZDirection: front/back for z-order commands

Key Functions:
    - get_preset(): Look up a preset by name
    - preset_names(): Names in display order
"""

from .page import DEFAULT_PANEL_GEOMETRY, PageModel, ZDirection
from .presets import PRESETS, LayoutPreset, SlotGeometry, get_preset, preset_names

__all__ = [
    # Model
    "PageModel",
    "ZDirection",
    "DEFAULT_PANEL_GEOMETRY",
    # Presets
    "PRESETS",
    "LayoutPreset",
    "SlotGeometry",
    "get_preset",
    "preset_names",
]
