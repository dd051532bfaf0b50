"""
Core Models Package

Immutable data models shared by the library, composer and GUI layers.

All models in this package are frozen dataclasses. Updates create new
instances, which is what lets the page model swap its panel tuple in a
single assignment.
"""

from .assets import Asset, AssetKind
from .panels import EMPTY_SLOT, MIN_PANEL_SIZE_PCT, EmptySlot, FilledSlot, Panel, PanelImage

__all__ = [
    "Asset",
    "AssetKind",
    "EMPTY_SLOT",
    "MIN_PANEL_SIZE_PCT",
    "EmptySlot",
    "FilledSlot",
    "Panel",
    "PanelImage",
]
