"""
Comic Studio Core Package

Shared data models, schema validation and serialization helpers used by
every other layer of the studio.
"""

from .models import Asset, AssetKind, EMPTY_SLOT, EmptySlot, FilledSlot, Panel

__all__ = [
    "Asset",
    "AssetKind",
    "EMPTY_SLOT",
    "EmptySlot",
    "FilledSlot",
    "Panel",
]
