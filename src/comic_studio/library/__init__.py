"""
Module: library

Purpose:
    Character, scene and panel asset libraries plus JSON import/export.

Key Classes:
    - AssetLibrary: Ordered asset collection with capacity

Key Functions:
    - default_library(): Library with the default capacity for a kind
    - import_library() / export_library(): JSON file transfer
"""

from .store import (
    AssetLibrary,
    DEFAULT_CAPACITIES,
    EmptyLibraryError,
    LibraryError,
    LibraryFormatError,
    LibraryFullError,
    default_library,
)
from .transfer import default_export_name, export_library, import_library

__all__ = [
    "AssetLibrary",
    "DEFAULT_CAPACITIES",
    "EmptyLibraryError",
    "LibraryError",
    "LibraryFormatError",
    "LibraryFullError",
    "default_library",
    "default_export_name",
    "export_library",
    "import_library",
]
