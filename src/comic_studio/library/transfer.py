"""
Module: library.transfer

Purpose:
    Save and load asset libraries as JSON files so a collection can be
    reused across sessions or shared.

Key Functions:
    - export_library(): Write a library to a .json file
    - import_library(): Validate a .json file and replace a library
    - default_export_name(): Suggested file name per library kind

Dependencies:
    - core.utils.serialization: JSON shape handling
    - library.store: AssetLibrary and library errors

Used By:
    - composer.studio: Import/Export Library actions
"""

from __future__ import annotations

import logging
from pathlib import Path

from comic_studio.core.models import AssetKind
from comic_studio.core.schemas import ValidationError
from comic_studio.core.utils import load_library_json, save_library_json

from .store import AssetLibrary, EmptyLibraryError, LibraryFormatError

logger = logging.getLogger(__name__)

_EXPORT_NAMES = {
    AssetKind.PANEL: "comic-panels.json",
    AssetKind.CHARACTER: "comic-characters.json",
    AssetKind.SCENE: "comic-scenes.json",
}


def default_export_name(kind: AssetKind) -> str:
    """File name offered when saving a library of this kind."""
    return _EXPORT_NAMES[kind]


def export_library(library: AssetLibrary, path: Path) -> Path:
    """
    Write a library to a JSON file.

    If path is a directory the default file name for the library kind is
    used inside it.

    Args:
        library: Library to save
        path: Target file or directory

    Returns:
        Path of the written file

    Raises:
        EmptyLibraryError: If the library has no assets (nothing is written)
        OSError: If the file cannot be written
    """
    if library.is_empty:
        raise EmptyLibraryError(f"{library.kind.value.capitalize()} library is empty.")

    if path.is_dir():
        path = path / default_export_name(library.kind)

    save_library_json(library.assets, path)
    logger.info(f"Exported {len(library)} {library.kind.value} assets to {path}")
    return path


def import_library(library: AssetLibrary, path: Path) -> int:
    """
    Replace a library with the contents of a JSON file.

    The file is fully parsed and validated before the library is touched;
    on any format problem the existing contents are left as they were.

    Args:
        library: Library to replace
        path: JSON file to read

    Returns:
        Number of assets kept (imports beyond capacity are dropped)

    Raises:
        FileNotFoundError: If path does not exist
        LibraryFormatError: If the file is not a valid library
    """
    try:
        assets = load_library_json(path, library.kind)
    except ValidationError as e:
        logger.warning(f"Rejected {library.kind.value} library import from {path}: {e}")
        raise LibraryFormatError(
            f"Invalid {library.kind.value} file format.",
            errors=e.errors or [str(e)],
        ) from e

    kept = library.replace_all(assets)
    logger.info(f"Imported {kept} {library.kind.value} assets from {path}")
    return kept
