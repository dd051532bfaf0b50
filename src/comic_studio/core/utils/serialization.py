"""
Serialization Utilities

Provides to/from JSON utilities for asset libraries.

Library files are a plain JSON array of asset objects
(``[{"id", "prompt", "base64", "name"?}, ...]``), the same shape the
studio has always written, so older exports keep loading.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.assets import Asset, AssetKind
from ..schemas.validator import validate_asset, validate_library_payload, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Asset Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_asset(asset: Asset) -> dict[str, Any]:
    """Serialize an Asset to a dictionary."""
    return asset.to_dict()


def deserialize_asset(
    data: dict[str, Any],
    kind: AssetKind,
    *,
    validate: bool = True,
) -> Asset:
    """
    Deserialize an Asset from a dictionary.

    Args:
        data: Dictionary from JSON
        kind: Library kind, decides which fields are required
        validate: Whether to validate the shape first

    Returns:
        Asset instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_asset(data, kind)
    return Asset.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Library Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_library(assets: Iterable[Asset]) -> list[dict[str, Any]]:
    """Serialize assets to the library JSON array."""
    return [serialize_asset(a) for a in assets]


def deserialize_library(
    data: Any,
    kind: AssetKind,
    *,
    validate: bool = True,
) -> list[Asset]:
    """
    Deserialize a library JSON array.

    Validation runs over the whole payload before any asset is built, so
    a bad entry anywhere rejects the file as a unit.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_library_payload(data, kind)
    return [Asset.from_dict(entry) for entry in data]


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_library_json(path: Path, kind: AssetKind) -> list[Asset]:
    """
    Load and validate a library file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or has the wrong shape
    """
    if not path.exists():
        raise FileNotFoundError(f"Library file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(
            f"Invalid JSON in {path.name}: {e}",
            path=str(path),
        ) from e

    return deserialize_library(data, kind)


def save_library_json(assets: Iterable[Asset], path: Path) -> None:
    """Write assets to a library file (pretty-printed, UTF-8)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = serialize_library(assets)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
