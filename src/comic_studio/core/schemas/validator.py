"""
Schema Validation Utilities

Validates asset library JSON before it replaces an in-memory library.

Checks are shallow: the payload must be a list of objects, and each
object must carry the required fields for its library kind as non-empty
strings. The ``base64`` field must also decode as base64 (an optional
``data:`` URL prefix is allowed) so that bad pixels never reach a
library. Anything else in the object is ignored.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

from ..models.assets import AssetKind


# Required fields per library kind (characters must be named)
REQUIRED_ASSET_FIELDS: dict[AssetKind, tuple[str, ...]] = {
    AssetKind.CHARACTER: ("id", "prompt", "base64", "name"),
    AssetKind.SCENE: ("id", "prompt", "base64"),
    AssetKind.PANEL: ("id", "prompt", "base64"),
}


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_asset(data: Any, kind: AssetKind, *, path: str = "") -> None:
    """
    Validate a single asset record.

    Args:
        data: Decoded JSON value for one asset
        kind: Library the asset is destined for
        path: Location of the record, used in error messages

    Raises:
        ValidationError: If data is not an object or a required field is
            missing, not a string, or empty, or base64 does not decode
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Asset must be an object, got {type(data).__name__}",
            path=path,
        )

    required = REQUIRED_ASSET_FIELDS[kind]
    missing = [f for f in required if not _is_filled_string(data.get(f))]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    if not _is_base64(data["base64"]):
        raise ValidationError(
            "Field base64 is not a valid base64 payload",
            path=path,
            errors=["Invalid field: base64"],
        )


def validate_library_payload(data: Any, kind: AssetKind) -> None:
    """
    Validate a whole library file payload.

    Args:
        data: Decoded JSON document
        kind: Library the payload will replace

    Raises:
        ValidationError: If data is not a list or any entry is invalid.
            All entry errors are collected into ``errors``.
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Library must be a JSON array, got {type(data).__name__}",
            path="",
        )

    errors: list[str] = []
    for index, entry in enumerate(data):
        try:
            validate_asset(entry, kind, path=f"[{index}]")
        except ValidationError as e:
            errors.append(f"[{index}]: {e}")

    if errors:
        raise ValidationError(
            f"Invalid {kind.value} library: {len(errors)} bad entries",
            path="",
            errors=errors,
        )


def _is_filled_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_base64(value: str) -> bool:
    if value.startswith("data:") and "," in value:
        value = value.split(",", 1)[1]
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True
