"""
Schemas Package

Shape validation for asset library JSON.
"""

from .validator import (
    validate_asset,
    validate_library_payload,
    ValidationError,
    REQUIRED_ASSET_FIELDS,
)

__all__ = [
    "validate_asset",
    "validate_library_payload",
    "ValidationError",
    "REQUIRED_ASSET_FIELDS",
]
