"""
Pixmap helpers for base64 asset payloads.
"""
from __future__ import annotations

import base64
import binascii

from PySide6.QtGui import QPixmap


def pixmap_from_base64(payload: str) -> QPixmap:
    """
    Build a QPixmap from an asset's base64 payload.

    A ``data:`` URL prefix is stripped. Payloads that are not base64 or
    not an image give a null pixmap instead of raising.
    """
    pixmap = QPixmap()
    if not payload:
        return pixmap
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return pixmap
    pixmap.loadFromData(raw)
    return pixmap
