"""
Image payload helpers.

Assets store pixels as base64 strings; these helpers convert between that
form, PIL images and image files on disk.
"""

from __future__ import annotations

import base64
import binascii
import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError

# Upload formats accepted for panel images
SUPPORTED_UPLOAD_SUFFIXES = (".jpg", ".jpeg", ".png")


class ImageDecodeError(Exception):
    """Raised when a base64 payload does not decode to an image."""


def decode_base64_image(payload: str) -> Image.Image:
    """
    Decode a base64 payload into a fully loaded PIL image.

    A ``data:image/...;base64,`` prefix is tolerated and stripped.

    Raises:
        ImageDecodeError: If the payload is empty, not base64, or not an image
    """
    if not payload:
        raise ImageDecodeError("Empty image payload")

    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"Payload is not valid base64: {e}") from e

    try:
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ImageDecodeError(f"Payload is not a readable image: {e}") from e
    return img


def encode_image_base64(img: Image.Image, *, format: str = "PNG") -> str:
    """Encode a PIL image to a base64 string."""
    buf = io.BytesIO()
    if format.upper() in ("JPEG", "JPG") and img.mode not in ("RGB", "L"):
        img = img.convert("RGB")
    img.save(buf, format=format)
    return base64.b64encode(buf.getvalue()).decode("ascii")


def read_image_file_base64(path: Path) -> str:
    """
    Read a JPEG/PNG file and return its bytes as base64.

    The file is opened with PIL first so that non-images are rejected
    before they reach a library.

    Raises:
        ValueError: If the suffix is not a supported upload format
        ImageDecodeError: If the file is not a readable image
    """
    if path.suffix.lower() not in SUPPORTED_UPLOAD_SUFFIXES:
        raise ValueError(f"Unsupported image type: {path.suffix or path.name}")

    raw = path.read_bytes()
    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ImageDecodeError(f"{path.name} is not a readable image: {e}") from e
    return base64.b64encode(raw).decode("ascii")
