"""
Module: composer.output.rasterizer

Purpose:
    Flatten the page's panels onto the fixed-resolution export raster
    and write it as a JPEG.

    Panels are drawn bottom to top so higher z-indices cover lower ones.
    Each image is stretched to exactly fill its rectangle (no
    letterboxing). Placeholders are left as background. A panel whose
    image cannot be decoded is skipped with a warning and the rest of the
    page still renders.

Key Functions:
    - rasterize_page(): Panels -> PIL image
    - encode_jpeg(): PIL image -> JPEG bytes
    - export_page_jpeg(): Rasterize, encode and write comic-page-<ms>.jpeg

Dependencies:
    - PIL: Raster surface and image scaling
    - core.utils.imaging: base64 decoding
    - composer.config: PageConfig

Used By:
    - composer.studio: Export Page action
    - composer.output.pdf: PDF export
"""

from __future__ import annotations

import io
import logging
import time
from pathlib import Path
from typing import Iterable, Optional

from PIL import Image

from comic_studio.composer.config import PageConfig
from comic_studio.core.models import Panel
from comic_studio.core.utils.imaging import ImageDecodeError, decode_base64_image

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "comic-page"


class ExportError(Exception):
    """Raised when the page cannot be rendered or written at all."""


def rasterize_page(panels: Iterable[Panel], config: Optional[PageConfig] = None) -> Image.Image:
    """
    Render panels onto a new RGB page.

    Args:
        panels: Panels in any order (sorted by z-index here, stable)
        config: Export size and background (defaults to PageConfig())

    Returns:
        RGB image of config.width x config.height

    Raises:
        ExportError: If the page surface cannot be created

    Example:
        >>> page = rasterize_page(model.panels)
        >>> page.size
        (1988, 3075)
    """
    config = config or PageConfig()

    try:
        page = Image.new("RGB", (config.width, config.height), config.background)
    except (ValueError, MemoryError) as e:
        raise ExportError(f"Failed to create page surface for export: {e}") from e

    drawn = 0
    for panel in sorted(panels, key=lambda p: p.z_index):
        if panel.is_placeholder or not panel.asset.has_pixels:
            continue
        if _draw_panel(page, panel):
            drawn += 1

    logger.debug(f"Rasterized {drawn} panels at {config.width}x{config.height}")
    return page


def _draw_panel(page: Image.Image, panel: Panel) -> bool:
    """Stretch a panel's image into its rectangle. Returns False if nothing was drawn."""
    left, top, width, height = panel.pixel_box(page.width, page.height)
    x0, y0 = round(left), round(top)
    x1, y1 = x0 + max(1, round(width)), y0 + max(1, round(height))

    # Only the part of the rectangle that lands on the page is resampled
    vx0, vy0 = max(0, x0), max(0, y0)
    vx1, vy1 = min(page.width, x1), min(page.height, y1)
    if vx1 <= vx0 or vy1 <= vy0:
        return False

    asset = panel.asset
    try:
        img = decode_base64_image(asset.base64)
    except ImageDecodeError as e:
        logger.warning(f"Failed to load image for export ({asset.display_name}): {e}")
        return False

    sx = img.width / (x1 - x0)
    sy = img.height / (y1 - y0)
    source_box = ((vx0 - x0) * sx, (vy0 - y0) * sy, (vx1 - x0) * sx, (vy1 - y0) * sy)

    img = img.convert("RGBA").resize((vx1 - vx0, vy1 - vy0), Image.Resampling.LANCZOS, box=source_box)
    page.paste(img, (vx0, vy0), img)
    return True


def encode_jpeg(image: Image.Image, *, quality: int = 90) -> bytes:
    """
    Encode an image as JPEG.

    Raises:
        ExportError: If encoding fails
    """
    buf = io.BytesIO()
    try:
        image.convert("RGB").save(buf, format="JPEG", quality=quality)
    except (OSError, ValueError) as e:
        raise ExportError(f"Failed to encode page as JPEG: {e}") from e
    return buf.getvalue()


def export_filename(timestamp_ms: Optional[int] = None) -> str:
    """File name for an exported page, e.g. comic-page-1718000000000.jpeg."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{EXPORT_PREFIX}-{timestamp_ms}.jpeg"


def export_page_jpeg(
    panels: Iterable[Panel],
    output_dir: Path,
    *,
    config: Optional[PageConfig] = None,
    timestamp_ms: Optional[int] = None,
) -> Path:
    """
    Rasterize panels and save the page as a JPEG in output_dir.

    The JPEG is encoded fully in memory before the file is created, so a
    failure never leaves a partial file behind.

    Args:
        panels: Page panels
        output_dir: Directory for the export (created if missing)
        config: Export settings (defaults to PageConfig())
        timestamp_ms: Timestamp for the file name (defaults to now)

    Returns:
        Path to the written JPEG

    Raises:
        ExportError: If the page cannot be rendered, encoded or written
    """
    config = config or PageConfig()
    page = rasterize_page(panels, config)
    data = encode_jpeg(page, quality=config.jpeg_quality)

    output_path = output_dir / export_filename(timestamp_ms)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    logger.info(f"Exported page to {output_path}")
    return output_path
