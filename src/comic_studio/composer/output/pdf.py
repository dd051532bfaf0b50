"""
Module: composer.output.pdf

Purpose:
    Write a rasterized page as a single-page, print-sized PDF using
    ReportLab. The page size in points is derived from the raster's pixel
    size and DPI, so a 1988 x 3075 raster at 300 DPI gives a
    6.625" x 10.25" page.

Key Functions:
    - render_page_to_pdf(): PIL image -> PDF file

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - composer.studio: Export Page as PDF action
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from .rasterizer import ExportError

logger = logging.getLogger(__name__)

DEFAULT_DPI = 300


def render_page_to_pdf(
    page: Image.Image,
    output_path: Path,
    *,
    dpi: int = DEFAULT_DPI,
    title: str = "Comic Page",
) -> Path:
    """
    Render a page image to a one-page PDF.

    Args:
        page: Rasterized page
        output_path: Path to write PDF (".pdf" appended if missing)
        dpi: DPI of the raster, for pixel to point conversion
        title: PDF document title

    Returns:
        Path of the written PDF

    Raises:
        ExportError: If the PDF cannot be written
    """
    if output_path.suffix.lower() != ".pdf":
        output_path = output_path.with_suffix(".pdf")

    width_pt = _px_to_pt(page.width, dpi)
    height_pt = _px_to_pt(page.height, dpi)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        c = canvas.Canvas(str(output_path), pagesize=(width_pt, height_pt))
        c.setTitle(title)
        c.drawImage(_pil_to_reader(page), 0, 0, width=width_pt, height=height_pt)
        c.showPage()
        c.save()
    except OSError as e:
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    logger.info(f"Rendered page to {output_path}")
    return output_path


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    JPEG keeps the embedded page small; the raster has no alpha.
    """
    buf = io.BytesIO()
    img.convert("RGB").save(buf, format="JPEG", quality=95)
    buf.seek(0)
    return ImageReader(buf)


def _px_to_pt(px: int, dpi: int = DEFAULT_DPI) -> float:
    """
    Convert pixels to PDF points.

    PDF points are 1/72 inch.
    """
    return px * 72.0 / dpi
