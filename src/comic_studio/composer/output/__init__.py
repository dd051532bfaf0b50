"""
Module: composer.output

Purpose:
    Page export: flatten panels to a raster and write JPEG or PDF files.

Key Functions:
    - rasterize_page(): Panels -> PIL image
    - export_page_jpeg(): Write comic-page-<timestamp>.jpeg
    - render_page_to_pdf(): Write a print-sized PDF

Dependencies:
    - PIL: Raster compositing
    - reportlab: PDF generation
"""

from .rasterizer import (
    ExportError,
    encode_jpeg,
    export_filename,
    export_page_jpeg,
    rasterize_page,
)
from .pdf import render_page_to_pdf

__all__ = [
    "ExportError",
    "encode_jpeg",
    "export_filename",
    "export_page_jpeg",
    "rasterize_page",
    "render_page_to_pdf",
]
