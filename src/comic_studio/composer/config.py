"""
Module: composer.config

Purpose:
    Configuration for page export.
    Defines the fixed print raster the live (percentage based) page is
    flattened onto.

Key Classes:
    - PageConfig: Immutable export configuration

Dependencies:
    - dataclasses (std)

Used By:
    - composer.output.rasterizer: Raster size and JPEG quality
    - composer.output.pdf: Page size in points
    - gui.widgets.page_canvas: On-screen aspect ratio
"""

from __future__ import annotations

from dataclasses import dataclass


# 6.625" x 10.25" comic page at 300 DPI
DEFAULT_PAGE_WIDTH_PX = 1988
DEFAULT_PAGE_HEIGHT_PX = 3075
DEFAULT_DPI = 300
DEFAULT_JPEG_QUALITY = 90
DEFAULT_BACKGROUND = "#FFFFFF"


@dataclass(frozen=True)
class PageConfig:
    """
    Configuration for page export (immutable).

    Attributes:
        width: Export raster width in pixels
        height: Export raster height in pixels
        dpi: Dots per inch of the raster
        background: Fill colour for uncovered areas
        jpeg_quality: JPEG quality (1-95)

    Example:
        >>> config = PageConfig()
        >>> config.trim_size_inches
        (6.626666666666667, 10.25)
    """

    width: int = DEFAULT_PAGE_WIDTH_PX
    height: int = DEFAULT_PAGE_HEIGHT_PX
    dpi: int = DEFAULT_DPI
    background: str = DEFAULT_BACKGROUND
    jpeg_quality: int = DEFAULT_JPEG_QUALITY

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")
        if not 1 <= self.jpeg_quality <= 95:
            raise ValueError(f"jpeg_quality must be 1-95: {self.jpeg_quality}")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    @property
    def trim_size_inches(self) -> tuple[float, float]:
        """Physical page size at the configured DPI."""
        return (self.width / self.dpi, self.height / self.dpi)
