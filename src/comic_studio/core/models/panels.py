"""
Module: panels

Purpose:
    Provides the Panel dataclass - a rectangular image placement on a
    virtual page. Geometry is stored in percentages of the page so the
    same panel renders on a resizable editor surface and on the fixed
    export raster.

Key Classes:
    - EmptySlot / FilledSlot: Tagged variant for a panel's image
    - Panel: Immutable placement (position, size, z-order, image)

Dependencies:
    - dataclasses (std)
    - core.models.assets: Asset

Used By:
    - composer.layout.page.PageModel
    - composer.interaction.controller
    - composer.output.rasterizer
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from .assets import Asset

# Smallest width/height (percent of page) a panel may shrink to
MIN_PANEL_SIZE_PCT = 5.0


@dataclass(frozen=True, slots=True)
class EmptySlot:
    """Image slot of a placeholder panel awaiting an asset."""

    @property
    def asset(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class FilledSlot:
    """Image slot bound to an asset."""

    asset: Asset


PanelImage = Union[EmptySlot, FilledSlot]

EMPTY_SLOT = EmptySlot()


@dataclass(frozen=True, slots=True)
class Panel:
    """
    Single placed image on the page.

    Coordinates are percentages of page width/height with the origin at
    the top-left corner. Position is unconstrained (a panel may be dragged
    partially off the page); size never drops below MIN_PANEL_SIZE_PCT.

    Attributes:
        id: Unique identifier assigned at creation
        x: Left edge, percent of page width
        y: Top edge, percent of page height
        width: Width, percent of page width
        height: Height, percent of page height
        z_index: Stacking order (higher draws on top, gaps allowed)
        image: FilledSlot with the asset, or EMPTY_SLOT for a placeholder

    Invariants:
        - width >= MIN_PANEL_SIZE_PCT
        - height >= MIN_PANEL_SIZE_PCT

    Example:
        >>> panel = Panel("p1", 25, 25, 50, 30, z_index=0)
        >>> panel.moved_by(10, -5).x
        35
    """

    id: str
    x: float
    y: float
    width: float
    height: float
    z_index: int = 0
    image: PanelImage = EMPTY_SLOT

    def __post_init__(self) -> None:
        """Validate size on construction."""
        if self.width < MIN_PANEL_SIZE_PCT:
            raise ValueError(f"width must be >= {MIN_PANEL_SIZE_PCT}: {self.width}")
        if self.height < MIN_PANEL_SIZE_PCT:
            raise ValueError(f"height must be >= {MIN_PANEL_SIZE_PCT}: {self.height}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_placeholder(self) -> bool:
        """True when the panel has no asset yet."""
        return isinstance(self.image, EmptySlot)

    @property
    def asset(self) -> Optional[Asset]:
        """Bound asset, or None for a placeholder."""
        return self.image.asset

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    # ─────────────────────────────────────────────────────────────────────────
    # Copy-on-write updates
    # ─────────────────────────────────────────────────────────────────────────

    def moved_by(self, dx: float, dy: float) -> Panel:
        """Return a copy shifted by (dx, dy) percent."""
        return replace(self, x=self.x + dx, y=self.y + dy)

    def resized_to(self, width: float, height: float) -> Panel:
        """Return a copy with the given size, floored at MIN_PANEL_SIZE_PCT."""
        return replace(
            self,
            width=max(MIN_PANEL_SIZE_PCT, width),
            height=max(MIN_PANEL_SIZE_PCT, height),
        )

    def with_z(self, z_index: int) -> Panel:
        return replace(self, z_index=z_index)

    def with_image(self, image: PanelImage) -> Panel:
        return replace(self, image=image)

    # ─────────────────────────────────────────────────────────────────────────
    # Geometry
    # ─────────────────────────────────────────────────────────────────────────

    def overlaps(self, other: Panel) -> bool:
        """
        Check if two panels share any area.

        Panels that only touch along an edge do NOT overlap.
        """
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def pixel_box(self, page_width: float, page_height: float) -> Tuple[float, float, float, float]:
        """
        Convert percentage geometry to pixels on a page of the given size.

        Returns:
            (left, top, width, height) in pixels
        """
        return (
            self.x / 100 * page_width,
            self.y / 100 * page_height,
            self.width / 100 * page_width,
            self.height / 100 * page_height,
        )
