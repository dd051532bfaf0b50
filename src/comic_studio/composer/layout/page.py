"""
Module: composer.layout.page

Purpose:
    The panel model for the page being edited. Holds an immutable tuple
    of Panels plus the selected panel id, and exposes discrete mutation
    methods. Every mutation builds a complete new tuple and swaps it in,
    so a failed operation never leaves the page half-updated.

Key Classes:
    - ZDirection: front/back for z-order commands
    - PageModel: Panel set and selection for one page

Dependencies:
    - core.models: Panel, Asset, FilledSlot, EMPTY_SLOT
    - composer.layout.presets: Preset geometry

Used By:
    - composer.interaction.controller: Gesture updates
    - composer.studio: Asset clicks, toolbar commands, export
    - gui.widgets.page_canvas: Painting
"""

from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Iterator, Optional

from comic_studio.core.models import EMPTY_SLOT, Asset, FilledSlot, Panel

from .presets import get_preset

logger = logging.getLogger(__name__)

# Geometry given to panels created from an asset click (x, y, width, height)
DEFAULT_PANEL_GEOMETRY = (25.0, 25.0, 50.0, 30.0)


class ZDirection(str, Enum):
    FRONT = "front"
    BACK = "back"


def _new_panel_id() -> str:
    return f"panel-{uuid.uuid4().hex[:12]}"


class PageModel:
    """
    Panels on one page plus the current selection.

    At most one panel is selected at a time. The selection always refers
    to a panel that exists.

    Example:
        >>> page = PageModel()
        >>> panel = page.add_panel(scene)
        >>> page.selected_id == panel.id
        True
    """

    def __init__(self) -> None:
        self._panels: tuple[Panel, ...] = ()
        self._selected_id: Optional[str] = None

    def __len__(self) -> int:
        return len(self._panels)

    def __iter__(self) -> Iterator[Panel]:
        return iter(self._panels)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def panels(self) -> tuple[Panel, ...]:
        """Panels in insertion order."""
        return self._panels

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected_panel(self) -> Optional[Panel]:
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def get(self, panel_id: str) -> Optional[Panel]:
        for panel in self._panels:
            if panel.id == panel_id:
                return panel
        return None

    def panels_in_z_order(self) -> list[Panel]:
        """Panels sorted bottom to top. Equal z-indices keep insertion order."""
        return sorted(self._panels, key=lambda p: p.z_index)

    # ─────────────────────────────────────────────────────────────────────────
    # Panel set
    # ─────────────────────────────────────────────────────────────────────────

    def add_panel(self, asset: Asset) -> Panel:
        """
        Append a default-sized panel showing asset and select it.

        The new panel's z-index is the panel count before the append.
        """
        x, y, width, height = DEFAULT_PANEL_GEOMETRY
        panel = Panel(
            id=_new_panel_id(),
            x=x,
            y=y,
            width=width,
            height=height,
            z_index=len(self._panels),
            image=FilledSlot(asset),
        )
        self._panels = self._panels + (panel,)
        self._selected_id = panel.id
        logger.debug(f"Added {panel.id} for asset {asset.id}")
        return panel

    def apply_layout(self, preset_name: str) -> tuple[Panel, ...]:
        """
        Replace every panel with the preset's empty placeholders.

        Clears the selection.

        Raises:
            KeyError: If the preset is unknown (page left unchanged)
        """
        preset = get_preset(preset_name)
        self._panels = tuple(
            Panel(
                id=_new_panel_id(),
                x=slot.x,
                y=slot.y,
                width=slot.width,
                height=slot.height,
                z_index=index,
                image=EMPTY_SLOT,
            )
            for index, slot in enumerate(preset.slots)
        )
        self._selected_id = None
        logger.info(f"Applied layout {preset_name} ({preset.slot_count} panels)")
        return self._panels

    def delete_panel(self, panel_id: str) -> bool:
        """
        Remove a panel.

        Returns:
            False if no panel has this id, True otherwise
        """
        remaining = tuple(p for p in self._panels if p.id != panel_id)
        if len(remaining) == len(self._panels):
            return False
        self._panels = remaining
        if self._selected_id == panel_id:
            self._selected_id = None
        logger.debug(f"Deleted {panel_id}")
        return True

    def clear(self) -> None:
        self._panels = ()
        self._selected_id = None

    # ─────────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────────

    def select(self, panel_id: str) -> None:
        """
        Make panel_id the only selected panel.

        Raises:
            KeyError: If no panel has this id
        """
        if self.get(panel_id) is None:
            raise KeyError(f"Panel not found: {panel_id}")
        self._selected_id = panel_id

    def clear_selection(self) -> None:
        self._selected_id = None

    # ─────────────────────────────────────────────────────────────────────────
    # Per-panel updates
    # ─────────────────────────────────────────────────────────────────────────

    def set_z_order(self, panel_id: str, direction: ZDirection) -> Optional[Panel]:
        """
        Move a panel to the top or bottom of the stack.

        Front assigns max(z) + 1 and back assigns min(z) - 1, so the
        result is strictly above/below every other panel even when
        z-indices were duplicated before.

        Returns:
            The updated panel, or None if panel_id is unknown
        """
        if self.get(panel_id) is None:
            return None
        z_values = [p.z_index for p in self._panels]
        if ZDirection(direction) is ZDirection.FRONT:
            new_z = max(z_values) + 1
        else:
            new_z = min(z_values) - 1
        return self._update(panel_id, lambda p: p.with_z(new_z))

    def bring_to_front(self, panel_id: str) -> Optional[Panel]:
        return self.set_z_order(panel_id, ZDirection.FRONT)

    def send_to_back(self, panel_id: str) -> Optional[Panel]:
        return self.set_z_order(panel_id, ZDirection.BACK)

    def assign_asset(self, panel_id: str, asset: Asset) -> Optional[Panel]:
        """Bind asset to an existing panel, keeping its geometry and z-index."""
        return self._update(panel_id, lambda p: p.with_image(FilledSlot(asset)))

    def move_panel(self, panel_id: str, dx: float, dy: float) -> Optional[Panel]:
        """Shift a panel by (dx, dy) percent."""
        return self._update(panel_id, lambda p: p.moved_by(dx, dy))

    def resize_panel(self, panel_id: str, width: float, height: float) -> Optional[Panel]:
        """Set a panel's size in percent (floored at the minimum size)."""
        return self._update(panel_id, lambda p: p.resized_to(width, height))

    def _update(self, panel_id: str, change) -> Optional[Panel]:
        updated: Optional[Panel] = None
        panels = []
        for panel in self._panels:
            if panel.id == panel_id:
                updated = change(panel)
                panels.append(updated)
            else:
                panels.append(panel)
        if updated is not None:
            self._panels = tuple(panels)
        return updated
