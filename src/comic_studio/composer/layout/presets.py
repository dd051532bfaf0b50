"""
Module: composer.layout.presets

Purpose:
    Named page layouts. Each preset is a fixed set of non-overlapping
    placeholder rectangles (percent of page) with a 5% outer margin and a
    2% gutter.

Key Classes:
    - SlotGeometry: One placeholder rectangle
    - LayoutPreset: Named tuple of slots

Key Functions:
    - get_preset(): Look up a preset by name
    - preset_names(): Names in display order

Used By:
    - composer.layout.page.PageModel.apply_layout
    - gui.main_window: Preset buttons
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SlotGeometry:
    """Placeholder rectangle in percent of page width/height."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class LayoutPreset:
    """
    Named arrangement of placeholder slots.

    Slot order is also stacking order: slot i gets z-index i.

    Attributes:
        name: Preset identifier (e.g. "4-grid")
        label: Short text for buttons
        slots: Placeholder rectangles
    """

    name: str
    label: str
    slots: tuple[SlotGeometry, ...]

    @property
    def slot_count(self) -> int:
        return len(self.slots)


PRESETS: dict[str, LayoutPreset] = {
    "2-panel-vertical": LayoutPreset(
        name="2-panel-vertical",
        label="2 Panels",
        slots=(
            SlotGeometry(5, 5, 90, 44),
            SlotGeometry(5, 51, 90, 44),
        ),
    ),
    "3-panel-vertical": LayoutPreset(
        name="3-panel-vertical",
        label="3 Panels",
        slots=(
            SlotGeometry(5, 5, 90, 28),
            SlotGeometry(5, 36, 90, 28),
            SlotGeometry(5, 67, 90, 28),
        ),
    ),
    "4-grid": LayoutPreset(
        name="4-grid",
        label="4 Grid",
        slots=(
            SlotGeometry(5, 5, 44, 44),
            SlotGeometry(51, 5, 44, 44),
            SlotGeometry(5, 51, 44, 44),
            SlotGeometry(51, 51, 44, 44),
        ),
    ),
}


def preset_names() -> list[str]:
    """Preset names in display order."""
    return list(PRESETS)


def get_preset(name: str) -> LayoutPreset:
    """
    Look up a preset.

    Raises:
        KeyError: If no preset has this name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown layout preset: {name!r}") from None
