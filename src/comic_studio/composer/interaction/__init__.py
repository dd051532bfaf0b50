"""
Module: composer.interaction

Purpose:
    Pointer gesture handling (drag, resize, click-to-select) for the page
    composer.
"""

from .controller import (
    ControllerState,
    GestureKind,
    InteractionController,
    InteractionState,
)

__all__ = [
    "ControllerState",
    "GestureKind",
    "InteractionController",
    "InteractionState",
]
