"""
Module: composer.interaction.controller

Purpose:
    Turns pointer press/move/release into panel geometry updates.
    A two-state machine: IDLE, or one active gesture (DRAGGING or
    RESIZING) targeting a single panel.

    Pointer positions and container sizes are in screen pixels; the
    page model stays in percentages. Each move is measured from the
    previous pointer position (the anchor is reset after every move),
    so a container resized mid-gesture does not make the panel jump.

Key Classes:
    - GestureKind: drag or resize
    - ControllerState: IDLE / DRAGGING / RESIZING
    - InteractionState: Data for the active gesture
    - InteractionController: The state machine

Dependencies:
    - composer.layout.page: PageModel

Used By:
    - composer.studio: Owns one controller per page
    - gui.widgets.page_canvas: Forwards mouse events
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Tuple

from comic_studio.composer.layout.page import PageModel

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Size = Tuple[float, float]


class GestureKind(str, Enum):
    DRAG = "drag"
    RESIZE = "resize"


class ControllerState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    RESIZING = "resizing"


_STATE_FOR_KIND = {
    GestureKind.DRAG: ControllerState.DRAGGING,
    GestureKind.RESIZE: ControllerState.RESIZING,
}


@dataclass(frozen=True, slots=True)
class InteractionState:
    """
    Active gesture.

    Attributes:
        kind: drag or resize
        panel_id: Target panel
        anchor: Pointer position of the last processed event (pixels)
        origin_size: Panel size in pixels at gesture start (resize only)
        travel: Pointer movement accumulated since gesture start (pixels)
    """

    kind: GestureKind
    panel_id: str
    anchor: Point
    origin_size: Optional[Size] = None
    travel: Point = (0.0, 0.0)


GestureHook = Callable[[InteractionState], None]


class InteractionController:
    """
    Pointer gesture state machine for one page.

    ``on_enter`` runs when a gesture starts and ``on_exit`` when it ends
    (pointer up, cancel, or teardown). A UI layer uses these to grab and
    release the pointer for the lifetime of one gesture.

    Example:
        >>> controller = InteractionController(page)
        >>> controller.pointer_down(panel.id, GestureKind.DRAG, (100, 100), (800, 1200))
        True
        >>> controller.pointer_move((180, 100), (800, 1200))
        >>> controller.pointer_up()
    """

    def __init__(
        self,
        page: PageModel,
        *,
        on_enter: Optional[GestureHook] = None,
        on_exit: Optional[GestureHook] = None,
    ) -> None:
        self.page = page
        self.on_enter = on_enter
        self.on_exit = on_exit
        self._active: Optional[InteractionState] = None

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> ControllerState:
        if self._active is None:
            return ControllerState.IDLE
        return _STATE_FOR_KIND[self._active.kind]

    @property
    def active(self) -> Optional[InteractionState]:
        return self._active

    @property
    def is_active(self) -> bool:
        return self._active is not None

    # ─────────────────────────────────────────────────────────────────────────
    # Pointer events
    # ─────────────────────────────────────────────────────────────────────────

    def click(self, panel_id: str) -> None:
        """Select a panel without changing its geometry."""
        self.page.select(panel_id)

    def pointer_down(
        self,
        panel_id: str,
        kind: GestureKind,
        position: Point,
        container_size: Size,
    ) -> bool:
        """
        Start a drag or resize on a panel.

        The panel becomes selected and is raised to the front. Any gesture
        still active is ended first.

        Args:
            panel_id: Panel under the pointer
            kind: DRAG for the panel body, RESIZE for its handle
            position: Pointer position in pixels
            container_size: Page surface size in pixels

        Returns:
            False if panel_id does not exist (controller stays idle)

        Raises:
            ValueError: If container_size is not positive
        """
        width, height = _checked_size(container_size)
        panel = self.page.get(panel_id)
        if panel is None:
            return False

        if self._active is not None:
            self._finish("superseded")

        self.page.select(panel_id)
        self.page.bring_to_front(panel_id)

        origin_size = None
        if GestureKind(kind) is GestureKind.RESIZE:
            origin_size = (panel.width / 100 * width, panel.height / 100 * height)

        self._active = InteractionState(
            kind=GestureKind(kind),
            panel_id=panel_id,
            anchor=(float(position[0]), float(position[1])),
            origin_size=origin_size,
        )
        logger.debug(f"Start {self._active.kind.value} on {panel_id}")
        if self.on_enter is not None:
            self.on_enter(self._active)
        return True

    def pointer_move(self, position: Point, container_size: Size) -> None:
        """
        Apply pointer movement to the active gesture.

        Ignored when idle. Cancels the gesture if its panel has been
        removed from the page.
        """
        active = self._active
        if active is None:
            return

        width, height = _checked_size(container_size)
        if self.page.get(active.panel_id) is None:
            logger.debug(f"Panel {active.panel_id} vanished mid-gesture")
            self.cancel()
            return

        px, py = float(position[0]), float(position[1])
        dx = px - active.anchor[0]
        dy = py - active.anchor[1]
        travel = (active.travel[0] + dx, active.travel[1] + dy)

        if active.kind is GestureKind.DRAG:
            self.page.move_panel(active.panel_id, dx / width * 100, dy / height * 100)
        else:
            origin_w, origin_h = active.origin_size
            self.page.resize_panel(
                active.panel_id,
                (origin_w + travel[0]) / width * 100,
                (origin_h + travel[1]) / height * 100,
            )

        self._active = replace(active, anchor=(px, py), travel=travel)

    def pointer_up(self) -> None:
        """End the active gesture. No-op when idle."""
        if self._active is not None:
            self._finish("released")

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def cancel(self) -> None:
        """Drop the active gesture, keeping whatever geometry it produced."""
        if self._active is not None:
            self._finish("cancelled")

    def forget_panel(self, panel_id: str) -> None:
        """Cancel the active gesture if it targets panel_id."""
        if self._active is not None and self._active.panel_id == panel_id:
            self._finish("target deleted")

    def teardown(self) -> None:
        """Release everything; called when the owning view goes away."""
        self.cancel()

    def _finish(self, reason: str) -> None:
        finished = self._active
        self._active = None
        logger.debug(f"End {finished.kind.value} on {finished.panel_id} ({reason})")
        if self.on_exit is not None:
            self.on_exit(finished)


def _checked_size(container_size: Size) -> Size:
    width, height = float(container_size[0]), float(container_size[1])
    if width <= 0 or height <= 0:
        raise ValueError(f"container size must be positive: {container_size}")
    return width, height
