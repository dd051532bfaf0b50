"""
Page canvas widget.

Paints the page being composed at the export aspect ratio and forwards
mouse gestures to the studio's InteractionController. Panel geometry
lives in percentages; this widget only converts between those and the
on-screen page rectangle.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QPixmap
from PySide6.QtWidgets import QWidget

from comic_studio.composer import GestureKind, PageLayoutStudio
from comic_studio.composer.interaction import InteractionState
from comic_studio.core.models import Asset, Panel
from comic_studio.gui.styles.theme import Colors
from comic_studio.gui.utils.pixmaps import pixmap_from_base64

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Click an asset to fill this panel"


class PageCanvas(QWidget):
    """
    Interactive page surface.

    Press on the selected panel's corner handle to resize, on a panel
    body to drag, on empty page to clear the selection. The mouse is
    grabbed for the duration of a gesture.
    """

    selectionChanged = Signal(object)  # panel id or None
    panelsChanged = Signal()

    PAGE_MARGIN = 12
    HANDLE_RADIUS = 8

    def __init__(self, studio: PageLayoutStudio, parent=None):
        super().__init__(parent)
        self.studio = studio
        self._pixmaps: Dict[str, QPixmap] = {}  # keyed by base64 payload

        studio.interaction.on_enter = self._on_gesture_enter
        studio.interaction.on_exit = self._on_gesture_exit

        self.setMinimumSize(240, 360)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(False)

    # ─────────────────────────────────────────────────────────────────────────
    # Geometry
    # ─────────────────────────────────────────────────────────────────────────

    def page_rect(self) -> QRectF:
        """Largest rectangle with the page aspect ratio centred in the widget."""
        m = self.PAGE_MARGIN
        avail = QRectF(self.rect()).adjusted(m, m, -m, -m)
        ratio = self.studio.config.aspect_ratio
        width = max(1.0, avail.width())
        height = width / ratio
        if height > avail.height():
            height = max(1.0, avail.height())
            width = height * ratio
        x = avail.x() + (avail.width() - width) / 2
        y = avail.y() + (avail.height() - height) / 2
        return QRectF(x, y, width, height)

    def container_size(self) -> Tuple[float, float]:
        page = self.page_rect()
        return (page.width(), page.height())

    def panel_rect(self, panel: Panel) -> QRectF:
        page = self.page_rect()
        left, top, width, height = panel.pixel_box(page.width(), page.height())
        return QRectF(page.x() + left, page.y() + top, width, height)

    def handle_rect(self, panel: Panel) -> QRectF:
        corner = self.panel_rect(panel).bottomRight()
        r = self.HANDLE_RADIUS
        return QRectF(corner.x() - r, corner.y() - r, 2 * r, 2 * r)

    def hit_test(self, pos: QPointF) -> Tuple[Optional[str], Optional[GestureKind]]:
        """
        Find what lies under pos.

        Returns:
            (panel_id, GestureKind.RESIZE) on the selected panel's handle,
            (panel_id, GestureKind.DRAG) on the topmost panel body,
            (None, None) elsewhere
        """
        selected = self.studio.page.selected_panel
        if selected is not None and self.handle_rect(selected).contains(pos):
            return selected.id, GestureKind.RESIZE

        if not self.page_rect().contains(pos):
            return None, None
        for panel in reversed(self.studio.page.panels_in_z_order()):
            if self.panel_rect(panel).contains(pos):
                return panel.id, GestureKind.DRAG
        return None, None

    # ─────────────────────────────────────────────────────────────────────────
    # Mouse
    # ─────────────────────────────────────────────────────────────────────────

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        panel_id, kind = self.hit_test(pos)
        if panel_id is not None:
            self.studio.interaction.pointer_down(
                panel_id, kind, (pos.x(), pos.y()), self.container_size()
            )
        else:
            self.studio.page.clear_selection()

        self.selectionChanged.emit(self.studio.page.selected_id)
        self.panelsChanged.emit()
        self.update()
        event.accept()

    def mouseMoveEvent(self, event):
        interaction = self.studio.interaction
        if not interaction.is_active:
            super().mouseMoveEvent(event)
            return
        pos = event.position()
        interaction.pointer_move((pos.x(), pos.y()), self.container_size())
        self.panelsChanged.emit()
        self.update()
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.studio.interaction.pointer_up()
            self.update()
        event.accept()

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key.Key_Delete, Qt.Key.Key_Backspace):
            if self.studio.delete_selected():
                self.selectionChanged.emit(None)
                self.panelsChanged.emit()
                self.update()
            event.accept()
            return
        super().keyPressEvent(event)

    def hideEvent(self, event):
        self.studio.interaction.teardown()
        super().hideEvent(event)

    def _on_gesture_enter(self, state: InteractionState) -> None:
        if self.isVisible():
            self.grabMouse()
        if state.kind is GestureKind.RESIZE:
            self.setCursor(Qt.CursorShape.SizeFDiagCursor)
        else:
            self.setCursor(Qt.CursorShape.ClosedHandCursor)

    def _on_gesture_exit(self, state: InteractionState) -> None:
        if QWidget.mouseGrabber() is self:
            self.releaseMouse()
        self.unsetCursor()

    # ─────────────────────────────────────────────────────────────────────────
    # Painting
    # ─────────────────────────────────────────────────────────────────────────

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

        page = self.page_rect()
        painter.fillRect(page, QColor(Colors.PAGE))

        panels = self.studio.page.panels_in_z_order()
        self._prune_pixmaps(panels)

        selected_id = self.studio.page.selected_id
        painter.save()
        painter.setClipRect(page)
        for panel in panels:
            self._paint_panel(painter, panel, panel.id == selected_id)
        painter.restore()

        selected = self.studio.page.selected_panel
        if selected is not None:
            painter.setPen(QPen(QColor(Colors.HANDLE_BORDER), 2))
            painter.setBrush(QBrush(QColor(Colors.SELECTION_OUTLINE)))
            painter.drawEllipse(self.handle_rect(selected))
        painter.end()

    def _paint_panel(self, painter: QPainter, panel: Panel, selected: bool) -> None:
        rect = self.panel_rect(panel)
        pixmap = None if panel.is_placeholder else self._pixmap_for(panel.asset)

        if pixmap is not None and not pixmap.isNull():
            painter.drawPixmap(rect, pixmap, QRectF(pixmap.rect()))
        else:
            painter.fillRect(rect, QColor(Colors.PLACEHOLDER_BG))
            painter.setPen(QColor(Colors.PLACEHOLDER_TEXT))
            text = PLACEHOLDER_TEXT if panel.is_placeholder else "Image unavailable"
            painter.drawText(
                rect.adjusted(4, 4, -4, -4),
                Qt.AlignmentFlag.AlignCenter | Qt.TextFlag.TextWordWrap,
                text,
            )

        if selected:
            painter.setPen(QPen(QColor(Colors.SELECTION_OUTLINE), 2))
        else:
            painter.setPen(QPen(QColor(Colors.PANEL_OUTLINE), 1))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(rect)

    def _pixmap_for(self, asset: Asset) -> QPixmap:
        pixmap = self._pixmaps.get(asset.base64)
        if pixmap is None:
            pixmap = pixmap_from_base64(asset.base64)
            if pixmap.isNull():
                logger.warning(f"Could not display image for {asset.display_name}")
            self._pixmaps[asset.base64] = pixmap
        return pixmap

    def _prune_pixmaps(self, panels) -> None:
        """Drop cached pixmaps for payloads no longer on the page."""
        live = {p.asset.base64 for p in panels if not p.is_placeholder}
        for payload in [k for k in self._pixmaps if k not in live]:
            del self._pixmaps[payload]
