"""Axis helpers for laying out along one direction."""

from enum import Enum

from PySide6.QtCore import QRectF, QSizeF


class LayoutDirection(Enum):
    """Which axis accumulates the running offset."""

    VERTICAL = 'vertical'
    HORIZONTAL = 'horizontal'

    @property
    def is_vertical(self) -> bool:
        return self is LayoutDirection.VERTICAL

    def leading_edge(self, rect: QRectF) -> float:
        return rect.y() if self.is_vertical else rect.x()

    def trailing_edge(self, rect: QRectF) -> float:
        """Far edge of `rect` along the layout axis."""
        if self.is_vertical:
            return rect.y() + rect.height()
        return rect.x() + rect.width()

    def side_of(self, size: QSizeF) -> float:
        """Cross-axis length of a viewport size."""
        return size.width() if self.is_vertical else size.height()

    def span_rect(self, start: float, length: float, side: float) -> QRectF:
        """Band covering the full side, `length` long on the layout axis."""
        if self.is_vertical:
            return QRectF(0.0, start, side, length)
        return QRectF(start, 0.0, length, side)

    def oriented_rect(self, cross: float, along: float,
                      cross_length: float, along_length: float) -> QRectF:
        """Build a rect from cross/layout axis coordinates."""
        if self.is_vertical:
            return QRectF(cross, along, cross_length, along_length)
        return QRectF(along, cross, along_length, cross_length)

    def content_size(self, extent: float, side: float) -> QSizeF:
        if self.is_vertical:
            return QSizeF(side, extent)
        return QSizeF(extent, side)


def rects_intersect(a: QRectF, b: QRectF) -> bool:
    """Inclusive intersection test; touching edges count.

    QRectF.intersects() ignores touching and zero-area rects, so it is not
    used here.
    """
    return (a.left() <= b.right() and b.left() <= a.right()
            and a.top() <= b.bottom() and b.top() <= a.bottom())
