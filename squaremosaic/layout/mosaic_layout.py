"""Layout object a scroll container keeps between invalidations."""

from typing import List, Optional, Protocol, Sequence, Union

from PySide6.QtCore import QRectF, QSizeF

from squaremosaic.layout.builder import build_layout
from squaremosaic.layout.element_kinds import SupplementaryKind, kind_for_element_kind
from squaremosaic.layout.geometry import LayoutDirection
from squaremosaic.layout.protocols import PatternSource
from squaremosaic.layout.result import LayoutAttribute, LayoutResult


class MosaicLayoutDelegate(Protocol):
    def layout_extent_changed(self, extent: float) -> None: ...


class MosaicLayout:
    """Holds the latest LayoutResult and answers the container's queries.

    Every `prepare` call replaces the result wholesale; nothing is patched.
    """

    def __init__(self, source: Optional[PatternSource] = None,
                 direction: Optional[LayoutDirection] = None,
                 delegate: Optional[MosaicLayoutDelegate] = None):
        if direction is None:
            # Sources built for one axis (e.g. loaded mosaic files) carry it.
            direction = getattr(source, 'direction', None) or LayoutDirection.VERTICAL
        self.source = source
        self.direction = direction
        self.delegate = delegate
        self._result: Optional[LayoutResult] = None
        self._side = 0.0

    @property
    def result(self) -> Optional[LayoutResult]:
        return self._result

    def prepare(self, dimension: Sequence[int], viewport_size: QSizeF) -> LayoutResult:
        """Rebuild the layout for new data or a new viewport size."""
        self._side = self.direction.side_of(viewport_size)
        self._result = build_layout(dimension, self.source, self.direction, self._side)
        if self.delegate is not None:
            self.delegate.layout_extent_changed(self._result.content_extent)
        return self._result

    def invalidate(self):
        self._result = None

    def content_size(self) -> QSizeF:
        if self._result is None:
            return QSizeF(0.0, 0.0)
        return self.direction.content_size(self._result.content_extent, self._side)

    def should_invalidate_for_bounds(self, new_size: QSizeF) -> bool:
        """Only a change of the cross-axis length moves anything."""
        return self.direction.side_of(new_size) != self._side

    def attribute_for_cell(self, section: int, row: int) -> Optional[LayoutAttribute]:
        if self._result is None:
            return None
        return self._result.attribute_for_cell(section, row)

    def attributes_in_rect(self, rect: QRectF) -> List[LayoutAttribute]:
        if self._result is None:
            return []
        return self._result.attributes_intersecting(rect)

    def supplementary_attribute(self, kind: Union[SupplementaryKind, str],
                                section: int) -> Optional[LayoutAttribute]:
        """Look up a header/footer/background by enum or element-kind string."""
        if isinstance(kind, str):
            kind = kind_for_element_kind(kind)
        if kind is None or self._result is None:
            return None
        return self._result.supplementary_attribute(kind, section)
