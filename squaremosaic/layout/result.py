"""Positioned attributes produced by a layout pass, and lookups over them."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from PySide6.QtCore import QRectF

from squaremosaic.layout.element_kinds import SupplementaryKind
from squaremosaic.layout.geometry import rects_intersect

CELL_Z_INDEX = 0
SUPPLEMENTARY_Z_INDEX = 1
BACKGROUND_Z_INDEX = -1


def _frame_of(rect: QRectF) -> Tuple[float, float, float, float]:
    return rect.x(), rect.y(), rect.width(), rect.height()


@dataclass(frozen=True)
class LayoutAttribute:
    """A cell (section, row) or a supplementary region (kind, section)."""

    section: int
    frame: Tuple[float, float, float, float]
    z_index: int = CELL_Z_INDEX
    row: Optional[int] = None
    kind: Optional[SupplementaryKind] = None

    @classmethod
    def cell(cls, section: int, row: int, rect: QRectF) -> 'LayoutAttribute':
        return cls(section=section, frame=_frame_of(rect), z_index=CELL_Z_INDEX, row=row)

    @classmethod
    def supplementary(cls, kind: SupplementaryKind, section: int, rect: QRectF) -> 'LayoutAttribute':
        z_index = BACKGROUND_Z_INDEX if kind is SupplementaryKind.BACKGROUND else SUPPLEMENTARY_Z_INDEX
        return cls(section=section, frame=_frame_of(rect), z_index=z_index, kind=kind)

    @property
    def rect(self) -> QRectF:
        """A fresh rect each time; editing it leaves the attribute untouched."""
        return QRectF(*self.frame)

    @property
    def is_cell(self) -> bool:
        return self.kind is None


@dataclass(frozen=True)
class LayoutResult:
    """Immutable outcome of one build.

    `cells[section][row]` holds the cell attributes in item order;
    `supplementary` holds headers, footers and backgrounds in placement order.
    """

    cells: Tuple[Tuple[LayoutAttribute, ...], ...] = ()
    supplementary: Tuple[LayoutAttribute, ...] = ()
    content_extent: float = 0.0
    _by_kind: Dict[Tuple[SupplementaryKind, int], LayoutAttribute] = field(
        init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'cells', tuple(tuple(section) for section in self.cells))
        object.__setattr__(self, 'supplementary', tuple(self.supplementary))
        object.__setattr__(self, '_by_kind', {
            (attribute.kind, attribute.section): attribute for attribute in self.supplementary
        })

    @property
    def section_count(self) -> int:
        return len(self.cells)

    def cell_count(self, section: int) -> int:
        if 0 <= section < len(self.cells):
            return len(self.cells[section])
        return 0

    def attribute_for_cell(self, section: int, row: int) -> Optional[LayoutAttribute]:
        """Attribute of one item, None when the index path was not laid out."""
        if not 0 <= section < len(self.cells):
            return None
        rows = self.cells[section]
        if not 0 <= row < len(rows):
            return None
        return rows[row]

    def attributes_intersecting(self, rect: QRectF) -> List[LayoutAttribute]:
        """Cells first, then supplementary regions, touching `rect` included."""
        cells = [attribute for section in self.cells for attribute in section
                 if rects_intersect(attribute.rect, rect)]
        supplementary = [attribute for attribute in self.supplementary
                         if rects_intersect(attribute.rect, rect)]
        return cells + supplementary

    def supplementary_attribute(self, kind: SupplementaryKind, section: int) -> Optional[LayoutAttribute]:
        return self._by_kind.get((kind, section))

    def __iter__(self) -> Iterator[LayoutAttribute]:
        for section in self.cells:
            yield from section
        yield from self.supplementary
