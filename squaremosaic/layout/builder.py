"""Single-pass layout of sections, blocks and supplementary regions."""

from typing import List, Optional, Sequence, Tuple

from PySide6.QtCore import QRectF

from squaremosaic.errors import PatternConfigurationError
from squaremosaic.layout.element_kinds import SupplementaryKind
from squaremosaic.layout.expander import expand_blocks
from squaremosaic.layout.geometry import LayoutDirection
from squaremosaic.layout.protocols import BlockSeparatorPosition, Pattern, PatternSource, Supplementary
from squaremosaic.layout.result import LayoutAttribute, LayoutResult
from squaremosaic.layout.sections import (
    SectionSource,
    non_empty_sections,
    separated_sections,
    separator_before_section,
)
from squaremosaic.utils.flow_log import log_flow


def build_layout(dimension: Sequence[int], source: Optional[PatternSource],
                 direction: LayoutDirection, side: float) -> LayoutResult:
    """
    Place every cell and supplementary region of a sectioned grid.

    Args:
        dimension: Item count per section
        source: Provides patterns, headers, footers and backgrounds per section.
            None lays out nothing.
        direction: Axis along which the running offset grows
        side: Fixed cross-axis length (the width when scrolling vertically)

    Returns:
        A LayoutResult whose content_extent is the final running offset

    Raises:
        ValueError: if an item count is negative
        PatternConfigurationError: if a pattern is malformed or missing for a
            section that has items
    """
    counts = [int(rows) for rows in dimension]
    for section, rows in enumerate(counts):
        if rows < 0:
            raise ValueError(f"Section {section} has a negative item count ({rows})")

    if source is None:
        return LayoutResult(cells=tuple(() for _ in counts))

    sections = SectionSource(source)
    separator = sections.separator_between_sections()
    separated = separated_sections(non_empty_sections(sections, counts), separator)

    cells: List[Tuple[LayoutAttribute, ...]] = []
    supplementary: List[LayoutAttribute] = []
    origin = 0.0

    for section, rows in enumerate(counts):
        origin += separator_before_section(section, separated, separator)
        section_origin = origin

        header, origin = _place_supplementary(
            SupplementaryKind.HEADER, sections.header(section), section, rows, origin, direction, side)
        if header is not None:
            supplementary.append(header)

        section_cells, origin = _place_cells(sections.pattern(section), section, rows, origin, direction, side)
        cells.append(tuple(section_cells))

        footer, origin = _place_supplementary(
            SupplementaryKind.FOOTER, sections.footer(section), section, rows, origin, direction, side)
        if footer is not None:
            supplementary.append(footer)

        if sections.background_enabled(section) and origin - section_origin > 0:
            rect = direction.span_rect(section_origin, origin - section_origin, side)
            supplementary.append(LayoutAttribute.supplementary(SupplementaryKind.BACKGROUND, section, rect))

    log_flow("MOSAIC", f"Built {len(counts)} sections, {sum(counts)} cells, "
                       f"{len(supplementary)} supplementary, extent={origin:.1f}")
    return LayoutResult(cells=tuple(cells), supplementary=tuple(supplementary), content_extent=origin)


def _place_supplementary(kind: SupplementaryKind, supplementary: Optional[Supplementary], section: int,
                         rows: int, origin: float, direction: LayoutDirection,
                         side: float) -> Tuple[Optional[LayoutAttribute], float]:
    if supplementary is None:
        return None, origin
    if rows <= 0 and supplementary.hidden_when_empty:
        return None, origin
    rect = supplementary.frame(origin, side)
    advance = max(0.0, direction.trailing_edge(rect) - origin)
    return LayoutAttribute.supplementary(kind, section, rect), origin + advance


def _place_cells(pattern: Optional[Pattern], section: int, rows: int, origin: float,
                 direction: LayoutDirection, side: float) -> Tuple[List[LayoutAttribute], float]:
    if pattern is None:
        if rows > 0:
            raise PatternConfigurationError(f"Section {section} has {rows} items but no pattern")
        return [], origin

    # Malformed patterns fail here even for empty sections.
    blocks = expand_blocks(pattern, rows)
    if rows <= 0:
        return [], origin

    attributes: List[LayoutAttribute] = []
    origin += max(0.0, pattern.separator(BlockSeparatorPosition.BEFORE))
    for index, block in enumerate(blocks):
        if len(attributes) >= rows:
            break
        if index > 0:
            origin += max(0.0, pattern.separator(BlockSeparatorPosition.BETWEEN))

        take = min(block.frame_count, rows - len(attributes))
        frames: Sequence[QRectF] = block.frames(origin, side)
        if len(frames) < take:
            raise PatternConfigurationError(
                f"Block {index} of section {section} returned {len(frames)} frames, "
                f"expected {block.frame_count}")

        extent = 0.0
        for rect in frames[:take]:
            attributes.append(LayoutAttribute.cell(section, len(attributes), rect))
            extent = max(extent, direction.trailing_edge(rect) - origin)
        origin += extent

    origin += max(0.0, pattern.separator(BlockSeparatorPosition.AFTER))
    return attributes, origin
