"""Ready-made blocks, patterns, supplementaries and a static source."""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from PySide6.QtCore import QRectF

from squaremosaic.errors import PatternConfigurationError
from squaremosaic.layout.geometry import LayoutDirection
from squaremosaic.layout.protocols import Block, BlockSeparatorPosition, Pattern, Supplementary


def validate_pattern(pattern: Pattern) -> None:
    """Reject patterns that could never cover a section.

    Raises:
        PatternConfigurationError: if the pattern has no blocks, a block has
            fewer than one frame, or the repeated index is not an integer in range.
    """
    blocks = list(pattern.blocks)
    if not blocks:
        raise PatternConfigurationError("Pattern has no blocks")
    for index, block in enumerate(blocks):
        if block.frame_count < 1:
            raise PatternConfigurationError(
                f"Block {index} has {block.frame_count} frames, at least 1 is required")
    repeated_index = pattern.repeated_index
    if repeated_index is None:
        return
    if isinstance(repeated_index, bool) or not isinstance(repeated_index, int):
        raise PatternConfigurationError(f"Repeated block index must be an integer, got {repeated_index!r}")
    if not 0 <= repeated_index < len(blocks):
        raise PatternConfigurationError(
            f"Repeated block index {repeated_index} outside 0..{len(blocks) - 1}")


def _check_length(name: str, value: float):
    if not math.isfinite(value) or value < 0:
        raise PatternConfigurationError(f"{name} must be a finite value >= 0, got {value!r}")


@dataclass(frozen=True)
class FractionalBlock:
    """Frames sized as fractions of the side, so squares stay square.

    Each cell is `(cross_start, cross_span, layout_start, layout_span)`,
    all multiplied by the side length.
    """

    cells: Tuple[Tuple[float, float, float, float], ...]
    direction: LayoutDirection = LayoutDirection.VERTICAL

    def __post_init__(self):
        object.__setattr__(self, 'cells', tuple(tuple(float(v) for v in cell) for cell in self.cells))
        if not self.cells:
            raise PatternConfigurationError("FractionalBlock needs at least one cell")
        for cell in self.cells:
            if len(cell) != 4:
                raise PatternConfigurationError(f"Cell {cell} must have 4 values")
            for value in cell:
                _check_length("Cell fraction", value)

    @property
    def frame_count(self) -> int:
        return len(self.cells)

    def frames(self, origin: float, side: float) -> List[QRectF]:
        return [
            self.direction.oriented_rect(cross_start * side, origin + layout_start * side,
                                         cross_span * side, layout_span * side)
            for cross_start, cross_span, layout_start, layout_span in self.cells
        ]


@dataclass(frozen=True)
class RowBlock:
    """`count` equal frames side by side, each `length` long."""

    count: int
    length: float
    spacing: float = 0.0
    direction: LayoutDirection = LayoutDirection.VERTICAL

    def __post_init__(self):
        if self.count < 1:
            raise PatternConfigurationError(f"RowBlock count must be >= 1, got {self.count}")
        _check_length("RowBlock length", self.length)
        _check_length("RowBlock spacing", self.spacing)

    @property
    def frame_count(self) -> int:
        return self.count

    def frames(self, origin: float, side: float) -> List[QRectF]:
        cross_length = max(0.0, (side - self.spacing * (self.count - 1)) / self.count)
        return [
            self.direction.oriented_rect(i * (cross_length + self.spacing), origin,
                                         cross_length, self.length)
            for i in range(self.count)
        ]


@dataclass(frozen=True)
class FixedSupplementary:
    """Header/footer band of a fixed length."""

    length: float
    hidden_when_empty: bool = True
    inset: float = 0.0
    direction: LayoutDirection = LayoutDirection.VERTICAL

    def __post_init__(self):
        _check_length("Supplementary length", self.length)
        _check_length("Supplementary inset", self.inset)

    def frame(self, origin: float, side: float) -> QRectF:
        return self.direction.oriented_rect(self.inset, origin,
                                            max(0.0, side - 2 * self.inset), self.length)


@dataclass(frozen=True)
class MosaicPattern:
    """Blocks of one section plus the separators around and between them."""

    blocks: Tuple[Block, ...]
    repeated_index: Optional[int] = None
    before: float = 0.0
    between: float = 0.0
    after: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'blocks', tuple(self.blocks))
        validate_pattern(self)
        _check_length("Separator before blocks", self.before)
        _check_length("Separator between blocks", self.between)
        _check_length("Separator after blocks", self.after)

    def separator(self, position: BlockSeparatorPosition) -> float:
        if position is BlockSeparatorPosition.BEFORE:
            return self.before
        if position is BlockSeparatorPosition.BETWEEN:
            return self.between
        return self.after


@dataclass
class SectionConfig:
    pattern: Optional[Pattern] = None
    header: Optional[Supplementary] = None
    footer: Optional[Supplementary] = None
    background: bool = False


@dataclass
class StaticPatternSource:
    """Pattern source backed by a list of per-section configs.

    Sections past the end of `sections` use `default_section`.
    `direction` is the axis its blocks and supplementaries were built for.
    """

    sections: Sequence[SectionConfig] = field(default_factory=list)
    default_section: Optional[SectionConfig] = None
    between_sections: float = 0.0
    direction: LayoutDirection = LayoutDirection.VERTICAL

    def section_config(self, section: int) -> Optional[SectionConfig]:
        if 0 <= section < len(self.sections):
            return self.sections[section]
        return self.default_section

    def pattern(self, section: int) -> Optional[Pattern]:
        config = self.section_config(section)
        return config.pattern if config else None

    def header(self, section: int) -> Optional[Supplementary]:
        config = self.section_config(section)
        return config.header if config else None

    def footer(self, section: int) -> Optional[Supplementary]:
        config = self.section_config(section)
        return config.footer if config else None

    def background_enabled(self, section: int) -> bool:
        config = self.section_config(section)
        return bool(config and config.background)

    def separator_between_sections(self) -> float:
        return self.between_sections
