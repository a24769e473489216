"""Mosaic layout engine.

Computes the frames of every cell, header, footer and section background of
a sectioned scrolling grid whose sections repeat block patterns:
- Pattern expansion (whole pattern or a repeated tail block)
- Separators before, between and after blocks and between sections
- Header/footer suppression for empty sections
- Point/rect/index lookups on the built result
"""

from .builder import build_layout
from .element_kinds import SupplementaryKind, element_kind_for, kind_for_element_kind
from .expander import expand_blocks
from .geometry import LayoutDirection, rects_intersect
from .mosaic_layout import MosaicLayout
from .patterns import (
    FixedSupplementary,
    FractionalBlock,
    MosaicPattern,
    RowBlock,
    SectionConfig,
    StaticPatternSource,
)
from .protocols import Block, BlockSeparatorPosition, Pattern, PatternSource, Supplementary
from .result import LayoutAttribute, LayoutResult

__all__ = [
    'build_layout',
    'expand_blocks',
    'MosaicLayout',
    'LayoutAttribute',
    'LayoutResult',
    'LayoutDirection',
    'rects_intersect',
    'SupplementaryKind',
    'element_kind_for',
    'kind_for_element_kind',
    'Block',
    'BlockSeparatorPosition',
    'Pattern',
    'PatternSource',
    'Supplementary',
    'FixedSupplementary',
    'FractionalBlock',
    'MosaicPattern',
    'RowBlock',
    'SectionConfig',
    'StaticPatternSource',
]
