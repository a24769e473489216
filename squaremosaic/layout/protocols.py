"""Capabilities the layout builder consumes.

Anything that provides these members can be handed to the builder; there is
no base class to inherit from. Sources may omit the optional members of
`PatternSource` (header, footer, background_enabled,
separator_between_sections), in which case the feature is treated as absent.
"""

from enum import Enum
from typing import Optional, Protocol, Sequence, runtime_checkable

from PySide6.QtCore import QRectF


class BlockSeparatorPosition(Enum):
    BEFORE = 'before'
    BETWEEN = 'between'
    AFTER = 'after'


@runtime_checkable
class Block(Protocol):
    """A repeatable unit of `frame_count` item frames."""

    @property
    def frame_count(self) -> int: ...

    def frames(self, origin: float, side: float) -> Sequence[QRectF]:
        """Return `frame_count` rects in layout-axis order, placed at `origin`."""
        ...


@runtime_checkable
class Pattern(Protocol):
    @property
    def blocks(self) -> Sequence[Block]: ...

    @property
    def repeated_index(self) -> Optional[int]: ...

    def separator(self, position: BlockSeparatorPosition) -> float: ...


@runtime_checkable
class Supplementary(Protocol):
    """A header or footer region."""

    @property
    def hidden_when_empty(self) -> bool: ...

    def frame(self, origin: float, side: float) -> QRectF: ...


@runtime_checkable
class PatternSource(Protocol):
    def pattern(self, section: int) -> Optional[Pattern]: ...
