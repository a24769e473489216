"""Expand a pattern's blocks far enough to hold a section's items."""

from typing import List

from squaremosaic.layout.patterns import validate_pattern
from squaremosaic.layout.protocols import Block, Pattern


def expand_blocks(pattern: Pattern, required_frames: int) -> List[Block]:
    """
    Repeat a pattern's blocks until they cover `required_frames` frames.

    With a repeated block at index i, blocks before i are used once and the
    repeated block is appended until the frame total is reached; blocks after
    i are never used. Otherwise the whole block list is repeated, at least
    once even when nothing is required.

    The result can hold more frames than required; the builder stops
    consuming frames once the section is full.

    Raises:
        PatternConfigurationError: if the pattern is malformed (see
            `validate_pattern`), which would otherwise never terminate.
    """
    validate_pattern(pattern)
    blocks = list(pattern.blocks)
    repeated_index = pattern.repeated_index

    if repeated_index is not None:
        repeated = blocks[repeated_index]
        expanded = blocks[:repeated_index]
        count = sum(block.frame_count for block in expanded)
        while count < required_frames:
            expanded.append(repeated)
            count += repeated.frame_count
        return expanded

    frames_per_pass = sum(block.frame_count for block in blocks)
    expanded = []
    count = 0
    while True:
        expanded.extend(blocks)
        count += frames_per_pass
        if count >= required_frames:
            return expanded
