import pytest

from squaremosaic.errors import PatternConfigurationError
from squaremosaic.layout.expander import expand_blocks
from squaremosaic.layout.protocols import BlockSeparatorPosition


class FakeBlock:
    def __init__(self, name, frame_count):
        self.name = name
        self.frame_count = frame_count

    def frames(self, origin, side):
        raise AssertionError("expansion must not ask for frames")


class FakePattern:
    def __init__(self, blocks, repeated_index=None):
        self.blocks = blocks
        self.repeated_index = repeated_index

    def separator(self, position: BlockSeparatorPosition):
        return 0.0


A = FakeBlock("a", 2)
B = FakeBlock("b", 1)
C = FakeBlock("c", 3)


def names(blocks):
    return [block.name for block in blocks]


def test_repeated_tail_is_appended_after_fixed_prefix():
    expanded = expand_blocks(FakePattern([A, B, C], repeated_index=1), 5)

    assert names(expanded) == ["a", "b", "b", "b"]


def test_repeated_tail_not_needed_when_prefix_covers_rows():
    assert names(expand_blocks(FakePattern([A, B, C], repeated_index=1), 2)) == ["a"]


def test_repeated_first_block_with_no_rows_expands_to_nothing():
    assert expand_blocks(FakePattern([B], repeated_index=0), 0) == []


def test_whole_pattern_repeats_until_rows_are_covered():
    expanded = expand_blocks(FakePattern([A, B]), 4)

    assert names(expanded) == ["a", "b", "a", "b"]


def test_whole_pattern_is_used_at_least_once():
    assert names(expand_blocks(FakePattern([A, B]), 0)) == ["a", "b"]


def test_expansion_may_overshoot_required_frames():
    expanded = expand_blocks(FakePattern([C]), 4)

    assert sum(block.frame_count for block in expanded) == 6


def test_zero_frame_block_is_rejected_instead_of_looping():
    with pytest.raises(PatternConfigurationError):
        expand_blocks(FakePattern([FakeBlock("empty", 0)]), 3)


def test_empty_pattern_is_rejected():
    with pytest.raises(PatternConfigurationError):
        expand_blocks(FakePattern([]), 1)


def test_repeated_index_out_of_range_is_rejected():
    with pytest.raises(PatternConfigurationError):
        expand_blocks(FakePattern([A], repeated_index=3), 1)


def test_boolean_repeated_index_is_rejected():
    with pytest.raises(PatternConfigurationError):
        expand_blocks(FakePattern([A, B], repeated_index=True), 2)
