from PySide6.QtCore import QRectF, QSizeF

import pytest

from squaremosaic.config.mosaic_loader import MosaicLoader
from squaremosaic.config.schema import MosaicSchema
from squaremosaic.errors import MosaicFileError
from squaremosaic.layout.builder import build_layout
from squaremosaic.layout.element_kinds import SupplementaryKind
from squaremosaic.layout.geometry import LayoutDirection
from squaremosaic.layout.mosaic_layout import MosaicLayout

FEED_MOSAIC = """
name: feed
version: 1
separator_between_sections: 10
blocks:
  hero: {type: fractional, cells: [[0, 1, 0, 0.5]]}
  pair: {type: row, count: 2, length: 40, spacing: 4}
patterns:
  feed:
    blocks: [hero, pair]
    repeat: pair
    separators: {between: 2}
sections:
  - pattern: feed
    header: {length: 30, hidden_when_empty: false}
    background: true
default_section:
  pattern: feed
"""


def minimal_data(**overrides):
    data = {
        'name': 'minimal',
        'version': 1,
        'blocks': {'one': {'type': 'row', 'count': 1, 'length': 10}},
        'patterns': {'plain': {'blocks': ['one']}},
        'sections': [{'pattern': 'plain'}],
    }
    data.update(overrides)
    return data


def test_load_mosaic_builds_usable_source(tmp_path):
    path = tmp_path / "feed.yaml"
    path.write_text(FEED_MOSAIC, encoding='utf-8')
    loader = MosaicLoader()

    source = loader.load_mosaic(path)

    assert loader.loaded_mosaics["feed"] is source
    result = build_layout([3, 2], source, LayoutDirection.VERTICAL, 100)
    assert [a.rect for a in result.cells[0]] == [
        QRectF(0, 30, 100, 50), QRectF(0, 82, 48, 40), QRectF(52, 82, 48, 40)]
    assert [a.rect for a in result.cells[1]] == [QRectF(0, 132, 100, 50), QRectF(0, 184, 48, 40)]
    assert result.supplementary_attribute(SupplementaryKind.BACKGROUND, 0).rect == QRectF(0, 0, 100, 122)
    assert result.supplementary_attribute(SupplementaryKind.HEADER, 1) is None
    assert result.content_extent == 224


def test_load_missing_file_returns_none(tmp_path):
    assert MosaicLoader().load_mosaic(tmp_path / "missing.yaml") is None


def test_load_invalid_yaml_returns_none(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("name: [unclosed", encoding='utf-8')

    assert MosaicLoader().load_mosaic(path) is None


def test_load_empty_file_returns_none(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding='utf-8')

    assert MosaicLoader().load_mosaic(path) is None


def test_load_invalid_structure_returns_none_and_is_not_cached(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("name: bad\nversion: 1\n", encoding='utf-8')
    loader = MosaicLoader()

    assert loader.load_mosaic(path) is None
    assert "bad" not in loader.loaded_mosaics


def test_parse_mosaic_applies_defaults():
    source = MosaicLoader().parse_mosaic(minimal_data())

    assert source.separator_between_sections() == 0.0
    assert source.background_enabled(0) is False
    assert source.pattern(1) is None


def test_parse_mosaic_horizontal_direction():
    source = MosaicLoader().parse_mosaic(minimal_data(direction='horizontal'))

    result = build_layout([1], source, LayoutDirection.HORIZONTAL, 60)

    assert result.cells[0][0].rect == QRectF(0, 0, 10, 60)


def test_parse_mosaic_rejects_malformed_pattern_values():
    data = minimal_data(patterns={'plain': {'blocks': ['one'], 'separators': {'before': -2}}})

    with pytest.raises(MosaicFileError):
        MosaicLoader().parse_mosaic(data)


def test_parse_mosaic_rejects_zero_count_block():
    data = minimal_data(blocks={'one': {'type': 'row', 'count': 0, 'length': 10}})

    with pytest.raises(MosaicFileError):
        MosaicLoader().parse_mosaic(data)


@pytest.mark.parametrize("overrides, message", [
    ({'direction': 'diagonal'}, "direction"),
    ({'blocks': {}}, "blocks"),
    ({'blocks': {'one': {'type': 'circle'}}}, "type"),
    ({'blocks': {'one': {'type': 'fractional', 'cells': [[0, 1]]}}}, "cells"),
    ({'patterns': {'plain': {'blocks': ['two']}}}, "unknown block"),
    ({'patterns': {'plain': {'blocks': ['one'], 'repeat': 'two'}}}, "repeat"),
    ({'patterns': {'plain': {'blocks': ['one'], 'separators': {'around': 1}}}}, "separators"),
    ({'sections': [{'pattern': 'nope'}]}, "unknown pattern"),
    ({'sections': [{'header': {'length': 'tall'}}]}, "header"),
    ({'sections': [{'background': 'yes'}]}, "background"),
    ({'default_section': []}, "default_section"),
    ({'sections': [{'pattern': ['plain']}]}, "unknown pattern"),
    ({'default_section': {'pattern': {'name': 'plain'}}}, "unknown pattern"),
    ({'patterns': {'plain': {'blocks': [['one']]}}}, "unknown block"),
    ({'patterns': {'plain': {'blocks': ['one'], 'repeat': ['one']}}}, "repeat"),
    ({'sections': [{'header': {'length': 10, 'hidden_when_empty': 'false'}}]}, "hidden_when_empty"),
])
def test_schema_reports_structure_errors(overrides, message):
    valid, error = MosaicSchema.validate_structure(minimal_data(**overrides))

    assert valid is False
    assert message in error


def test_schema_requires_core_fields():
    valid, error = MosaicSchema.validate_structure({'name': 'x'})

    assert valid is False
    assert error == "Missing required field: version"


def test_schema_accepts_minimal_data():
    assert MosaicSchema.validate_structure(minimal_data()) == (True, "")


def test_load_mosaic_with_unhashable_names_returns_none(tmp_path):
    path = tmp_path / "nested.yaml"
    path.write_text(
        "name: nested\nversion: 1\n"
        "blocks: {one: {type: row, count: 1, length: 10}}\n"
        "patterns: {plain: {blocks: [one]}}\n"
        "default_section: {pattern: [plain]}\n",
        encoding='utf-8',
    )

    assert MosaicLoader().load_mosaic(path) is None


def test_load_undecodable_file_returns_none(tmp_path):
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"name: \xff\xfe\x00bad\n")

    assert MosaicLoader().load_mosaic(path) is None


def test_load_directory_returns_none(tmp_path):
    assert MosaicLoader().load_mosaic(tmp_path) is None


def test_quoted_hidden_flag_is_rejected():
    data = minimal_data(sections=[{'pattern': 'plain', 'header': {'length': 10, 'hidden_when_empty': 'false'}}])

    with pytest.raises(MosaicFileError):
        MosaicLoader().parse_mosaic(data)


def test_horizontal_file_lays_out_along_x_in_mosaic_layout(tmp_path):
    path = tmp_path / "strip.yaml"
    path.write_text(
        "name: strip\nversion: 1\ndirection: horizontal\n"
        "blocks: {one: {type: row, count: 1, length: 10}}\n"
        "patterns: {plain: {blocks: [one], repeat: one}}\n"
        "default_section: {pattern: plain}\n",
        encoding='utf-8',
    )
    source = MosaicLoader().load_mosaic(path)

    layout = MosaicLayout(source)
    result = layout.prepare([3], QSizeF(100, 60))

    assert source.direction is LayoutDirection.HORIZONTAL
    assert layout.direction is LayoutDirection.HORIZONTAL
    assert [a.rect for a in result.cells[0]] == [
        QRectF(0, 0, 10, 60), QRectF(10, 0, 10, 60), QRectF(20, 0, 10, 60)]
    assert layout.content_size() == QSizeF(30, 60)
