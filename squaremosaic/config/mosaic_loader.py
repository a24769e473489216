"""Mosaic loader - reads mosaic files into pattern sources."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from squaremosaic.errors import MosaicFileError, PatternConfigurationError
from squaremosaic.layout.geometry import LayoutDirection
from squaremosaic.layout.patterns import (
    FixedSupplementary,
    FractionalBlock,
    MosaicPattern,
    RowBlock,
    SectionConfig,
    StaticPatternSource,
)
from squaremosaic.utils.flow_log import log_flow
from squaremosaic.utils.settings import get_default
from .schema import MosaicSchema


class MosaicLoader:
    """Loads and validates mosaic files."""

    def __init__(self):
        self.loaded_mosaics: Dict[str, StaticPatternSource] = {}

    def load_mosaic(self, mosaic_path: Path) -> Optional[StaticPatternSource]:
        """Load and validate a mosaic file.

        Args:
            mosaic_path: Path to YAML mosaic file

        Returns:
            Pattern source or None if the file is missing or invalid
        """
        mosaic_path = Path(mosaic_path)
        try:
            with open(mosaic_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            log_flow("LOADER", f"YAML parse error in {mosaic_path.name}: {e}", level="ERROR")
            return None
        except FileNotFoundError:
            log_flow("LOADER", f"Mosaic file not found: {mosaic_path}", level="ERROR")
            return None
        except (OSError, UnicodeDecodeError) as e:
            log_flow("LOADER", f"Cannot read mosaic {mosaic_path.name}: {e}", level="ERROR")
            return None

        if not data:
            log_flow("LOADER", f"Empty mosaic file: {mosaic_path}", level="WARNING")
            return None

        try:
            source = self.parse_mosaic(data)
        except MosaicFileError as e:
            log_flow("LOADER", f"Invalid mosaic {mosaic_path.name}: {e}", level="ERROR")
            return None

        self.loaded_mosaics[mosaic_path.stem] = source
        return source

    def parse_mosaic(self, data: Dict[str, Any]) -> StaticPatternSource:
        """Build a pattern source from already parsed mosaic data.

        Raises:
            MosaicFileError: if the structure is invalid or a pattern is malformed
        """
        valid, error = MosaicSchema.validate_structure(data)
        if not valid:
            raise MosaicFileError(error)

        direction = LayoutDirection(data.get('direction', get_default('direction')))
        try:
            blocks = {name: self._build_block(entry, direction) for name, entry in data['blocks'].items()}
            patterns = {name: self._build_pattern(entry, blocks) for name, entry in data['patterns'].items()}
            sections = [self._build_section(entry, patterns, direction) for entry in data.get('sections', [])]
            default_section = None
            if 'default_section' in data:
                default_section = self._build_section(data['default_section'], patterns, direction)
        except PatternConfigurationError as e:
            raise MosaicFileError(str(e)) from e

        return StaticPatternSource(
            sections=sections,
            default_section=default_section,
            between_sections=float(data.get('separator_between_sections',
                                            get_default('separator_between_sections'))),
            direction=direction,
        )

    def _build_block(self, entry: Dict[str, Any], direction: LayoutDirection):
        if entry['type'] == 'fractional':
            return FractionalBlock(cells=tuple(tuple(cell) for cell in entry['cells']), direction=direction)
        return RowBlock(
            count=entry['count'],
            length=float(entry['length']),
            spacing=float(entry.get('spacing', get_default('row_block_spacing'))),
            direction=direction,
        )

    def _build_pattern(self, entry: Dict[str, Any], blocks: Dict[str, Any]) -> MosaicPattern:
        names = entry['blocks']
        separators = get_default('block_separators')
        separators.update(entry.get('separators', {}))
        # The first occurrence of the named block becomes the repeated tail.
        repeated_index = names.index(entry['repeat']) if 'repeat' in entry else None
        return MosaicPattern(
            blocks=tuple(blocks[name] for name in names),
            repeated_index=repeated_index,
            before=float(separators['before']),
            between=float(separators['between']),
            after=float(separators['after']),
        )

    def _build_section(self, entry: Dict[str, Any], patterns: Dict[str, MosaicPattern],
                       direction: LayoutDirection) -> SectionConfig:
        return SectionConfig(
            pattern=patterns.get(entry.get('pattern')),
            header=self._build_supplementary(entry.get('header'), direction),
            footer=self._build_supplementary(entry.get('footer'), direction),
            background=entry.get('background', get_default('section_background')),
        )

    def _build_supplementary(self, entry: Optional[Dict[str, Any]],
                             direction: LayoutDirection) -> Optional[FixedSupplementary]:
        if entry is None:
            return None
        return FixedSupplementary(
            length=float(entry['length']),
            hidden_when_empty=bool(entry.get('hidden_when_empty', get_default('supplementary_hidden_when_empty'))),
            inset=float(entry.get('inset', 0.0)),
            direction=direction,
        )
