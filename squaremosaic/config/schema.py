"""Mosaic file schema - what a declarative layout file may contain."""

from typing import Any, Dict, List


class MosaicSchema:
    """Structure checks for mosaic files, run before anything is built."""

    VALID_DIRECTIONS = ['vertical', 'horizontal']
    VALID_BLOCK_TYPES = ['fractional', 'row']
    VALID_SEPARATORS = ['before', 'between', 'after']

    @classmethod
    def get_required_fields(cls) -> List[str]:
        """Get list of required top-level fields."""
        return ['name', 'version', 'blocks', 'patterns']

    @classmethod
    def get_optional_fields(cls) -> List[str]:
        """Get list of optional top-level fields."""
        return ['direction', 'separator_between_sections', 'sections', 'default_section']

    @classmethod
    def validate_structure(cls, data: Dict[str, Any]) -> tuple[bool, str]:
        """Validate mosaic data structure.

        Returns:
            (valid, error_message) tuple
        """
        if not isinstance(data, dict):
            return False, "Mosaic file must contain a mapping"

        for field in cls.get_required_fields():
            if field not in data:
                return False, f"Missing required field: {field}"

        if 'direction' in data and data['direction'] not in cls.VALID_DIRECTIONS:
            return False, f"direction must be one of {cls.VALID_DIRECTIONS}"

        if 'separator_between_sections' in data and not _is_number(data['separator_between_sections']):
            return False, "separator_between_sections must be a number"

        blocks = data['blocks']
        if not isinstance(blocks, dict) or not blocks:
            return False, "blocks must be a non-empty mapping"
        for name, block in blocks.items():
            valid, error = cls._validate_block(name, block)
            if not valid:
                return False, error

        patterns = data['patterns']
        if not isinstance(patterns, dict) or not patterns:
            return False, "patterns must be a non-empty mapping"
        for name, pattern in patterns.items():
            valid, error = cls._validate_pattern(name, pattern, blocks)
            if not valid:
                return False, error

        sections = data.get('sections', [])
        if not isinstance(sections, list):
            return False, "sections must be a list"
        for index, section in enumerate(sections):
            valid, error = cls._validate_section(f"sections[{index}]", section, patterns)
            if not valid:
                return False, error

        if 'default_section' in data:
            valid, error = cls._validate_section("default_section", data['default_section'], patterns)
            if not valid:
                return False, error

        return True, ""

    @classmethod
    def _validate_block(cls, name: str, block: Any) -> tuple[bool, str]:
        if not isinstance(block, dict):
            return False, f"blocks.{name} must be a mapping"
        block_type = block.get('type')
        if block_type not in cls.VALID_BLOCK_TYPES:
            return False, f"blocks.{name}.type must be one of {cls.VALID_BLOCK_TYPES}"

        if block_type == 'fractional':
            cells = block.get('cells')
            if not isinstance(cells, list) or not cells:
                return False, f"blocks.{name}.cells must be a non-empty list"
            for cell in cells:
                if not isinstance(cell, list) or len(cell) != 4 or not all(_is_number(v) for v in cell):
                    return False, f"blocks.{name}.cells entries must be lists of 4 numbers"
        else:
            if not isinstance(block.get('count'), int) or isinstance(block.get('count'), bool):
                return False, f"blocks.{name}.count must be an integer"
            if not _is_number(block.get('length')):
                return False, f"blocks.{name}.length must be a number"
            if 'spacing' in block and not _is_number(block['spacing']):
                return False, f"blocks.{name}.spacing must be a number"
        return True, ""

    @classmethod
    def _validate_pattern(cls, name: str, pattern: Any, blocks: Dict[str, Any]) -> tuple[bool, str]:
        if not isinstance(pattern, dict):
            return False, f"patterns.{name} must be a mapping"
        block_names = pattern.get('blocks')
        if not isinstance(block_names, list) or not block_names:
            return False, f"patterns.{name}.blocks must be a non-empty list"
        for block_name in block_names:
            if not isinstance(block_name, str) or block_name not in blocks:
                return False, f"patterns.{name} references unknown block: {block_name}"
        if 'repeat' in pattern and (not isinstance(pattern['repeat'], str)
                                    or pattern['repeat'] not in block_names):
            return False, f"patterns.{name}.repeat must name one of its blocks"
        separators = pattern.get('separators', {})
        if not isinstance(separators, dict):
            return False, f"patterns.{name}.separators must be a mapping"
        for position, value in separators.items():
            if position not in cls.VALID_SEPARATORS:
                return False, f"patterns.{name}.separators keys must be in {cls.VALID_SEPARATORS}"
            if not _is_number(value):
                return False, f"patterns.{name}.separators.{position} must be a number"
        return True, ""

    @classmethod
    def _validate_section(cls, label: str, section: Any, patterns: Dict[str, Any]) -> tuple[bool, str]:
        if not isinstance(section, dict):
            return False, f"{label} must be a mapping"
        if 'pattern' in section and (not isinstance(section['pattern'], str)
                                      or section['pattern'] not in patterns):
            return False, f"{label} references unknown pattern: {section['pattern']}"
        for kind in ('header', 'footer'):
            if kind not in section:
                continue
            supplementary = section[kind]
            if not isinstance(supplementary, dict) or not _is_number(supplementary.get('length')):
                return False, f"{label}.{kind} must be a mapping with a numeric length"
            if 'inset' in supplementary and not _is_number(supplementary['inset']):
                return False, f"{label}.{kind}.inset must be a number"
            if 'hidden_when_empty' in supplementary and not isinstance(supplementary['hidden_when_empty'], bool):
                return False, f"{label}.{kind}.hidden_when_empty must be true or false"
        if 'background' in section and not isinstance(section['background'], bool):
            return False, f"{label}.background must be true or false"
        return True, ""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
