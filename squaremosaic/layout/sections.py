"""Section visibility and the separator placed between sections."""

from typing import FrozenSet, List, Optional, Sequence

from squaremosaic.layout.protocols import Pattern, PatternSource, Supplementary


class SectionSource:
    """Uniform access to a pattern source whose optional members may be missing.

    A missing member means the feature is off: no header, no footer, no
    background, no separator between sections.
    """

    def __init__(self, source: PatternSource):
        self._source = source

    def _optional(self, name: str, *args, default=None):
        member = getattr(self._source, name, None)
        if member is None:
            return default
        return member(*args)

    def pattern(self, section: int) -> Optional[Pattern]:
        return self._source.pattern(section)

    def header(self, section: int) -> Optional[Supplementary]:
        return self._optional('header', section)

    def footer(self, section: int) -> Optional[Supplementary]:
        return self._optional('footer', section)

    def background_enabled(self, section: int) -> bool:
        return bool(self._optional('background_enabled', section, default=False))

    def separator_between_sections(self) -> float:
        return float(self._optional('separator_between_sections', default=0.0))


def is_section_non_empty(source: SectionSource, rows: int, section: int) -> bool:
    """A section shows up when it has items or a header/footer kept for empty sections."""
    if rows > 0:
        return True
    header = source.header(section)
    if header is not None and not header.hidden_when_empty:
        return True
    footer = source.footer(section)
    if footer is not None and not footer.hidden_when_empty:
        return True
    return False


def non_empty_sections(source: SectionSource, dimension: Sequence[int]) -> List[int]:
    return [section for section, rows in enumerate(dimension)
            if is_section_non_empty(source, rows, section)]


def separated_sections(non_empty: Sequence[int], separator: float) -> FrozenSet[int]:
    """Sections preceded by the between-sections separator.

    Every non-empty section but the first one; none when the separator is not
    positive or fewer than two sections are non-empty.
    """
    if separator <= 0 or len(non_empty) < 2:
        return frozenset()
    return frozenset(non_empty[1:])


def separator_before_section(section: int, separated: FrozenSet[int], separator: float) -> float:
    """Space inserted ahead of `section`, 0 when nothing separates it."""
    return separator if section in separated else 0.0
