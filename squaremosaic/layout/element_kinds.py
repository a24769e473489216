"""Supplementary kinds and their collaborator-facing identifiers."""

from enum import Enum
from typing import Optional


class SupplementaryKind(Enum):
    HEADER = 'header'
    FOOTER = 'footer'
    BACKGROUND = 'background'


SECTION_HEADER = 'SquareMosaicLayout.SquareMosaicLayoutSectionHeader'
SECTION_FOOTER = 'SquareMosaicLayout.SquareMosaicLayoutSectionFooter'
SECTION_BACKER = 'SquareMosaicLayout.SquareMosaicLayoutSectionBacker'

_ELEMENT_KINDS = {
    SupplementaryKind.HEADER: SECTION_HEADER,
    SupplementaryKind.FOOTER: SECTION_FOOTER,
    SupplementaryKind.BACKGROUND: SECTION_BACKER,
}
_KINDS_BY_ELEMENT_KIND = {value: kind for kind, value in _ELEMENT_KINDS.items()}


def element_kind_for(kind: SupplementaryKind) -> str:
    return _ELEMENT_KINDS[kind]


def kind_for_element_kind(element_kind: str) -> Optional[SupplementaryKind]:
    """Resolve a container's element-kind string, None when unknown."""
    return _KINDS_BY_ELEMENT_KIND.get(element_kind)
