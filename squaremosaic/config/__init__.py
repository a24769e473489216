"""Declarative mosaic files (YAML) turned into pattern sources."""

from .mosaic_loader import MosaicLoader
from .schema import MosaicSchema

__all__ = [
    'MosaicLoader',
    'MosaicSchema',
]
