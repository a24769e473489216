"""Exceptions raised by the mosaic layout engine."""


class MosaicError(Exception):
    """Base class for all mosaic layout errors."""


class PatternConfigurationError(MosaicError, ValueError):
    """A pattern (or the source handing it out) cannot be laid out."""


class MosaicFileError(MosaicError):
    """A declarative mosaic file is malformed."""
