from squaremosaic.errors import MosaicError, MosaicFileError, PatternConfigurationError
from squaremosaic.layout import *  # noqa: F401,F403
from squaremosaic.layout import __all__ as _layout_all

__all__ = ['MosaicError', 'MosaicFileError', 'PatternConfigurationError', *_layout_all]
