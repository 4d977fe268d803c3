from .config import BINARY_UNITS, DECIMAL_UNITS, SizeConfig
from .converter import SizeConverter, format_size, parse_size
from .errors import ConfigurationError, InvalidValueError, ParseError, SizeError

__all__ = [
    'BINARY_UNITS',
    'DECIMAL_UNITS',
    'ConfigurationError',
    'InvalidValueError',
    'ParseError',
    'SizeConfig',
    'SizeConverter',
    'SizeError',
    'format_size',
    'parse_size',
]
