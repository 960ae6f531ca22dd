"""
firecore: shared helpers for the shift and incident tracking apps
"""

from .config import TimeSettings, SettingsStore
from .clock import TimeZoneClock
from .errors import (
    FirecoreError,
    ValidationError,
    InvalidFormatError,
    InvalidConversionError,
    NonexistentTimeError,
    AmbiguousTimeError,
    DatabaseUnavailableError,
)
from .timekeeping import (
    is_dst_ambiguous,
    classify_wall_time,
    build_date_time,
    convert_to_local_posix,
    format_date_time,
    parse_relative_date,
    generate_threshold,
)

__version__ = "1.0.0"

__all__ = [
    'TimeSettings',
    'SettingsStore',
    'TimeZoneClock',
    'FirecoreError',
    'ValidationError',
    'InvalidFormatError',
    'InvalidConversionError',
    'NonexistentTimeError',
    'AmbiguousTimeError',
    'DatabaseUnavailableError',
    'is_dst_ambiguous',
    'classify_wall_time',
    'build_date_time',
    'convert_to_local_posix',
    'format_date_time',
    'parse_relative_date',
    'generate_threshold',
]
