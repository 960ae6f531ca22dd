"""
Timezone-safe date and time helpers
"""

from .dst import classify_wall_time, is_dst_ambiguous
from .builder import build_date_time
from .posix import convert_to_local_posix, to_utc_instant
from .formatting import format_date_time, UTC_DATETIME_FORMAT
from .relative import parse_relative_date
from .threshold import generate_threshold

__all__ = [
    'classify_wall_time',
    'is_dst_ambiguous',
    'build_date_time',
    'convert_to_local_posix',
    'to_utc_instant',
    'format_date_time',
    'UTC_DATETIME_FORMAT',
    'parse_relative_date',
    'generate_threshold',
]
