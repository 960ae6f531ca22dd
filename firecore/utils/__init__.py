"""
Utility functions
"""

from .date_utils import (
    add_months,
    period_start,
    period_end,
    resolve_zone,
    parse_civil_date,
    parse_civil_time,
    map_values,
    is_missing,
)
from .logging_config import setup_logging

__all__ = [
    'add_months',
    'period_start',
    'period_end',
    'resolve_zone',
    'parse_civil_date',
    'parse_civil_time',
    'map_values',
    'is_missing',
    'setup_logging',
]
