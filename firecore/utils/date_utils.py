"""
Date utility functions
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd
from dateutil.relativedelta import relativedelta

from ..errors import ValidationError

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?$")

PERIOD_MONTHS = {
    "month": 1,
    "quarter": 3,
    "year": 12,
}


def resolve_zone(zone: Union[str, ZoneInfo]) -> ZoneInfo:
    """Look up an IANA zone identifier"""
    if isinstance(zone, ZoneInfo):
        return zone
    if not isinstance(zone, str) or not zone.strip():
        raise ValidationError(f"Invalid time zone: {zone!r}")
    try:
        return ZoneInfo(zone.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown time zone: '{zone}'") from e


def parse_civil_date(value: Any, argument: str = "date") -> date:
    """Coerce a date or an ISO 'YYYY-MM-DD' string into a date

    Datetimes are rejected: silently dropping their time-of-day would hide
    caller mistakes.
    """
    if isinstance(value, datetime):
        raise ValidationError(f"'{argument}' must be a date, not a datetime: {value!r}")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValidationError(f"'{argument}' is not a valid YYYY-MM-DD date: '{value}'") from e
    raise ValidationError(f"'{argument}' must be a date or 'YYYY-MM-DD' string; got {value!r}")


def parse_civil_time(value: Any, argument: str = "time") -> time:
    """Coerce a time, a datetime or an 'HH:MM[:SS[.ffffff]]' string into a time

    For datetimes only the wall-clock time-of-day is kept; the date part and
    any zone are dropped.
    """
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value.replace(tzinfo=None)
    if not isinstance(value, str):
        raise ValidationError(f"'{argument}' must be a time or 'HH:MM[:SS]' string; got {value!r}")

    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise ValidationError(f"'{argument}' is not a valid HH:MM or HH:MM:SS time: '{value}'")

    hour, minute, second, fraction = match.groups()
    # Fractional digits are right-padded to microseconds
    microsecond = int(fraction.ljust(6, "0")) if fraction else 0
    try:
        return time(int(hour), int(minute), int(second or 0), microsecond)
    except ValueError as e:
        raise ValidationError(f"'{argument}' is out of range: '{value}'") from e


def add_months(value: date, months: int) -> date:
    """Add calendar months, clamping to the last day of the target month

    Jan 31 + 1 month is Feb 28 (or 29), never early March.
    """
    return value + relativedelta(months=months)


def period_start(value: date, unit: str) -> date:
    """First day of the month, quarter or year containing value"""
    size = PERIOD_MONTHS[unit]
    first_month = ((value.month - 1) // size) * size + 1
    return date(value.year, first_month, 1)


def period_end(value: date, unit: str) -> date:
    """Last day of the month, quarter or year containing value"""
    next_start = add_months(period_start(value, unit), PERIOD_MONTHS[unit])
    return next_start - timedelta(days=1)


def is_missing(value: Any) -> bool:
    """True for None, NaN and NaT elements of a batch"""
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def map_values(values: Any, func: Callable[[Any], Any]) -> Any:
    """Apply func to a scalar, or element-wise to a list, tuple or Series

    Lists and tuples come back as lists; a Series keeps its index.
    """
    if isinstance(values, pd.Series):
        return values.map(func)
    if isinstance(values, (list, tuple)):
        return [func(v) for v in values]
    return func(values)
