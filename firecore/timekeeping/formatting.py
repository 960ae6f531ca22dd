"""
Display strings for dates, times and instants
"""

import logging
from datetime import date, datetime, time
from typing import Any, Union

from ..config import TimeSettings
from ..errors import InvalidConversionError, ValidationError
from ..models import ValueKind, ZoneChoice
from ..utils.date_utils import is_missing, map_values, parse_civil_date, parse_civil_time, resolve_zone

logger = logging.getLogger(__name__)

# Storage and log form of UTC datetimes, independent of display settings
UTC_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

INVALID_COMBINATIONS = {
    (ValueKind.DATE, ValueKind.TIME),
    (ValueKind.DATE, ValueKind.DATETIME),
    (ValueKind.TIME, ValueKind.DATETIME),
    (ValueKind.TIME, ValueKind.DATE),
}


def _reinterpret(value: Any, tz) -> datetime:
    """Express a datetime-like value in tz

    Aware values are converted; naive values are read as wall-clock time in tz.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise ValidationError(f"Not a valid ISO datetime: '{value}'") from e
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if not isinstance(value, datetime):
        raise ValidationError(f"Expected a datetime; got {value!r}")

    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def _pattern_for(output_kind: ValueKind, zone_choice: ZoneChoice, seconds: bool, settings: TimeSettings) -> str:
    if output_kind is ValueKind.DATE:
        return settings.date_format
    if output_kind is ValueKind.TIME:
        return "%H:%M:%S" if seconds else "%H:%M"
    if zone_choice is ZoneChoice.UTC:
        return UTC_DATETIME_FORMAT
    return settings.date_time_format


def format_date_time(
    dt: Any,
    input: Union[str, ValueKind] = ValueKind.DATETIME,
    output: Union[str, ValueKind] = ValueKind.DATETIME,
    target_tz: Union[str, ZoneChoice] = ZoneChoice.LOCAL,
    seconds: bool = False,
    *,
    settings: TimeSettings
) -> Any:
    """Render a datetime, date or time as a display string

    Args:
        dt: Value (or list/tuple/Series of values) to format
        input: 'datetime', 'date' or 'time'
        output: 'datetime', 'date' or 'time'
        target_tz: 'local' or 'UTC'
        seconds: Include seconds in 'time' output
        settings: Supplies the local zone and display patterns

    Returns:
        str for a scalar; list or Series of str for batch input. Missing
        elements (None, NaN, NaT) render as None.

    Raises:
        InvalidConversionError: The input type cannot be shown as the output type
    """
    input_kind = ValueKind.coerce(input, "input")
    output_kind = ValueKind.coerce(output, "output")
    zone_choice = ZoneChoice.coerce(target_tz, "target_tz")

    if not isinstance(seconds, bool):
        raise ValidationError(f"'seconds' must be True or False; got {seconds!r}")

    if (input_kind, output_kind) in INVALID_COMBINATIONS:
        raise InvalidConversionError(
            f"Invalid conversion: cannot format input type '{input_kind.value}' "
            f"as output type '{output_kind.value}'"
        )

    tz = settings.zone if zone_choice is ZoneChoice.LOCAL else resolve_zone("UTC")
    fmt = _pattern_for(output_kind, zone_choice, seconds, settings)

    def render(value):
        if is_missing(value):
            return None
        if input_kind is ValueKind.DATE:
            return parse_civil_date(value, "dt").strftime(fmt)
        if input_kind is ValueKind.TIME:
            return parse_civil_time(value, "dt").strftime(fmt)
        return _reinterpret(value, tz).strftime(fmt)

    return map_values(dt, render)
