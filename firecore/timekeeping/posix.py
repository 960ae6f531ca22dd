"""
Conversion of stored UTC instants into the configured local zone
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Union

import pandas as pd

from ..config import TimeSettings
from ..errors import InvalidConversionError, ValidationError
from ..models import ValueKind
from ..utils.date_utils import is_missing, map_values, parse_civil_date

logger = logging.getLogger(__name__)


def to_utc_instant(value: Any) -> datetime:
    """Normalize a datetime-like value to an aware UTC datetime

    Naive datetimes and ISO strings without an offset are taken to be UTC,
    which is how instants are stored. A bare date means midnight UTC.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValidationError(f"Not a valid ISO datetime: '{value}'") from e
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if not isinstance(value, datetime):
        raise ValidationError(f"Expected a datetime; got {value!r}")

    if hasattr(value, "to_pydatetime"):
        value = value.to_pydatetime()

    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def convert_to_local_posix(
    x: Any,
    input: Union[str, ValueKind] = ValueKind.DATETIME,
    output: Union[str, ValueKind] = ValueKind.DATETIME,
    *,
    settings: TimeSettings
) -> Any:
    """Project a UTC instant (or a date) into the configured local zone

    date -> date passes through untouched; date -> datetime is refused
    because a bare date has no time of day to anchor. datetime -> date takes
    the calendar date observed locally, so a late-evening UTC instant can
    land on the previous local day.

    Lists, tuples and pandas Series are converted element by element;
    missing elements (None, NaN, NaT) come back as NaT, or None for dates.
    """
    input_kind = ValueKind.coerce(input, "input")
    output_kind = ValueKind.coerce(output, "output")

    if ValueKind.TIME in (input_kind, output_kind):
        raise InvalidConversionError(
            f"Invalid conversion: cannot convert input type '{input_kind.value}' "
            f"to output type '{output_kind.value}'"
        )
    if input_kind is ValueKind.DATE and output_kind is ValueKind.DATETIME:
        raise InvalidConversionError(
            f"Invalid conversion: cannot convert input type '{input_kind.value}' "
            f"to output type '{output_kind.value}'"
        )

    if input_kind is ValueKind.DATE:
        return map_values(x, lambda value: None if is_missing(value) else parse_civil_date(value))

    local_tz = settings.zone

    def convert(value):
        if is_missing(value):
            return None if output_kind is ValueKind.DATE else pd.NaT
        local = to_utc_instant(value).astimezone(local_tz)
        if output_kind is ValueKind.DATE:
            return local.date()
        return local

    logger.debug(f"Converting {input_kind.value} -> {output_kind.value} in {local_tz.key}")
    return map_values(x, convert)
