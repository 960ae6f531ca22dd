"""
Assemble an absolute instant from separately captured date and time inputs
"""

import logging
from datetime import date, datetime, time, timezone
from typing import Union

from ..config import TimeSettings
from ..errors import AmbiguousTimeError, NonexistentTimeError
from ..models import ZoneChoice
from ..utils.date_utils import parse_civil_date, parse_civil_time, resolve_zone
from .dst import is_dst_ambiguous

logger = logging.getLogger(__name__)


def _format_clock(value: time) -> str:
    """HH:MM:SS, with microseconds only when present"""
    if value.microsecond:
        return value.strftime("%H:%M:%S.%f")
    return value.strftime("%H:%M:%S")


def build_date_time(
    time_value: Union[str, time, datetime],
    date_value: Union[str, date],
    input: Union[str, ZoneChoice] = ZoneChoice.LOCAL,
    return_type: Union[str, ZoneChoice] = ZoneChoice.UTC,
    *,
    settings: TimeSettings
) -> datetime:
    """Combine a date and a time of day into a timezone-aware datetime

    Time pickers usually attach a placeholder date to the time they return,
    so when time_value is a datetime only its time of day is used.

    Args:
        time_value: 'HH:MM', 'HH:MM:SS' (optional fraction), a time or a datetime
        date_value: Calendar date or 'YYYY-MM-DD' string
        input: Zone the wall-clock reading was captured in ('local' or 'UTC')
        return_type: Zone of the returned datetime ('UTC' or 'local')
        settings: Supplies the local zone

    Returns:
        datetime: Aware datetime in UTC or the local zone

    Raises:
        AmbiguousTimeError: Reading falls in a DST fall-back overlap
        NonexistentTimeError: Reading falls in a DST spring-forward gap
        ValidationError: Unparseable date, time or zone choice
    """
    input_zone = ZoneChoice.coerce(input, "input")
    return_zone = ZoneChoice.coerce(return_type, "return_type")

    requested_time = parse_civil_time(time_value)
    requested_date = parse_civil_date(date_value)
    requested_str = _format_clock(requested_time)

    local_tz = settings.zone
    input_tz = local_tz if input_zone is ZoneChoice.LOCAL else resolve_zone("UTC")

    if is_dst_ambiguous(requested_date, requested_time, input_tz):
        logger.warning(f"Rejected ambiguous datetime {requested_date} {requested_str} in {input_tz.key}")
        raise AmbiguousTimeError(
            f"The datetime '{requested_date} {requested_str}' is ambiguous in timezone "
            f"'{input_tz.key}'. This occurs during DST fall back when the same clock time "
            f"occurs twice. Please specify a different time."
        )

    dt = datetime.combine(requested_date, requested_time, tzinfo=input_tz)

    # A reading inside a spring-forward gap comes back shifted by the jump
    actual = dt.astimezone(timezone.utc).astimezone(input_tz)
    if actual.time() != requested_time or actual.date() != requested_date:
        actual_str = _format_clock(actual.time())
        logger.warning(f"Rejected nonexistent datetime {requested_date} {requested_str} in {input_tz.key}")
        raise NonexistentTimeError(
            f"The datetime '{requested_date} {requested_str}' does not exist in timezone "
            f"'{input_tz.key}'. This typically occurs during DST transitions (spring forward); "
            f"the clock would have read {actual_str}."
        )

    if return_zone is ZoneChoice.LOCAL:
        return dt.astimezone(local_tz)
    return dt.astimezone(timezone.utc)
