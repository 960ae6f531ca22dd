"""
Relative date expressions used by report filters and setting defaults

Three forms are understood, case-insensitively:

    TODAY           the reference date
    CM, CQ-1, CY+2  snap to the start/end of the current month, quarter or
                    year, optionally shifted by whole periods first
    D-7, W+2, M-1   add a signed number of days, weeks, months or years
"""

import logging
import re
from datetime import date, timedelta
from typing import TYPE_CHECKING, Any, Optional, Union

from ..errors import InvalidFormatError, ValidationError
from ..models import PeriodBound
from ..utils.date_utils import PERIOD_MONTHS, add_months, parse_civil_date, period_end, period_start

if TYPE_CHECKING:
    from ..config import TimeSettings

logger = logging.getLogger(__name__)

SNAP_PATTERN = re.compile(r"^C([MQY])(?:([+-])(\d*))?$")
OFFSET_PATTERN = re.compile(r"^([MWDY])([+-])(\d+)$")

SNAP_UNITS = {
    "M": "month",
    "Q": "quarter",
    "Y": "year",
}


def _apply_offset(ref_date: date, unit: str, offset: int) -> date:
    if unit == "M":
        return add_months(ref_date, offset)
    if unit == "Y":
        return add_months(ref_date, 12 * offset)
    if unit == "W":
        return ref_date + timedelta(weeks=offset)
    return ref_date + timedelta(days=offset)


def parse_relative_date(
    relative_string: Any,
    type: Union[str, PeriodBound] = PeriodBound.START,
    ref_date: Optional[Union[date, str]] = None,
    *,
    settings: Optional["TimeSettings"] = None
) -> date:
    """Resolve a relative date expression against a reference date

    Args:
        relative_string: 'today', a snap code such as 'CQ-1', or an offset
            code such as 'D+30'
        type: 'start' or 'end' of the snapped period; ignored for 'today'
            and offset codes
        ref_date: Anchor date; defaults to settings.today()
        settings: Supplies the current local date when ref_date is omitted

    Returns:
        date: Resolved calendar date

    Raises:
        InvalidFormatError: Expression not recognized, or it lands outside
            the representable date range
        ValidationError: Bad type, bad ref_date, or no way to know today
    """
    bound = PeriodBound.coerce(type, "type")

    if not isinstance(relative_string, str):
        raise InvalidFormatError(f"Invalid relative date format: {relative_string!r}")

    if ref_date is None:
        if settings is None:
            raise ValidationError("'ref_date' is required when no settings are supplied")
        ref_date = settings.today()
    ref_date = parse_civil_date(ref_date, "ref_date")

    expression = relative_string.strip().upper()

    if expression == "TODAY":
        return ref_date

    snap = SNAP_PATTERN.match(expression)
    offset_match = OFFSET_PATTERN.match(expression)
    if not snap and not offset_match:
        raise InvalidFormatError(f"Invalid relative date format: '{relative_string}'")

    try:
        if snap:
            unit_code, sign, amount = snap.groups()
            offset = int(amount) if amount else 0
            if sign == "-":
                offset = -offset

            unit = SNAP_UNITS[unit_code]
            base_date = add_months(ref_date, offset * PERIOD_MONTHS[unit])
            result = period_start(base_date, unit) if bound is PeriodBound.START else period_end(base_date, unit)
        else:
            unit_code, sign, amount = offset_match.groups()
            offset = -int(amount) if sign == "-" else int(amount)
            result = _apply_offset(ref_date, unit_code, offset)
    except (OverflowError, ValueError) as e:
        raise InvalidFormatError(
            f"Relative date '{relative_string}' falls outside the supported date range"
        ) from e

    logger.debug(f"'{relative_string}' ({bound.value}) from {ref_date} -> {result}")
    return result
