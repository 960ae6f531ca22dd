"""
Lookback and expiration thresholds
"""

import logging
import math
import numbers
from datetime import date, datetime, timedelta
from typing import Any, Union

import pandas as pd

from ..errors import InvalidDateError, InvalidFlagError, InvalidLeadTimeError, InvalidUnitError
from ..models import LeadTimeUnit
from ..utils.date_utils import add_months

logger = logging.getLogger(__name__)


def _check_date(value: Any) -> date:
    if isinstance(value, datetime) or not isinstance(value, date):
        raise InvalidDateError(f"'date' must be a date object; got {value!r}")
    return value


def _check_lead_time(lead_time: Any) -> int:
    if isinstance(lead_time, bool) or not isinstance(lead_time, numbers.Real):
        raise InvalidLeadTimeError(f"'leadTime' must be a non-negative number; got {lead_time!r}")
    if not math.isfinite(lead_time) or lead_time < 0:
        raise InvalidLeadTimeError(f"'leadTime' must be a non-negative number; got {lead_time!r}")
    if int(lead_time) != lead_time:
        raise InvalidLeadTimeError(f"'leadTime' must be a whole number of units; got {lead_time!r}")
    return int(lead_time)


def _check_unit(lead_time_unit: Any) -> LeadTimeUnit:
    if isinstance(lead_time_unit, LeadTimeUnit):
        return lead_time_unit
    valid = [unit.value for unit in LeadTimeUnit]
    if lead_time_unit not in valid:
        raise InvalidUnitError(f"'leadTimeUnit' must be one of: {', '.join(valid)}; got {lead_time_unit!r}")
    return LeadTimeUnit(lead_time_unit)


def generate_threshold(
    date_value: Any,
    lead_time: Union[int, float],
    lead_time_unit: Union[str, LeadTimeUnit],
    expire_calc: bool = False
) -> Any:
    """Shift a date back (lookback) or forward (expiration) by a lead time

    Month and year steps clamp to the end of the target month, so
    2024-01-31 + 1 month is 2024-02-29 and 2024-02-29 - 1 year is
    2023-02-28.

    Args:
        date_value: date, or a list/tuple/Series of dates
        lead_time: Non-negative whole number of units
        lead_time_unit: 'day', 'month' or 'year', lowercase
        expire_calc: Add the lead time instead of subtracting it

    Returns:
        Shifted date, or a list/Series matching the input
    """
    lead = _check_lead_time(lead_time)
    unit = _check_unit(lead_time_unit)

    if not isinstance(expire_calc, bool):
        raise InvalidFlagError(f"'expireCalc' must be True or False; got {expire_calc!r}")

    sign = 1 if expire_calc else -1

    def shift(value):
        value = _check_date(value)
        if unit is LeadTimeUnit.DAY:
            return value + timedelta(days=sign * lead)
        if unit is LeadTimeUnit.MONTH:
            return add_months(value, sign * lead)
        return add_months(value, sign * 12 * lead)

    if isinstance(date_value, pd.Series):
        for value in date_value:
            _check_date(value)
        return date_value.map(shift)
    if isinstance(date_value, (list, tuple)):
        checked = [_check_date(value) for value in date_value]
        return [shift(value) for value in checked]

    result = shift(date_value)
    logger.debug(f"Threshold {date_value} {'+' if expire_calc else '-'}{lead} {unit.value} -> {result}")
    return result
