"""
Daylight Saving Time checks for wall-clock readings
"""

import logging
from datetime import date, datetime, time
from typing import Union
from zoneinfo import ZoneInfo

from ..models import WallTimeKind
from ..utils.date_utils import parse_civil_date, parse_civil_time, resolve_zone

logger = logging.getLogger(__name__)


def classify_wall_time(
    date_value: Union[date, str],
    time_value: Union[time, datetime, str],
    zone: Union[str, ZoneInfo]
) -> WallTimeKind:
    """Classify a civil date+time by how many instants it names in a zone

    The zone database is asked for the reading's UTC offset on both sides of
    any transition (PEP 495 fold=0 and fold=1). In an overlap the earlier
    offset is the larger one; in a gap it is the smaller one; otherwise the
    two agree and the reading is unique.
    """
    civil_date = parse_civil_date(date_value)
    civil_time = parse_civil_time(time_value)
    tz = resolve_zone(zone)

    naive = datetime.combine(civil_date, civil_time)
    earlier = naive.replace(tzinfo=tz, fold=0).utcoffset()
    later = naive.replace(tzinfo=tz, fold=1).utcoffset()

    if earlier > later:
        kind = WallTimeKind.AMBIGUOUS
    elif earlier < later:
        kind = WallTimeKind.NONEXISTENT
    else:
        kind = WallTimeKind.UNIQUE

    logger.debug(f"{civil_date} {civil_time} in {tz.key}: {kind.value}")
    return kind


def is_dst_ambiguous(
    date_value: Union[date, str],
    time_value: Union[time, datetime, str],
    zone: Union[str, ZoneInfo]
) -> bool:
    """Check whether a wall-clock time occurs twice because of a fall-back

    For North American zones this is the 01:00-01:59 hour on the first
    Sunday of November. Zones without DST, such as UTC, never report an
    ambiguous time.

    Args:
        date_value: Calendar date or 'YYYY-MM-DD' string
        time_value: Time of day, 'HH:MM' or 'HH:MM:SS'
        zone: IANA zone identifier

    Returns:
        bool: True when the reading names two different instants
    """
    return classify_wall_time(date_value, time_value, zone) is WallTimeKind.AMBIGUOUS
