"""
Clock that reports the current time in a configured zone
"""

from datetime import date, datetime, timezone
from typing import Callable, Optional, Union
from zoneinfo import ZoneInfo

from .utils.date_utils import resolve_zone


def _system_utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimeZoneClock:
    """Supplies "now" and "today" in one IANA zone

    now_func must return an aware datetime; it defaults to the system clock
    and exists so callers and tests can pin the current instant.
    """

    def __init__(
        self,
        zone: Union[str, ZoneInfo],
        now_func: Optional[Callable[[], datetime]] = None
    ):
        self.zone = resolve_zone(zone)
        self._now_func = now_func or _system_utcnow

    def utcnow(self) -> datetime:
        """Current instant in UTC"""
        current = self._now_func()
        if current.tzinfo is None:
            raise ValueError("Clock now_func must return a timezone-aware datetime")
        return current.astimezone(timezone.utc)

    def now(self) -> datetime:
        """Current instant in the clock's zone"""
        return self.utcnow().astimezone(self.zone)

    def today(self) -> date:
        """Current calendar date as observed in the clock's zone"""
        return self.now().date()

    def __repr__(self):
        return f"TimeZoneClock(zone='{self.zone.key}')"
