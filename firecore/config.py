"""
Configuration management for firecore

Settings are passed explicitly to every helper that needs them; nothing is
kept in module-level state.
"""

import logging
import os
import sqlite3
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, List, Optional, Union
from zoneinfo import ZoneInfo

import pandas as pd
from dotenv import load_dotenv

from .clock import TimeZoneClock
from .errors import ValidationError
from .utils.date_utils import resolve_zone

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%m-%d-%Y"
DEFAULT_DATE_TIME_FORMAT = "%m-%d-%Y %H:%M"

SETTING_COLUMNS = ["domain", "setting_group", "setting_key", "setting_value", "value_type"]

TRUE_STRINGS = ("true", "1", "t", "yes")


@dataclass(frozen=True)
class TimeSettings:
    """Local zone and display patterns used by the date/time helpers

    current_local_date pins "today" (for example to the date an app session
    started); when it is None the clock decides.
    """
    local_tz: str
    date_format: str = DEFAULT_DATE_FORMAT
    date_time_format: str = DEFAULT_DATE_TIME_FORMAT
    current_local_date: Optional[date] = None
    now_func: Optional[Callable[[], datetime]] = field(default=None, compare=False, repr=False)

    @property
    def zone(self) -> ZoneInfo:
        """Configured local zone"""
        return resolve_zone(self.local_tz)

    @property
    def clock(self) -> TimeZoneClock:
        """Clock for the configured local zone"""
        return TimeZoneClock(self.zone, now_func=self.now_func)

    def today(self) -> date:
        """Current local date"""
        if self.current_local_date is not None:
            return self.current_local_date
        return self.clock.today()

    def validate(self) -> bool:
        """Validate configuration"""
        resolve_zone(self.local_tz)

        for name in ("date_format", "date_time_format"):
            pattern = getattr(self, name)
            if not isinstance(pattern, str) or '%' not in pattern:
                raise ValidationError(f"Invalid {name}: {pattern!r}")

        if self.current_local_date is not None and (
            isinstance(self.current_local_date, datetime)
            or not isinstance(self.current_local_date, date)
        ):
            raise ValidationError(f"Invalid current_local_date: {self.current_local_date!r}")

        return True

    @classmethod
    def from_env(cls) -> "TimeSettings":
        """Load configuration from environment variables"""
        load_dotenv()

        local_tz = os.getenv('FIRECORE_LOCAL_TZ') or os.getenv('TZ_NAME')
        if not local_tz:
            raise ValueError(
                "Missing required environment variable. "
                "Please set FIRECORE_LOCAL_TZ (e.g. America/Denver)"
            )

        return cls(
            local_tz=local_tz,
            date_format=os.getenv('FIRECORE_DATE_FORMAT', DEFAULT_DATE_FORMAT),
            date_time_format=os.getenv('FIRECORE_DATE_TIME_FORMAT', DEFAULT_DATE_TIME_FORMAT),
        )

    @classmethod
    def from_store(cls, store: "SettingsStore", current_local_date: Optional[date] = None) -> "TimeSettings":
        """Load configuration from the app's settings table

        The zone lives under global/ltz; older databases use global/tz.
        """
        local_tz = store.get_setting("global", key="ltz")
        if local_tz is None:
            local_tz = store.get_setting("global", key="tz")
        if local_tz is None:
            raise ValueError("No local time zone setting found (global/ltz or global/tz)")

        date_format = store.get_setting("global", key="date_format")
        date_time_format = store.get_setting("global", key="date_time_format")

        return cls(
            local_tz=local_tz,
            date_format=date_format or DEFAULT_DATE_FORMAT,
            date_time_format=date_time_format or DEFAULT_DATE_TIME_FORMAT,
            current_local_date=current_local_date,
        )


class SettingsStore:
    """Typed key-value lookup over the app's setting table"""

    def __init__(self, frame: pd.DataFrame, clock: Optional[TimeZoneClock] = None):
        missing = [col for col in SETTING_COLUMNS if col not in frame.columns]
        if missing:
            raise ValidationError(f"Settings frame is missing columns: {', '.join(missing)}")
        self.frame = frame
        self.clock = clock

    @classmethod
    def from_connection(cls, con: sqlite3.Connection, clock: Optional[TimeZoneClock] = None) -> "SettingsStore":
        """Load the setting table from a database connection"""
        frame = pd.read_sql_query("SELECT * FROM setting", con)
        return cls(frame, clock=clock)

    @classmethod
    def from_records(cls, records: List[dict], clock: Optional[TimeZoneClock] = None) -> "SettingsStore":
        """Build a store from a list of setting dicts"""
        return cls(pd.DataFrame(records, columns=SETTING_COLUMNS), clock=clock)

    def get_setting(
        self,
        domain: str,
        key: Optional[str] = None,
        group: Optional[str] = None,
        ref_date: Optional[date] = None
    ) -> Union[Any, List[Any], None]:
        """Look up a setting and coerce it to its declared type

        Returns a scalar for a single match, a list for several, and None
        (after logging an error) when nothing matches.
        """
        filtered = self.frame[self.frame["domain"] == domain]

        if group is not None:
            filtered = filtered[filtered["setting_group"] == group]

        if key is not None:
            filtered = filtered[filtered["setting_key"] == key]

        if filtered.empty:
            logger.error(f"No setting found for domain '{domain}' and key '{key}'")
            return None

        value_type = str(filtered["value_type"].iloc[0]).lower()
        coerce = self._coercer(value_type, ref_date)
        result = [coerce(value) for value in filtered["setting_value"].tolist()]

        return result[0] if len(result) == 1 else result

    def _coercer(self, value_type: str, ref_date: Optional[date]) -> Callable[[Any], Any]:
        if value_type == "numeric":
            return float
        if value_type == "boolean":
            return lambda x: str(x).strip().lower() in TRUE_STRINGS
        if value_type == "date":
            return lambda x: date.fromisoformat(str(x).strip())
        if value_type == "relative_date":
            from .timekeeping.relative import parse_relative_date

            if ref_date is None:
                if self.clock is None:
                    raise ValidationError(
                        "Resolving a relative_date setting needs ref_date or a store clock"
                    )
                ref_date = self.clock.today()
            return lambda x: parse_relative_date(x, ref_date=ref_date)
        return str
