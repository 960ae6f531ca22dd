"""
Enumerations shared by the firecore helpers
"""

from enum import Enum
from typing import Type, TypeVar, Union

from .errors import ValidationError

E = TypeVar("E", bound="ChoiceEnum")


class ChoiceEnum(Enum):
    """Enum that also accepts its string value, case-insensitively"""

    @classmethod
    def coerce(cls: Type[E], value: Union[str, E], argument: str = "value") -> E:
        """Resolve an enum member from a member or its string value"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        choices = ", ".join(f"'{member.value}'" for member in cls)
        raise ValidationError(f"'{argument}' must be one of: {choices}; got {value!r}")


class ZoneChoice(ChoiceEnum):
    """Which zone a wall-clock reading belongs to"""
    LOCAL = "local"
    UTC = "UTC"


class ValueKind(ChoiceEnum):
    """Kind of temporal value passed to or returned from a conversion"""
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"


class PeriodBound(ChoiceEnum):
    """Which end of a month/quarter/year to snap to"""
    START = "start"
    END = "end"


class LeadTimeUnit(ChoiceEnum):
    """Calendar unit for lead times"""
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class WallTimeKind(Enum):
    """How many instants a wall-clock reading maps to in a zone"""
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"
    NONEXISTENT = "nonexistent"
