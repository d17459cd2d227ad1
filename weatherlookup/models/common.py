"""Common enums and helpers shared across models."""

from datetime import datetime
from enum import IntEnum, StrEnum


class Condition(StrEnum):
    CLEAR = "clear"
    CLOUDS = "clouds"
    RAIN = "rain"
    DRIZZLE = "drizzle"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    MIST = "mist"  # also fog and haze
    UNKNOWN = "unknown"


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_date(cls, d) -> "Weekday":
        # date.weekday() counts from Monday=0
        return cls((d.weekday() + 1) % 7)


class ForecastSource(StrEnum):
    UPSTREAM = "upstream"
    FALLBACK = "fallback"


class ErrorKind(StrEnum):
    EMPTY_QUERY = "empty_query"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    NETWORK_UNREACHABLE = "network_unreachable"
    UNEXPECTED = "unexpected"


def local_now(tz=None) -> datetime:
    """Current wall-clock time in ``tz``, or the system zone when None."""
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)
