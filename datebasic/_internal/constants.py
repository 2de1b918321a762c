"""Internal constants for datebasic.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000

SECONDS_PER_MINUTE: int = 60
DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Accepted instant range: [1970-01-01T00:00:00Z, 3000-01-01T00:00:00Z)
MIN_INSTANT_MILLIS: int = 0
MAX_INSTANT_MILLIS: int = 32_503_680_000_000

# Largest shift that can stay inside the accepted range
MAX_YEAR_OFFSET: int = 2999
MAX_MONTH_OFFSET: int = MAX_YEAR_OFFSET * MONTHS_PER_YEAR

# Sunday-first, matching local weekday indices 0-6
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Formatting defaults
DEFAULT_LOCALE: str = "ko-KR"
TIMEZONE_FORMAT_LOCALE: str = "en_US"
TIMEZONE_FORMAT_PATTERN: str = "MM/dd/yyyy, hh:mm:ss a"

# Environment variable overriding the host local zone
LOCAL_TZ_ENV_VAR: str = "DATEBASIC_TZ"


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MIN_INSTANT_MILLIS",
    "MAX_INSTANT_MILLIS",
    "MAX_YEAR_OFFSET",
    "MAX_MONTH_OFFSET",
    "WEEKDAY_NAMES",
    "MONTH_ABBREVIATIONS",
    "DEFAULT_LOCALE",
    "TIMEZONE_FORMAT_LOCALE",
    "TIMEZONE_FORMAT_PATTERN",
    "LOCAL_TZ_ENV_VAR",
]
