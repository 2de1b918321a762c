"""Epoch and calendar-field accessors.

This module provides functions that read a single value out of a
validated Instant:
    get_time: Milliseconds since 1970-01-01T00:00:00Z.
    get_utc_year: Year in UTC.
    get_utc_day: Day of the month in UTC.
    get_utc_month: Zero-based month in UTC.
    get_timezone_offset: Local zone offset, as (UTC - local) minutes.

All accessors read UTC fields except get_timezone_offset, which
compares UTC with local wall-clock time.

Examples:
    >>> from datebasic import Instant
    >>> from datebasic.convert import get_utc_month

    >>> get_utc_month(Instant.utc(2024, 3, 5))
    2
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datebasic._internal.localtime import timezone_offset_minutes, utc_datetime
from datebasic._internal.validation import validate_instant

if TYPE_CHECKING:
    from datebasic.core.instant import Instant


def get_time(instant: "Instant") -> int:
    """Return the number of milliseconds since 1970-01-01T00:00:00Z.

    Raises:
        ValidationError: If the instant is invalid, negative, or at or
            beyond the year 3000.

    Examples:
        >>> get_time(Instant.utc(1970, 1, 2))
        86400000
    """
    validate_instant(instant)
    return instant.millis


def get_utc_year(instant: "Instant") -> int:
    """Return the year of the instant in UTC."""
    validate_instant(instant)
    return utc_datetime(instant.millis).year


def get_utc_day(instant: "Instant") -> int:
    """Return the day of the month (1-31) of the instant in UTC."""
    validate_instant(instant)
    return utc_datetime(instant.millis).day


def get_utc_month(instant: "Instant") -> int:
    """Return the month of the instant in UTC, where 0 is January and 11 is December."""
    validate_instant(instant)
    return utc_datetime(instant.millis).month - 1


def get_timezone_offset(instant: "Instant") -> int:
    """Return the local zone's offset from UTC in minutes at the instant.

    The sign follows (UTC - local): zones east of Greenwich are
    negative.

    Examples:
        >>> # with DATEBASIC_TZ=Asia/Seoul
        >>> get_timezone_offset(Instant.utc(2024, 1, 15))
        -540
    """
    validate_instant(instant)
    return timezone_offset_minutes(instant.millis)


__all__ = [
    "get_time",
    "get_utc_year",
    "get_utc_day",
    "get_utc_month",
    "get_timezone_offset",
]
