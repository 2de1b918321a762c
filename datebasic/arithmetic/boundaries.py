"""Day and week boundaries, and minute rounding.

Each function reads the instant's local wall-clock fields, adjusts
them, and builds a new Instant from the result. Field overflow rolls
into the neighbouring unit (day -1 is the last day of the previous
month, minute 60 is the next hour).
"""

from __future__ import annotations

from datebasic._internal.constants import DAYS_PER_WEEK
from datebasic._internal.localtime import (
    local_datetime,
    local_fields_to_millis,
    local_weekday,
)
from datebasic._internal.validation import validate_instant, validate_weekday
from datebasic.core.instant import Instant


def _local_midnight(year: int, month: int, day: int) -> Instant:
    return Instant(local_fields_to_millis(year, month - 1, day))


def _local_last_millisecond(year: int, month: int, day: int) -> Instant:
    return Instant(local_fields_to_millis(year, month - 1, day, 23, 59, 59, 999))


def start_of_day(instant: Instant) -> Instant:
    """Return local 00:00:00.000 on the instant's local day.

    Examples:
        >>> start_of_day(Instant.local(2024, 1, 15, 13, 45)) == Instant.local(2024, 1, 15)
        True
    """
    validate_instant(instant)
    local = local_datetime(instant.millis)
    return _local_midnight(local.year, local.month, local.day)


def end_of_day(instant: Instant) -> Instant:
    """Return local 23:59:59.999 on the instant's local day."""
    validate_instant(instant)
    local = local_datetime(instant.millis)
    return _local_last_millisecond(local.year, local.month, local.day)


def start_of_week(instant: Instant, first_day_of_week: int = 1) -> Instant:
    """Return the start of the week containing the instant.

    Steps back to the most recent first_day_of_week (the instant's own
    day if it matches) and returns local midnight on that day.

    Args:
        instant: The instant.
        first_day_of_week: Weekday the week starts on, 0 (Sunday) to
            6 (Saturday). Defaults to Monday.

    Raises:
        ValidationError: If the instant or first_day_of_week is out of range.

    Examples:
        >>> # Wednesday 2024-01-17
        >>> start_of_week(Instant.local(2024, 1, 17, 10)) == Instant.local(2024, 1, 15)
        True
    """
    validate_instant(instant)
    validate_weekday(first_day_of_week)
    local = local_datetime(instant.millis)
    day = local_weekday(local)
    diff = (DAYS_PER_WEEK if day < first_day_of_week else 0) + day - first_day_of_week
    return _local_midnight(local.year, local.month, local.day - diff)


def end_of_week(instant: Instant, last_day_of_week: int = 0) -> Instant:
    """Return the end of the week containing the instant.

    Steps forward to the next last_day_of_week (the instant's own day
    if it matches) and returns local 23:59:59.999 on that day.

    Args:
        instant: The instant.
        last_day_of_week: Weekday the week ends on, 0 (Sunday) to
            6 (Saturday). Defaults to Sunday.

    Raises:
        ValidationError: If the instant or last_day_of_week is out of range.
    """
    validate_instant(instant)
    validate_weekday(last_day_of_week)
    local = local_datetime(instant.millis)
    day = local_weekday(local)
    diff = (DAYS_PER_WEEK if last_day_of_week < day else 0) - (day - last_day_of_week)
    return _local_last_millisecond(local.year, local.month, local.day + diff)


def round_to_nearest_minute(instant: Instant) -> Instant:
    """Round the instant to the nearest local minute.

    Seconds of 30 or more round up to the next minute; seconds and
    milliseconds are zeroed either way.

    Examples:
        >>> round_to_nearest_minute(Instant.local(2024, 1, 15, 10, 59, 30)) == Instant.local(2024, 1, 15, 11, 0)
        True
    """
    validate_instant(instant)
    local = local_datetime(instant.millis)
    minute = local.minute + 1 if local.second >= 30 else local.minute
    return Instant(
        local_fields_to_millis(local.year, local.month - 1, local.day, local.hour, minute)
    )


__all__ = [
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "round_to_nearest_minute",
]
