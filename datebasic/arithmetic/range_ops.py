"""Measurements between two instants.

This module provides functions that measure the distance from one
instant to another:
    - time_span: hours / minutes / seconds decomposition (signed)
    - days_between: absolute whole days, rounded half up
    - months_between: calendar month difference, ignoring day of month
    - millis_between: one span in milliseconds, seconds and minutes
    - business_days_between: Monday-Friday count over an inclusive walk
"""

from __future__ import annotations

from datebasic._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
)
from datebasic._internal.localtime import (
    local_datetime,
    local_fields_to_millis,
    local_weekday,
)
from datebasic._internal.validation import validate_instant
from datebasic.core.instant import Instant
from datebasic.core.span import MillisSpan, TimeSpan


def _truncated_remainder(dividend: int, divisor: int) -> int:
    # Remainder carrying the sign of the dividend
    remainder = abs(dividend) % divisor
    return -remainder if dividend < 0 else remainder


def time_span(start: Instant, end: Instant) -> TimeSpan:
    """Decompose end - start into hours, minutes and seconds.

    The difference is not made absolute. Each component is floored,
    and the minutes and seconds are taken from remainders that keep
    the sign of the difference.

    Args:
        start: The start instant.
        end: The end instant.

    Returns:
        A TimeSpan of (hours, minutes, seconds).

    Raises:
        ValidationError: If either instant is out of range.

    Examples:
        >>> time_span(Instant.utc(2024, 1, 15, 8), Instant.utc(2024, 1, 15, 10, 30, 15))
        TimeSpan(hours=2, minutes=30, seconds=15)
    """
    validate_instant(start, "start")
    validate_instant(end, "end")
    diff = end.millis - start.millis
    hours = diff // MS_PER_HOUR
    minutes = _truncated_remainder(diff, MS_PER_HOUR) // MS_PER_MINUTE
    seconds = _truncated_remainder(diff, MS_PER_MINUTE) // MS_PER_SECOND
    return TimeSpan(hours=hours, minutes=minutes, seconds=seconds)


def days_between(start: Instant, end: Instant) -> int:
    """Return the absolute number of days between two instants.

    The millisecond difference is divided by one day and rounded to the
    nearest integer, with exact halves rounding up.

    Examples:
        >>> days_between(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 31))
        30
        >>> days_between(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 1, 12))
        1
    """
    validate_instant(start, "start")
    validate_instant(end, "end")
    diff = abs(end.millis - start.millis)
    return (2 * diff + MS_PER_DAY) // (2 * MS_PER_DAY)


def months_between(start: Instant, end: Instant) -> int:
    """Return the calendar month difference between local fields.

    Only year and month take part; the day of month is ignored, so
    Jan 31 to Feb 1 is one month.

    Examples:
        >>> months_between(Instant.local(2023, 11, 20), Instant.local(2024, 2, 1))
        3
    """
    validate_instant(start, "start")
    validate_instant(end, "end")
    first = local_datetime(start.millis)
    last = local_datetime(end.millis)
    return (last.year - first.year) * MONTHS_PER_YEAR + (last.month - first.month)


def millis_between(start: Instant, end: Instant) -> MillisSpan:
    """Measure end - start in milliseconds, seconds and minutes.

    seconds and minutes are plain quotients of the same span, not
    remainders.

    Examples:
        >>> millis_between(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 1, 0, 1, 30))
        MillisSpan(milliseconds=90000, seconds=90.0, minutes=1.5)
    """
    validate_instant(start, "start")
    validate_instant(end, "end")
    milliseconds = end.millis - start.millis
    seconds = milliseconds / MS_PER_SECOND
    minutes = seconds / SECONDS_PER_MINUTE
    return MillisSpan(milliseconds=milliseconds, seconds=seconds, minutes=minutes)


def business_days_between(start: Instant, end: Instant) -> int:
    """Count local weekdays Monday-Friday from start to end inclusive.

    Walks one local calendar day at a time from start, keeping its time
    of day, while the walk is not after end. When start is after end
    nothing is walked and the count is 0.

    Examples:
        >>> # Monday 2024-01-15 to Sunday 2024-01-21
        >>> business_days_between(Instant.local(2024, 1, 15), Instant.local(2024, 1, 21))
        5
    """
    validate_instant(start, "start")
    validate_instant(end, "end")
    count = 0
    current = start.millis
    while current <= end.millis:
        local = local_datetime(current)
        if local_weekday(local) not in (0, 6):
            count += 1
        current = local_fields_to_millis(
            local.year,
            local.month - 1,
            local.day + 1,
            local.hour,
            local.minute,
            local.second,
            local.microsecond // 1000,
        )
    return count


__all__ = [
    "time_span",
    "days_between",
    "months_between",
    "millis_between",
    "business_days_between",
]
