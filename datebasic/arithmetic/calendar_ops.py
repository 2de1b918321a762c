"""Calendar queries on years, months and instants.

This module answers calendar questions about an Instant's local fields
or about a (year, month) pair:
    - is_leap_year, days_in_month, first/last_day_of_month
    - quarter_of, day_of_year, weeks_in_year
    - time_of_day, weekday_name
    - age (Western or Korean convention)

Month arguments here are zero-based (0 = January, 11 = December).

day_of_year and weeks_in_year reproduce the legacy computation,
which subtracts weekday indices in millisecond arithmetic. Their
results are not ordinal days or ISO week counts.
"""

from __future__ import annotations

import math

from datebasic._internal.calendar import is_leap_year as _is_leap_year
from datebasic._internal.constants import DAYS_PER_WEEK, MS_PER_DAY, WEEKDAY_NAMES
from datebasic._internal.localtime import (
    local_datetime,
    local_fields_to_millis,
    local_weekday,
)
from datebasic._internal.validation import (
    validate_instant,
    validate_month_index,
    validate_year,
)
from datebasic.core.instant import Instant


KOREAN_AGE_MODES: frozenset[str] = frozenset({"kr", "ko"})


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Raises:
        ValidationError: If year is less than 1.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    validate_year(year)
    return _is_leap_year(year)


def quarter_of(instant: Instant) -> int:
    """Return the quarter (1-4) of the instant's local month."""
    validate_instant(instant)
    month_index = local_datetime(instant.millis).month - 1
    return month_index // 3 + 1


def first_day_of_month(year: int, month_index: int) -> Instant:
    """Return local midnight on the first day of a month.

    Args:
        year: The year.
        month_index: Zero-based month (0-11).

    Raises:
        ValidationError: If year < 1 or month_index is outside 0-11.

    Examples:
        >>> first_day_of_month(2024, 1) == Instant.local(2024, 2, 1)
        True
    """
    validate_year(year)
    validate_month_index(month_index)
    return Instant(local_fields_to_millis(year, month_index, 1))


def last_day_of_month(year: int, month_index: int) -> Instant:
    """Return local midnight on the last day of a month.

    Built as day 0 of the following month, so leap Februaries and
    30/31-day months come out right.

    Args:
        year: The year.
        month_index: Zero-based month (0-11).

    Raises:
        ValidationError: If year < 1 or month_index is outside 0-11.

    Examples:
        >>> last_day_of_month(2024, 1) == Instant.local(2024, 2, 29)
        True
    """
    validate_year(year)
    validate_month_index(month_index)
    return Instant(local_fields_to_millis(year, month_index + 1, 0))


def days_in_month(year: int, month_index: int) -> int:
    """Return the number of days in a month.

    Args:
        year: The year.
        month_index: Zero-based month (0-11).

    Examples:
        >>> days_in_month(2024, 1)
        29
        >>> days_in_month(2023, 1)
        28
    """
    last = last_day_of_month(year, month_index)
    return local_datetime(last.millis).day


def day_of_year(instant: Instant) -> int:
    """Return the legacy day-of-year value for the instant.

    Computed as floor((weekday(instant) - weekday(Dec 31 of the prior
    year)) / MS_PER_DAY) on local weekdays. The weekday difference is
    at most 6, so the result is 0 or -1.
    """
    validate_instant(instant)
    local = local_datetime(instant.millis)
    start_millis = local_fields_to_millis(local.year, 0, 0)
    diff = local_weekday(local) - local_weekday(local_datetime(start_millis))
    return math.floor(diff / MS_PER_DAY)


def weeks_in_year(year: int) -> int:
    """Return the legacy weeks-in-year value for a year.

    Computed as ceil((total + weekday(Jan 1)) / 7), where total is
    ceil((millis(Dec 31) - weekday(Jan 1)) / MS_PER_DAY) on local
    midnights. total is the day count since the epoch rather than the
    length of the year.

    Raises:
        ValidationError: If year is less than 1.

    Examples:
        >>> weeks_in_year(2024)  # DATEBASIC_TZ=UTC
        2870
    """
    validate_year(year)
    start_millis = local_fields_to_millis(year, 0, 1)
    end_millis = local_fields_to_millis(year, 11, 31)
    first_weekday = local_weekday(local_datetime(start_millis))
    total_days = math.ceil((end_millis - first_weekday) / MS_PER_DAY)
    return math.ceil((total_days + first_weekday) / DAYS_PER_WEEK)


def time_of_day(instant: Instant) -> str:
    """Classify the instant's local hour.

    Returns:
        'morning' for [5, 12), 'afternoon' for [12, 17),
        'evening' for [17, 21), otherwise 'night'.
    """
    validate_instant(instant)
    hour = local_datetime(instant.millis).hour
    if 5 <= hour < 12:
        return "morning"
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 21:
        return "evening"
    return "night"


def weekday_name(instant: Instant) -> str:
    """Return the English name of the instant's local weekday."""
    validate_instant(instant)
    return WEEKDAY_NAMES[local_weekday(local_datetime(instant.millis))]


def age(birth: Instant, target: Instant | None = None, mode: str = "kr") -> int:
    """Calculate an age from local calendar fields.

    The Western age is the year difference, less one if the target's
    (month, day) comes before the birth's. Korean age counts the birth
    year as 1, so it adds one to the Western age.

    Args:
        birth: The birth instant.
        target: The instant to measure at; None samples the clock at
            call time.
        mode: 'kr' or 'ko' for Korean age, anything else for Western age.

    Returns:
        The age in years.

    Raises:
        ValidationError: If either instant is out of range.

    Examples:
        >>> birth = Instant.local(2000, 1, 1)
        >>> age(birth, Instant.local(2024, 1, 1), mode="en")
        24
        >>> age(birth, Instant.local(2024, 1, 1), mode="kr")
        25
    """
    if target is None:
        target = Instant.now()
    validate_instant(birth, "birth")
    validate_instant(target, "target")

    born = local_datetime(birth.millis)
    at = local_datetime(target.millis)
    years = at.year - born.year
    if (at.month, at.day) < (born.month, born.day):
        years -= 1

    if mode in KOREAN_AGE_MODES:
        return years + 1
    return years


__all__ = [
    "KOREAN_AGE_MODES",
    "is_leap_year",
    "quarter_of",
    "first_day_of_month",
    "last_day_of_month",
    "days_in_month",
    "day_of_year",
    "weeks_in_year",
    "time_of_day",
    "weekday_name",
    "age",
]
