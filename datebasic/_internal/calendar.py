"""Calendar helpers for rolling over out-of-range local fields.

Ordinal 1 = 0001-01-01, the same numbering as datetime.date.toordinal().
Ordinals are computed arithmetically so that intermediate years outside
1-9999 are allowed; only the final date has to be representable.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

from datebasic._internal.constants import MONTHS_PER_YEAR
from datebasic.errors import OverflowError

_MAX_ORDINAL: int = _datetime.date.max.toordinal()

# Days before the first of each month in a common year, January first
_CUMULATIVE_DAYS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Return the ordinal of a year, month (1-12) and any integer day.

    A day outside the month lands in a neighbouring month.
    """
    prior = year - 1
    # Floor division keeps the count right for years before 1
    ordinal = prior * 365 + prior // 4 - prior // 100 + prior // 400
    ordinal += _CUMULATIVE_DAYS[month - 1]
    if month > 2 and is_leap_year(year):
        ordinal += 1
    return ordinal + day


def normalize_ymd(year: int, month_index: int, day: int) -> tuple[int, int, int]:
    """Roll out-of-range month and day values into a real calendar date.

    Month index 12 is January of the next year, day 0 is the last day
    of the previous month, day 32 of January is February 1st.

    Args:
        year: The year.
        month_index: Zero-based month, any integer.
        day: Day of month, any integer.

    Returns:
        Tuple of (year, month, day) with month 1-12.

    Raises:
        OverflowError: If the result is outside years 1-9999.

    Examples:
        >>> normalize_ymd(2024, 1, 31)
        (2024, 3, 2)
        >>> normalize_ymd(2024, 12, 0)
        (2024, 12, 31)
    """
    carry, month_index = divmod(month_index, MONTHS_PER_YEAR)
    ordinal = ymd_to_ordinal(year + carry, month_index + 1, day)
    if not 1 <= ordinal <= _MAX_ORDINAL:
        raise OverflowError(f"date is out of range (ordinal {ordinal})")
    result = _datetime.date.fromordinal(ordinal)
    return (result.year, result.month, result.day)


__all__ = [
    "is_leap_year",
    "ymd_to_ordinal",
    "normalize_ymd",
]
