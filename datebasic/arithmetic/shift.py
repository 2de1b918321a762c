"""Shifting instants by calendar amounts.

This module provides add/subtract functions for years, months and days.
The offset is added to the matching local field and the result rolls
over naturally instead of clamping:

    2024-01-31 + 1 month -> 2024-03-02  (February 31st rolls into March)
    2024-02-29 + 1 year  -> 2025-03-01
    2024-03-31 - 1 month -> 2024-03-02

The time of day is kept. Subtraction validates, then adds the negated
offset.
"""

from __future__ import annotations

from datebasic._internal.localtime import local_datetime, local_fields_to_millis
from datebasic._internal.validation import (
    validate_day_offset,
    validate_instant,
    validate_month_offset,
    validate_year_offset,
)
from datebasic.core.instant import Instant


def _shift_local_fields(
    instant: Instant,
    years: int = 0,
    months: int = 0,
    days: int = 0,
) -> Instant:
    local = local_datetime(instant.millis)
    return Instant(
        local_fields_to_millis(
            local.year + years,
            local.month - 1 + months,
            local.day + days,
            local.hour,
            local.minute,
            local.second,
            local.microsecond // 1000,
        )
    )


def add_years(instant: Instant, years: int) -> Instant:
    """Add a signed number of years to the instant's local year.

    Args:
        instant: The instant to shift.
        years: Years to add; negative values move backwards.

    Returns:
        A new Instant.

    Raises:
        ValidationError: If the instant is out of range or years is not
            an integer within +/- MAX_YEAR_OFFSET.

    Examples:
        >>> add_years(Instant.local(2024, 2, 29), 1) == Instant.local(2025, 3, 1)
        True
    """
    validate_instant(instant)
    validate_year_offset(years)
    return _shift_local_fields(instant, years=years)


def add_months(instant: Instant, months: int) -> Instant:
    """Add a signed number of months to the instant's local month.

    Examples:
        >>> add_months(Instant.local(2024, 1, 31), 1) == Instant.local(2024, 3, 2)
        True
    """
    validate_instant(instant)
    validate_month_offset(months)
    return _shift_local_fields(instant, months=months)


def add_days(instant: Instant, days: int) -> Instant:
    """Add a signed number of days to the instant's local day.

    Examples:
        >>> add_days(Instant.local(2024, 12, 31), 1) == Instant.local(2025, 1, 1)
        True
    """
    validate_instant(instant)
    validate_day_offset(days)
    return _shift_local_fields(instant, days=days)


def subtract_years(instant: Instant, years: int) -> Instant:
    """Subtract a number of years; equivalent to add_years(instant, -years)."""
    validate_instant(instant)
    validate_year_offset(years)
    return add_years(instant, -years)


def subtract_months(instant: Instant, months: int) -> Instant:
    """Subtract a number of months; equivalent to add_months(instant, -months)."""
    validate_instant(instant)
    validate_month_offset(months)
    return add_months(instant, -months)


def subtract_days(instant: Instant, days: int) -> Instant:
    """Subtract a number of days; equivalent to add_days(instant, -days)."""
    validate_instant(instant)
    validate_day_offset(days)
    return add_days(instant, -days)


__all__ = [
    "add_years",
    "add_months",
    "add_days",
    "subtract_years",
    "subtract_months",
    "subtract_days",
]
