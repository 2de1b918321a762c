"""Validation utilities for datebasic.

Every public operation runs the relevant validator before computing
anything, so an invalid argument never reaches the calendar math.

The validators are re-exported from the top-level package.
"""

from __future__ import annotations

from datebasic._internal.constants import (
    MAX_INSTANT_MILLIS,
    MAX_MONTH_OFFSET,
    MAX_YEAR_OFFSET,
    MIN_INSTANT_MILLIS,
)
from datebasic.core.instant import Instant
from datebasic.errors import ValidationError


def require_instant(value: object, name: str = "instant") -> Instant:
    """Return value unchanged if it is an Instant.

    Raises:
        TypeError: If value is not an Instant.
    """
    if not isinstance(value, Instant):
        raise TypeError(f"{name} must be an Instant, not {type(value).__name__}")
    return value


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    return value


def is_valid_instant(instant: Instant) -> bool:
    """Return True unless the instant's time value is not-a-number.

    Examples:
        >>> is_valid_instant(Instant(0))
        True
        >>> is_valid_instant(Instant.invalid())
        False
    """
    require_instant(instant)
    return instant.is_valid


def validate_instant(instant: Instant, name: str = "instant") -> None:
    """Validate that an instant lies in [1970-01-01, 3000-01-01) UTC.

    Args:
        instant: The instant to validate.
        name: Argument name used in the error message.

    Raises:
        TypeError: If instant is not an Instant.
        ValidationError: If the time value is NaN, negative, or at or
            beyond the start of year 3000.
    """
    require_instant(instant, name)
    if not is_valid_instant(instant):
        raise ValidationError(f"{name} is not a valid date (time value is NaN).")
    if instant.millis < MIN_INSTANT_MILLIS:
        raise ValidationError(
            f"{name} cannot be before January 1, 1970 (negative timestamps)."
        )
    if instant.millis >= MAX_INSTANT_MILLIS:
        raise ValidationError(f"{name} cannot be beyond the year 3000.")


def validate_year(year: int) -> None:
    """Validate that a year is a positive number.

    Raises:
        ValidationError: If year is less than 1.
    """
    if year < 1:
        raise ValidationError(
            f"Year must be a positive number greater than 0, got {year}."
        )


def validate_month(month: int) -> None:
    """Validate that a calendar month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"Invalid month. Month must be between 1-12, got {month}.")


def validate_month_index(month_index: int) -> None:
    """Validate that a zero-based month is within 0-11.

    Raises:
        ValidationError: If month_index is outside 0-11.
    """
    if month_index < 0 or month_index > 11:
        raise ValidationError(
            f"Invalid month index. Month must be between 0 (January) and "
            f"11 (December), got {month_index}."
        )


def validate_weekday(weekday: int) -> None:
    """Validate that a weekday index is within 0 (Sunday) to 6 (Saturday).

    Raises:
        ValidationError: If weekday is outside 0-6.
    """
    if weekday < 0 or weekday > 6:
        raise ValidationError(
            "Invalid day of week value. It should be between Sunday(0) and "
            f"Saturday(6), got {weekday}."
        )


def validate_year_offset(years: int) -> None:
    """Validate a signed year shift.

    Raises:
        ValidationError: If years is not an integer or its magnitude
            exceeds MAX_YEAR_OFFSET.
    """
    _require_int(years, "years")
    if abs(years) > MAX_YEAR_OFFSET:
        raise ValidationError(
            f"years must be between -{MAX_YEAR_OFFSET} and {MAX_YEAR_OFFSET}, got {years}."
        )


def validate_month_offset(months: int) -> None:
    """Validate a signed month shift.

    Raises:
        ValidationError: If months is not an integer or its magnitude
            exceeds MAX_MONTH_OFFSET.
    """
    _require_int(months, "months")
    if abs(months) > MAX_MONTH_OFFSET:
        raise ValidationError(
            f"months must be between -{MAX_MONTH_OFFSET} and {MAX_MONTH_OFFSET}, got {months}."
        )


def validate_day_offset(days: int) -> None:
    """Validate a signed day shift.

    Raises:
        ValidationError: If days is not an integer.
    """
    _require_int(days, "days")


__all__ = [
    "require_instant",
    "is_valid_instant",
    "validate_instant",
    "validate_year",
    "validate_month",
    "validate_month_index",
    "validate_weekday",
    "validate_year_offset",
    "validate_month_offset",
    "validate_day_offset",
]
