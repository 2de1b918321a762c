"""Comparison operations for instants.

Comparison Rules:
    - same_day: equal UTC year, month and day (time of day ignored)
    - before / after: strict ordering of raw time values
    - is_weekend: local weekday is Sunday or Saturday
    - is_in_range: inclusive containment, start must not be after end

Every function validates its instants before comparing them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datebasic._internal.localtime import local_datetime, local_weekday, utc_datetime
from datebasic._internal.validation import require_instant, validate_instant
from datebasic.errors import ValidationError

if TYPE_CHECKING:
    from datebasic.core.instant import Instant


def same_day(left: "Instant", right: "Instant") -> bool:
    """Test whether two instants fall on the same UTC calendar day.

    Args:
        left: First instant.
        right: Second instant.

    Returns:
        True if the UTC year, month and day match.

    Raises:
        ValidationError: If either instant is out of range.

    Examples:
        >>> same_day(Instant.utc(2024, 1, 15, 1), Instant.utc(2024, 1, 15, 23))
        True
        >>> same_day(Instant.utc(2024, 1, 15, 23), Instant.utc(2024, 1, 16, 0))
        False
    """
    validate_instant(left, "left")
    validate_instant(right, "right")
    return utc_datetime(left.millis).date() == utc_datetime(right.millis).date()


def before(left: "Instant", right: "Instant") -> bool:
    """Test if left is strictly earlier than right.

    Raises:
        ValidationError: If either instant is out of range.
    """
    validate_instant(left, "left")
    validate_instant(right, "right")
    return left.millis < right.millis


def after(left: "Instant", right: "Instant") -> bool:
    """Test if left is strictly later than right.

    Raises:
        ValidationError: If either instant is out of range.
    """
    validate_instant(left, "left")
    validate_instant(right, "right")
    return left.millis > right.millis


def is_weekend(instant: "Instant") -> bool:
    """Test if the instant's local weekday is Saturday or Sunday."""
    validate_instant(instant)
    return local_weekday(local_datetime(instant.millis)) in (0, 6)


def is_in_range(instant: "Instant", start: "Instant", end: "Instant") -> bool:
    """Test if an instant lies within [start, end], both ends inclusive.

    Only the tested instant goes through the 1970-3000 range check;
    start and end may be any Instant.

    Args:
        instant: The instant to test.
        start: Lower bound of the range.
        end: Upper bound of the range.

    Returns:
        True if start <= instant <= end.

    Raises:
        ValidationError: If instant is out of range, or start is after end.

    Examples:
        >>> day = Instant.utc(2024, 1, 15)
        >>> is_in_range(day, day, day)
        True
    """
    validate_instant(instant)
    require_instant(start, "start")
    require_instant(end, "end")
    if start > end:
        raise ValidationError("The start must be before the end.")
    return start <= instant <= end


__all__ = [
    "same_day",
    "before",
    "after",
    "is_weekend",
    "is_in_range",
]
