"""Datebasic exception hierarchy.

All datebasic-specific exceptions inherit from DateBasicError.
"""

from __future__ import annotations


class DateBasicError(Exception):
    """Base exception for all datebasic errors."""

    pass


class ValidationError(DateBasicError):
    """Invalid input values.

    Raised before any computation when an argument is out of range,
    and when a range post-condition fails.

    Examples:
        - Instant before 1970-01-01 or at/after 3000-01-01
        - Month value outside 1-12
        - Weekday value outside 0-6
        - Range start after range end
    """

    pass


class ParseError(DateBasicError):
    """Failed to parse string representation.

    Examples:
        - Malformed ISO 8601 string passed to Instant.from_iso_format
    """

    pass


class OverflowError(DateBasicError):
    """Calendar computation left the representable range.

    Raised when local field arithmetic produces a date the host
    datetime engine cannot hold.

    Examples:
        - Adding 9000 years to an instant
    """

    pass


class TimezoneError(DateBasicError):
    """Invalid or unknown timezone.

    Examples:
        - Unknown IANA identifier passed to format_in_timezone
        - Unknown zone configured through DATEBASIC_TZ
    """

    pass


__all__ = [
    "DateBasicError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "TimezoneError",
]
