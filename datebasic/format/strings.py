"""Locale-independent string renderings.

Functions:
    format_iso_date: Local date as YYYY-MM-DD.
    format_iso_string: UTC ISO 8601 with milliseconds, e.g. 2024-01-15T09:30:00.000Z.
    format_utc_string: RFC 7231 HTTP-date, e.g. Mon, 15 Jan 2024 09:30:00 GMT.
    format_date_string: Local date as e.g. Mon Jan 15 2024.

English day and month abbreviations are used regardless of the
process locale.

Examples:
    >>> from datebasic import Instant
    >>> from datebasic.format import format_iso_string, format_utc_string

    >>> format_iso_string(Instant.utc(2024, 1, 15, 9, 30))
    '2024-01-15T09:30:00.000Z'
    >>> format_utc_string(Instant.utc(2024, 1, 15, 9, 30))
    'Mon, 15 Jan 2024 09:30:00 GMT'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datebasic._internal.constants import MONTH_ABBREVIATIONS, WEEKDAY_NAMES
from datebasic._internal.localtime import local_datetime, local_weekday, utc_datetime
from datebasic._internal.validation import validate_instant

if TYPE_CHECKING:
    from datebasic.core.instant import Instant


def _abbreviated_weekday(dt) -> str:
    return WEEKDAY_NAMES[local_weekday(dt)][:3]


def format_iso_date(instant: "Instant") -> str:
    """Format the instant's local date as YYYY-MM-DD.

    The date is read in local time, so it can differ from the date part
    of format_iso_string.

    Examples:
        >>> format_iso_date(Instant.local(2024, 3, 5, 23, 59))
        '2024-03-05'
    """
    validate_instant(instant)
    local = local_datetime(instant.millis)
    return f"{local.year:04d}-{local.month:02d}-{local.day:02d}"


def format_iso_string(instant: "Instant") -> str:
    """Format the instant as UTC ISO 8601 (YYYY-MM-DDTHH:MM:SS.sssZ)."""
    validate_instant(instant)
    utc = utc_datetime(instant.millis)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}T"
        f"{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}."
        f"{utc.microsecond // 1000:03d}Z"
    )


def format_utc_string(instant: "Instant") -> str:
    """Format the instant in UTC as an RFC 7231 HTTP-date."""
    validate_instant(instant)
    utc = utc_datetime(instant.millis)
    return (
        f"{_abbreviated_weekday(utc)}, {utc.day:02d} "
        f"{MONTH_ABBREVIATIONS[utc.month - 1]} {utc.year:04d} "
        f"{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d} GMT"
    )


def format_date_string(instant: "Instant") -> str:
    """Format the instant's local date as 'Www Mmm DD YYYY'.

    Examples:
        >>> format_date_string(Instant.local(2024, 5, 21))
        'Tue May 21 2024'
    """
    validate_instant(instant)
    local = local_datetime(instant.millis)
    return (
        f"{_abbreviated_weekday(local)} {MONTH_ABBREVIATIONS[local.month - 1]} "
        f"{local.day:02d} {local.year:04d}"
    )


__all__ = [
    "format_iso_date",
    "format_iso_string",
    "format_utc_string",
    "format_date_string",
]
