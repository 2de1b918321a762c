"""Instant formatting.

This module provides functions for rendering instants as strings:
    - Locale-independent ISO 8601, HTTP-date and date-string forms
    - Locale-aware formatting through Babel
    - IANA timezone-aware formatting through pytz

Functions:
    format_iso_date: Local date as YYYY-MM-DD.
    format_iso_string: UTC ISO 8601 with milliseconds.
    format_utc_string: UTC HTTP-date.
    format_date_string: Local 'Www Mmm DD YYYY'.
    format_locale: Locale-aware rendering with Intl-style options.
    format_in_timezone: 'MM/DD/YYYY, HH:MM:SS AM/PM' in an IANA zone.

Examples:
    >>> from datebasic import Instant
    >>> from datebasic.format import format_iso_string

    >>> format_iso_string(Instant(0))
    '1970-01-01T00:00:00.000Z'
"""

from __future__ import annotations

from datebasic.format.intl import (
    BabelFormatter,
    IntlFormatter,
    format_in_timezone,
    format_locale,
)
from datebasic.format.strings import (
    format_date_string,
    format_iso_date,
    format_iso_string,
    format_utc_string,
)

__all__: list[str] = [
    # Locale-independent
    "format_iso_date",
    "format_iso_string",
    "format_utc_string",
    "format_date_string",
    # Internationalized
    "format_locale",
    "format_in_timezone",
    "IntlFormatter",
    "BabelFormatter",
]
