"""Instant accessors.

This module provides functions for reading values out of an Instant:
    - Epoch milliseconds and UTC calendar fields
    - Local timezone offset
    - String renderings (re-exported from datebasic.format)

Examples:
    >>> from datebasic import Instant
    >>> from datebasic.convert import get_time, get_utc_year

    >>> get_time(Instant.utc(2024, 1, 15))
    1705276800000
    >>> get_utc_year(Instant.utc(2024, 1, 15))
    2024
"""

from __future__ import annotations

from datebasic.convert.epoch import (
    get_time,
    get_timezone_offset,
    get_utc_day,
    get_utc_month,
    get_utc_year,
)
from datebasic.format.intl import format_locale
from datebasic.format.strings import (
    format_date_string,
    format_iso_date,
    format_iso_string,
    format_utc_string,
)

__all__ = [
    # Epoch and fields
    "get_time",
    "get_utc_year",
    "get_utc_day",
    "get_utc_month",
    "get_timezone_offset",
    # String forms
    "format_utc_string",
    "format_iso_string",
    "format_locale",
    "format_date_string",
    "format_iso_date",
]
