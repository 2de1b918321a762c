"""Datebasic: stateless date utilities on immutable instants.

Datebasic provides pure functions for validating, querying, comparing,
formatting and shifting calendar instants in the proleptic Gregorian
calendar. Every function validates its arguments before computing and
returns a new value; nothing is mutated.

Core Types:
    Instant: Immutable point in time with millisecond resolution
    TimeSpan: Hours/minutes/seconds decomposition of a span
    MillisSpan: One span in milliseconds, seconds and minutes

Local fields are read in the host time zone, or in the IANA zone named
by the DATEBASIC_TZ environment variable when it is set.

Exceptions:
    DateBasicError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    OverflowError: Calendar arithmetic left the representable range
    TimezoneError: Invalid timezone

Example:
    >>> from datebasic import Instant, add_months, age, format_iso_date
    >>> birth = Instant.local(2000, 1, 1)
    >>> age(birth, Instant.local(2024, 1, 1), mode="en")
    24
    >>> format_iso_date(add_months(Instant.local(2024, 1, 31), 1))
    '2024-03-02'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datebasic.core.instant import Instant
from datebasic.core.span import MillisSpan, TimeSpan

# Validators
from datebasic._internal.validation import (
    is_valid_instant,
    validate_instant,
    validate_day_offset,
    validate_month,
    validate_month_index,
    validate_month_offset,
    validate_weekday,
    validate_year,
    validate_year_offset,
)

# Accessors
from datebasic.convert.epoch import (
    get_time,
    get_timezone_offset,
    get_utc_day,
    get_utc_month,
    get_utc_year,
)

# Calendar arithmetic
from datebasic.arithmetic import (
    add_days,
    add_months,
    add_years,
    after,
    age,
    before,
    business_days_between,
    day_of_year,
    days_between,
    days_in_month,
    end_of_day,
    end_of_week,
    first_day_of_month,
    is_in_range,
    is_leap_year,
    is_weekend,
    last_day_of_month,
    millis_between,
    months_between,
    quarter_of,
    round_to_nearest_minute,
    same_day,
    start_of_day,
    start_of_week,
    subtract_days,
    subtract_months,
    subtract_years,
    time_of_day,
    time_span,
    weekday_name,
    weeks_in_year,
)

# Formatters
from datebasic.format import (
    BabelFormatter,
    IntlFormatter,
    format_date_string,
    format_in_timezone,
    format_iso_date,
    format_iso_string,
    format_locale,
    format_utc_string,
)

# Exceptions
from datebasic.errors import (
    DateBasicError,
    OverflowError,
    ParseError,
    TimezoneError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "TimeSpan",
    "MillisSpan",
    # Validators
    "is_valid_instant",
    "validate_instant",
    "validate_year",
    "validate_month",
    "validate_month_index",
    "validate_weekday",
    "validate_year_offset",
    "validate_month_offset",
    "validate_day_offset",
    # Accessors
    "get_time",
    "get_utc_year",
    "get_utc_day",
    "get_utc_month",
    "get_timezone_offset",
    # Comparisons
    "same_day",
    "before",
    "after",
    "is_weekend",
    "is_in_range",
    # Calendar queries
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
    # Boundaries
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "round_to_nearest_minute",
    # Measurements
    "time_span",
    "days_between",
    "months_between",
    "millis_between",
    "business_days_between",
    # Shifts
    "add_years",
    "add_months",
    "add_days",
    "subtract_years",
    "subtract_months",
    "subtract_days",
    # Formatters
    "format_locale",
    "format_iso_date",
    "format_utc_string",
    "format_iso_string",
    "format_date_string",
    "format_in_timezone",
    "IntlFormatter",
    "BabelFormatter",
    # Exceptions
    "DateBasicError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "TimezoneError",
]
