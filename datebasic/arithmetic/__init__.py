"""Calendar arithmetic on instants.

This module provides the calendar operations of datebasic. Every
function validates its arguments before computing.

Comparisons (from datebasic.arithmetic.comparisons):
    - same_day, before, after
    - is_weekend
    - is_in_range

Calendar queries (from datebasic.arithmetic.calendar_ops):
    - is_leap_year, days_in_month
    - first_day_of_month, last_day_of_month
    - quarter_of, day_of_year, weeks_in_year
    - time_of_day, weekday_name
    - age

Boundaries (from datebasic.arithmetic.boundaries):
    - start_of_day, end_of_day
    - start_of_week, end_of_week
    - round_to_nearest_minute

Measurements (from datebasic.arithmetic.range_ops):
    - time_span, millis_between
    - days_between, months_between, business_days_between

Shifts (from datebasic.arithmetic.shift):
    - add_years, add_months, add_days
    - subtract_years, subtract_months, subtract_days
"""

from __future__ import annotations

from datebasic.arithmetic.boundaries import (
    end_of_day,
    end_of_week,
    round_to_nearest_minute,
    start_of_day,
    start_of_week,
)
from datebasic.arithmetic.calendar_ops import (
    age,
    day_of_year,
    days_in_month,
    first_day_of_month,
    is_leap_year,
    last_day_of_month,
    quarter_of,
    time_of_day,
    weekday_name,
    weeks_in_year,
)
from datebasic.arithmetic.comparisons import (
    after,
    before,
    is_in_range,
    is_weekend,
    same_day,
)
from datebasic.arithmetic.range_ops import (
    business_days_between,
    days_between,
    millis_between,
    months_between,
    time_span,
)
from datebasic.arithmetic.shift import (
    add_days,
    add_months,
    add_years,
    subtract_days,
    subtract_months,
    subtract_years,
)

__all__ = [
    # Comparisons
    "same_day",
    "before",
    "after",
    "is_weekend",
    "is_in_range",
    # Calendar queries
    "is_leap_year",
    "days_in_month",
    "first_day_of_month",
    "last_day_of_month",
    "quarter_of",
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
    "millis_between",
    "days_between",
    "months_between",
    "business_days_between",
    # Shifts
    "add_years",
    "add_months",
    "add_days",
    "subtract_years",
    "subtract_months",
    "subtract_days",
]
