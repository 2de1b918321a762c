"""Internal utilities for datebasic.

This module contains private implementation details:
    - Constants and magic numbers
    - Proleptic Gregorian calendar helpers
    - Local wall-clock conversions
    - Argument validators (re-exported by the top-level package)

Note: This module is not part of the public API. The validators are
imported from datebasic._internal.validation directly, since they
depend on datebasic.core.
"""

from __future__ import annotations

from datebasic._internal.calendar import (
    is_leap_year,
    normalize_ymd,
)

__all__: list[str] = [
    "is_leap_year",
    "normalize_ymd",
]
