"""Core value types.

This module provides the value types passed to and returned from
datebasic operations:
    - Instant: Immutable point in time with millisecond resolution
    - TimeSpan: Hours/minutes/seconds decomposition of a span
    - MillisSpan: A span measured in milliseconds, seconds and minutes
"""

from __future__ import annotations

from datebasic.core.instant import Instant
from datebasic.core.span import MillisSpan, TimeSpan

__all__: list[str] = [
    "Instant",
    "MillisSpan",
    "TimeSpan",
]
