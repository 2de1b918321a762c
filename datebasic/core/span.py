"""Span result types.

Two shapes of elapsed time between instants:
    - TimeSpan: whole hours, remaining minutes, remaining seconds
    - MillisSpan: one span measured in milliseconds, seconds and minutes
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class TimeSpan:
    """Elapsed time decomposed into hours, minutes and seconds.

    The components are remainders of one another: minutes is always
    within (-60, 60) and seconds within (-60, 60), carrying the sign
    of the span. There is no day component.

    Attributes:
        hours: Whole hours (floored).
        minutes: Whole minutes left after the hours.
        seconds: Whole seconds left after the minutes.

    Examples:
        >>> TimeSpan(hours=1, minutes=30, seconds=15).to_dict()
        {'hours': 1, 'minutes': 30, 'seconds': 15}
    """

    hours: int
    minutes: int
    seconds: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class MillisSpan:
    """Elapsed time measured in three units at full precision.

    Unlike TimeSpan the fields are not remainders: seconds is
    milliseconds / 1000 and minutes is seconds / 60, without flooring.

    Attributes:
        milliseconds: The span in milliseconds.
        seconds: The span in seconds.
        minutes: The span in minutes.
    """

    milliseconds: int | float
    seconds: float
    minutes: float

    def to_dict(self) -> dict[str, int | float]:
        return asdict(self)


__all__ = ["TimeSpan", "MillisSpan"]
