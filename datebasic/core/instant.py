"""Instant value type.

This module provides the Instant class, an immutable point in time with
millisecond resolution, stored as milliseconds since the Unix epoch.
"""

from __future__ import annotations

import datetime as _datetime
import math
import time as _time

from datebasic._internal.localtime import (
    ONE_MILLISECOND,
    UTC_EPOCH,
    local_fields_to_millis,
    naive_to_millis,
    utc_datetime,
)
from datebasic.errors import ParseError, ValidationError


class Instant:
    """An immutable point in time with millisecond resolution.

    The internal representation is a single number of milliseconds since
    1970-01-01T00:00:00Z in the proleptic Gregorian calendar. A float NaN
    is allowed and marks an invalid instant; every validated operation
    rejects it.

    Instants compare, sort and hash by their time value. Invalid instants
    behave like IEEE NaN: they are not equal to anything, themselves
    included, and every ordering comparison with them is False.

    Attributes:
        millis: Milliseconds since the epoch (int, or NaN float).
        is_valid: False when millis is NaN.

    Examples:
        >>> Instant(0)
        Instant(0)

        >>> Instant.utc(2024, 1, 15, 9, 30).millis
        1705311000000

        >>> Instant.invalid().is_valid
        False
    """

    __slots__ = ("_millis",)

    def __init__(self, millis: int | float) -> None:
        """Create an Instant from milliseconds since the epoch.

        Args:
            millis: Milliseconds since 1970-01-01T00:00:00Z. Floats are
                truncated toward zero and stored as int; NaN produces an
                invalid instant.

        Raises:
            TypeError: If millis is not an int or float.
            ValidationError: If millis is an infinite float.
        """
        if isinstance(millis, bool) or not isinstance(millis, (int, float)):
            raise TypeError(f"millis must be int or float, not {type(millis).__name__}")
        if isinstance(millis, float):
            if math.isinf(millis):
                raise ValidationError(f"millis must be finite, got {millis}")
            if not math.isnan(millis):
                # Truncate toward zero
                millis = int(millis)
        self._millis: int | float = millis

    @classmethod
    def invalid(cls) -> Instant:
        """Return an instant whose time value is NaN."""
        return cls(math.nan)

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant sampled from the system clock."""
        return cls(_time.time_ns() // 1_000_000)

    @classmethod
    def utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> Instant:
        """Create an Instant from UTC calendar fields.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).

        Raises:
            ValidationError: If any field is out of range.

        Examples:
            >>> Instant.utc(1970, 1, 1)
            Instant(0)
        """
        try:
            dt = _datetime.datetime(
                year, month, day, hour, minute, second, millisecond * 1000,
                tzinfo=_datetime.timezone.utc,
            )
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        return cls((dt - UTC_EPOCH) // ONE_MILLISECOND)

    @classmethod
    def local(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> Instant:
        """Create an Instant from local wall-clock fields.

        Out-of-range fields roll over into the neighbouring unit, so
        Instant.local(2024, 2, 30) is March 1st, 2024.

        Args:
            year: The year.
            month: The month (1-12; other values roll over).
            day: The day of the month.
            hour: The hour.
            minute: The minute.
            second: The second.
            millisecond: The millisecond.

        Raises:
            OverflowError: If the rolled-over date leaves years 1-9999.
        """
        return cls(
            local_fields_to_millis(year, month - 1, day, hour, minute, second, millisecond)
        )

    @classmethod
    def from_datetime(cls, dt: _datetime.datetime) -> Instant:
        """Create an Instant from a datetime.

        Aware datetimes are converted directly. Naive datetimes are read
        as local wall-clock time.
        """
        if dt.tzinfo is None or dt.utcoffset() is None:
            return cls(naive_to_millis(dt))
        return cls((dt - UTC_EPOCH) // ONE_MILLISECOND)

    @classmethod
    def from_iso_format(cls, s: str) -> Instant:
        """Parse an ISO 8601 string into an Instant.

        A trailing 'Z' is accepted. Strings without an offset are read as UTC.

        Raises:
            ParseError: If the string is not valid ISO 8601.

        Examples:
            >>> Instant.from_iso_format("2024-01-15T09:30:00Z").millis
            1705311000000
        """
        text = s.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = _datetime.datetime.fromisoformat(text)
        except ValueError as exc:
            raise ParseError(f"Invalid ISO 8601 string: {s!r}") from exc
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=_datetime.timezone.utc)
        return cls.from_datetime(dt)

    @property
    def millis(self) -> int | float:
        """Milliseconds since the epoch."""
        return self._millis

    @property
    def is_valid(self) -> bool:
        """False when the time value is NaN."""
        return not (isinstance(self._millis, float) and math.isnan(self._millis))

    def to_datetime(self) -> _datetime.datetime:
        """Return the aware UTC datetime for this instant.

        Raises:
            ValidationError: If the instant is invalid.
        """
        if not self.is_valid:
            raise ValidationError("cannot convert an invalid Instant to datetime")
        return utc_datetime(self._millis)

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._millis >= other._millis

    def __hash__(self) -> int:
        return hash(("Instant", self._millis))

    def __repr__(self) -> str:
        if not self.is_valid:
            return "Instant(nan)"
        return f"Instant({self._millis})"

    def __str__(self) -> str:
        if not self.is_valid:
            return "Invalid Date"
        try:
            dt = utc_datetime(self._millis)
        except (OverflowError, ValueError):
            return f"Instant({self._millis})"
        return (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}T"
            f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond // 1000:03d}Z"
        )

    def __bool__(self) -> bool:
        """Instants are always truthy."""
        return True


__all__ = ["Instant"]
