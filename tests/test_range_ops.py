"""Tests for the datebasic.arithmetic.range_ops module."""

from __future__ import annotations

import pytest

from datebasic import Instant, MillisSpan, TimeSpan
from datebasic.arithmetic import (
    business_days_between,
    days_between,
    millis_between,
    months_between,
    time_span,
)
from datebasic.errors import ValidationError


class TestTimeSpan:
    """Tests for time_span()."""

    def test_positive(self) -> None:
        span = time_span(Instant.utc(2024, 1, 15, 8), Instant.utc(2024, 1, 15, 10, 30, 15))
        assert span == TimeSpan(hours=2, minutes=30, seconds=15)

    def test_multi_day(self) -> None:
        span = time_span(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 3, 1, 2, 3))
        assert span == TimeSpan(hours=49, minutes=2, seconds=3)

    def test_zero(self) -> None:
        instant = Instant.utc(2024, 1, 1)
        assert time_span(instant, instant) == TimeSpan(0, 0, 0)

    def test_negative_difference_is_not_made_absolute(self) -> None:
        """Components are floored from remainders carrying the sign of the difference."""
        span = time_span(Instant.utc(2024, 1, 15, 10, 30, 15), Instant.utc(2024, 1, 15, 8))
        assert span == TimeSpan(hours=-3, minutes=-31, seconds=-15)

    def test_to_dict(self) -> None:
        span = time_span(Instant.utc(2024, 1, 15, 8), Instant.utc(2024, 1, 15, 9, 1, 1))
        assert span.to_dict() == {"hours": 1, "minutes": 1, "seconds": 1}

    def test_validates_both(self) -> None:
        with pytest.raises(ValidationError, match="start"):
            time_span(Instant(-1), Instant(0))
        with pytest.raises(ValidationError, match="end"):
            time_span(Instant(0), Instant.invalid())


class TestDaysBetween:
    """Tests for days_between()."""

    def test_whole_days(self) -> None:
        assert days_between(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 31)) == 30

    def test_symmetric(self) -> None:
        a, b = Instant.utc(2024, 1, 1), Instant.utc(2024, 3, 1)
        assert days_between(a, b) == days_between(b, a) == 60

    def test_same_instant(self) -> None:
        instant = Instant.utc(2024, 1, 1)
        assert days_between(instant, instant) == 0

    def test_half_day_rounds_up(self) -> None:
        assert days_between(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 1, 12)) == 1
        assert days_between(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 2, 12)) == 2

    def test_just_under_half_day_rounds_down(self) -> None:
        start = Instant.utc(2024, 1, 1)
        assert days_between(start, Instant.utc(2024, 1, 1, 11, 59, 59, 999)) == 0


class TestMonthsBetween:
    """Tests for months_between()."""

    def test_across_year(self) -> None:
        assert months_between(Instant.utc(2023, 11, 20), Instant.utc(2024, 2, 1)) == 3

    def test_signed(self) -> None:
        assert months_between(Instant.utc(2024, 2, 1), Instant.utc(2023, 11, 20)) == -3

    def test_ignores_day_of_month(self) -> None:
        assert months_between(Instant.utc(2024, 1, 31), Instant.utc(2024, 2, 1)) == 1

    def test_same_month(self) -> None:
        assert months_between(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 31)) == 0


class TestMillisBetween:
    """Tests for millis_between()."""

    def test_span(self) -> None:
        span = millis_between(Instant.utc(2024, 1, 1), Instant.utc(2024, 1, 1, 0, 1, 30))
        assert span == MillisSpan(milliseconds=90000, seconds=90.0, minutes=1.5)

    def test_negative(self) -> None:
        span = millis_between(Instant.utc(2024, 1, 1, 0, 1), Instant.utc(2024, 1, 1))
        assert span.milliseconds == -60000
        assert span.seconds == -60.0
        assert span.minutes == -1.0

    def test_to_dict(self) -> None:
        span = millis_between(Instant(0), Instant(1500))
        assert span.to_dict() == {"milliseconds": 1500, "seconds": 1.5, "minutes": 0.025}


class TestBusinessDaysBetween:
    """Tests for business_days_between()."""

    # Monday 2024-01-15 ... Sunday 2024-01-21

    def test_single_weekday(self) -> None:
        monday = Instant.utc(2024, 1, 15)
        assert business_days_between(monday, monday) == 1

    def test_weekend_only(self) -> None:
        assert business_days_between(Instant.utc(2024, 1, 20), Instant.utc(2024, 1, 21)) == 0

    def test_full_week(self) -> None:
        assert business_days_between(Instant.utc(2024, 1, 15), Instant.utc(2024, 1, 21)) == 5

    def test_eight_days(self) -> None:
        assert business_days_between(Instant.utc(2024, 1, 15), Instant.utc(2024, 1, 22)) == 6

    def test_reversed_range_is_zero(self) -> None:
        assert business_days_between(Instant.utc(2024, 1, 21), Instant.utc(2024, 1, 15)) == 0

    def test_walk_keeps_time_of_day(self) -> None:
        """Friday 10:00 is after the Friday 09:00 end, so Friday is not counted."""
        start = Instant.utc(2024, 1, 15, 10)
        end = Instant.utc(2024, 1, 19, 9)
        assert business_days_between(start, end) == 4
