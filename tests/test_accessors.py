"""Tests for epoch and calendar-field accessors."""

from __future__ import annotations

import pytest

from datebasic import Instant
from datebasic.convert import (
    get_time,
    get_timezone_offset,
    get_utc_day,
    get_utc_month,
    get_utc_year,
)
from datebasic.errors import TimezoneError, ValidationError


class TestEpochAccessors:
    """Tests for get_time and the UTC field accessors."""

    def test_get_time(self) -> None:
        assert get_time(Instant.utc(1970, 1, 2)) == 86_400_000
        assert get_time(Instant(0)) == 0

    def test_utc_fields(self) -> None:
        instant = Instant.utc(2024, 3, 5, 23, 59)
        assert get_utc_year(instant) == 2024
        assert get_utc_month(instant) == 2
        assert get_utc_day(instant) == 5

    def test_utc_fields_ignore_local_zone(self, seoul: None) -> None:
        """UTC accessors read UTC even when the local day has moved on."""
        instant = Instant.utc(2023, 12, 31, 20)
        assert get_utc_year(instant) == 2023
        assert get_utc_month(instant) == 11
        assert get_utc_day(instant) == 31

    def test_month_is_zero_based(self) -> None:
        assert get_utc_month(Instant.utc(2024, 1, 1)) == 0
        assert get_utc_month(Instant.utc(2024, 12, 1)) == 11

    def test_rejects_invalid(self) -> None:
        with pytest.raises(ValidationError):
            get_utc_year(Instant(-1))


class TestTimezoneOffset:
    """Tests for get_timezone_offset()."""

    def test_utc(self) -> None:
        assert get_timezone_offset(Instant.utc(2024, 1, 15)) == 0

    def test_east_of_utc_is_negative(self, seoul: None) -> None:
        assert get_timezone_offset(Instant.utc(2024, 1, 15)) == -540

    def test_follows_daylight_saving(self, new_york: None) -> None:
        assert get_timezone_offset(Instant.utc(2024, 1, 15)) == 300
        assert get_timezone_offset(Instant.utc(2024, 7, 15)) == 240

    def test_unknown_configured_zone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATEBASIC_TZ", "Mars/Olympus_Mons")
        with pytest.raises(TimezoneError):
            get_timezone_offset(Instant.utc(2024, 1, 15))
