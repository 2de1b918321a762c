"""Tests for the Instant value type.

These tests verify construction, conversion, comparison and hashing.
"""

from __future__ import annotations

import datetime
import math

import pytest

from datebasic import Instant
from datebasic.errors import OverflowError, ParseError, ValidationError


class TestInstantConstruction:
    """Tests for Instant constructors."""

    def test_from_millis(self) -> None:
        """Instant(millis) stores the time value."""
        assert Instant(1705311000000).millis == 1705311000000

    def test_integral_float_becomes_int(self) -> None:
        """Integral floats are stored as int."""
        instant = Instant(1500.0)
        assert instant.millis == 1500
        assert isinstance(instant.millis, int)

    def test_fractional_float_truncates_toward_zero(self) -> None:
        """Sub-millisecond fractions are dropped toward zero."""
        assert Instant(1500.9).millis == 1500
        assert Instant(-1500.9).millis == -1500
        assert isinstance(Instant(0.5).millis, int)

    def test_bool_rejected(self) -> None:
        """bool is not accepted as a time value."""
        with pytest.raises(TypeError):
            Instant(True)  # type: ignore[arg-type]

    def test_string_rejected(self) -> None:
        """Strings are not accepted as a time value."""
        with pytest.raises(TypeError):
            Instant("0")  # type: ignore[arg-type]

    def test_infinite_rejected(self) -> None:
        """Infinite time values raise ValidationError."""
        with pytest.raises(ValidationError):
            Instant(math.inf)

    def test_invalid(self) -> None:
        """Instant.invalid() has a NaN time value."""
        instant = Instant.invalid()
        assert instant.is_valid is False
        assert math.isnan(instant.millis)

    def test_utc_fields(self) -> None:
        """Instant.utc builds from UTC fields."""
        assert Instant.utc(2024, 1, 15, 9, 30).millis == 1705311000000
        assert Instant.utc(1970, 1, 1).millis == 0

    def test_utc_milliseconds(self) -> None:
        """Instant.utc accepts milliseconds."""
        assert Instant.utc(1970, 1, 1, 0, 0, 1, 250).millis == 1250

    def test_utc_out_of_range_field(self) -> None:
        """Instant.utc does not roll over invalid fields."""
        with pytest.raises(ValidationError):
            Instant.utc(2023, 2, 29)

    def test_local_in_utc(self) -> None:
        """With DATEBASIC_TZ=UTC, local and utc constructors agree."""
        assert Instant.local(2024, 1, 15, 9, 30) == Instant.utc(2024, 1, 15, 9, 30)

    def test_local_in_seoul(self, seoul: None) -> None:
        """Local fields are read in the configured zone."""
        assert Instant.local(2024, 1, 15).millis == 1705276800000 - 9 * 3_600_000

    def test_local_rolls_over(self) -> None:
        """Out-of-range local fields roll over."""
        assert Instant.local(2024, 2, 30) == Instant.utc(2024, 3, 1)
        assert Instant.local(2024, 13, 1) == Instant.utc(2025, 1, 1)
        assert Instant.local(2024, 1, 1, 24) == Instant.utc(2024, 1, 2)
        assert Instant.local(2024, 3, 0) == Instant.utc(2024, 2, 29)

    def test_local_overflow(self) -> None:
        """Local fields beyond year 9999 raise OverflowError."""
        with pytest.raises(OverflowError):
            Instant.local(9999, 12, 32)

    def test_now_is_valid(self) -> None:
        """Instant.now() samples a valid clock value."""
        assert Instant.now().is_valid
        assert isinstance(Instant.now().millis, int)


class TestInstantConversion:
    """Tests for datetime and ISO conversions."""

    def test_from_aware_datetime(self) -> None:
        """Aware datetimes are converted directly."""
        tz = datetime.timezone(datetime.timedelta(hours=9))
        dt = datetime.datetime(2024, 1, 15, 18, 30, tzinfo=tz)
        assert Instant.from_datetime(dt) == Instant.utc(2024, 1, 15, 9, 30)

    def test_from_naive_datetime_is_local(self, seoul: None) -> None:
        """Naive datetimes are read as local wall-clock time."""
        dt = datetime.datetime(2024, 1, 15, 18, 30)
        assert Instant.from_datetime(dt) == Instant.utc(2024, 1, 15, 9, 30)

    def test_from_iso_format_z(self) -> None:
        """A trailing Z means UTC."""
        assert Instant.from_iso_format("2024-01-15T09:30:00Z").millis == 1705311000000

    def test_from_iso_format_offset(self) -> None:
        """Explicit offsets are honoured."""
        parsed = Instant.from_iso_format("2024-01-15T18:30:00+09:00")
        assert parsed == Instant.utc(2024, 1, 15, 9, 30)

    def test_from_iso_format_no_offset_is_utc(self, seoul: None) -> None:
        """Strings without an offset are read as UTC."""
        assert Instant.from_iso_format("2024-01-15T09:30:00") == Instant.utc(2024, 1, 15, 9, 30)

    def test_from_iso_format_invalid(self) -> None:
        """Malformed strings raise ParseError."""
        with pytest.raises(ParseError):
            Instant.from_iso_format("15/01/2024")

    def test_to_datetime(self) -> None:
        """to_datetime returns an aware UTC datetime."""
        dt = Instant.utc(2024, 1, 15, 9, 30, 0, 5).to_datetime()
        assert dt.utcoffset() == datetime.timedelta(0)
        assert (dt.year, dt.month, dt.day, dt.hour, dt.minute) == (2024, 1, 15, 9, 30)
        assert dt.microsecond == 5000

    def test_to_datetime_invalid(self) -> None:
        """An invalid instant cannot be converted."""
        with pytest.raises(ValidationError):
            Instant.invalid().to_datetime()

    def test_str_is_iso(self) -> None:
        """str() renders UTC ISO 8601 with milliseconds."""
        assert str(Instant.utc(2024, 1, 15, 9, 30, 0, 7)) == "2024-01-15T09:30:00.007Z"
        assert str(Instant.invalid()) == "Invalid Date"

    def test_repr(self) -> None:
        """repr() shows the time value."""
        assert repr(Instant(42)) == "Instant(42)"
        assert repr(Instant.invalid()) == "Instant(nan)"


class TestInstantComparison:
    """Tests for equality, ordering and hashing."""

    def test_equality(self) -> None:
        assert Instant(10) == Instant(10)
        assert Instant(10) != Instant(11)

    def test_not_equal_to_other_types(self) -> None:
        assert Instant(0) != 0

    def test_ordering(self) -> None:
        assert Instant(1) < Instant(2)
        assert Instant(2) > Instant(1)
        assert Instant(2) >= Instant(2)
        assert Instant(2) <= Instant(2)

    def test_nan_never_equal_or_ordered(self) -> None:
        nan = Instant.invalid()
        assert not nan == nan
        assert not nan < Instant(0)
        assert not nan > Instant(0)

    def test_hashable(self) -> None:
        assert len({Instant(5), Instant(5), Instant(6)}) == 2

    def test_immutable(self) -> None:
        """Instants have no writable attributes."""
        instant = Instant(0)
        with pytest.raises(AttributeError):
            instant.millis = 5  # type: ignore[misc]
        with pytest.raises(AttributeError):
            instant.other = 5  # type: ignore[attr-defined]
