"""Local wall-clock conversions for datebasic.

Local fields are read in the host's configured time zone. Setting the
DATEBASIC_TZ environment variable to an IANA identifier replaces the
host zone with that zone (resolved through pytz); the variable is read
on every call so it can be changed at runtime.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import os

import pytz

from datebasic._internal.calendar import normalize_ymd
from datebasic._internal.constants import LOCAL_TZ_ENV_VAR, MS_PER_DAY, MS_PER_SECOND
from datebasic.errors import TimezoneError

logger = logging.getLogger(__name__)

UTC_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=pytz.utc)
NAIVE_EPOCH = _datetime.datetime(1970, 1, 1)
ONE_MILLISECOND = _datetime.timedelta(milliseconds=1)


def local_zone() -> _datetime.tzinfo | None:
    """Return the configured local zone, or None for the host zone.

    Raises:
        TimezoneError: If DATEBASIC_TZ names an unknown zone.
    """
    name = os.environ.get(LOCAL_TZ_ENV_VAR, "").strip()
    if not name:
        return None
    try:
        zone = pytz.timezone(name)
    except pytz.UnknownTimeZoneError as exc:
        raise TimezoneError(f"Invalid time zone in {LOCAL_TZ_ENV_VAR}: {name}") from exc
    logger.debug("reading local fields in %s", zone.zone)
    return zone


def utc_datetime(millis: int) -> _datetime.datetime:
    """Return the aware UTC datetime for epoch milliseconds."""
    return UTC_EPOCH + _datetime.timedelta(milliseconds=millis)


def local_datetime(millis: int) -> _datetime.datetime:
    """Return the naive local wall-clock datetime for epoch milliseconds."""
    zone = local_zone()
    if zone is None:
        seconds, ms = divmod(millis, MS_PER_SECOND)
        naive = _datetime.datetime.fromtimestamp(seconds)
        return naive.replace(microsecond=ms * 1000)
    return utc_datetime(millis).astimezone(zone).replace(tzinfo=None)


def aware_local_datetime(millis: int) -> _datetime.datetime:
    """Return the local datetime for epoch milliseconds with its tzinfo attached."""
    zone = local_zone()
    if zone is None:
        return utc_datetime(millis).astimezone()
    return utc_datetime(millis).astimezone(zone)


def _localize(zone, naive: _datetime.datetime) -> _datetime.datetime:
    try:
        return zone.localize(naive, is_dst=None)
    except pytz.AmbiguousTimeError:
        return zone.localize(naive, is_dst=True)
    except pytz.NonExistentTimeError:
        return zone.normalize(zone.localize(naive, is_dst=False))


def naive_to_millis(naive: _datetime.datetime) -> int:
    """Interpret a naive datetime as local wall-clock time and return epoch millis.

    A wall-clock time that occurs twice resolves to the earlier
    occurrence. One skipped by a forward transition moves forward by
    the size of the gap.
    """
    zone = local_zone()
    if zone is None:
        seconds = int(naive.replace(microsecond=0).timestamp())
        return seconds * MS_PER_SECOND + naive.microsecond // 1000
    return (_localize(zone, naive) - UTC_EPOCH) // ONE_MILLISECOND


def local_fields_to_millis(
    year: int,
    month_index: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Build epoch millis from local fields, rolling over any out-of-range field.

    Every field may over- or underflow: minute 60 is the next hour,
    day 0 is the last day of the previous month, month index 12 is
    January of the following year.

    Args:
        year: The year.
        month_index: Zero-based month.
        day: Day of month.
        hour: Hour of day.
        minute: Minute of hour.
        second: Second of minute.
        millisecond: Millisecond of second.

    Returns:
        Milliseconds since the epoch.

    Raises:
        OverflowError: If the rolled-over date is outside years 1-9999.
    """
    time_ms = ((hour * 60 + minute) * 60 + second) * MS_PER_SECOND + millisecond
    extra_days, time_ms = divmod(time_ms, MS_PER_DAY)
    y, m, d = normalize_ymd(year, month_index, day + extra_days)
    naive = _datetime.datetime(y, m, d) + _datetime.timedelta(milliseconds=time_ms)
    return naive_to_millis(naive)


def local_weekday(naive: _datetime.datetime) -> int:
    """Return the weekday of a datetime with Sunday=0 ... Saturday=6."""
    return (naive.weekday() + 1) % 7


def timezone_offset_minutes(millis: int) -> int:
    """Return (UTC - local) in minutes at the given instant."""
    utc_naive = NAIVE_EPOCH + _datetime.timedelta(milliseconds=millis)
    delta = utc_naive - local_datetime(millis)
    return round(delta / _datetime.timedelta(minutes=1))


__all__ = [
    "UTC_EPOCH",
    "local_zone",
    "utc_datetime",
    "local_datetime",
    "aware_local_datetime",
    "naive_to_millis",
    "local_fields_to_millis",
    "local_weekday",
    "timezone_offset_minutes",
]
