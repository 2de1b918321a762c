"""Locale- and timezone-aware formatting.

Field layout and localization are delegated to an internationalization
backend described by the IntlFormatter protocol. The default backend,
BabelFormatter, takes CLDR data from Babel and IANA zones from pytz.

Functions:
    format_locale: Render an instant for a locale tag, Intl-style options.
    format_in_timezone: Render 'MM/DD/YYYY, HH:MM:SS AM/PM' in an IANA zone.

Options accepted by format_locale mirror Intl.DateTimeFormat:

    year      'numeric' | '2-digit'
    month     'numeric' | '2-digit' | 'short' | 'long' | 'narrow'
    day       'numeric' | '2-digit'
    weekday   'short' | 'long' | 'narrow'
    era       'short' | 'long' | 'narrow'
    hour      'numeric' | '2-digit'
    minute    'numeric' | '2-digit'
    second    'numeric' | '2-digit'
    timeZoneName  'short' | 'long'
    hour12    True | False
    timeZone  IANA identifier

plus one extension, 'pattern', a literal CLDR pattern that replaces the
skeleton built from the other options. With none of weekday, year,
month, day, hour, minute or second requested, year/month/day are shown
numerically.

Examples:
    >>> from datebasic import Instant
    >>> from datebasic.format import format_locale, format_in_timezone

    >>> format_locale(Instant.utc(2024, 1, 15), "en-US", {"timeZone": "UTC"})
    '1/15/2024'
    >>> format_in_timezone(Instant.utc(2024, 1, 15, 9, 30), "Asia/Seoul")
    '01/15/2024, 06:30:00 PM'
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

import pytz
from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates

from datebasic._internal.constants import (
    DEFAULT_LOCALE,
    TIMEZONE_FORMAT_LOCALE,
    TIMEZONE_FORMAT_PATTERN,
)
from datebasic._internal.localtime import aware_local_datetime
from datebasic._internal.validation import validate_instant
from datebasic.errors import TimezoneError, ValidationError

if TYPE_CHECKING:
    from datebasic.core.instant import Instant

logger = logging.getLogger(__name__)

# Intl option value -> CLDR skeleton symbols, in skeleton order
_SKELETON_FIELDS: tuple[tuple[str, dict[str, str]], ...] = (
    ("era", {"short": "G", "long": "GGGG", "narrow": "GGGGG"}),
    ("year", {"numeric": "y", "2-digit": "yy"}),
    (
        "month",
        {"numeric": "M", "2-digit": "MM", "short": "MMM", "long": "MMMM", "narrow": "MMMMM"},
    ),
    ("day", {"numeric": "d", "2-digit": "dd"}),
    ("weekday", {"short": "E", "long": "EEEE", "narrow": "EEEEE"}),
    ("hour", {"numeric": "j", "2-digit": "jj"}),
    ("minute", {"numeric": "m", "2-digit": "mm"}),
    ("second", {"numeric": "s", "2-digit": "ss"}),
    ("timeZoneName", {"short": "z", "long": "zzzz"}),
)

_DEFAULT_SKELETON = "yMd"

# With all of these absent the date defaults to _DEFAULT_SKELETON
_COMPONENT_OPTIONS = ("weekday", "year", "month", "day", "hour", "minute", "second")

_DATE_SYMBOLS = frozenset("GyMdE")
_CLOCK_SYMBOLS = frozenset("hHms")

# Stand-alone month and weekday symbols -> their skeleton symbols
_STAND_ALONE = {"L": "M", "c": "E"}


def _widen_fields(pattern: str, skeleton: str) -> str:
    """Grow the pattern's fields to the widths requested in the skeleton."""
    requested: dict[str, int] = {}
    for kind, value in babel_dates.tokenize_pattern(skeleton):
        if kind == "field":
            requested[value[0]] = value[1]

    tokens = []
    for kind, value in babel_dates.tokenize_pattern(pattern):
        if kind == "field":
            symbol, width = value
            wanted = requested.get(_STAND_ALONE.get(symbol, symbol))
            if wanted is not None and wanted > width:
                value = (symbol, wanted)
        tokens.append((kind, value))
    return babel_dates.untokenize_pattern(tokens)


@runtime_checkable
class IntlFormatter(Protocol):
    """Internationalization backend used by the formatting functions."""

    def format(
        self,
        instant: "Instant",
        locale: str,
        options: Mapping[str, Any],
    ) -> str:
        """Render a validated instant for a locale tag and options."""
        ...

    def resolve_time_zone(self, identifier: str) -> _datetime.tzinfo:
        """Return the tzinfo for an IANA identifier.

        Raises:
            TimezoneError: If the identifier is not recognized.
        """
        ...


class BabelFormatter:
    """IntlFormatter backed by Babel (CLDR) and pytz (IANA zones).

    Options are turned into a date skeleton and a time skeleton. Each is
    matched against the locale's available formats, widened to the
    requested field widths, and the two halves are joined with the
    locale's date-time pattern.
    """

    def resolve_time_zone(self, identifier: str) -> _datetime.tzinfo:
        if not isinstance(identifier, str) or not identifier:
            raise TimezoneError(f"Invalid time zone: {identifier!r}")
        try:
            return pytz.timezone(identifier)
        except pytz.UnknownTimeZoneError as exc:
            logger.debug("time zone probe failed for %r", identifier)
            raise TimezoneError(f"Invalid time zone: {identifier}") from exc

    def parse_locale(self, tag: str) -> Locale:
        """Parse a BCP 47 style tag such as 'ko-KR' into a Babel Locale.

        Raises:
            ValidationError: If the tag is malformed or unknown to CLDR.
        """
        try:
            return Locale.parse(tag.replace("-", "_"))
        except (UnknownLocaleError, ValueError, TypeError, AttributeError) as exc:
            raise ValidationError(f"Invalid locale: {tag!r}") from exc

    def skeleton_for(self, options: Mapping[str, Any], locale: Locale) -> str:
        """Build a CLDR skeleton from Intl-style options.

        Raises:
            ValidationError: If an option has an unsupported value.
        """
        parts: list[str] = []
        for key, symbols in _SKELETON_FIELDS:
            value = options.get(key)
            if value is None:
                continue
            if not isinstance(value, str) or value not in symbols:
                raise ValidationError(
                    f"Invalid value {value!r} for option {key!r}; "
                    f"expected one of {sorted(symbols)}"
                )
            parts.append(symbols[value])
        if not any(options.get(key) is not None for key in _COMPONENT_OPTIONS):
            parts.append(_DEFAULT_SKELETON)
        return "".join(parts).replace("j", self._hour_symbol(options, locale))

    def _hour_symbol(self, options: Mapping[str, Any], locale: Locale) -> str:
        hour12 = options.get("hour12")
        if hour12 is None:
            # Follow the locale's own short time pattern
            return "h" if "h" in locale.time_formats["short"].pattern else "H"
        return "h" if hour12 else "H"

    def _match(self, skeleton: str, locale: Locale) -> str:
        skeletons = locale.datetime_skeletons
        if skeleton in skeletons:
            key = skeleton
        else:
            key = babel_dates.match_skeleton(skeleton, skeletons)
        if key is None:
            raise ValidationError(
                f"No {locale} format matches the requested fields ({skeleton})"
            )
        return _widen_fields(skeletons[key].pattern, skeleton)

    def _glue_for(self, date_skeleton: str, locale: Locale) -> str:
        if "MMMM" in date_skeleton:
            width = "full" if "E" in date_skeleton else "long"
        elif "MMM" in date_skeleton:
            width = "medium"
        else:
            width = "short"
        return str(locale.datetime_formats[width]).replace("'", "")

    def render_skeleton(
        self,
        moment: _datetime.datetime,
        skeleton: str,
        locale: Locale,
    ) -> str:
        """Render an aware datetime for a CLDR skeleton.

        Raises:
            ValidationError: If the locale has no format for the fields.
        """
        date_skeleton = "".join(ch for ch in skeleton if ch in _DATE_SYMBOLS)
        time_skeleton = "".join(ch for ch in skeleton if ch not in _DATE_SYMBOLS)

        rendered_date = rendered_time = ""
        if date_skeleton:
            rendered_date = babel_dates.format_datetime(
                moment,
                self._match(date_skeleton, locale),
                tzinfo=moment.tzinfo,
                locale=locale,
            )
        if time_skeleton:
            if _CLOCK_SYMBOLS.isdisjoint(time_skeleton):
                # Zone name only
                time_pattern = time_skeleton
            else:
                time_pattern = self._match(time_skeleton, locale)
            rendered_time = babel_dates.format_datetime(
                moment, time_pattern, tzinfo=moment.tzinfo, locale=locale
            )

        if rendered_date and rendered_time:
            return (
                self._glue_for(date_skeleton, locale)
                .replace("{0}", rendered_time)
                .replace("{1}", rendered_date)
            )
        return rendered_date or rendered_time

    def format(
        self,
        instant: "Instant",
        locale: str,
        options: Mapping[str, Any],
    ) -> str:
        babel_locale = self.parse_locale(locale)

        zone_name = options.get("timeZone")
        if zone_name is None:
            moment = aware_local_datetime(instant.millis)
        else:
            zone = self.resolve_time_zone(zone_name)
            moment = instant.to_datetime().astimezone(zone)

        pattern = options.get("pattern")
        if pattern is not None:
            return babel_dates.format_datetime(
                moment, pattern, tzinfo=moment.tzinfo, locale=babel_locale
            )
        return self.render_skeleton(
            moment, self.skeleton_for(options, babel_locale), babel_locale
        )


_default_formatter = BabelFormatter()


def format_locale(
    instant: "Instant",
    locale: str = DEFAULT_LOCALE,
    options: Mapping[str, Any] | None = None,
    *,
    formatter: IntlFormatter | None = None,
) -> str:
    """Format an instant for a locale, Intl.DateTimeFormat style.

    Without a timeZone option the instant is shown in local time.

    Args:
        instant: The instant to format.
        locale: BCP 47 locale tag. Defaults to 'ko-KR'.
        options: Intl-style options (see module docstring).
        formatter: Backend to use instead of the Babel default.

    Returns:
        The localized string.

    Raises:
        ValidationError: If the instant is out of range, the locale is
            unknown, or an option value is unsupported.
        TimezoneError: If options name an unknown timeZone.

    Examples:
        >>> format_locale(Instant.utc(2024, 1, 15), "ko-KR", {"timeZone": "UTC"})
        '2024. 1. 15.'
        >>> format_locale(
        ...     Instant.utc(2024, 1, 15),
        ...     "en-US",
        ...     {"year": "numeric", "month": "long", "day": "numeric", "timeZone": "UTC"},
        ... )
        'January 15, 2024'
    """
    validate_instant(instant)
    backend = formatter or _default_formatter
    return backend.format(instant, locale, dict(options or {}))


def format_in_timezone(
    instant: "Instant",
    time_zone: str,
    *,
    formatter: IntlFormatter | None = None,
) -> str:
    """Format an instant as 'MM/DD/YYYY, HH:MM:SS AM/PM' in an IANA zone.

    The zone is probed first; the output always uses the fixed en_US
    layout regardless of the process locale.

    Args:
        instant: The instant to format.
        time_zone: IANA zone identifier, e.g. 'America/New_York'.
        formatter: Backend to use instead of the Babel default.

    Raises:
        ValidationError: If the instant is out of range.
        TimezoneError: If the zone identifier is not recognized.

    Examples:
        >>> format_in_timezone(Instant.utc(2024, 7, 4, 16), "America/New_York")
        '07/04/2024, 12:00:00 PM'
    """
    validate_instant(instant)
    backend = formatter or _default_formatter
    backend.resolve_time_zone(time_zone)
    return backend.format(
        instant,
        TIMEZONE_FORMAT_LOCALE,
        {"timeZone": time_zone, "pattern": TIMEZONE_FORMAT_PATTERN},
    )


__all__ = [
    "IntlFormatter",
    "BabelFormatter",
    "format_locale",
    "format_in_timezone",
]
