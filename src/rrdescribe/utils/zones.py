"""Time zone aware rendering of epochs, wall-clock times and calendar names.

Everything here renders in the *target* zone (never the system zone) and
goes through Babel so month/weekday names and day periods follow the
requested locale.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError
from babel.dates import format_datetime, format_time

DEFAULT_LOCALE = "en"

# Zone names that normalize to a fixed UTC zone render ISO instants with a "Z" suffix.
_FIXED_UTC_ZONES = frozenset({"UTC", "GMT"})


@lru_cache(maxsize=128)
def get_zone(tz: str) -> ZoneInfo:
    """Return the ZoneInfo for an IANA zone id."""
    return ZoneInfo(tz)


def is_valid_zone(tz: str) -> bool:
    """Check whether *tz* names a zone known to the tz database."""
    try:
        get_zone(tz)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


@lru_cache(maxsize=32)
def get_locale(locale: str | None = None) -> Locale:
    """Parse a BCP 47 ("en-US") or POSIX ("en_US") locale identifier."""
    return Locale.parse((locale or DEFAULT_LOCALE).replace("-", "_"))


def is_valid_locale(locale: str) -> bool:
    try:
        get_locale(locale)
    except (UnknownLocaleError, ValueError):
        return False
    return True


def from_epoch(epoch: int, tz: str, unit: str = "ms") -> datetime:
    """Convert an epoch in *unit* ("ms" or "s") to an aware datetime in *tz*."""
    if unit == "ms":
        seconds, millis = divmod(int(epoch), 1000)
    else:
        seconds, millis = int(epoch), 0
    utc = datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(
        milliseconds=millis
    )
    return utc.astimezone(get_zone(tz))


def to_epoch(dt: datetime, unit: str = "ms") -> int:
    """Convert an aware datetime to an integer epoch in *unit*."""
    delta = dt - datetime(1970, 1, 1, tzinfo=timezone.utc)
    if unit == "ms":
        return delta // timedelta(milliseconds=1)
    return delta // timedelta(seconds=1)


def wall_clock(
    tz: str, hour: int, minute: int = 0, second: int = 0
) -> datetime:
    """A time of day in *tz*, pinned to a fixed reference date."""
    return datetime(2000, 1, 1, hour, minute, second, tzinfo=get_zone(tz))


def format_pattern(dt: datetime, pattern: str, locale: str | None = None) -> str:
    """Render *dt* with a CLDR/LDML pattern ("yyyy-LL-dd HH:mm", "LLLL"...)."""
    return format_datetime(dt, pattern, tzinfo=dt.tzinfo, locale=get_locale(locale))


def format_clock(dt: datetime, pattern: str, locale: str | None = None) -> str:
    """Render the time-of-day part of *dt* with an LDML pattern ("H:mm")."""
    return format_time(dt, pattern, tzinfo=dt.tzinfo, locale=get_locale(locale))


def iso_date(dt: datetime) -> str:
    return dt.date().isoformat()


def iso_instant(dt: datetime, suppress_milliseconds: bool = True) -> str:
    """ISO-8601 instant with the zone offset.

    Milliseconds are dropped when they are zero and *suppress_milliseconds*
    is set. Fixed UTC zones get a trailing "Z" instead of "+00:00".
    """
    if suppress_milliseconds and dt.microsecond // 1000 == 0:
        text = dt.isoformat(timespec="seconds")
    else:
        text = dt.isoformat(timespec="milliseconds")
    key = getattr(dt.tzinfo, "key", None)
    if key in _FIXED_UTC_ZONES and text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
