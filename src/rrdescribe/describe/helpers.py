"""Naming, list-joining and time-of-day helpers for the English phrasing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import timedelta

from rrdescribe.describe.lexicon import FrequencyLexicon, default_pluralize
from rrdescribe.models.descriptor import WeekdayPos
from rrdescribe.models.rule import DurationParts
from rrdescribe.utils.zones import format_clock, format_pattern, wall_clock

ORD_LONG: dict[int, str] = {
    1: "first",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    -1: "last",
}
ORD_SHORT: dict[int, str] = {
    1: "1st",
    2: "2nd",
    3: "3rd",
    4: "4th",
    5: "5th",
    -1: "last",
}

DURATION_UNITS: tuple[tuple[str, str], ...] = (
    ("years", "year"),
    ("months", "month"),
    ("weeks", "week"),
    ("days", "day"),
    ("hours", "hour"),
    ("minutes", "minute"),
    ("seconds", "second"),
)


def ordinal(n: int, style: str = "long") -> str:
    """Ordinal label: 1 -> "first"/"1st", -1 -> "last", otherwise "{n}th"."""
    table = ORD_SHORT if style == "short" else ORD_LONG
    return table.get(n, f"{n}th")


def join_list(items: Sequence[str]) -> str:
    """Join with "and": "a", "a and b", "a, b and c"."""
    if len(items) <= 1:
        return items[0] if items else ""
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])} and {items[-1]}"


def join_list_conj(items: Sequence[str], conj: str = "and") -> str:
    """Join with *conj*, using an Oxford comma for three or more items."""
    if len(items) <= 1:
        return items[0] if items else ""
    if len(items) == 2:
        return f"{items[0]} {conj} {items[1]}"
    return f"{', '.join(items[:-1])}, {conj} {items[-1]}"


def ordinals_list(days: Iterable[int], style: str) -> str:
    return join_list([ordinal(d, style) for d in days])


def maybe_lower(s: str, lowercase: bool | None) -> str:
    return s if lowercase is False else s.lower()


def month_name(
    tz: str, month: int, locale: str | None = None, lowercase: bool = True
) -> str:
    """Full month name, rendered from the first day of *month* in 2000."""
    reference = wall_clock(tz, 12).replace(month=month)
    return maybe_lower(format_pattern(reference, "LLLL", locale), lowercase)


def local_weekday_name(
    tz: str, weekday: int, locale: str | None = None, lowercase: bool = True
) -> str:
    """Full weekday name for *weekday* (1=Monday .. 7=Sunday)."""
    # 2000-01-03 is a Monday
    reference = wall_clock(tz, 12).replace(day=3) + timedelta(days=weekday - 1)
    return maybe_lower(format_pattern(reference, "cccc", locale), lowercase)


def weekday_names(
    tz: str,
    weekdays: Iterable[WeekdayPos],
    locale: str | None = None,
    lowercase: bool = True,
) -> list[str]:
    return [local_weekday_name(tz, w.weekday, locale, lowercase) for w in weekdays]


def weekday_positions(weekdays: Iterable[WeekdayPos], setpos: Iterable[int]) -> list[int]:
    """Union of BYSETPOS values and the weekdays' own positions.

    Both sources contribute; duplicates are dropped and first-seen order is
    kept (set positions before embedded positions).
    """
    merged = [*setpos, *(w.nth for w in weekdays if w.nth)]
    return list(dict.fromkeys(merged))


def format_local_time(
    tz: str,
    hours: Sequence[int] | None = None,
    minutes: Sequence[int] | None = None,
    seconds: Sequence[int] | None = None,
    time_format: str = "hm",
    hour_cycle: str = "h23",
) -> str | None:
    """Render the first hour/minute/second as a local time of day.

    Returns None when no hour is given, so no "at ..." clause is produced.
    """
    if not hours:
        return None
    h = hours[0]
    m = minutes[0] if minutes else 0
    s = seconds[0] if seconds else 0
    use_seconds = time_format == "hms" or (time_format == "auto" and s > 0)
    if hour_cycle == "h12":
        pattern = "h:mm:ss a" if use_seconds else "h:mm a"
    else:
        pattern = "H:mm:ss" if use_seconds else "H:mm"
    return format_clock(wall_clock(tz, h, m, s), pattern)


def format_local_time_list(
    tz: str,
    hours: Sequence[int] | None = None,
    minutes: Sequence[int] | None = None,
    seconds: Sequence[int] | None = None,
    time_format: str = "hm",
    hour_cycle: str = "h23",
) -> str | None:
    """Like :func:`format_local_time`, listing every hour or every minute.

    When only the hours (or only the minutes) have several values, each one
    is rendered and the results are joined: "9:00 and 17:00".
    """
    hs = list(hours or ())
    ms = list(minutes or ())
    ss = list(seconds or ())
    m = ms[0] if ms else 0
    s = ss[0] if ss else 0

    if len(hs) > 1 and len(ms) <= 1 and len(ss) <= 1:
        parts = [format_local_time(tz, [h], [m], [s], time_format, hour_cycle) for h in hs]
        return join_list([p for p in parts if p]) or None
    if len(hs) == 1 and len(ms) > 1 and len(ss) <= 1:
        parts = [
            format_local_time(tz, hs, [mm], [s], time_format, hour_cycle) for mm in ms
        ]
        return join_list([p for p in parts if p]) or None
    return format_local_time(tz, hs, ms, ss, time_format, hour_cycle)


def every_with_interval(lex: FrequencyLexicon, freq: str, interval: int) -> str:
    """Base cadence: "every week", "every 2 weeks"."""
    noun = lex.noun[freq]
    if interval == 1:
        return f"every {noun}"
    pluralize = lex.pluralize or default_pluralize
    return f"every {interval} {pluralize(noun, interval)}"


def duration_to_text(parts: DurationParts) -> str:
    """Render non-zero duration parts in calendar order: "1 hour 30 minutes"."""
    chunks = []
    for attr, label in DURATION_UNITS:
        value = getattr(parts, attr)
        if value:
            chunks.append(f"{value} {label}{'' if value == 1 else 's'}")
    return " ".join(chunks)
