"""Build translation-ready descriptors from compiled rules."""

from __future__ import annotations

from typing import Any

from dateutil import rrule

from rrdescribe.compile import (
    FREQ_NAME_TO_CODE,
    CompiledRecurRule,
    CompiledRule,
    clamp_datetime,
)
from rrdescribe.models.descriptor import (
    ByFields,
    Clamps,
    RecurDescriptor,
    SpanDescriptor,
    WeekdayPos,
)
from rrdescribe.utils.zones import to_epoch

FREQ_CODE_TO_NAME: dict[int, str] = {code: name for name, code in FREQ_NAME_TO_CODE.items()}


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def freq_to_name(freq: Any) -> str:
    """Normalize a dateutil code or a frequency name; unknown values map to "daily"."""
    if isinstance(freq, str):
        name = freq.strip().lower()
        return name if name in FREQ_NAME_TO_CODE else "daily"
    return FREQ_CODE_TO_NAME.get(freq, "daily")


def to_weekday_index(w: Any) -> int | None:
    """dateutil weekday (0=Monday) -> 1..7 (Mon..Sun)."""
    if isinstance(w, rrule.weekday):
        return w.weekday + 1
    if isinstance(w, int) and 0 <= w <= 6:
        return w + 1
    return None


def _weekdays(raw: Any) -> list[WeekdayPos]:
    out = []
    for w in _as_list(raw):
        idx = to_weekday_index(w)
        if idx is None:
            continue
        nth = getattr(w, "n", None) or None
        out.append(WeekdayPos(weekday=idx, nth=nth))
    return out


def build_rule_descriptor(compiled: CompiledRule) -> SpanDescriptor | RecurDescriptor:
    """Normalize a compiled rule into a descriptor."""
    if compiled.kind == "span":
        return SpanDescriptor(
            effect=compiled.effect,
            tz=compiled.tz,
            unit=compiled.unit,
            clamps=Clamps(starts=compiled.start, ends=compiled.end),
        )
    return _build_recur(compiled)


def _build_recur(r: CompiledRecurRule) -> RecurDescriptor:
    opts = r.options
    dtstart = clamp_datetime(opts, "dtstart")
    until = clamp_datetime(opts, "until")
    starts = to_epoch(dtstart, r.unit) if dtstart else None
    ends = to_epoch(until, r.unit) if until else None
    clamps = Clamps(starts=starts, ends=ends) if dtstart or until else None

    interval = opts.get("interval")
    wkst = opts.get("wkst")
    return RecurDescriptor(
        effect=r.effect,
        tz=r.tz,
        unit=r.unit,
        clamps=clamps,
        freq=freq_to_name(opts.get("freq")),
        interval=interval if isinstance(interval, int) and interval > 0 else 1,
        duration=r.duration,
        by=ByFields(
            months=_as_list(opts.get("bymonth")),
            month_days=_as_list(opts.get("bymonthday")),
            year_days=_as_list(opts.get("byyearday")),
            week_nos=_as_list(opts.get("byweekno")),
            weekdays=_weekdays(opts.get("byweekday")),
            hours=_as_list(opts.get("byhour")),
            minutes=_as_list(opts.get("byminute")),
            seconds=_as_list(opts.get("bysecond")),
            setpos=_as_list(opts.get("bysetpos")),
            wkst=to_weekday_index(wkst),
        ),
        count=opts.get("count"),
        until=ends,
    )
