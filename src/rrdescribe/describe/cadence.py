"""Cadence phrase builder.

Produces the recurrence part of a sentence ("every day at 5:00",
"every year in july on the third tuesday") and appends the configured
limits. Each frequency is handled by its own function; a frequency or a
by-field combination without a dedicated phrasing falls back to the bare
"every <interval> <noun>" clause.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rrdescribe.describe.config import DescribeConfig, resolve_config
from rrdescribe.describe.helpers import (
    every_with_interval,
    format_local_time_list,
    join_list,
    join_list_conj,
    month_name,
    ordinal,
    ordinals_list,
    weekday_names,
    weekday_positions,
)
from rrdescribe.describe.lexicon import merge_lexicon
from rrdescribe.describe.limits import append_limits
from rrdescribe.models.descriptor import RecurDescriptor


def _at(d: RecurDescriptor, cfg: DescribeConfig) -> str:
    tm = format_local_time_list(
        d.tz,
        d.by.hours,
        d.by.minutes,
        d.by.seconds,
        cfg.time.time_format,
        cfg.time.hour_cycle,
    )
    return f" at {tm}" if tm else ""


def _month(d: RecurDescriptor, cfg: DescribeConfig, month: int) -> str:
    return month_name(d.tz, month, cfg.locale, cfg.lowercase)


def _on_weekdays(d: RecurDescriptor, cfg: DescribeConfig) -> str:
    """Positioned: "on the third tuesday or thursday"; plain: "on tuesday and thursday"."""
    names = weekday_names(d.tz, d.by.weekdays, cfg.locale, cfg.lowercase)
    positions = weekday_positions(d.by.weekdays, d.by.setpos)
    if positions:
        labels = [ordinal(n, cfg.ordinals or "long") for n in positions]
        nth_text = join_list_conj(labels, "or")
        return f"on the {nth_text} {join_list_conj(names, 'or')}"
    return f"on {join_list(names)}"


def _on_month_days(d: RecurDescriptor, cfg: DescribeConfig) -> str:
    return f"on the {ordinals_list(d.by.month_days, cfg.ordinals or 'short')}"


def _daily(d: RecurDescriptor, cfg: DescribeConfig, base: str) -> str:
    return base + _at(d, cfg)


def _weekly(d: RecurDescriptor, cfg: DescribeConfig, base: str) -> str:
    if not d.by.weekdays:
        return base
    names = weekday_names(d.tz, d.by.weekdays, cfg.locale, cfg.lowercase)
    return f"{base} on {join_list(names)}{_at(d, cfg)}"


def _monthly(d: RecurDescriptor, cfg: DescribeConfig, base: str) -> str:
    if d.by.month_days:
        return f"{base} {_on_month_days(d, cfg)}{_at(d, cfg)}"
    if d.by.weekdays:
        return f"{base} {_on_weekdays(d, cfg)}{_at(d, cfg)}"
    return base


def _yearly(d: RecurDescriptor, cfg: DescribeConfig, base: str) -> str:
    months = [m for m in d.by.months if 1 <= m <= 12]

    if len(d.by.months) == 1 and months:
        name = _month(d, cfg, months[0])
        if len(d.by.month_days) == 1:
            return f"{base} on {name} {d.by.month_days[0]}{_at(d, cfg)}"
        if d.by.month_days:
            return f"{base} in {name} {_on_month_days(d, cfg)}{_at(d, cfg)}"
        if d.by.weekdays:
            return f"{base} in {name} {_on_weekdays(d, cfg)}{_at(d, cfg)}"
        return f"{base} in {name}{_at(d, cfg)}"

    if len(d.by.months) > 1 and months:
        in_months = join_list_conj([_month(d, cfg, m) for m in months], "or")
        if d.by.month_days:
            return f"{base} in {in_months} {_on_month_days(d, cfg)}{_at(d, cfg)}"
        if d.by.weekdays:
            return f"{base} in {in_months} {_on_weekdays(d, cfg)}{_at(d, cfg)}"
        return f"{base} in {in_months}{_at(d, cfg)}"

    if d.by.weekdays:
        return f"{base} {_on_weekdays(d, cfg)}{_at(d, cfg)}"
    return base


_BUILDERS = {
    "daily": _daily,
    "weekly": _weekly,
    "monthly": _monthly,
    "yearly": _yearly,
}


def build_cadence(
    d: RecurDescriptor, cfg: DescribeConfig | Mapping[str, Any] | None = None
) -> str:
    """Build the cadence phrase for a recurring descriptor, limits included."""
    cfg = resolve_config(cfg)
    lex = merge_lexicon(cfg.lexicon)
    base = every_with_interval(lex, d.freq, d.interval)
    builder = _BUILDERS.get(d.freq)
    phrase = builder(d, cfg, base) if builder else base
    return append_limits(phrase, d, cfg.limits)
