"""Compile JSON rules into rrule-native structures.

The compiler validates a :class:`RuleJson`, resolves its clamps in the
rule time zone and converts options to python-dateutil codes
(``dateutil.rrule.DAILY``, ``dateutil.rrule.weekday``). It does not
enumerate occurrences.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from dateutil import rrule
from pydantic import ValidationError

from rrdescribe.models.rule import DurationParts, Effect, RuleJson, UnixTimeUnit
from rrdescribe.utils.zones import from_epoch, is_valid_zone

logger = logging.getLogger(__name__)

DEFAULT_TIME_UNIT: UnixTimeUnit = "ms"

FREQ_NAME_TO_CODE: dict[str, int] = {
    "yearly": rrule.YEARLY,
    "monthly": rrule.MONTHLY,
    "weekly": rrule.WEEKLY,
    "daily": rrule.DAILY,
    "hourly": rrule.HOURLY,
    "minutely": rrule.MINUTELY,
    "secondly": rrule.SECONDLY,
}

WEEKDAY_CODES = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")

_ISO_DURATION = re.compile(
    r"^P(?!$)(?:(?P<years>\d+)Y)?(?:(?P<months>\d+)M)?(?:(?P<weeks>\d+)W)?"
    r"(?:(?P<days>\d+)D)?(?:T(?=\d)(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+)S)?)?$"
)
_WEEKDAY_TOKEN = re.compile(
    r"^(?P<pre>[+-]?\d+)?(?P<code>MO|TU|WE|TH|FR|SA|SU)(?:\((?P<post>[+-]?\d+)\))?$"
)

_BY_FIELDS = (
    "bysetpos",
    "bymonth",
    "bymonthday",
    "byyearday",
    "byweekno",
    "byhour",
    "byminute",
    "bysecond",
)


class RuleCompileError(ValueError):
    """Raised when a JSON rule cannot be compiled."""


@dataclass(frozen=True)
class CompiledSpanRule:
    """Continuous coverage between optional start/end epochs."""

    effect: Effect
    tz: str
    unit: UnixTimeUnit
    start: int | None = None
    end: int | None = None
    label: str | None = None
    kind: Literal["span"] = "span"


@dataclass(frozen=True)
class CompiledRecurRule:
    """A recurring rule with dateutil-native options.

    ``options`` holds ``freq`` (dateutil code), ``interval``, ``wkst``,
    ``count``, the ``by*`` fields as tuples (``byweekday`` as
    ``dateutil.rrule.weekday`` objects) and, when clamped, ``dtstart`` /
    ``until`` as aware datetimes in the rule time zone.
    """

    effect: Effect
    tz: str
    unit: UnixTimeUnit
    duration: DurationParts
    options: Mapping[str, Any] = field(default_factory=dict)
    label: str | None = None
    kind: Literal["recur"] = "recur"


CompiledRule = CompiledSpanRule | CompiledRecurRule


def parse_duration(value: str | DurationParts | Mapping[str, int] | None) -> DurationParts:
    """Parse an ISO-8601 duration ("PT1H30M", "P1W") into parts."""
    if value is None:
        return DurationParts()
    if isinstance(value, DurationParts):
        return value
    if isinstance(value, Mapping):
        return DurationParts.model_validate(value)
    match = _ISO_DURATION.match(value.strip().upper())
    if not match:
        raise RuleCompileError(f"Invalid ISO duration: {value}")
    return DurationParts(
        **{k: int(v) for k, v in match.groupdict().items() if v is not None}
    )


def parse_frequency(value: str | int) -> int:
    """Map "daily"/"DAILY"/dateutil code to a dateutil frequency code."""
    if isinstance(value, int):
        if value not in FREQ_NAME_TO_CODE.values():
            raise RuleCompileError(f"Unknown frequency code: {value}")
        return value
    code = FREQ_NAME_TO_CODE.get(value.strip().lower())
    if code is None:
        raise RuleCompileError(f"Unknown frequency: {value}")
    return code


def parse_weekday(token: int | str) -> rrule.weekday:
    """Parse 0..6 (Mon..Sun), "MO", "-1TU" (RFC 5545) or "TU(-1)"."""
    if isinstance(token, int):
        if not 0 <= token <= 6:
            raise RuleCompileError(f"Weekday index out of range: {token}")
        return rrule.weekdays[token]
    match = _WEEKDAY_TOKEN.match(token.strip().upper())
    if not match:
        raise RuleCompileError(f"Invalid weekday: {token}")
    wd = rrule.weekdays[WEEKDAY_CODES.index(match.group("code"))]
    n = match.group("pre") or match.group("post")
    return wd(int(n)) if n and int(n) != 0 else wd


def _as_tuple(value) -> tuple:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def compile_rule(
    rule: RuleJson | Mapping[str, Any],
    tz: str,
    unit: UnixTimeUnit | None = None,
) -> CompiledRule:
    """Compile a JSON rule in time zone *tz*, epochs expressed in *unit*."""
    unit = unit or DEFAULT_TIME_UNIT
    if unit not in ("ms", "s"):
        raise RuleCompileError(f"Unknown time unit: {unit}")
    if not is_valid_zone(tz):
        raise RuleCompileError(f"Unknown time zone: {tz}")
    try:
        parsed = rule if isinstance(rule, RuleJson) else RuleJson.model_validate(rule)
    except ValidationError as e:
        raise RuleCompileError(f"Invalid rule: {e}") from e

    opts = parsed.options
    if opts.freq is None:
        logger.debug("compiled span rule in %s", tz)
        return CompiledSpanRule(
            effect=parsed.effect,
            tz=tz,
            unit=unit,
            start=opts.starts,
            end=opts.ends,
            label=parsed.label,
        )

    duration = parse_duration(parsed.duration)
    if duration.total_seconds() <= 0:
        raise RuleCompileError(f"Duration must be positive: {parsed.duration}")

    options: dict[str, Any] = {
        "freq": parse_frequency(opts.freq),
        "interval": opts.interval or 1,
        "count": opts.count,
        "byweekday": tuple(parse_weekday(t) for t in _as_tuple(opts.byweekday)),
    }
    if opts.wkst is not None:
        options["wkst"] = parse_weekday(opts.wkst).weekday
    for name in _BY_FIELDS:
        options[name] = _as_tuple(getattr(opts, name))
    if opts.starts is not None:
        options["dtstart"] = from_epoch(opts.starts, tz, unit)
    if opts.ends is not None:
        options["until"] = from_epoch(opts.ends, tz, unit)

    logger.debug("compiled recurring rule in %s: %s", tz, options)
    return CompiledRecurRule(
        effect=parsed.effect,
        tz=tz,
        unit=unit,
        duration=duration,
        options=options,
        label=parsed.label,
    )


def clamp_datetime(options: Mapping[str, Any], key: str) -> datetime | None:
    value = options.get(key)
    return value if isinstance(value, datetime) else None
