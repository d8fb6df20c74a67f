"""Limit phrases ("from <date>", "until <date>", "for N occurrences")."""

from __future__ import annotations

from rrdescribe.models.descriptor import RecurDescriptor
from rrdescribe.utils.zones import from_epoch, iso_date


def _date_limits(d: RecurDescriptor) -> str:
    out = ""
    starts = d.clamps.starts if d.clamps else None
    if starts is not None:
        out += f" from {iso_date(from_epoch(starts, d.tz, d.unit))}"
    if d.until is not None:
        out += f" until {iso_date(from_epoch(d.until, d.tz, d.unit))}"
    return out


def _count_limit(d: RecurDescriptor) -> str:
    if d.count is None or d.count <= 0:
        return ""
    return f" for {d.count} occurrence{'' if d.count == 1 else 's'}"


def append_limits(phrase: str, d: RecurDescriptor, mode: str = "none") -> str:
    """Append the limits selected by *mode* to a cadence phrase.

    Modes: "none", "date_only", "count_only", "date_and_count" (dates first).
    """
    if mode in ("date_only", "date_and_count"):
        phrase += _date_limits(d)
    if mode in ("count_only", "date_and_count"):
        phrase += _count_limit(d)
    return phrase
