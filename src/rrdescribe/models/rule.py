"""Rule data models.

JSON shapes accepted by the rule compiler. Field names follow the rrule
option vocabulary (``freq``, ``bymonth``, ``byweekday``...) so persisted
rules can be passed through unchanged.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Effect = Literal["active", "blackout"]
UnixTimeUnit = Literal["ms", "s"]

IntList = int | list[int]
WeekdayToken = int | str


class DurationParts(BaseModel):
    """Calendar-aware duration broken into integer components.

    Attributes:
        years: Whole years
        months: Whole months
        weeks: Whole weeks
        days: Whole days
        hours: Whole hours
        minutes: Whole minutes
        seconds: Whole seconds
    """

    model_config = ConfigDict(frozen=True)

    years: int | None = Field(default=None, ge=0)
    months: int | None = Field(default=None, ge=0)
    weeks: int | None = Field(default=None, ge=0)
    days: int | None = Field(default=None, ge=0)
    hours: int | None = Field(default=None, ge=0)
    minutes: int | None = Field(default=None, ge=0)
    seconds: int | None = Field(default=None, ge=0)

    def total_seconds(self) -> int:
        """Nominal length in seconds (months as 30 days, years as 365)."""
        return (
            (self.years or 0) * 365 * 86400
            + (self.months or 0) * 30 * 86400
            + (self.weeks or 0) * 7 * 86400
            + (self.days or 0) * 86400
            + (self.hours or 0) * 3600
            + (self.minutes or 0) * 60
            + (self.seconds or 0)
        )


class RuleOptionsJson(BaseModel):
    """Recurrence options of a JSON rule.

    A rule without ``freq`` is a span: continuous coverage between
    ``starts`` and ``ends``.

    Attributes:
        freq: Frequency name ("daily") or dateutil frequency code
        interval: Step between recurrences
        wkst: Week start (dateutil index 0..6 or "MO".."SU")
        count: Maximum number of occurrences
        starts: Start clamp epoch in the rule's time unit
        ends: End clamp epoch in the rule's time unit
    """

    model_config = ConfigDict(extra="forbid")

    freq: str | int | None = None
    interval: int | None = Field(default=None, ge=1)
    wkst: WeekdayToken | None = None
    count: int | None = Field(default=None, ge=1)

    bysetpos: IntList | None = None
    bymonth: IntList | None = None
    bymonthday: IntList | None = None
    byyearday: IntList | None = None
    byweekno: IntList | None = None
    byweekday: WeekdayToken | list[WeekdayToken] | None = None
    byhour: IntList | None = None
    byminute: IntList | None = None
    bysecond: IntList | None = None

    starts: int | None = None
    ends: int | None = None


class RuleJson(BaseModel):
    """A single rule as stored or exchanged in JSON.

    Attributes:
        effect: Whether the rule activates or blacks out time
        duration: ISO-8601 duration ("PT1H") or explicit parts
        options: Recurrence options
        label: Optional human label
    """

    effect: Effect = "active"
    duration: str | DurationParts | None = None
    options: RuleOptionsJson = Field(default_factory=RuleOptionsJson)
    label: str | None = None
