"""Rule descriptor models.

A descriptor is the normalized, translation-ready view of a compiled rule.
All collections are tuples and all models are frozen, so a descriptor can
be shared freely between translators.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from rrdescribe.models.rule import DurationParts, Effect, UnixTimeUnit

Frequency = Literal[
    "yearly",
    "monthly",
    "weekly",
    "daily",
    "hourly",
    "minutely",
    "secondly",
]

# Ordered from lowest to highest cadence.
FREQUENCIES: tuple[Frequency, ...] = (
    "yearly",
    "monthly",
    "weekly",
    "daily",
    "hourly",
    "minutely",
    "secondly",
)

WeekdayIndex = Annotated[int, Field(ge=1, le=7)]


class WeekdayPos(BaseModel):
    """A weekday with an optional position inside the period.

    Attributes:
        weekday: 1..7 (Mon..Sun)
        nth: Signed position, -1 means "last"
    """

    model_config = ConfigDict(frozen=True)

    weekday: WeekdayIndex
    nth: int | None = None


class Clamps(BaseModel):
    """Start/end epochs bounding a rule, in the descriptor's unit."""

    model_config = ConfigDict(frozen=True)

    starts: int | None = None
    ends: int | None = None


class ByFields(BaseModel):
    """The by-field constraints of a recurring rule."""

    model_config = ConfigDict(frozen=True)

    months: tuple[int, ...] = ()
    month_days: tuple[int, ...] = ()
    year_days: tuple[int, ...] = ()
    week_nos: tuple[int, ...] = ()
    weekdays: tuple[WeekdayPos, ...] = ()
    hours: tuple[int, ...] = ()
    minutes: tuple[int, ...] = ()
    seconds: tuple[int, ...] = ()
    setpos: tuple[int, ...] = ()
    wkst: WeekdayIndex | None = None


class _DescriptorBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    effect: Effect
    tz: str
    unit: UnixTimeUnit = "ms"
    clamps: Clamps | None = None


class SpanDescriptor(_DescriptorBase):
    """Continuous coverage; only the clamps bound it."""

    kind: Literal["span"] = "span"


class RecurDescriptor(_DescriptorBase):
    """A recurring rule.

    Attributes:
        freq: Recurrence frequency
        interval: Step between recurrences (>= 1)
        duration: Length of each occurrence
        by: By-field constraints
        count: Optional occurrence limit
        until: Optional end epoch in the descriptor's unit
    """

    kind: Literal["recur"] = "recur"
    freq: Frequency
    interval: int = Field(default=1, ge=1)
    duration: DurationParts = Field(default_factory=DurationParts)
    by: ByFields = Field(default_factory=ByFields)
    count: int | None = None
    until: int | None = None


RuleDescriptor = Annotated[
    SpanDescriptor | RecurDescriptor, Field(discriminator="kind")
]
