"""Unified configuration for rule descriptions.

Translators own the entire sentence (effect, duration, cadence, bounds,
time zone). Every option is defaulted here, on the model, so translators
never carry their own fallbacks.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rrdescribe.utils.zones import is_valid_locale

LimitsMode = Literal["none", "date_only", "count_only", "date_and_count"]
TimeFormat = Literal["hm", "hms", "auto"]
HourCycle = Literal["h23", "h12"]
OrdinalStyle = Literal["long", "short"]

LIMITS_MODES: tuple[str, ...] = ("none", "date_only", "count_only", "date_and_count")


class TimeConfig(BaseModel):
    """Time-of-day formatting in the rule time zone.

    Attributes:
        time_format: "hm", "hms", or "auto" (seconds only when non-zero)
        hour_cycle: "h23" (24-hour) or "h12" (12-hour with day period)
    """

    model_config = ConfigDict(frozen=True)

    time_format: TimeFormat = "hm"
    hour_cycle: HourCycle = "h23"


class LexiconOverride(BaseModel):
    """Partial frequency lexicon merged over the English defaults."""

    model_config = ConfigDict(frozen=True)

    adjective: dict[str, str] | None = None
    noun: dict[str, str] | None = None
    pluralize: Callable[[str, int], str] | None = None


class DescribeConfig(BaseModel):
    """Options for rendering a rule description.

    Attributes:
        translator: "strict-en" or a custom translator callable
        show_timezone: Append "(timezone <label>)"
        format_timezone_label: Customize the time zone label
        show_bounds: Append "from ... until ..." using the clamps
        bounds_format: LDML pattern for bounds; default is an ISO instant
        limits: Which of dates/count to append to the cadence
        time: Time-of-day formatting
        locale: Locale for month/weekday names and day periods
        ordinals: Force "long" (third) or "short" (3rd) ordinals; when unset,
            day-of-month lists use short and weekday positions use long
        lowercase: Lowercase month/weekday names
        lexicon: Frequency lexicon overrides
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    translator: Literal["strict-en"] | Callable[..., str] = "strict-en"
    show_timezone: bool = False
    format_timezone_label: Callable[[str], str] | None = None
    show_bounds: bool = False
    bounds_format: str | None = None
    limits: LimitsMode = "none"
    time: TimeConfig = Field(default_factory=TimeConfig)
    locale: str | None = None
    ordinals: OrdinalStyle | None = None
    lowercase: bool = True
    lexicon: LexiconOverride | None = None

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str | None) -> str | None:
        """Reject locales Babel cannot load."""
        if v is not None and not is_valid_locale(v):
            raise ValueError(f"unknown locale: {v}")
        return v


def resolve_config(cfg: DescribeConfig | Mapping[str, Any] | None = None) -> DescribeConfig:
    """Single merge point: turn whatever the caller passed into a full config."""
    if cfg is None:
        return DescribeConfig()
    if isinstance(cfg, DescribeConfig):
        return cfg
    return DescribeConfig.model_validate(dict(cfg))
