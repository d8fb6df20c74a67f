"""Persisted CLI configuration models.

Defaults for the ``describe`` command live in ``config.json`` under the
platformdirs user config directory. Only serializable options are
persisted; callables (custom translators, label formatters) are library
only.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from rrdescribe.describe.config import (
    DescribeConfig,
    HourCycle,
    LimitsMode,
    OrdinalStyle,
    TimeConfig,
    TimeFormat,
)
from rrdescribe.models.rule import UnixTimeUnit
from rrdescribe.utils.zones import is_valid_zone


class RuleContextConfig(BaseModel):
    """Time zone and epoch unit rules are compiled in."""

    timezone: str = Field(default="UTC")
    unit: UnixTimeUnit = Field(default="ms")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject zones missing from the tz database."""
        if not is_valid_zone(v):
            raise ValueError(f"unknown time zone: {v}")
        return v


class DescribeDefaults(BaseModel):
    """Persisted defaults for rendered descriptions."""

    show_timezone: bool = Field(default=False)
    show_bounds: bool = Field(default=False)
    bounds_format: str | None = Field(default=None)
    limits: LimitsMode = Field(default="none")
    time_format: TimeFormat = Field(default="hm")
    hour_cycle: HourCycle = Field(default="h23")
    locale: str | None = Field(default=None)
    ordinals: OrdinalStyle | None = Field(default=None)
    lowercase: bool = Field(default=True)

    def to_describe_config(self, **overrides: Any) -> DescribeConfig:
        """Build a DescribeConfig, letting non-None *overrides* win."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        time = TimeConfig(
            time_format=values.pop("time_format"),
            hour_cycle=values.pop("hour_cycle"),
        )
        return DescribeConfig(time=time, **values)


class AppConfig(BaseModel):
    """Main rrdescribe configuration."""

    rule: RuleContextConfig = Field(default_factory=RuleContextConfig)
    describe: DescribeDefaults = Field(default_factory=DescribeDefaults)
