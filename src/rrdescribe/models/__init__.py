"""rrdescribe domain models.

Pydantic models for JSON rules and for the normalized descriptors the
translators consume.
"""

from .descriptor import (
    FREQUENCIES,
    ByFields,
    Clamps,
    Frequency,
    RecurDescriptor,
    RuleDescriptor,
    SpanDescriptor,
    WeekdayPos,
)
from .rule import DurationParts, Effect, RuleJson, RuleOptionsJson, UnixTimeUnit

__all__ = [
    # Rule JSON
    "RuleJson",
    "RuleOptionsJson",
    "DurationParts",
    "Effect",
    "UnixTimeUnit",
    # Descriptors
    "RuleDescriptor",
    "SpanDescriptor",
    "RecurDescriptor",
    "ByFields",
    "Clamps",
    "WeekdayPos",
    "Frequency",
    "FREQUENCIES",
]
