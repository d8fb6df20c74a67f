"""Frequency vocabulary used by the cadence phrases.

The English tables are read-only module constants; callers customize
wording through :func:`merge_lexicon`, which never mutates the base tables.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from rrdescribe.describe.config import LexiconOverride
from rrdescribe.models.descriptor import FREQUENCIES, Frequency

Pluralizer = Callable[[str, int], str]

FREQUENCY_ADJECTIVE_EN: Mapping[Frequency, str] = MappingProxyType(
    {
        "yearly": "yearly",
        "monthly": "monthly",
        "weekly": "weekly",
        "daily": "daily",
        "hourly": "hourly",
        "minutely": "minutely",
        "secondly": "secondly",
    }
)

FREQUENCY_NOUN_EN: Mapping[Frequency, str] = MappingProxyType(
    {
        "yearly": "year",
        "monthly": "month",
        "weekly": "week",
        "daily": "day",
        "hourly": "hour",
        "minutely": "minute",
        "secondly": "second",
    }
)


def default_pluralize(noun: str, n: int) -> str:
    return noun if n == 1 else f"{noun}s"


@dataclass(frozen=True)
class FrequencyLexicon:
    """Adjective and noun labels per frequency, plus a pluralizer."""

    adjective: Mapping[str, str]
    noun: Mapping[str, str]
    pluralize: Pluralizer = field(default=default_pluralize)


FREQUENCY_LEXICON_EN = FrequencyLexicon(
    adjective=FREQUENCY_ADJECTIVE_EN,
    noun=FREQUENCY_NOUN_EN,
    pluralize=default_pluralize,
)


def merge_lexicon(
    override: LexiconOverride | FrequencyLexicon | Mapping[str, Any] | None = None,
    base: FrequencyLexicon = FREQUENCY_LEXICON_EN,
) -> FrequencyLexicon:
    """Merge caller overrides over *base*.

    ``adjective`` and ``noun`` entries are merged key by key; ``pluralize``
    replaces the base pluralizer wholesale. *override* may be a
    ``LexiconOverride``, a ``FrequencyLexicon`` or a plain mapping.
    """
    if override is None:
        return base
    if isinstance(override, Mapping):
        adjective = override.get("adjective")
        noun = override.get("noun")
        pluralize = override.get("pluralize")
    else:
        adjective = getattr(override, "adjective", None)
        noun = getattr(override, "noun", None)
        pluralize = getattr(override, "pluralize", None)
    return FrequencyLexicon(
        adjective=MappingProxyType({**base.adjective, **(adjective or {})}),
        noun=MappingProxyType({**base.noun, **(noun or {})}),
        pluralize=pluralize or base.pluralize,
    )


def to_frequency_options(
    labels: Mapping[str, str] | None = None,
) -> list[dict[str, str]]:
    """Frequency choices for a picker, ordered from yearly down to secondly."""
    labels = FREQUENCY_ADJECTIVE_EN if labels is None else labels
    return [{"value": freq, "label": labels[freq]} for freq in FREQUENCIES]
