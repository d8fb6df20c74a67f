"""Translators turn a rule descriptor into a complete sentence.

A translator is a strategy object: the orchestration code only calls it
with ``(descriptor, config)`` and uses the returned string. Plain
callables with the same signature are accepted too.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from rrdescribe.describe.cadence import build_cadence
from rrdescribe.describe.config import DescribeConfig, resolve_config
from rrdescribe.describe.helpers import duration_to_text
from rrdescribe.models.descriptor import RecurDescriptor, SpanDescriptor
from rrdescribe.utils.zones import format_pattern, from_epoch, iso_instant

TranslatorFn = Callable[[SpanDescriptor | RecurDescriptor, DescribeConfig], str]


class DescribeTranslator(ABC):
    """Abstract base class for sentence translators."""

    @abstractmethod
    def translate(
        self, desc: SpanDescriptor | RecurDescriptor, cfg: DescribeConfig
    ) -> str:
        """Render the whole sentence for *desc*."""

    def __call__(
        self, desc: SpanDescriptor | RecurDescriptor, cfg: DescribeConfig | None = None
    ) -> str:
        return self.translate(desc, resolve_config(cfg))


def format_bound(
    epoch: int | None, tz: str, unit: str, fmt: str | None = None
) -> str | None:
    """Render a clamp epoch in *tz*: LDML pattern *fmt*, or an ISO instant."""
    if epoch is None:
        return None
    dt = from_epoch(epoch, tz, unit)
    return format_pattern(dt, fmt) if fmt else iso_instant(dt)


class StrictEnTranslator(DescribeTranslator):
    """Strict English translator.

    Renders effect and duration, the cadence phrase, then the optional
    time zone label and inline bounds:
    "Active for 1 hour every day at 5:00 (timezone UTC)".
    """

    def translate(
        self, desc: SpanDescriptor | RecurDescriptor, cfg: DescribeConfig
    ) -> str:
        effect = "Active" if desc.effect == "active" else "Blackout"
        if isinstance(desc, RecurDescriptor):
            dur_text = duration_to_text(desc.duration)
            text = f"{effect} for {dur_text} {build_cadence(desc, cfg)}"
        else:
            text = f"{effect} continuously"
        return text + self._timezone_suffix(desc, cfg) + self._bounds_suffix(desc, cfg)

    @staticmethod
    def _timezone_suffix(desc: SpanDescriptor | RecurDescriptor, cfg: DescribeConfig) -> str:
        if not cfg.show_timezone:
            return ""
        label = cfg.format_timezone_label(desc.tz) if cfg.format_timezone_label else desc.tz
        return f" (timezone {label})"

    @staticmethod
    def _bounds_suffix(desc: SpanDescriptor | RecurDescriptor, cfg: DescribeConfig) -> str:
        if not cfg.show_bounds or desc.clamps is None:
            return ""
        out = ""
        start = format_bound(desc.clamps.starts, desc.tz, desc.unit, cfg.bounds_format)
        end = format_bound(desc.clamps.ends, desc.tz, desc.unit, cfg.bounds_format)
        if start:
            out += f" from {start}"
        if end:
            out += f" until {end}"
        return out


strict_en_translator = StrictEnTranslator()


def resolve_translator(cfg: DescribeConfig) -> TranslatorFn:
    """Pick the translator named by the config."""
    if cfg.translator == "strict-en":
        return strict_en_translator
    return cfg.translator
