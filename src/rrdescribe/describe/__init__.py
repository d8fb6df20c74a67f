"""Plain-language rule descriptions.

``describe_compiled_rule`` builds a descriptor from a compiled rule and
hands it to the configured translator; ``describe_rule`` compiles a JSON
rule first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from rrdescribe.compile import CompiledRule, compile_rule
from rrdescribe.describe.config import DescribeConfig, resolve_config
from rrdescribe.describe.descriptor import build_rule_descriptor
from rrdescribe.describe.translator import (
    DescribeTranslator,
    StrictEnTranslator,
    resolve_translator,
    strict_en_translator,
)
from rrdescribe.models.rule import RuleJson, UnixTimeUnit

logger = logging.getLogger(__name__)


def describe_compiled_rule(
    compiled: CompiledRule,
    cfg: DescribeConfig | Mapping[str, Any] | None = None,
) -> str:
    """Describe a compiled rule in plain language."""
    cfg = resolve_config(cfg)
    translator = resolve_translator(cfg)
    desc = build_rule_descriptor(compiled)
    text = translator(desc, cfg)
    logger.debug("described %s rule: %s", desc.kind, text)
    return text


def describe_rule(
    rule: RuleJson | Mapping[str, Any],
    tz: str,
    unit: UnixTimeUnit | None = None,
    cfg: DescribeConfig | Mapping[str, Any] | None = None,
) -> str:
    """Compile a JSON rule in *tz* and describe it.

    *unit* defaults to milliseconds when omitted.
    """
    return describe_compiled_rule(compile_rule(rule, tz, unit), cfg)


__all__ = [
    "DescribeConfig",
    "DescribeTranslator",
    "StrictEnTranslator",
    "build_rule_descriptor",
    "describe_compiled_rule",
    "describe_rule",
    "resolve_config",
    "strict_en_translator",
]
