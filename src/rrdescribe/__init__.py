"""rrdescribe: plain-language descriptions of recurrence rules."""

from rrdescribe.compile import RuleCompileError, compile_rule
from rrdescribe.describe import (
    DescribeConfig,
    DescribeTranslator,
    StrictEnTranslator,
    build_rule_descriptor,
    describe_compiled_rule,
    describe_rule,
)

__version__ = "0.4.0"

__all__ = [
    "__version__",
    "DescribeConfig",
    "DescribeTranslator",
    "RuleCompileError",
    "StrictEnTranslator",
    "build_rule_descriptor",
    "compile_rule",
    "describe_compiled_rule",
    "describe_rule",
]
