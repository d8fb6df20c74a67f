"""Command 'describe' of rrdescribe"""

import json
import sys
from pathlib import Path
from typing import Literal

import typer
from pydantic import ValidationError

from rrdescribe.compile import RuleCompileError, compile_rule
from rrdescribe.describe import build_rule_descriptor, describe_compiled_rule
from rrdescribe.services.config_service import get_config_service
from rrdescribe.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from rrdescribe.utils.ui.console import get_console

from .decorators import AppError, command_wrapper

app = typer.Typer()
console = get_console()


def read_rule(rule_file: str) -> dict:
    """Load a JSON rule from a path, or from stdin when *rule_file* is '-'."""
    try:
        if rule_file == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(rule_file).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise AppError(f"Rule file not found: {rule_file}", ERROR_NOT_FOUND) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise AppError(f"Rule is not valid JSON: {e}", ERROR_INVALID_ARGS) from e
    if not isinstance(data, dict):
        raise AppError("Rule must be a JSON object", ERROR_INVALID_ARGS)
    return data


@app.command()
@command_wrapper
def describe(
    rule_file: str = typer.Argument(..., help="Path to a JSON rule, or '-' for stdin"),
    tz: str | None = typer.Option(None, "--tz", help="IANA time zone of the rule"),
    unit: str | None = typer.Option(None, "--unit", help="Epoch unit: ms or s"),
    show_timezone: bool | None = typer.Option(
        None, "--show-timezone/--hide-timezone", help="Append the time zone label"
    ),
    show_bounds: bool | None = typer.Option(
        None, "--show-bounds/--hide-bounds", help="Append 'from ... until ...'"
    ),
    bounds_format: str | None = typer.Option(
        None, "--bounds-format", help="CLDR pattern for bounds (e.g. 'yyyy-LL-dd')"
    ),
    limits: str | None = typer.Option(
        None, "--limits", help="none, date_only, count_only or date_and_count"
    ),
    time_format: str | None = typer.Option(None, "--time-format", help="hm, hms or auto"),
    hour_cycle: str | None = typer.Option(None, "--hour-cycle", help="h23 or h12"),
    locale: str | None = typer.Option(None, "--locale", help="Locale for month/weekday names"),
    ordinals: str | None = typer.Option(None, "--ordinals", help="long or short"),
    lowercase: bool | None = typer.Option(
        None, "--lowercase/--no-lowercase", help="Lowercase month/weekday names"
    ),
    output: Literal["text", "json"] = typer.Option(
        "text", "--output", "-o", help="Output format: text or json"
    ),
) -> None:
    """Describe a recurrence rule in plain English."""
    settings = get_config_service().config
    rule = read_rule(rule_file)

    try:
        cfg = settings.describe.to_describe_config(
            show_timezone=show_timezone,
            show_bounds=show_bounds,
            bounds_format=bounds_format,
            limits=limits,
            time_format=time_format,
            hour_cycle=hour_cycle,
            locale=locale,
            ordinals=ordinals,
            lowercase=lowercase,
        )
    except ValidationError as e:
        raise AppError(f"Invalid option: {e}", ERROR_INVALID_ARGS) from e

    try:
        compiled = compile_rule(rule, tz or settings.rule.timezone, unit or settings.rule.unit)
    except RuleCompileError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e

    text = describe_compiled_rule(compiled, cfg)

    if output == "json":
        descriptor = build_rule_descriptor(compiled)
        payload = {"description": text, "descriptor": descriptor.model_dump(mode="json")}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        console.print(text, markup=False, highlight=False, soft_wrap=True)
