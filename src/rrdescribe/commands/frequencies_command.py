"""Command 'frequencies' of rrdescribe"""

from typing import Literal

import typer

from rrdescribe.describe.lexicon import to_frequency_options
from rrdescribe.utils.ui.formatters import format_output, format_table

from .decorators import command_wrapper

app = typer.Typer()


@app.command()
@command_wrapper
def frequencies(
    output: Literal["table", "json"] = typer.Option(
        "table", "--output", "-o", help="Output format: table or json"
    ),
) -> None:
    """List supported recurrence frequencies."""
    options = to_frequency_options()
    if output == "json":
        format_output(options, "json")
    else:
        format_table(options, title="Frequencies")
