"""Main entry point for the rrdescribe CLI."""

import typer

from rrdescribe import __version__
from rrdescribe.commands import config, describe_command, frequencies_command
from rrdescribe.utils.ui.console import get_console

app = typer.Typer(
    name="rrdescribe",
    help="Describe recurrence rules in plain English",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(config.app, name="config", help="Configuration management")

# Top-level commands
app.command("describe")(describe_command.describe)
app.command("frequencies")(frequencies_command.frequencies)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]rrdescribe[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Entry point for console_scripts."""
    app()


if __name__ == "__main__":
    main()
