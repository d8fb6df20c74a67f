"""Output formatters for the rrdescribe CLI."""

from __future__ import annotations

import json
from typing import Any

from rich.table import Table

from .console import get_console

console = get_console()


def format_output(data: Any, output_format: str = "text") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif isinstance(data, dict):
        format_mapping(data)
    elif isinstance(data, list):
        format_table(data)
    else:
        console.print(data, highlight=False)


def format_mapping(data: dict[str, Any], title: str | None = None) -> None:
    """Display a flat or nested mapping as a two-column table."""
    table = Table(title=title, show_header=False, box=None, pad_edge=False)
    table.add_column("key", style="cyan", no_wrap=True)
    table.add_column("value")
    for key, value in _flatten(data):
        table.add_row(key, "" if value is None else str(value))
    console.print(table)


def format_table(rows: list[dict[str, Any]], title: str | None = None) -> None:
    """Display a list of dicts as a table using the first row's keys."""
    if not rows:
        console.print("[yellow]Nothing to show[/yellow]")
        return
    table = Table(title=title)
    columns = list(rows[0].keys())
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for row in rows:
        table.add_row(*(str(row.get(col, "")) for col in columns))
    console.print(table)


def _flatten(data: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    items: list[tuple[str, Any]] = []
    for key, value in data.items():
        full = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            items.extend(_flatten(value, full))
        else:
            items.append((full, value))
    return items


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")
