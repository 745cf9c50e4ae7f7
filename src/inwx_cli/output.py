"""
CLI Output

Table and JSON rendering of results.
"""

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any, Dict, List

import click


def print_error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)


def print_success(message: str) -> None:
    click.secho(message, fg="green")


def print_info(message: str) -> None:
    click.secho(message, fg="cyan")


def _to_plain(data: Any) -> Any:
    """Convert dataclasses (possibly nested in lists) to dicts."""
    if is_dataclass(data) and not isinstance(data, type):
        return asdict(data)
    if isinstance(data, (list, tuple)):
        return [_to_plain(item) for item in data]
    return data


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, list):
        return ", ".join(_format_cell(v) for v in value)
    if isinstance(value, dict):
        return ", ".join(f"{k}={_format_cell(v)}" for k, v in value.items())
    return str(value)


class OutputFormatter:
    """
    Renders command results.

    Formats:
        table: aligned key/value pairs or columns
        json: JSON document on stdout
    """

    def __init__(self, format: str = "table", quiet: bool = False):
        self.format = format
        self.quiet = quiet

    def output(self, data: Any) -> None:
        """Render a dataclass, dict or list of them."""
        plain = _to_plain(data)

        if self.format == "json":
            click.echo(json.dumps(plain, indent=2, default=_json_default))
            return

        if isinstance(plain, list):
            self._output_rows(plain)
        elif isinstance(plain, dict):
            self._output_mapping(plain)
        else:
            click.echo(_format_cell(plain))

    def success(self, message: str) -> None:
        if not self.quiet:
            print_success(message)

    def info(self, message: str) -> None:
        # Keep JSON output machine-readable
        if not self.quiet and self.format != "json":
            print_info(message)

    def _output_mapping(self, data: Dict[str, Any]) -> None:
        if not data:
            return
        width = max(len(str(key)) for key in data)
        for key, value in data.items():
            click.echo(f"{str(key):<{width}}  {_format_cell(value)}")

    def _output_rows(self, rows: List[Any]) -> None:
        if not rows:
            if not self.quiet:
                click.echo("(no results)")
            return

        if not all(isinstance(row, dict) for row in rows):
            for row in rows:
                click.echo(_format_cell(row))
            return

        columns = list(rows[0].keys())
        cells = [[_format_cell(row.get(col)) for col in columns] for row in rows]
        widths = [
            max(len(col), *(len(line[i]) for line in cells))
            for i, col in enumerate(columns)
        ]

        click.echo("  ".join(col.upper().ljust(w) for col, w in zip(columns, widths)).rstrip())
        for line in cells:
            click.echo("  ".join(cell.ljust(w) for cell, w in zip(line, widths)).rstrip())


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)
