"""Output formatting for CLI commands."""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


def to_data(value: Any) -> Any:
    """Turn models (or lists of them) into JSON-ready dicts, dropping None fields."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [to_data(item) for item in value]
    return value


def print_output(
    data: Any,
    fmt: OutputFormat = OutputFormat.TABLE,
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print a model, list of models, dict or list of dicts in the requested format.

    Args:
        data: The data to display.
        fmt: Output format (table, json).
        columns: Which columns to show in table mode. None = all.
        title: Optional title for table output.
    """
    data = to_data(data)
    if fmt == OutputFormat.JSON:
        print_json(data)
    else:
        print_table(data, columns, title)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    json.dump(data, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def print_table(
    data: list[dict[str, Any]] | dict[str, Any],
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print data as a Rich table."""
    if isinstance(data, dict):
        data = [data]

    if not data:
        console.print("[dim]No results.[/dim]")
        return

    if columns is None:
        columns = list(data[0].keys())

    table = Table(title=title, show_lines=False)
    for col in columns:
        table.add_column(col, overflow="fold")

    for row in data:
        table.add_row(*[_cell(row.get(col)) for col in columns])

    console.print(table)
