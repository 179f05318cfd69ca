from __future__ import annotations

from typing import Any

import typer
from nfhub_client import Err, Raw, Result
from rich.table import Table

from . import console


def extract_rows(value: Any) -> list[dict] | None:
    """List payloads come bare or wrapped in {"data": [...]}."""
    if isinstance(value, dict):
        value = value.get("data")
    if isinstance(value, list) and all(isinstance(item, dict) for item in value):
        return value
    return None


def format_cell(value: Any) -> str:
    if value is None or value == "":
        return "-"
    return str(value)


def render_table(title: str, rows: list[dict], columns: list[str]) -> Table:
    table = Table(title=title)
    for i, col in enumerate(columns):
        table.add_column(col, style="bold" if i == 0 else None)
    for row in rows:
        table.add_row(*(format_cell(row.get(col)) for col in columns))
    return table


def fail(error: Err, action: str) -> None:
    console.err(f"Failed to {action}: {error.message}")
    raise typer.Exit(code=2)


def emit(
        result: Result,
        *,
        action: str,
        json_out: bool = False,
        title: str | None = None,
        columns: list[str] | None = None,
) -> None:
    if isinstance(result, Err):
        fail(result, action)
        return

    envelope = result.value
    if json_out:
        console.print_json(envelope.to_dict())
        return
    if isinstance(envelope.body, Raw):
        typer.echo(envelope.body.text)
        return

    value = envelope.body.value
    rows = extract_rows(value) if columns else None
    if rows is not None:
        console.console.print(render_table(title or "", rows, columns))
        return
    console.print_json(value)
