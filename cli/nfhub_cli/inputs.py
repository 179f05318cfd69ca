from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from nfhub_client import QueryParam

from . import console


def parse_params(raw: list[str] | None) -> list[QueryParam]:
    """`--param name=value` options, in the order given."""
    params: list[QueryParam] = []
    for item in raw or []:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            console.err(f"Invalid --param '{item}', expected name=value.")
            raise typer.Exit(code=2)
        params.append(QueryParam(name.strip(), value))
    return params


def load_body(data: str | None, data_file: Path | None) -> dict[str, Any]:
    if data and data_file:
        console.err("Use either --data or --data-file, not both.")
        raise typer.Exit(code=2)
    if data_file is not None:
        try:
            data = data_file.read_text(encoding="utf-8")
        except OSError as exc:
            console.err(f"Cannot read {data_file}: {exc}")
            raise typer.Exit(code=2)
    if not data:
        return {}
    try:
        body = json.loads(data)
    except ValueError as exc:
        console.err(f"Body is not valid JSON: {exc}")
        raise typer.Exit(code=2)
    if not isinstance(body, dict):
        console.err("Body must be a JSON object.")
        raise typer.Exit(code=2)
    return body
