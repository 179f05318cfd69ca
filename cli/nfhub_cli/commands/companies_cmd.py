from __future__ import annotations

from pathlib import Path

import typer
from nfhub_client import Err

from .. import console
from ..config import load_config
from ..formatting import emit, fail
from ..http import make_client
from ..inputs import load_body, parse_params

app = typer.Typer(help="Companies registered in NFHub.")

COLUMNS = ["id", "name", "cnpj", "email"]


@app.command("get")
def get_company(
        cnpj: str = typer.Option("", "--cnpj", help="Company CNPJ (omit to list all)."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.company_get(cnpj, parse_params(param))
    finally:
        client.close()
    emit(result, action="fetch company", json_out=json_out, title="Companies", columns=COLUMNS)


@app.command("create")
def create_company(
        data: str | None = typer.Option(None, "--data", help="Company JSON object."),
        data_file: Path | None = typer.Option(None, "--data-file", help="File holding the company JSON."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    body = load_body(data, data_file)
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.company_create(body, parse_params(param))
    finally:
        client.close()
    emit(result, action="create company", json_out=json_out)


@app.command("update")
def update_company(
        company_id: int = typer.Argument(..., help="NFHub company id."),
        data: str | None = typer.Option(None, "--data", help="Fields to update as JSON."),
        data_file: Path | None = typer.Option(None, "--data-file", help="File holding the JSON."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    body = load_body(data, data_file)
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.company_update(company_id, body, parse_params(param))
    finally:
        client.close()
    emit(result, action="update company", json_out=json_out)


@app.command("delete")
def delete_company(
        company_id: int = typer.Argument(..., help="NFHub company id."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    if not yes and not typer.confirm(f"Delete company {company_id}?", default=False):
        console.info("Aborted.")
        raise typer.Exit(code=0)

    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.company_delete(company_id)
    finally:
        client.close()
    if isinstance(result, Err):
        fail(result, "delete company")
    if json_out:
        emit(result, action="delete company", json_out=True)
        return
    console.ok(f"Company {company_id} deleted.")
