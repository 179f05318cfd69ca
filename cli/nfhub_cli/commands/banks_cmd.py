from __future__ import annotations

import typer

from ..config import load_config
from ..formatting import emit
from ..http import make_client
from ..inputs import parse_params

app = typer.Typer(help="Bank listings.")

COLUMNS = ["id", "code", "name"]


@app.command("list")
def list_banks(
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.banks_list(parse_params(param))
    finally:
        client.close()
    emit(result, action="list banks", json_out=json_out, title="Banks", columns=COLUMNS)


@app.command("company")
def list_company_banks(
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
        cpfcnpj: str = typer.Option(..., "--cpfcnpj", help="Company CPF/CNPJ."),
        filter_: str = typer.Option("", "--filter", "-f", help="Search text."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.company_banks_list(company_id, cpfcnpj, filter_, parse_params(param))
    finally:
        client.close()
    emit(result, action="list company banks", json_out=json_out, title="Company banks", columns=COLUMNS)
