from __future__ import annotations

from pathlib import Path

import typer

from ..config import load_config
from ..formatting import emit
from ..http import make_client
from ..inputs import load_body, parse_params

app = typer.Typer(help="Accountant access to company invoices.")

INVOICE_COLUMNS = ["id", "number", "series", "issued_at", "total", "status"]


@app.command("permissions")
def show_permissions(
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
        cpfcnpj: str = typer.Option(..., "--cpfcnpj", help="Accountant CPF/CNPJ."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.accountant_permissions_get(company_id, cpfcnpj, parse_params(param))
    finally:
        client.close()
    emit(result, action="fetch accountant permissions", json_out=json_out)


@app.command("set-permissions")
def set_permissions(
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
        data: str | None = typer.Option(None, "--data", help="Permissions JSON object."),
        data_file: Path | None = typer.Option(None, "--data-file", help="File holding the permissions JSON."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    body = load_body(data, data_file)
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.accountant_permissions_update(company_id, body, parse_params(param))
    finally:
        client.close()
    emit(result, action="update accountant permissions", json_out=json_out)


@app.command("invoices")
def list_invoices(
        cpfcnpj: str = typer.Option(..., "--cpfcnpj", help="Accountant CPF/CNPJ."),
        company_cpfcnpj: str = typer.Option(..., "--company-cpfcnpj", help="Company CPF/CNPJ."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.accountant_invoices_list(cpfcnpj, company_cpfcnpj, parse_params(param))
    finally:
        client.close()
    emit(result, action="list invoices", json_out=json_out, title="Invoices", columns=INVOICE_COLUMNS)
