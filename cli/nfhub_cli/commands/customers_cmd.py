from __future__ import annotations

from pathlib import Path

import typer

from ..config import load_config
from ..formatting import emit
from ..http import make_client
from ..inputs import load_body, parse_params

app = typer.Typer(help="Customers of a company.")

COLUMNS = ["id", "name", "cpfcnpj", "email", "phone"]


@app.command("list")
def list_customers(
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.customers_list(company_id, parse_params(param))
    finally:
        client.close()
    emit(result, action="list customers", json_out=json_out, title="Customers", columns=COLUMNS)


@app.command("show")
def show_customer(
        customer_id: int = typer.Argument(..., help="NFHub customer id."),
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.customer_get(customer_id, company_id, parse_params(param))
    finally:
        client.close()
    emit(result, action="fetch customer", json_out=json_out)


@app.command("create")
def create_customer(
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
        data: str | None = typer.Option(None, "--data", help="Customer JSON object."),
        data_file: Path | None = typer.Option(None, "--data-file", help="File holding the customer JSON."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    body = load_body(data, data_file)
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.customer_create(company_id, body, parse_params(param))
    finally:
        client.close()
    emit(result, action="create customer", json_out=json_out)


@app.command("update")
def update_customer(
        customer_id: int = typer.Argument(..., help="NFHub customer id."),
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
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
        result = client.customer_update(customer_id, company_id, body, parse_params(param))
    finally:
        client.close()
    emit(result, action="update customer", json_out=json_out)
