from __future__ import annotations

import typer

from ..config import load_config
from ..formatting import emit
from ..http import make_client
from ..inputs import parse_params

app = typer.Typer(help="Financial categories of a company.")

COLUMNS = ["id", "name", "type"]


@app.command("list")
def list_categories(
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
        cpfcnpj: str = typer.Option(..., "--cpfcnpj", help="Company CPF/CNPJ."),
        filter_: str = typer.Option("", "--filter", "-f", help="Search text."),
        category_id: int | None = typer.Option(None, "--id", help="Only this category."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.categories_list(company_id, cpfcnpj, filter_, category_id, parse_params(param))
    finally:
        client.close()
    emit(result, action="list categories", json_out=json_out, title="Categories", columns=COLUMNS)
