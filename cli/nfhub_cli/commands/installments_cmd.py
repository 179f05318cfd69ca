from __future__ import annotations

from pathlib import Path

import typer

from ..config import load_config
from ..formatting import emit
from ..http import make_client
from ..inputs import load_body, parse_params

app = typer.Typer(help="Billing installments (accounts payable/receivable).")


@app.command("create")
def create_installment(
        company_id: int = typer.Option(..., "--company-id", "-c", help="NFHub company id."),
        data: str | None = typer.Option(None, "--data", help="Installment JSON object."),
        data_file: Path | None = typer.Option(None, "--data-file", help="File holding the installment JSON."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    body = load_body(data, data_file)
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    try:
        result = client.installment_create(company_id, body, parse_params(param))
    finally:
        client.close()
    emit(result, action="create installment", json_out=json_out)
