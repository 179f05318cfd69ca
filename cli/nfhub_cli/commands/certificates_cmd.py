from __future__ import annotations

import json
import os
from pathlib import Path

import typer
from nfhub_client import Err, Raw

from .. import console
from ..config import load_config
from ..formatting import emit, fail
from ..http import make_client
from ..inputs import parse_params

app = typer.Typer(help="Digital certificates.")


def _pem_text(value) -> str:
    if isinstance(value, dict) and isinstance(value.get("pem"), str):
        return value["pem"]
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, indent=2)


@app.command("pem")
def certificate_pem(
        certificate_id: int = typer.Argument(..., help="NFHub certificate id."),
        out: Path | None = typer.Option(None, "--out", "-o", help="Write the PEM to this file (mode 0600)."),
        raw: bool = typer.Option(False, "--raw", help="Do not decode the response body."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Extra query parameter name=value."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Override environment."),
        json_out: bool = typer.Option(False, "--json", help="Print the full response envelope."),
):
    cfg = load_config()
    client = make_client(cfg, environment_override=environment)
    if raw:
        client.set_decode(False)
    try:
        result = client.certificate_pem_get(certificate_id, parse_params(param))
    finally:
        client.close()

    if out is None or json_out:
        emit(result, action="fetch certificate", json_out=json_out)
        return
    if isinstance(result, Err):
        fail(result, "fetch certificate")

    body = result.value.body
    text = body.text if isinstance(body, Raw) else _pem_text(body.value)
    out.write_text(text, encoding="utf-8")
    os.chmod(out, 0o600)
    console.ok(f"Certificate written: {out}")
