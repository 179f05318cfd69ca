from __future__ import annotations

import typer
from nfhub_client import NfhubClient
from nfhub_client.config_types import ClientConfig, Environment

from . import console
from .config import AppConfig, resolve_environment, resolve_token


def make_client(
    cfg: AppConfig,
    *,
    environment_override: str | None = None,
    token_override: str | None = None,
) -> NfhubClient:
    environment = Environment.parse(environment_override or resolve_environment(cfg))
    if environment is None:
        console.err(f"Unknown environment '{environment_override}'. Use production, local, sandbox or dusk.")
        raise typer.Exit(code=2)
    return NfhubClient(
        ClientConfig(
            token=token_override or resolve_token(cfg),
            environment=environment,
            debug=cfg.debug,
            upload=cfg.upload,
            decode=cfg.decode,
            timeout_s=cfg.timeout_s,
        )
    )
