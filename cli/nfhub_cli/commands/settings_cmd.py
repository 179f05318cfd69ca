from __future__ import annotations

import os

import typer

from .. import console
from ..config import (
    config_path,
    default_config,
    load_config,
    normalize_environment,
    resolve_environment,
    save_config,
)

app = typer.Typer(help="Manage local CLI settings (~/.config/nfhub/config.toml).")

KEYS = ("environment", "token", "debug", "upload", "decode", "timeout_s")


def _checked_environment(value: str) -> str:
    environment = normalize_environment(value)
    if not environment:
        console.err(f"Unknown environment '{value}'. Use production, local, sandbox or dusk (or 1-4).")
        raise typer.Exit(code=2)
    return environment


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        token: str = typer.Option(..., "--token", prompt="API token", hide_input=True, help="NFHub API token."),
        environment: str = typer.Option("sandbox", "--environment", "-e", help="production, local, sandbox or dusk."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.environment = _checked_environment(environment)
    cfg.auth.token = token.strip()
    if not cfg.auth.token:
        console.err("Token cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    token_state = "(set)" if (cfg.auth.token or "").strip() else "(empty)"
    console.console.print(
        f"environment={resolve_environment(cfg)} token={token_state} debug={cfg.debug} "
        f"upload={cfg.upload} decode={cfg.decode} timeout_s={cfg.timeout_s}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(KEYS)})."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "token":
        console.console.print("(set)" if cfg.auth.token else "(empty)")
        return
    if k == "environment":
        console.console.print(resolve_environment(cfg))
        return
    if k in KEYS:
        console.console.print(str(getattr(cfg, k)))
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        token: str | None = typer.Option(None, "--token", help="Set API token."),
        environment: str | None = typer.Option(None, "--environment", "-e", help="Set API environment."),
        debug: bool | None = typer.Option(None, "--debug/--no-debug", help="Attach request diagnostics."),
        upload: bool | None = typer.Option(None, "--upload/--no-upload", help="Send bodies as multipart forms."),
        decode: bool | None = typer.Option(None, "--decode/--no-decode", help="Decode JSON responses."),
        timeout_s: float | None = typer.Option(None, "--timeout", min=0.1, help="Request timeout in seconds."),
):
    cfg = load_config()
    if token is not None:
        cfg.auth.token = token.strip()
    if environment is not None:
        cfg.environment = _checked_environment(environment)
    if debug is not None:
        cfg.debug = debug
    if upload is not None:
        cfg.upload = upload
    if decode is not None:
        cfg.decode = decode
    if timeout_s is not None:
        cfg.timeout_s = timeout_s
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
