from __future__ import annotations

import typer

from .commands import (
    accountant_cmd,
    banks_cmd,
    categories_cmd,
    certificates_cmd,
    companies_cmd,
    customers_cmd,
    installments_cmd,
    settings_cmd,
)
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="nfhub",
        help="NFHub fiscal API CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(companies_cmd.app, name="companies")
    app.add_typer(customers_cmd.app, name="customers")
    app.add_typer(installments_cmd.app, name="installments")
    app.add_typer(accountant_cmd.app, name="accountant")
    app.add_typer(banks_cmd.app, name="banks")
    app.add_typer(categories_cmd.app, name="categories")
    app.add_typer(certificates_cmd.app, name="certificates")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
