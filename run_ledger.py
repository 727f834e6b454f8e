"""Mini README: Entry point CLI for Home Ledger.

This script exposes a Typer CLI that starts the FastAPI page under uvicorn
with configurable host, port and production flags, and prints the ledger's
totals from the terminal. Settings come from ``HOMELEDGER_*`` environment
variables when available.
"""

from __future__ import annotations

import typer
import uvicorn

from homeledger.configuration import get_settings
from homeledger.ledger import DisplayFormat, JsonFileStorage, LedgerStore, format_currency, summarize
from homeledger.logging_utils import configure_root_logger, level_for_environment

cli = typer.Typer(help="Launch and inspect the Home Ledger web page.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # Browsers cannot open the 0.0.0.0 wildcard, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Home Ledger on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "homeledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print income, expense and balance totals for the stored ledger."""

    settings = get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    store = LedgerStore(JsonFileStorage(settings.storage_file), settings.storage_key)
    totals = summarize(store.snapshot())
    display = DisplayFormat.from_settings(settings)
    typer.echo(f"Transactions: {len(store)}")
    typer.echo(f"Income:       {format_currency(totals.total_income, display)}")
    typer.echo(f"Expenses:     {format_currency(totals.total_expense, display)}")
    typer.echo(f"Balance:      {format_currency(totals.balance, display)}")


if __name__ == "__main__":
    cli()
