"""Mini README: Entry point CLI for the weekly sales ledger.

This script exposes a Typer CLI that starts the FastAPI JSON API with
configurable host, port and production flags, and prints the current
Saturday-to-Friday summary straight from the configured storage slot.
Settings come from ``SALESWEEK_`` environment variables when available.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import typer
import uvicorn

from salesweek.configuration import get_settings
from salesweek.ledger import LedgerStore, SalesLedger
from salesweek.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and query the weekly sales ledger.")


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
    configure_root_logger(settings.log_level)

    # 0.0.0.0 is a bind address only; point browsers and clients at localhost.
    client_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting sales ledger API on {effective_host}:{effective_port}.\n"
        f"Storage slot: {settings.storage_path}\n"
        f"API root: http://{client_host}:{effective_port}/transactions"
    )
    uvicorn.run(
        "salesweek.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary(
    today: Optional[str] = typer.Option(
        None, help="ISO date to treat as today (defaults to the system date)."
    ),
) -> None:
    """Print the current week's total and transaction count."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    reference = date.fromisoformat(today) if today else date.today()
    ledger = SalesLedger(LedgerStore(settings.storage_path), today=lambda: reference)
    current = ledger.current_week()
    typer.echo(
        f"Week {current.start.isoformat()} to {current.end.isoformat()}: "
        f"{current.count} transactions totalling {current.total:,.2f}"
    )


if __name__ == "__main__":
    cli()
