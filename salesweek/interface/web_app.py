"""Mini README: FastAPI JSON surface over the weekly sales ledger.

Structure:
    * create_application - application factory wiring the ledger routes.
    * Serialisation helpers - turn transactions and week buckets into JSON.

Routes mirror the collaborator contracts: add (form post), list/search,
delete after confirmation on the client side, weekly view with the
current-week flag, and the current-week summary. Rendering, dialogs and
notifications remain the client's responsibility.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..ledger import LedgerStore, SalesLedger, Transaction, WeekSummary, week_range
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def _transaction_payload(transaction: Transaction) -> Dict[str, object]:
    return transaction.as_record()


def _listed_transaction_payload(transaction: Transaction) -> Dict[str, object]:
    """Transaction record plus the Saturday-to-Friday week it belongs to."""

    start, end = week_range(transaction.occurred_on)
    payload = transaction.as_record()
    payload["week_start"] = start.isoformat()
    payload["week_end"] = end.isoformat()
    return payload


def _summary_payload(summary: WeekSummary) -> Dict[str, object]:
    return {
        "week_start": summary.start.isoformat(),
        "week_end": summary.end.isoformat(),
        "total": summary.total,
        "count": summary.count,
    }


def create_application(ledger: Optional[SalesLedger] = None) -> FastAPI:
    """Create the FastAPI application around ``ledger`` (or the configured slot)."""

    app = FastAPI(title="Weekly Sales Ledger", version="0.1.0")
    if ledger is None:
        settings = get_settings()
        ledger = SalesLedger(LedgerStore(settings.storage_path))
    app.state.ledger = ledger

    @app.get("/transactions")
    async def list_transactions(term: Optional[str] = None) -> JSONResponse:
        """Return transactions matching ``term`` newest first, with their total."""

        result = ledger.list(term)
        LOGGER.debug("Search term=%r matched %s of %s", term, result.count, result.ledger_size)
        return JSONResponse(
            {
                "transactions": [_listed_transaction_payload(item) for item in result.transactions],
                "total": result.total,
                "count": result.count,
                "ledger_size": result.ledger_size,
            }
        )

    @app.post("/transactions")
    async def add_transaction(
        date: Optional[str] = Form(None),
        amount: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Record a sale or reject it with a human-readable reason."""

        outcome = ledger.add(date, amount, description)
        if not outcome.accepted:
            raise HTTPException(
                status_code=400,
                detail={"reason": outcome.reason, "message": outcome.message},
            )
        return JSONResponse(
            {
                "transaction": _transaction_payload(outcome.transaction),
                "persisted": outcome.persisted,
            },
            status_code=201,
        )

    @app.delete("/transactions/{transaction_id}")
    async def delete_transaction(transaction_id: str) -> JSONResponse:
        """Remove a transaction; unknown identifiers leave the ledger unchanged."""

        outcome = ledger.delete(transaction_id)
        return JSONResponse(
            {
                "removed": outcome.removed,
                "persisted": outcome.persisted,
                "transactions": [_transaction_payload(item) for item in outcome.transactions],
            }
        )

    @app.get("/weeks")
    async def weekly_view() -> JSONResponse:
        """Return week buckets, most recent first, flagging the current week."""

        weeks = [
            {
                "week_start": entry.bucket.week_start.isoformat(),
                "week_end": entry.bucket.week_end.isoformat(),
                "total": entry.bucket.total,
                "count": entry.bucket.transaction_count,
                "is_current_week": entry.is_current,
                "transactions": [_transaction_payload(item) for item in entry.bucket.transactions],
            }
            for entry in ledger.weekly_view()
        ]
        return JSONResponse({"weeks": weeks})

    @app.get("/summary/current-week")
    async def current_week() -> JSONResponse:
        """Return the current week's range, total and transaction count."""

        return JSONResponse(_summary_payload(ledger.current_week()))

    return app
