"""Mini README: Transaction ledger and weekly aggregation engine.

The ledger package groups the data model, the durable slot store, the pure
Saturday-to-Friday aggregation helpers and the ``SalesLedger`` coordinator
that ties them together. Interfaces should depend on ``SalesLedger`` and the
aggregation helpers only; the store is an implementation detail of the
coordinator.
"""

from .aggregator import (
    current_week_range,
    current_week_summary,
    group_by_week,
    is_current_week,
    search,
    total,
    week_range,
    week_start,
)
from .models import Transaction, TransactionValidationError, WeekBucket, WeekSummary
from .service import AddOutcome, DeleteOutcome, SalesLedger, SearchResult, WeeklyEntry
from .store import LedgerStorageError, LedgerStore, add_transaction, remove_transaction

__all__ = [
    "AddOutcome",
    "DeleteOutcome",
    "LedgerStorageError",
    "LedgerStore",
    "SalesLedger",
    "SearchResult",
    "Transaction",
    "TransactionValidationError",
    "WeekBucket",
    "WeekSummary",
    "WeeklyEntry",
    "add_transaction",
    "current_week_range",
    "current_week_summary",
    "group_by_week",
    "is_current_week",
    "remove_transaction",
    "search",
    "total",
    "week_range",
    "week_start",
]
