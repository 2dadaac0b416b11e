"""Mini README: Coordinating layer owning the sales ledger.

Structure:
    * AddOutcome / DeleteOutcome - pass/fail results returned to callers.
    * SearchResult - filtered transactions with their total and count.
    * WeeklyEntry - week bucket paired with its current-week flag.
    * SalesLedger - loads the slot, applies mutations, persists after each.

``SalesLedger`` is the only writer of its store. Every mutation is applied to
the in-memory ledger and then saved synchronously before the call returns. A
failed write is logged and reported through ``persisted=False``; the
in-memory ledger keeps the mutation and the next successful save catches the
slot up. Until then no outcome reports the ledger as persisted, not even a
no-op delete.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional, Tuple

from ..logging_utils import get_logger
from . import aggregator
from .models import Transaction, TransactionValidationError, WeekBucket, WeekSummary
from .store import LedgerStorageError, LedgerStore, add_transaction, remove_transaction

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AddOutcome:
    """Result of an add request."""

    accepted: bool
    transaction: Optional[Transaction] = None
    reason: Optional[str] = None
    message: Optional[str] = None
    persisted: bool = False


@dataclass(frozen=True, slots=True)
class DeleteOutcome:
    """Result of a delete request, carrying the ledger after the call."""

    removed: bool
    transactions: Tuple[Transaction, ...]
    persisted: bool


@dataclass(frozen=True, slots=True)
class SearchResult:
    transactions: Tuple[Transaction, ...]
    total: float
    count: int
    ledger_size: int


@dataclass(frozen=True, slots=True)
class WeeklyEntry:
    bucket: WeekBucket
    is_current: bool


class SalesLedger:
    """Own the transaction list and keep it consistent with its store."""

    def __init__(
        self,
        store: LedgerStore,
        *,
        today: Callable[[], date] = date.today,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._store = store
        self._today = today
        self._factory_kwargs = {}
        if id_factory is not None:
            self._factory_kwargs["id_factory"] = id_factory
        if clock is not None:
            self._factory_kwargs["clock"] = clock
        self._transactions: List[Transaction] = store.load()
        self._unsaved = False
        LOGGER.info("Sales ledger initialised with %s transactions", len(self._transactions))

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Transactions ordered newest-created first."""

        return tuple(self._transactions)

    def _persist(self) -> bool:
        try:
            self._store.save(self._transactions)
        except LedgerStorageError as error:
            LOGGER.error("Ledger change kept in memory but not persisted: %s", error)
            self._unsaved = True
            return False
        self._unsaved = False
        return True

    def add(self, date: object, amount: object, description: object) -> AddOutcome:
        """Validate and record a sale, persisting the updated ledger."""

        try:
            transaction, updated = add_transaction(
                self._transactions,
                date=date,
                amount=amount,
                description=description,
                **self._factory_kwargs,
            )
        except TransactionValidationError as error:
            LOGGER.info("Rejected transaction (%s)", error.reason)
            return AddOutcome(accepted=False, reason=error.reason, message=error.message)

        self._transactions = updated
        persisted = self._persist()
        LOGGER.info(
            "Recorded transaction %s for %s (%.2f)",
            transaction.transaction_id,
            transaction.occurred_on.isoformat(),
            transaction.amount,
        )
        return AddOutcome(accepted=True, transaction=transaction, persisted=persisted)

    def delete(self, transaction_id: str) -> DeleteOutcome:
        """Remove a transaction by identifier; unknown identifiers are a no-op."""

        updated = remove_transaction(self._transactions, transaction_id)
        if len(updated) == len(self._transactions):
            LOGGER.debug("Delete ignored for unknown transaction %s", transaction_id)
            return DeleteOutcome(removed=False, transactions=self.transactions, persisted=not self._unsaved)

        self._transactions = updated
        persisted = self._persist()
        LOGGER.info("Deleted transaction %s", transaction_id)
        return DeleteOutcome(removed=True, transactions=self.transactions, persisted=persisted)

    def list(self, term: Optional[str] = None) -> SearchResult:
        """Return the transactions matching ``term`` with their total."""

        matches = aggregator.search(self._transactions, term)
        return SearchResult(
            transactions=tuple(matches),
            total=aggregator.total(matches),
            count=len(matches),
            ledger_size=len(self._transactions),
        )

    def weekly_view(self) -> List[WeeklyEntry]:
        """Week buckets, most recent first, flagged when they are the current week."""

        return [
            WeeklyEntry(bucket=bucket, is_current=is_current)
            for bucket, is_current in aggregator.weekly_view(self._transactions, self._today())
        ]

    def current_week(self) -> WeekSummary:
        """Summary of the week containing today, recomputed on every call."""

        return aggregator.current_week_summary(self._transactions, self._today())
