"""Mini README: Durable slot persistence and pure ledger transformations.

Structure:
    * LedgerStorageError - raised when the slot cannot be written.
    * LedgerStore - loads and overwrites the JSON slot holding the ledger.
    * add_transaction - validate input and prepend a new transaction.
    * remove_transaction - drop a transaction by identifier.

The slot always holds the complete collection, newest-created first. Loading
fails soft: a missing, unreadable or corrupt slot yields an empty ledger and
the next save replaces it. Repeated identifiers in a stored slot are
reassigned on load so a single delete never removes more than one sale.
``add_transaction`` and ``remove_transaction`` never touch storage; the
coordinating layer persists their results.
"""

from __future__ import annotations

import json
import os
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Sequence, Tuple, Union

from ..logging_utils import get_logger
from .models import Transaction, validate_draft

LOGGER = get_logger(__name__)


class LedgerStorageError(RuntimeError):
    """Raised when the ledger slot cannot be written."""


def _new_transaction_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    # Millisecond precision matches what the slot stores.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _with_unique_ids(transactions: List[Transaction]) -> List[Transaction]:
    """Give repeated identifiers a fresh one, keeping the first (newest) entry as is."""

    seen = set()
    unique: List[Transaction] = []
    for transaction in transactions:
        if transaction.transaction_id in seen:
            fresh_id = _new_transaction_id()
            LOGGER.warning(
                "Duplicate transaction id %s in ledger slot; reassigned to %s",
                transaction.transaction_id,
                fresh_id,
            )
            transaction = replace(transaction, transaction_id=fresh_id)
        seen.add(transaction.transaction_id)
        unique.append(transaction)
    return unique


class LedgerStore:
    """Read and overwrite a single JSON slot containing every transaction."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> List[Transaction]:
        """Return the persisted transactions, or an empty list if unusable."""

        if not self.path.exists():
            LOGGER.debug("No ledger slot at %s; starting empty", self.path)
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(payload, list):
                raise ValueError(f"Expected a JSON array, found {type(payload).__name__}")
            transactions = [Transaction.from_record(record) for record in payload]
        except (OSError, ValueError, KeyError, TypeError) as error:
            LOGGER.warning("Ignoring unreadable ledger slot %s: %s", self.path, error)
            return []
        transactions = _with_unique_ids(transactions)
        LOGGER.debug("Loaded %s transactions from %s", len(transactions), self.path)
        return transactions

    def save(self, transactions: Sequence[Transaction]) -> None:
        """Replace the slot contents with ``transactions``."""

        payload = json.dumps([transaction.as_record() for transaction in transactions], indent=2)
        temp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(payload, encoding="utf-8")
            os.replace(temp_path, self.path)
        except OSError as error:
            raise LedgerStorageError(f"Could not write ledger slot {self.path}: {error}") from error
        LOGGER.debug("Saved %s transactions to %s", len(transactions), self.path)


def add_transaction(
    transactions: Sequence[Transaction],
    *,
    date: object,
    amount: object,
    description: object,
    id_factory: Callable[[], str] = _new_transaction_id,
    clock: Callable[[], datetime] = _utc_now,
) -> Tuple[Transaction, List[Transaction]]:
    """Build a transaction from raw input and prepend it to ``transactions``.

    Raises ``TransactionValidationError`` before anything is created when the
    input is rejected.
    """

    occurred_on, parsed_amount, trimmed = validate_draft(date, amount, description)
    transaction_id = id_factory()
    if any(existing.transaction_id == transaction_id for existing in transactions):
        raise ValueError(f"Transaction {transaction_id} already exists.")
    transaction = Transaction(
        transaction_id=transaction_id,
        occurred_on=occurred_on,
        amount=parsed_amount,
        description=trimmed,
        created_at=clock(),
    )
    return transaction, [transaction, *transactions]


def remove_transaction(transactions: Sequence[Transaction], transaction_id: str) -> List[Transaction]:
    """Return ``transactions`` without the entry matching ``transaction_id``."""

    return [transaction for transaction in transactions if transaction.transaction_id != transaction_id]
