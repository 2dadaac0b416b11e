"""Mini README: Shared fixtures for ledger tests.

Provides a ``make_transaction`` factory producing valid transactions with
sequential identifiers and creation instants so tests only spell out the
fields they care about.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from itertools import count
from typing import Callable

import pytest

from salesweek.ledger import Transaction


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Return a factory building transactions with unique identifiers."""

    sequence = count(1)
    base_instant = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)

    def _factory(
        occurred_on: date,
        amount: float = 100.0,
        description: str = "Sale",
    ) -> Transaction:
        number = next(sequence)
        return Transaction(
            transaction_id=f"txn_{number:04d}",
            occurred_on=occurred_on,
            amount=amount,
            description=description,
            created_at=base_instant + timedelta(minutes=number),
        )

    return _factory
