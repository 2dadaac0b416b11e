"""Mini README: Data model for recorded sales and their weekly views.

Structure:
    * TransactionValidationError - rejection carrying a human-readable reason.
    * Transaction - immutable sales event with its serialised record form.
    * validate_draft - normalises raw ``date``/``amount``/``description`` input.
    * WeekBucket - derived Saturday-to-Friday grouping with its total.
    * WeekSummary - total and count for a single week range.

Records use the field names of the durable slot (``id``, ``date``,
``amount``, ``description``, ``createdAt``) so stored payloads stay readable
by every client of the slot.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Tuple

MISSING_FIELD = "missing field"
INVALID_AMOUNT = "invalid amount"
INVALID_DATE = "invalid date"

_REASON_MESSAGES = {
    MISSING_FIELD: "Please fill in all fields",
    INVALID_AMOUNT: "Please enter a valid amount greater than 0",
    INVALID_DATE: "Please enter the date as YYYY-MM-DD",
}


class TransactionValidationError(ValueError):
    """Raised when add input cannot become a transaction."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        self.message = _REASON_MESSAGES.get(reason, reason)
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single sales event."""

    transaction_id: str
    occurred_on: date
    amount: float
    description: str
    created_at: datetime

    def __post_init__(self) -> None:
        if (
            isinstance(self.amount, bool)
            or not isinstance(self.amount, (int, float))
            or not math.isfinite(self.amount)
            or self.amount <= 0
        ):
            raise ValueError(f"Transaction {self.transaction_id} must have a positive amount.")

    def as_record(self) -> Dict[str, object]:
        """Export the transaction using the storage slot field names."""

        return {
            "id": self.transaction_id,
            "date": self.occurred_on.isoformat(),
            "amount": self.amount,
            "description": self.description,
            "createdAt": _format_instant(self.created_at),
        }

    @classmethod
    def from_record(cls, record: Dict[str, object]) -> "Transaction":
        """Rebuild a transaction from a stored record.

        Raises ``ValueError`` (or ``KeyError``/``TypeError``) for records that
        are incomplete or violate the model's invariants.
        """

        amount = record["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValueError(f"Stored amount {amount!r} is not a number.")
        description = str(record["description"]).strip()
        if not description:
            raise ValueError("Stored description is empty.")
        return cls(
            transaction_id=str(record["id"]),
            occurred_on=date.fromisoformat(str(record["date"])),
            amount=float(amount),
            description=description,
            created_at=_parse_instant(str(record["createdAt"])),
        )


def _format_instant(value: datetime) -> str:
    """Render an instant as UTC ISO-8601 with millisecond precision."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _parse_instant(value: str) -> datetime:
    """Parse ISO instants, accepting the ``Z`` suffix for UTC."""

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as error:
        raise TransactionValidationError(INVALID_DATE) from error


def _parse_amount(value: object) -> float:
    if isinstance(value, bool):
        raise TransactionValidationError(INVALID_AMOUNT)
    try:
        amount = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError) as error:
        raise TransactionValidationError(INVALID_AMOUNT) from error
    if not math.isfinite(amount) or amount <= 0:
        raise TransactionValidationError(INVALID_AMOUNT)
    return amount


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_draft(
    occurred_on: object, amount: object, description: object
) -> Tuple[date, float, str]:
    """Normalise raw add input, raising ``TransactionValidationError`` on rejection.

    Missing fields are reported before amount or date problems so callers see
    the same reason regardless of which other fields are malformed.
    """

    if _is_blank(occurred_on) or _is_blank(amount) or _is_blank(description):
        raise TransactionValidationError(MISSING_FIELD)
    parsed_amount = _parse_amount(amount)
    parsed_date = _parse_date(occurred_on)
    return parsed_date, parsed_amount, str(description).strip()


@dataclass(slots=True)
class WeekBucket:
    """Transactions sharing a Saturday week start, with their summed amount."""

    week_start: date
    transactions: List[Transaction] = field(default_factory=list)
    total: float = 0.0

    @property
    def week_end(self) -> date:
        return self.week_start + timedelta(days=6)

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)

    def contains(self, day: date) -> bool:
        return self.week_start <= day <= self.week_end


@dataclass(frozen=True, slots=True)
class WeekSummary:
    """Total and count of the transactions dated inside ``[start, end]``."""

    start: date
    end: date
    total: float
    count: int
