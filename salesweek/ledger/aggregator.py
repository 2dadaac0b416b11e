"""Mini README: Saturday-to-Friday week aggregation over recorded sales.

Structure:
    * days_since_saturday / week_start / week_range - the week boundary rule.
    * current_week_range / is_current_week - the rule applied to "today".
    * group_by_week - partition transactions into descending WeekBuckets.
    * current_week_summary - total and count for the week containing today.
    * search / total - free text filtering and summation for list views.
    * weekly_view - buckets paired with their current-week flag.

Every function is a pure derivation from the sequence it receives; nothing
here mutates the ledger or caches results, so views are recomputed whenever
the ledger changes or the calendar moves on.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..logging_utils import get_logger
from .models import Transaction, WeekBucket, WeekSummary

LOGGER = get_logger(__name__)


def _weekday_index(day: date) -> int:
    """Weekday numbered from Sunday (0) to Saturday (6)."""

    return (day.weekday() + 1) % 7


def days_since_saturday(day: date) -> int:
    """Number of days between ``day`` and the most recent Saturday."""

    weekday = _weekday_index(day)
    return 1 if weekday == 0 else (weekday + 1) % 7


def week_start(day: date) -> date:
    """Return the Saturday opening the week that contains ``day``."""

    return day - timedelta(days=days_since_saturday(day))


def week_range(day: date) -> Tuple[date, date]:
    """Return the inclusive Saturday-to-Friday range containing ``day``."""

    start = week_start(day)
    return start, start + timedelta(days=6)


def current_week_range(today: date) -> Tuple[date, date]:
    """Apply the week boundary rule to ``today``."""

    return week_range(today)


def is_current_week(start: date, today: date) -> bool:
    """True when ``start`` is exactly the current week's Saturday."""

    return start == current_week_range(today)[0]


def total(transactions: Iterable[Transaction]) -> float:
    """Sum the amounts of ``transactions``; an empty input sums to 0."""

    return sum((transaction.amount for transaction in transactions), 0.0)


def group_by_week(transactions: Sequence[Transaction]) -> List[WeekBucket]:
    """Group transactions into non-empty weeks, most recent week first.

    Transactions inside a bucket are ordered by date descending; ties keep
    their ledger order.
    """

    buckets: Dict[date, WeekBucket] = {}
    for transaction in transactions:
        start = week_start(transaction.occurred_on)
        bucket = buckets.get(start)
        if bucket is None:
            bucket = buckets[start] = WeekBucket(week_start=start)
        bucket.transactions.append(transaction)

    ordered = sorted(buckets.values(), key=lambda bucket: bucket.week_start, reverse=True)
    for bucket in ordered:
        bucket.transactions.sort(key=lambda transaction: transaction.occurred_on, reverse=True)
        bucket.total = total(bucket.transactions)
    LOGGER.debug("Grouped %s transactions into %s weeks", len(transactions), len(ordered))
    return ordered


def current_week_summary(transactions: Iterable[Transaction], today: date) -> WeekSummary:
    """Total and count of transactions dated within the current week."""

    start, end = current_week_range(today)
    matching = [transaction for transaction in transactions if start <= transaction.occurred_on <= end]
    return WeekSummary(start=start, end=end, total=total(matching), count=len(matching))


def weekly_view(
    transactions: Sequence[Transaction], today: date
) -> List[Tuple[WeekBucket, bool]]:
    """Return every week bucket together with its current-week flag."""

    return [
        (bucket, is_current_week(bucket.week_start, today))
        for bucket in group_by_week(transactions)
    ]


def format_amount(amount: float) -> str:
    """Shortest decimal form of an amount, as JavaScript's ``Number.toString`` renders it.

    Values from 1e-6 up to 1e21 are written out positionally without a trailing
    ``.0``; anything outside that range uses the ``1e+21`` / ``1e-7`` exponent form.
    """

    value = float(amount)
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    mantissa, exponent = repr(value).split("e")
    power = int(exponent)
    return f"{mantissa}e{'-' if power < 0 else '+'}{abs(power)}"


def format_search_date(day: date) -> str:
    """US short locale rendering used for date matching (``6/8/2024``)."""

    return f"{day.month}/{day.day}/{day.year}"


def _matches(transaction: Transaction, needle: str) -> bool:
    return (
        needle in transaction.description.lower()
        or needle in format_amount(transaction.amount)
        or needle in format_search_date(transaction.occurred_on)
    )


def search(transactions: Sequence[Transaction], term: Optional[str]) -> List[Transaction]:
    """Filter transactions by description, amount or date text, keeping order."""

    if not term:
        return list(transactions)
    needle = term.lower()
    return [transaction for transaction in transactions if _matches(transaction, needle)]
