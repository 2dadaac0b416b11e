"""Mini README: Tests for the FastAPI JSON surface.

Exercises the add, search, delete, weekly and summary routes against a
ledger backed by a temporary slot, using FastAPI's TestClient.
"""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from salesweek.interface import create_application
from salesweek.ledger import LedgerStore, SalesLedger


@pytest.fixture
def client(tmp_path) -> TestClient:
    ledger = SalesLedger(LedgerStore(tmp_path / "slot.json"), today=lambda: date(2024, 6, 10))
    return TestClient(create_application(ledger))


def test_add_and_list_transactions(client) -> None:
    """Posted sales appear in the list with a running total."""

    response = client.post(
        "/transactions",
        data={"date": "2024-06-08", "amount": "150000", "description": " Dress sale "},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["persisted"] is True
    assert body["transaction"]["description"] == "Dress sale"

    client.post("/transactions", data={"date": "2024-06-09", "amount": "75000", "description": "Shoe sale"})

    listing = client.get("/transactions", params={"term": "dress"}).json()
    assert listing["count"] == 1
    assert listing["total"] == pytest.approx(150000.0)
    assert listing["ledger_size"] == 2


def test_listed_transactions_carry_their_week(client) -> None:
    """Each listed sale reports the Saturday-to-Friday week it falls in."""

    client.post("/transactions", data={"date": "2024-06-07", "amount": "80", "description": "Scarf"})
    client.post("/transactions", data={"date": "2024-06-09", "amount": "150000", "description": "Dress sale"})

    listing = client.get("/transactions").json()["transactions"]

    assert [(item["description"], item["week_start"], item["week_end"]) for item in listing] == [
        ("Dress sale", "2024-06-08", "2024-06-14"),
        ("Scarf", "2024-06-01", "2024-06-07"),
    ]


def test_add_rejection_returns_reason(client) -> None:
    """Invalid input yields a 400 with the rejection reason."""

    response = client.post("/transactions", data={"date": "2024-06-08", "amount": "0", "description": "x"})

    assert response.status_code == 400
    assert response.json()["detail"]["reason"] == "invalid amount"

    missing = client.post("/transactions", data={"date": "2024-06-08", "amount": "10"})
    assert missing.status_code == 400
    assert missing.json()["detail"]["reason"] == "missing field"


def test_delete_and_weekly_view(client) -> None:
    """Deletion updates the ledger and the weekly view flags the current week."""

    friday = client.post("/transactions", data={"date": "2024-06-07", "amount": "80", "description": "Scarf"}).json()
    client.post("/transactions", data={"date": "2024-06-08", "amount": "150000", "description": "Dress sale"})

    weeks = client.get("/weeks").json()["weeks"]
    assert [(week["week_start"], week["is_current_week"]) for week in weeks] == [
        ("2024-06-08", True),
        ("2024-06-01", False),
    ]
    assert weeks[0]["week_end"] == "2024-06-14"

    deleted = client.delete(f"/transactions/{friday['transaction']['id']}").json()
    assert deleted["removed"] is True
    assert len(deleted["transactions"]) == 1

    noop = client.delete("/transactions/unknown").json()
    assert noop["removed"] is False
    assert len(noop["transactions"]) == 1


def test_current_week_summary_route(client) -> None:
    """The summary route reports the Saturday-to-Friday range and totals."""

    client.post("/transactions", data={"date": "2024-06-08", "amount": "150000", "description": "Dress sale"})

    summary = client.get("/summary/current-week").json()

    assert summary == {
        "week_start": "2024-06-08",
        "week_end": "2024-06-14",
        "total": 150000.0,
        "count": 1,
    }
