"""Mini README: Tests for the Typer entry point.

Runs the ``summary`` command against a slot inside ``tmp_path`` configured
through ``SALESWEEK_`` environment variables.
"""

from __future__ import annotations

from datetime import date

import pytest
from typer.testing import CliRunner

from main_sales_centre import cli
from salesweek.configuration import get_settings
from salesweek.ledger import LedgerStore, SalesLedger


@pytest.fixture
def configured_slot(tmp_path, monkeypatch):
    monkeypatch.setenv("SALESWEEK_DATA_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("SALESWEEK_STORAGE_SLOT", "cli-test")
    get_settings.cache_clear()
    yield get_settings().storage_path
    get_settings.cache_clear()


def test_summary_prints_current_week(configured_slot) -> None:
    """The summary command reports the week containing the given date."""

    ledger = SalesLedger(LedgerStore(configured_slot), today=lambda: date(2024, 6, 10))
    ledger.add("2024-06-08", 150000, "Dress sale")
    ledger.add("2024-06-07", 80, "Scarf")

    result = CliRunner().invoke(cli, ["summary", "--today", "2024-06-10"])

    assert result.exit_code == 0
    assert "2024-06-08 to 2024-06-14" in result.output
    assert "1 transactions totalling 150,000.00" in result.output
