"""Unit test fixtures — sample creator tables."""

from __future__ import annotations

import pytest

from billmatch.models.table import TableData


@pytest.fixture
def creators_table() -> TableData:
    return TableData(
        filename="creators.csv",
        headers=["user_id", "name", "Approved"],
        rows=[
            ["101", "alice", "Yes"],
            ["102", "bob", "No"],
            ["103", "carol", "Yes"],
        ],
    )


@pytest.fixture
def payouts_table() -> TableData:
    return TableData(
        filename="payouts.csv",
        headers=["campaign_id", "amount", "status", "payment_ready"],
        rows=[
            ["c-1", "120.50", "pending", "true"],
            ["c-2", "80", "approved", "false"],
            ["c-3", "42.10", "rejected", "true"],
        ],
    )
