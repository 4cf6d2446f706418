"""Shared fixtures for the test suite."""

import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient

from app.main import app
from app.models import DetectionConfig, Transaction
from app.storage.memory import RunStore


@pytest.fixture
def config():
    return DetectionConfig()


@pytest.fixture
def store():
    return RunStore()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def parse_ts(timestamp: str) -> datetime:
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


def make_tx(
    tx_id="tx-1",
    amount=50.0,
    timestamp="2026-02-22T10:00:00Z",
    account="ACC-1",
    merchant="Corner Shop",
) -> Transaction:
    return Transaction(
        id=tx_id,
        amount=amount,
        timestamp=parse_ts(timestamp),
        account_id=account,
        merchant=merchant,
    )


def make_spread(count, account_prefix="ACC", amount=50.0, start="2026-02-22T10:00:00Z"):
    """`count` transactions on distinct accounts, one hour apart, none flagged."""
    base = parse_ts(start)
    return [
        Transaction(
            id=f"tx-{i}",
            amount=amount,
            timestamp=base + timedelta(hours=i),
            account_id=f"{account_prefix}-{i}",
            merchant="Corner Shop",
        )
        for i in range(count)
    ]
