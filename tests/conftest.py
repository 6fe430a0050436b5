"""Shared fixtures: sample payment batches and a fixed clock."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

import pytest

from achgen.models.payment_batch import Entry, PaymentBatch

ROUTING_NY = "021000021"
ROUTING_BOSTON = "011000015"
ROUTING_ALT = "123456780"

FIXED_NOW = datetime(2025, 1, 10, 9, 30)


def make_entry(**overrides: Any) -> Entry:
    fields: dict[str, Any] = {
        "receiver_name": "John Doe",
        "receiver_routing": ROUTING_NY,
        "receiver_account": "123456789",
        "amount": Decimal("100.00"),
        "individual_id": "EMP001",
    }
    fields.update(overrides)
    return Entry(**fields)


def make_batch(entries: list[Entry] | None = None, **overrides: Any) -> PaymentBatch:
    fields: dict[str, Any] = {
        "originator_name": "Acme Inc",
        "originator_routing": ROUTING_NY,
        "company_id": "1234567890",
        "destination_routing": ROUTING_NY,
        "destination_bank_name": "Test Bank",
        "effective_date": "2025-01-15",
        "batch_description": "PAYROLL",
        "entries": [make_entry()] if entries is None else entries,
    }
    fields.update(overrides)
    return PaymentBatch(**fields)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def acme_batch() -> PaymentBatch:
    return make_batch()
