"""Tests for PaymentBatch and Entry models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from achgen.models.payment_batch import Entry, PaymentBatch
from tests.conftest import make_batch, make_entry


def test_entry_defaults():
    entry = Entry()
    assert entry.transaction_code == "27"
    assert entry.addenda is None
    assert entry.is_debit
    assert not entry.has_addenda


def test_batch_defaults_to_business_entry_class():
    assert PaymentBatch().entry_class_code == "CCD"


def test_accepts_camel_case_payload():
    batch = PaymentBatch.model_validate({
        "originatorName": "Acme Inc",
        "originatorRouting": "021000021",
        "companyId": "1234567890",
        "destinationRouting": "021000021",
        "destinationBankName": "Test Bank",
        "effectiveDate": "2025-01-15",
        "batchDescription": "PAYROLL",
        "entries": [{
            "receiverName": "John Doe",
            "receiverRouting": "021000021",
            "receiverAccount": "123456789",
            "amount": 100.00,
            "individualId": "EMP001",
        }],
    })
    assert batch.originator_name == "Acme Inc"
    assert batch.entries[0].amount_cents == 10000


@pytest.mark.parametrize(
    ("amount", "cents"),
    [(Decimal("100"), 10000), (Decimal("0.005"), 1), (Decimal("19.994"), 1999), ("7.10", 710)],
)
def test_amount_cents_rounds_half_up(amount, cents):
    assert make_entry(amount=amount).amount_cents == cents


def test_credit_codes_are_not_debits():
    assert not make_entry(transaction_code="22").is_debit
    assert make_entry(transaction_code="37").is_debit


def test_total_amount():
    batch = make_batch(entries=[make_entry(amount=Decimal("1.10")), make_entry(amount=Decimal("2.20"))])
    assert batch.total_amount == Decimal("3.30")


def test_models_are_frozen(acme_batch):
    with pytest.raises(ValidationError):
        acme_batch.company_id = "other"


def test_out_of_range_values_are_left_to_the_validator():
    entry = make_entry(amount=-5, receiver_routing="bad", receiver_name="N" * 40)
    assert entry.amount == Decimal("-5")


def test_whitespace_is_preserved():
    entry = make_entry(receiver_routing=" 021000021", addenda="   ")
    assert entry.receiver_routing == " 021000021"
    assert entry.addenda == "   "
    assert entry.has_addenda


def test_amount_cents_handles_very_large_amounts():
    assert make_entry(amount=Decimal("1e30")).amount_cents == 10**32
