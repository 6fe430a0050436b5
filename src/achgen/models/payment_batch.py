"""Payment batch models: the input to validation and NACHA encoding.

Models are deliberately permissive: they only coerce types. Content rules
(routing checksums, field lengths, amount range) belong to the batch
validator so that every problem in a batch can be reported at once.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from achgen.nacha.codes import DEBIT_TRANSACTION_CODES, DEFAULT_ENTRY_CLASS_CODE, DEFAULT_TRANSACTION_CODE

_CAMEL_FROZEN = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "frozen": True,
}


class Entry(BaseModel):
    """One payment instruction (an Entry Detail record, plus optional addenda)."""

    receiver_name: str = ""
    receiver_routing: str = ""
    receiver_account: str = ""
    amount: Decimal = Decimal("0")  # Dollars
    individual_id: str = ""
    transaction_code: str = DEFAULT_TRANSACTION_CODE
    addenda: Optional[str] = None

    model_config = _CAMEL_FROZEN

    @property
    def amount_cents(self) -> int:
        """Amount in whole cents, rounded half-up."""
        return int((self.amount * 100).to_integral_value(rounding=ROUND_HALF_UP))

    @property
    def has_addenda(self) -> bool:
        return bool(self.addenda)

    @property
    def is_debit(self) -> bool:
        return self.transaction_code in DEBIT_TRANSACTION_CODES


class PaymentBatch(BaseModel):
    """File- and batch-level data for a single-batch NACHA file."""

    originator_name: str = ""
    originator_routing: str = ""
    company_id: str = ""
    destination_routing: str = ""
    destination_bank_name: str = ""
    effective_date: str = ""  # YYYY-MM-DD
    batch_description: str = ""
    entry_class_code: str = DEFAULT_ENTRY_CLASS_CODE
    entries: list[Entry] = Field(default_factory=list)

    model_config = _CAMEL_FROZEN

    @property
    def total_amount(self) -> Decimal:
        """Sum of all entry amounts in dollars."""
        return sum((entry.amount for entry in self.entries), Decimal("0"))
