"""Output models: encoder totals and generated-file metadata."""

from __future__ import annotations

from pydantic import BaseModel, Field

from achgen.models.validation import ValidationIssue


class BatchTotals(BaseModel):
    """Control totals accumulated while encoding a batch."""

    record_count: int = 0  # Entry detail + addenda records
    entry_count: int = 0
    addenda_count: int = 0
    entry_hash: int = 0  # Low 10 digits of the summed receiving DFI ids
    total_debit_cents: int = 0
    total_credit_cents: int = 0

    model_config = {"frozen": True}

    @property
    def block_count(self) -> int:
        """Physical 10-record blocks, counting header/control records."""
        return -(-(self.record_count + 4) // 10)


class GeneratedAchFile(BaseModel):
    """Metadata and content for a generated NACHA file."""

    file_name: str
    path: str
    content: str
    totals: BatchTotals
    warnings: list[ValidationIssue] = Field(default_factory=list)
