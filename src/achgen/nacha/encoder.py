"""NACHA file encoder: serializes a payment batch into fixed-width records.

Produces a single-batch file: File Header, Batch Header, one Entry Detail per
entry (each optionally followed by an Addenda record), Batch Control, File
Control, then all-'9' filler up to a multiple of ten records.

The encoder does not validate. An invalid batch yields a well-formed but
meaningless file, so callers must run ``validate_batch`` first.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from achgen.models.outputs import BatchTotals
from achgen.models.payment_batch import Entry, PaymentBatch
from achgen.nacha import codes
from achgen.nacha.fields import blank_field, numeric_field, text_field

logger = logging.getLogger(__name__)

ENTRY_HASH_MODULUS = 10**10


def _originating_dfi(batch: PaymentBatch) -> str:
    return batch.originator_routing[:8]


def _trace_number(batch: PaymentBatch, index: int) -> str:
    return _originating_dfi(batch) + numeric_field(index + 1, 7)


def _file_header(batch: PaymentBatch, now: datetime, file_id_modifier: str, reference_code: str) -> str:
    return "".join([
        codes.FILE_HEADER,
        codes.PRIORITY_CODE,
        text_field(" " + batch.destination_routing, 10),
        text_field(batch.company_id, 10),
        numeric_field(now.strftime("%y%m%d"), 6),
        numeric_field(now.strftime("%H%M"), 4),
        text_field(file_id_modifier, 1),
        codes.RECORD_SIZE_FIELD,
        codes.BLOCKING_FACTOR_FIELD,
        codes.FORMAT_CODE,
        text_field(batch.destination_bank_name, 23),
        text_field(batch.originator_name, 23),
        text_field(reference_code, 8),
    ])


def _batch_header(batch: PaymentBatch) -> str:
    effective = batch.effective_date.replace("-", "")[-6:]
    return "".join([
        codes.BATCH_HEADER,
        codes.SERVICE_CLASS_MIXED,
        text_field(batch.originator_name, 16),
        blank_field(20),  # Company discretionary data
        text_field(batch.company_id, 10),
        text_field(batch.entry_class_code, 3),
        text_field(batch.batch_description, 10),
        blank_field(6),  # Company descriptive date
        numeric_field(effective, 6),
        blank_field(3),  # Settlement date, filled in by the ACH operator
        codes.ORIGINATOR_STATUS_CODE,
        numeric_field(_originating_dfi(batch), 8),
        numeric_field(codes.BATCH_NUMBER, 7),
    ])


def _entry_detail(entry: Entry, trace_number: str) -> str:
    return "".join([
        codes.ENTRY_DETAIL,
        numeric_field(entry.transaction_code, 2),
        numeric_field(entry.receiver_routing[:8], 8),
        numeric_field(entry.receiver_routing[8:9], 1),
        text_field(entry.receiver_account, 17),
        numeric_field(entry.amount_cents, 10),
        text_field(entry.individual_id, 15),
        text_field(entry.receiver_name, 22),
        blank_field(2),  # Discretionary data
        "1" if entry.has_addenda else "0",
        numeric_field(trace_number, 15),
    ])


def _addenda(entry: Entry, trace_number: str) -> str:
    return "".join([
        codes.ADDENDA,
        codes.ADDENDA_TYPE_CODE,
        text_field(entry.addenda, 80),
        numeric_field(1, 4),  # Addenda sequence number
        numeric_field(trace_number[-7:], 7),  # Entry detail sequence number
    ])


def _accumulate(totals: BatchTotals, entry: Entry) -> BatchTotals:
    cents = entry.amount_cents
    rdfi = entry.receiver_routing[:8]
    addenda = 1 if entry.has_addenda else 0
    return BatchTotals(
        record_count=totals.record_count + 1 + addenda,
        entry_count=totals.entry_count + 1,
        addenda_count=totals.addenda_count + addenda,
        entry_hash=(totals.entry_hash + (int(rdfi) if rdfi.isascii() and rdfi.isdigit() else 0)) % ENTRY_HASH_MODULUS,
        total_debit_cents=totals.total_debit_cents + (cents if entry.is_debit else 0),
        total_credit_cents=totals.total_credit_cents + (0 if entry.is_debit else cents),
    )


def _batch_control(batch: PaymentBatch, totals: BatchTotals) -> str:
    return "".join([
        codes.BATCH_CONTROL,
        codes.SERVICE_CLASS_MIXED,
        numeric_field(totals.record_count, 6),
        numeric_field(totals.entry_hash, 10),
        numeric_field(totals.total_debit_cents, 12),
        numeric_field(totals.total_credit_cents, 12),
        text_field(batch.company_id, 10),
        blank_field(19),  # Message authentication code
        blank_field(6),  # Reserved
        numeric_field(_originating_dfi(batch), 8),
        numeric_field(codes.BATCH_NUMBER, 7),
    ])


def _file_control(totals: BatchTotals) -> str:
    return "".join([
        codes.FILE_CONTROL,
        numeric_field(codes.BATCH_COUNT, 6),
        numeric_field(totals.block_count, 6),
        numeric_field(totals.record_count, 8),
        numeric_field(totals.entry_hash, 10),
        numeric_field(totals.total_debit_cents, 12),
        numeric_field(totals.total_credit_cents, 12),
        blank_field(39),  # Reserved
    ])


def _pad_to_block(lines: list[str]) -> list[str]:
    shortfall = -len(lines) % codes.BLOCKING_FACTOR
    return lines + [codes.FILLER_RECORD] * shortfall


def encode_batch_with_totals(
    batch: PaymentBatch,
    *,
    now: Optional[datetime] = None,
    file_id_modifier: str = "A",
    reference_code: str = "",
) -> tuple[str, BatchTotals]:
    """Encode ``batch`` and return the file text with its control totals.

    Args:
        batch: A batch that already passed ``validate_batch``.
        now: Creation timestamp for the File Header. Defaults to the current
            local time; pass a fixed value for reproducible output.
        file_id_modifier: Distinguishes files created on the same day.
        reference_code: Optional 8-character File Header reference.
    """
    if now is None:
        now = datetime.now()

    lines = [
        _file_header(batch, now, file_id_modifier, reference_code),
        _batch_header(batch),
    ]

    totals = BatchTotals()
    for index, entry in enumerate(batch.entries):
        trace_number = _trace_number(batch, index)
        lines.append(_entry_detail(entry, trace_number))
        if entry.has_addenda:
            lines.append(_addenda(entry, trace_number))
        totals = _accumulate(totals, entry)

    lines.append(_batch_control(batch, totals))
    lines.append(_file_control(totals))
    lines = _pad_to_block(lines)

    logger.debug(
        "Encoded NACHA file: %d entries, %d addenda, %d blocks, debit=%d credit=%d cents",
        totals.entry_count,
        totals.addenda_count,
        totals.block_count,
        totals.total_debit_cents,
        totals.total_credit_cents,
    )
    return "\n".join(lines), totals


def encode_batch(
    batch: PaymentBatch,
    *,
    now: Optional[datetime] = None,
    file_id_modifier: str = "A",
    reference_code: str = "",
) -> str:
    """Encode ``batch`` into NACHA file text (94-char records joined by newlines)."""
    content, _ = encode_batch_with_totals(
        batch, now=now, file_id_modifier=file_id_modifier, reference_code=reference_code,
    )
    return content
