"""Batch validator: structural checks run before NACHA encoding.

Returns every issue found instead of failing fast. Errors block submission;
warnings are informational and flagged for human confirmation. The encoder
never calls this module: callers validate, then build.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from decimal import Decimal

from achgen.models.payment_batch import Entry, PaymentBatch
from achgen.models.validation import Severity, ValidationIssue
from achgen.nacha.codes import ENTRY_CLASS_CODES, TRANSACTION_CODES
from achgen.nacha.fields import is_printable_ascii
from achgen.nacha.routing import is_valid_routing_number

logger = logging.getLogger(__name__)

MAX_ORIGINATOR_NAME = 23
MAX_BATCH_DESCRIPTION = 10
MAX_RECEIVER_NAME = 22
MAX_RECEIVER_ACCOUNT = 17
MAX_INDIVIDUAL_ID = 15
MAX_ADDENDA = 80
MAX_ENTRY_AMOUNT = Decimal("99999999.99")
LARGE_BATCH_THRESHOLD = Decimal("1000000")

_CALENDAR_DATE = re.compile(r"\d{4}-\d{2}-\d{2}\Z", re.ASCII)


def _error(field: str, message: str) -> ValidationIssue:
    return ValidationIssue(field=field, message=message, severity=Severity.ERROR)


def _character_issues(fields: dict[str, str | None]) -> list[ValidationIssue]:
    return [
        _error(field, "Only printable ASCII characters are allowed")
        for field, value in fields.items()
        if value and not is_printable_ascii(value)
    ]


def _is_calendar_date(value: str) -> bool:
    if not _CALENDAR_DATE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _validate_header(batch: PaymentBatch) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    if not batch.originator_name:
        issues.append(_error("originatorName", "Originator name is required"))
    elif len(batch.originator_name) > MAX_ORIGINATOR_NAME:
        issues.append(_error(
            "originatorName",
            f"Originator name must be {MAX_ORIGINATOR_NAME} characters or fewer",
        ))

    if not is_valid_routing_number(batch.originator_routing):
        issues.append(_error("originatorRouting", "Originator routing number is invalid"))

    if not batch.company_id:
        issues.append(_error("companyId", "Company ID is required"))

    if not is_valid_routing_number(batch.destination_routing):
        issues.append(_error("destinationRouting", "Destination routing number is invalid"))

    if len(batch.batch_description) > MAX_BATCH_DESCRIPTION:
        issues.append(_error(
            "batchDescription",
            f"Batch description must be {MAX_BATCH_DESCRIPTION} characters or fewer",
        ))

    if not _is_calendar_date(batch.effective_date):
        issues.append(_error("effectiveDate", "Effective date must be a calendar date (YYYY-MM-DD)"))

    if batch.entry_class_code not in ENTRY_CLASS_CODES:
        issues.append(_error(
            "entryClassCode",
            f"Unsupported standard entry class code {batch.entry_class_code!r}",
        ))

    if not batch.entries:
        issues.append(_error("entries", "Batch must contain at least one entry"))

    issues.extend(_character_issues({
        "originatorName": batch.originator_name,
        "companyId": batch.company_id,
        "destinationBankName": batch.destination_bank_name,
        "batchDescription": batch.batch_description,
    }))

    return issues


def _validate_entry(index: int, entry: Entry) -> list[ValidationIssue]:
    prefix = f"entries[{index}]"
    issues: list[ValidationIssue] = []

    if not entry.receiver_name:
        issues.append(_error(f"{prefix}.receiverName", "Receiver name is required"))
    elif len(entry.receiver_name) > MAX_RECEIVER_NAME:
        issues.append(_error(
            f"{prefix}.receiverName",
            f"Receiver name must be {MAX_RECEIVER_NAME} characters or fewer",
        ))

    if not is_valid_routing_number(entry.receiver_routing):
        issues.append(_error(f"{prefix}.receiverRouting", "Receiver routing number is invalid"))

    if not entry.receiver_account:
        issues.append(_error(f"{prefix}.receiverAccount", "Receiver account number is required"))
    elif len(entry.receiver_account) > MAX_RECEIVER_ACCOUNT:
        issues.append(_error(
            f"{prefix}.receiverAccount",
            f"Receiver account must be {MAX_RECEIVER_ACCOUNT} characters or fewer",
        ))

    if entry.amount <= 0:
        issues.append(_error(f"{prefix}.amount", "Amount must be greater than zero"))
    elif entry.amount > MAX_ENTRY_AMOUNT:
        issues.append(_error(f"{prefix}.amount", f"Amount must not exceed {MAX_ENTRY_AMOUNT:,}"))

    if len(entry.individual_id) > MAX_INDIVIDUAL_ID:
        issues.append(_error(
            f"{prefix}.individualId",
            f"Individual ID must be {MAX_INDIVIDUAL_ID} characters or fewer",
        ))

    if entry.addenda is not None and len(entry.addenda) > MAX_ADDENDA:
        issues.append(_error(
            f"{prefix}.addenda",
            f"Addenda must be {MAX_ADDENDA} characters or fewer",
        ))

    if entry.transaction_code not in TRANSACTION_CODES:
        issues.append(_error(
            f"{prefix}.transactionCode",
            f"Unknown transaction code {entry.transaction_code!r}",
        ))

    issues.extend(_character_issues({
        f"{prefix}.receiverName": entry.receiver_name,
        f"{prefix}.receiverAccount": entry.receiver_account,
        f"{prefix}.individualId": entry.individual_id,
        f"{prefix}.addenda": entry.addenda,
    }))

    return issues


def validate_batch(
    batch: PaymentBatch,
    *,
    large_batch_threshold: Decimal = LARGE_BATCH_THRESHOLD,
) -> list[ValidationIssue]:
    """Return all validation issues for ``batch``; an empty list means clean."""
    issues = _validate_header(batch)
    for index, entry in enumerate(batch.entries):
        issues.extend(_validate_entry(index, entry))

    total = batch.total_amount
    if total > large_batch_threshold:
        issues.append(ValidationIssue(
            field="entries",
            message=(
                f"Batch total ${total:,.2f} exceeds ${large_batch_threshold:,.2f}; "
                "confirm before submitting"
            ),
            severity=Severity.WARNING,
        ))

    logger.debug(
        "Validated batch: %d entries, %d errors, %d warnings",
        len(batch.entries),
        sum(1 for issue in issues if issue.blocking),
        sum(1 for issue in issues if not issue.blocking),
    )
    return issues


def has_blocking_issues(issues: list[ValidationIssue]) -> bool:
    return any(issue.blocking for issue in issues)


def split_issues(issues: list[ValidationIssue]) -> tuple[list[ValidationIssue], list[ValidationIssue]]:
    """Partition issues into (errors, warnings)."""
    errors = [issue for issue in issues if issue.blocking]
    warnings = [issue for issue in issues if not issue.blocking]
    return errors, warnings
