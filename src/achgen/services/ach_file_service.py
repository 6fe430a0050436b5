"""AchFileService: validate a payment batch, then build and archive its NACHA file.

NACHA COMPLIANCE: receiver names, routing and account numbers are held in
memory and written only into the archived file. They are never logged.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Optional

from achgen.core.config import AppSettings
from achgen.core.exceptions import BatchRejectedError
from achgen.core.protocols import IFileStore
from achgen.models.outputs import GeneratedAchFile
from achgen.models.payment_batch import PaymentBatch
from achgen.models.validation import ValidationIssue
from achgen.nacha.encoder import encode_batch_with_totals
from achgen.nacha.validator import split_issues, validate_batch

logger = logging.getLogger(__name__)

NACHA_CONTENT_TYPE = "text/plain"

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def build_file_name(batch: PaymentBatch, now: datetime) -> str:
    """File name for an archived batch, e.g. ``ACH-20250110093000-PAYROLL.ach``."""
    description = _UNSAFE_NAME_CHARS.sub("_", batch.batch_description).strip("_") or "BATCH"
    return f"ACH-{now.strftime('%Y%m%d%H%M%S')}-{description}.ach"


class AchFileService:
    """Composes the batch validator and the NACHA encoder.

    Dependencies are injected at construction time, like every other
    service: settings and the file store that archives generated files.
    """

    def __init__(self, *, settings: AppSettings, file_store: IFileStore) -> None:
        self._settings = settings
        self._files = file_store

    def validate(self, batch: PaymentBatch) -> list[ValidationIssue]:
        return validate_batch(
            batch, large_batch_threshold=self._settings.nacha.large_batch_threshold,
        )

    def generate(self, batch: PaymentBatch, *, now: Optional[datetime] = None) -> GeneratedAchFile:
        """Validate ``batch`` and, if nothing blocks it, encode and archive the file.

        Raises:
            BatchRejectedError: the batch has at least one error-severity issue.
            FileStoreError: the encoded file could not be archived.
        """
        issues = self.validate(batch)
        errors, warnings = split_issues(issues)
        if errors:
            logger.warning(
                "Rejected batch %r: %d errors, %d warnings",
                batch.batch_description, len(errors), len(warnings),
            )
            raise BatchRejectedError(issues)

        if now is None:
            now = datetime.now()

        content, totals = encode_batch_with_totals(
            batch,
            now=now,
            file_id_modifier=self._settings.nacha.file_id_modifier,
            reference_code=self._settings.nacha.reference_code,
        )

        file_name = build_file_name(batch, now)
        path = f"{self._settings.storage.prefix}/{batch.effective_date}/{file_name}"
        self._files.write(path, content.encode("ascii"), NACHA_CONTENT_TYPE)

        logger.info(
            "Generated NACHA file %s: %d entries, debit=%d credit=%d cents, %d warnings",
            path, totals.entry_count, totals.total_debit_cents, totals.total_credit_cents,
            len(warnings),
        )
        return GeneratedAchFile(
            file_name=file_name,
            path=path,
            content=content,
            totals=totals,
            warnings=warnings,
        )

    def health_check(self) -> dict[str, Any]:
        """Return service health status."""
        return {
            "service": self.__class__.__name__,
            "status": "healthy",
            "environment": self._settings.environment,
        }
