"""achgen exception hierarchy.

Validation problems are reported as ``ValidationIssue`` values, never raised.
These exceptions cover the layers around the codec.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from achgen.models.validation import ValidationIssue


class AchGenError(Exception):
    """Base exception for all achgen errors."""


class BatchRejectedError(AchGenError):
    """A batch with blocking validation issues was submitted for generation."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = list(issues)
        errors = sum(1 for issue in self.issues if issue.blocking)
        super().__init__(f"Batch rejected with {errors} blocking issue(s)")


class FileStoreError(AchGenError):
    """Generated-file archive operation failed."""
