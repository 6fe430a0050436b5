"""Validation result models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Severity(StrEnum):
    ERROR = "error"  # Blocks submission
    WARNING = "warning"  # Informational, needs human confirmation


class ValidationIssue(BaseModel):
    """A single problem found in a payment batch."""

    field: str  # e.g. "originatorRouting", "entries[2].amount"
    message: str
    severity: Severity = Severity.ERROR

    @property
    def blocking(self) -> bool:
        return self.severity is Severity.ERROR
