"""ACH batch validation and NACHA file generation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from achgen.models.outputs import GeneratedAchFile
from achgen.models.payment_batch import PaymentBatch
from achgen.models.validation import ValidationIssue
from achgen.nacha.validator import has_blocking_issues
from achgen.services.ach_file_service import AchFileService

router = APIRouter(tags=["ach"])


class ValidationResponse(BaseModel):
    valid: bool
    issues: list[ValidationIssue] = Field(default_factory=list)


def _service(request: Request) -> AchFileService:
    return request.app.state.ach_service


@router.post("/validate", response_model=ValidationResponse)
async def validate(batch: PaymentBatch, request: Request) -> ValidationResponse:
    """Validate a batch without generating a file. Warnings do not make it invalid."""
    issues = _service(request).validate(batch)
    return ValidationResponse(valid=not has_blocking_issues(issues), issues=issues)


@router.post("/files", response_model=GeneratedAchFile, status_code=201)
def generate(batch: PaymentBatch, request: Request) -> GeneratedAchFile:
    """Validate, encode and archive a NACHA file for the batch."""
    return _service(request).generate(batch)
