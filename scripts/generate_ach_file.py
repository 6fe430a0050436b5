"""Validate a JSON payment batch and write its NACHA file.

Usage:
    python scripts/generate_ach_file.py --input batch.json --output payroll.ach
    python scripts/generate_ach_file.py --input batch.json --validate-only
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from achgen.core.config import AppSettings
from achgen.core.log import configure_logging
from achgen.models.payment_batch import PaymentBatch
from achgen.nacha.encoder import encode_batch_with_totals
from achgen.nacha.validator import split_issues, validate_batch

logger = logging.getLogger("generate_ach_file")


def load_batch(path: Path) -> PaymentBatch:
    """Read a batch from JSON (camelCase or snake_case keys)."""
    return PaymentBatch.model_validate(json.loads(path.read_text(encoding="utf-8")))


def run(args: argparse.Namespace, settings: AppSettings) -> int:
    try:
        batch = load_batch(args.input)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        print(f"Could not read batch from {args.input}: {exc}", file=sys.stderr)
        return 2

    errors, warnings = split_issues(
        validate_batch(batch, large_batch_threshold=settings.nacha.large_batch_threshold)
    )
    for issue in errors + warnings:
        print(f"  [{issue.severity.upper()}] {issue.field}: {issue.message}")

    if errors or (args.strict and warnings):
        print(f"Batch rejected: {len(errors)} errors, {len(warnings)} warnings", file=sys.stderr)
        return 1
    if args.validate_only:
        print("Batch is valid")
        return 0

    content, totals = encode_batch_with_totals(
        batch,
        file_id_modifier=settings.nacha.file_id_modifier,
        reference_code=settings.nacha.reference_code,
    )
    args.output.write_text(content, encoding="ascii")
    logger.info(
        "Wrote %s: %d entries, debit=%d credit=%d cents",
        args.output, totals.entry_count, totals.total_debit_cents, totals.total_credit_cents,
    )
    print(f"Wrote {args.output}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a NACHA ACH file from a JSON batch")
    parser.add_argument("--input", type=Path, required=True, help="Path to the batch JSON file")
    parser.add_argument("--output", type=Path, default=Path("batch.ach"), help="NACHA file to write")
    parser.add_argument("--validate-only", action="store_true", help="Validate without writing a file")
    parser.add_argument("--strict", action="store_true", help="Treat warnings as blocking")
    args = parser.parse_args(argv)

    settings = AppSettings()
    configure_logging(settings.log_level)
    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
