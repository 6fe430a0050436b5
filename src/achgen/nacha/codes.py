"""NACHA record layout literals and code tables."""

from __future__ import annotations

RECORD_SIZE = 94
BLOCKING_FACTOR = 10

# Record type codes
FILE_HEADER = "1"
BATCH_HEADER = "5"
ENTRY_DETAIL = "6"
ADDENDA = "7"
BATCH_CONTROL = "8"
FILE_CONTROL = "9"

FILLER_RECORD = "9" * RECORD_SIZE

PRIORITY_CODE = "01"
RECORD_SIZE_FIELD = "094"
BLOCKING_FACTOR_FIELD = "10"
FORMAT_CODE = "1"

SERVICE_CLASS_MIXED = "200"
SERVICE_CLASS_CREDITS_ONLY = "220"
SERVICE_CLASS_DEBITS_ONLY = "225"

ORIGINATOR_STATUS_CODE = "1"  # Originator is not a federal government agency
ADDENDA_TYPE_CODE = "05"
BATCH_NUMBER = 1  # One batch per file
BATCH_COUNT = 1

# Standard entry class codes
CCD = "CCD"  # Corporate credit or debit
PPD = "PPD"  # Prearranged payment and deposit
CTX = "CTX"  # Corporate trade exchange
WEB = "WEB"  # Internet-initiated entry
TEL = "TEL"  # Telephone-initiated entry

DEFAULT_ENTRY_CLASS_CODE = CCD
ENTRY_CLASS_CODES = frozenset({CCD, PPD, CTX, WEB, TEL})

# Transaction codes: 2x checking, 3x savings, 4x general ledger, 5x loan
CHECKING_CREDIT = "22"
CHECKING_CREDIT_PRENOTE = "23"
CHECKING_DEBIT = "27"
CHECKING_DEBIT_PRENOTE = "28"
SAVINGS_CREDIT = "32"
SAVINGS_CREDIT_PRENOTE = "33"
SAVINGS_DEBIT = "37"
SAVINGS_DEBIT_PRENOTE = "38"

DEFAULT_TRANSACTION_CODE = CHECKING_DEBIT

CREDIT_TRANSACTION_CODES = frozenset({
    "21", "22", "23", "24",
    "31", "32", "33", "34",
    "41", "42", "43", "44",
    "51", "52", "53", "54",
})
DEBIT_TRANSACTION_CODES = frozenset({
    "26", "27", "28", "29",
    "36", "37", "38", "39",
    "46", "47", "48", "49",
    "55", "56",
})
TRANSACTION_CODES = CREDIT_TRANSACTION_CODES | DEBIT_TRANSACTION_CODES
