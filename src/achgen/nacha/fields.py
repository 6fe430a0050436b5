"""Fixed-width field encoders.

Every field of every record passes through exactly one of these, which is
what keeps each record at exactly 94 characters.
"""

from __future__ import annotations

from typing import Any


def is_printable_ascii(value: str) -> bool:
    """True if every character is in the NACHA alphanumeric set (0x20-0x7E)."""
    return all(" " <= char <= "~" for char in value)


def _printable(value: Any) -> str:
    text = "" if value is None else str(value)
    return "".join(char if " " <= char <= "~" else " " for char in text)


def text_field(value: Any, width: int) -> str:
    """Left-justified alphanumeric field: truncate, then pad right with spaces.

    Characters outside printable ASCII are replaced with spaces so a record
    can never contain a line break.
    """
    return _printable(value)[:width].ljust(width)


def numeric_field(value: Any, width: int) -> str:
    """Right-justified numeric field: zero-fill on the left.

    Values wider than the field keep their low-order digits.
    """
    return _printable(value)[-width:].rjust(width, "0")


def blank_field(width: int) -> str:
    return text_field("", width)
