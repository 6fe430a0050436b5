"""ABA routing transit number checksum."""

from __future__ import annotations

from typing import Any

ROUTING_WEIGHTS = (3, 7, 1, 3, 7, 1, 3, 7, 1)
_ASCII_DIGITS = frozenset("0123456789")


def is_valid_routing_number(value: Any) -> bool:
    """Return True if ``value`` is a 9-digit routing number with a valid check digit.

    The weighted sum 3*d1 + 7*d2 + 1*d3 + ... + 1*d9 must be a multiple of 10.
    Never raises: anything that is not a string of nine ASCII digits is invalid.
    """
    if not isinstance(value, str) or len(value) != 9:
        return False
    if not set(value) <= _ASCII_DIGITS:
        return False
    total = sum(weight * int(digit) for weight, digit in zip(ROUTING_WEIGHTS, value))
    return total % 10 == 0
