"""Tests for the ABA routing number checksum."""

from __future__ import annotations

import pytest

from achgen.nacha.routing import is_valid_routing_number


@pytest.mark.parametrize("routing", ["021000021", "011000015", "123456780", "999999992"])
def test_valid_routing_numbers(routing):
    assert is_valid_routing_number(routing) is True


def test_checksum_failure():
    assert is_valid_routing_number("123456789") is False


@pytest.mark.parametrize("routing", ["12345678", "0210000210", ""])
def test_wrong_length(routing):
    assert is_valid_routing_number(routing) is False


@pytest.mark.parametrize("routing", ["02100002A", "021-00002", "ABCDEFGHI", " 21000021"])
def test_non_digit_strings(routing):
    assert is_valid_routing_number(routing) is False


def test_non_ascii_digits_rejected():
    # Arabic-Indic digits spelling 021000021
    assert is_valid_routing_number("٠٢١٠٠٠٠٢١") is False


@pytest.mark.parametrize("value", [None, 21000021, 21000021.0, ["0", "2"]])
def test_non_string_input_never_raises(value):
    assert is_valid_routing_number(value) is False
