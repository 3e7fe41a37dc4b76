"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from rentledger.domain.errors import NotANumberError
from rentledger.utils.amount_parser import DotPolicy, parse_amount


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Rp 1.234.567", Decimal("1234567")),
        ("1,234,567.00", Decimal("1234567.00")),
        ("10.000,50", Decimal("10000.50")),
        ("(5000)", Decimal("-5000")),
    ],
)
def test_parse_locale_formats(raw, expected):
    """Rupiah, US and European separators resolve to the same numbers."""
    assert parse_amount(raw) == expected


def test_parse_plain_integer():
    assert parse_amount("540000") == Decimal("540000")


def test_parse_negative_sign():
    assert parse_amount("-150000") == Decimal("-150000")


def test_parse_currency_code_and_parentheses():
    assert parse_amount("IDR (1.250.000)") == Decimal("-1250000")


def test_parse_lone_comma_is_decimal():
    assert parse_amount("10000,50") == Decimal("10000.50")


def test_parse_repeated_commas_are_grouping():
    assert parse_amount("1,234,567") == Decimal("1234567")


def test_parse_lone_dot_grouping_by_default():
    """A single dot is read as a thousands separator for Rupiah input."""
    assert parse_amount("10.000") == Decimal("10000")


def test_parse_lone_dot_decimal_policy():
    assert parse_amount("10.5", dot_policy=DotPolicy.DECIMAL) == Decimal("10.5")


def test_parse_repeated_dots_grouping_under_decimal_policy():
    assert parse_amount("1.234.567", dot_policy=DotPolicy.DECIMAL) == Decimal("1234567")


def test_parse_rupiah_token_with_dot():
    assert parse_amount("Rp. 1,234,567.00") == Decimal("1234567.00")
    assert parse_amount("Rp.1.500.000") == Decimal("1500000")
    assert parse_amount("Rp. (2.500)") == Decimal("-2500")


def test_parse_rupiah_token_with_dot_decimal_policy():
    """The dot after Rp is not read as a decimal point."""
    assert parse_amount("Rp. 500", dot_policy=DotPolicy.DECIMAL) == Decimal("500")
    assert parse_amount("Rp. 10.5", dot_policy=DotPolicy.DECIMAL) == Decimal("10.5")


def test_parse_dollar_sign():
    assert parse_amount("$1,234.56") == Decimal("1234.56")


@pytest.mark.parametrize("raw", ["", "   ", "Rp", "n/a", "()"])
def test_parse_without_digits_is_not_a_number(raw):
    """Strings without digits raise instead of becoming zero."""
    with pytest.raises(NotANumberError):
        parse_amount(raw)


def test_not_a_number_is_value_error():
    """NotANumberError keeps ValueError compatibility."""
    with pytest.raises(ValueError):
        parse_amount("abc")
