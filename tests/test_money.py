"""Tests for money helpers"""
from decimal import Decimal

import pytest

from storefront.money import format_money, parse_money, round_money, to_decimal, to_float


def test_to_decimal_from_float_keeps_digits():
    assert to_decimal(24.99) == Decimal("24.99")


def test_to_decimal_invalid_values():
    assert to_decimal(None) == Decimal("0")
    assert to_decimal("abc") == Decimal("0")


def test_parse_money_accepts_numbers_and_numeric_text():
    assert parse_money("32.5") == Decimal("32.5")
    assert parse_money(24.99) == Decimal("24.99")
    assert parse_money(7) == Decimal("7")


@pytest.mark.parametrize("value", [None, True, "garbage", "", "NaN", "Infinity", "-inf", float("nan"), [1]])
def test_parse_money_rejects_non_amounts(value):
    with pytest.raises(ValueError):
        parse_money(value)


def test_round_money_half_up():
    assert round_money(Decimal("3.205")) == Decimal("3.21")
    assert round_money("2") == Decimal("2.00")


def test_format_money():
    assert format_money(Decimal("1234.5")) == "$1,234.50"
    assert format_money(Decimal("9.99"), "EUR") == "€9.99"
    assert format_money(Decimal("9.99"), "CHF") == "9.99 CHF"


def test_to_float():
    assert to_float(Decimal("64.80")) == 64.8
