"""Tests for rupee formatting and input cleaning."""

import pytest

from utils.currency import clean_currency, clean_percent, format_currency_output, format_percent_output


@pytest.mark.parametrize("value, text", [
    (0, "₹0"),
    (999, "₹999"),
    (1_000, "₹1,000"),
    (2_500_000, "₹25,00,000"),
    (50_000_000, "₹5,00,00,000"),
    (1_234.5, "₹1,235"),
    (-1_000, "-₹1,000"),
    (None, "₹0"),
])
def test_indian_grouping(value, text):
    assert format_currency_output(value) == text


def test_decimals():
    assert format_currency_output(123456.789, decimals=2) == "₹1,23,456.79"


def test_clean_currency_strips_symbols_and_grouping():
    assert clean_currency("₹25,00,000") == 2_500_000.0
    assert clean_currency("$140,000.00") == 140_000.0
    assert clean_currency(42) == 42.0
    assert clean_currency("") == 0.0
    assert clean_currency("lots") == 0.0


def test_clean_percent_keeps_percent_units():
    assert clean_percent("6%") == 6.0
    assert clean_percent(" 6.5 % ") == 6.5
    assert clean_percent(6) == 6.0
    assert clean_percent("abc") is None
    assert clean_percent(None) is None


def test_format_percent_output():
    assert format_percent_output(61.27) == "61.3%"
    assert format_percent_output(None) == ""
