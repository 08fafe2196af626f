"""Tests for amount parsing and formatting."""

import pytest

from src.domain.services.amounts import format_amount, parse_amount


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12", 1200),
        ("1.5", 150),
        ("1,000", 100000),
        ("1,234.56", 123456),
        ("1.234,5", 123450),
        ("-42.10", -4210),
        ("  7 ", 700),
    ],
)
def test_parse_amount_reads_major_units(text, expected) -> None:
    assert parse_amount(text) == expected


def test_parse_amount_strips_currency_affixes() -> None:
    assert parse_amount("$1,234.56", prefix="$") == 123456
    assert parse_amount("99,90 €", suffix=" €") == 9990


def test_parse_amount_honours_decimal_places() -> None:
    assert parse_amount("1.5", decimal_places=3) == 1500
    assert parse_amount("1,500", decimal_places=0) == 1500
    assert parse_amount("1.2345", decimal_places=3) == 12345000


def test_parse_amount_rejects_text_without_digits() -> None:
    with pytest.raises(ValueError):
        parse_amount("abc")
    with pytest.raises(ValueError):
        parse_amount("")


def test_format_amount_groups_thousands() -> None:
    assert format_amount(-123456) == "-1,234.56"
    assert format_amount(5) == "0.05"
    assert format_amount(1500, decimal_places=0) == "1,500"
    assert format_amount(-7, decimal_places=3) == "-0.007"
