from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from fee_tally.utilities.converters_scalar import format_amount, to_date, to_decimal


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("100.00", Decimal("100.00")),
        ("-5.50", Decimal("-5.50")),
        (" -2.00 ", Decimal("-2.00")),
        ("+3", Decimal("3")),
        (".5", Decimal("0.5")),
        ("1e2", Decimal("100")),
        ("−1.25", Decimal("-1.25")),
        (7, Decimal("7")),
        (0.1, Decimal("0.1")),
    ],
)
def test_to_decimal_accepts_plain_numbers(raw, expected):
    assert to_decimal(raw) == expected


@pytest.mark.parametrize(
    "raw", ["", "   ", "abc", "1,234.56", "$5.00", "(5.00)", "NaN", "inf", "-Infinity"]
)
def test_to_decimal_rejects_non_plain_numbers(raw):
    with pytest.raises(ValueError):
        to_decimal(raw)


def test_to_decimal_rejects_bool_and_unknown_types():
    with pytest.raises(ValueError):
        to_decimal(True)
    with pytest.raises(ValueError):
        to_decimal(None)


def test_to_date_parses_ledger_and_iso_formats():
    assert to_date("05-Jul-23", "%d-%b-%y") == date(2023, 7, 5)
    assert to_date("2024-02-29", "%Y-%m-%d") == date(2024, 2, 29)


@pytest.mark.parametrize("raw", ["2023-07-05", "5 Jul 2023", "32-Jul-23", ""])
def test_to_date_raises_on_mismatch(raw):
    with pytest.raises(ValueError):
        to_date(raw, "%d-%b-%y")


def test_format_amount_always_two_decimals():
    assert format_amount(Decimal("-2")) == "-2.00"
    assert format_amount(Decimal("0")) == "0.00"
    assert format_amount(Decimal("-7.455")) == "-7.46"
    assert format_amount(Decimal("12.3")) == "12.30"


@pytest.mark.parametrize("raw", ["5-Jul-23", " 05-Jul-23", "05-Jul-23 ", "05-Jul-2023"])
def test_to_date_strict_requires_exact_shape(raw):
    with pytest.raises(ValueError):
        to_date(raw, "%d-%b-%y", strict=True)


def test_to_date_strict_accepts_exact_shape_any_month_case():
    assert to_date("05-Jul-23", "%d-%b-%y", strict=True) == date(2023, 7, 5)
    assert to_date("05-JUL-23", "%d-%b-%y", strict=True) == date(2023, 7, 5)


def test_to_date_lenient_accepts_single_digit_day():
    assert to_date("5-Jul-23", "%d-%b-%y") == date(2023, 7, 5)
