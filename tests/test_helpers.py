import datetime as dt
from decimal import Decimal

from receipt_processor.utils.helpers import parse_decimal, parse_purchase_date, parse_purchase_time


def test_parse_decimal_plain_amount():
    assert parse_decimal("12.25") == Decimal("12.25")
    assert parse_decimal("-0.25") == Decimal("-0.25")


def test_parse_decimal_rejects_padding_and_non_finite():
    assert parse_decimal(" 12.25") is None
    assert parse_decimal("12.25\n") is None
    assert parse_decimal("Infinity") is None
    assert parse_decimal("nan") is None
    assert parse_decimal("$12") is None
    assert parse_decimal(None) is None


def test_parse_purchase_date_exact_format():
    assert parse_purchase_date("2022-03-20") == dt.date(2022, 3, 20)
    assert parse_purchase_date("2022-3-20") is None
    assert parse_purchase_date("20220320") is None
    assert parse_purchase_date("2022-13-01") is None


def test_parse_purchase_time_exact_format():
    assert parse_purchase_time("08:13") == dt.time(8, 13)
    assert parse_purchase_time("8:13") is None
    assert parse_purchase_time("24:00") is None
    assert parse_purchase_time("12:60") is None


def test_parse_decimal_accepts_ascii_forms_only():
    assert parse_decimal(".5") == Decimal("0.5")
    assert parse_decimal("5.") == Decimal("5")
    assert parse_decimal("1_000.00") is None
    assert parse_decimal("١٢.٢٥") is None
    assert parse_decimal("1e5") is None


def test_parse_decimal_rejects_out_of_range_amounts():
    assert parse_decimal("1e999999") is None
    assert parse_decimal("9" * 400) is None
    assert parse_decimal("9" * 300) == Decimal("9" * 300)
