from decimal import Decimal

import pytest

from market_discounts.utils.number_helpers import format_number, parse_decimal, safe_decimal, to_fixed, to_json_number


@pytest.mark.parametrize("value, expected", [
    ("10", Decimal("10")),
    (" 2.5 ", Decimal("2.5")),
    (7, Decimal("7")),
    (0.1, Decimal("0.1")),
    ("", None),
    ("abc", None),
    ("NaN", None),
    ("Infinity", None),
    (None, None),
    (True, None),
])
def test_parse_decimal(value, expected):
    assert parse_decimal(value) == expected


def test_safe_decimal_defaults_to_zero():
    assert safe_decimal("oops") == Decimal("0")
    assert safe_decimal("3") == Decimal("3")


def test_to_fixed():
    assert to_fixed(Decimal("10"), 1) == "10.0"
    assert to_fixed(Decimal("4.99"), 2) == "4.99"
    assert to_fixed(Decimal("0.25"), 1) == "0.3"


def test_format_number_and_json_number():
    assert format_number(Decimal("10.00")) == "10"
    assert format_number(Decimal("12.50")) == "12.5"
    assert to_json_number(Decimal("15")) == 15
    assert isinstance(to_json_number(Decimal("15")), int)
    assert to_json_number(Decimal("12.5")) == 12.5


def test_to_fixed_beyond_default_precision():
    assert to_fixed(Decimal("1e30"), 1) == "1" + "0" * 30 + ".0"
    assert to_fixed(Decimal("123456789012345678901234567890.126"), 2) == "123456789012345678901234567890.13"
