from __future__ import annotations

import math

import pytest

from calc.interp.core import evaluate
from calc.util.numfmt import ERROR_TEXT, format_number, plain_number


def test_grouping_thousands() -> None:
    assert format_number(1234567) == "1,234,567"
    assert format_number(1000.5) == "1,000.5"
    assert format_number(999) == "999"
    assert format_number(-1234.5) == "-1,234.5"


def test_rounds_to_ten_decimals_and_strips_zeros() -> None:
    assert format_number(10 / 3) == "3.3333333333"
    assert format_number(0.1 + 0.2) == "0.3"
    assert format_number(2.50) == "2.5"
    assert format_number(4.0) == "4"


def test_never_scientific() -> None:
    assert format_number(1e21) == "1,000,000,000,000,000,000,000"
    assert format_number(1e-7) == "0.0000001"
    assert "e" not in format_number(123456789.123456789)


def test_tiny_values_round_to_zero_without_sign() -> None:
    assert format_number(1e-11) == "0"
    assert format_number(-1e-11) == "0"
    assert format_number(-0.0) == "0"


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_is_error(value: float) -> None:
    assert format_number(value) == ERROR_TEXT


def test_division_by_zero_formats_to_error() -> None:
    assert format_number(evaluate("5/0")) == "Error"


def test_custom_separators_and_precision() -> None:
    assert format_number(1234567.25, group_sep=".", decimal_sep=",") == "1.234.567,25"
    assert format_number(1.23456, decimals=2) == "1.23"
    assert format_number(1234.5, group_sep="") == "1234.5"


def test_plain_number_is_ungrouped() -> None:
    assert plain_number(1234.5) == "1234.5"
    assert plain_number(0.5) == "0.5"
    assert plain_number(2.0) == "2"


def test_formatted_result_reparses_within_tolerance() -> None:
    for text in ["10/3", "2/7", "-1/3", "0.1*3"]:
        value = evaluate(text)
        shown = format_number(value)
        assert abs(float(shown) - value) <= 1e-10
        assert evaluate(shown) == float(shown)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("100000000.1", "100,000,000.1"),
        ("123456789.12", "123,456,789.12"),
        ("987654321.9876543", "987,654,321.9876543"),
        ("-123456789.12", "-123,456,789.12"),
    ],
)
def test_large_values_show_no_binary_noise(text: str, expected: str) -> None:
    assert format_number(evaluate(text)) == expected


def test_plain_number_keeps_tiny_values() -> None:
    assert plain_number(1e-11) == "0.00000000001"
    assert plain_number(0.05) == "0.05"
