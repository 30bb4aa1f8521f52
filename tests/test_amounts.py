"""
Unit tests for amount normalization.
"""
import datetime as dt
import math

import pytest

from core.amounts import clean_amount_text, parse_amount
from core.cells import DateCell, EmptyCell, NumberCell, TextCell


def test_numeric_passthrough():
    assert parse_amount(NumberCell(value=-85.23)) == -85.23
    assert parse_amount(2500) == 2500.0


@pytest.mark.parametrize("text, expected", [
    ("(85.23)", -85.23),
    ("$1,200.00", 1200.0),
    (" -42.10 ", -42.10),
    ("€ 1 234,5", 12345.0),
    ("£(10.00)", -10.0),
    ("12.5CR", 12.5),
    ("1e3", 1000.0),
    (".5", 0.5),
])
def test_text_amounts(text, expected):
    assert parse_amount(TextCell(value=text)) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "n/a", "USD 100", "()", "nan", "inf", "--5"])
def test_unparseable_text_is_zero(text):
    """Malformed amounts become 0 instead of failing."""
    assert parse_amount(TextCell(value=text)) == 0.0


def test_parenthesised_zero_is_not_negative_zero():
    result = parse_amount(TextCell(value="(0.00)"))
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0


def test_other_cells_are_zero():
    assert parse_amount(EmptyCell()) == 0.0
    assert parse_amount(None) == 0.0
    assert parse_amount(DateCell(value=dt.date(2025, 1, 1))) == 0.0


def test_clean_amount_text():
    assert clean_amount_text("$ 1,000.50") == "1000.50"
    assert clean_amount_text("¥\t2,000") == "2000"
