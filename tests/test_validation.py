"""
Unit tests for transaction field validation.
"""
import datetime as dt

from core.validation import validate_transaction_data


def test_complete_transaction_is_valid():
    candidate = {
        "date": dt.date(2025, 1, 15),
        "description": "Grocery Store",
        "amount": -85.23,
        "balance": 1500.00,
    }
    
    result = validate_transaction_data(candidate, 2)
    
    assert result.is_valid
    assert result.errors == []


def test_missing_fields_are_all_reported():
    """Checks are independent, so every problem is listed."""
    candidate = {"date": dt.date(2025, 1, 15), "description": ""}
    
    result = validate_transaction_data(candidate, 4)
    
    assert not result.is_valid
    assert len(result.errors) == 2
    assert any("Description is required" in e.message for e in result.errors)
    assert any("Amount is required" in e.message for e in result.errors)
    assert all(e.row == 4 and e.kind == "validation" and e.sheet == "" for e in result.errors)


def test_non_finite_amount():
    candidate = {"date": dt.date(2025, 1, 15), "description": "Test", "amount": float("nan")}
    
    result = validate_transaction_data(candidate, 1)
    
    assert not result.is_valid
    assert result.errors[0].column == "amount"
    assert result.errors[0].message == "Amount is required and must be a valid number"


def test_invalid_date_and_balance():
    candidate = {
        "date": None,
        "description": "   ",
        "amount": float("inf"),
        "balance": float("nan"),
    }
    
    result = validate_transaction_data(candidate, 7)
    
    assert [e.column for e in result.errors] == ["date", "description", "amount", "balance"]
    assert result.errors[3].message == "Balance must be a valid number if provided"


def test_boolean_is_not_an_amount():
    candidate = {"date": dt.date(2025, 1, 15), "description": "Test", "amount": True}
    
    assert not validate_transaction_data(candidate, 1).is_valid
