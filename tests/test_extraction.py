"""
Unit tests for row extraction.
"""
import datetime as dt

from core.extraction import (
    check_required_columns,
    extract_row,
    extract_transactions_from_sheet,
    header_names,
)
from core.schema import ColumnMapping

MAPPING = ColumnMapping(date="Date", description="Description", amount="Amount", balance="Balance")


def test_extracts_transactions(checking_rows):
    result = extract_transactions_from_sheet("Checking", checking_rows, MAPPING)
    
    assert result.errors == []
    assert len(result.transactions) == 2
    first, second = result.transactions
    assert first.date == dt.date(2025, 1, 15)
    assert first.description == "Grocery Store"
    assert first.amount == -85.23
    assert first.balance == 1500.00
    assert second.amount == 2500.00


def test_missing_required_column_stops_the_sheet():
    rows = [
        ["Date", "Description"],
        ["2025-01-15", "Grocery Store"],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("Incomplete", rows, mapping)
    
    assert result.transactions == []
    assert len(result.errors) == 1
    error = result.errors[0]
    assert 'Required column "Amount" not found' in error.message
    assert error.sheet == "Incomplete"
    assert error.row == 1
    assert error.column == "Amount"
    assert error.kind == "validation"


def test_unset_mapping_field_is_named_by_field():
    errors = check_required_columns("S", ["Date"], ColumnMapping(date="Date"))
    
    assert [e.column for e in errors] == ["description", "amount"]


def test_blank_rows_are_skipped_silently():
    rows = [
        ["Date", "Description", "Amount"],
        ["", "", ""],
        [None, None, None],
        ["2025-01-15", "Coffee", 3.5],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("S", rows, mapping)
    
    assert len(result.transactions) == 1
    assert result.errors == []


def test_zero_cell_makes_row_non_blank():
    """A lone 0 is data: the row is processed and fails on its date."""
    rows = [
        ["Date", "Description", "Amount"],
        ["", "", 0],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("S", rows, mapping)
    
    assert result.transactions == []
    assert len(result.errors) == 1
    assert result.errors[0].kind == "parsing"
    assert result.errors[0].row == 2


def test_bad_row_does_not_stop_other_rows():
    rows = [
        ["Date", "Description", "Amount"],
        ["2025-01-15", "Grocery Store", -85.23],
        ["not a date", "Broken", 10],
        ["2025-01-17", "Refund", "12.00"],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("Checking", rows, mapping)
    
    assert [t.description for t in result.transactions] == ["Grocery Store", "Refund"]
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.sheet == "Checking"
    assert error.row == 3
    assert error.column == ""
    assert error.message.startswith("Error processing row: Unable to parse date")


def test_validation_errors_are_tagged_with_sheet():
    rows = [
        ["Date", "Description", "Amount"],
        ["2025-01-15", "   ", 5],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("Savings", rows, mapping)
    
    assert result.transactions == []
    assert len(result.errors) == 1
    assert result.errors[0].sheet == "Savings"
    assert result.errors[0].column == "description"
    assert result.errors[0].row == 2


def test_malformed_amount_is_recorded_as_zero():
    rows = [
        ["Date", "Description", "Amount"],
        ["2025-01-15", "Mystery", "n/a"],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("S", rows, mapping)
    
    assert result.errors == []
    assert result.transactions[0].amount == 0.0


def test_short_rows_read_missing_cells_as_empty():
    indices = {"date": 0, "description": 1, "amount": 2, "balance": 3}
    
    outcome = extract_row("S", ["2025-01-15", "Coffee"], indices, 2)
    
    assert outcome.errors == []
    assert outcome.transaction.amount == 0.0
    assert outcome.transaction.balance is None


def test_numeric_description_and_serial_date():
    rows = [
        ["Date", "Description", "Amount"],
        [45671, 1234, "$1,200.00"],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    transaction = extract_transactions_from_sheet("S", rows, mapping).transactions[0]
    
    assert transaction.date == dt.date(2025, 1, 14)
    assert transaction.description == "1234"
    assert transaction.amount == 1200.0


def test_header_names_render_cells():
    assert header_names(["Date", None, 2025]) == ["Date", "", "2025"]


def test_false_cells_make_a_blank_row():
    """Boolean FALSE is falsy, so an all-FALSE row is skipped without errors."""
    rows = [
        ["Date", "Description", "Amount"],
        [False, False, False],
        ["2025-01-15", "Coffee", 3.5],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("S", rows, mapping)
    
    assert result.errors == []
    assert len(result.transactions) == 1


def test_zero_description_is_rejected():
    """A numeric 0 description reads as empty and fails validation."""
    rows = [
        ["Date", "Description", "Amount"],
        ["2025-01-15", 0, 5],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("S", rows, mapping)
    
    assert result.transactions == []
    assert len(result.errors) == 1
    assert result.errors[0].column == "description"
    assert result.errors[0].message == "Description is required"


def test_none_rows_in_raw_rows_are_skipped():
    rows = [
        ["Date", "Description", "Amount"],
        None,
        ["2025-01-15", "Coffee", 3.5],
    ]
    mapping = ColumnMapping(date="Date", description="Description", amount="Amount")
    
    result = extract_transactions_from_sheet("S", rows, mapping)
    
    assert result.errors == []
    assert len(result.transactions) == 1
