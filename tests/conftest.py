"""
Shared pytest fixtures.
"""
import io
from typing import Any, Dict, List

import pandas as pd
import pytest

from core.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts from a clean settings singleton."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_xlsx():
    """
    Build an in-memory .xlsx workbook.
    
    Returns:
        Callable taking {sheet name: rows} and returning file bytes
    """
    def _make(sheets: Dict[str, List[List[Any]]]) -> bytes:
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            for name, rows in sheets.items():
                pd.DataFrame(rows).to_excel(writer, sheet_name=name, header=False, index=False)
        return buffer.getvalue()
    
    return _make


@pytest.fixture
def checking_rows():
    """A small, valid statement sheet."""
    return [
        ["Date", "Description", "Amount", "Balance"],
        ["2025-01-15", "Grocery Store", -85.23, 1500.00],
        ["2025-01-16", "Salary Deposit", 2500.00, 4000.00],
    ]
