"""
Field validation for extracted transaction candidates.
"""
import datetime as dt
import math
import numbers
from typing import Any, Dict, List

from core.schema import ParsingError, ValidationOutcome


def _is_finite_number(value: Any) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def validate_transaction_data(candidate: Dict[str, Any], row_number: int) -> ValidationOutcome:
    """
    Validate a transaction candidate.
    
    All checks run independently, so one row can report several problems.
    Errors carry an empty sheet name; the caller tags them.
    
    Args:
        candidate: Mapping with date, description, amount and optional balance
        row_number: 1-based spreadsheet row
    
    Returns:
        ValidationOutcome with is_valid and the collected errors
    """
    errors: List[ParsingError] = []
    
    if not isinstance(candidate.get("date"), dt.date):
        errors.append(ParsingError(
            row=row_number,
            column="date",
            message="Date is required and must be valid",
            kind="validation",
        ))
    
    description = candidate.get("description")
    if not isinstance(description, str) or not description.strip():
        errors.append(ParsingError(
            row=row_number,
            column="description",
            message="Description is required",
            kind="validation",
        ))
    
    if not _is_finite_number(candidate.get("amount")):
        errors.append(ParsingError(
            row=row_number,
            column="amount",
            message="Amount is required and must be a valid number",
            kind="validation",
        ))
    
    if "balance" in candidate and candidate["balance"] is not None:
        if not _is_finite_number(candidate["balance"]):
            errors.append(ParsingError(
                row=row_number,
                column="balance",
                message="Balance must be a valid number if provided",
                kind="validation",
            ))
    
    return ValidationOutcome(is_valid=not errors, errors=errors)
