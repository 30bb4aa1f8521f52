"""
Row extraction: turns a sheet's data rows into validated transactions.

Each row is isolated. A row that cannot be built produces one parsing
error and the loop moves on; a row that fails validation contributes
its validation errors and is left out of the transactions.
"""
from typing import Any, Dict, List, Sequence

from core.amounts import parse_amount
from core.cells import EMPTY, NumberCell, cell_to_text, is_blank_row, to_cell, to_row
from core.dates import try_parse_date
from core.logger import setup_logger
from core.schema import (
    REQUIRED_FIELDS,
    ColumnMapping,
    ExtractionResult,
    ParsingError,
    RowOutcome,
    Transaction,
)
from core.validation import validate_transaction_data

logger = setup_logger(__name__)


def header_names(header_row: Sequence[Any]) -> List[str]:
    """Render a header row as the texts column mappings refer to."""
    return [cell_to_text(cell) for cell in to_row(header_row)]


def check_required_columns(
    sheet_name: str,
    headers: Sequence[str],
    mapping: ColumnMapping,
) -> List[ParsingError]:
    """
    Verify every required mapped column exists in the header row.
    
    Returns:
        One validation error per missing column (row 1 by convention)
    """
    errors = []
    for field in REQUIRED_FIELDS:
        column = getattr(mapping, field)
        if column is None or column not in headers:
            name = column if column is not None else field
            errors.append(ParsingError(
                sheet=sheet_name,
                row=1,
                column=name,
                message=f'Required column "{name}" not found in sheet headers',
                kind="validation",
            ))
    return errors


def _cell_at(row: Sequence[Any], index: int):
    if 0 <= index < len(row):
        return to_cell(row[index])
    return EMPTY


def description_text(cell) -> str:
    """Trimmed description; a numeric zero counts as no description."""
    if isinstance(cell, NumberCell) and cell.value == 0:
        return ""
    return cell_to_text(cell).strip()


def build_candidate(row: Sequence[Any], indices: Dict[str, int]) -> Dict[str, Any]:
    """
    Read the mapped cells of one row into a transaction candidate.
    
    The date is parsed separately by the caller so its failure can be
    inspected explicitly.
    """
    candidate: Dict[str, Any] = {
        "description": description_text(_cell_at(row, indices["description"])),
        "amount": parse_amount(_cell_at(row, indices["amount"])),
    }
    balance_index = indices.get("balance", -1)
    if 0 <= balance_index < len(row):
        candidate["balance"] = parse_amount(to_cell(row[balance_index]))
    return candidate


def extract_row(
    sheet_name: str,
    row: Sequence[Any],
    indices: Dict[str, int],
    row_number: int,
) -> RowOutcome:
    """
    Extract a single non-blank data row.
    
    Args:
        sheet_name: Sheet the row belongs to (used to tag errors)
        row: The row's cells
        indices: Column index per mapped field
        row_number: 1-based spreadsheet row
    
    Returns:
        RowOutcome holding either the transaction or the row's errors
    """
    try:
        parsed_date = try_parse_date(_cell_at(row, indices["date"]))
        if parsed_date.is_failure():
            return RowOutcome(errors=[ParsingError(
                sheet=sheet_name,
                row=row_number,
                message=f"Error processing row: {parsed_date.error}",
                kind="parsing",
            )])
        
        candidate = build_candidate(row, indices)
        candidate["date"] = parsed_date.unwrap()
        
        validation = validate_transaction_data(candidate, row_number)
        if not validation.is_valid:
            return RowOutcome(errors=[
                error.model_copy(update={"sheet": sheet_name})
                for error in validation.errors
            ])
        
        return RowOutcome(transaction=Transaction(**candidate))
    
    except Exception as e:
        logger.debug(f"[{sheet_name}] Row {row_number} failed: {e}")
        return RowOutcome(errors=[ParsingError(
            sheet=sheet_name,
            row=row_number,
            message=f"Error processing row: {e}",
            kind="parsing",
        )])


def extract_transactions_from_sheet(
    sheet_name: str,
    rows: Sequence[Sequence[Any]],
    mapping: ColumnMapping,
) -> ExtractionResult:
    """
    Extract transactions from every data row of a sheet.
    
    Row 0 is the header row. If a required mapped column is missing from
    it, only the missing-column errors are returned and no row is read.
    
    Args:
        sheet_name: Name of the sheet
        rows: All rows of the sheet, header included
        mapping: Column mapping detected for the sheet
    
    Returns:
        ExtractionResult with valid transactions and collected errors
    """
    headers = header_names(rows[0]) if rows else []
    
    missing = check_required_columns(sheet_name, headers, mapping)
    if missing:
        logger.warning(f"[{sheet_name}] Missing required columns: {[e.column for e in missing]}")
        return ExtractionResult(errors=missing)
    
    indices = {field: headers.index(getattr(mapping, field)) for field in REQUIRED_FIELDS}
    if mapping.balance is not None and mapping.balance in headers:
        indices["balance"] = headers.index(mapping.balance)
    
    transactions: List[Transaction] = []
    errors: List[ParsingError] = []
    
    for row_index in range(1, len(rows)):
        row = to_row(rows[row_index])
        if is_blank_row(row):
            continue
        
        outcome = extract_row(sheet_name, row, indices, row_index + 1)
        if outcome.transaction is not None:
            transactions.append(outcome.transaction)
        errors.extend(outcome.errors)
    
    logger.debug(
        f"[{sheet_name}] Extracted {len(transactions)} transactions, "
        f"{len(errors)} row errors"
    )
    return ExtractionResult(transactions=transactions, errors=errors)
