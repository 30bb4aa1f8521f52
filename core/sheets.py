"""
Sheet processing: decides whether a sheet holds transactions and
extracts them if it does.
"""
from typing import Any, Optional, Sequence

from core.cells import is_blank_row, to_row
from core.columns import detect_column_mapping
from core.extraction import extract_transactions_from_sheet, header_names
from core.logger import setup_logger
from core.schema import Sheet, SheetOutcome

logger = setup_logger(__name__)


def process_sheet(sheet_name: str, grid: Optional[Sequence[Sequence[Any]]]) -> SheetOutcome:
    """
    Process one decoded sheet.
    
    - No used range (None or no rows): warning, sheet excluded.
    - Rows present but none holds a value: warning, sheet excluded.
    - Headers without date/description/amount: warning, sheet kept with
      no transactions.
    - Otherwise rows are extracted and their errors collected.
    
    Args:
        sheet_name: Name of the sheet
        grid: Rows of raw values or cells, row 0 being the header row
    
    Returns:
        SheetOutcome with the sheet (or None when excluded), errors and warnings
    """
    if not grid:
        message = f'Sheet "{sheet_name}" is empty and will be skipped'
        logger.warning(message)
        return SheetOutcome(warnings=[message])
    
    rows = [to_row(row) for row in grid]
    if all(is_blank_row(row) for row in rows):
        message = f'Sheet "{sheet_name}" contains no data'
        logger.warning(message)
        return SheetOutcome(warnings=[message])
    
    sheet = Sheet(name=sheet_name, rows=rows)
    mapping = detect_column_mapping(header_names(rows[0]))
    
    if not mapping.is_transaction_sheet:
        message = f'Sheet "{sheet_name}" does not contain recognizable transaction columns'
        logger.warning(message)
        return SheetOutcome(sheet=sheet, warnings=[message])
    
    extraction = extract_transactions_from_sheet(sheet_name, rows, mapping)
    sheet.transactions = extraction.transactions
    
    logger.info(
        f"[{sheet_name}] {len(extraction.transactions)} transactions, "
        f"{len(extraction.errors)} errors"
    )
    return SheetOutcome(sheet=sheet, errors=extraction.errors)
