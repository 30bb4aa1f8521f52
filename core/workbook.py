"""
Workbook orchestration.

Runs every sheet through the sheet processor inside its own failure
boundary and folds the per-sheet outcomes, in sheet order, into one
ParseResult. Nothing raises past this module.
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from core.config import get_settings
from core.decoding import decode_workbook
from core.logger import setup_logger
from core.schema import ParseResult, ParsingError, Sheet, SheetOutcome, Workbook
from core.sheets import process_sheet

logger = setup_logger(__name__)

DecodedWorkbook = Mapping[str, Optional[Sequence[Sequence[Any]]]]


def process_sheet_safely(sheet_name: str, grid: Any) -> SheetOutcome:
    """
    Process one sheet, converting any failure into a sheet-level parsing error.
    
    Args:
        sheet_name: Name of the sheet
        grid: Decoded rows of the sheet
    
    Returns:
        SheetOutcome; on failure it carries no sheet and one parsing error
    """
    try:
        return process_sheet(sheet_name, grid)
    except Exception as e:
        logger.error(f"Failed to process sheet '{sheet_name}': {e}", exc_info=True)
        return SheetOutcome(errors=[ParsingError(
            sheet=sheet_name,
            row=0,
            message=f"Error processing sheet: {e}",
            kind="parsing",
        )])


def empty_result(file_name: str, message: str) -> ParseResult:
    """ParseResult for a file whose sheet list could not be obtained."""
    return ParseResult(
        workbook=Workbook(file_name=file_name),
        errors=[ParsingError(message=message, kind="parsing")],
    )


def _run_sheets(items: List[Tuple[str, Any]], max_workers: int) -> List[SheetOutcome]:
    if max_workers <= 1 or len(items) <= 1:
        return [process_sheet_safely(name, grid) for name, grid in items]
    
    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as executor:
        futures = [executor.submit(process_sheet_safely, name, grid) for name, grid in items]
        # Collected in submission order so sheet order is kept
        return [future.result() for future in futures]


def merge_outcomes(file_name: str, outcomes: Sequence[SheetOutcome]) -> ParseResult:
    """Fold per-sheet outcomes, in order, into a single ParseResult."""
    sheets: List[Sheet] = []
    errors: List[ParsingError] = []
    warnings: List[str] = []
    
    for outcome in outcomes:
        if outcome.sheet is not None:
            sheets.append(outcome.sheet)
        errors.extend(outcome.errors)
        warnings.extend(outcome.warnings)
    
    total = sum(len(sheet.transactions) for sheet in sheets)
    workbook = Workbook(file_name=file_name, sheets=sheets, total_transactions=total)
    return ParseResult(workbook=workbook, errors=errors, warnings=warnings)


def process_workbook(
    decoded: DecodedWorkbook,
    file_name: str,
    max_workers: Optional[int] = None,
) -> ParseResult:
    """
    Process every sheet of a decoded workbook.
    
    Args:
        decoded: Sheet name -> rows, in workbook order
        file_name: Original file name, kept on the workbook
        max_workers: Sheet worker threads (defaults to SHEET_WORKERS)
    
    Returns:
        ParseResult with included sheets, errors and warnings in sheet order
    """
    try:
        items = list(decoded.items())
    except Exception as e:
        logger.error(f"Could not read sheet list of {file_name}: {e}")
        return empty_result(file_name, f"Failed to parse Excel file: {e}")
    
    if max_workers is None:
        max_workers = get_settings().sheet_workers
    
    logger.info(f"Processing {len(items)} sheets from {file_name}")
    
    result = merge_outcomes(file_name, _run_sheets(items, max_workers))
    
    logger.info(
        f"Parsed {file_name}: {len(result.workbook.sheets)} sheets, "
        f"{result.workbook.total_transactions} transactions, "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result


def parse_workbook_bytes(
    content: bytes,
    file_name: str,
    max_workers: Optional[int] = None,
) -> ParseResult:
    """
    Decode a spreadsheet file and process it.
    
    A decode failure short-circuits into an empty workbook with a single
    top-level parsing error; no sheet is processed.
    """
    try:
        decoded = decode_workbook(content, file_name)
    except Exception as e:
        logger.error(f"Failed to decode {file_name}: {e}")
        return empty_result(file_name, f"Failed to parse Excel file: {e}")
    
    return process_workbook(decoded, file_name, max_workers=max_workers)
