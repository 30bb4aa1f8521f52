"""
Validation summary for a ParseResult: errors grouped by sheet, headline
status and human-readable counts.
"""
from typing import Dict, List, Literal

from pydantic import BaseModel, Field

from core.schema import ErrorKind, ParseResult, ParsingError

GENERAL_SHEET = "General"


class SummaryEntry(BaseModel):
    location: str
    message: str
    kind: ErrorKind


class ValidationSummary(BaseModel):
    status: Literal["error", "warning", "success"]
    title: str
    summary_text: str
    error_count: int = 0
    warning_count: int = 0
    errors_by_sheet: Dict[str, List[SummaryEntry]] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)


def _plural(count: int, noun: str) -> str:
    return f"1 {noun}" if count == 1 else f"{count} {noun}s"


def format_error_location(error: ParsingError) -> str:
    """'Row R, Column C:', 'Row R:' or 'Sheet Error:' depending on what is known."""
    if error.row and error.column:
        return f"Row {error.row}, Column {error.column}:"
    if error.row:
        return f"Row {error.row}:"
    return "Sheet Error:"


def group_errors_by_sheet(errors: List[ParsingError]) -> Dict[str, List[ParsingError]]:
    grouped: Dict[str, List[ParsingError]] = {}
    for error in errors:
        grouped.setdefault(error.sheet or GENERAL_SHEET, []).append(error)
    return grouped


def build_validation_summary(result: ParseResult) -> ValidationSummary:
    """
    Summarize the errors and warnings of a parse.
    
    Args:
        result: ParseResult to summarize
    
    Returns:
        ValidationSummary with status, title, text and grouped errors
    """
    grouped = group_errors_by_sheet(result.errors)
    errors_by_sheet = {
        sheet: [
            SummaryEntry(
                location=format_error_location(error),
                message=error.message,
                kind=error.kind,
            )
            for error in sheet_errors
        ]
        for sheet, sheet_errors in grouped.items()
    }
    
    if result.errors:
        status = "error"
        title = "Validation Issues Found"
        error_text = _plural(len(result.errors), "error") + " found"
        summary_text = f"{error_text} across {_plural(len(grouped), 'sheet')}"
    elif result.warnings:
        status = "warning"
        title = "Validation Complete with Warnings"
        summary_text = "Data validation completed successfully, but some sheets had warnings."
    else:
        status = "success"
        title = "Validation Successful"
        summary_text = "All data has been validated successfully with no issues found."
    
    return ValidationSummary(
        status=status,
        title=title,
        summary_text=summary_text,
        error_count=len(result.errors),
        warning_count=len(result.warnings),
        errors_by_sheet=errors_by_sheet,
        warnings=list(result.warnings),
    )
