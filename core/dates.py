"""
Date normalization for statement cells.

Handles decoder-typed dates, spreadsheet serial numbers (1900 date system)
and the text layouts banks commonly export.

Serial numbers are counted from 1899-12-30 with plain 24-hour days. The
1900 leap-year quirk of that date system is not corrected, so serials
for dates before 1900-03-01 land one day off.
"""
import datetime as dt
import math
import re
from typing import Any, Callable, List, Optional, Tuple

from core.cells import DateCell, NumberCell, TextCell, to_cell
from core.exceptions import DateError
from core.logger import setup_logger
from core.result import Result

logger = setup_logger(__name__)

SERIAL_EPOCH = dt.datetime(1899, 12, 30)

ISO_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
US_LONG_PATTERN = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
US_SHORT_PATTERN = re.compile(r"^(\d{2})/(\d{2})/(\d{2})$")
DAY_MONTH_YEAR_PATTERN = re.compile(r"^(\d{1,2})\s+([A-Za-z]{3})\s+(\d{2,4})$")
TERSE_PATTERN = re.compile(r"^(\d{1,2})\s+([A-Za-z]{3})\s+(\d{2})$")

MONTH_ABBREVIATIONS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}


def normalize_year(year: int) -> int:
    """Expand years below 100: <50 -> 20xx, otherwise 19xx."""
    if year < 100:
        return year + (2000 if year < 50 else 1900)
    return year


def _build_date(year: int, month: int, day: int) -> Optional[dt.date]:
    try:
        return dt.date(normalize_year(year), month, day)
    except ValueError:
        return None


def _from_iso(match: "re.Match") -> Optional[dt.date]:
    year, month, day = match.groups()
    return _build_date(int(year), int(month), int(day))


def _from_month_first(match: "re.Match") -> Optional[dt.date]:
    month, day, year = match.groups()
    return _build_date(int(year), int(month), int(day))


def _from_day_month_year(match: "re.Match") -> Optional[dt.date]:
    day, month_name, year = match.groups()
    month = MONTH_ABBREVIATIONS.get(month_name.lower())
    if month is None:
        return None
    return _build_date(int(year), month, int(day))


# Tried in order; the first pattern that yields a real calendar date wins.
TEXT_LAYOUTS: List[Tuple["re.Pattern", Callable[["re.Match"], Optional[dt.date]]]] = [
    (ISO_PATTERN, _from_iso),
    (US_LONG_PATTERN, _from_month_first),
    (US_SHORT_PATTERN, _from_month_first),
    (DAY_MONTH_YEAR_PATTERN, _from_day_month_year),
]


def _parse_terse(text: str) -> Optional[dt.date]:
    """'21 Aug 25' style: fixed English month table, year is always 2000+YY."""
    match = TERSE_PATTERN.match(text)
    if not match:
        return None
    day, month_name, year = match.groups()
    month = MONTH_ABBREVIATIONS.get(month_name.lower())
    if month is None:
        return None
    try:
        return dt.date(2000 + int(year), month, int(day))
    except ValueError:
        return None


def parse_text_date(text: str) -> Optional[dt.date]:
    """
    Parse a text cell into a date.
    
    Args:
        text: Raw cell text (trimmed here)
    
    Returns:
        The parsed date, or None if no supported layout matches
    """
    candidate = text.strip()
    for pattern, build in TEXT_LAYOUTS:
        match = pattern.match(candidate)
        if match:
            parsed = build(match)
            if parsed is not None:
                return parsed
    return _parse_terse(candidate)


def serial_to_date(serial: float) -> dt.date:
    """
    Convert a spreadsheet serial number into a calendar date.
    
    Raises:
        DateError: If the serial is not finite or out of range
    """
    if not math.isfinite(serial):
        raise DateError(f"Unable to parse date: {serial}", details={"value": serial})
    try:
        return (SERIAL_EPOCH + dt.timedelta(days=serial)).date()
    except OverflowError:
        raise DateError(f"Unable to parse date: {serial}", details={"value": serial})


def date_to_serial(value: dt.date) -> int:
    """Inverse of serial_to_date for whole days."""
    return (value - SERIAL_EPOCH.date()).days


def parse_date(value: Any) -> dt.date:
    """
    Parse one cell into a calendar date.
    
    Args:
        value: A cell variant (raw values are classified first)
    
    Returns:
        The calendar date
    
    Raises:
        DateError: If the cell is empty or holds no recognizable date
    """
    cell = to_cell(value)
    
    if isinstance(cell, DateCell):
        return cell.value
    
    if isinstance(cell, NumberCell):
        return serial_to_date(cell.value)
    
    if isinstance(cell, TextCell):
        parsed = parse_text_date(cell.value)
        if parsed is not None:
            return parsed
        raise DateError(f"Unable to parse date: {cell.value}", details={"value": cell.value})
    
    # EmptyCell
    raise DateError("Date value is required: <empty>", details={"value": None})


def try_parse_date(value: Any) -> Result[dt.date]:
    """Parse a date cell, reporting failure as a Result instead of raising."""
    try:
        return Result.ok(parse_date(value))
    except DateError as e:
        logger.debug(f"Date rejected: {e.message}")
        return Result.fail(e.message)
