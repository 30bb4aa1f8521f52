"""
Amount normalization.
Turns numeric and currency-formatted text cells into signed floats.

Unparseable text becomes 0.0 rather than an error, so a malformed amount
is recorded as a zero-value transaction instead of rejecting the row.
"""
import re
from typing import Any

from core.cells import NumberCell, TextCell, to_cell
from core.logger import setup_logger

logger = setup_logger(__name__)

CURRENCY_SYMBOLS = "$€£¥₹₩₽¢"

STRIP_PATTERN = re.compile(r"[\s," + re.escape(CURRENCY_SYMBOLS) + r"]")

# Leading float prefix, the longest run a float parser would consume
NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_float(text: str) -> float:
    match = NUMBER_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(0))


def clean_amount_text(text: str) -> str:
    """Remove whitespace, thousands separators and currency symbols."""
    return STRIP_PATTERN.sub("", text)


def parse_amount(value: Any) -> float:
    """
    Parse one cell into a signed amount.
    
    Args:
        value: A cell variant (raw values are classified first)
    
    Returns:
        The amount; numeric cells pass through, "(12.50)" is -12.5,
        anything unparseable is 0.0
    """
    cell = to_cell(value)
    
    if isinstance(cell, NumberCell):
        return cell.value
    
    if isinstance(cell, TextCell):
        cleaned = clean_amount_text(cell.value)
        
        # Accounting notation for debits
        if cleaned.startswith("(") and cleaned.endswith(")"):
            amount = _leading_float(cleaned[1:-1])
            return -amount if amount else 0.0
        
        match = NUMBER_PREFIX.match(cleaned)
        if not match:
            logger.debug(f"Amount '{cell.value}' has no numeric content, using 0")
            return 0.0
        return float(match.group(0))
    
    return 0.0
