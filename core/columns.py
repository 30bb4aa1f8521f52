"""
Header-to-field mapping for statement sheets.
"""
from typing import Dict, Optional, Sequence, Tuple

from core.logger import setup_logger
from core.schema import ColumnMapping

logger = setup_logger(__name__)

# Priority order matters: the first pattern found in any header wins.
FIELD_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "date": ("date", "transaction date", "trans date", "posting date", "value date"),
    "description": (
        "description", "transaction description", "details", "memo", "reference", "particulars",
    ),
    "amount": ("amount", "transaction amount", "debit", "credit", "withdrawal", "deposit"),
    "balance": ("balance", "account balance", "running balance", "available balance"),
}


def find_header(headers: Sequence[str], patterns: Sequence[str]) -> Optional[str]:
    """
    Return the first header containing the highest-priority matching pattern.
    
    Args:
        headers: Header texts in column order
        patterns: Lowercase substrings in priority order
    
    Returns:
        The original header text, or None if no pattern matches
    """
    normalized = [str(h or "").lower().strip() for h in headers]
    for pattern in patterns:
        for index, header in enumerate(normalized):
            if pattern in header:
                return headers[index]
    return None


def detect_column_mapping(headers: Sequence[str]) -> ColumnMapping:
    """
    Map a header row onto the date, description, amount and balance fields.
    
    Always returns a mapping; fields with no matching header stay None.
    """
    mapping = ColumnMapping(**{
        field: find_header(headers, patterns)
        for field, patterns in FIELD_PATTERNS.items()
    })
    logger.debug(f"Detected column mapping {mapping.model_dump()} for headers {list(headers)}")
    return mapping