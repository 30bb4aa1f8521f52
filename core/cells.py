"""
Tagged representation of raw spreadsheet cells.

Decoded sheets hand over untyped values (numbers, strings, dates,
booleans, missing markers). They are classified once into one of four
variants so every normalizer can discriminate them explicitly.
"""
import datetime as dt
import math
import numbers
from typing import Annotated, Any, Iterable, List, Literal, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field


class NumberCell(BaseModel):
    """Numeric cell (may also be a spreadsheet date serial)."""
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["number"] = "number"
    value: float


class TextCell(BaseModel):
    """Text cell, untrimmed."""
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["text"] = "text"
    value: str


class DateCell(BaseModel):
    """Cell the decoder already typed as a calendar date."""
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["date"] = "date"
    value: dt.date


class EmptyCell(BaseModel):
    """Missing or empty cell."""
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["empty"] = "empty"


CellValue = Annotated[
    Union[NumberCell, TextCell, DateCell, EmptyCell],
    Field(discriminator="kind"),
]

CELL_TYPES = (NumberCell, TextCell, DateCell, EmptyCell)

EMPTY = EmptyCell()


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    # list-likes are never a single missing marker
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def to_cell(value: Any) -> Union[NumberCell, TextCell, DateCell, EmptyCell]:
    """
    Classify a raw decoded value into a cell variant.
    
    Args:
        value: Raw value from the decoder or caller
    
    Returns:
        The matching cell variant
    """
    if isinstance(value, CELL_TYPES):
        return value
    if _is_missing(value):
        return EMPTY
    if pd.api.types.is_bool(value):
        # FALSE reads as an empty cell, TRUE as its display text
        return TextCell(value="TRUE") if value else EMPTY
    if isinstance(value, numbers.Real):
        return NumberCell(value=float(value))
    if isinstance(value, dt.datetime):
        return DateCell(value=value.date())
    if isinstance(value, dt.date):
        return DateCell(value=value)
    if isinstance(value, str):
        return TextCell(value=value)
    return TextCell(value=str(value))


def to_row(values: Any) -> List[Union[NumberCell, TextCell, DateCell, EmptyCell]]:
    """Classify every value of a raw row. A missing or non-sequence row is empty."""
    if values is None or isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return []
    return [to_cell(value) for value in values]


def cell_to_text(cell: Any) -> str:
    """
    Render a cell as text, the way a header or description reads.
    
    Integral numbers lose their fractional part (5.0 -> "5"), dates render
    as ISO strings and empty cells as "".
    """
    if isinstance(cell, EmptyCell):
        return ""
    if isinstance(cell, TextCell):
        return cell.value
    if isinstance(cell, NumberCell):
        value = cell.value
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(cell, DateCell):
        return cell.value.isoformat()
    return cell_to_text(to_cell(cell))


def is_blank_cell(cell: Any) -> bool:
    """Empty cells and empty strings are blank; numeric zero is not."""
    if isinstance(cell, EmptyCell):
        return True
    if isinstance(cell, TextCell):
        return cell.value == ""
    return False


def is_blank_row(row: Iterable[Any]) -> bool:
    """True when every cell of the row is blank (an empty row included)."""
    return all(is_blank_cell(cell) for cell in row)
