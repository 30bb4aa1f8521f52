"""
Pydantic models for the ingestion pipeline.

Every stage returns its produced value together with the errors and
warnings it generated; callers merge them explicitly.
"""
import datetime as dt
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from core.cells import CellValue

ErrorKind = Literal["validation", "parsing", "format"]

REQUIRED_FIELDS = ("date", "description", "amount")


class Transaction(BaseModel):
    """A validated statement line."""
    date: dt.date
    description: str = Field(..., min_length=1)
    amount: float = Field(..., allow_inf_nan=False)
    balance: Optional[float] = Field(None, allow_inf_nan=False)
    category: Optional[str] = None
    account: Optional[str] = None
    
    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        """Description must carry text after trimming."""
        if not v.strip():
            raise ValueError("Description is required")
        return v


class ColumnMapping(BaseModel):
    """Header names resolved for each semantic field of one sheet."""
    model_config = ConfigDict(frozen=True)
    
    date: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[str] = None
    balance: Optional[str] = None
    
    @property
    def is_transaction_sheet(self) -> bool:
        """Date, description and amount all resolved to a header."""
        return all(getattr(self, name) is not None for name in REQUIRED_FIELDS)


class ParsingError(BaseModel):
    """A problem found while reading a workbook. Data, not an exception."""
    sheet: str = ""
    row: int = 0
    column: str = ""
    message: str
    kind: ErrorKind = "parsing"


class Sheet(BaseModel):
    name: str
    rows: List[List[CellValue]] = Field(default_factory=list)
    transactions: List[Transaction] = Field(default_factory=list)


class Workbook(BaseModel):
    file_name: str
    sheets: List[Sheet] = Field(default_factory=list)
    total_transactions: int = 0
    
    @model_validator(mode="after")
    def check_transaction_total(self):
        """total_transactions must equal the sum over included sheets."""
        counted = sum(len(sheet.transactions) for sheet in self.sheets)
        if counted != self.total_transactions:
            raise ValueError(
                f"total_transactions={self.total_transactions} does not match "
                f"{counted} transactions across sheets"
            )
        return self


class ParseResult(BaseModel):
    workbook: Workbook
    errors: List[ParsingError] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class ValidationOutcome(BaseModel):
    """Result of field validation for one candidate row."""
    is_valid: bool
    errors: List[ParsingError] = Field(default_factory=list)


class RowOutcome(BaseModel):
    """Result of extracting one data row: a transaction or its errors."""
    transaction: Optional[Transaction] = None
    errors: List[ParsingError] = Field(default_factory=list)


class ExtractionResult(BaseModel):
    """Transactions and errors produced from one sheet's data rows."""
    transactions: List[Transaction] = Field(default_factory=list)
    errors: List[ParsingError] = Field(default_factory=list)


class SheetOutcome(BaseModel):
    """Result of processing one sheet. ``sheet`` is None when it is excluded."""
    sheet: Optional[Sheet] = None
    errors: List[ParsingError] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
