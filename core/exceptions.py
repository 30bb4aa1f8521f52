"""
Custom exceptions for statement ingestion.

These are internal signals. The pipeline itself never lets them escape:
callers of the workbook processor always receive a ParseResult.
"""
from typing import Any, Dict, Optional


class StatementIngestException(Exception):
    """Base exception for all statement ingestion errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.
        
        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DateError(StatementIngestException):
    """Raised when a cell cannot be interpreted as a calendar date."""
    pass


class WorkbookDecodeError(StatementIngestException):
    """Raised when the spreadsheet container cannot be decoded into sheets."""
    pass


class FileProcessingError(StatementIngestException):
    """Raised when an uploaded file is rejected before parsing."""
    pass


class ConfigurationError(StatementIngestException):
    """Raised when configuration is invalid."""
    pass
