"""
Statement upload service.
Validates an uploaded file, parses it and builds the validation summary.
"""
from pathlib import Path
from typing import Any, Dict, Optional

from core.config import Settings, get_settings
from core.exceptions import FileProcessingError
from core.logger import setup_logger
from core.summary import build_validation_summary
from core.workbook import parse_workbook_bytes

logger = setup_logger(__name__)

ACCEPTED_EXTENSIONS = (".xlsx", ".xls")


class StatementService:
    """Service for turning uploaded statement workbooks into transactions."""
    
    def __init__(self, settings: Optional[Settings] = None):
        """Initialize statement service."""
        self.settings = settings or get_settings()
    
    def validate_upload(self, file_name: str, size: int) -> None:
        """
        Reject files that are not Excel workbooks or exceed the size limit.
        
        Args:
            file_name: Uploaded file name
            size: Size of the upload in bytes
        
        Raises:
            FileProcessingError: If the file is not acceptable
        """
        if not file_name or Path(file_name).suffix.lower() not in ACCEPTED_EXTENSIONS:
            raise FileProcessingError(
                "Only Excel files (.xlsx, .xls) are supported",
                details={"file_name": file_name}
            )
        
        if size > self.settings.max_upload_size_bytes:
            raise FileProcessingError(
                f"File is too large. Maximum size is {self.settings.max_upload_size_mb:.1f}MB",
                details={"file_name": file_name, "size": size}
            )
    
    def parse_upload(self, content: bytes, file_name: str) -> Dict[str, Any]:
        """
        Validate and parse an uploaded workbook.
        
        Args:
            content: Raw file bytes
            file_name: Uploaded file name
        
        Returns:
            Dictionary with the ParseResult and its ValidationSummary
        
        Raises:
            FileProcessingError: If the upload is rejected before parsing
        """
        self.validate_upload(file_name, len(content))
        
        logger.info(f"Parsing upload {file_name} ({len(content)} bytes)")
        result = parse_workbook_bytes(content, file_name, max_workers=self.settings.sheet_workers)
        summary = build_validation_summary(result)
        
        logger.info(
            f"Upload {file_name}: {result.workbook.total_transactions} transactions, "
            f"status={summary.status}"
        )
        return {"result": result, "summary": summary}
