"""
Unit tests for the statement upload service.
"""
import pytest

from core.config import get_settings
from core.exceptions import FileProcessingError
from services.statement_service import StatementService


def test_rejects_non_excel_files():
    service = StatementService()
    
    with pytest.raises(FileProcessingError) as exc_info:
        service.validate_upload("statement.csv", 100)
    assert exc_info.value.message == "Only Excel files (.xlsx, .xls) are supported"


def test_rejects_large_files(monkeypatch):
    monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "1")
    service = StatementService(get_settings())
    
    with pytest.raises(FileProcessingError) as exc_info:
        service.validate_upload("statement.xlsx", 2 * 1024 * 1024)
    assert exc_info.value.message == "File is too large. Maximum size is 1.0MB"


def test_accepts_upper_case_extension():
    StatementService().validate_upload("STATEMENT.XLSX", 10)


def test_parse_upload(make_xlsx, checking_rows):
    content = make_xlsx({"Checking": checking_rows})
    
    parsed = StatementService().parse_upload(content, "checking.xlsx")
    
    assert parsed["result"].workbook.total_transactions == 2
    assert parsed["summary"].status == "success"


def test_parse_upload_reports_decode_failure():
    parsed = StatementService().parse_upload(b"garbage", "broken.xlsx")
    
    assert parsed["result"].workbook.sheets == []
    assert parsed["summary"].status == "error"
    assert list(parsed["summary"].errors_by_sheet) == ["General"]
