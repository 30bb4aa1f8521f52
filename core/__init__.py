"""
Core processing modules for statement ingestion.

This package contains:
- amounts: Amount normalization
- cells: Tagged cell values
- columns: Header-to-field mapping
- config: Application configuration and settings
- dates: Date normalization
- decoding: Excel container decoding
- exceptions: Custom exception classes
- extraction: Row extraction and isolation
- logger: Logging configuration
- result: Explicit success/failure container
- schema: Pydantic models for the pipeline
- sheets: Sheet processing
- summary: Validation summary
- validation: Field validation
- workbook: Workbook orchestration
"""
