"""
FastAPI routes for statement upload and parsing.
"""
import asyncio
from typing import Any, Dict

from fastapi import FastAPI, File, HTTPException, UploadFile

from core.config import get_settings
from core.exceptions import FileProcessingError
from core.logger import setup_logger
from services.statement_service import StatementService

logger = setup_logger(__name__)
settings = get_settings()

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Extract and validate transactions from bank statement workbooks",
    version="1.0.0"
)

# Service instance
statement_service = StatementService(settings)

# Raw sheet rows are large; they are only returned on request
ROWS_EXCLUDE = {"workbook": {"sheets": {"__all__": {"rows"}}}}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "statement_ingest",
        "version": "1.0.0"
    }


@app.post("/parse")
async def parse_statement(
    file: UploadFile = File(...),
    include_rows: bool = False,
) -> Dict[str, Any]:
    """
    Parse an uploaded statement workbook.
    
    Args:
        file: .xlsx or .xls workbook
        include_rows: Also return every sheet's raw cells
    
    Returns:
        Parse result (workbook, errors, warnings) and validation summary
    """
    logger.info(f"Received file: {file.filename}")
    content = await file.read()
    
    try:
        # Parsing is CPU bound; keep it off the event loop
        loop = asyncio.get_running_loop()
        parsed = await loop.run_in_executor(
            None, statement_service.parse_upload, content, file.filename or ""
        )
    except FileProcessingError as e:
        logger.warning(f"Rejected upload {file.filename}: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    
    exclude = None if include_rows else ROWS_EXCLUDE
    return {
        "result": parsed["result"].model_dump(mode="json", exclude=exclude),
        "summary": parsed["summary"].model_dump(mode="json"),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
