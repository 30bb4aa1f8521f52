"""
Spreadsheet container decoding.
Turns .xlsx/.xls bytes into ordered sheets of raw cell rows.
"""
import io
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from core.exceptions import WorkbookDecodeError
from core.logger import setup_logger

logger = setup_logger(__name__)

Grid = List[List[Any]]


def select_engine(file_name: str) -> str:
    """Pick the pandas Excel engine from the file extension."""
    return "xlrd" if Path(file_name).suffix.lower() == ".xls" else "openpyxl"


def frame_to_grid(df: pd.DataFrame) -> Optional[Grid]:
    """
    Convert a headerless sheet DataFrame into rows of raw values.
    
    Returns:
        None when the sheet has no used range, otherwise the rows
    """
    if df.empty:
        return None
    return df.astype(object).values.tolist()


def decode_workbook(content: bytes, file_name: str) -> Dict[str, Optional[Grid]]:
    """
    Decode a workbook into sheet name -> rows, in workbook order.
    
    Args:
        content: Raw file bytes
        file_name: Original file name (selects the engine)
    
    Returns:
        Ordered mapping of sheet names to grids (None for empty sheets)
    
    Raises:
        WorkbookDecodeError: If the container cannot be read
    """
    engine = select_engine(file_name)
    logger.info(f"Decoding {file_name} ({len(content)} bytes, engine={engine})")
    
    try:
        frames = pd.read_excel(
            io.BytesIO(content),
            sheet_name=None,
            header=None,
            dtype=object,
            engine=engine,
        )
    except Exception as e:
        logger.error(f"Failed to decode {file_name}: {str(e)}")
        raise WorkbookDecodeError(
            f"Invalid Excel format: {e}",
            details={"file_name": file_name, "engine": engine, "error": str(e)}
        )
    
    decoded = {str(name): frame_to_grid(df) for name, df in frames.items()}
    logger.debug(f"Decoded sheets: {list(decoded)}")
    return decoded
