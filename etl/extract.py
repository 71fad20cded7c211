# WORKFLOW: Extract the data rows of the published exchange rate spreadsheet.
# Used by: ETL pipeline, seed script
# Functions:
# 1. read_document() - Decode workbook bytes and return the first sheet
# 2. extract_rows() - Yield rows whose first column is a day-of-month number
# 3. cell_text() - Render a spreadsheet cell the way it reads in the sheet
#
# Extraction flow: Workbook bytes -> First sheet -> Skip header rows -> Day rows
# Header, footer and blank rows are discarded without knowing their exact shape.

"""
Extract the data rows of the published exchange rate spreadsheet.
"""

import io
import logging
import re
from typing import Any, Iterator, List, Optional

import pandas as pd

from core.constants import Column
from core.exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)

INT_PATTERN = re.compile(r'^\d+$')


def cell_text(value: Any) -> str:
    """
    Render a cell as text.

    Blank cells become "", integral floats lose their ".0" (Excel stores
    every number as a float) and everything else is stripped.
    """
    if value is None:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def read_document(content: bytes, engine: Optional[str] = None) -> pd.DataFrame:
    """
    Decode a workbook and return its first sheet.

    Args:
        content: Raw workbook bytes
        engine: pandas Excel engine, auto-detected when None

    Returns:
        DataFrame with one column per spreadsheet column and no header

    Raises:
        MalformedDocumentError: If the payload cannot be decoded or has no sheets
    """
    try:
        sheets = pd.read_excel(
            io.BytesIO(content),
            sheet_name=None,
            header=None,
            dtype=object,
            engine=engine
        )
    except ImportError:
        raise
    except Exception as e:
        logger.error(f"Failed to read workbook: {e}")
        raise MalformedDocumentError(f"Cannot read workbook: {e}") from e

    if not sheets:
        raise MalformedDocumentError("Workbook has no sheets")

    name, sheet = next(iter(sheets.items()))
    logger.info(f"Reading sheet '{name}': {sheet.shape}")
    return sheet


def extract_rows(sheet: pd.DataFrame, start_row: int) -> Iterator[List[Any]]:
    """
    Yield the useful rows of a sheet.

    A row is useful if its day column holds an integer. Blank cells are
    yielded as None.

    Args:
        sheet: First sheet of the workbook
        start_row: Number of leading rows to skip

    Raises:
        MalformedDocumentError: If start_row is outside the sheet
    """
    if start_row < 0 or start_row >= len(sheet.index):
        raise MalformedDocumentError(
            f"Data offset {start_row} is out of range for a sheet with {len(sheet.index)} rows"
        )

    useful = 0
    for values in sheet.iloc[start_row:].itertuples(index=False, name=None):
        row = [None if cell_text(value) == "" else value for value in values]
        if not row or not INT_PATTERN.match(cell_text(row[Column.DAY])):
            continue
        useful += 1
        yield row

    logger.info(f"Found {useful} useful lines")
