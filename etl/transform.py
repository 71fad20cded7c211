# WORKFLOW: Transform spreadsheet rows into day records.
# Used by: ETL pipeline
# Functions:
# 1. normalize_month() - Map a Spanish month spelling to its 3-letter code
# 2. resolve_date() - Compose day, month and year into a calendar date
# 3. parse_quote_value() - Parse a locale formatted quote, None when not quoted
# 4. normalize_row() - Build a DayRecord from a row and its resolved date
# 5. transform_rows() - Carry month/year forward across rows and normalize them
#
# Transform flow: Day rows -> Carry-forward date -> Quotes per currency -> DayRecord
# Month and year are printed only on the first row of each group, so they are
# carried forward from the nearest preceding row that has them.

"""
Transform spreadsheet rows into day records.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Iterator, List, Optional

from core.constants import CURRENCY_COLUMNS, Column, validate_currency_columns
from core.exceptions import DateParseError
from etl.extract import cell_text
from etl.schemas import DayRecord, Quote

logger = logging.getLogger(__name__)

FLOAT_PATTERN = re.compile(r'^\d+([.,]\d+)?$')

MONTH_NUMBERS = {
    "ene": 1, "feb": 2, "mar": 3, "abr": 4, "may": 5, "jun": 6,
    "jul": 7, "ago": 8, "sep": 9, "oct": 10, "nov": 11, "dic": 12,
}

# Spellings found in the month column that are not already a code
MONTH_ALIASES = {
    "enero": "ene",
    "febrero": "feb",
    "marzo": "mar",
    "abril": "abr",
    "mayo": "may",
    "junio": "jun",
    "julio": "jul",
    "agosto": "ago",
    "set": "sep",
    "sept": "sep",
    "setiembre": "sep",
    "septiembre": "sep",
    "octubre": "oct",
    "noviembre": "nov",
    "diciembre": "dic",
}

validate_currency_columns()


@dataclass
class DateContext:
    """Month and year carried forward from the last row that printed them."""
    month: Optional[str] = None
    year: Optional[str] = None

    def update(self, month: str, year: str) -> None:
        if month:
            self.month = month
        if year:
            self.year = year


def normalize_month(month: str) -> str:
    """
    Normalize a month spelling to its canonical code.

    e.g. 'Set', 'SEP', 'setiembre' and 'Septiembre' all return 'sep'.

    Raises:
        DateParseError: If the spelling is not a known month
    """
    token = (month or "").lower().strip().rstrip(".")
    token = MONTH_ALIASES.get(token, token)
    if token not in MONTH_NUMBERS:
        raise DateParseError(f"Unknown month: {month!r}")
    return token


def resolve_date(day: Any, month: Optional[str], year: Any) -> date:
    """
    Build the date of a row from its day, month and year fields.

    Args:
        day: Day of month
        month: Month spelling, as printed in the sheet
        year: Four digit year

    Returns:
        Calendar date, no time component

    Raises:
        DateParseError: If a field is missing or the date does not exist
    """
    if not month or not year:
        raise DateParseError(f"No month/year known for day {day}")

    code = normalize_month(month)
    try:
        return date(int(cell_text(year)), MONTH_NUMBERS[code], int(cell_text(day)))
    except (ValueError, OverflowError) as e:
        raise DateParseError(f"Invalid date {day}-{month}-{year}: {e}") from e


def parse_quote_value(value: Any) -> Optional[Decimal]:
    """
    Return the value as a Decimal if it's a valid quote, None otherwise.

    Both "70,5" and "70.5" are accepted. Blanks, dashes and text mean the
    currency was not quoted that day.
    """
    text = cell_text(value)
    if not FLOAT_PATTERN.match(text):
        return None
    return Decimal(text.replace(',', '.'))


def _cell(row: List[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def normalize_row(row: List[Any], row_date: date) -> DayRecord:
    """
    Build the day record of a row.

    Args:
        row: Raw spreadsheet row
        row_date: Date resolved for the row

    Returns:
        DayRecord with one quote per supported currency
    """
    quotes = [
        Quote(
            iso=currency,
            buy=parse_quote_value(_cell(row, buy_column)),
            sell=parse_quote_value(_cell(row, sell_column))
        )
        for currency, (buy_column, sell_column) in CURRENCY_COLUMNS.items()
    ]
    return DayRecord(date=row_date, currencies=quotes)


def transform_rows(rows: Iterable[List[Any]]) -> Iterator[DayRecord]:
    """
    Turn day rows into day records, in document order.

    Rows whose date cannot be resolved are logged and skipped; the rest of
    the batch goes on.

    Args:
        rows: Useful rows from the extractor

    Yields:
        One DayRecord per row with a valid date
    """
    context = DateContext()
    skipped = 0

    for row in rows:
        context.update(cell_text(_cell(row, Column.MONTH)), cell_text(_cell(row, Column.YEAR)))
        day = _cell(row, Column.DAY)

        try:
            row_date = resolve_date(day, context.month, context.year)
        except DateParseError as e:
            skipped += 1
            logger.warning(f"Skipping row for day {cell_text(day)}: {e}")
            continue

        yield normalize_row(row, row_date)

    if skipped:
        logger.warning(f"Skipped {skipped} rows with invalid dates")
