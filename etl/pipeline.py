# WORKFLOW: Seed pipeline orchestrator.
# Used by: Seed script, end-to-end tests
# Functions:
# 1. run_seed() - Extract, transform, deduplicate and load one workbook
#
# Seed flow: Workbook bytes -> Day rows -> DayRecords -> New days -> currency_day rows
# Stages run one after the other; the only state carried between rows is the
# month/year context owned by transform_rows().

"""
Seed pipeline orchestrator.
"""

from typing import Optional

import structlog
from sqlalchemy.orm import Session

from core.config import settings
from db.currency_day import get_last_date
from etl.aggregate import aggregate_days
from etl.extract import extract_rows, read_document
from etl.load import load_days
from etl.transform import transform_rows

logger = structlog.get_logger()


def run_seed(
    db: Session,
    content: bytes,
    start_row: Optional[int] = None,
    engine: Optional[str] = None
) -> int:
    """
    Insert the days of a workbook that are newer than the store's last date.

    Args:
        db: Database session
        content: Workbook bytes
        start_row: Header rows to skip, defaults to settings.header_skip_rows
        engine: pandas Excel engine, defaults to settings.excel_engine

    Returns:
        Number of rows inserted
    """
    if start_row is None:
        start_row = settings.header_skip_rows
    if engine is None:
        engine = settings.excel_engine

    logger.info("Seed started", size_bytes=len(content), start_row=start_row)

    try:
        sheet = read_document(content, engine=engine)
        rows = extract_rows(sheet, start_row)
        last_date = get_last_date(db)

        days = aggregate_days(transform_rows(rows), last_date)
        inserted = load_days(db, days)

    except Exception as e:
        logger.error(
            "Seed failed",
            error_type=type(e).__name__,
            error_message=str(e)
        )
        raise

    logger.info(
        "Seed finished",
        last_date=str(last_date) if last_date else None,
        new_days=len(days),
        inserted=inserted
    )
    return inserted
