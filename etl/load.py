# WORKFLOW: Load a batch of day records into the store.
# Used by: ETL pipeline
# Functions:
# 1. load_days() - Flatten the date-keyed batch and insert it
#
# Load flow: {date: DayRecord} -> [DayRecord] -> currency_day rows (one per currency)

import logging
from typing import Dict

from sqlalchemy.orm import Session

from db.currency_day import insert_days
from etl.schemas import DayRecord

logger = logging.getLogger(__name__)


def load_days(db: Session, days: Dict[str, DayRecord]) -> int:
    """
    Save the days into the database.

    Args:
        db: Database session
        days: Batch produced by aggregate_days()

    Returns:
        Number of rows inserted
    """
    records = list(days.values())
    logger.info(f"Loading {len(records)} days")
    return insert_days(db, records)
