# WORKFLOW: Fold day records into a date-keyed batch of new days.
# Used by: ETL pipeline
# Functions:
# 1. aggregate_days() - Drop days already on the store and collapse repeated dates
#
# Days on or before the store's last date are considered persisted. When the
# sheet repeats a date, the row that comes last in the document wins.

import logging
from datetime import date
from typing import Dict, Iterable, Optional

from etl.schemas import DayRecord

logger = logging.getLogger(__name__)


def aggregate_days(records: Iterable[DayRecord], last_date: Optional[date]) -> Dict[str, DayRecord]:
    """
    Build the batch of days to load.

    Args:
        records: Day records in document order
        last_date: Last date on the store, None if the store is empty

    Returns:
        Mapping of ISO date string to DayRecord, empty if nothing is new
    """
    days: Dict[str, DayRecord] = {}
    seen = 0

    for record in records:
        seen += 1
        if last_date is not None and record.date <= last_date:
            continue

        if record.key in days:
            logger.debug(f"Date {record.key} repeated, keeping the later row")
        days[record.key] = record

    logger.info(f"{len(days)} new days out of {seen} rows (last date on store: {last_date})")
    return days
