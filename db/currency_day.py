# WORKFLOW: Store queries for the currency_day table.
# Used by: ETL pipeline (high-water mark and load), reporting
# Functions:
# 1. get_last_date() - Latest date already persisted, None when empty
# 2. get_rates_from_date() - Quotes of the latest date on or before a date
# 3. insert_days() - Expand day records into one row per currency and insert
#
# Errors from the database are rolled back and re-raised unmodified.

"""
Store queries for the currency_day table.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from db.models import CurrencyDay
from etl.schemas import DayRecord

logger = logging.getLogger(__name__)


def get_last_date(db: Session) -> Optional[date]:
    """
    Return the last date existing on the store.

    Args:
        db: Database session

    Returns:
        Maximum persisted date, or None if the table is empty
    """
    try:
        last_date = db.query(func.max(CurrencyDay.date)).scalar()
        logger.info(f"Last date on store: {last_date}")
        return last_date

    except Exception as e:
        logger.error(f"Failed to get last date: {e}")
        raise


def get_rates_from_date(db: Session, on_date: date) -> List[CurrencyDay]:
    """
    Return the rates in force on a given date.

    Rates are published on business days only, so this returns the rows of
    the latest persisted date on or before ``on_date``.

    Args:
        db: Database session
        on_date: Date to look up

    Returns:
        List of CurrencyDay rows, empty if nothing is persisted up to that date
    """
    latest = (
        db.query(func.max(CurrencyDay.date))
        .filter(CurrencyDay.date <= on_date)
        .scalar_subquery()
    )
    return (
        db.query(CurrencyDay)
        .filter(CurrencyDay.date == latest)
        .order_by(CurrencyDay.id)
        .all()
    )


def insert_days(db: Session, days: Iterable[DayRecord]) -> int:
    """
    Insert day records, one row per (date, currency) pair.

    Args:
        db: Database session
        days: Day records, each with one quote per currency

    Returns:
        Number of rows inserted
    """
    days = list(days) if days else []
    if not days:
        logger.info("No days to insert")
        return 0

    rows = [
        CurrencyDay(
            iso=quote.iso.value,
            date=day.date,
            buy=quote.buy,
            sell=quote.sell
        )
        for day in days
        for quote in day.currencies
    ]

    try:
        db.add_all(rows)
        db.commit()
        logger.info(f"Inserted {len(rows)} rows for {len(days)} days")
        return len(rows)

    except Exception as e:
        db.rollback()
        logger.error(f"Failed to insert days: {e}")
        raise
