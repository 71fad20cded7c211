# WORKFLOW: Database models for the exchange rate store.
# Used by: Loader, seed script, tests
# Models represent:
# 1. currency_day - one buy/sell quote per currency per date
#
# Data flow: Spreadsheet -> ETL -> DayRecord -> currency_day rows

from sqlalchemy import Column, Date, Index, Integer, Numeric, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CurrencyDay(Base):
    __tablename__ = "currency_day"

    id = Column(Integer, primary_key=True, autoincrement=True)
    iso = Column(String(3), nullable=False)
    date = Column(Date, nullable=False)
    buy = Column(Numeric(18, 8), nullable=True)  # NULL when not quoted
    sell = Column(Numeric(18, 8), nullable=True)

    __table_args__ = (
        Index('idx_currency_day_iso_date', 'iso', 'date'),
        Index('idx_currency_day_date', 'date'),
    )

    def __repr__(self) -> str:
        return f"CurrencyDay(iso={self.iso!r}, date={self.date}, buy={self.buy}, sell={self.sell})"
