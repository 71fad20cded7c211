# WORKFLOW: Pydantic models for records handed between ETL stages.
# Used by: Row normalizer, day aggregator, loader
# Schemas include:
# 1. Quote - buy/sell pair for one currency, None when not quoted
# 2. DayRecord - one calendar date with one Quote per supported currency
#
# Record flow: Raw row -> DayRecord -> date-keyed batch -> currency_day rows

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, field_validator

from core.constants import Currency


class Quote(BaseModel):
    iso: Currency
    buy: Optional[Decimal] = None
    sell: Optional[Decimal] = None


class DayRecord(BaseModel):
    date: date
    currencies: List[Quote]

    @field_validator("currencies")
    @classmethod
    def one_quote_per_currency(cls, value: List[Quote]) -> List[Quote]:
        codes = [quote.iso for quote in value]
        if len(codes) != len(set(codes)):
            raise ValueError(f"Duplicate currency quotes: {[c.value for c in codes]}")
        missing = [currency.value for currency in Currency if currency not in codes]
        if missing:
            raise ValueError(f"Missing currency quotes: {missing}")
        return value

    @property
    def key(self) -> str:
        """ISO date string used to key a batch of records."""
        return self.date.isoformat()

    def quote(self, iso: Currency) -> Optional[Quote]:
        for item in self.currencies:
            if item.iso == iso:
                return item
        return None
