# WORKFLOW: Static layout of the published exchange rate spreadsheet.
# Used by: Row normalizer, loader, tests
# Defines:
# 1. Currency - closed set of quoted currencies
# 2. Column - column offsets of the day/month/year fields
# 3. CURRENCY_COLUMNS - buy/sell column offsets per currency
#
# A change in the document layout is handled here, not in the ETL code.

from enum import Enum
from typing import Dict, Tuple

from core.exceptions import ConfigError


class Currency(str, Enum):
    USD = "USD"
    ARS = "ARS"
    BRL = "BRL"
    EUR = "EUR"


class Column:
    DAY = 0
    MONTH = 1
    YEAR = 2


# (buy, sell) offsets, in the order the quotes are stored
CURRENCY_COLUMNS: Dict[Currency, Tuple[int, int]] = {
    Currency.USD: (3, 4),
    Currency.ARS: (5, 6),
    Currency.BRL: (7, 8),
    Currency.EUR: (9, 10),
}


def validate_currency_columns(columns: Dict[Currency, Tuple[int, int]] = CURRENCY_COLUMNS) -> None:
    """
    Check that every supported currency has a buy/sell column pair.

    Raises:
        ConfigError: If a currency is missing or its offsets collide with
            the date columns or another currency.
    """
    missing = [currency.value for currency in Currency if currency not in columns]
    if missing:
        raise ConfigError(f"No column offsets configured for currencies: {missing}")

    used = {Column.DAY, Column.MONTH, Column.YEAR}
    for currency, offsets in columns.items():
        for offset in offsets:
            if offset in used:
                raise ConfigError(f"Column {offset} of {currency.value} is already in use")
            used.add(offset)
