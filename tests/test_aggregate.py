# WORKFLOW: Tests for the deduplicating day aggregator.
# Test scenarios:
# 1. Days on or before the store's last date never reach the batch
# 2. Repeated dates keep the row that comes last in the document
# 3. Empty input and fully filtered input give an empty batch
# 4. Re-aggregating with the batch's own max date gives nothing

from datetime import date, timedelta
from decimal import Decimal

import pytest

from core.constants import Currency
from etl.aggregate import aggregate_days
from etl.schemas import DayRecord, Quote


def make_record(day: date, usd_buy: str = "70.5") -> DayRecord:
    return DayRecord(
        date=day,
        currencies=[Quote(iso=currency, buy=Decimal(usd_buy), sell=None) for currency in Currency]
    )


def month_of_records():
    start = date(2020, 8, 1)
    return [make_record(start + timedelta(days=offset)) for offset in range(31)]


@pytest.mark.parametrize("last_date", [
    date(2020, 7, 31),
    date(2020, 8, 1),
    date(2020, 8, 15),
    date(2020, 8, 31),
    date(2021, 1, 1),
])
def test_nothing_on_or_before_last_date(last_date):
    records = month_of_records()

    days = aggregate_days(records, last_date)

    assert all(record.date > last_date for record in days.values())
    assert len(days) == len([record for record in records if record.date > last_date])


def test_last_date_itself_is_dropped():
    days = aggregate_days([make_record(date(2020, 8, 1)), make_record(date(2020, 8, 2))], date(2020, 8, 1))

    assert list(days) == ["2020-08-02"]


def test_empty_store_keeps_everything():
    days = aggregate_days(month_of_records(), None)

    assert len(days) == 31
    assert "2020-08-01" in days


def test_later_row_wins_on_same_date():
    first = make_record(date(2020, 8, 3), usd_buy="70.1")
    second = make_record(date(2020, 8, 3), usd_buy="70.9")

    days = aggregate_days([first, second], date(2020, 7, 31))

    assert len(days) == 1
    assert days["2020-08-03"] is second
    assert days["2020-08-03"].quote(Currency.USD).buy == Decimal("70.9")


def test_empty_input_gives_empty_batch():
    assert aggregate_days([], None) == {}
    assert aggregate_days(iter([]), date(2020, 1, 1)) == {}


def test_everything_filtered_gives_empty_batch():
    assert aggregate_days(month_of_records(), date(2020, 8, 31)) == {}


def test_reseed_with_batch_max_date_is_empty():
    first_run = aggregate_days(month_of_records(), date(2020, 8, 10))
    high_water_mark = max(record.date for record in first_run.values())

    second_run = aggregate_days(month_of_records(), high_water_mark)

    assert second_run == {}
