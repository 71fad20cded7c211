"""Pytest fixtures for the currency day seeder tests."""

import io
from typing import Any, List

import pytest
from openpyxl import Workbook
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.models import Base

HEADER_ROWS = [
    ["Instituto Nacional de Estadística"],
    ["Cotizaciones diarias de monedas"],
    ["Pesos uruguayos por unidad de moneda extranjera"],
    ["Fecha", None, None, "Dólar USA", None, "Peso argentino", None, "Real", None, "Euro"],
    ["Día", "Mes", "Año", "Compra", "Venta", "Compra", "Venta", "Compra", "Venta", "Compra", "Venta"],
    ["Fuente: BCU"],
    ["(-) Sin cotización"],
]


def make_row(day: Any, month: Any = None, year: Any = None, quotes: List[Any] = None) -> List[Any]:
    """Build a raw row: day, month, year, then USD/ARS/BRL/EUR buy and sell."""
    quotes = quotes if quotes is not None else ["70,5", "71,0", "1,2", "1,4", "13,1", "14,2", "80,3", "83,9"]
    return [day, month, year] + list(quotes)


def build_workbook(rows: List[List[Any]], header_rows: List[List[Any]] = HEADER_ROWS) -> bytes:
    """Write the header rows followed by ``rows`` to an xlsx workbook in memory."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Cotizaciones"
    for row in header_rows + rows:
        sheet.append(row)

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(name="make_row")
def make_row_fixture():
    return make_row


@pytest.fixture(name="build_workbook")
def build_workbook_fixture():
    return build_workbook
