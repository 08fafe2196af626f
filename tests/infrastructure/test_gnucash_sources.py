"""Tests for the SQLAlchemy category and actuals sources."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from src.domain.models.budget import CategoryKind
from src.infrastructure.actuals_source import SqlAlchemyActualsSource
from src.infrastructure.category_source import SqlAlchemyCategorySource

SCHEMA = [
    """
    CREATE TABLE commodities (guid TEXT PRIMARY KEY, mnemonic TEXT)
    """,
    """
    CREATE TABLE accounts (
        guid TEXT PRIMARY KEY,
        name TEXT,
        account_type TEXT,
        commodity_guid TEXT,
        parent_guid TEXT,
        hidden INTEGER
    )
    """,
    """
    CREATE TABLE transactions (guid TEXT PRIMARY KEY, post_date TEXT)
    """,
    """
    CREATE TABLE splits (
        guid TEXT PRIMARY KEY,
        tx_guid TEXT,
        account_guid TEXT,
        quantity_num INTEGER,
        quantity_denom INTEGER
    )
    """,
]

ACCOUNTS = [
    ("root", "Root Account", "ROOT", None, None, 0),
    ("inc", "Income", "INCOME", "usd", "root", 0),
    ("salary", "Salary", "INCOME", "usd", "inc", 0),
    ("exp", "Expenses", "EXPENSE", "usd", "root", 0),
    ("rent", "Rent", "EXPENSE", "usd", "exp", 0),
    ("old", "Old stuff", "EXPENSE", "usd", "exp", 1),
    ("bank", "Checking", "BANK", "usd", "root", 0),
]

TRANSACTIONS = [
    ("t1", "2024-01-31 10:59:00"),
    ("t2", "2024-02-01 10:59:00"),
    ("t3", "2024-02-15 10:59:00"),
    ("t4", "2023-02-15 10:59:00"),
    ("t5", "2024-12-31 10:59:00"),
]

SPLITS = [
    ("s1", "t1", "rent", 95000, 100),
    ("s2", "t2", "rent", 50050, 100),
    ("s3", "t3", "rent", 1000, 100),
    ("s4", "t4", "rent", 77700, 100),
    ("s5", "t3", "salary", -400000, 100),
    ("s6", "t5", "rent", 1, 1),
    ("s7", "t1", "bank", -95000, 100),
]


@pytest.fixture
def db_port(tmp_path) -> MagicMock:
    engine = create_engine(f"sqlite:///{tmp_path / 'book.gnucash'}")
    with engine.begin() as conn:
        for statement in SCHEMA:
            conn.exec_driver_sql(statement)
        conn.exec_driver_sql(
            "INSERT INTO commodities VALUES ('usd', 'USD')"
        )
        conn.exec_driver_sql(
            "INSERT INTO accounts VALUES (?, ?, ?, ?, ?, ?)",
            ACCOUNTS,
        )
        conn.exec_driver_sql(
            "INSERT INTO transactions VALUES (?, ?)",
            TRANSACTIONS,
        )
        conn.exec_driver_sql(
            "INSERT INTO splits VALUES (?, ?, ?, ?, ?)",
            SPLITS,
        )
    port = MagicMock()
    port.get_gnucash_engine.return_value = engine
    return port


def test_category_source_returns_visible_categories(db_port) -> None:
    source = SqlAlchemyCategorySource(db_port, logger=MagicMock())

    records = source.fetch_categories()

    assert [(record.guid, record.depth) for record in records] == [
        ("exp", 0),
        ("rent", 1),
        ("inc", 0),
        ("salary", 1),
    ]
    assert records[0].is_aggregate is True
    assert records[1].kind is CategoryKind.EXPENSE
    assert records[1].currency == "USD"


def test_actuals_source_sums_months_in_minor_units(db_port) -> None:
    source = SqlAlchemyActualsSource(db_port, logger=MagicMock())

    assert source.totals_for("rent", 2024, 1, 3) == [95000, 51050, 0]
    assert source.totals_for("rent", 2024, 12, 1) == [100]
    assert source.totals_for("salary", 2024, 2, 1) == [-400000]
    assert source.totals_for("rent", 2023, 1, 12)[1] == 77700


def test_actuals_source_handles_empty_ranges(db_port) -> None:
    source = SqlAlchemyActualsSource(db_port, logger=MagicMock())

    assert source.totals_for("rent", 2024, 1, 0) == []
    assert source.totals_for("unknown", 2024, 1, 2) == [0, 0]
