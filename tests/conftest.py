"""Shared fakes for budget editor tests."""

from unittest.mock import MagicMock

import pytest

from src.domain.models.budget import CategoryKind, CategoryRecord
from src.domain.services.category_tree import CategoryTree

# Rows of the sample tree:
# 0 Income-Expenses, 1 Income, 2 Bonus, 3 Salary,
# 4 Expenses, 5 Food, 6 Home, 7 Power, 8 Rent.
SAMPLE_RECORDS = [
    CategoryRecord("bonus", "Bonus", CategoryKind.INCOME, 0, False, "USD"),
    CategoryRecord("salary", "Salary", CategoryKind.INCOME, 0, False, "USD"),
    CategoryRecord("food", "Food", CategoryKind.EXPENSE, 0, False, "USD"),
    CategoryRecord("home", "Home", CategoryKind.EXPENSE, 0, True, "USD"),
    CategoryRecord("power", "Power", CategoryKind.EXPENSE, 1, False, "USD"),
    CategoryRecord("rent", "Rent", CategoryKind.EXPENSE, 1, False, "USD"),
]


class FakeBudgetStore:
    """In-memory budget store keyed by (identity, year, month)."""

    def __init__(self, lines=None, fail_on=None) -> None:
        self.lines = dict(lines or {})
        self.fail_on = fail_on
        self.writes: list[tuple[str, int, int, int]] = []

    def read_amount(self, identity, year, month):
        return self.lines.get((identity, year, month))

    def write_amount(self, identity, year, month, amount):
        if self.fail_on == (identity, month):
            raise RuntimeError("budget store unavailable")
        self.lines[(identity, year, month)] = amount
        self.writes.append((identity, year, month, amount))


class FakeActualsSource:
    """Actuals keyed by (identity, year) holding twelve monthly totals."""

    def __init__(self, totals=None) -> None:
        self.totals = dict(totals or {})
        self.calls: list[tuple[str, int, int, int]] = []

    def totals_for(self, identity, year, start_month, month_count):
        self.calls.append((identity, year, start_month, month_count))
        values = self.totals.get((identity, year))
        if values is None:
            return []
        return list(values[start_month - 1:start_month - 1 + month_count])


class FakeCategorySource:
    """Category source returning a fixed list of records."""

    def __init__(self, records) -> None:
        self.records = list(records)
        self.fetch_count = 0

    def fetch_categories(self):
        self.fetch_count += 1
        return list(self.records)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def tree(logger) -> CategoryTree:
    return CategoryTree.build(SAMPLE_RECORDS, logger=logger)


@pytest.fixture
def budget_store() -> FakeBudgetStore:
    return FakeBudgetStore()


@pytest.fixture
def actuals_source() -> FakeActualsSource:
    return FakeActualsSource()


@pytest.fixture
def category_source() -> FakeCategorySource:
    return FakeCategorySource(SAMPLE_RECORDS)
