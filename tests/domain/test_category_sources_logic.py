"""Tests for category ordering, normalization and monthly actuals."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from src.domain.models.budget import CategoryKind
from src.domain.models.gnucash_rows import AccountRow, SplitAmountRow
from src.domain.services.actuals import monthly_totals
from src.domain.services.category_ordering import order_categories
from src.domain.services.normalization import (
    normalize_category_kind,
    normalize_mnemonic,
)


def _accounts() -> list[AccountRow]:
    return [
        AccountRow("root", "Root Account", "ROOT", None),
        AccountRow("exp", "Expenses", "EXPENSE", "root", mnemonic="usd"),
        AccountRow("inc", "Income", "INCOME", "root", mnemonic="USD"),
        AccountRow("util", "utilities", "EXPENSE", "exp"),
        AccountRow("water", "Water", "EXPENSE", "util"),
        AccountRow("auto", "Auto", "EXPENSE", "exp"),
        AccountRow("secret", "Secret", "EXPENSE", "exp", hidden=True),
        AccountRow("spy", "Spy", "EXPENSE", "secret"),
        AccountRow("bank", "Checking", "BANK", "root"),
        AccountRow("wage", "Wages", "INCOME", "inc"),
    ]


def test_order_categories_walks_depth_first_by_name() -> None:
    records = order_categories(_accounts())

    assert [(record.guid, record.depth) for record in records] == [
        ("exp", 0),
        ("auto", 1),
        ("util", 1),
        ("water", 2),
        ("inc", 0),
        ("wage", 1),
    ]
    by_guid = {record.guid: record for record in records}
    assert by_guid["exp"].is_aggregate is True
    assert by_guid["util"].is_aggregate is True
    assert by_guid["auto"].is_aggregate is False
    assert by_guid["exp"].currency == "USD"
    assert by_guid["wage"].kind is CategoryKind.INCOME


def test_hidden_only_children_do_not_make_an_aggregate() -> None:
    accounts = [
        AccountRow("exp", "Expenses", "EXPENSE", None),
        AccountRow("gone", "Gone", "EXPENSE", "exp", hidden=True),
    ]

    records = order_categories(accounts)

    assert [record.guid for record in records] == ["exp"]
    assert records[0].is_aggregate is False


def test_normalize_category_kind_accepts_enum_like_values() -> None:
    assert normalize_category_kind("expense") is CategoryKind.EXPENSE
    assert (
        normalize_category_kind(SimpleNamespace(name="INCOME"))
        is CategoryKind.INCOME
    )
    assert normalize_category_kind("BANK") is None
    assert normalize_category_kind(None) is None
    assert normalize_mnemonic(" eur ") == "EUR"
    assert normalize_mnemonic("") is None


def test_monthly_totals_buckets_splits_by_month() -> None:
    splits = [
        SplitAmountRow("a", date(2024, 1, 3), Decimal("10.005")),
        SplitAmountRow("a", date(2024, 1, 20), Decimal("5")),
        SplitAmountRow("a", date(2024, 3, 1), Decimal("-2.5")),
        SplitAmountRow("a", date(2023, 3, 1), Decimal("100")),
        SplitAmountRow("a", date(2024, 5, 1), Decimal("100")),
    ]

    assert monthly_totals(splits, 2024, 1, 4, 2) == [1501, 0, -250, 0]
    assert monthly_totals(splits, 2024, 3, 1, 0) == [-3]
    assert monthly_totals([], 2024, 1, 0, 2) == []
