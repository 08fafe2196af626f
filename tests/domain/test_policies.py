"""Tests for domain policies."""

from datetime import date

from src.domain.constants import TOTAL_COLUMN
from src.domain.models.transforms import TransformOperation as Op
from src.domain.policies.category_filters import (
    is_budgetable_category,
    is_valid_category_name,
)
from src.domain.policies.transform_availability import (
    available_transforms,
    budget_year_choices,
)


def test_totals_column_offers_row_wide_operations() -> None:
    assert available_transforms(TOTAL_COLUMN) == [
        Op.DISTRIBUTE_TOTAL,
        Op.SET_ALL_MONTHS_TO_ACTUALS,
    ]


def test_january_has_no_previous_period_operations() -> None:
    assert available_transforms(1) == [
        Op.COPY_TO_END_OF_YEAR,
        Op.COPY_TO_ENTIRE_YEAR,
        Op.SET_TO_ACTUAL_SPEND,
    ]


def test_december_cannot_copy_to_end_of_year() -> None:
    operations = available_transforms(12)

    assert Op.COPY_TO_END_OF_YEAR not in operations
    assert Op.ROLLOVER_ALL_PRIOR_MONTHS in operations
    assert len(operations) == 6


def test_mid_year_offers_every_month_operation() -> None:
    assert available_transforms(6) == [
        Op.APPLY_PREVIOUS_PERIOD,
        Op.COPY_TO_END_OF_YEAR,
        Op.COPY_TO_ENTIRE_YEAR,
        Op.SET_TO_ACTUAL_SPEND,
        Op.SET_TO_PRIOR_MONTH_ACTUAL_SPEND,
        Op.ROLLOVER_PRIOR_MONTH,
        Op.ROLLOVER_ALL_PRIOR_MONTHS,
    ]


def test_invalid_columns_offer_nothing() -> None:
    assert available_transforms(0) == []
    assert available_transforms(14) == []


def test_operation_labels_match_menu_text() -> None:
    assert Op.DISTRIBUTE_TOTAL.label == (
        "Distribute the total across all months"
    )
    assert all(operation.label for operation in Op)


def test_budget_year_choices_surround_today() -> None:
    assert budget_year_choices(date(2024, 7, 1)) == [2023, 2024, 2025]


def test_category_name_filters() -> None:
    assert is_valid_category_name("Groceries") is True
    assert is_valid_category_name("   ") is False
    assert is_valid_category_name(None) is False
    assert is_valid_category_name("0123456789abcdef0123456789ABCDEF") is False
    assert is_budgetable_category("Rent", hidden=False) is True
    assert is_budgetable_category("Rent", hidden=True) is False
    assert is_budgetable_category("Rent", False, ancestor_hidden=True) is False
