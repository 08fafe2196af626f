"""Tests for InitializeBudgetUseCase."""

from src.application.use_cases.initialize_budget import InitializeBudgetUseCase
from src.domain.constants import TOTAL_COLUMN

YEAR = 2025
SALARY, FOOD, RENT = 3, 5, 8


def test_copy_prior_budget_reads_previous_year(
    tree,
    budget_store,
    actuals_source,
    logger,
) -> None:
    budget_store.lines[("rent", YEAR - 1, 1)] = 1000
    budget_store.lines[("rent", YEAR - 1, 2)] = 1100
    budget_store.lines[("rent", YEAR, 1)] = 5

    changed = InitializeBudgetUseCase(
        actuals_source,
        logger=logger,
    ).copy_prior_budget(tree, YEAR, budget_store)

    assert changed == 2
    assert tree.node(RENT).months[:3] == [1000, 1100, 0]
    assert [(cell.identity, cell.month) for cell in tree.dirty_cells()] == [
        ("rent", 1),
        ("rent", 2),
    ]


def test_copy_prior_budget_resets_missing_lines_to_zero(
    tree,
    budget_store,
    actuals_source,
    logger,
) -> None:
    tree.load_month_value(FOOD, 7, 300)

    changed = InitializeBudgetUseCase(
        actuals_source,
        logger=logger,
    ).copy_prior_budget(tree, YEAR, budget_store)

    assert changed == 1
    assert tree.value_at(FOOD, 7) == 0
    assert tree.node(FOOD).is_dirty(7) is True


def test_copy_prior_actuals_flips_income(
    tree,
    actuals_source,
    logger,
) -> None:
    actuals_source.totals[("salary", YEAR - 1)] = [-3000] * 12
    actuals_source.totals[("rent", YEAR - 1)] = [900] * 12

    changed = InitializeBudgetUseCase(
        actuals_source,
        logger=logger,
    ).copy_prior_actuals(tree, YEAR)

    assert changed == 24
    assert tree.value_at(SALARY, TOTAL_COLUMN) == 36000
    assert tree.value_at(RENT, TOTAL_COLUMN) == 10800
    assert tree.value_at(0, TOTAL_COLUMN) == 36000 - 10800
    assert ("salary", YEAR - 1, 1, 12) in actuals_source.calls
