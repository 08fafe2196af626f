"""Bulk-edit operations applied to one row of the budget grid.

Every operation writes through ``CategoryTree.set_month_value`` so roll-up
rows, year totals, dirty flags and change notifications stay consistent.
Actual spending is read from an ``ActualsSourcePort``. Spending reported on
an income category is negative, so it is flipped before being used as an
income budget, except by ``set_to_prior_month_actual_spend`` which keeps the
raw value.
"""

from collections.abc import Sequence

from src.application.ports.actuals_source import ActualsSourcePort
from src.domain.constants import FIRST_MONTH, LAST_MONTH, TOTAL_COLUMN
from src.domain.models.budget import CategoryKind, CategoryNode
from src.domain.models.transforms import TransformOperation
from src.domain.services.category_tree import CategoryTree, is_month
from src.infrastructure.logging.logger import get_app_logger


def read_actuals(
    actuals_source: ActualsSourcePort,
    identity: str,
    year: int,
    start_month: int,
    month_count: int,
) -> list[int]:
    """Return exactly ``month_count`` actual totals, zero when missing.

    Args:
        actuals_source: Port providing actual totals.
        identity: Category identity.
        year: Calendar year of the totals.
        start_month: First month requested (1..12).
        month_count: Number of consecutive months requested.

    Returns:
        list[int]: Totals in minor units, padded or truncated to the count.
    """
    values: Sequence[int | None] | None = actuals_source.totals_for(
        identity,
        year,
        start_month,
        month_count,
    )
    totals = [int(value or 0) for value in list(values or [])[:month_count]]
    totals.extend([0] * (month_count - len(totals)))
    return totals


def budget_amount_for(kind: CategoryKind, actual: int) -> int:
    """Convert an actual spending total into a budget amount for a kind."""
    if kind is CategoryKind.INCOME:
        return -actual
    return actual


class BudgetTransformEngine:
    """Apply bulk-edit operations to leaf rows of a category tree."""

    def __init__(
        self,
        tree: CategoryTree,
        actuals_source: ActualsSourcePort,
        year: int,
        logger=None,
    ) -> None:
        """Initialize the engine.

        Args:
            tree: Category tree being edited.
            actuals_source: Port providing actual spending totals.
            year: Budget year the tree belongs to.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._tree = tree
        self._actuals_source = actuals_source
        self._year = year
        self._logger = logger or get_app_logger()
        self._operations = {
            TransformOperation.APPLY_PREVIOUS_PERIOD: (
                self.apply_previous_period
            ),
            TransformOperation.COPY_TO_END_OF_YEAR: self.copy_to_end_of_year,
            TransformOperation.COPY_TO_ENTIRE_YEAR: self.copy_to_entire_year,
            TransformOperation.SET_TO_ACTUAL_SPEND: self.set_to_actual_spend,
            TransformOperation.SET_TO_PRIOR_MONTH_ACTUAL_SPEND: (
                self.set_to_prior_month_actual_spend
            ),
            TransformOperation.ROLLOVER_PRIOR_MONTH: self.rollover_prior_month,
            TransformOperation.ROLLOVER_ALL_PRIOR_MONTHS: (
                self.rollover_all_prior_months
            ),
            TransformOperation.DISTRIBUTE_TOTAL: self.distribute_total,
            TransformOperation.SET_ALL_MONTHS_TO_ACTUALS: (
                self.set_all_months_to_actuals
            ),
        }

    @property
    def year(self) -> int:
        return self._year

    def apply(
        self,
        operation: TransformOperation,
        row: int,
        column: int,
    ) -> bool:
        """Dispatch an operation selected from the grid.

        Args:
            operation: Operation to run.
            row: Row of a leaf category.
            column: Selected column (1..12, or 13 for the totals column).

        Returns:
            bool: True when the operation was applied.
        """
        try:
            operation = TransformOperation(operation)
        except ValueError:
            self._logger.warning(f"Ignoring unknown transform {operation!r}")
            return False
        self._logger.info(
            f"Applying {operation.value} to row {row} column {column}"
        )
        return self._operations[operation](row, column)

    def apply_previous_period(self, row: int, column: int) -> bool:
        """Copy the previous month's budget into the selected month."""
        node = self._leaf(row, column, first_month=FIRST_MONTH + 1)
        if node is None:
            return False
        self._tree.set_month_value(
            row,
            column,
            node.month_value(column - 1),
        )
        return True

    def copy_to_end_of_year(self, row: int, column: int) -> bool:
        """Copy the selected month's budget to every later month."""
        node = self._leaf(row, column)
        if node is None:
            return False
        value = node.month_value(column)
        for month in range(column + 1, LAST_MONTH + 1):
            self._tree.set_month_value(row, month, value)
        return True

    def copy_to_entire_year(self, row: int, column: int) -> bool:
        """Copy the selected month's budget to every month of the year."""
        node = self._leaf(row, column)
        if node is None:
            return False
        value = node.month_value(column)
        for month in range(FIRST_MONTH, LAST_MONTH + 1):
            if month != column:
                self._tree.set_month_value(row, month, value)
        return True

    def rollover_prior_month(self, row: int, column: int) -> bool:
        """Move the unspent prior-month budget into the selected month.

        The prior month becomes its actual spending and the selected month
        absorbs the difference, so the two-month total is unchanged.
        """
        node = self._leaf(row, column, first_month=FIRST_MONTH + 1)
        if node is None:
            return False
        prior = column - 1
        (actual,) = self._actuals(node, prior, 1)
        two_month_total = node.month_value(prior) + node.month_value(column)
        prior_value = budget_amount_for(node.kind, actual)
        self._tree.set_month_value(row, prior, prior_value)
        self._tree.set_month_value(row, column, two_month_total - prior_value)
        return True

    def rollover_all_prior_months(self, row: int, column: int) -> bool:
        """Move every unspent budget since January into the selected month.

        In January there is nothing to roll over and the month is kept.
        """
        node = self._leaf(row, column)
        if node is None:
            return False
        actuals = self._actuals(node, FIRST_MONTH, column - 1)
        running_total = sum(
            node.month_value(month) for month in range(FIRST_MONTH, column + 1)
        )
        spent = 0
        for month, actual in enumerate(actuals, start=FIRST_MONTH):
            value = budget_amount_for(node.kind, actual)
            spent += value
            self._tree.set_month_value(row, month, value)
        self._tree.set_month_value(row, column, running_total - spent)
        return True

    def set_to_actual_spend(self, row: int, column: int) -> bool:
        """Set the selected month to its actual spending."""
        node = self._leaf(row, column)
        if node is None:
            return False
        (actual,) = self._actuals(node, column, 1)
        self._tree.set_month_value(
            row,
            column,
            budget_amount_for(node.kind, actual),
        )
        return True

    def set_to_prior_month_actual_spend(self, row: int, column: int) -> bool:
        """Set the selected month to the previous month's raw actual total."""
        node = self._leaf(row, column, first_month=FIRST_MONTH + 1)
        if node is None:
            return False
        (actual,) = self._actuals(node, column - 1, 1)
        self._tree.set_month_value(row, column, actual)
        return True

    def distribute_total(self, row: int, column: int = TOTAL_COLUMN) -> bool:
        """Spread the year total evenly, December taking the remainder."""
        node = self._leaf(row, column, allow_total=True)
        if node is None:
            return False
        total = node.year_total
        per_month = total // 12
        for month in range(FIRST_MONTH, LAST_MONTH):
            self._tree.set_month_value(row, month, per_month)
        self._tree.set_month_value(
            row,
            LAST_MONTH,
            total - per_month * (LAST_MONTH - FIRST_MONTH),
        )
        return True

    def set_all_months_to_actuals(
        self,
        row: int,
        column: int = TOTAL_COLUMN,
    ) -> bool:
        """Set every month of the row to its actual spending."""
        node = self._leaf(row, column, allow_total=True)
        if node is None:
            return False
        actuals = self._actuals(node, FIRST_MONTH, LAST_MONTH)
        for month, actual in enumerate(actuals, start=FIRST_MONTH):
            self._tree.set_month_value(
                row,
                month,
                budget_amount_for(node.kind, actual),
            )
        return True

    def _actuals(
        self,
        node: CategoryNode,
        start_month: int,
        month_count: int,
    ) -> list[int]:
        return read_actuals(
            self._actuals_source,
            node.identity,
            self._year,
            start_month,
            month_count,
        )

    def _leaf(
        self,
        row: int,
        column: int,
        first_month: int = FIRST_MONTH,
        allow_total: bool = False,
    ) -> CategoryNode | None:
        node = self._tree.node(row)
        if node is None:
            self._logger.warning(f"Ignoring transform on unknown row {row}")
            return None
        if node.is_aggregate:
            self._logger.warning(
                f"Ignoring transform on roll-up row {node.display_name}"
            )
            return None
        valid_total = allow_total and column == TOTAL_COLUMN
        if not valid_total and not (is_month(column) and column >= first_month):
            self._logger.warning(
                f"Ignoring transform on {node.display_name}: column {column} "
                "is out of range"
            )
            return None
        return node


__all__ = ["BudgetTransformEngine", "read_actuals", "budget_amount_for"]
