"""Use case seeding a budget year from the previous year."""

from src.application.ports.actuals_source import ActualsSourcePort
from src.application.ports.budget_store import BudgetStorePort
from src.application.use_cases.budget_transforms import (
    budget_amount_for,
    read_actuals,
)
from src.domain.constants import FIRST_MONTH, LAST_MONTH, MONTHS_IN_YEAR
from src.domain.services.category_tree import CategoryTree
from src.infrastructure.logging.logger import get_app_logger


class InitializeBudgetUseCase:
    """Fill every leaf month from last year's budget or actuals.

    Values go through the editing path: cells whose value changes become
    dirty and are written by the next save.
    """

    def __init__(self, actuals_source: ActualsSourcePort, logger=None) -> None:
        self._actuals_source = actuals_source
        self._logger = logger or get_app_logger()

    def copy_prior_budget(
        self,
        tree: CategoryTree,
        year: int,
        source_store: BudgetStorePort,
    ) -> int:
        """Copy the previous year of a budget into the tree.

        Args:
            tree: Tree of the budget year being initialized.
            year: Budget year being initialized.
            source_store: Store of the budget to copy from.

        Returns:
            int: Number of cells whose value changed.
        """
        changed = 0
        for row in tree.leaf_rows():
            identity = tree.node(row).identity
            for month in range(FIRST_MONTH, LAST_MONTH + 1):
                amount = source_store.read_amount(identity, year - 1, month)
                if tree.set_month_value(row, month, amount or 0):
                    changed += 1
        self._logger.info(
            f"Initialized {year} from the {year - 1} budget: "
            f"{changed} cells changed"
        )
        return changed

    def copy_prior_actuals(self, tree: CategoryTree, year: int) -> int:
        """Set every leaf month to the previous year's actual spending.

        Args:
            tree: Tree of the budget year being initialized.
            year: Budget year being initialized.

        Returns:
            int: Number of cells whose value changed.
        """
        changed = 0
        for row in tree.leaf_rows():
            node = tree.node(row)
            actuals = read_actuals(
                self._actuals_source,
                node.identity,
                year - 1,
                FIRST_MONTH,
                MONTHS_IN_YEAR,
            )
            for month, actual in enumerate(actuals, start=FIRST_MONTH):
                value = budget_amount_for(node.kind, actual)
                if tree.set_month_value(row, month, value):
                    changed += 1
        self._logger.info(
            f"Initialized {year} from {year - 1} actuals: "
            f"{changed} cells changed"
        )
        return changed


__all__ = ["InitializeBudgetUseCase"]
