"""Use case writing unsaved budget cells back to the budget store."""

from dataclasses import dataclass

from src.application.ports.budget_store import BudgetStorePort
from src.domain.services.category_tree import CategoryTree
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SaveBudgetResult:
    """Result of a save pass.

    Attributes:
        written_count: Number of budget lines created or updated.
        skipped_count: Number of zero cells with no stored line to update.
    """

    written_count: int
    skipped_count: int


class SaveBudgetUseCase:
    """Persist the dirty leaf cells of a category tree."""

    def __init__(self, budget_store: BudgetStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            budget_store: Port receiving the budget lines.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budget_store = budget_store
        self._logger = logger or get_app_logger()

    def execute(self, tree: CategoryTree, year: int) -> SaveBudgetResult:
        """Write every dirty cell, in tree order.

        A zero amount is not written when the store holds no line for the
        cell. Each cell is marked clean right after it is handled, so cells
        left over by a failing store keep their dirty flag.

        Args:
            tree: Tree holding the edited budget.
            year: Budget year the tree belongs to.

        Returns:
            SaveBudgetResult: Counts of written and skipped cells.
        """
        written = 0
        skipped = 0
        for cell in tree.dirty_cells():
            stored = self._budget_store.read_amount(
                cell.identity,
                year,
                cell.month,
            )
            if stored is None and cell.amount == 0:
                skipped += 1
            else:
                self._budget_store.write_amount(
                    cell.identity,
                    year,
                    cell.month,
                    cell.amount,
                )
                written += 1
            tree.clear_changed(cell.row, cell.month)

        self._logger.info(
            f"Saved budget {year}: {written} written, {skipped} skipped"
        )
        return SaveBudgetResult(written_count=written, skipped_count=skipped)


__all__ = ["SaveBudgetUseCase", "SaveBudgetResult"]
