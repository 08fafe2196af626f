"""Use case building the category tree of a budget year."""

from src.application.ports.budget_store import BudgetStorePort
from src.application.ports.category_source import CategorySourcePort
from src.domain.constants import FIRST_MONTH, LAST_MONTH
from src.domain.models.budget import CellChangeListener
from src.domain.services.category_tree import CategoryTree
from src.domain.services.validation import validate_tree
from src.infrastructure.logging.logger import get_app_logger


class LoadBudgetTreeUseCase:
    """Build a category tree and fill it with stored budget amounts."""

    def __init__(
        self,
        category_source: CategorySourcePort,
        budget_store: BudgetStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            category_source: Port providing budgetable categories.
            budget_store: Port providing stored budget amounts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._category_source = category_source
        self._budget_store = budget_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        year: int,
        listener: CellChangeListener | None = None,
    ) -> CategoryTree:
        """Return the tree for a year with no unsaved changes.

        Stored amounts go through the loading path, so no cell is marked
        dirty, and the loaded tree is audited for aggregation faults. The
        listener is attached once loading is complete.

        Args:
            year: Budget year to load.
            listener: Optional sink told which cells change afterwards.

        Returns:
            CategoryTree: Tree holding the stored budget.
        """
        records = self._category_source.fetch_categories()
        tree = CategoryTree.build(records, logger=self._logger)
        loaded = 0
        for row in tree.leaf_rows():
            identity = tree.node(row).identity
            for month in range(FIRST_MONTH, LAST_MONTH + 1):
                amount = self._budget_store.read_amount(identity, year, month)
                if amount is None:
                    continue
                tree.load_month_value(row, month, amount)
                loaded += 1
        validate_tree(tree, self._logger)
        tree.set_listener(listener)
        self._logger.info(
            f"Loaded {len(tree)} rows and {loaded} budget lines for {year}"
        )
        return tree


__all__ = ["LoadBudgetTreeUseCase"]
