"""Editing session owning the category tree of one budget year.

The session is the single owner of a tree: the grid edits cells and runs
bulk operations through it, and switching budget or year rebuilds the tree
after the pending changes are either saved or discarded.
"""

from src.application.ports.actuals_source import ActualsSourcePort
from src.application.ports.budget_store import BudgetStorePort
from src.application.ports.category_source import CategorySourcePort
from src.application.use_cases.budget_transforms import BudgetTransformEngine
from src.application.use_cases.initialize_budget import (
    InitializeBudgetUseCase,
)
from src.application.use_cases.load_budget_tree import LoadBudgetTreeUseCase
from src.application.use_cases.save_budget import (
    SaveBudgetResult,
    SaveBudgetUseCase,
)
from src.domain.constants import DEFAULT_DECIMAL_PLACES
from src.domain.models.budget import CellChangeListener
from src.domain.models.transforms import TransformOperation
from src.domain.services.amounts import parse_amount
from src.domain.services.category_tree import CategoryTree
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class BudgetEditingSession:
    """Edit, transform and save one budget year."""

    def __init__(
        self,
        category_source: CategorySourcePort,
        budget_store: BudgetStorePort,
        actuals_source: ActualsSourcePort,
        year: int,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        listener: CellChangeListener | None = None,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Open a session and load the budget year.

        Args:
            category_source: Port providing budgetable categories.
            budget_store: Store of the budget being edited.
            actuals_source: Port providing actual spending totals.
            year: Budget year to edit.
            decimal_places: Decimal places used to parse typed amounts.
            listener: Optional sink told which cells changed.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._category_source = category_source
        self._budget_store = budget_store
        self._actuals_source = actuals_source
        self._year = year
        self._decimal_places = decimal_places
        self._listener = listener
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._changed_cells: set[tuple[int, int]] = set()
        self._tree = self._load()
        self._engine = self._build_engine()

    @property
    def tree(self) -> CategoryTree:
        return self._tree

    @property
    def year(self) -> int:
        return self._year

    @property
    def budget_store(self) -> BudgetStorePort:
        return self._budget_store

    @property
    def has_unsaved_changes(self) -> bool:
        """Return True when any cell holds a change not yet saved."""
        return self._tree.has_dirty_cells()

    def take_changed_cells(self) -> list[tuple[int, int]]:
        """Return and forget the (row, column) cells changed since last call."""
        cells = sorted(self._changed_cells)
        self._changed_cells.clear()
        return cells

    def edit_cell(self, row: int, month: int, value: int) -> bool:
        """Set a leaf month to an amount in minor units."""
        return self._tree.set_month_value(row, month, value)

    def edit_cell_text(self, row: int, month: int, text: str) -> bool:
        """Parse a typed amount and set it on a leaf month.

        Returns:
            bool: False when the text is not an amount or nothing changed.
        """
        try:
            value = parse_amount(text, self._decimal_places)
        except ValueError as exc:
            self._logger.warning(f"Ignoring cell input {text!r}: {exc}")
            return False
        return self.edit_cell(row, month, value)

    def apply_transform(
        self,
        operation: TransformOperation,
        row: int,
        column: int,
    ) -> bool:
        """Run a bulk-edit operation on a row."""
        applied = self._engine.apply(operation, row, column)
        if applied:
            self._usage_logger.info(
                f"Transform {TransformOperation(operation).value} on "
                f"{self._tree.node(row).display_name} ({self._year})"
            )
        return applied

    def initialize_from_prior_budget(self, source_store: BudgetStorePort) -> int:
        """Copy last year's lines of another budget into this year."""
        changed = self._initializer().copy_prior_budget(
            self._tree,
            self._year,
            source_store,
        )
        self._usage_logger.info(
            f"Initialized {self._year} from prior budget ({changed} cells)"
        )
        return changed

    def initialize_from_prior_actuals(self) -> int:
        """Set this year to last year's actual spending."""
        changed = self._initializer().copy_prior_actuals(
            self._tree,
            self._year,
        )
        self._usage_logger.info(
            f"Initialized {self._year} from prior actuals ({changed} cells)"
        )
        return changed

    def save(self) -> SaveBudgetResult:
        """Write every unsaved cell to the budget store."""
        result = SaveBudgetUseCase(
            self._budget_store,
            logger=self._logger,
        ).execute(self._tree, self._year)
        self._usage_logger.info(
            f"Saved {self._year}: {result.written_count} lines written"
        )
        return result

    def discard(self) -> None:
        """Drop unsaved changes by reloading the year from the store."""
        if self.has_unsaved_changes:
            self._logger.info(
                f"Discarding {len(self._tree.dirty_cells())} unsaved cells"
            )
        self._reload()

    def switch(
        self,
        budget_store: BudgetStorePort | None = None,
        year: int | None = None,
        save_changes: bool = False,
    ) -> SaveBudgetResult | None:
        """Move to another budget or year.

        Args:
            budget_store: Store of the budget to open, or None to keep it.
            year: Year to open, or None to keep it.
            save_changes: Save pending changes first instead of dropping
                them.

        Returns:
            SaveBudgetResult | None: Result of the save, when one ran.
        """
        result = None
        if self.has_unsaved_changes and save_changes:
            result = self.save()
        elif self.has_unsaved_changes:
            self._logger.info(
                f"Dropping {len(self._tree.dirty_cells())} unsaved cells "
                f"of {self._year}"
            )
        if budget_store is not None:
            self._budget_store = budget_store
        if year is not None:
            self._year = year
        self._reload()
        return result

    def _reload(self) -> None:
        self._tree = self._load()
        self._engine = self._build_engine()
        self._changed_cells.clear()

    def _load(self) -> CategoryTree:
        return LoadBudgetTreeUseCase(
            self._category_source,
            self._budget_store,
            logger=self._logger,
        ).execute(self._year, listener=self._record_change)

    def _build_engine(self) -> BudgetTransformEngine:
        return BudgetTransformEngine(
            self._tree,
            self._actuals_source,
            self._year,
            logger=self._logger,
        )

    def _initializer(self) -> InitializeBudgetUseCase:
        return InitializeBudgetUseCase(
            self._actuals_source,
            logger=self._logger,
        )

    def _record_change(self, row: int, column: int) -> None:
        self._changed_cells.add((row, column))
        if self._listener is not None:
            self._listener(row, column)


__all__ = ["BudgetEditingSession"]
