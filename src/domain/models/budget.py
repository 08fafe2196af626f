"""Domain models for the monthly budget grid."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from src.domain.constants import MONTHS_IN_YEAR


class CategoryKind(str, Enum):
    """Kind of a grid row.

    ROOT is only used by the overall Income-Expenses total row.
    """

    ROOT = "ROOT"
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class CategoryRecord:
    """Category emitted by a category source.

    Attributes:
        guid: Stable category identity.
        name: Short (non-qualified) category name.
        kind: INCOME or EXPENSE.
        depth: Nesting level below the top of its kind (0 = top level).
        is_aggregate: True when the category has sub-categories.
        currency: Currency mnemonic of the category.
    """

    guid: str
    name: str
    kind: CategoryKind
    depth: int
    is_aggregate: bool
    currency: str | None = None


@dataclass
class CategoryNode:
    """Row of the budget grid.

    Month values are stored zero-based in ``months``; use ``month_value``
    and the tree mutation API to address them as calendar months 1..12.
    """

    identity: str
    display_name: str
    depth: int
    parent_index: int | None
    kind: CategoryKind
    is_aggregate: bool
    currency: str | None = None
    months: list[int] = field(
        default_factory=lambda: [0] * MONTHS_IN_YEAR
    )
    year_total: int = 0
    dirty: list[bool] = field(
        default_factory=lambda: [False] * MONTHS_IN_YEAR
    )

    def month_value(self, month: int) -> int:
        """Return the value stored for a calendar month (1..12)."""
        return self.months[month - 1]

    def is_dirty(self, month: int) -> bool:
        """Return True when the month holds an unsaved change."""
        return self.dirty[month - 1]

    @property
    def is_leaf(self) -> bool:
        """Return True when the row is directly editable."""
        return not self.is_aggregate


@dataclass(frozen=True)
class DirtyCell:
    """Unsaved budget value waiting to be written back."""

    row: int
    identity: str
    month: int
    amount: int


# Notification sink told which (row, column) cells changed.
CellChangeListener = Callable[[int, int], None]


__all__ = [
    "CategoryKind",
    "CategoryRecord",
    "CategoryNode",
    "DirtyCell",
    "CellChangeListener",
]
