"""Ports for reading and writing persisted budget lines."""

from typing import Protocol


class BudgetStorePort(Protocol):
    """Port exposing the monthly amounts of one budget.

    Amounts are signed integers of minor currency units.
    """

    def read_amount(
        self,
        identity: str,
        year: int,
        month: int,
    ) -> int | None:
        """Return the stored amount, or None when no line exists."""

    def write_amount(
        self,
        identity: str,
        year: int,
        month: int,
        amount: int,
    ) -> None:
        """Create the line if absent, otherwise update it."""


class BudgetCatalogPort(Protocol):
    """Port listing the budgets a user can edit."""

    def fetch_budget_names(self) -> list[str]:
        """Return budget names sorted for display."""


__all__ = ["BudgetStorePort", "BudgetCatalogPort"]
