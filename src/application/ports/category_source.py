"""Port for enumerating budgetable categories."""

from typing import Protocol

from src.domain.models.budget import CategoryRecord


class CategorySourcePort(Protocol):
    """Port exposing the active Income and Expense categories."""

    def fetch_categories(self) -> list[CategoryRecord]:
        """Return categories in pre-order, stable within one tree build."""


__all__ = ["CategorySourcePort"]
