"""Application use cases package."""

from .budget_transforms import BudgetTransformEngine
from .load_budget_tree import LoadBudgetTreeUseCase
from .save_budget import SaveBudgetUseCase, SaveBudgetResult
from .initialize_budget import InitializeBudgetUseCase
from .budget_session import BudgetEditingSession

__all__ = [
    "BudgetTransformEngine",
    "LoadBudgetTreeUseCase",
    "SaveBudgetUseCase",
    "SaveBudgetResult",
    "InitializeBudgetUseCase",
    "BudgetEditingSession",
]
