"""Application ports package."""

from .actuals_source import ActualsSourcePort
from .budget_store import BudgetCatalogPort, BudgetStorePort
from .category_source import CategorySourcePort
from .database import DatabaseEnginePort

__all__ = [
    "ActualsSourcePort",
    "BudgetCatalogPort",
    "BudgetStorePort",
    "CategorySourcePort",
    "DatabaseEnginePort",
]
