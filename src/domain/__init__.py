"""Domain package for budget grid rules and core models."""

from .constants import GRID_COLUMN_LABELS, MONTH_LABELS, TOTAL_COLUMN
from .models import (
    CategoryKind,
    CategoryNode,
    CategoryRecord,
    DirtyCell,
    TransformOperation,
)
from .policies import (
    available_transforms,
    budget_year_choices,
    is_budgetable_category,
)
from .services import (
    CategoryTree,
    find_invariant_violations,
    format_amount,
    parse_amount,
)

__all__ = [
    "GRID_COLUMN_LABELS",
    "MONTH_LABELS",
    "TOTAL_COLUMN",
    "CategoryKind",
    "CategoryNode",
    "CategoryRecord",
    "DirtyCell",
    "TransformOperation",
    "available_transforms",
    "budget_year_choices",
    "is_budgetable_category",
    "CategoryTree",
    "find_invariant_violations",
    "format_amount",
    "parse_amount",
]
