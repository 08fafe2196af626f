"""Domain policies package."""

from .category_filters import is_budgetable_category, is_valid_category_name
from .transform_availability import available_transforms, budget_year_choices

__all__ = [
    "available_transforms",
    "budget_year_choices",
    "is_budgetable_category",
    "is_valid_category_name",
]
