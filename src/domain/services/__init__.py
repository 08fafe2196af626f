"""Domain services package."""

from .actuals import monthly_totals
from .amounts import format_amount, parse_amount
from .category_ordering import order_categories
from .category_tree import ROOT_ROW, CategoryTree, is_month
from .normalization import normalize_category_kind, normalize_mnemonic
from .validation import find_invariant_violations, validate_tree

__all__ = [
    "CategoryTree",
    "ROOT_ROW",
    "is_month",
    "format_amount",
    "parse_amount",
    "monthly_totals",
    "order_categories",
    "normalize_category_kind",
    "normalize_mnemonic",
    "find_invariant_violations",
    "validate_tree",
]
