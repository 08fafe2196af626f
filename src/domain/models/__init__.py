"""Domain models package."""

from .budget import (
    CategoryKind,
    CategoryNode,
    CategoryRecord,
    CellChangeListener,
    DirtyCell,
)
from .gnucash_rows import AccountRow, SplitAmountRow
from .transforms import TRANSFORM_LABELS, TransformOperation

__all__ = [
    "AccountRow",
    "CategoryKind",
    "CategoryNode",
    "CategoryRecord",
    "CellChangeListener",
    "DirtyCell",
    "SplitAmountRow",
    "TRANSFORM_LABELS",
    "TransformOperation",
]
