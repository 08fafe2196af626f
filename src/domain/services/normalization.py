"""Normalization helpers for raw category data."""

from src.domain.models.budget import CategoryKind


def normalize_mnemonic(mnemonic: str | None) -> str | None:
    """Normalize currency mnemonic values.

    Args:
        mnemonic: Raw mnemonic value from a category source.

    Returns:
        str | None: Upper-cased mnemonic, or None when blank.
    """
    if not mnemonic:
        return None
    cleaned = mnemonic.strip()
    return cleaned.upper() if cleaned else None


def normalize_category_kind(raw_type) -> CategoryKind | None:
    """Map a raw account type to a budgetable category kind.

    Args:
        raw_type: Account type string or enum-like object with a name.

    Returns:
        CategoryKind | None: INCOME or EXPENSE, None for other types.
    """
    if raw_type is None:
        return None
    name = raw_type.name if hasattr(raw_type, "name") else raw_type
    cleaned = str(name).strip().upper()
    if cleaned == CategoryKind.INCOME.value:
        return CategoryKind.INCOME
    if cleaned == CategoryKind.EXPENSE.value:
        return CategoryKind.EXPENSE
    return None


__all__ = ["normalize_mnemonic", "normalize_category_kind"]
