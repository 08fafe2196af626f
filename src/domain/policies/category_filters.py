"""Policies deciding which categories appear in the budget grid."""


_HEX_CHARS = set("0123456789abcdef")


def is_valid_category_name(name: str | None) -> bool:
    """Return True when the category name is not blank or an opaque hex id.

    Args:
        name: Category name to evaluate.

    Returns:
        bool: True when the name should be retained.
    """
    candidate = (name or "").strip()
    if not candidate:
        return False
    if len(candidate) == 32:
        lowered = candidate.lower()
        if all(char in _HEX_CHARS for char in lowered):
            return False
    return True


def is_budgetable_category(
    name: str | None,
    hidden: bool,
    ancestor_hidden: bool = False,
) -> bool:
    """Return True when a category is shown in the budget grid.

    Hidden categories, and every category below a hidden one, are left out.
    """
    if hidden or ancestor_hidden:
        return False
    return is_valid_category_name(name)


__all__ = ["is_valid_category_name", "is_budgetable_category"]
