"""Consistency checks for budget category trees."""

from logging import Logger

from src.domain.constants import FIRST_MONTH, LAST_MONTH
from src.domain.models.budget import CategoryKind
from src.domain.services.category_tree import CategoryTree


def _child_sign(parent_kind: CategoryKind, child_kind: CategoryKind) -> int:
    if parent_kind is CategoryKind.ROOT and child_kind is CategoryKind.EXPENSE:
        return -1
    return 1


def find_invariant_violations(tree: CategoryTree) -> list[str]:
    """List rows whose totals disagree with their months or children.

    Args:
        tree: Tree to audit.

    Returns:
        list[str]: One human readable message per violation.
    """
    violations = []
    for row, node in enumerate(tree):
        if node.year_total != sum(node.months):
            violations.append(
                f"Row {row} ({node.display_name}): year total "
                f"{node.year_total} != sum of months {sum(node.months)}"
            )
        if not node.is_aggregate:
            continue
        children = [tree.node(index) for index in tree.children_of(row)]
        for month in range(FIRST_MONTH, LAST_MONTH + 1):
            expected = sum(
                _child_sign(node.kind, child.kind) * child.month_value(month)
                for child in children
            )
            if node.month_value(month) != expected:
                violations.append(
                    f"Row {row} ({node.display_name}): month {month} "
                    f"holds {node.month_value(month)}, children sum to "
                    f"{expected}"
                )
    return violations


def validate_tree(tree: CategoryTree, logger: Logger) -> bool:
    """Warn about every aggregation inconsistency in a tree.

    Args:
        tree: Tree to audit.
        logger: Logger used for warnings.

    Returns:
        bool: True when the tree is consistent.
    """
    violations = find_invariant_violations(tree)
    for message in violations:
        logger.warning(message)
    return not violations


__all__ = ["find_invariant_violations", "validate_tree"]
