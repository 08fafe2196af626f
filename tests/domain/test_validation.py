"""Tests for category tree consistency checks."""

from src.domain.services.validation import (
    find_invariant_violations,
    validate_tree,
)

FOOD, HOME, RENT = 5, 6, 8


def test_consistent_tree_has_no_violations(tree, logger) -> None:
    tree.set_month_value(RENT, 1, 10)
    tree.set_month_value(FOOD, 1, 5)

    assert find_invariant_violations(tree) == []
    assert validate_tree(tree, logger) is True
    logger.warning.assert_not_called()


def test_corrupted_rows_are_reported(tree, logger) -> None:
    tree.node(RENT).months[0] = 99
    tree.node(HOME).year_total = 1

    violations = find_invariant_violations(tree)

    assert any("Rent" in message for message in violations)
    assert any("Home" in message and "month 1" in message
               for message in violations)
    assert validate_tree(tree, logger) is False
    assert logger.warning.call_count == len(violations)
