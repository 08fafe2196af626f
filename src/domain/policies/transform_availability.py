"""Which bulk edits a grid cell offers, and which years can be edited."""

from datetime import date

from src.domain.constants import FIRST_MONTH, LAST_MONTH, TOTAL_COLUMN
from src.domain.models.transforms import TransformOperation


def available_transforms(column: int) -> list[TransformOperation]:
    """Return the operations a user may trigger from a grid column.

    January has no previous period and December has no later month, so
    the operations reading or writing past the year edge are not offered.

    Args:
        column: Month column 1..12 or the totals column.

    Returns:
        list[TransformOperation]: Operations in menu order.
    """
    if column == TOTAL_COLUMN:
        return [
            TransformOperation.DISTRIBUTE_TOTAL,
            TransformOperation.SET_ALL_MONTHS_TO_ACTUALS,
        ]
    if not FIRST_MONTH <= column <= LAST_MONTH:
        return []
    operations = []
    if column != FIRST_MONTH:
        operations.append(TransformOperation.APPLY_PREVIOUS_PERIOD)
    if column != LAST_MONTH:
        operations.append(TransformOperation.COPY_TO_END_OF_YEAR)
    operations.append(TransformOperation.COPY_TO_ENTIRE_YEAR)
    operations.append(TransformOperation.SET_TO_ACTUAL_SPEND)
    if column != FIRST_MONTH:
        operations.extend(
            [
                TransformOperation.SET_TO_PRIOR_MONTH_ACTUAL_SPEND,
                TransformOperation.ROLLOVER_PRIOR_MONTH,
                TransformOperation.ROLLOVER_ALL_PRIOR_MONTHS,
            ]
        )
    return operations


def budget_year_choices(today: date) -> list[int]:
    """Return the editable budget years: last year, this year, next year."""
    return [today.year - 1, today.year, today.year + 1]


__all__ = ["available_transforms", "budget_year_choices"]
