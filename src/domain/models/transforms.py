"""Bulk-edit operations offered on a budget grid cell."""

from enum import Enum


class TransformOperation(str, Enum):
    """Single-row bulk edit triggered from the grid."""

    APPLY_PREVIOUS_PERIOD = "apply_previous_period"
    COPY_TO_END_OF_YEAR = "copy_to_end_of_year"
    COPY_TO_ENTIRE_YEAR = "copy_to_entire_year"
    SET_TO_ACTUAL_SPEND = "set_to_actual_spend"
    SET_TO_PRIOR_MONTH_ACTUAL_SPEND = "set_to_prior_month_actual_spend"
    ROLLOVER_PRIOR_MONTH = "rollover_prior_month"
    ROLLOVER_ALL_PRIOR_MONTHS = "rollover_all_prior_months"
    DISTRIBUTE_TOTAL = "distribute_total"
    SET_ALL_MONTHS_TO_ACTUALS = "set_all_months_to_actuals"

    @property
    def label(self) -> str:
        """Return the menu label for the operation."""
        return TRANSFORM_LABELS[self]


TRANSFORM_LABELS = {
    TransformOperation.APPLY_PREVIOUS_PERIOD: "Apply previous period's budget",
    TransformOperation.COPY_TO_END_OF_YEAR: (
        "Apply selected cell to end of year"
    ),
    TransformOperation.COPY_TO_ENTIRE_YEAR: (
        "Apply selected cell to entire year"
    ),
    TransformOperation.SET_TO_ACTUAL_SPEND: (
        "Set budget equal to actual spending for the month"
    ),
    TransformOperation.SET_TO_PRIOR_MONTH_ACTUAL_SPEND: (
        "Set budget equal to actual spending from the previous month"
    ),
    TransformOperation.ROLLOVER_PRIOR_MONTH: (
        "Rollover balance from prior month"
    ),
    TransformOperation.ROLLOVER_ALL_PRIOR_MONTHS: (
        "Rollover balance from all prior months"
    ),
    TransformOperation.DISTRIBUTE_TOTAL: (
        "Distribute the total across all months"
    ),
    TransformOperation.SET_ALL_MONTHS_TO_ACTUALS: (
        "Set all months to actual spending"
    ),
}


__all__ = ["TransformOperation", "TRANSFORM_LABELS"]
