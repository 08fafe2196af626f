"""Monthly aggregation of actual transaction amounts."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.gnucash_rows import SplitAmountRow
from src.utils.decimal_utils import coerce_decimal, to_minor_units


def monthly_totals(
    splits: Iterable[SplitAmountRow],
    year: int,
    start_month: int,
    month_count: int,
    decimal_places: int,
) -> list[int]:
    """Sum split amounts per month of a range.

    Args:
        splits: Split amounts of one account.
        year: Calendar year of the range.
        start_month: First month of the range (1..12).
        month_count: Number of months in the range.
        decimal_places: Minor-unit digits of the account currency.

    Returns:
        list[int]: One total in minor units per month, element ``i`` being
        month ``start_month + i``.
    """
    totals = [Decimal("0")] * max(month_count, 0)
    for split in splits:
        if split.post_date.year != year:
            continue
        index = split.post_date.month - start_month
        if 0 <= index < len(totals):
            totals[index] += coerce_decimal(split.amount)
    return [to_minor_units(total, decimal_places) for total in totals]


__all__ = ["monthly_totals"]
