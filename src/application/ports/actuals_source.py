"""Port for actual transaction totals per category and month."""

from typing import Protocol


class ActualsSourcePort(Protocol):
    """Port exposing actual spending totals.

    Spending on an expense category is positive; money received on an
    income category is reported as negative spending.
    """

    def totals_for(
        self,
        identity: str,
        year: int,
        start_month: int,
        month_count: int,
    ) -> list[int]:
        """Return monthly totals in minor units.

        Element ``i`` holds the total of month ``start_month + i``.
        """


__all__ = ["ActualsSourcePort"]
