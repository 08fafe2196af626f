"""Actual spending totals read from GnuCash splits."""

from datetime import date, datetime
from pathlib import Path

from sqlalchemy import DateTime, bindparam, text

from src.application.ports.actuals_source import ActualsSourcePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import DEFAULT_DECIMAL_PLACES, LAST_MONTH
from src.domain.models.gnucash_rows import SplitAmountRow
from src.domain.services.actuals import monthly_totals
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.piecash_compat import load_piecash, piecash_book
from src.utils.decimal_utils import coerce_decimal, fraction_to_decimal


SELECT_ACCOUNT_SPLITS_SQL = text(
    """
    SELECT
        t.post_date,
        s.quantity_num,
        s.quantity_denom
    FROM splits s
    JOIN transactions t ON t.guid = s.tx_guid
    WHERE s.account_guid = :account_guid
      AND t.post_date >= :start_date
      AND t.post_date < :end_date
    """
).bindparams(
    bindparam("start_date", type_=DateTime()),
    bindparam("end_date", type_=DateTime()),
)


def _coerce_date(raw_value) -> date | None:
    if raw_value is None:
        return None
    if isinstance(raw_value, datetime):
        return raw_value.date()
    if isinstance(raw_value, date):
        return raw_value
    return date.fromisoformat(str(raw_value)[:10])


def _month_range(
    year: int,
    start_month: int,
    month_count: int,
) -> tuple[datetime, datetime]:
    start = datetime(year, start_month, 1)
    end_month = start_month + month_count
    if end_month > LAST_MONTH:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, end_month, 1)
    return start, end


class SqlAlchemyActualsSource(ActualsSourcePort):
    """Actuals source backed by the GnuCash SQL database."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        logger=None,
    ) -> None:
        """Initialize the source adapter.

        Args:
            db_port: Port providing access to the GnuCash engine.
            decimal_places: Minor-unit digits used for the totals.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._decimal_places = decimal_places
        self._logger = logger or get_app_logger()

    def totals_for(
        self,
        identity: str,
        year: int,
        start_month: int,
        month_count: int,
    ) -> list[int]:
        """Return monthly totals of the account's split quantities."""
        if month_count <= 0:
            return []
        start, end = _month_range(year, start_month, month_count)
        engine = self._db_port.get_gnucash_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ACCOUNT_SPLITS_SQL,
                {
                    "account_guid": identity,
                    "start_date": start,
                    "end_date": end,
                },
            ).all()
        splits = []
        for row in rows:
            post_date = _coerce_date(row.post_date)
            if post_date is None:
                continue
            splits.append(
                SplitAmountRow(
                    account_guid=identity,
                    post_date=post_date,
                    amount=fraction_to_decimal(
                        row.quantity_num,
                        row.quantity_denom,
                    ),
                )
            )
        self._logger.debug(
            f"Read {len(splits)} splits for {identity} in {year}"
        )
        return monthly_totals(
            splits,
            year,
            start_month,
            month_count,
            self._decimal_places,
        )


class PieCashActualsSource(ActualsSourcePort):
    """Actuals source backed by a piecash book.

    The book is read once per year; the splits of that year are kept in
    memory for later requests.
    """

    def __init__(
        self,
        book_path: Path | str,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        logger=None,
    ) -> None:
        self._piecash = load_piecash()
        self._book_path = book_path
        self._decimal_places = decimal_places
        self._logger = logger or get_app_logger()
        self._splits_by_year: dict[int, dict[str, list[SplitAmountRow]]] = {}

    def totals_for(
        self,
        identity: str,
        year: int,
        start_month: int,
        month_count: int,
    ) -> list[int]:
        """Return monthly totals of the account's split quantities."""
        if month_count <= 0:
            return []
        splits = self._splits_of_year(year).get(identity, [])
        return monthly_totals(
            splits,
            year,
            start_month,
            month_count,
            self._decimal_places,
        )

    def _splits_of_year(self, year: int) -> dict[str, list[SplitAmountRow]]:
        if year in self._splits_by_year:
            return self._splits_by_year[year]
        by_account: dict[str, list[SplitAmountRow]] = {}
        with piecash_book(self._piecash, self._book_path) as book:
            for split in book.splits:
                post_date = _coerce_date(
                    getattr(split.transaction, "post_date", None)
                )
                if post_date is None or post_date.year != year:
                    continue
                by_account.setdefault(split.account.guid, []).append(
                    SplitAmountRow(
                        account_guid=split.account.guid,
                        post_date=post_date,
                        amount=coerce_decimal(split.quantity),
                    )
                )
        self._logger.info(
            f"Loaded piecash splits of {year} for {len(by_account)} accounts"
        )
        self._splits_by_year[year] = by_account
        return by_account


__all__ = [
    "SqlAlchemyActualsSource",
    "PieCashActualsSource",
    "SELECT_ACCOUNT_SPLITS_SQL",
]
