"""Category sources reading Income and Expense accounts from GnuCash."""

from pathlib import Path

from sqlalchemy import text

from src.application.ports.category_source import CategorySourcePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.budget import CategoryRecord
from src.domain.models.gnucash_rows import AccountRow
from src.domain.services.category_ordering import order_categories
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.piecash_compat import load_piecash, piecash_book


SELECT_CATEGORY_ACCOUNTS_SQL = text(
    """
    SELECT
        a.guid,
        a.name,
        a.account_type,
        a.parent_guid,
        a.hidden,
        c.mnemonic
    FROM accounts a
    LEFT JOIN commodities c ON c.guid = a.commodity_guid
    """
)


class SqlAlchemyCategorySource(CategorySourcePort):
    """Category source backed by the GnuCash SQL database."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the source adapter.

        Args:
            db_port: Port providing access to the GnuCash engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_categories(self) -> list[CategoryRecord]:
        """Return budgetable categories in pre-order.

        Returns:
            list[CategoryRecord]: Income and Expense categories.
        """
        engine = self._db_port.get_gnucash_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_CATEGORY_ACCOUNTS_SQL).all()
        accounts = [
            AccountRow(
                guid=row.guid,
                name=row.name or "",
                account_type=row.account_type or "",
                parent_guid=row.parent_guid,
                hidden=bool(row.hidden),
                mnemonic=row.mnemonic,
            )
            for row in rows
        ]
        records = order_categories(accounts)
        self._logger.info(
            f"Fetched {len(records)} categories from {len(accounts)} accounts"
        )
        return records


class PieCashCategorySource(CategorySourcePort):
    """Category source backed by a piecash book."""

    def __init__(self, book_path: Path | str, logger=None) -> None:
        """Initialize the source adapter.

        Args:
            book_path: Path or URI to the piecash book.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._piecash = load_piecash()
        self._book_path = book_path
        self._logger = logger or get_app_logger()

    def fetch_categories(self) -> list[CategoryRecord]:
        """Return budgetable categories in pre-order."""
        with piecash_book(self._piecash, self._book_path) as book:
            accounts = []
            for account in book.accounts:
                parent = getattr(account, "parent", None)
                commodity = getattr(account, "commodity", None)
                account_type = getattr(account, "type", "")
                accounts.append(
                    AccountRow(
                        guid=account.guid,
                        name=account.name or "",
                        account_type=str(
                            getattr(account_type, "name", account_type)
                        ),
                        parent_guid=(
                            parent.guid if parent is not None else None
                        ),
                        hidden=bool(getattr(account, "hidden", False)),
                        mnemonic=(
                            commodity.mnemonic
                            if commodity is not None
                            else None
                        ),
                    )
                )
        records = order_categories(accounts)
        self._logger.info(
            f"Fetched {len(records)} categories from piecash book"
        )
        return records


__all__ = [
    "SqlAlchemyCategorySource",
    "PieCashCategorySource",
    "SELECT_CATEGORY_ACCOUNTS_SQL",
]
