"""SQLAlchemy-backed budget lines stored in the analytics database."""

from sqlalchemy import text
from sqlalchemy.engine import Engine

from src.application.ports.budget_store import BudgetCatalogPort, BudgetStorePort
from src.application.ports.database import DatabaseEnginePort

CREATE_BUDGET_LINES_SQL = """
CREATE TABLE IF NOT EXISTS budget_lines (
    budget_name TEXT NOT NULL,
    category_guid TEXT NOT NULL,
    year INTEGER NOT NULL,
    month INTEGER NOT NULL,
    amount BIGINT NOT NULL,
    PRIMARY KEY (budget_name, category_guid, year, month)
)
"""

SELECT_AMOUNT_SQL = text(
    """
    SELECT amount
    FROM budget_lines
    WHERE budget_name = :budget_name
      AND category_guid = :category_guid
      AND year = :year
      AND month = :month
    """
)

INSERT_AMOUNT_SQL = text(
    """
    INSERT INTO budget_lines (budget_name, category_guid, year, month, amount)
    VALUES (:budget_name, :category_guid, :year, :month, :amount)
    """
)

UPDATE_AMOUNT_SQL = text(
    """
    UPDATE budget_lines
    SET amount = :amount
    WHERE budget_name = :budget_name
      AND category_guid = :category_guid
      AND year = :year
      AND month = :month
    """
)

SELECT_BUDGET_NAMES_SQL = text(
    """
    SELECT DISTINCT budget_name
    FROM budget_lines
    ORDER BY budget_name
    """
)


def ensure_budget_lines_table(engine: Engine) -> None:
    """Create the budget_lines table if it does not exist."""
    with engine.begin() as conn:
        conn.exec_driver_sql(CREATE_BUDGET_LINES_SQL)


class SqlAlchemyBudgetStore(BudgetStorePort):
    """Budget store for one named budget."""

    def __init__(self, db_port: DatabaseEnginePort, budget_name: str) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the analytics engine.
            budget_name: Name of the budget whose lines are read and written.
        """
        self._db_port = db_port
        self._budget_name = budget_name
        self._table_ready = False

    @property
    def budget_name(self) -> str:
        return self._budget_name

    def read_amount(self, identity: str, year: int, month: int) -> int | None:
        """Return the stored amount of a cell, or None when absent."""
        engine = self._engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_AMOUNT_SQL,
                self._params(identity, year, month),
            ).first()
        if row is None:
            return None
        return int(row.amount)

    def write_amount(
        self,
        identity: str,
        year: int,
        month: int,
        amount: int,
    ) -> None:
        """Insert the line, or update it when it already exists."""
        params = self._params(identity, year, month)
        engine = self._engine()
        with engine.begin() as conn:
            existing = conn.execute(SELECT_AMOUNT_SQL, params).first()
            statement = (
                INSERT_AMOUNT_SQL if existing is None else UPDATE_AMOUNT_SQL
            )
            conn.execute(statement, {**params, "amount": int(amount)})

    def _engine(self) -> Engine:
        engine = self._db_port.get_analytics_engine()
        if not self._table_ready:
            ensure_budget_lines_table(engine)
            self._table_ready = True
        return engine

    def _params(self, identity: str, year: int, month: int) -> dict:
        return {
            "budget_name": self._budget_name,
            "category_guid": identity,
            "year": year,
            "month": month,
        }


class SqlAlchemyBudgetCatalog(BudgetCatalogPort):
    """List the budgets holding at least one line."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_budget_names(self) -> list[str]:
        """Return stored budget names in alphabetical order."""
        engine = self._db_port.get_analytics_engine()
        ensure_budget_lines_table(engine)
        with engine.connect() as conn:
            rows = conn.execute(SELECT_BUDGET_NAMES_SQL).all()
        return [row.budget_name for row in rows]


__all__ = [
    "SqlAlchemyBudgetStore",
    "SqlAlchemyBudgetCatalog",
    "ensure_budget_lines_table",
    "CREATE_BUDGET_LINES_SQL",
]
