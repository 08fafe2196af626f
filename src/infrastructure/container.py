"""Composition root for wiring infrastructure adapters."""

from src.application.ports.actuals_source import ActualsSourcePort
from src.application.ports.budget_store import BudgetCatalogPort, BudgetStorePort
from src.application.ports.category_source import CategorySourcePort
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.budget_session import BudgetEditingSession
from src.infrastructure.actuals_source import (
    PieCashActualsSource,
    SqlAlchemyActualsSource,
)
from src.infrastructure.budget_store import (
    SqlAlchemyBudgetCatalog,
    SqlAlchemyBudgetStore,
)
from src.infrastructure.category_source import (
    PieCashCategorySource,
    SqlAlchemyCategorySource,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def _piecash_file(settings: BudgetSettings):
    if settings.piecash_file is None:
        raise RuntimeError("PieCash backend requires a PIECASH_FILE value.")
    return settings.piecash_file


def build_category_source(
    db_port: DatabaseEnginePort | None = None,
    settings: BudgetSettings | None = None,
) -> CategorySourcePort:
    """Return the configured category source adapter."""
    resolved_settings = settings or BudgetSettings.from_env()
    if resolved_settings.backend == "piecash":
        return PieCashCategorySource(
            _piecash_file(resolved_settings),
            logger=get_app_logger(),
        )
    return SqlAlchemyCategorySource(db_port or build_database_adapter())


def build_actuals_source(
    db_port: DatabaseEnginePort | None = None,
    settings: BudgetSettings | None = None,
) -> ActualsSourcePort:
    """Return the configured actuals source adapter."""
    resolved_settings = settings or BudgetSettings.from_env()
    if resolved_settings.backend == "piecash":
        return PieCashActualsSource(
            _piecash_file(resolved_settings),
            decimal_places=resolved_settings.decimal_places,
            logger=get_app_logger(),
        )
    return SqlAlchemyActualsSource(
        db_port or build_database_adapter(),
        decimal_places=resolved_settings.decimal_places,
    )


def build_budget_store(
    budget_name: str,
    db_port: DatabaseEnginePort | None = None,
) -> BudgetStorePort:
    """Return the store holding the lines of a named budget."""
    return SqlAlchemyBudgetStore(
        db_port or build_database_adapter(),
        budget_name,
    )


def build_budget_catalog(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetCatalogPort:
    """Return the catalog listing stored budgets."""
    return SqlAlchemyBudgetCatalog(db_port or build_database_adapter())


def build_budget_session(
    year: int,
    budget_name: str | None = None,
    db_port: DatabaseEnginePort | None = None,
    settings: BudgetSettings | None = None,
) -> BudgetEditingSession:
    """Open an editing session on a budget year.

    Args:
        year: Budget year to edit.
        budget_name: Budget to open; defaults to the configured budget.
        db_port: Optional database port shared by every adapter.
        settings: Optional settings; read from the environment otherwise.

    Returns:
        BudgetEditingSession: Session with the year loaded.
    """
    resolved_settings = settings or BudgetSettings.from_env()
    resolved_db = db_port or build_database_adapter()
    return BudgetEditingSession(
        category_source=build_category_source(resolved_db, resolved_settings),
        budget_store=build_budget_store(
            budget_name or resolved_settings.budget_name,
            resolved_db,
        ),
        actuals_source=build_actuals_source(resolved_db, resolved_settings),
        year=year,
        decimal_places=resolved_settings.decimal_places,
    )


__all__ = [
    "build_database_adapter",
    "build_category_source",
    "build_actuals_source",
    "build_budget_store",
    "build_budget_catalog",
    "build_budget_session",
]
