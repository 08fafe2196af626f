"""Database infrastructure for the budget editor.

This module creates and reuses SQLAlchemy engines for the GnuCash book
(categories and actual transactions) and for the analytics database that
stores budget lines. URLs are read from the environment, optionally loaded
from a ``.env`` file.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable, loading ``.env`` first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create an engine with a small pool and connection health checks.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Configured SQLAlchemy engine.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_gnucash_engine: Optional[Engine] = None
_analytics_engine: Optional[Engine] = None


def get_gnucash_engine() -> Engine:
    """Return the cached engine for the GnuCash book (GNUCASH_DB_URL)."""
    global _gnucash_engine
    if _gnucash_engine is None:
        _gnucash_engine = _create_engine(_get_env_var("GNUCASH_DB_URL"))
    return _gnucash_engine


def get_analytics_engine() -> Engine:
    """Return the cached engine holding budget lines (ANALYTICS_DB_URL)."""
    global _analytics_engine
    if _analytics_engine is None:
        _analytics_engine = _create_engine(_get_env_var("ANALYTICS_DB_URL"))
    return _analytics_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the module-level cached engines."""

    def get_gnucash_engine(self) -> Engine:
        return get_gnucash_engine()

    def get_analytics_engine(self) -> Engine:
        return get_analytics_engine()


__all__ = [
    "get_gnucash_engine",
    "get_analytics_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
