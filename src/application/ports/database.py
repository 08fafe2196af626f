"""Database ports for the budget editor.

This module defines the application-layer protocol for accessing database
engines. The GnuCash book provides categories and actual transactions; the
analytics database holds the editable budget lines.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing database engines for GnuCash and budget storage."""

    def get_gnucash_engine(self) -> Engine:
        """Get the engine for the GnuCash book.

        Returns:
            Engine: SQLAlchemy engine connected to the GnuCash backend.
        """

    def get_analytics_engine(self) -> Engine:
        """Get the engine for the database holding budget lines.

        Returns:
            Engine: SQLAlchemy engine connected to the analytics layer.
        """


__all__ = ["DatabaseEnginePort"]
