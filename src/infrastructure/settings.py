"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import DEFAULT_BUDGET_NAME, DEFAULT_DECIMAL_PLACES
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("sqlalchemy", "piecash")


@dataclass(frozen=True)
class BudgetSettings:
    """Settings of a budget editing session.

    Attributes:
        backend: GnuCash backend identifier (sqlalchemy or piecash).
        piecash_file: Optional path or URI to the piecash book.
        budget_name: Budget opened by default.
        decimal_places: Decimal places of the budget currency.
    """

    backend: str = "sqlalchemy"
    piecash_file: Optional[Path | str] = None
    budget_name: str = DEFAULT_BUDGET_NAME
    decimal_places: int = DEFAULT_DECIMAL_PLACES

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables.

        Returns:
            BudgetSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If the backend or decimal places are invalid.
        """
        logger = get_app_logger()
        backend = os.getenv("GNUCASH_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(f"Unsupported GNUCASH_BACKEND: {backend}")
        raw_piecash = os.getenv("PIECASH_FILE")
        if raw_piecash:
            piecash_file = cls._book_location(raw_piecash, logger)
        else:
            piecash_file = cls._book_in_data_dir(logger)
        budget_name = (
            os.getenv("BUDGET_NAME", DEFAULT_BUDGET_NAME).strip()
            or DEFAULT_BUDGET_NAME
        )
        return cls(
            backend=backend,
            piecash_file=piecash_file,
            budget_name=budget_name,
            decimal_places=cls._decimal_places(
                os.getenv("BUDGET_DECIMAL_PLACES")
            ),
        )

    @staticmethod
    def _decimal_places(raw_value: str | None) -> int:
        if raw_value is None or not raw_value.strip():
            return DEFAULT_DECIMAL_PLACES
        try:
            places = int(raw_value)
        except ValueError as exc:
            raise ValueError(
                f"BUDGET_DECIMAL_PLACES must be an integer, got {raw_value!r}"
            ) from exc
        if places < 0:
            raise ValueError("BUDGET_DECIMAL_PLACES must not be negative")
        return places

    @staticmethod
    def _book_location(raw_value: str, logger) -> Path | str:
        """Resolve ``PIECASH_FILE`` to a book path, keeping server URIs.

        ``file:`` URIs and plain paths become absolute ``Path`` objects; any
        other scheme (``postgresql://``, ``mysql://``) is returned as is.
        """
        parsed = urlparse(raw_value)
        if parsed.scheme == "file":
            location = Path(unquote(parsed.path))
        elif parsed.scheme:
            return raw_value
        else:
            location = Path(raw_value)
        book = location.expanduser().resolve()
        if not book.exists():
            logger.warning(f"PieCash book does not exist at {book}")
        return book

    @staticmethod
    def _book_in_data_dir(logger) -> Path | None:
        """Return the only ``*.gnucash`` book stored under ``data/``."""
        books = sorted((get_project_root() / "data").glob("*.gnucash"))
        if len(books) > 1:
            names = ", ".join(book.name for book in books)
            logger.warning(
                f"Several books in data/ ({names}); set PIECASH_FILE"
            )
        if len(books) != 1:
            return None
        return books[0].resolve()


__all__ = ["BudgetSettings", "SUPPORTED_BACKENDS"]
