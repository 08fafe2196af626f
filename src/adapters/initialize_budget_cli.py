"""CLI adapter to initialize a budget year from the previous year.

Configuration comes from the environment:

* ``BUDGET_YEAR``: year to initialize (defaults to the current year);
* ``INIT_SOURCE``: ``actuals`` (last year's spending) or ``budget``;
* ``INIT_SOURCE_BUDGET``: budget copied when ``INIT_SOURCE=budget``
  (defaults to the budget being initialized).
"""

from datetime import date
import os

from src.infrastructure.container import (
    build_budget_session,
    build_budget_store,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings

SOURCES = ("actuals", "budget")


def _parse_year(value: str | None, logger) -> int | None:
    """Parse the budget year, defaulting to the current year.

    Args:
        value: Raw year string.
        logger: Logger used for errors.

    Returns:
        int | None: Year, or None when the value is not a year.
    """
    if not value:
        return date.today().year
    try:
        return int(value)
    except ValueError:
        logger.error(f"Invalid BUDGET_YEAR '{value}'. Expected e.g. 2024.")
        return None


def main() -> None:
    """Initialize and save a budget year."""
    logger = get_app_logger()
    year = _parse_year(os.getenv("BUDGET_YEAR"), logger)
    if year is None:
        return
    source = os.getenv("INIT_SOURCE", "actuals").strip().lower()
    if source not in SOURCES:
        logger.error(
            f"Unsupported INIT_SOURCE '{source}'. Use one of {SOURCES}."
        )
        return

    try:
        settings = BudgetSettings.from_env()
        session = build_budget_session(year, settings=settings)
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    if source == "actuals":
        changed = session.initialize_from_prior_actuals()
    else:
        source_name = os.getenv("INIT_SOURCE_BUDGET", settings.budget_name)
        changed = session.initialize_from_prior_budget(
            build_budget_store(source_name)
        )
    result = session.save()

    print(
        f"Initialized {settings.budget_name} {year} from {source}: "
        f"{changed} cells changed, {result.written_count} lines written."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
