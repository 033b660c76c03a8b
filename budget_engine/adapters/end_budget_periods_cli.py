"""CLI adapter running the budget period-end job."""

from datetime import date
import os

from budget_engine.infrastructure.container import (
    build_database_adapter,
    build_end_budget_periods_use_case,
    build_event_bus,
)
from budget_engine.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Close budgets ended before PERIOD_END_AS_OF (default: today)."""
    logger = get_app_logger()
    as_of = _parse_date(os.getenv("PERIOD_END_AS_OF"), logger)

    use_case = build_end_budget_periods_use_case(
        build_event_bus(),
        build_database_adapter(),
    )
    result = use_case.run(as_of)

    print(f"Closed {result.processed_count} ended budget(s).")


if __name__ == "__main__":  # pragma: no cover
    main()
