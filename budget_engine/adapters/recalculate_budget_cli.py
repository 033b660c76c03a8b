"""CLI adapter to rebuild the spent amounts of one budget."""

import os

from budget_engine.domain.errors import BudgetNotFoundError
from budget_engine.infrastructure.container import (
    build_database_adapter,
    build_event_bus,
    build_spend_tracker,
)
from budget_engine.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Recalculate RECALC_BUDGET_ID of RECALC_HOUSEHOLD_ID."""
    logger = get_app_logger()
    budget_id = os.getenv("RECALC_BUDGET_ID", "").strip()
    household_id = os.getenv("RECALC_HOUSEHOLD_ID", "").strip()
    if not budget_id or not household_id:
        logger.warning(
            "RECALC_BUDGET_ID and RECALC_HOUSEHOLD_ID are required."
        )
        return

    tracker = build_spend_tracker(build_event_bus(), build_database_adapter())
    try:
        budget = tracker.recalculate(budget_id, household_id)
    except BudgetNotFoundError as exc:
        logger.error(str(exc))
        return

    print(f"Budget {budget.id}: spent {budget.total_spent} of {budget.total_allocated}")
    for category in budget.categories:
        print(
            f"  {category.category_name}: spent {category.spent_amount} "
            f"of {category.total_allocated}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
