"""CLI adapter re-evaluating alerts of every active budget."""

import os

from budget_engine.infrastructure.container import (
    build_alerts_use_case,
    build_database_adapter,
    build_event_bus,
)


def main() -> None:
    """Run the alert sweep, optionally for ALERT_SWEEP_HOUSEHOLD_ID only."""
    household_id = os.getenv("ALERT_SWEEP_HOUSEHOLD_ID", "").strip() or None

    use_case = build_alerts_use_case(build_event_bus(), build_database_adapter())
    result = use_case.sweep(household_id)

    print(
        f"Checked {result.budgets_checked} budget(s), "
        f"raised {result.alerts_raised} alert(s)."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
