"""Domain services package."""

from .alerts import (
    alert_to_event,
    compute_budget_alerts,
    evaluate_category_alert,
    has_reached,
)
from .budget_validation import (
    validate_budget_creation,
    validate_budget_update,
    validate_no_overlap,
    validate_period_consistency,
)
from .ledger import build_balance_history, entry_delta, fold_ledger_entries
from .net_worth import compute_net_worth_summary, validate_balance_sign
from .periods import next_period_range

__all__ = [
    "alert_to_event",
    "compute_budget_alerts",
    "evaluate_category_alert",
    "has_reached",
    "validate_budget_creation",
    "validate_budget_update",
    "validate_no_overlap",
    "validate_period_consistency",
    "build_balance_history",
    "entry_delta",
    "fold_ledger_entries",
    "compute_net_worth_summary",
    "validate_balance_sign",
    "next_period_range",
]
