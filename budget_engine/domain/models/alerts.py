"""Domain models for budget alerts."""

from dataclasses import dataclass
from enum import Enum

from budget_engine.domain.constants import (
    CRITICAL_THRESHOLD,
    WARNING_THRESHOLD,
)


class AlertSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"


class AlertKind(str, Enum):
    OVERSPENT = "OVERSPENT"
    THRESHOLD = "THRESHOLD"


@dataclass(frozen=True)
class AlertThresholds:
    """Utilization percentages that trigger threshold alerts."""

    warning: int = WARNING_THRESHOLD
    critical: int = CRITICAL_THRESHOLD


@dataclass(frozen=True)
class BudgetAlert:
    """What should be said about one budget category.

    Attributes:
        severity: CRITICAL or WARNING.
        kind: OVERSPENT or THRESHOLD.
        category_id: Budgeted category.
        category_name: Display name of the category.
        message: Human-readable alert text.
        utilization_percentage: Display percentage (two decimals).
        remaining_amount: Allocation left, negative when overspent.
        threshold: Crossed threshold for THRESHOLD alerts, else None.
    """

    severity: AlertSeverity
    kind: AlertKind
    category_id: str
    category_name: str
    message: str
    utilization_percentage: float
    remaining_amount: int
    threshold: int | None = None


__all__ = [
    "AlertSeverity",
    "AlertKind",
    "AlertThresholds",
    "BudgetAlert",
]
