"""Threshold and overspend alert derivation."""

from budget_engine.domain.models.alerts import (
    AlertKind,
    AlertSeverity,
    AlertThresholds,
    BudgetAlert,
)
from budget_engine.domain.models.budgets import (
    BudgetProgress,
    CategoryProgress,
)
from budget_engine.domain.models.events import (
    BudgetOverspent,
    BudgetThresholdReached,
)
from budget_engine.utils.money_utils import format_minor_units


def has_reached(spent: int, total: int, threshold: int) -> bool:
    """Return True when spent/total is at least ``threshold`` percent.

    Compares exact integers so the rounded display value never decides.
    """
    if total <= 0:
        return False
    return spent * 100 >= threshold * total


def evaluate_category_alert(
    category: CategoryProgress,
    currency: str,
    thresholds: AlertThresholds | None = None,
) -> BudgetAlert | None:
    """Return the single highest-priority alert for a category, if any.

    Args:
        category: Progress figures of the category.
        currency: Budget currency used in messages.
        thresholds: Warning and critical utilization percentages.

    Returns:
        BudgetAlert | None: Alert to surface, or None below every threshold.
    """
    resolved = thresholds or AlertThresholds()
    if category.is_overspent:
        return BudgetAlert(
            severity=AlertSeverity.CRITICAL,
            kind=AlertKind.OVERSPENT,
            category_id=category.category_id,
            category_name=category.category_name,
            message=(
                "Budget exceeded by "
                f"{format_minor_units(category.overspent_amount, currency)}"
            ),
            utilization_percentage=category.utilization_percentage,
            remaining_amount=category.remaining_amount,
        )

    tiers = (
        (resolved.critical, AlertSeverity.CRITICAL),
        (resolved.warning, AlertSeverity.WARNING),
    )
    for threshold, severity in tiers:
        if has_reached(
            category.spent_amount,
            category.allocated_amount,
            threshold,
        ):
            remaining = format_minor_units(category.remaining_amount, currency)
            return BudgetAlert(
                severity=severity,
                kind=AlertKind.THRESHOLD,
                category_id=category.category_id,
                category_name=category.category_name,
                message=f"{threshold}% of budget used, {remaining} remaining",
                utilization_percentage=category.utilization_percentage,
                remaining_amount=category.remaining_amount,
                threshold=threshold,
            )
    return None


def compute_budget_alerts(
    progress: BudgetProgress,
    currency: str,
    thresholds: AlertThresholds | None = None,
) -> list[BudgetAlert]:
    """Return alerts for every category of a budget, in category order."""
    alerts = []
    for category in progress.categories:
        alert = evaluate_category_alert(category, currency, thresholds)
        if alert is not None:
            alerts.append(alert)
    return alerts


def alert_to_event(
    budget_id: str,
    household_id: str,
    alert: BudgetAlert,
    category: CategoryProgress,
) -> BudgetOverspent | BudgetThresholdReached:
    """Translate an alert into the domain event announcing it."""
    if alert.kind == AlertKind.OVERSPENT:
        return BudgetOverspent(
            budget_id=budget_id,
            household_id=household_id,
            category_id=category.category_id,
            category_name=category.category_name,
            allocated_amount=category.allocated_amount,
            spent_amount=category.spent_amount,
            overspent_amount=category.overspent_amount,
        )
    return BudgetThresholdReached(
        budget_id=budget_id,
        household_id=household_id,
        category_id=category.category_id,
        category_name=category.category_name,
        threshold=alert.threshold,
        utilization_percentage=alert.utilization_percentage,
        remaining_amount=alert.remaining_amount,
    )


__all__ = [
    "has_reached",
    "evaluate_category_alert",
    "compute_budget_alerts",
    "alert_to_event",
]
