"""Use case evaluating overspend and threshold alerts for budgets."""

from dataclasses import dataclass

from budget_engine.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from budget_engine.application.ports.events import (
    AlertSinkPort,
    EventPublisherPort,
)
from budget_engine.domain.aggregates.budget import BudgetAggregate
from budget_engine.domain.errors import BudgetNotFoundError
from budget_engine.domain.models.alerts import AlertThresholds, BudgetAlert
from budget_engine.domain.models.budgets import Budget
from budget_engine.domain.services.alerts import (
    alert_to_event,
    compute_budget_alerts,
    evaluate_category_alert,
)
from budget_engine.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AlertSweepResult:
    """Result of an alert sweep.

    Attributes:
        budgets_checked: Number of active budgets evaluated.
        alerts_raised: Number of alerts published.
    """

    budgets_checked: int
    alerts_raised: int


class BudgetAlertsUseCase:
    """Compute alerts on demand and publish them after spend changes.

    On-demand reads and post-mutation checks share
    ``evaluate_category_alert``, so the same stored state always yields the
    same alerts.
    """

    def __init__(
        self,
        budgets_repository: BudgetsRepositoryPort,
        publisher: EventPublisherPort,
        alert_sink: AlertSinkPort,
        thresholds: AlertThresholds | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budgets_repository: Port reading budgets and spent amounts.
            publisher: Port announcing overspent and threshold events.
            alert_sink: Port surfacing alerts to the household.
            thresholds: Warning and critical utilization percentages.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budgets_repository = budgets_repository
        self._publisher = publisher
        self._alert_sink = alert_sink
        self._thresholds = thresholds or AlertThresholds()
        self._logger = logger or get_app_logger()

    def get_budget_alerts(
        self,
        budget_id: str,
        household_id: str,
    ) -> list[BudgetAlert]:
        """Return the current alerts of a budget without publishing them.

        Raises:
            BudgetNotFoundError: If the budget is not in the household.
        """
        budget = self._budgets_repository.fetch_budget(budget_id, household_id)
        if budget is None:
            raise BudgetNotFoundError(budget_id)
        progress = BudgetAggregate.from_budget(budget).get_progress()
        return compute_budget_alerts(progress, budget.currency, self._thresholds)

    def check_category(
        self,
        budget: Budget,
        category_id: str,
    ) -> BudgetAlert | None:
        """Evaluate one category and publish its alert, if any.

        Args:
            budget: Budget as currently stored.
            category_id: Category whose spent amount just changed.

        Returns:
            BudgetAlert | None: The published alert.
        """
        progress = BudgetAggregate.from_budget(budget).get_progress()
        for category in progress.categories:
            if category.category_id != category_id:
                continue
            alert = evaluate_category_alert(
                category,
                budget.currency,
                self._thresholds,
            )
            if alert is None:
                return None
            self._publisher.publish(
                alert_to_event(budget.id, budget.household_id, alert, category)
            )
            self._alert_sink.notify(budget.id, budget.household_id, [alert])
            return alert
        return None

    def sweep(self, household_id: str | None = None) -> AlertSweepResult:
        """Re-evaluate every active budget and publish all current alerts.

        Args:
            household_id: Restrict the sweep to one household.

        Returns:
            AlertSweepResult: How many budgets and alerts were processed.
        """
        budgets = self._budgets_repository.fetch_active_budgets(household_id)
        alerts_raised = 0
        for budget in budgets:
            progress = BudgetAggregate.from_budget(budget).get_progress()
            categories = {c.category_id: c for c in progress.categories}
            alerts = compute_budget_alerts(
                progress,
                budget.currency,
                self._thresholds,
            )
            for alert in alerts:
                self._publisher.publish(
                    alert_to_event(
                        budget.id,
                        budget.household_id,
                        alert,
                        categories[alert.category_id],
                    )
                )
            if alerts:
                self._alert_sink.notify(budget.id, budget.household_id, alerts)
            alerts_raised += len(alerts)

        self._logger.info(
            f"Alert sweep checked {len(budgets)} budget(s), "
            f"raised {alerts_raised} alert(s)"
        )
        return AlertSweepResult(
            budgets_checked=len(budgets),
            alerts_raised=alerts_raised,
        )


__all__ = ["AlertSweepResult", "BudgetAlertsUseCase"]
