"""Scheduled job closing budgets whose period has ended."""

from dataclasses import dataclass, field
from datetime import date

from budget_engine.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from budget_engine.application.ports.events import EventPublisherPort
from budget_engine.domain.models.events import BudgetPeriodEnded
from budget_engine.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class EndBudgetPeriodsResult:
    """Result of a period-end run.

    Attributes:
        processed_count: Number of budgets deactivated.
        budget_ids: Identifiers of the deactivated budgets.
    """

    processed_count: int
    budget_ids: list[str] = field(default_factory=list)


class EndBudgetPeriodsUseCase:
    """Deactivate ended budgets and announce their final figures."""

    def __init__(
        self,
        budgets_repository: BudgetsRepositoryPort,
        publisher: EventPublisherPort,
        logger=None,
    ) -> None:
        self._budgets_repository = budgets_repository
        self._publisher = publisher
        self._logger = logger or get_app_logger()

    def run(self, as_of: date | None = None) -> EndBudgetPeriodsResult:
        """Close every active budget whose end date is before ``as_of``.

        Args:
            as_of: Reference day; defaults to today.

        Returns:
            EndBudgetPeriodsResult: Budgets that were closed.
        """
        resolved = as_of or date.today()
        ended = self._budgets_repository.fetch_ended_budgets(resolved)
        budget_ids = []
        for budget in ended:
            self._budgets_repository.set_budget_active(budget.id, False)
            self._publisher.publish(
                BudgetPeriodEnded(
                    budget_id=budget.id,
                    household_id=budget.household_id,
                    budget_name=budget.name,
                    total_allocated=budget.total_allocated,
                    total_spent=budget.total_spent,
                    unused_amount=budget.unused_amount,
                    end_date=budget.end_date,
                )
            )
            budget_ids.append(budget.id)

        self._logger.info(
            f"Closed {len(budget_ids)} budget(s) ended before {resolved}"
        )
        return EndBudgetPeriodsResult(
            processed_count=len(budget_ids),
            budget_ids=budget_ids,
        )


__all__ = ["EndBudgetPeriodsResult", "EndBudgetPeriodsUseCase"]
