"""Use case for the budget lifecycle: create, update, delete and carry-over.

Every write follows the same sequence: load the current state through the
budgets port, let ``BudgetAggregate`` validate and record events, persist
the result, then publish the recorded events. Nothing is published when
validation or persistence fails.
"""

from budget_engine.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from budget_engine.application.ports.events import EventPublisherPort
from budget_engine.domain.aggregates.budget import BudgetAggregate
from budget_engine.domain.errors import BudgetNotFoundError, BudgetValidationError
from budget_engine.domain.models.budgets import (
    Budget,
    BudgetCreationData,
    BudgetLimits,
    BudgetProgress,
    BudgetUpdateData,
)
from budget_engine.domain.models.events import BudgetCarryOverCreated
from budget_engine.domain.services.periods import next_period_range
from budget_engine.infrastructure.logging.logger import get_app_logger


class ManageBudgetsUseCase:
    """Application service around the budget aggregate."""

    def __init__(
        self,
        budgets_repository: BudgetsRepositoryPort,
        publisher: EventPublisherPort,
        limits: BudgetLimits | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            budgets_repository: Port persisting budgets and categories.
            publisher: Port announcing budget events after each write.
            limits: Household allocation bounds; defaults to the built-ins.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budgets_repository = budgets_repository
        self._publisher = publisher
        self._limits = limits or BudgetLimits()
        self._logger = logger or get_app_logger()

    def create_budget(
        self,
        household_id: str,
        data: BudgetCreationData,
    ) -> Budget:
        """Validate, persist and announce a new budget.

        Args:
            household_id: Household the budget belongs to.
            data: Requested budget definition.

        Returns:
            Budget: The stored budget with category names resolved.

        Raises:
            BudgetValidationError: If the definition breaks a rule.
        """
        active_budgets = self._budgets_repository.fetch_active_budgets(
            household_id
        )
        try:
            aggregate = BudgetAggregate.create(
                household_id,
                data,
                active_budgets,
                self._limits,
            )
        except BudgetValidationError as exc:
            self._logger.error(
                f"Rejected budget '{data.name}' for household "
                f"{household_id}: {exc.reason}"
            )
            raise

        self._budgets_repository.create_budget(aggregate.budget)
        self._publish(aggregate)
        self._logger.info(
            f"Created budget {aggregate.budget.id} for household {household_id}"
        )
        return self._reload(aggregate.budget)

    def update_budget(
        self,
        budget_id: str,
        household_id: str,
        data: BudgetUpdateData,
    ) -> Budget:
        """Apply a partial update to a budget.

        Supplied categories replace the whole category set.

        Raises:
            BudgetNotFoundError: If the budget is not in the household.
            BudgetValidationError: If the merged budget breaks a rule.
        """
        aggregate = BudgetAggregate.from_budget(
            self.get_budget(budget_id, household_id),
            self._limits,
        )
        others = [
            budget
            for budget in self._budgets_repository.fetch_active_budgets(
                household_id
            )
            if budget.id != budget_id
        ]
        try:
            aggregate.update(data, others)
        except BudgetValidationError as exc:
            self._logger.error(
                f"Rejected update of budget {budget_id}: {exc.reason}"
            )
            raise

        self._budgets_repository.update_budget(
            aggregate.budget,
            replace_categories=data.categories is not None,
        )
        self._publish(aggregate)
        self._logger.info(f"Updated budget {budget_id}")
        return self._reload(aggregate.budget)

    def delete_budget(self, budget_id: str, household_id: str) -> None:
        """Remove a budget together with its categories."""
        aggregate = BudgetAggregate.from_budget(
            self.get_budget(budget_id, household_id),
            self._limits,
        )
        aggregate.mark_deleted()
        self._budgets_repository.delete_budget(budget_id, household_id)
        self._publish(aggregate)
        self._logger.info(f"Deleted budget {budget_id}")

    def get_budget(self, budget_id: str, household_id: str) -> Budget:
        budget = self._budgets_repository.fetch_budget(budget_id, household_id)
        if budget is None:
            raise BudgetNotFoundError(budget_id)
        return budget

    def list_budgets(
        self,
        household_id: str,
        is_active: bool | None = None,
    ) -> list[Budget]:
        return self._budgets_repository.fetch_budgets(household_id, is_active)

    def get_progress(self, budget_id: str, household_id: str) -> BudgetProgress:
        """Return progress figures from the stored category rows."""
        budget = self.get_budget(budget_id, household_id)
        return BudgetAggregate.from_budget(budget, self._limits).get_progress()

    def carry_over_budget(
        self,
        budget_id: str,
        household_id: str,
    ) -> Budget | None:
        """Roll the unused allowance of a budget into the next period.

        The new budget copies the base allocations and receives the positive
        remaining amounts as carry-over. The original budget is unchanged.

        Args:
            budget_id: Budget whose unused money is carried over.
            household_id: Household owning the budget.

        Returns:
            Budget | None: The new budget, or None when nothing is left over.

        Raises:
            BudgetNotFoundError: If the budget is not in the household.
            BudgetValidationError: If the next budget breaks a rule.
        """
        source = self.get_budget(budget_id, household_id)
        aggregate = BudgetAggregate.from_budget(source, self._limits)
        items = aggregate.generate_carry_over_data()
        if not items:
            self._logger.info(f"Nothing to carry over from budget {budget_id}")
            return None

        next_start, next_end = next_period_range(source.period, source.end_date)
        created = self.create_budget(
            household_id,
            aggregate.create_carry_over_budget(next_start, next_end),
        )
        self._publisher.publish(
            BudgetCarryOverCreated(
                original_budget_id=budget_id,
                new_budget_id=created.id,
                household_id=household_id,
                carry_over_amount=sum(item.carry_over_amount for item in items),
                categories=tuple(items),
            )
        )
        return created

    def _publish(self, aggregate: BudgetAggregate) -> None:
        for event in aggregate.pull_events():
            self._publisher.publish(event)

    def _reload(self, budget: Budget) -> Budget:
        stored = self._budgets_repository.fetch_budget(
            budget.id,
            budget.household_id,
        )
        return stored or budget


__all__ = ["ManageBudgetsUseCase"]
