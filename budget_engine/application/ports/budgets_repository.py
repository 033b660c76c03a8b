"""Port for budget storage."""

from datetime import date
from typing import Protocol

from budget_engine.domain.models.budgets import Budget


class BudgetsRepositoryPort(Protocol):
    """Port exposing budgets together with their category line items."""

    def fetch_budget(self, budget_id: str, household_id: str) -> Budget | None:
        """Return the budget when it exists in the household."""

    def fetch_budgets(
        self,
        household_id: str,
        is_active: bool | None = None,
    ) -> list[Budget]:
        """Return the budgets of a household, optionally filtered."""

    def fetch_active_budgets(self, household_id: str | None = None) -> list[Budget]:
        """Return active budgets of one household, or of every household."""

    def fetch_ended_budgets(self, as_of: date) -> list[Budget]:
        """Return active budgets whose end date is before ``as_of``."""

    def create_budget(self, budget: Budget) -> Budget:
        """Persist a budget and its categories in one transaction."""

    def update_budget(self, budget: Budget, replace_categories: bool) -> Budget:
        """Persist top-level fields, optionally replacing all categories."""

    def delete_budget(self, budget_id: str, household_id: str) -> None:
        """Remove a budget and its categories."""

    def set_budget_active(self, budget_id: str, is_active: bool) -> None:
        """Flip the active flag of a budget."""

    def increment_spent_amount(
        self,
        budget_id: str,
        category_id: str,
        delta: int,
    ) -> None:
        """Atomically add ``delta`` to a category spent amount."""

    def replace_spent_amounts(
        self,
        budget_id: str,
        spent_by_category: dict[str, int],
    ) -> None:
        """Overwrite spent amounts of the given categories in one transaction."""


__all__ = ["BudgetsRepositoryPort"]
