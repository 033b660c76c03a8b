"""Budget aggregate: the consistency boundary around a single budget."""

from dataclasses import replace
from datetime import date, datetime, timezone
from uuid import uuid4

from budget_engine.domain.models.budgets import (
    Budget,
    BudgetCategory,
    BudgetCreationData,
    BudgetLimits,
    BudgetProgress,
    BudgetUpdateData,
    CarryOverItem,
    CategoryAllocation,
    CategoryProgress,
    utilization_percentage,
)
from budget_engine.domain.models.events import (
    BudgetCreated,
    BudgetDeleted,
    BudgetEvent,
    BudgetUpdated,
)
from budget_engine.domain.services.budget_validation import (
    total_allocation,
    validate_budget_creation,
    validate_budget_update,
)

_TRACKED_FIELDS = (
    "name",
    "period",
    "start_date",
    "end_date",
    "currency",
    "is_active",
    "total_allocated",
)


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BudgetAggregate:
    """Apply budget lifecycle rules and record the resulting domain events.

    The aggregate never performs I/O. Application services persist
    ``aggregate.budget`` and then publish ``aggregate.pull_events()``.
    """

    def __init__(self, budget: Budget, limits: BudgetLimits | None = None) -> None:
        self._budget = budget
        self._limits = limits or BudgetLimits()
        self._pending_events: list[BudgetEvent] = []

    @classmethod
    def create(
        cls,
        household_id: str,
        data: BudgetCreationData,
        existing_active_budgets: list[Budget] | None = None,
        limits: BudgetLimits | None = None,
    ) -> "BudgetAggregate":
        """Validate a creation request and build the new budget.

        Args:
            household_id: Household the budget belongs to.
            data: Requested budget definition.
            existing_active_budgets: Active budgets of the household.
            limits: Household allocation bounds.

        Returns:
            BudgetAggregate: Aggregate holding the new budget and a pending
            ``budget.created`` event.

        Raises:
            BudgetValidationError: If any creation rule is violated.
        """
        validate_budget_creation(data, existing_active_budgets or [], limits)

        budget_id = _new_id()
        now = _utcnow()
        budget = Budget(
            id=budget_id,
            household_id=household_id,
            name=data.name,
            period=data.period,
            total_allocated=total_allocation(data.categories),
            currency=data.currency,
            start_date=data.start_date,
            end_date=data.end_date,
            is_active=True,
            categories=tuple(
                _build_category(budget_id, allocation)
                for allocation in data.categories
            ),
            created_at=now,
            updated_at=now,
        )
        aggregate = cls(budget, limits)
        aggregate._record(
            BudgetCreated(
                budget_id=budget.id,
                household_id=household_id,
                budget_name=budget.name,
                total_allocated=budget.total_allocated,
                period=budget.period,
                start_date=budget.start_date,
                end_date=budget.end_date,
            )
        )
        return aggregate

    @classmethod
    def from_budget(
        cls,
        budget: Budget,
        limits: BudgetLimits | None = None,
    ) -> "BudgetAggregate":
        return cls(budget, limits)

    @property
    def budget(self) -> Budget:
        return self._budget

    def update(
        self,
        data: BudgetUpdateData,
        other_active_budgets: list[Budget] | None = None,
    ) -> None:
        """Apply a partial update after validating the merged budget.

        Supplied categories replace the whole set. Categories that remain
        keep their spent amount; spent amounts of dropped categories are
        discarded.

        Args:
            data: Supplied fields of the update.
            other_active_budgets: Active budgets of the same household.

        Raises:
            BudgetValidationError: If the merged budget breaks a rule.
        """
        current = self._budget
        validate_budget_update(
            current,
            data,
            other_active_budgets or [],
            self._limits,
        )

        categories = current.categories
        total = current.total_allocated
        if data.categories is not None:
            categories = tuple(
                self._replace_category(allocation)
                for allocation in data.categories
            )
            total = total_allocation(data.categories)

        updated = replace(
            current,
            name=data.name if data.name is not None else current.name,
            period=data.period or current.period,
            start_date=data.start_date or current.start_date,
            end_date=data.end_date or current.end_date,
            currency=data.currency or current.currency,
            is_active=(
                current.is_active if data.is_active is None else data.is_active
            ),
            categories=categories,
            total_allocated=total,
            updated_at=_utcnow(),
        )

        changes = {}
        previous_values = {}
        for field_name in _TRACKED_FIELDS:
            old_value = getattr(current, field_name)
            new_value = getattr(updated, field_name)
            if old_value != new_value:
                changes[field_name] = new_value
                previous_values[field_name] = old_value
        if data.categories is not None:
            changes["categories"] = [
                allocation.category_id for allocation in data.categories
            ]
            previous_values["categories"] = [
                category.category_id for category in current.categories
            ]

        self._budget = updated
        self._record(
            BudgetUpdated(
                budget_id=current.id,
                household_id=current.household_id,
                changes=changes,
                previous_values=previous_values,
            )
        )

    def mark_deleted(self) -> None:
        """Record the deletion of the budget for audit and notification."""
        self._record(
            BudgetDeleted(
                budget_id=self._budget.id,
                household_id=self._budget.household_id,
                budget_name=self._budget.name,
            )
        )

    def get_progress(self) -> BudgetProgress:
        """Return progress figures from the stored category rows."""
        budget = self._budget
        total_spent = budget.total_spent
        return BudgetProgress(
            budget_id=budget.id,
            total_allocated=budget.total_allocated,
            total_spent=total_spent,
            total_remaining=budget.total_allocated - total_spent,
            utilization_percentage=utilization_percentage(
                total_spent,
                budget.total_allocated,
            ),
            is_over_budget=total_spent > budget.total_allocated,
            over_budget_amount=max(0, total_spent - budget.total_allocated),
            categories=[
                CategoryProgress(
                    category_id=category.category_id,
                    category_name=category.category_name,
                    allocated_amount=category.total_allocated,
                    spent_amount=category.spent_amount,
                    remaining_amount=category.remaining_amount,
                    utilization_percentage=category.utilization_percentage,
                    is_overspent=category.is_overspent,
                    overspent_amount=category.overspent_amount,
                )
                for category in budget.categories
            ],
        )

    def generate_carry_over_data(self) -> list[CarryOverItem]:
        """Return the unused allowance of every category with money left."""
        return [
            CarryOverItem(
                category_id=category.category_id,
                category_name=category.category_name,
                carry_over_amount=category.remaining_amount,
            )
            for category in self._budget.categories
            if category.remaining_amount > 0
        ]

    def create_carry_over_budget(
        self,
        next_start: date,
        next_end: date,
    ) -> BudgetCreationData:
        """Build the definition of the next budget with rolled-over money.

        Base allocations are copied as-is; carry-over amounts come from
        ``generate_carry_over_data``. The current budget is left untouched.
        """
        carry_over = {
            item.category_id: item.carry_over_amount
            for item in self.generate_carry_over_data()
        }
        return BudgetCreationData(
            name=f"{self._budget.name} (Carry-over)",
            period=self._budget.period,
            start_date=next_start,
            end_date=next_end,
            currency=self._budget.currency,
            categories=[
                CategoryAllocation(
                    category_id=category.category_id,
                    allocated_amount=category.allocated_amount,
                    carry_over_amount=carry_over.get(category.category_id, 0),
                )
                for category in self._budget.categories
            ],
        )

    def pull_events(self) -> list[BudgetEvent]:
        """Return and clear the events recorded since the last pull."""
        events, self._pending_events = self._pending_events, []
        return events

    def _record(self, event: BudgetEvent) -> None:
        self._pending_events.append(event)

    def _replace_category(self, allocation: CategoryAllocation) -> BudgetCategory:
        existing = self._budget.get_category(allocation.category_id)
        if existing is None:
            return _build_category(self._budget.id, allocation)
        return replace(
            existing,
            allocated_amount=allocation.allocated_amount,
            carry_over_amount=allocation.carry_over_amount,
        )


def _build_category(
    budget_id: str,
    allocation: CategoryAllocation,
) -> BudgetCategory:
    # Display names are resolved by storage on read.
    return BudgetCategory(
        id=_new_id(),
        budget_id=budget_id,
        category_id=allocation.category_id,
        category_name=allocation.category_id,
        allocated_amount=allocation.allocated_amount,
        carry_over_amount=allocation.carry_over_amount,
        spent_amount=0,
    )


__all__ = ["BudgetAggregate"]
