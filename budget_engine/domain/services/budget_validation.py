"""Structural rules every budget definition must satisfy.

All checks are pure: callers pass in the active budgets they read from
storage. The first violated rule raises a BudgetValidationError and nothing
is applied.
"""

from collections.abc import Iterable, Sequence
from datetime import date

from budget_engine.domain.constants import PERIOD_LENGTH_BOUNDS
from budget_engine.domain.errors import BudgetValidationError
from budget_engine.domain.models.budgets import (
    Budget,
    BudgetCreationData,
    BudgetLimits,
    BudgetPeriod,
    BudgetUpdateData,
    CategoryAllocation,
)

_PERIOD_APPROXIMATIONS = {
    BudgetPeriod.WEEKLY: ("Weekly", 7),
    BudgetPeriod.MONTHLY: ("Monthly", 30),
    BudgetPeriod.YEARLY: ("Yearly", 365),
}


def validate_date_range(start_date: date, end_date: date) -> None:
    if start_date >= end_date:
        raise BudgetValidationError("Start date must be before end date")


def period_length_days(start_date: date, end_date: date) -> int:
    """Return the whole-day span between two dates."""
    return (end_date - start_date).days


def validate_period_consistency(
    period: BudgetPeriod,
    start_date: date,
    end_date: date,
) -> None:
    """Check that the date span matches the declared period.

    Args:
        period: Declared budget period.
        start_date: Inclusive start of the budget.
        end_date: Inclusive end of the budget.

    Raises:
        BudgetValidationError: If the span is outside the tolerance window.
    """
    period = BudgetPeriod(period)
    lower, upper = PERIOD_LENGTH_BOUNDS[period.value]
    span = period_length_days(start_date, end_date)
    if span < lower or span > upper:
        label, days = _PERIOD_APPROXIMATIONS[period]
        raise BudgetValidationError(
            f"{label} budget period should be approximately {days} days"
        )


def validate_category_allocations(
    categories: Sequence[CategoryAllocation] | None,
    limits: BudgetLimits,
) -> None:
    """Check the per-category allocation rules.

    Args:
        categories: Requested allocations.
        limits: Household allocation bounds.

    Raises:
        BudgetValidationError: On an empty list, a duplicate category, or an
            amount outside its bounds.
    """
    if not categories:
        raise BudgetValidationError(
            "At least one category allocation is required"
        )

    category_ids = [category.category_id for category in categories]
    if len(category_ids) != len(set(category_ids)):
        raise BudgetValidationError(
            "Duplicate category allocations are not allowed"
        )

    for index, category in enumerate(categories):
        if category.allocated_amount < 0:
            raise BudgetValidationError(
                f"Category allocation at index {index} cannot be negative"
            )
        if category.allocated_amount > limits.max_category_allocation:
            raise BudgetValidationError(
                f"Category allocation at index {index} exceeds maximum limit"
            )
        if category.carry_over_amount < 0:
            raise BudgetValidationError(
                f"Carry-over amount at index {index} cannot be negative"
            )


def total_allocation(categories: Iterable[CategoryAllocation]) -> int:
    """Return the sum of allocated and carry-over amounts."""
    return sum(category.total_amount for category in categories)


def validate_allocation_total(
    categories: Sequence[CategoryAllocation],
    limits: BudgetLimits,
) -> None:
    total = total_allocation(categories)
    if total > limits.max_total_allocation:
        raise BudgetValidationError(
            "Total budget allocation exceeds maximum limit"
        )
    if total < limits.min_total_allocation:
        raise BudgetValidationError(
            "Total budget allocation is below minimum limit"
        )


def validate_no_overlap(
    start_date: date,
    end_date: date,
    active_budgets: Iterable[Budget],
    exclude_budget_id: str | None = None,
) -> None:
    """Reject a period intersecting any other active budget.

    Both bounds are inclusive, so budgets sharing a single day overlap.

    Args:
        start_date: Candidate start date.
        end_date: Candidate end date.
        active_budgets: Budgets of the same household.
        exclude_budget_id: Budget being updated, ignored in the check.

    Raises:
        BudgetValidationError: If an active budget intersects the period.
    """
    for budget in active_budgets:
        if not budget.is_active or budget.id == exclude_budget_id:
            continue
        if budget.overlaps(start_date, end_date):
            raise BudgetValidationError(
                "Budget period overlaps with existing active budget"
            )


def validate_budget_creation(
    data: BudgetCreationData,
    active_budgets: Iterable[Budget],
    limits: BudgetLimits | None = None,
) -> None:
    """Run every creation rule against a new budget definition."""
    resolved_limits = limits or BudgetLimits()
    validate_date_range(data.start_date, data.end_date)
    validate_period_consistency(data.period, data.start_date, data.end_date)
    validate_category_allocations(data.categories, resolved_limits)
    validate_allocation_total(data.categories, resolved_limits)
    validate_no_overlap(data.start_date, data.end_date, active_budgets)


def validate_budget_update(
    current: Budget,
    data: BudgetUpdateData,
    other_active_budgets: Iterable[Budget],
    limits: BudgetLimits | None = None,
) -> None:
    """Validate the merged view of a budget and its partial update.

    Checks whose inputs are not part of the update are skipped.

    Args:
        current: Budget as currently stored.
        data: Supplied fields of the update.
        other_active_budgets: Active budgets of the same household.
        limits: Household allocation bounds.

    Raises:
        BudgetValidationError: If the merged budget breaks a rule.
    """
    resolved_limits = limits or BudgetLimits()
    start_date = data.start_date or current.start_date
    end_date = data.end_date or current.end_date
    period = data.period or current.period
    is_active = current.is_active if data.is_active is None else data.is_active
    dates_changed = data.start_date is not None or data.end_date is not None

    if dates_changed:
        validate_date_range(start_date, end_date)
    if dates_changed or data.period is not None:
        validate_period_consistency(period, start_date, end_date)
    if data.categories is not None:
        validate_category_allocations(data.categories, resolved_limits)
        validate_allocation_total(data.categories, resolved_limits)

    reactivated = data.is_active is True and not current.is_active
    if is_active and (dates_changed or reactivated):
        validate_no_overlap(
            start_date,
            end_date,
            other_active_budgets,
            exclude_budget_id=current.id,
        )


__all__ = [
    "validate_date_range",
    "period_length_days",
    "validate_period_consistency",
    "validate_category_allocations",
    "total_allocation",
    "validate_allocation_total",
    "validate_no_overlap",
    "validate_budget_creation",
    "validate_budget_update",
]
