"""Domain models for budgets and their category line items."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from budget_engine.domain.constants import (
    MAX_CATEGORY_ALLOCATION,
    MAX_TOTAL_ALLOCATION,
    MIN_TOTAL_ALLOCATION,
)


class BudgetPeriod(str, Enum):
    """Declared length of a budget."""

    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


def utilization_percentage(spent: int, total: int) -> float:
    """Return spent/total as a percentage rounded for display.

    Args:
        spent: Spent amount in minor units.
        total: Allocated amount in minor units.

    Returns:
        float: Percentage rounded to two decimals, 0 when total is 0.
    """
    if total <= 0:
        return 0.0
    return round(spent / total * 100, 2)


@dataclass(frozen=True)
class BudgetLimits:
    """Household-level allocation bounds enforced on every budget."""

    min_total_allocation: int = MIN_TOTAL_ALLOCATION
    max_total_allocation: int = MAX_TOTAL_ALLOCATION
    max_category_allocation: int = MAX_CATEGORY_ALLOCATION


@dataclass(frozen=True)
class CategoryAllocation:
    """Requested allocation for one category."""

    category_id: str
    allocated_amount: int
    carry_over_amount: int = 0

    @property
    def total_amount(self) -> int:
        """Return allocated plus carry-over."""
        return self.allocated_amount + self.carry_over_amount


@dataclass(frozen=True)
class BudgetCreationData:
    """Input for creating a budget."""

    name: str
    period: BudgetPeriod
    start_date: date
    end_date: date
    currency: str
    categories: list[CategoryAllocation]


@dataclass(frozen=True)
class BudgetUpdateData:
    """Partial update of a budget; None means "leave unchanged"."""

    name: str | None = None
    period: BudgetPeriod | None = None
    start_date: date | None = None
    end_date: date | None = None
    currency: str | None = None
    is_active: bool | None = None
    categories: list[CategoryAllocation] | None = None


@dataclass(frozen=True)
class BudgetCategory:
    """Category line item of a budget."""

    id: str
    budget_id: str
    category_id: str
    category_name: str
    allocated_amount: int
    carry_over_amount: int = 0
    spent_amount: int = 0

    @property
    def total_allocated(self) -> int:
        return self.allocated_amount + self.carry_over_amount

    @property
    def remaining_amount(self) -> int:
        return self.total_allocated - self.spent_amount

    @property
    def is_overspent(self) -> bool:
        return self.spent_amount > self.total_allocated

    @property
    def overspent_amount(self) -> int:
        return max(0, self.spent_amount - self.total_allocated)

    @property
    def utilization_percentage(self) -> float:
        return utilization_percentage(self.spent_amount, self.total_allocated)


@dataclass(frozen=True)
class Budget:
    """Budget covering an inclusive date range for one household."""

    id: str
    household_id: str
    name: str
    period: BudgetPeriod
    total_allocated: int
    currency: str
    start_date: date
    end_date: date
    is_active: bool = True
    categories: tuple[BudgetCategory, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def total_spent(self) -> int:
        return sum(category.spent_amount for category in self.categories)

    @property
    def unused_amount(self) -> int:
        return max(0, self.total_allocated - self.total_spent)

    def is_within_period(self, value: date) -> bool:
        """Return True when the date falls inside the inclusive period."""
        return self.start_date <= value <= self.end_date

    def overlaps(self, start_date: date, end_date: date) -> bool:
        """Return True when [start_date, end_date] intersects this budget."""
        return start_date <= self.end_date and self.start_date <= end_date

    def get_category(self, category_id: str) -> BudgetCategory | None:
        for category in self.categories:
            if category.category_id == category_id:
                return category
        return None

    def has_category(self, category_id: str) -> bool:
        return self.get_category(category_id) is not None


@dataclass(frozen=True)
class CategoryProgress:
    """Progress figures for one budget category."""

    category_id: str
    category_name: str
    allocated_amount: int
    spent_amount: int
    remaining_amount: int
    utilization_percentage: float
    is_overspent: bool
    overspent_amount: int


@dataclass(frozen=True)
class BudgetProgress:
    """Progress figures for a whole budget."""

    budget_id: str
    total_allocated: int
    total_spent: int
    total_remaining: int
    utilization_percentage: float
    is_over_budget: bool
    over_budget_amount: int
    categories: list[CategoryProgress] = field(default_factory=list)


@dataclass(frozen=True)
class CarryOverItem:
    """Unused allowance of one category rolled into the next period."""

    category_id: str
    category_name: str
    carry_over_amount: int


__all__ = [
    "BudgetPeriod",
    "BudgetLimits",
    "CategoryAllocation",
    "BudgetCreationData",
    "BudgetUpdateData",
    "BudgetCategory",
    "Budget",
    "CategoryProgress",
    "BudgetProgress",
    "CarryOverItem",
    "utilization_percentage",
]
