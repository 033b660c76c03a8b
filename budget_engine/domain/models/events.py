"""Typed domain events exchanged over the event bus.

Each event is a frozen dataclass whose ``name`` class attribute is the
routing key used by subscribers.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, ClassVar, Union

from budget_engine.domain.models.budgets import BudgetPeriod, CarryOverItem


@dataclass(frozen=True)
class TransactionCreated:
    name: ClassVar[str] = "transaction.created"

    transaction_id: str
    household_id: str
    category_id: str | None
    amount: int
    date: date
    currency: str = ""


@dataclass(frozen=True)
class TransactionUpdated:
    """Old and new effect of an edited transaction."""

    name: ClassVar[str] = "transaction.updated"

    transaction_id: str
    household_id: str
    old_category_id: str | None
    old_amount: int
    old_date: date
    new_category_id: str | None
    new_amount: int
    new_date: date
    currency: str = ""


@dataclass(frozen=True)
class TransactionDeleted:
    name: ClassVar[str] = "transaction.deleted"

    transaction_id: str
    household_id: str
    category_id: str | None
    amount: int
    date: date
    currency: str = ""


@dataclass(frozen=True)
class BudgetCreated:
    name: ClassVar[str] = "budget.created"

    budget_id: str
    household_id: str
    budget_name: str
    total_allocated: int
    period: BudgetPeriod
    start_date: date
    end_date: date


@dataclass(frozen=True)
class BudgetUpdated:
    """Changed top-level fields with their values before the update."""

    name: ClassVar[str] = "budget.updated"

    budget_id: str
    household_id: str
    changes: dict[str, Any] = field(default_factory=dict)
    previous_values: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BudgetDeleted:
    name: ClassVar[str] = "budget.deleted"

    budget_id: str
    household_id: str
    budget_name: str


@dataclass(frozen=True)
class BudgetOverspent:
    name: ClassVar[str] = "budget.overspent"

    budget_id: str
    household_id: str
    category_id: str
    category_name: str
    allocated_amount: int
    spent_amount: int
    overspent_amount: int


@dataclass(frozen=True)
class BudgetThresholdReached:
    name: ClassVar[str] = "budget.threshold.reached"

    budget_id: str
    household_id: str
    category_id: str
    category_name: str
    threshold: int
    utilization_percentage: float
    remaining_amount: int


@dataclass(frozen=True)
class BudgetPeriodEnded:
    name: ClassVar[str] = "budget.period.ended"

    budget_id: str
    household_id: str
    budget_name: str
    total_allocated: int
    total_spent: int
    unused_amount: int
    end_date: date


@dataclass(frozen=True)
class BudgetCarryOverCreated:
    name: ClassVar[str] = "budget.carryover.created"

    original_budget_id: str
    new_budget_id: str
    household_id: str
    carry_over_amount: int
    categories: tuple[CarryOverItem, ...] = ()


TransactionEvent = Union[
    TransactionCreated,
    TransactionUpdated,
    TransactionDeleted,
]

BudgetEvent = Union[
    BudgetCreated,
    BudgetUpdated,
    BudgetDeleted,
    BudgetOverspent,
    BudgetThresholdReached,
    BudgetPeriodEnded,
    BudgetCarryOverCreated,
]

DomainEvent = Union[TransactionEvent, BudgetEvent]

BUDGET_EVENT_NAMES = (
    BudgetCreated.name,
    BudgetUpdated.name,
    BudgetDeleted.name,
    BudgetOverspent.name,
    BudgetThresholdReached.name,
    BudgetPeriodEnded.name,
    BudgetCarryOverCreated.name,
)


__all__ = [
    "TransactionCreated",
    "TransactionUpdated",
    "TransactionDeleted",
    "BudgetCreated",
    "BudgetUpdated",
    "BudgetDeleted",
    "BudgetOverspent",
    "BudgetThresholdReached",
    "BudgetPeriodEnded",
    "BudgetCarryOverCreated",
    "TransactionEvent",
    "BudgetEvent",
    "DomainEvent",
    "BUDGET_EVENT_NAMES",
]
