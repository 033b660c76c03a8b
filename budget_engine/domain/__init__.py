"""Domain package for budget accounting rules and core models."""

from .aggregates import BudgetAggregate
from .errors import (
    AccountNotFoundError,
    BudgetEngineError,
    BudgetNotFoundError,
    BudgetValidationError,
    InvalidAccountError,
    NotFoundError,
)
from .models import (
    Account,
    AccountType,
    Budget,
    BudgetAlert,
    BudgetCategory,
    BudgetCreationData,
    BudgetLimits,
    BudgetPeriod,
    BudgetProgress,
    BudgetUpdateData,
    CategoryAllocation,
    EntryType,
    LedgerEntry,
)

__all__ = [
    "BudgetAggregate",
    "AccountNotFoundError",
    "BudgetEngineError",
    "BudgetNotFoundError",
    "BudgetValidationError",
    "InvalidAccountError",
    "NotFoundError",
    "Account",
    "AccountType",
    "Budget",
    "BudgetAlert",
    "BudgetCategory",
    "BudgetCreationData",
    "BudgetLimits",
    "BudgetPeriod",
    "BudgetProgress",
    "BudgetUpdateData",
    "CategoryAllocation",
    "EntryType",
    "LedgerEntry",
]
