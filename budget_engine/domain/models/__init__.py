"""Domain models package."""

from .accounts import (
    Account,
    AccountCreationData,
    AccountType,
    BalanceHistoryPoint,
    EntryType,
    LedgerEntry,
    NetWorthSummary,
)
from .alerts import AlertKind, AlertSeverity, AlertThresholds, BudgetAlert
from .budgets import (
    Budget,
    BudgetCategory,
    BudgetCreationData,
    BudgetLimits,
    BudgetPeriod,
    BudgetProgress,
    BudgetUpdateData,
    CarryOverItem,
    CategoryAllocation,
    CategoryProgress,
)
from .transactions import Transaction

__all__ = [
    "Account",
    "AccountCreationData",
    "AccountType",
    "BalanceHistoryPoint",
    "EntryType",
    "LedgerEntry",
    "NetWorthSummary",
    "AlertKind",
    "AlertSeverity",
    "AlertThresholds",
    "BudgetAlert",
    "Budget",
    "BudgetCategory",
    "BudgetCreationData",
    "BudgetLimits",
    "BudgetPeriod",
    "BudgetProgress",
    "BudgetUpdateData",
    "CarryOverItem",
    "CategoryAllocation",
    "CategoryProgress",
    "Transaction",
]
