"""Application use cases."""

from .budget_alerts import AlertSweepResult, BudgetAlertsUseCase
from .end_budget_periods import EndBudgetPeriodsResult, EndBudgetPeriodsUseCase
from .ledger_balance import LedgerBalanceCalculator
from .manage_accounts import ManageAccountsUseCase
from .manage_budgets import ManageBudgetsUseCase
from .track_spending import BudgetLockRegistry, SpendTracker

__all__ = [
    "AlertSweepResult",
    "BudgetAlertsUseCase",
    "EndBudgetPeriodsResult",
    "EndBudgetPeriodsUseCase",
    "LedgerBalanceCalculator",
    "ManageAccountsUseCase",
    "ManageBudgetsUseCase",
    "BudgetLockRegistry",
    "SpendTracker",
]
