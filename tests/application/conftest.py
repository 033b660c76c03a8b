"""In-memory fakes of the application ports."""

from dataclasses import replace
from datetime import date
from unittest.mock import MagicMock

import pytest

from budget_engine.domain.models.accounts import Account, LedgerEntry
from budget_engine.domain.models.budgets import Budget
from budget_engine.domain.models.transactions import Transaction


class FakeAccountsRepository:
    def __init__(self) -> None:
        self.accounts: dict[str, Account] = {}
        self.entries: list[LedgerEntry] = []
        self.deleted: list[str] = []

    def add(self, account: Account, entries: list[LedgerEntry] = ()) -> None:
        self.accounts[account.id] = account
        self.entries.extend(entries)

    def fetch_account(self, account_id):
        return self.accounts.get(account_id)

    def fetch_accounts(self, household_id, is_active=None):
        return [
            account
            for account in self.accounts.values()
            if account.household_id == household_id
            and (is_active is None or account.is_active == is_active)
        ]

    def fetch_ledger_entries(self, account_id, start_date=None, end_date=None):
        return [
            entry
            for entry in self.entries
            if entry.account_id == account_id
            and (start_date is None or entry.entry_date >= start_date)
            and (end_date is None or entry.entry_date <= end_date)
        ]

    def count_ledger_entries(self, account_id):
        return len(self.fetch_ledger_entries(account_id))

    def update_stored_balance(self, account_id, balance):
        self.accounts[account_id] = replace(
            self.accounts[account_id],
            stored_balance=balance,
        )

    def create_account(self, account):
        self.accounts[account.id] = account
        return account

    def deactivate_account(self, account_id):
        self.accounts[account_id] = replace(
            self.accounts[account_id],
            is_active=False,
        )

    def delete_account(self, account_id):
        self.accounts.pop(account_id)
        self.deleted.append(account_id)


class FakeBudgetsRepository:
    def __init__(self, category_names: dict[str, str] | None = None) -> None:
        self.budgets: dict[str, Budget] = {}
        self.category_names = category_names or {}
        self.fail_increment = False
        self.increment_calls: list[tuple[str, str, int]] = []

    def fetch_budget(self, budget_id, household_id):
        budget = self.budgets.get(budget_id)
        if budget is None or budget.household_id != household_id:
            return None
        return budget

    def fetch_budgets(self, household_id, is_active=None):
        return [
            budget
            for budget in self.budgets.values()
            if budget.household_id == household_id
            and (is_active is None or budget.is_active == is_active)
        ]

    def fetch_active_budgets(self, household_id=None):
        return [
            budget
            for budget in self.budgets.values()
            if budget.is_active
            and (household_id is None or budget.household_id == household_id)
        ]

    def fetch_ended_budgets(self, as_of: date):
        return [
            budget
            for budget in self.budgets.values()
            if budget.is_active and budget.end_date < as_of
        ]

    def create_budget(self, budget):
        self.budgets[budget.id] = self._with_names(budget)
        return budget

    def update_budget(self, budget, replace_categories):
        stored = self.budgets[budget.id]
        categories = budget.categories if replace_categories else stored.categories
        self.budgets[budget.id] = self._with_names(
            replace(budget, categories=categories)
        )
        return budget

    def delete_budget(self, budget_id, household_id):
        self.budgets.pop(budget_id)

    def set_budget_active(self, budget_id, is_active):
        self.budgets[budget_id] = replace(
            self.budgets[budget_id],
            is_active=is_active,
        )

    def increment_spent_amount(self, budget_id, category_id, delta):
        if self.fail_increment:
            raise RuntimeError("database is locked")
        self.increment_calls.append((budget_id, category_id, delta))
        self._set_spent(
            budget_id,
            lambda category: category.spent_amount + delta
            if category.category_id == category_id
            else category.spent_amount,
        )

    def replace_spent_amounts(self, budget_id, spent_by_category):
        self._set_spent(
            budget_id,
            lambda category: spent_by_category.get(
                category.category_id,
                category.spent_amount,
            ),
        )

    def _set_spent(self, budget_id, compute):
        budget = self.budgets[budget_id]
        self.budgets[budget_id] = replace(
            budget,
            categories=tuple(
                replace(category, spent_amount=compute(category))
                for category in budget.categories
            ),
        )

    def _with_names(self, budget):
        return replace(
            budget,
            categories=tuple(
                replace(
                    category,
                    category_name=self.category_names.get(
                        category.category_id,
                        category.category_id,
                    ),
                )
                for category in budget.categories
            ),
        )


class FakeTransactionsRepository:
    def __init__(self) -> None:
        self.transactions: dict[str, Transaction] = {}

    def add(self, transaction: Transaction) -> None:
        self.transactions[transaction.id] = transaction

    def remove(self, transaction_id: str) -> Transaction:
        return self.transactions.pop(transaction_id)

    def fetch_spending_by_category(
        self,
        household_id,
        category_ids,
        start_date,
        end_date,
    ):
        spending: dict[str, int] = {}
        for txn in self.transactions.values():
            if (
                txn.household_id == household_id
                and txn.category_id in category_ids
                and txn.amount < 0
                and start_date <= txn.date <= end_date
            ):
                spending[txn.category_id] = (
                    spending.get(txn.category_id, 0) - txn.amount
                )
        return spending


class RecordingPublisher:
    def __init__(self) -> None:
        self.events = []

    def publish(self, event) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [event.name for event in self.events]


class RecordingAlertSink:
    def __init__(self) -> None:
        self.calls = []

    def notify(self, budget_id, household_id, alerts) -> None:
        self.calls.append((budget_id, household_id, list(alerts)))


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def accounts_repository() -> FakeAccountsRepository:
    return FakeAccountsRepository()


@pytest.fixture
def budgets_repository() -> FakeBudgetsRepository:
    return FakeBudgetsRepository({"cat-food": "Food", "cat-fuel": "Fuel"})


@pytest.fixture
def transactions_repository() -> FakeTransactionsRepository:
    return FakeTransactionsRepository()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def alert_sink() -> RecordingAlertSink:
    return RecordingAlertSink()
