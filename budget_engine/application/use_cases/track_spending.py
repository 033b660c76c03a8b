"""Use case keeping budget spent amounts in step with transactions.

Incremental updates driven by transaction events are a best-effort fast
path: a lost or duplicated event leaves the spent amount off until
``SpendTracker.recalculate`` re-derives it from the transactions.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
import threading

from budget_engine.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from budget_engine.application.ports.events import EventBusPort
from budget_engine.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from budget_engine.application.use_cases.budget_alerts import (
    BudgetAlertsUseCase,
)
from budget_engine.domain.errors import BudgetNotFoundError
from budget_engine.domain.models.budgets import Budget
from budget_engine.domain.models.events import (
    TransactionCreated,
    TransactionDeleted,
    TransactionUpdated,
)
from budget_engine.domain.policies.spending import budget_tracks, spend_amount
from budget_engine.infrastructure.logging.logger import get_app_logger


class BudgetLockRegistry:
    """One in-process lock per budget id.

    A lock lives only while a caller holds or waits for it, so the registry
    does not grow with the number of budgets ever touched.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._users: dict[str, int] = {}

    @contextmanager
    def hold(self, budget_id: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(budget_id, threading.Lock())
            self._users[budget_id] = self._users.get(budget_id, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._users[budget_id] -= 1
                if not self._users[budget_id]:
                    del self._users[budget_id]
                    del self._locks[budget_id]


class SpendTracker:
    """Apply transaction events to the spent amounts of matching budgets."""

    def __init__(
        self,
        budgets_repository: BudgetsRepositoryPort,
        transactions_repository: TransactionsRepositoryPort,
        alerts: BudgetAlertsUseCase | None = None,
        locks: BudgetLockRegistry | None = None,
        logger=None,
    ) -> None:
        """Initialize the tracker.

        Args:
            budgets_repository: Port reading budgets and writing spent amounts.
            transactions_repository: Port aggregating stored expenses.
            alerts: Optional alert use case run after each spend change.
            locks: Per-budget lock registry shared by writers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budgets_repository = budgets_repository
        self._transactions_repository = transactions_repository
        self._alerts = alerts
        self._locks = locks or BudgetLockRegistry()
        self._logger = logger or get_app_logger()

    def register(self, bus: EventBusPort) -> None:
        """Subscribe the tracker to the transaction events of ``bus``."""
        bus.subscribe(TransactionCreated.name, self.handle_transaction_created)
        bus.subscribe(TransactionUpdated.name, self.handle_transaction_updated)
        bus.subscribe(TransactionDeleted.name, self.handle_transaction_deleted)

    def handle_transaction_created(self, event: TransactionCreated) -> None:
        try:
            self._apply(
                event.household_id,
                event.category_id,
                event.amount,
                event.date,
                direction=1,
            )
        except Exception as exc:
            self._log_failure(event.name, event.transaction_id, exc)

    def handle_transaction_updated(self, event: TransactionUpdated) -> None:
        try:
            self._apply(
                event.household_id,
                event.old_category_id,
                event.old_amount,
                event.old_date,
                direction=-1,
            )
            self._apply(
                event.household_id,
                event.new_category_id,
                event.new_amount,
                event.new_date,
                direction=1,
            )
        except Exception as exc:
            self._log_failure(event.name, event.transaction_id, exc)

    def handle_transaction_deleted(self, event: TransactionDeleted) -> None:
        try:
            self._apply(
                event.household_id,
                event.category_id,
                event.amount,
                event.date,
                direction=-1,
            )
        except Exception as exc:
            self._log_failure(event.name, event.transaction_id, exc)

    def recalculate(self, budget_id: str, household_id: str) -> Budget:
        """Re-derive every category spent amount from stored transactions.

        Stored values are replaced, not incremented; categories without
        expenses in the period are reset to zero. Running it twice in a row
        gives identical results.

        Args:
            budget_id: Budget to rebuild.
            household_id: Household owning the budget.

        Returns:
            Budget: The budget with its recalculated spent amounts.

        Raises:
            BudgetNotFoundError: If the budget is not in the household.
        """
        with self._locks.hold(budget_id):
            budget = self._budgets_repository.fetch_budget(budget_id, household_id)
            if budget is None:
                raise BudgetNotFoundError(budget_id)
            category_ids = [c.category_id for c in budget.categories]
            spending = self._transactions_repository.fetch_spending_by_category(
                household_id,
                category_ids,
                budget.start_date,
                budget.end_date,
            )
            self._budgets_repository.replace_spent_amounts(
                budget_id,
                {
                    category_id: spending.get(category_id, 0)
                    for category_id in category_ids
                },
            )
            refreshed = self._budgets_repository.fetch_budget(
                budget_id,
                household_id,
            )
        self._logger.info(
            f"Recalculated spending of budget {budget_id}: "
            f"{refreshed.total_spent if refreshed else 0}"
        )
        return refreshed or budget

    def _apply(
        self,
        household_id: str,
        category_id: str | None,
        amount: int,
        transaction_date: date,
        direction: int,
    ) -> None:
        delta = spend_amount(amount) * direction
        if delta == 0 or category_id is None:
            return

        budgets = self._budgets_repository.fetch_active_budgets(household_id)
        for budget in budgets:
            if not budget_tracks(budget, category_id, transaction_date):
                continue
            with self._locks.hold(budget.id):
                self._budgets_repository.increment_spent_amount(
                    budget.id,
                    category_id,
                    delta,
                )
            self._logger.debug(
                f"Budget {budget.id} category {category_id} spent {delta:+d}"
            )
            self._check_alerts(budget.id, household_id, category_id)

    def _check_alerts(
        self,
        budget_id: str,
        household_id: str,
        category_id: str,
    ) -> None:
        if self._alerts is None:
            return
        # Alert delivery never interrupts spent amount bookkeeping.
        try:
            budget = self._budgets_repository.fetch_budget(
                budget_id,
                household_id,
            )
            if budget is not None:
                self._alerts.check_category(budget, category_id)
        except Exception as exc:
            self._logger.error(
                f"Alert check failed for budget {budget_id} "
                f"category {category_id}: {exc}"
            )

    def _log_failure(
        self,
        event_name: str,
        transaction_id: str,
        exc: Exception,
    ) -> None:
        self._logger.error(
            f"Failed to apply {event_name} for transaction {transaction_id}: "
            f"{exc}; run recalculate to repair spent amounts"
        )


__all__ = ["BudgetLockRegistry", "SpendTracker"]
