"""Tests for the SpendTracker use case."""

from datetime import date
import threading
from unittest.mock import MagicMock

import pytest

from budget_engine.application.use_cases.budget_alerts import (
    BudgetAlertsUseCase,
)
from budget_engine.application.use_cases.track_spending import (
    BudgetLockRegistry,
    SpendTracker,
)
from budget_engine.domain.errors import BudgetNotFoundError
from budget_engine.domain.models.budgets import (
    Budget,
    BudgetCategory,
    BudgetPeriod,
)
from budget_engine.domain.models.events import (
    TransactionCreated,
    TransactionDeleted,
    TransactionUpdated,
)
from budget_engine.domain.models.transactions import Transaction
from budget_engine.infrastructure.event_bus import InProcessEventBus


def _budget(
    budget_id: str = "b-jan",
    start: date = date(2024, 1, 1),
    end: date = date(2024, 1, 31),
    is_active: bool = True,
    household_id: str = "hh-1",
) -> Budget:
    return Budget(
        id=budget_id,
        household_id=household_id,
        name=budget_id,
        period=BudgetPeriod.MONTHLY,
        total_allocated=1_000_000,
        currency="IDR",
        start_date=start,
        end_date=end,
        is_active=is_active,
        categories=(
            BudgetCategory(f"{budget_id}-1", budget_id, "cat-food", "Food", 600_000),
            BudgetCategory(f"{budget_id}-2", budget_id, "cat-fuel", "Fuel", 400_000),
        ),
    )


def _created(amount: int, txn_date: date, category_id="cat-food", txn_id="t1"):
    return TransactionCreated(
        transaction_id=txn_id,
        household_id="hh-1",
        category_id=category_id,
        amount=amount,
        date=txn_date,
    )


def _spent(budgets_repository, budget_id: str) -> dict[str, int]:
    budget = budgets_repository.budgets[budget_id]
    return {c.category_id: c.spent_amount for c in budget.categories}


@pytest.fixture
def tracker(budgets_repository, transactions_repository, logger):
    return SpendTracker(
        budgets_repository,
        transactions_repository,
        logger=logger,
    )


def test_expense_increments_matching_category(budgets_repository, tracker):
    budgets_repository.create_budget(_budget())

    tracker.handle_transaction_created(_created(-200_000, date(2024, 1, 15)))

    assert _spent(budgets_repository, "b-jan") == {
        "cat-food": 200_000,
        "cat-fuel": 0,
    }


def test_income_is_ignored(budgets_repository, tracker):
    budgets_repository.create_budget(_budget())

    tracker.handle_transaction_created(_created(300_000, date(2024, 1, 15)))

    assert budgets_repository.increment_calls == []


@pytest.mark.parametrize(
    "txn_date, category_id",
    [
        (date(2024, 2, 1), "cat-food"),
        (date(2023, 12, 31), "cat-food"),
        (date(2024, 1, 15), "cat-rent"),
        (date(2024, 1, 15), None),
    ],
)
def test_unmatched_transaction_is_a_no_op(
    budgets_repository,
    tracker,
    txn_date,
    category_id,
) -> None:
    budgets_repository.create_budget(_budget())

    tracker.handle_transaction_created(
        _created(-1_000, txn_date, category_id=category_id)
    )

    assert budgets_repository.increment_calls == []


def test_period_bounds_are_inclusive(budgets_repository, tracker):
    budgets_repository.create_budget(_budget())

    tracker.handle_transaction_created(_created(-10, date(2024, 1, 1), txn_id="a"))
    tracker.handle_transaction_created(_created(-20, date(2024, 1, 31), txn_id="b"))

    assert _spent(budgets_repository, "b-jan")["cat-food"] == 30


def test_inactive_and_foreign_budgets_are_skipped(budgets_repository, tracker):
    budgets_repository.create_budget(_budget("b-old", is_active=False))
    budgets_repository.create_budget(_budget("b-other", household_id="hh-2"))

    tracker.handle_transaction_created(_created(-500, date(2024, 1, 15)))

    assert budgets_repository.increment_calls == []


def test_update_reverts_old_effect_and_applies_new(budgets_repository, tracker):
    """Each half of an update is matched against budgets on its own."""
    budgets_repository.create_budget(_budget())
    budgets_repository.create_budget(
        _budget("b-feb", date(2024, 2, 1), date(2024, 2, 29))
    )
    tracker.handle_transaction_created(_created(-700, date(2024, 1, 20)))

    tracker.handle_transaction_updated(
        TransactionUpdated(
            transaction_id="t1",
            household_id="hh-1",
            old_category_id="cat-food",
            old_amount=-700,
            old_date=date(2024, 1, 20),
            new_category_id="cat-fuel",
            new_amount=-300,
            new_date=date(2024, 2, 3),
        )
    )

    assert _spent(budgets_repository, "b-jan") == {"cat-food": 0, "cat-fuel": 0}
    assert _spent(budgets_repository, "b-feb") == {"cat-food": 0, "cat-fuel": 300}


def test_update_from_income_to_expense_only_applies_new(
    budgets_repository,
    tracker,
) -> None:
    budgets_repository.create_budget(_budget())

    tracker.handle_transaction_updated(
        TransactionUpdated(
            transaction_id="t1",
            household_id="hh-1",
            old_category_id="cat-food",
            old_amount=400,
            old_date=date(2024, 1, 20),
            new_category_id="cat-food",
            new_amount=-400,
            new_date=date(2024, 1, 20),
        )
    )

    assert _spent(budgets_repository, "b-jan")["cat-food"] == 400


def test_delete_subtracts_expense(budgets_repository, tracker):
    budgets_repository.create_budget(_budget())
    tracker.handle_transaction_created(_created(-900, date(2024, 1, 5)))

    tracker.handle_transaction_deleted(
        TransactionDeleted(
            transaction_id="t1",
            household_id="hh-1",
            category_id="cat-food",
            amount=-900,
            date=date(2024, 1, 5),
        )
    )

    assert _spent(budgets_repository, "b-jan")["cat-food"] == 0


def test_storage_failure_is_logged_not_raised(
    budgets_repository,
    tracker,
    logger,
) -> None:
    budgets_repository.create_budget(_budget())
    budgets_repository.fail_increment = True

    tracker.handle_transaction_created(_created(-900, date(2024, 1, 5)))

    logger.error.assert_called_once()
    assert "transaction.created" in logger.error.call_args.args[0]


def test_register_subscribes_to_transaction_events(
    budgets_repository,
    tracker,
    logger,
) -> None:
    budgets_repository.create_budget(_budget())
    bus = InProcessEventBus(logger=logger)
    tracker.register(bus)

    bus.publish(_created(-50, date(2024, 1, 9)))

    assert _spent(budgets_repository, "b-jan")["cat-food"] == 50


def test_recalculate_replaces_drifted_amounts(
    budgets_repository,
    transactions_repository,
    tracker,
) -> None:
    """Recalculation resets categories without spending and is idempotent."""
    budgets_repository.create_budget(_budget())
    budgets_repository.replace_spent_amounts(
        "b-jan",
        {"cat-food": 123, "cat-fuel": 456},
    )
    for txn in (
        Transaction("t1", "hh-1", "cat-food", -1_000, date(2024, 1, 3), "IDR"),
        Transaction("t2", "hh-1", "cat-food", -500, date(2024, 1, 31), "IDR"),
        Transaction("t3", "hh-1", "cat-food", 9_999, date(2024, 1, 4), "IDR"),
        Transaction("t4", "hh-1", "cat-food", -7, date(2024, 2, 1), "IDR"),
        Transaction("t5", "hh-2", "cat-food", -7, date(2024, 1, 4), "IDR"),
    ):
        transactions_repository.add(txn)

    first = tracker.recalculate("b-jan", "hh-1")
    first_spent = {c.category_id: c.spent_amount for c in first.categories}
    second = tracker.recalculate("b-jan", "hh-1")
    second_spent = {c.category_id: c.spent_amount for c in second.categories}

    assert first_spent == {"cat-food": 1_500, "cat-fuel": 0}
    assert second_spent == first_spent


def test_recalculate_unknown_budget_raises(tracker):
    with pytest.raises(BudgetNotFoundError):
        tracker.recalculate("missing", "hh-1")


def test_lock_registry_drops_released_locks():
    registry = BudgetLockRegistry()

    with registry.hold("b-1"):
        with registry.hold("b-2"):
            assert set(registry._locks) == {"b-1", "b-2"}
        assert set(registry._locks) == {"b-1"}

    assert registry._locks == {}
    assert registry._users == {}


def test_lock_registry_keeps_lock_while_waiters_remain():
    registry = BudgetLockRegistry()
    entered = threading.Event()

    def _wait_for_lock():
        with registry.hold("b-1"):
            entered.set()

    with registry.hold("b-1"):
        waiter = threading.Thread(target=_wait_for_lock)
        waiter.start()
        waiter.join(timeout=0.2)
        assert waiter.is_alive()
        assert registry._users == {"b-1": 2}

    waiter.join(timeout=5)
    assert entered.is_set()
    assert registry._locks == {}


def test_failing_alert_delivery_keeps_update_consistent(
    budgets_repository,
    transactions_repository,
    publisher,
    logger,
):
    """The revert half raises an alert; the reapply half must still run."""
    sink = MagicMock()
    tracker = SpendTracker(
        budgets_repository,
        transactions_repository,
        alerts=BudgetAlertsUseCase(
            budgets_repository,
            publisher,
            sink,
            logger=logger,
        ),
        logger=logger,
    )
    budgets_repository.create_budget(_budget())
    tracker.handle_transaction_created(
        _created(-450_000, date(2024, 1, 10), txn_id="t0")
    )
    tracker.handle_transaction_created(_created(-50_000, date(2024, 1, 11)))
    sink.notify.side_effect = RuntimeError("smtp down")

    tracker.handle_transaction_updated(
        TransactionUpdated(
            transaction_id="t1",
            household_id="hh-1",
            old_category_id="cat-food",
            old_amount=-50_000,
            old_date=date(2024, 1, 11),
            new_category_id="cat-food",
            new_amount=-60_000,
            new_date=date(2024, 1, 11),
        )
    )

    assert _spent(budgets_repository, "b-jan")["cat-food"] == 510_000
    messages = [c.args[0] for c in logger.error.call_args_list]
    assert any(m.startswith("Alert check failed") for m in messages)
    assert not any("transaction.updated" in m for m in messages)


class _BlockingTransactionsRepository:
    """Pause recalculation inside its read until released."""

    def __init__(self, inner) -> None:
        self._inner = inner
        self.entered = threading.Event()
        self.release = threading.Event()

    def fetch_spending_by_category(self, *args, **kwargs):
        self.entered.set()
        self.release.wait(timeout=5)
        return self._inner.fetch_spending_by_category(*args, **kwargs)


def test_recalculate_holds_budget_lock_against_increments(
    budgets_repository,
    transactions_repository,
    logger,
):
    transactions_repository.add(
        Transaction("t0", "hh-1", "cat-food", -1_000, date(2024, 1, 5), "IDR")
    )
    transactions = _BlockingTransactionsRepository(transactions_repository)
    tracker = SpendTracker(budgets_repository, transactions, logger=logger)
    budgets_repository.create_budget(_budget())

    recalculation = threading.Thread(
        target=tracker.recalculate,
        args=("b-jan", "hh-1"),
    )
    recalculation.start()
    assert transactions.entered.wait(timeout=5)
    increment = threading.Thread(
        target=tracker.handle_transaction_created,
        args=(_created(-200, date(2024, 1, 6)),),
    )
    increment.start()
    increment.join(timeout=0.2)

    assert increment.is_alive()
    assert budgets_repository.increment_calls == []

    transactions.release.set()
    recalculation.join(timeout=5)
    increment.join(timeout=5)
    assert _spent(budgets_repository, "b-jan")["cat-food"] == 1_200
