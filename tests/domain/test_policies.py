"""Tests for spending and account policies."""

from datetime import date

from budget_engine.domain.models.accounts import AccountType
from budget_engine.domain.models.budgets import (
    Budget,
    BudgetCategory,
    BudgetPeriod,
)
from budget_engine.domain.policies.accounts import (
    account_subtypes,
    is_valid_subtype,
)
from budget_engine.domain.policies.spending import (
    budget_tracks,
    is_expense,
    spend_amount,
)


def test_negative_amounts_are_expenses() -> None:
    assert is_expense(-1) is True
    assert is_expense(0) is False
    assert spend_amount(-250) == 250
    assert spend_amount(250) == 0


def test_budget_tracks_requires_active_period_and_category() -> None:
    budget = Budget(
        id="b-1",
        household_id="hh-1",
        name="January",
        period=BudgetPeriod.MONTHLY,
        total_allocated=100,
        currency="IDR",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        categories=(BudgetCategory("bc-1", "b-1", "cat-food", "Food", 100),),
    )

    assert budget_tracks(budget, "cat-food", date(2024, 1, 31)) is True
    assert budget_tracks(budget, "cat-fuel", date(2024, 1, 15)) is False
    assert budget_tracks(budget, None, date(2024, 1, 15)) is False
    assert budget_tracks(budget, "cat-food", date(2024, 2, 1)) is False


def test_subtypes_follow_account_type() -> None:
    assert "BANK" in account_subtypes(AccountType.ASSET)
    assert is_valid_subtype(AccountType.LIABILITY, "MORTGAGE") is True
    assert is_valid_subtype(AccountType.LIABILITY, "CASH") is False
