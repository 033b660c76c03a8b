"""Rules deciding which transactions count against a budget."""

from datetime import date

from budget_engine.domain.models.budgets import Budget


def is_expense(amount: int) -> bool:
    """Return True for outflows; negative signed amounts are expenses."""
    return amount < 0


def spend_amount(amount: int) -> int:
    """Return the amount an expense adds to budget spending, 0 for income."""
    return -amount if is_expense(amount) else 0


def budget_tracks(
    budget: Budget,
    category_id: str | None,
    transaction_date: date,
) -> bool:
    """Return True when a transaction belongs to this budget's spending."""
    if not budget.is_active or category_id is None:
        return False
    return (
        budget.is_within_period(transaction_date)
        and budget.has_category(category_id)
    )


__all__ = ["is_expense", "spend_amount", "budget_tracks"]
