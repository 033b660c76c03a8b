"""Minimal transaction contract consumed by spend tracking."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Transaction:
    """Household transaction as seen by the budget engine.

    Attributes:
        id: Transaction identifier.
        household_id: Owning household.
        category_id: Budget category, or None when uncategorized.
        amount: Signed minor units; negative for expenses.
        date: Booking date.
        currency: ISO 4217 currency code.
    """

    id: str
    household_id: str
    category_id: str | None
    amount: int
    date: date
    currency: str


__all__ = ["Transaction"]
