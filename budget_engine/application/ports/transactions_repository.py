"""Port for reading transactions relevant to budgets."""

from datetime import date
from typing import Protocol


class TransactionsRepositoryPort(Protocol):
    """Port exposing aggregated transaction spending."""

    def fetch_spending_by_category(
        self,
        household_id: str,
        category_ids: list[str],
        start_date: date,
        end_date: date,
    ) -> dict[str, int]:
        """Return absolute expense totals per category in an inclusive range.

        Categories without expenses may be missing from the result.
        """


__all__ = ["TransactionsRepositoryPort"]
